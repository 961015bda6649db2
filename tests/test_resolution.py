import pandas as pd

from issue_app.analytics.metrics.resolution import (
    add_resolution_metrics,
    average_resolution,
    resolution_band,
    resolution_days,
)


def test_whole_days():
    assert resolution_days("1/1/2024", "1/3/2024") == "2"


def test_missing_or_unparseable_endpoints():
    assert resolution_days("1/1/2024", None) == "-"
    assert resolution_days("1/1/2024", "-") == "-"
    assert resolution_days("1/1/2024", "Unknown") == "-"
    assert resolution_days("garbage", "1/3/2024") == "-"
    assert resolution_days("-", "1/3/2024") == "-"


def test_never_negative():
    assert resolution_days("1/3/2024", "1/1/2024") == "2"


def test_partial_days_round_up():
    assert resolution_days("2024-01-01T00:00:00", "2024-01-02T01:00:00") == "2"
    assert resolution_days("2024-01-01T00:00:00", "2024-01-01T00:00:00") == "0"


def test_mixed_formats():
    # "3/5/2024 10:30" is month-first; time part is ignored
    assert resolution_days("3/5/2024 10:30", "2024-03-06") == "1"


def test_average_resolution():
    assert average_resolution([]) == "0"
    assert average_resolution(["-", "-"]) == "0"
    assert average_resolution(["1", "2", "-"]) == "1.5"
    assert average_resolution(["2"]) == "2.0"
    assert average_resolution(["1", "0", "0", "0"]) == "0.3"
    assert average_resolution(["1", "1", "2"]) == "1.3"


def test_average_resolution_ties_round_up():
    assert average_resolution(["3"] + ["0"] * 19) == "0.2"


def test_add_resolution_metrics():
    df = pd.DataFrame(
        {
            "createdOn": ["1/1/2024", "1/1/2024"],
            "closedOn": ["1/3/2024", "-"],
        }
    )
    out = add_resolution_metrics(df)
    assert out["resolution_days"].tolist() == ["2", "-"]
    assert "resolution_days" not in df.columns


def test_resolution_band():
    assert resolution_band("-") is None
    assert resolution_band("0") == "fast"
    assert resolution_band("1") == "fast"
    assert resolution_band("7") == "normal"
    assert resolution_band("30") == "slow"
    assert resolution_band("31") == "overdue"
