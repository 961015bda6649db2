import pandas as pd

from issue_app.analytics.aggregations.buckets import (
    count_buckets,
    counts_by_name,
    kpi_summary,
    summarize,
    top_buckets,
)
from issue_app.core.mappers import records_to_dataframe
from issue_app.core.models import Bucket, IssueStats

from helpers import sample_records


def _sample_df():
    return records_to_dataframe(sample_records())


def test_buckets_follow_first_appearance():
    df = _sample_df()
    assert count_buckets(df, "status") == [Bucket("Open", 2), Bucket("Closed", 1), Bucket("Unknown", 1)]
    assert count_buckets(df, "priority") == [Bucket("Urgent", 1), Bucket("High", 2), Bucket("Normal", 1)]


def test_no_record_is_dropped():
    df = _sample_df()
    for column in ("status", "priority", "issueTrackerType", "state"):
        assert sum(b.value for b in count_buckets(df, column)) == len(df)


def test_missing_column_counts_everything_as_unknown():
    df = pd.DataFrame({"status": ["Open", "Closed"]})
    assert count_buckets(df, "priority") == [Bucket("Unknown", 2)]


def test_top_buckets_truncate_and_sort():
    buckets = [Bucket(f"S{i}", i % 5) for i in range(14)]
    top = top_buckets(buckets)
    assert len(top) == 10
    values = [b.value for b in top]
    assert values == sorted(values, reverse=True)
    # ties keep their original order
    assert [b.name for b in top[:3]] == ["S4", "S9", "S3"]


def test_summarize():
    stats = summarize(_sample_df())
    assert stats.total == 4
    assert stats.by_state == [Bucket("CA", 2), Bucket("NY", 1), Bucket("Unknown", 1)]
    assert stats.by_type == [Bucket("Bug", 2), Bucket("Feature", 1), Bucket("Unknown", 1)]
    assert stats.avg_resolution_days == "3.0"


def test_summarize_is_idempotent():
    df = _sample_df()
    assert summarize(df) == summarize(df)


def test_no_closed_dates_average_zero():
    df = records_to_dataframe([{"ID": "1", "Created": "1/1/2024"}, {"ID": "2"}])
    assert summarize(df).avg_resolution_days == "0"


def test_empty_frame():
    assert summarize(records_to_dataframe([])) == IssueStats()


def test_kpi_summary():
    kpis = kpi_summary(summarize(_sample_df()))
    assert (kpis.total, kpis.open, kpis.closed, kpis.urgent) == (4, 2, 1, 1)
    assert kpis.avg_resolution_days == "3.0"


def test_urgent_with_trailing_space():
    stats = IssueStats(total=3, by_priority=[Bucket("Urgent ", 3)])
    assert kpi_summary(stats).urgent == 3
    assert counts_by_name(stats.by_priority) == {"Urgent ": 3}
