from issue_app.analytics.aggregations.buckets import summarize
from issue_app.analytics.segments.filters import filter_issues, find_issue
from issue_app.core.mappers import records_to_dataframe
from issue_app.core.models import FilterKind, SelectedFilter

from helpers import sample_records


def _sample_df():
    return records_to_dataframe(sample_records())


def test_filter_by_status():
    out = filter_issues(_sample_df(), SelectedFilter(FilterKind.STATUS, "Open"))
    assert out["id"].tolist() == ["1", "3"]
    assert (out["status"] == "Open").all()


def test_filter_by_type_uses_tracker_column():
    out = filter_issues(_sample_df(), SelectedFilter(FilterKind.TYPE, "Bug"))
    assert out["id"].tolist() == ["1", "3"]


def test_filter_is_exact():
    df = _sample_df()
    assert filter_issues(df, SelectedFilter(FilterKind.STATUS, "open")).empty
    assert filter_issues(df, SelectedFilter(FilterKind.STATUS, "Nonexistent")).empty


def test_filter_unknown_bucket():
    out = filter_issues(_sample_df(), SelectedFilter(FilterKind.STATE, "Unknown"))
    assert out["id"].tolist() == ["4"]


def test_filter_counts_match_buckets():
    df = _sample_df()
    stats = summarize(df)
    for kind in FilterKind:
        for bucket in stats.buckets_for(kind):
            assert len(filter_issues(df, SelectedFilter(kind, bucket.name))) == bucket.value


def test_find_issue():
    df = _sample_df()
    found = find_issue(df, " 3 ")
    assert found["id"] == "3"
    assert found["resolution_days"] == "4"
    assert find_issue(df, "99") is None
    assert find_issue(df, "") is None
