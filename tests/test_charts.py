import altair as alt

from issue_app.core.config import DEFAULT_COLORS, STATUS_COLORS
from issue_app.core.models import Bucket, FilterKind
from issue_app.visual.charts import bucket_chart, bucket_colors, buckets_to_frame, selected_name


def _buckets():
    return [Bucket("Open", 3), Bucket("Mystery", 2), Bucket("Closed", 1)]


def test_bucket_frame_shape():
    frame = buckets_to_frame(_buckets())
    assert frame.columns.tolist() == ["name", "value"]
    assert frame["value"].sum() == 6


def test_bucket_colors():
    colors = bucket_colors(["Open", "Mystery", "Closed"], STATUS_COLORS)
    assert colors == [STATUS_COLORS["Open"], DEFAULT_COLORS[1], STATUS_COLORS["Closed"]]


def test_bucket_charts():
    assert isinstance(bucket_chart(_buckets(), FilterKind.STATUS), alt.Chart)
    assert isinstance(bucket_chart(_buckets(), FilterKind.STATE), alt.Chart)
    assert bucket_chart([], FilterKind.PRIORITY) is None


def test_selected_name():
    assert selected_name({"selection": {"pick": [{"name": "Open"}]}}) == "Open"
    assert selected_name({"selection": {"pick": []}}) is None
    assert selected_name({"selection": {}}) is None
    assert selected_name(None) is None
