"""Chart builders (Altair) for bucket distributions with click selection."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

import altair as alt
import pandas as pd

from issue_app.core.config import DEFAULT_COLORS, PRIORITY_COLORS, STATUS_COLORS, TYPE_COLORS
from issue_app.core.models import Bucket, FilterKind

SELECTION_PARAM = "pick"

KIND_COLORS: dict[FilterKind, Mapping[str, str]] = {
    FilterKind.STATUS: STATUS_COLORS,
    FilterKind.PRIORITY: PRIORITY_COLORS,
    FilterKind.TYPE: TYPE_COLORS,
    FilterKind.STATE: {},
}

KIND_TITLES: dict[FilterKind, str] = {
    FilterKind.STATUS: "By Status",
    FilterKind.PRIORITY: "By Priority",
    FilterKind.TYPE: "By Type",
    FilterKind.STATE: "Top 10 States",
}


def buckets_to_frame(buckets: Sequence[Bucket]) -> pd.DataFrame:
    return pd.DataFrame({"name": [b.name for b in buckets], "value": [b.value for b in buckets]})


def bucket_colors(names: Sequence[str], palette: Mapping[str, str]) -> list[str]:
    """Known names use their palette colour; others cycle the default palette."""
    return [palette.get(name, DEFAULT_COLORS[i % len(DEFAULT_COLORS)]) for i, name in enumerate(names)]


def _color_encoding(frame: pd.DataFrame, kind: FilterKind) -> alt.Color:
    names = frame["name"].tolist()
    scale = alt.Scale(domain=names, range=bucket_colors(names, KIND_COLORS[kind]))
    return alt.Color("name:N", scale=scale, legend=alt.Legend(title=None))


def bucket_chart(buckets: Sequence[Bucket], kind: FilterKind):
    """Pie for status/priority/type, horizontal bar for states.

    Clicking a mark selects its ``name`` through the ``pick`` parameter.
    """
    if not buckets:
        return None
    frame = buckets_to_frame(buckets)
    pick = alt.selection_point(name=SELECTION_PARAM, fields=["name"])
    tooltip = [alt.Tooltip("name:N", title="Name"), alt.Tooltip("value:Q", title="Issues")]
    opacity = alt.condition(pick, alt.value(1.0), alt.value(0.6))

    if kind is FilterKind.STATE:
        chart = (
            alt.Chart(frame)
            .mark_bar()
            .encode(
                x=alt.X("value:Q", title="Issues"),
                y=alt.Y("name:N", sort=None, title=None),
                color=_color_encoding(frame, kind),
                opacity=opacity,
                tooltip=tooltip,
            )
        )
    else:
        chart = (
            alt.Chart(frame)
            .mark_arc(innerRadius=40)
            .encode(
                theta=alt.Theta("value:Q"),
                color=_color_encoding(frame, kind),
                opacity=opacity,
                tooltip=tooltip,
            )
        )
    return chart.add_params(pick).properties(title=KIND_TITLES[kind], height=260)


def selected_name(event) -> str | None:
    """Extract the clicked bucket name from a Streamlit chart selection event."""
    if not event:
        return None
    selection = event.get("selection") if isinstance(event, Mapping) else getattr(event, "selection", None)
    if not selection:
        return None
    points = selection.get(SELECTION_PARAM) or []
    for point in points:
        if isinstance(point, Mapping) and point.get("name") is not None:
            return str(point["name"])
    return None
