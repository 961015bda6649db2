"""Overview feature package: pure context builders for the overview page."""

from issue_app.features.overview.context import OverviewContext, build_context

__all__ = ["OverviewContext", "build_context"]
