"""Presenter-side helpers: control wiring and display text."""

from montepi.presenter.controller import Controller
from montepi.presenter.display import StatsDisplay, completion_banner, format_stats

__all__ = ["Controller", "StatsDisplay", "completion_banner", "format_stats"]
