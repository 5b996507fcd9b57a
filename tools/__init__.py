"""Sampling core exports."""

from montepi.tools.errors import InvalidConfiguration
from montepi.tools.rates import BATCH_SIZES, RATE_LABELS, batch_size, rate_label, rate_table
from montepi.tools.sampler import HistoryView, Sampler, make_config

__all__ = [
    "BATCH_SIZES",
    "RATE_LABELS",
    "HistoryView",
    "InvalidConfiguration",
    "Sampler",
    "batch_size",
    "make_config",
    "rate_label",
    "rate_table",
]
