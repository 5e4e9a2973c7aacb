from .step import get_optimal_step, choose_step, step_candidates
from .step_options import (
    StepOptions,
    DEFAULT_MULTIPLIERS,
    DEFAULT_GAP_MULTIPLIERS,
    DEFAULT_TICK_COUNTS,
)
from .patterns import StepPattern
from .ticks import build_ticks, build_scale, TickScale, MAX_TICKS
from .axis import TickAxis
from .parsing import parse_tick_counts, parse_tick_counts_report, TickCountParse
from .formatting import format_tick, format_ticks
from ._validation import InvalidRangeError
from ._version import __version__

__all__ = [
    "get_optimal_step",
    "choose_step",
    "step_candidates",
    "StepOptions",
    "DEFAULT_MULTIPLIERS",
    "DEFAULT_GAP_MULTIPLIERS",
    "DEFAULT_TICK_COUNTS",
    "StepPattern",
    "build_ticks",
    "build_scale",
    "TickScale",
    "MAX_TICKS",
    "TickAxis",
    "parse_tick_counts",
    "parse_tick_counts_report",
    "TickCountParse",
    "format_tick",
    "format_ticks",
    "InvalidRangeError",
]

__version__ = __version__
