import warnings
from dataclasses import dataclass, field
from .formatting import format_ticks
from .parsing import parse_tick_counts_report
from .step_options import StepOptions, DEFAULT_TICK_COUNTS
from .ticks import TickScale, _search, _warn_unmatched
from ._validation import check_range, check_tick_counts


@dataclass(slots=True, frozen=True)
class TickAxis:
    """
    lo: float, default = 0
        lower end of the range
    hi: float, default = 1
        upper end of the range, may not be below lo
    desired_ticks: preferred tick counts, tried in order
    options: StepOptions bounding the steps that may be chosen. If None,
        the defaults are used.

    The scale is built once, on construction; a fallback warning is raised
    there and not on later attribute access.
    """

    lo: float = 0.0
    hi: float = 1.0
    desired_ticks: tuple = DEFAULT_TICK_COUNTS
    options: StepOptions | None = None
    _scale: TickScale | None = field(default=None, init=False, repr=False, compare=False)

    def __post_init__(self):
        check_range(self.lo, self.hi)
        object.__setattr__(self, "desired_ticks", check_tick_counts(self.desired_ticks))
        object.__setattr__(self, "options", StepOptions.from_any(self.options))
        scale, counts = _search(self.lo, self.hi, self.desired_ticks, self.options)
        # __post_init__ <- __init__ <- caller
        _warn_unmatched(scale, counts, stacklevel=4)
        object.__setattr__(self, "_scale", scale)

    @classmethod
    def from_text(cls, lo, hi, text, options=None):
        """Build an axis from a comma-separated tick count string, as typed into a form."""
        report = parse_tick_counts_report(text)
        if report.rejected:
            msg = f"Ignored invalid tick counts {list(report.rejected)}"
            if report.used_default:
                msg += f"; falling back to {list(DEFAULT_TICK_COUNTS)}"
            warnings.warn(msg, stacklevel=2)
        return cls(lo=lo, hi=hi, desired_ticks=report.counts, options=options)

    @property
    def span(self):
        return self.hi - self.lo

    @property
    def scale(self):
        return self._scale

    @property
    def ticks(self):
        return self._scale.tolist()

    @property
    def step(self):
        return self._scale.step

    @property
    def labels(self):
        return format_ticks(self._scale.ticks, self._scale.step)
