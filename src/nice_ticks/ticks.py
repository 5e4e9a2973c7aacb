import math
import warnings
from dataclasses import dataclass
import numpy as np
from .step import get_optimal_step, RATIO_TOL
from .step_options import StepOptions, DEFAULT_GAP_MULTIPLIERS, DEFAULT_TICK_COUNTS
from ._validation import InvalidRangeError, check_finite, check_range, check_tick_counts

MAX_TICKS = 10_000


@dataclass(frozen=True, slots=True)
class TickScale:
    ticks: tuple
    step: float
    vmin: float
    vmax: float
    matched: int | None = None  # preferred count satisfied, None for the fallback

    @property
    def n_ticks(self) -> int:
        return len(self.ticks)

    @property
    def lo(self) -> float:
        return self.ticks[0]

    @property
    def hi(self) -> float:
        return self.ticks[-1]

    def tolist(self) -> list:
        return list(self.ticks)


def _resolve_range(vmin, vmax):
    if vmax is None:
        # single value mode: the range runs between zero and the value
        value = check_finite(vmin, "vmin")
        return min(0.0, value), max(0.0, value)
    return check_range(vmin, vmax)


def _gap_options(options):
    """
    Options used to round a raw spacing.

    A caller-set ratio window is used as given. Otherwise the window becomes
    [1, 10], so the largest gap not above the raw spacing is picked, and
    default multipliers are widened to the 1-2-2.5-5 gap pattern.
    """
    defaults = StepOptions()
    if (options.min_range, options.max_range) != (defaults.min_range, defaults.max_range):
        return options
    if options.multipliers == defaults.multipliers:
        return options.with_(multipliers=DEFAULT_GAP_MULTIPLIERS, min_range=1.0, max_range=10.0)
    return options.with_(min_range=1.0, max_range=10.0)


def _grid(vmin, vmax, step):
    """
    Ticks on multiples of step covering [vmin, vmax], plus the number that
    fall inside the range itself.
    """
    first = math.floor(vmin / step + RATIO_TOL)
    last = math.ceil(vmax / step - RATIO_TOL)
    if last - first + 1 > MAX_TICKS:
        raise InvalidRangeError(
            f"Range [{vmin}, {vmax}] needs more than {MAX_TICKS} ticks at step {step}; "
            "raise max_step or max_exponent"
        )
    n_inside = math.floor(vmax / step + RATIO_TOL) - math.ceil(vmin / step - RATIO_TOL) + 1

    digits = max(0, 2 - math.floor(math.log10(step)))
    pts = np.round(np.arange(first, last + 1) * step, digits) + 0.0  # no -0.0
    return tuple(pts.tolist()), n_inside


def _search(vmin, vmax, desired_ticks, options):
    vmin, vmax = _resolve_range(vmin, vmax)
    counts = DEFAULT_TICK_COUNTS if desired_ticks is None else check_tick_counts(desired_ticks)
    options = StepOptions.from_any(options)

    if vmax == vmin:
        return TickScale((vmin,), get_optimal_step(0, options), vmin, vmax), counts

    width = vmax - vmin
    if not math.isfinite(width):
        raise InvalidRangeError(
            f"Range [{vmin}, {vmax}] is too wide: its width overflows a float"
        )
    gap_options = _gap_options(options)
    scale = None
    for k in counts:
        raw_step = width / max(k - 1, 1)
        step = get_optimal_step(raw_step, gap_options)
        ticks, n_inside = _grid(vmin, vmax, step)
        scale = TickScale(ticks, step, vmin, vmax, matched=k if n_inside == k else None)
        if scale.matched is not None:
            return scale, counts
    return scale, counts


def _warn_unmatched(scale, counts, stacklevel=3):
    if scale.matched is None and scale.n_ticks > 1:
        msg = (
            f"No preferred tick count {list(counts)} fits [{scale.vmin}, {scale.vmax}]; "
            f"using {scale.n_ticks} ticks at step {scale.step}"
        )
        warnings.warn(msg, stacklevel=stacklevel)


def build_scale(vmin, vmax=None, desired_ticks=None, *, options=None) -> TickScale:
    """
    Pick a tick step for [vmin, vmax] and return the full TickScale.

    Preferred counts are tried in order. For each one the ideal spacing
    width / (k - 1) is rounded down to the nearest 1, 2, 2.5 or 5 times a
    power of ten, and the first count whose grid puts exactly k ticks inside
    the range wins. If none does, the grid of the last count tried is used
    and a UserWarning is emitted.

    options bounds the steps the same way it does for get_optimal_step.
    Non-default multipliers replace the 1-2-2.5-5 gaps, and a non-default
    min_range/max_range replaces the [1, 10] rounding window, so
    StepOptions(multipliers="1") only ever yields powers of ten.
    """
    scale, counts = _search(vmin, vmax, desired_ticks, options)
    _warn_unmatched(scale, counts)
    return scale


def build_ticks(vmin, vmax=None, desired_ticks=None, *, options=None) -> list:
    """
    Return ascending, evenly spaced tick values covering [vmin, vmax].

    build_ticks(v) is shorthand for the range between 0 and v.
    """
    scale, counts = _search(vmin, vmax, desired_ticks, options)
    _warn_unmatched(scale, counts)
    return scale.tolist()
