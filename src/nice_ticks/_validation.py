import math
import numbers


class InvalidRangeError(ValueError):
    """Raised when a range or width cannot produce a tick grid."""


def check_finite(value, name="value"):
    """Return value as a float, raising if it is not a finite real number."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise TypeError(f"{name} must be a real number, not {type(value).__name__}")
    value = float(value)
    if not math.isfinite(value):
        raise InvalidRangeError(f"{name} must be finite, got {value}")
    return value


def check_range(vmin, vmax):
    vmin = check_finite(vmin, "vmin")
    vmax = check_finite(vmax, "vmax")
    if vmax < vmin:
        raise InvalidRangeError(f"vmax ({vmax}) must not be less than vmin ({vmin})")
    return vmin, vmax


def check_width(width):
    width = check_finite(width, "width")
    if width < 0:
        raise InvalidRangeError(f"width must be non-negative, got {width}")
    return width


def check_tick_counts(counts):
    """Validate a sequence of preferred tick counts and return it as a tuple."""
    counts = tuple(counts)
    if len(counts) == 0:
        raise ValueError("desired_ticks must contain at least one tick count")
    for k in counts:
        if isinstance(k, bool) or not isinstance(k, numbers.Integral) or k < 1:
            raise ValueError(f"desired_ticks must be positive integers, got {k!r}")
    return tuple(int(k) for k in counts)
