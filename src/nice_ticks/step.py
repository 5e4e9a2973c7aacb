from .step_options import StepOptions
from ._validation import check_width

# relative slack on the width/step window, absorbs float noise such as 0.3 / 3
RATIO_TOL = 1e-9


def decade_step(multiplier, exponent):
    """multiplier * 10**exponent, dividing for negative exponents so 0.05 stays 0.05"""
    exponent = int(exponent)
    if exponent >= 0:
        return multiplier * 10**exponent
    return multiplier / 10**-exponent


def step_candidates(options=None):
    """
    Yield every in-bounds candidate step, largest first.

    Decades run from max_exponent down to min_exponent and, within a decade,
    multipliers run from largest to smallest.
    """
    options = StepOptions.from_any(options)
    for exponent in range(int(options.max_exponent), int(options.min_exponent) - 1, -1):
        for m in reversed(options.multipliers):
            step = decade_step(m, exponent)
            if options.min_step <= step <= options.max_step:
                yield step


def get_optimal_step(width, options=None):
    """
    Return the largest "nice" step for which min_range <= width / step <= max_range.

    width: float, non-negative span of the range
    options: StepOptions, dict or None for the defaults

    A zero width returns options.min_step. When no candidate falls in the
    window, widths too large for every candidate get the largest candidate,
    and anything else gets 10**min_exponent clamped into [min_step, max_step].
    """
    options = StepOptions.from_any(options)
    width = check_width(width)
    if width == 0:
        return options.min_step

    lo = options.min_range * (1 - RATIO_TOL)
    hi = options.max_range * (1 + RATIO_TOL)
    candidates = list(step_candidates(options))
    for step in candidates:
        if lo <= width / step <= hi:
            return step

    if candidates and width / candidates[0] > hi:
        return candidates[0]
    smallest = decade_step(1, options.min_exponent)
    return min(max(smallest, options.min_step), options.max_step)


def choose_step(width):
    """get_optimal_step with the default 1-2-5 options."""
    return get_optimal_step(width, StepOptions())
