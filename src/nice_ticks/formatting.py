import math


def step_decimals(step, max_digits=15):
    """Decimals needed to write every multiple of step exactly: 0.25 -> 2, 200 -> 0."""
    step = abs(float(step))
    if step == 0 or not math.isfinite(step):
        return 0
    for digits in range(max_digits + 1):
        if abs(round(step, digits) - step) <= step * 1e-9:
            return digits
    return max_digits


def format_tick(value, step):
    """Format a tick value with the precision its step calls for: 200.0 -> '200'."""
    text = f"{float(value):.{step_decimals(step)}f}"
    if text.startswith("-") and float(text) == 0:
        text = text[1:]
    return text


def format_ticks(ticks, step):
    return [format_tick(t, step) for t in ticks]
