import re
from dataclasses import dataclass
from .step_options import DEFAULT_TICK_COUNTS


@dataclass(frozen=True, slots=True)
class TickCountParse:
    counts: tuple
    rejected: tuple = ()  # tokens that were not positive integers
    used_default: bool = False


# plain ASCII digits only: no sign, underscores or other unicode digits
_COUNT_RE = re.compile(r"[0-9]+")


def _parse_token(token):
    if not _COUNT_RE.fullmatch(token):
        return None
    value = int(token)
    return value if value > 0 else None


def parse_tick_counts_report(text) -> TickCountParse:
    """
    Parse a comma-separated list of preferred tick counts, keeping track of
    the tokens that were dropped.

    Blank tokens are skipped without being reported. If nothing usable is
    left, the default counts are returned and used_default is set.
    """
    counts = []
    rejected = []
    for token in str(text or "").split(","):
        token = token.strip()
        if not token:
            continue
        value = _parse_token(token)
        if value is None:
            rejected.append(token)
        else:
            counts.append(value)

    if not counts:
        return TickCountParse(DEFAULT_TICK_COUNTS, tuple(rejected), True)
    return TickCountParse(tuple(counts), tuple(rejected))


def parse_tick_counts(text) -> tuple:
    """Lenient parse of "7, 5, 3" style input; never raises."""
    return parse_tick_counts_report(text).counts
