import math
from dataclasses import dataclass, field, replace, asdict
from .patterns import resolve_multipliers
from ._serialization import init_from_dict, migrate_options_dict

DEFAULT_MULTIPLIERS = (1.0, 2.0, 5.0)
# gaps tried by the tick builder when rounding a raw spacing
DEFAULT_GAP_MULTIPLIERS = (1.0, 2.0, 2.5, 5.0)
DEFAULT_TICK_COUNTS = (9, 8, 7, 6, 5, 4, 3)


@dataclass(frozen=True, slots=True)
class StepOptions:
    """
    Search space and acceptance window for step selection.

    multipliers: ascending values in [1, 10) repeated in every decade, or a
        StepPattern / pattern token such as "1-2-5"
    min_range, max_range: a step s is acceptable when
        min_range <= width / s <= max_range
    min_step, max_step: absolute bounds on any returned step
    max_exponent, min_exponent: decades searched, largest first
    """

    multipliers: tuple = field(default=DEFAULT_MULTIPLIERS)
    min_range: float = 2.0
    max_range: float = 10.0
    min_step: float = 0.01
    max_step: float = 1e9
    max_exponent: int = 9
    min_exponent: int = -5

    def __post_init__(self):
        # frozen, so normalized values go through object.__setattr__
        object.__setattr__(self, "multipliers", resolve_multipliers(self.multipliers))
        self._check_multipliers(self.multipliers)
        self._check_window(self.min_range, self.max_range, "range")
        self._check_window(self.min_step, self.max_step, "step")
        if not (math.isfinite(self.min_exponent) and math.isfinite(self.max_exponent)):
            raise ValueError("min_exponent and max_exponent must be finite")
        if int(self.min_exponent) != self.min_exponent or int(self.max_exponent) != self.max_exponent:
            raise ValueError("min_exponent and max_exponent must be integers")
        if self.min_exponent > self.max_exponent:
            raise ValueError("min_exponent cannot be larger than max_exponent")

    def with_(self, **changes):
        return replace(self, **changes)

    def to_dict(self) -> dict:
        data = asdict(self)
        data["multipliers"] = list(self.multipliers)
        return data

    @classmethod
    def from_dict(cls, data: dict):
        return init_from_dict(cls, migrate_options_dict(data))

    @classmethod
    def from_any(cls, arg):
        if arg is None:
            return cls()
        if isinstance(arg, cls):
            return arg
        if isinstance(arg, dict):
            return cls.from_dict(arg)
        raise TypeError(f"options must be StepOptions or dict, not {type(arg).__name__}")

    @staticmethod
    def _check_multipliers(multipliers):
        if len(multipliers) == 0:
            raise ValueError("multipliers must not be empty")
        if not all(math.isfinite(m) for m in multipliers):
            raise ValueError(f"multipliers must be finite, got {multipliers}")
        if list(multipliers) != sorted(set(multipliers)):
            raise ValueError(f"multipliers must be strictly ascending, got {multipliers}")
        if multipliers[0] < 1 or multipliers[-1] >= 10:
            raise ValueError(f"multipliers must lie in [1, 10), got {multipliers}")

    @staticmethod
    def _check_window(lo, hi, name):
        if not (math.isfinite(lo) and math.isfinite(hi)):
            raise ValueError(f"min_{name} and max_{name} must be finite, got {lo} and {hi}")
        if lo <= 0 or hi <= 0:
            raise ValueError(f"min_{name} and max_{name} must be positive")
        if lo > hi:
            raise ValueError(f"min_{name} ({lo}) cannot be larger than max_{name} ({hi})")
