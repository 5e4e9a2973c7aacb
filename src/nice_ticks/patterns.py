from enum import StrEnum


class StepPattern(StrEnum):
    # members are defined as (token, multipliers, aliases)
    def __new__(cls, token: str, multipliers, aliases=()):
        obj = str.__new__(cls, token)
        obj._value_ = token
        obj.multipliers = tuple(float(m) for m in multipliers)
        obj.aliases = tuple(a.lower() for a in aliases)
        return obj

    ONE_TWO_FIVE = ("1-2-5", (1, 2, 5), ("125", "default", "decimal"))
    QUARTERS = ("1-2-2.5-5", (1, 2, 2.5, 5), ("1-2-25-5", "quarters", "gaps"))
    ONE_FIVE = ("1-5", (1, 5), ("15", "halves"))
    DECADES = ("1", (1,), ("decades", "powers"))

    @classmethod
    def labels(cls) -> list:
        return [m.value for m in cls]

    @classmethod
    def default(cls):
        return cls.ONE_TWO_FIVE

    @classmethod
    def from_token(cls, token):
        t = str(token).strip().lower()
        for p in cls:
            if t == p.value or t in p.aliases:
                return p
        raise ValueError(f"Unknown step pattern {token!r}. Valid patterns are {cls.labels()}")

    @classmethod
    def from_any(cls, arg):
        if arg is None:
            return cls.default()
        if isinstance(arg, cls):
            return arg
        return cls.from_token(arg)


def resolve_multipliers(arg):
    """
    Turn a pattern, pattern token or explicit sequence into a tuple of floats.

    Strings and StepPattern members resolve through StepPattern; any other
    iterable is taken as the multipliers themselves.
    """
    if arg is None or isinstance(arg, str):
        return StepPattern.from_any(arg).multipliers
    return tuple(float(m) for m in arg)
