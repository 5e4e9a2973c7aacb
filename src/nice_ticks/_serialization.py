import inspect


def init_from_dict(cls, data: dict):
    """Construct cls from dict, filtering to valid __init__ params."""
    keys = list(inspect.signature(cls.__init__).parameters.keys())[1:]
    return cls(**{k: v for k, v in data.items() if k in keys})


def migrate_options_dict(data: dict) -> dict:
    """Map camelCase option keys from form/JSON payloads onto field names."""
    data = dict(data)
    legacy = {
        "minRange": "min_range",
        "maxRange": "max_range",
        "minStep": "min_step",
        "maxStep": "max_step",
        "minExponent": "min_exponent",
        "maxExponent": "max_exponent",
    }
    for old, new in legacy.items():
        if old in data and new not in data:
            data[new] = data.pop(old)
    return data
