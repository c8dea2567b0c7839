"""Type-tag registry used to create and persist curves without knowing their class up front."""

_CURVE_TYPES = {}


def register_curve(tag):
    """Class decorator registering a curve type under `tag`"""
    def decorator(cls):
        if tag in _CURVE_TYPES:
            raise ValueError(f"Curve type '{tag}' is already registered to {_CURVE_TYPES[tag].__name__}")
        cls.type_tag = tag
        _CURVE_TYPES[tag] = cls
        return cls
    return decorator


def get_curve_type(tag):
    try:
        return _CURVE_TYPES[tag]
    except KeyError:
        raise KeyError(f"Unknown curve type: {tag}") from None


def registered_types():
    return sorted(_CURVE_TYPES)


def create_curve(tag, *args, **kwargs):
    return get_curve_type(tag)(*args, **kwargs)


def curve_from_dict(data, **kwargs):
    """Rebuilds a curve from the output of its `to_dict`"""
    return get_curve_type(data["type"]).from_dict(data, **kwargs)
