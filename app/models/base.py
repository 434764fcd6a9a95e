"""
Shared helpers for the plain value records passed into the scoring engine
"""

from dataclasses import asdict, fields
from enum import Enum

from app.utils.errors import ValidationError


class Record:
    """Mixin giving dataclass records a JSON friendly to_dict()"""

    def to_dict(self):
        data = asdict(self)
        for field in fields(self):
            value = data[field.name]
            if isinstance(value, Enum):
                data[field.name] = value.value
        return data


def to_int(value, field, default=None):
    """Coerce request input to int, raising ValidationError on garbage"""
    if value is None or value == "":
        return default
    if isinstance(value, bool):
        raise ValidationError(f"{field} must be a number", field=field)
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field} must be a number", field=field)
    if not number.is_integer():
        raise ValidationError(f"{field} must be a whole number", field=field)
    return int(number)


def to_float(value, field, default=None):
    """Coerce request input to float, raising ValidationError on garbage"""
    if value is None or value == "":
        return default
    if isinstance(value, bool):
        raise ValidationError(f"{field} must be a number", field=field)
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field} must be a number", field=field)


def to_bool(value, default=False):
    if value is None or value == "":
        return default
    if isinstance(value, str):
        return value.strip().lower() in ("true", "1", "yes", "on")
    return bool(value)


def require_mapping(data, name):
    if not isinstance(data, dict):
        raise ValidationError(f"{name} must be an object", field=name)
    return data
