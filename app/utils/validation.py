"""
Request body validation helpers
"""

from flask import request

from app.utils.errors import ValidationError


def json_body():
    """The request's JSON object; a missing or unparsable body reads as empty"""
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError('Request body must be a JSON object')
    return data


def optional_str(data, field, strip=True):
    """String from ``data[field]``, or None when absent"""
    value = data.get(field)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(f'{field} must be a string')
    return value.strip() if strip else value


def require_str(data, field, strip=True, message=None):
    """Non-empty string from ``data[field]`` or raise ValidationError"""
    value = optional_str(data, field, strip=strip)
    if not value:
        raise ValidationError(message or f'{field} is required')
    return value


def parse_enum(enum_cls, value, field):
    """Coerce ``value`` into ``enum_cls`` or raise ValidationError"""
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ', '.join(member.value for member in enum_cls)
        raise ValidationError(f'Invalid {field} "{value}". Allowed: {allowed}')


def optional_id(data, field):
    """Integer id from ``data[field]``, or None when absent"""
    value = data.get(field)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f'{field} must be an integer id')
    return value
