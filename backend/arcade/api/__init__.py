from flask import request
from arcade.errors import ValidationError


def json_body():
    """Return the request's JSON object or raise ValidationError."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError('Request body must be a JSON object')
    return data
