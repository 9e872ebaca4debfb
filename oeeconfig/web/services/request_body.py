import json

from flask import request

from oeeconfig.errors import StoreError


def _reject_constant(name):
    raise ValueError(f"{name} is not valid JSON")


def json_body():
    """Parse the request body as strict JSON regardless of its content type.

    ``request.get_json`` returns None for both a missing body and a literal
    ``null``, so the raw data is parsed here instead. ``NaN`` and
    ``Infinity`` are rejected.
    """
    raw = request.get_data(as_text=True)
    try:
        return json.loads(raw, parse_constant=_reject_constant)
    except ValueError as e:
        raise StoreError.parse_error("Invalid JSON format") from e


def json_object_body() -> dict:
    data = json_body()
    if not isinstance(data, dict):
        raise StoreError.parse_error("Expected a JSON object")
    return data
