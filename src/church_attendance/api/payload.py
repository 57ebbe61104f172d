from __future__ import annotations

from typing import Any, Iterable, Mapping

from flask import request

from ..core.exceptions import ValidationError


def json_body() -> dict:
    """The request's JSON object body; anything else is a 400."""
    data = request.get_json(silent=True)
    if data is None:
        if request.get_data(cache=True):
            raise ValidationError("Malformed JSON body")
        return {}
    if not isinstance(data, dict):
        raise ValidationError("JSON body must be an object")
    return data


def wire_to_fields(body: Mapping[str, Any], wire_fields: Mapping[str, str], *, exclude: Iterable[str] = ()) -> dict:
    """Map the camelCase keys present in ``body`` onto dataclass field names."""
    skip = set(exclude)
    return {field: body[key] for key, field in wire_fields.items() if key in body and key not in skip}


def success() -> dict:
    return {"success": True}
