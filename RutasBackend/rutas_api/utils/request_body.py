"""Request body parsing shared by the zone and route views.

Accepts a JSON object or a form-encoded body. Repeated form keys become
lists, single keys stay strings. Anything else (a JSON array, a scalar,
no body) reads as an empty payload.
"""

from __future__ import annotations

from typing import Any, Dict

from flask import request


def read_body() -> Dict[str, Any]:
    payload = request.get_json(silent=True)
    if payload is None and request.form:
        payload = {k: v if len(v) > 1 else v[0] for k, v in request.form.lists()}
    if not isinstance(payload, dict):
        return {}
    return payload
