"""Zone routes: /zonas, /zona/<id>, /nueva-zona, /actualizar-zona/<id>, /eliminar-zona/<id>

Thin adapters over ZonaService. Each view maps the service result to a
status code: Ok -> 200/201, NotFound -> 404, StoreFailure -> 500 with
``{error, detail}``.
"""

from __future__ import annotations

from typing import Any, Dict

from flask import Blueprint, current_app, jsonify

from rutas_api.services.results import NotFound, StoreFailure
from rutas_api.services.zona_service import ZonaService
from rutas_api.utils.request_body import read_body


zonas_bp = Blueprint("zonas", __name__)

NOT_FOUND = "Zone not found"


def _service() -> ZonaService:
    return current_app.extensions["zona_service"]


def _resp_error(message: str, status: int = 500, detail: str | None = None):
    body: Dict[str, Any] = {"error": message}
    if detail is not None:
        body["detail"] = detail
    return jsonify(body), status


@zonas_bp.route("/nueva-zona", methods=["POST"])
def create_zona():
    payload = read_body()
    result = _service().create(payload)
    if isinstance(result, StoreFailure):
        return _resp_error("Failed to create zone", detail=result.detail)
    return jsonify({"message": "Zone created", "id_zona": result.value["id_zona"]}), 201


@zonas_bp.get("/zonas")
def list_zonas():
    result = _service().get_all()
    if isinstance(result, StoreFailure):
        return _resp_error("Failed to list zones", detail=result.detail)
    return jsonify(result.value)


@zonas_bp.get("/zona/<id_zona>")
def get_zona(id_zona: str):
    result = _service().get_by_id(id_zona)
    if isinstance(result, NotFound):
        return _resp_error(NOT_FOUND, 404)
    if isinstance(result, StoreFailure):
        return _resp_error("Failed to get zone", detail=result.detail)
    return jsonify(result.value)


@zonas_bp.route("/actualizar-zona/<id_zona>", methods=["PUT"])
def update_zona(id_zona: str):
    payload = read_body()
    result = _service().update(id_zona, payload)
    if isinstance(result, NotFound):
        return _resp_error(NOT_FOUND, 404)
    if isinstance(result, StoreFailure):
        return _resp_error("Failed to update zone", detail=result.detail)
    return jsonify({"message": "Zone updated", "id_zona": id_zona})


@zonas_bp.route("/eliminar-zona/<id_zona>", methods=["DELETE"])
def delete_zona(id_zona: str):
    result = _service().delete(id_zona)
    if isinstance(result, NotFound):
        return _resp_error(NOT_FOUND, 404)
    if isinstance(result, StoreFailure):
        return _resp_error("Failed to delete zone", detail=result.detail)
    return jsonify({"message": "Zone deleted", "id_zona": id_zona})
