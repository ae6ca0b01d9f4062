"""Route routes: /rutas, /ruta/<id>, /nueva-ruta, /actualizar-ruta/<id>,
/eliminar-ruta/<id>, /rutas-por-zona/<id_zona>

Same contract as the zone views; /rutas-por-zona never 404s and returns
an empty list when no route points at the zone.
"""

from __future__ import annotations

from typing import Any, Dict

from flask import Blueprint, current_app, jsonify

from rutas_api.services.results import NotFound, StoreFailure
from rutas_api.services.ruta_service import RutaService
from rutas_api.utils.request_body import read_body


rutas_bp = Blueprint("rutas", __name__)

NOT_FOUND = "Route not found"


def _service() -> RutaService:
    return current_app.extensions["ruta_service"]


def _resp_error(message: str, status: int = 500, detail: str | None = None):
    body: Dict[str, Any] = {"error": message}
    if detail is not None:
        body["detail"] = detail
    return jsonify(body), status


@rutas_bp.get("/rutas")
def list_rutas():
    result = _service().get_all()
    if isinstance(result, StoreFailure):
        return _resp_error("Failed to list routes", detail=result.detail)
    return jsonify(result.value)


@rutas_bp.get("/ruta/<id_ruta>")
def get_ruta(id_ruta: str):
    result = _service().get_by_id(id_ruta)
    if isinstance(result, NotFound):
        return _resp_error(NOT_FOUND, 404)
    if isinstance(result, StoreFailure):
        return _resp_error("Failed to get route", detail=result.detail)
    return jsonify(result.value)


@rutas_bp.route("/nueva-ruta", methods=["POST"])
def create_ruta():
    payload = read_body()
    result = _service().create(payload)
    if isinstance(result, StoreFailure):
        return _resp_error("Failed to create route", detail=result.detail)
    return jsonify({"message": "Route created", "id_ruta": result.value["id_ruta"]}), 201


@rutas_bp.route("/actualizar-ruta/<id_ruta>", methods=["PUT"])
def update_ruta(id_ruta: str):
    payload = read_body()
    result = _service().update(id_ruta, payload)
    if isinstance(result, NotFound):
        return _resp_error(NOT_FOUND, 404)
    if isinstance(result, StoreFailure):
        return _resp_error("Failed to update route", detail=result.detail)
    return jsonify({"message": "Route updated", "id_ruta": id_ruta})


@rutas_bp.route("/eliminar-ruta/<id_ruta>", methods=["DELETE"])
def delete_ruta(id_ruta: str):
    result = _service().delete(id_ruta)
    if isinstance(result, NotFound):
        return _resp_error(NOT_FOUND, 404)
    if isinstance(result, StoreFailure):
        return _resp_error("Failed to delete route", detail=result.detail)
    return jsonify({"message": "Route deleted", "id_ruta": id_ruta})


@rutas_bp.get("/rutas-por-zona/<id_zona>")
def list_rutas_by_zona(id_zona: str):
    result = _service().get_by_zona(id_zona)
    if isinstance(result, StoreFailure):
        return _resp_error("Failed to list routes for zone", detail=result.detail)
    return jsonify(result.value)
