"""HTTP tests for the route blueprint."""

from unittest import mock

UBICACIONES = [{"descripcion_punto": "Catedral", "coordenadas": {"latitud": 20.6767, "longitud": -103.3475}}]


def _create(client, **body):
    resp = client.post("/nueva-ruta", json=body)
    assert resp.status_code == 201
    return resp.get_json()["id_ruta"]


def test_route_lifecycle(client):
    resp = client.post(
        "/nueva-ruta",
        json={"nombre_ruta": "Centro GDL", "id_zona_asociada": "me101", "ubicaciones": UBICACIONES},
    )
    assert resp.status_code == 201
    body = resp.get_json()
    assert body["message"] == "Route created"
    id_ruta = body["id_ruta"]
    assert id_ruta.startswith("rut")

    ruta = client.get(f"/ruta/{id_ruta}").get_json()
    assert ruta["nombre_ruta"] == "Centro GDL"
    assert ruta["ubicaciones"] == UBICACIONES
    assert len(ruta["fecha_creacion"]) == 10

    resp = client.put(f"/actualizar-ruta/{id_ruta}", json={"nombre_ruta": "Centro Histórico", "activa": True})
    assert resp.status_code == 200
    assert resp.get_json() == {"message": "Route updated", "id_ruta": id_ruta}
    ruta = client.get(f"/ruta/{id_ruta}").get_json()
    assert ruta["nombre_ruta"] == "Centro Histórico"
    assert ruta["activa"] is True
    assert "fecha_actualizacion" in ruta

    assert client.delete(f"/eliminar-ruta/{id_ruta}").status_code == 200
    resp = client.get(f"/ruta/{id_ruta}")
    assert resp.status_code == 404
    assert resp.get_json() == {"error": "Route not found"}


def test_list_routes_and_by_zone(client):
    a = _create(client, nombre_ruta="A", id_zona_asociada="me101", ubicaciones=[])
    b = _create(client, nombre_ruta="B", id_zona_asociada="me202", ubicaciones=[])
    c = _create(client, nombre_ruta="C", id_zona_asociada="me101", ubicaciones=[])

    all_ids = [r["id_ruta"] for r in client.get("/rutas").get_json()]
    assert all_ids == [a, b, c]

    resp = client.get("/rutas-por-zona/me101")
    assert resp.status_code == 200
    assert [r["id_ruta"] for r in resp.get_json()] == [a, c]

    resp = client.get("/rutas-por-zona/me999")
    assert resp.status_code == 200
    assert resp.get_json() == []


def test_zone_delete_does_not_cascade(client):
    id_zona = client.post("/nueva-zona", json={"nombre_zona": "Centro", "estado": "CDMX"}).get_json()["id_zona"]
    _create(client, nombre_ruta="A", id_zona_asociada=id_zona, ubicaciones=[])
    assert client.delete(f"/eliminar-zona/{id_zona}").status_code == 200
    assert len(client.get(f"/rutas-por-zona/{id_zona}").get_json()) == 1


def test_missing_route_is_404(client):
    assert client.put("/actualizar-ruta/rut999", json={"nombre_ruta": "x"}).status_code == 404
    assert client.delete("/eliminar-ruta/rut999").status_code == 404


def test_store_failure_is_500_with_detail(app, client):
    store = app.extensions["document_store"]
    with mock.patch.object(store, "where_equal", side_effect=RuntimeError("unavailable")):
        resp = client.get("/rutas-por-zona/me101")
        assert resp.status_code == 500
        assert resp.get_json() == {"error": "Failed to list routes for zone", "detail": "unavailable"}

        resp = client.put("/actualizar-ruta/rut101", json={"nombre_ruta": "x"})
        assert resp.status_code == 500
        assert resp.get_json()["error"] == "Failed to update route"


def test_exhausted_key_space_is_500(client):
    with mock.patch("rutas_api.utils.ids.new_natural_id", return_value="rut101"):
        _create(client, nombre_ruta="A")
        resp = client.post("/nueva-ruta", json={"nombre_ruta": "B"})
    assert resp.status_code == 500
    assert resp.get_json()["error"] == "Failed to create route"
    assert "rut" in resp.get_json()["detail"]


def test_form_encoded_create_and_update(client):
    resp = client.post("/nueva-ruta", data={"nombre_ruta": "Periférico", "id_zona_asociada": "me101"})
    assert resp.status_code == 201
    id_ruta = resp.get_json()["id_ruta"]
    assert client.put(f"/actualizar-ruta/{id_ruta}", data={"nombre_ruta": "Periférico Sur"}).status_code == 200

    ruta = client.get(f"/ruta/{id_ruta}").get_json()
    assert ruta["nombre_ruta"] == "Periférico Sur"
    assert ruta["id_zona_asociada"] == "me101"


def test_non_object_json_update_only_stamps_date(client):
    id_ruta = _create(client, nombre_ruta="A", id_zona_asociada="me101")
    resp = client.put(f"/actualizar-ruta/{id_ruta}", json=["nombre_ruta", "B"])
    assert resp.status_code == 200
    ruta = client.get(f"/ruta/{id_ruta}").get_json()
    assert ruta["nombre_ruta"] == "A"
    assert "fecha_actualizacion" in ruta
