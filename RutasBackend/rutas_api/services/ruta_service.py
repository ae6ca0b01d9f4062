"""RutaService: route CRUD over the ``rutas`` collection.

Routes are keyed by ``id_ruta`` (``rut`` + 3 digits) and point at a zone
through ``id_zona_asociada``; the reference is not checked on write and
zone deletion does not cascade here.
"""

from __future__ import annotations

import logging
from typing import Any, Dict

from rutas_api.config import Config
from rutas_api.models import Ruta
from rutas_api.services.results import NotFound, Ok, Result, store_guarded
from rutas_api.services.store_service import DocumentStore, document_with_id
from rutas_api.utils.dates import today_iso
from rutas_api.utils.ids import RUTA_PREFIX, unique_natural_id


class RutaService:
    def __init__(self, store: DocumentStore, cfg: Config = Config):
        self.store = store
        self.cfg = cfg
        self.collection = cfg.RUTAS_COLLECTION

    def _matches(self, id_ruta: str):
        return self.store.where_equal(self.collection, "id_ruta", id_ruta)

    @store_guarded("create route")
    def create(self, payload: Dict[str, Any]) -> Result:
        id_ruta = unique_natural_id(
            RUTA_PREFIX,
            exists=lambda candidate: bool(self._matches(candidate)),
            max_attempts=self.cfg.ID_MAX_ATTEMPTS,
        )
        ruta = Ruta.from_payload(id_ruta, today_iso(), payload)
        record = ruta.to_document()
        self.store.add(self.collection, record)
        logging.info(f"Created route {id_ruta} for zone {ruta.id_zona_asociada}")
        return Ok(record)

    @store_guarded("list routes")
    def get_all(self) -> Result:
        return Ok([{"id": doc_id, **data} for doc_id, data in self.store.all(self.collection)])

    @store_guarded("get route")
    def get_by_id(self, id_ruta: str) -> Result:
        matches = self._matches(id_ruta)
        if not matches:
            return NotFound()
        return Ok(document_with_id(matches[0]))

    @store_guarded("update route")
    def update(self, id_ruta: str, payload: Dict[str, Any]) -> Result:
        """Merge every supplied field into the route and stamp fecha_actualizacion."""
        matches = self._matches(id_ruta)
        if not matches:
            return NotFound()

        merged = {k: v for k, v in payload.items() if k != "id_ruta"}
        merged["fecha_actualizacion"] = today_iso()
        self.store.update(matches[0], merged)
        logging.info(f"Updated route {id_ruta}: {sorted(merged)}")
        return Ok({"id_ruta": id_ruta, **merged})

    @store_guarded("delete route")
    def delete(self, id_ruta: str) -> Result:
        matches = self._matches(id_ruta)
        if not matches:
            return NotFound()
        self.store.delete(matches[0])
        logging.info(f"Deleted route {id_ruta}")
        return Ok(True)

    @store_guarded("list routes by zone")
    def get_by_zona(self, id_zona: str) -> Result:
        matches = self.store.where_equal(self.collection, "id_zona_asociada", id_zona)
        return Ok([document_with_id(snap) for snap in matches])
