"""ZonaService: zone CRUD over the ``zonas`` collection.

Zones are looked up by their natural key ``id_zona`` (``me`` + 3 digits),
never by the store's document id. Every method returns an Ok / NotFound /
StoreFailure result; store exceptions never escape.
"""

from __future__ import annotations

import logging
from typing import Any, Dict

from rutas_api.config import Config
from rutas_api.models import ZONA_UPDATABLE_FIELDS, Zona
from rutas_api.services.results import NotFound, Ok, Result, store_guarded
from rutas_api.services.store_service import DocumentStore, document_with_id
from rutas_api.utils.ids import ZONA_PREFIX, unique_natural_id


class ZonaService:
    def __init__(self, store: DocumentStore, cfg: Config = Config):
        self.store = store
        self.cfg = cfg
        self.collection = cfg.ZONAS_COLLECTION

    def _matches(self, id_zona: str):
        return self.store.where_equal(self.collection, "id_zona", id_zona)

    @store_guarded("create zone")
    def create(self, payload: Dict[str, Any]) -> Result:
        id_zona = unique_natural_id(
            ZONA_PREFIX,
            exists=lambda candidate: bool(self._matches(candidate)),
            max_attempts=self.cfg.ID_MAX_ATTEMPTS,
        )
        zona = Zona.from_payload(id_zona, payload)
        record = zona.to_document()
        self.store.add(self.collection, record)
        logging.info(f"Created zone {id_zona}")
        return Ok(record)

    @store_guarded("list zones")
    def get_all(self) -> Result:
        return Ok([{"id": doc_id, **data} for doc_id, data in self.store.all(self.collection)])

    @store_guarded("get zone")
    def get_by_id(self, id_zona: str) -> Result:
        matches = self._matches(id_zona)
        if not matches:
            return NotFound()
        return Ok(document_with_id(matches[0]))

    @store_guarded("update zone")
    def update(self, id_zona: str, payload: Dict[str, Any]) -> Result:
        """Apply a partial update to the first zone matching ``id_zona``.

        Only the updatable fields whose value is truthy are written, so an
        explicit ``""`` or ``[]`` leaves the stored value untouched.
        """
        matches = self._matches(id_zona)
        if not matches:
            return NotFound()

        applied = {name: payload[name] for name in ZONA_UPDATABLE_FIELDS if payload.get(name)}
        if not applied:
            # Firestore rejects an empty update document
            logging.info(f"Update of zone {id_zona} had no fields to write")
            return Ok({"id_zona": id_zona})
        self.store.update(matches[0], applied)
        logging.info(f"Updated zone {id_zona}: {sorted(applied)}")
        return Ok({"id_zona": id_zona, **applied})

    @store_guarded("delete zone")
    def delete(self, id_zona: str) -> Result:
        matches = self._matches(id_zona)
        if not matches:
            return NotFound()
        # Duplicate natural keys are possible; remove every match
        for snap in matches:
            self.store.delete(snap)
        logging.info(f"Deleted zone {id_zona} ({len(matches)} document(s))")
        return Ok(True)
