"""DocumentStore: thin handle over a Firestore client.

The handle is built once by the app factory (``connect(cfg)``) and passed
to the repositories; nothing here is module-global. Operations are
collection-scoped:
- add(collection, record) -> document id
- all(collection) -> [(document id, data)]
- where_equal(collection, field, value) -> [snapshot]
- update(snapshot, fields) / delete(snapshot)

Client exceptions (network, auth, quota) propagate to the caller.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Tuple

import firebase_admin
from firebase_admin import credentials, firestore
from google.cloud.firestore_v1.base_query import FieldFilter

from rutas_api.config import Config


def connect(cfg: Config = Config) -> "DocumentStore":
    """Initialise firebase-admin from config and return a store handle."""
    try:
        fb_app = firebase_admin.get_app()
    except ValueError:
        if cfg.FIREBASE_CREDENTIALS:
            cred = credentials.Certificate(cfg.FIREBASE_CREDENTIALS)
        else:
            cred = credentials.ApplicationDefault()
        options = {"projectId": cfg.FIREBASE_PROJECT_ID} if cfg.FIREBASE_PROJECT_ID else None
        fb_app = firebase_admin.initialize_app(cred, options)
        logging.info(f"Initialised Firestore for project {fb_app.project_id}")
    return DocumentStore(firestore.client(fb_app))


def document_with_id(snapshot: Any) -> Dict[str, Any]:
    """Return a snapshot's fields annotated with the store's document id."""
    data = snapshot.to_dict() or {}
    return {"id": snapshot.id, **data}


class DocumentStore:
    def __init__(self, client: Any):
        self.client = client

    def add(self, collection: str, record: Dict[str, Any]) -> str:
        _, ref = self.client.collection(collection).add(record)
        return ref.id

    def all(self, collection: str) -> List[Tuple[str, Dict[str, Any]]]:
        return [(snap.id, snap.to_dict() or {}) for snap in self.client.collection(collection).stream()]

    def where_equal(self, collection: str, field: str, value: Any) -> List[Any]:
        query = self.client.collection(collection).where(filter=FieldFilter(field, "==", value))
        return list(query.stream())

    def update(self, snapshot: Any, fields: Dict[str, Any]) -> None:
        snapshot.reference.update(fields)

    def delete(self, snapshot: Any) -> None:
        snapshot.reference.delete()
