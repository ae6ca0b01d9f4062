"""Record shapes for zones and routes as written to the document store.

Creation payloads are built field by field from the request body; unknown
keys in the body are ignored. Presence of required fields is not enforced.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional

# Fields a zone update may touch
ZONA_UPDATABLE_FIELDS = (
    "nombre_zona",
    "estado",
    "municipios_incluidos",
    "codigos_postales_relacionados",
)


@dataclass
class Zona:
    id_zona: str
    nombre_zona: Optional[str] = None
    estado: Optional[str] = None
    municipios_incluidos: List[str] = field(default_factory=list)
    codigos_postales_relacionados: List[str] = field(default_factory=list)

    @classmethod
    def from_payload(cls, id_zona: str, payload: Dict[str, Any]) -> "Zona":
        return cls(
            id_zona=id_zona,
            nombre_zona=payload.get("nombre_zona"),
            estado=payload.get("estado"),
            municipios_incluidos=payload.get("municipios_incluidos") or [],
            codigos_postales_relacionados=payload.get("codigos_postales_relacionados") or [],
        )

    def to_document(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class Ruta:
    id_ruta: str
    fecha_creacion: str
    nombre_ruta: Optional[str] = None
    id_zona_asociada: Optional[str] = None
    # [{descripcion_punto, coordenadas: {latitud, longitud}}], stored as given
    ubicaciones: Any = None

    @classmethod
    def from_payload(cls, id_ruta: str, fecha_creacion: str, payload: Dict[str, Any]) -> "Ruta":
        return cls(
            id_ruta=id_ruta,
            fecha_creacion=fecha_creacion,
            nombre_ruta=payload.get("nombre_ruta"),
            id_zona_asociada=payload.get("id_zona_asociada"),
            ubicaciones=payload.get("ubicaciones"),
        )

    def to_document(self) -> Dict[str, Any]:
        return {
            "id_ruta": self.id_ruta,
            "nombre_ruta": self.nombre_ruta,
            "id_zona_asociada": self.id_zona_asociada,
            "ubicaciones": self.ubicaciones,
            "fecha_creacion": self.fecha_creacion,
        }
