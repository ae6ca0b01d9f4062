"""Flask app factory and blueprint registration.

Defines `create_app()` to initialize the Flask app, load configuration,
connect the document store, enable CORS, log requests, and register the
zone/route blueprints.
"""

from __future__ import annotations

import logging
import time
from typing import Optional

from flask import Flask, g, request
from flask_cors import CORS

from rutas_api.config import Config
from rutas_api.routes.docs import docs_bp
from rutas_api.routes.rutas import rutas_bp
from rutas_api.routes.zonas import zonas_bp
from rutas_api.services.ruta_service import RutaService
from rutas_api.services.store_service import DocumentStore, connect
from rutas_api.services.zona_service import ZonaService


def _configure_logging(cfg: Config) -> None:
    logging.basicConfig(
        level=getattr(logging, str(cfg.LOG_LEVEL).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _register_request_logging(app: Flask) -> None:
    @app.before_request
    def _start_timer():
        g.request_started = time.perf_counter()

    @app.after_request
    def _log_request(response):
        started = g.pop("request_started", None)
        elapsed = (time.perf_counter() - started) * 1000 if started is not None else 0.0
        logging.info(f"{request.method} {request.path} {response.status_code} {elapsed:.1f} ms")
        return response


def create_app(cfg: Config = Config, store: Optional[DocumentStore] = None) -> Flask:
    _configure_logging(cfg)
    app = Flask(__name__)
    # Basic config
    app.config.from_object(cfg)

    # One store handle per process, shared by both repositories
    if store is None:
        store = connect(cfg)
    app.extensions["document_store"] = store
    app.extensions["zona_service"] = ZonaService(store, cfg)
    app.extensions["ruta_service"] = RutaService(store, cfg)

    CORS(
        app,
        resources={r"/*": {"origins": cfg.CORS_ORIGINS}},
        supports_credentials=False,
        allow_headers=["Content-Type"],
        methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    )
    _register_request_logging(app)

    # Blueprints
    app.register_blueprint(zonas_bp)
    app.register_blueprint(rutas_bp)
    app.register_blueprint(docs_bp)

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app
