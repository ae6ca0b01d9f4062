"""Configuration for environment variables and runtime knobs.

Provides a simple config object with Firestore credentials, collection
names and logging/CORS settings. This keeps the rest of the codebase
decoupled from direct env access.
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

# Load .env for local dev if available
load_dotenv()


class Config:
    # Base
    RUTAS_ENV = os.getenv("RUTAS_ENV", "dev")
    HOST = os.getenv("HOST", "127.0.0.1")
    PORT = int(os.getenv("PORT", "5000"))

    # Firestore: service-account JSON path; None falls back to application default credentials
    FIREBASE_CREDENTIALS = os.getenv("FIREBASE_CREDENTIALS") or os.getenv("GOOGLE_APPLICATION_CREDENTIALS")
    FIREBASE_PROJECT_ID = os.getenv("FIREBASE_PROJECT_ID")

    # Collections
    ZONAS_COLLECTION = os.getenv("ZONAS_COLLECTION", "zonas")
    RUTAS_COLLECTION = os.getenv("RUTAS_COLLECTION", "rutas")

    # Natural keys are drawn from 100..999; retry this many times on collision
    ID_MAX_ATTEMPTS = int(os.getenv("ID_MAX_ATTEMPTS", "10"))

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")
