"""Development entrypoint for running the Flask API locally.

Usage:
- FLASK_APP=rutas_api.main:app flask run --reload
- python -m rutas_api.main
"""

from __future__ import annotations

from rutas_api import create_app
from rutas_api.config import Config

app = create_app()

if __name__ == "__main__":
    # Simple built-in server for quick smoke testing
    app.run(host=Config.HOST, port=Config.PORT, debug=Config.RUTAS_ENV == "dev")
