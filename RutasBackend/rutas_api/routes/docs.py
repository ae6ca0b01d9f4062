"""Docs routes: GET /docs (Swagger UI) and /openapi.yaml (contract)

Serves the zone/route OpenAPI YAML from the backend docs folder and a
Swagger UI page that renders it.
"""

from __future__ import annotations

import os
from flask import Blueprint, Response


docs_bp = Blueprint("docs", __name__)

SWAGGER_HTML = """
<!doctype html>
<html lang="es">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>Zonas y Rutas API | Swagger UI</title>
    <link rel="stylesheet" href="https://unpkg.com/swagger-ui-dist@5/swagger-ui.css" />
    <style>
      body { margin: 0; padding: 0; }
      #swagger-ui { width: 100%; height: 100vh; }
    </style>
  </head>
  <body>
    <div id="swagger-ui"></div>
    <script src="https://unpkg.com/swagger-ui-dist@5/swagger-ui-bundle.js"></script>
    <script>
      window.onload = () => {
        window.ui = SwaggerUIBundle({
          url: '/openapi.yaml',
          dom_id: '#swagger-ui',
          presets: [SwaggerUIBundle.presets.apis],
          tagsSorter: 'alpha',
          deepLinking: true,
        });
      };
    </script>
  </body>
</html>
""".strip()


def openapi_path() -> str:
    # rutas_api/routes/docs.py -> RutasBackend/docs/openapi.yaml
    backend_root = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))
    return os.path.join(backend_root, "docs", "openapi.yaml")


@docs_bp.get("/openapi.yaml")
def openapi_yaml() -> Response:
    path = openapi_path()
    if not os.path.exists(path):
        return Response("openapi.yaml not found", status=404)
    with open(path, "rb") as f:
        return Response(f.read(), mimetype="text/yaml")


@docs_bp.get("/docs")
def swagger_ui() -> Response:
    return Response(SWAGGER_HTML, mimetype="text/html")
