"""Route blueprints package for API endpoints.

Contains Flask blueprints for each route group: zonas, rutas, and docs.
Each module documents its endpoint responsibilities and JSON contracts.
"""
