"""Service layer package housing the repositories.

Contains the Firestore store handle, the Ok/NotFound/StoreFailure result
types, and the zone and route repositories used by the routes.
"""
