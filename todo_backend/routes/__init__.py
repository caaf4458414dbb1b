"""Route blueprints package for API endpoints.

Holds the ``todos`` blueprint with the CRUD endpoints.
"""
