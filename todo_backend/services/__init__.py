"""Service layer package housing the todo store.

Routes reach the store through ``current_app.extensions["todo_store"]``.
"""
