import pytest

from todo_backend import create_app
from todo_backend.services.todo_store import JsonFileTodoStore, MemoryTodoStore


@pytest.fixture
def todos_path(tmp_path):
    return tmp_path / "todos.json"


@pytest.fixture
def file_store(todos_path):
    return JsonFileTodoStore(str(todos_path))


@pytest.fixture
def app(file_store):
    """An app backed by a JSON file under the test's tmp_path."""
    app = create_app(store=file_store)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def memory_client():
    app = create_app(store=MemoryTodoStore())
    app.config["TESTING"] = True
    return app.test_client()
