import os

from todo_backend.utils.ids import new_todo_id
from todo_backend.utils.io_utils import read_json, write_json


def test_new_todo_id_uses_clock_when_ahead():
    assert new_todo_id([1, 2, 3], now=50) == 50


def test_new_todo_id_bumps_past_highest():
    assert new_todo_id([10, 40], now=40) == 41
    assert new_todo_id([10, 40], now=5) == 41


def test_new_todo_id_on_empty_collection():
    assert new_todo_id([], now=123) == 123


def test_read_json_missing_returns_default(tmp_path):
    assert read_json(str(tmp_path / "absent.json"), default=[]) == []


def test_write_json_leaves_no_temp_files(tmp_path):
    path = tmp_path / "out.json"
    write_json(str(path), [{"title": "café"}])
    assert read_json(str(path)) == [{"title": "café"}]
    assert os.listdir(tmp_path) == ["out.json"]
