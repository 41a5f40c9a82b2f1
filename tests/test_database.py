"""Tests for the JSON file and SQL stores."""

import json
from datetime import timezone

import pytest

from app.database import JsonFileStore, SqlStore, build_store
from app.errors import PersistenceFailure
from app.utils import analyze_string


class TestJsonFileStore:
    """Tests for the JSON file store."""

    def test_missing_file_is_empty(self, json_store):
        assert json_store.load_all() == []

    def test_save_then_load_keeps_order(self, json_store):
        records = [analyze_string(v) for v in ["zeta", "alpha", "mid"]]
        json_store.save_all(records)
        assert json_store.load_all() == records

    def test_file_is_json_list(self, json_store):
        json_store.save_all([analyze_string("hello")])
        with open(json_store.path, encoding="utf-8") as f:
            data = json.load(f)
        assert data[0]["value"] == "hello"
        assert data[0]["properties"]["word_count"] == 1

    @pytest.mark.parametrize("content", ["not json", '{"a": 1}', '[{"bad": 1}]'])
    def test_corrupt_file_is_empty(self, json_store, content):
        with open(json_store.path, "w", encoding="utf-8") as f:
            f.write(content)
        assert json_store.load_all() == []

    def test_save_leaves_no_temp_files(self, tmp_path):
        store = JsonFileStore(str(tmp_path / "signal.json"))
        store.save_all([analyze_string("a")])
        assert [p.name for p in tmp_path.iterdir()] == ["signal.json"]

    def test_unreadable_path_raises(self, tmp_path):
        store = JsonFileStore(str(tmp_path))
        with pytest.raises(PersistenceFailure):
            store.load_all()

    def test_unwritable_path_raises(self, tmp_path):
        store = JsonFileStore(str(tmp_path))
        with pytest.raises(PersistenceFailure):
            store.save_all([analyze_string("a")])


class TestSqlStore:
    """Tests for the SQLAlchemy store on SQLite."""

    @pytest.fixture
    def sql_store(self, tmp_path):
        return SqlStore(f"sqlite:///{tmp_path / 'strings.db'}")

    def test_empty(self, sql_store):
        assert sql_store.load_all() == []

    def test_save_then_load_keeps_order(self, sql_store):
        records = [analyze_string(v) for v in ["zeta", "alpha", "mid"]]
        sql_store.save_all(records)

        loaded = sql_store.load_all()
        assert [r.value for r in loaded] == ["zeta", "alpha", "mid"]
        assert loaded[0].properties == records[0].properties
        assert loaded[0].created_at.tzinfo is not None

    def test_save_replaces_collection(self, sql_store):
        sql_store.save_all([analyze_string("one"), analyze_string("two")])
        sql_store.save_all([analyze_string("two")])
        assert [r.value for r in sql_store.load_all()] == ["two"]


class TestBuildStore:
    """Tests for store selection."""

    def test_json_by_default(self, tmp_path, monkeypatch):
        monkeypatch.setattr("app.config.DATABASE_URL", None)
        store = build_store(data_file=str(tmp_path / "data.json"))
        assert isinstance(store, JsonFileStore)

    def test_sql_when_url_given(self, tmp_path):
        store = build_store(database_url=f"sqlite:///{tmp_path / 'db.sqlite'}")
        assert isinstance(store, SqlStore)
