"""Tests for the maintenance CLI commands."""

import json

import duckdb
import polars as pl
import pytest

import manage_registry
from app.repositories.db import init_tables
from app.services.registry import FormState
from web.api import registry

SOMCHAI = {"prefix": "นาย", "first_name": "สมชาย", "last_name": "ใจดี", "party": "พรรค A"}


@pytest.fixture
def one_member(app_container):
    registry.submit_member(FormState(), SOMCHAI)
    return app_container


class TestExport:
    def test_csv_columns(self, one_member, tmp_path):
        path = tmp_path / "table.csv"
        manage_registry.run_export_csv(path)

        df = pl.read_csv(path)
        assert df.columns == ["full_name", "ministry", "department", "party"]
        assert df.height == 1
        assert df["full_name"][0] == "นาย สมชาย ใจดี"
        assert df["party"][0] == "พรรค A"

    def test_csv_empty_registry(self, app_container, tmp_path):
        path = tmp_path / "table.csv"
        manage_registry.run_export_csv(path)
        assert pl.read_csv(path).height == 0

    def test_json_then_import(self, one_member, tmp_path):
        path = tmp_path / "members.json"
        manage_registry.run_export(path)
        assert json.loads(path.read_text(encoding="utf-8"))[0]["firstName"] == "สมชาย"

        one_member.store.replace_all([])
        assert manage_registry.run_import(path)
        assert registry.list_members().total == 1


class TestImport:
    def test_invalid_json(self, one_member, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("[{", encoding="utf-8")
        assert not manage_registry.run_import(path)
        assert registry.list_members().total == 1

    def test_missing_file(self, one_member, tmp_path):
        assert not manage_registry.run_import(tmp_path / "nope.json")

    def test_not_utf8(self, one_member, tmp_path):
        path = tmp_path / "latin1.json"
        path.write_bytes(b"\xff\xfe\x00[")
        assert not manage_registry.run_import(path)

    def test_invalid_record(self, one_member, tmp_path, capsys):
        path = tmp_path / "members.json"
        path.write_text(json.dumps([{"prefix": "นาย"}]), encoding="utf-8")
        assert not manage_registry.run_import(path)
        assert "#0" in capsys.readouterr().out
        assert registry.list_members().total == 1


class TestList:
    def test_prints_rows(self, one_member, capsys):
        manage_registry.run_list()
        out = capsys.readouterr().out
        assert "รายชื่อสมาชิก (1)" in out
        assert "1. นาย สมชาย ใจดี  (พรรค A)" in out

    def test_empty(self, app_container, capsys):
        manage_registry.run_list()
        assert "ยังไม่มีข้อมูล" in capsys.readouterr().out


class TestValidation:
    def test_no_snapshot(self, kv):
        assert manage_registry.run_validation(kv)

    def test_valid(self, kv):
        kv.set("members", [{"id": "a", "prefix": "นาย", "firstName": "ก", "lastName": "ข"}])
        assert manage_registry.run_validation(kv)

    def test_malformed(self, kv):
        kv.set_raw("members", "{not json")
        assert not manage_registry.run_validation(kv)

    def test_invalid_record(self, kv, capsys):
        kv.set("members", [{"prefix": "", "firstName": "ก", "lastName": "ข"}])
        assert not manage_registry.run_validation(kv)
        assert "#0 prefix" in capsys.readouterr().out

    def test_repeated_ids(self, kv):
        record = {"id": "a", "prefix": "นาย", "firstName": "ก", "lastName": "ข"}
        kv.set("members", [record, record])
        assert not manage_registry.run_validation(kv)


class TestValidationReadOnly:
    def test_missing_db_not_created(self, tmp_path, monkeypatch):
        db_path = tmp_path / "missing.duckdb"
        monkeypatch.setattr(manage_registry, "DB_PATH", str(db_path))
        monkeypatch.setattr("app.repositories.db.DB_PATH", str(db_path))

        assert manage_registry.run_validation_readonly()
        assert not db_path.exists()

    def test_existing_db(self, tmp_path, monkeypatch):
        db_path = tmp_path / "registry.duckdb"
        conn = duckdb.connect(str(db_path))
        init_tables(conn)
        conn.execute("INSERT INTO kv_store (key, data, updated_at) VALUES ('members', '[1]', now())")
        conn.close()
        monkeypatch.setattr(manage_registry, "DB_PATH", str(db_path))
        monkeypatch.setattr("app.repositories.db.DB_PATH", str(db_path))

        assert not manage_registry.run_validation_readonly()
