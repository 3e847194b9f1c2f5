import logging

import pytest

import sqlgen
from sqlgen import Dialect, InvalidDialect, Session
from sqlgen.dialects import registry


@pytest.mark.parametrize("name", ["postgres", "mysql", "mssql"])
def test_use_sets_query_dialect(name):
    sqlgen.use(name)
    q = sqlgen.select("table", ["id"])
    assert q.dialect == name
    assert q.dialect is Dialect(name)


def test_dialect_is_captured_at_construction():
    sqlgen.use("mysql")
    q = sqlgen.select("t", "id").where({"id": 1})
    sqlgen.use("postgres")
    assert q.dialect == "mysql"
    assert q.text == "SELECT id FROM t WHERE id = ?"


def test_use_is_case_insensitive():
    sqlgen.use(" MySQL ")
    assert sqlgen.current() is Dialect.MYSQL


def test_unknown_dialect_leaves_state_unchanged():
    sqlgen.use("mssql")
    with pytest.raises(InvalidDialect, match="oracle"):
        sqlgen.use("oracle")
    with pytest.raises(InvalidDialect):
        sqlgen.use(None)
    assert sqlgen.current() is Dialect.MSSQL


def test_mysql_placeholders():
    sqlgen.use("mysql")
    q = sqlgen.select("t", "id").where({"id": 2, "name": "x"})
    assert q.text == "SELECT id FROM t WHERE (id = ? AND name = ?)"
    assert q.values == [2, "x"]


def test_mssql_placeholders():
    sqlgen.use("mssql")
    q = sqlgen.deletes("t").where({"id": 2}).or_({"id": 3})
    assert q.text == "DELETE FROM t WHERE id = @p1 OR id = @p2"
    assert q.values == [2, 3]


def test_registry_lookup():
    assert set(registry.available()) == {Dialect.POSTGRES, Dialect.MYSQL, Dialect.MSSQL}
    assert registry.get("mysql").paramstyle == "qmark"
    with pytest.raises(InvalidDialect):
        registry.get("sqlite")


def test_use_logs_switch(caplog):
    with caplog.at_level(logging.INFO, logger="sqlgen.dialects.registry"):
        sqlgen.use("mysql")
    assert "postgres to mysql" in caplog.text


def test_session_ignores_process_dialect():
    sqlgen.use("mysql")
    pg = Session("postgres")
    sqlgen.use("mssql")
    q = pg.select("t", "id").where({"id": 1})
    assert q.dialect == "postgres"
    assert q.text == "SELECT id FROM t WHERE id = $1"
    assert pg.insert("t", {"a": 1}).dialect == "postgres"
    assert pg.update("t", {"a": 1}).dialect == "postgres"
    assert pg.deletes("t").dialect == "postgres"


def test_session_defaults_to_current_dialect():
    sqlgen.use("mssql")
    assert Session().dialect is Dialect.MSSQL


def test_session_rejects_unknown_dialect():
    with pytest.raises(InvalidDialect):
        Session("db2")


def test_render_result_metadata():
    r = sqlgen.select("t", "id").where({"id": 1}).render()
    assert r.sql == "SELECT id FROM t WHERE id = $1"
    assert r.params == [1]
    assert r.metadata == {"dialect": "postgres", "paramstyle": "numeric", "kind": "SELECT"}


def test_to_dict_and_str():
    q = Session("mysql").update("t", {"a": "b"})
    assert q.to_dict() == {"text": "UPDATE t SET a='b'", "values": ["b"], "dialect": "mysql"}
    assert str(q) == "UPDATE t SET a='b'"
