import pytest
from sqlalchemy import insert, select

from database import read_connection, transaction, usuarios


def _names():
    with read_connection() as conn:
        return [row.nombre for row in conn.execute(select(usuarios.c.nombre))]


def test_transaction_commits_on_success():
    with transaction() as conn:
        conn.execute(insert(usuarios).values(nombre="Ana"))
        conn.execute(insert(usuarios).values(nombre="Bruno"))

    assert sorted(_names()) == ["Ana", "Bruno"]


def test_transaction_rolls_back_every_statement_on_error():
    with pytest.raises(RuntimeError):
        with transaction() as conn:
            conn.execute(insert(usuarios).values(nombre="Ana"))
            raise RuntimeError("boom")

    assert _names() == []
