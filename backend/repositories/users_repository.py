from typing import Any, Dict, List, Optional

from sqlalchemy import delete, insert, select, update

from database import read_connection, transaction, usuarios


def fetch_users() -> List[Dict[str, Any]]:
    query = select(usuarios).order_by(usuarios.c.nombre, usuarios.c.id)
    with read_connection() as conn:
        return [dict(row) for row in conn.execute(query).mappings()]


def insert_user(nombre: str) -> Dict[str, Any]:
    statement = insert(usuarios).values(nombre=nombre).returning(usuarios)
    with transaction() as conn:
        return dict(conn.execute(statement).mappings().one())


def update_user(user_id: int, nombre: str) -> Optional[Dict[str, Any]]:
    statement = (
        update(usuarios)
        .where(usuarios.c.id == user_id)
        .values(nombre=nombre)
        .returning(usuarios)
    )
    with transaction() as conn:
        row = conn.execute(statement).mappings().first()
    return dict(row) if row else None


def delete_user(user_id: int) -> bool:
    statement = delete(usuarios).where(usuarios.c.id == user_id).returning(usuarios.c.id)
    with transaction() as conn:
        return conn.execute(statement).first() is not None
