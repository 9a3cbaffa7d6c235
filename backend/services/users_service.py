import logging
from typing import List, Optional

from errors import NotFoundError, ValidationError
from repositories import users_repository
from schemas import UsuarioResponse
from services.store_calls import call_store

logger = logging.getLogger("pedidos-api")

USER = "Usuario"


def _clean_name(nombre: Optional[str]) -> str:
    if not nombre or not nombre.strip():
        raise ValidationError("El nombre es obligatorio")
    return nombre.strip()


async def list_users() -> List[UsuarioResponse]:
    rows = await call_store("Error obteniendo usuarios", users_repository.fetch_users)
    return [UsuarioResponse(**row) for row in rows]


async def create_user(nombre: Optional[str]) -> UsuarioResponse:
    clean = _clean_name(nombre)
    row = await call_store("Error creando usuario", users_repository.insert_user, clean)
    logger.info("Created user %s", row["id"])
    return UsuarioResponse(**row)


async def rename_user(user_id: int, nombre: Optional[str]) -> UsuarioResponse:
    clean = _clean_name(nombre)
    row = await call_store("Error actualizando usuario", users_repository.update_user, user_id, clean)
    if row is None:
        raise NotFoundError(USER)
    return UsuarioResponse(**row)


async def delete_user(user_id: int) -> None:
    deleted = await call_store("Error eliminando usuario", users_repository.delete_user, user_id)
    if not deleted:
        raise NotFoundError(USER)
