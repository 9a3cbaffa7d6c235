from typing import List

from fastapi import APIRouter

from config import settings
from schemas import MessageResponse, UsuarioPayload, UsuarioResponse
from services import users_service

router = APIRouter(prefix=f"{settings.api_prefix}/usuarios", tags=["usuarios"])


@router.get("", response_model=List[UsuarioResponse])
async def list_users() -> List[UsuarioResponse]:
    return await users_service.list_users()


@router.post("", response_model=UsuarioResponse)
async def create_user(payload: UsuarioPayload) -> UsuarioResponse:
    return await users_service.create_user(payload.nombre)


@router.put("/{user_id}", response_model=UsuarioResponse)
async def rename_user(user_id: int, payload: UsuarioPayload) -> UsuarioResponse:
    return await users_service.rename_user(user_id, payload.nombre)


@router.delete("/{user_id}", response_model=MessageResponse)
async def delete_user(user_id: int) -> MessageResponse:
    await users_service.delete_user(user_id)
    return MessageResponse(message="Usuario eliminado exitosamente")
