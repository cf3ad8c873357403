# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
from __future__ import annotations
from typing import Any, List, Optional
from fastapi import APIRouter, Depends, Path
from pydantic import BaseModel, field_validator, model_validator
from sqlalchemy.ext.asyncio import AsyncSession
from app.api.deps import get_db
from app.services import chaves as chaves_service

"""
CRUD de códigos de liberação (`/api/chaves`).


- `GET /` lista tudo ordenado por idcodigo.
- `GET /{idcodigo}`, `GET /codigo/{codigo}` detalham um registro; `GET /email/{email}` lista.
- `POST /` cria (todos os campos obrigatórios, 409 se o código já existe).
- `PUT /{idcodigo}` reescreve os campos mutáveis; `DELETE /{idcodigo}` remove.
- Erros de negócio/banco sobem como `ApiError` e viram JSON nos handlers globais.
"""

router = APIRouter()

# Schemas ChaveCreateIn/ChaveUpdateIn/ChaveOut/MensagemOut
# Campos sem tipo de propósito: presença, email e emuso são checados em
# app.services.validation para responder com as mensagens da API em vez do 422 padrão.
class _BodyIn(BaseModel):
    @model_validator(mode="before")
    @classmethod
    def _non_object_as_empty(cls, data):
        # corpo que não é objeto JSON ([], 5, "x") equivale a todos os campos ausentes
        return data if isinstance(data, dict) else {}

class ChaveCreateIn(_BodyIn):
    idcodigo: Any = None
    codigo: Any = None
    emuso: Any = None
    nome: Any = None
    email: Any = None
    chave1: Any = None
    chave2: Any = None
    chave3: Any = None
    valorhash: Any = None

    @field_validator("idcodigo")
    @classmethod
    def _numeric_string_to_int(cls, v):
        if isinstance(v, str) and v.strip().isdigit():
            return int(v.strip())
        return v

    model_config = {
        "json_schema_extra": {
            "example": {
                "idcodigo": 1,
                "codigo": "LIB-2025-0001",
                "emuso": "N",
                "nome": "Estação Almoxarifado",
                "email": "suporte@empresa.com.br",
                "chave1": "A1B2C3",
                "chave2": "D4E5F6",
                "chave3": "G7H8I9",
                "valorhash": "5f4dcc3b5aa765d61d8327deb882cf99",
            }
        }
    }

class ChaveUpdateIn(_BodyIn):
    emuso: Any = None
    nome: Any = None
    email: Any = None
    chave1: Any = None
    chave2: Any = None
    chave3: Any = None
    valorhash: Any = None

class ChaveOut(BaseModel):
    idcodigo: int
    codigo: Optional[str] = None
    emuso: Optional[str] = None
    nome: Optional[str] = None
    email: Optional[str] = None
    chave1: Optional[str] = None
    chave2: Optional[str] = None
    chave3: Optional[str] = None
    valorhash: Optional[str] = None

class MensagemOut(BaseModel):
    message: str


@router.get("", response_model=List[ChaveOut], summary="Listar todos os códigos")
async def list_chaves(db: AsyncSession = Depends(get_db)) -> List[dict[str, Any]]:
    return await chaves_service.list_all(db)


@router.get("/codigo/{codigo}", response_model=ChaveOut, summary="Buscar por código")
async def get_chave_by_codigo(
    codigo: str = Path(..., description="Código de liberação"),
    db: AsyncSession = Depends(get_db),
) -> dict[str, Any]:
    return await chaves_service.get_by_codigo(db, codigo)


@router.get("/email/{email}", response_model=List[ChaveOut], summary="Buscar por email")
async def list_chaves_by_email(
    email: str = Path(..., description="Email de contato"),
    db: AsyncSession = Depends(get_db),
) -> List[dict[str, Any]]:
    return await chaves_service.list_by_email(db, email)


@router.get("/{idcodigo}", response_model=ChaveOut, summary="Buscar por idcodigo")
async def get_chave(
    idcodigo: int = Path(..., description="Identificador numérico"),
    db: AsyncSession = Depends(get_db),
) -> dict[str, Any]:
    return await chaves_service.get_by_id(db, idcodigo)


@router.post("", response_model=ChaveOut, status_code=201, summary="Criar código de liberação")
async def create_chave(
    payload: Optional[ChaveCreateIn] = None,
    db: AsyncSession = Depends(get_db),
) -> dict[str, Any]:
    data = payload.model_dump() if payload else {}
    return await chaves_service.create(db, data)


@router.put("/{idcodigo}", response_model=ChaveOut, summary="Atualizar código de liberação")
async def update_chave(
    payload: Optional[ChaveUpdateIn] = None,
    idcodigo: int = Path(..., description="Identificador numérico"),
    db: AsyncSession = Depends(get_db),
) -> dict[str, Any]:
    data = payload.model_dump() if payload else {}
    return await chaves_service.update(db, idcodigo, data)


@router.delete("/{idcodigo}", response_model=MensagemOut, summary="Remover código de liberação")
async def delete_chave(
    idcodigo: int = Path(..., description="Identificador numérico"),
    db: AsyncSession = Depends(get_db),
) -> dict[str, str]:
    await chaves_service.delete(db, idcodigo)
    return {"message": "Registro removido com sucesso"}
