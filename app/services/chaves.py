# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
from __future__ import annotations
import logging
from typing import Any, List, Optional
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.errors import ConflictError, DatastoreError, NotFoundError
from app.services.validation import validate_create, validate_update

"""
Acesso à tabela `codigosliberacao` com SQL textual.


- Cada função executa uma instrução (create executa duas: checagem + insert).
- Qualquer falha do driver vira `DatastoreError` (500), sem retry.
- A checagem de `codigo` duplicado não é transacional com o INSERT:
  dois creates concorrentes com o mesmo código podem passar ambos.
"""

log = logging.getLogger("chaves")

MUTABLE_FIELDS = ("emuso", "nome", "email", "chave1", "chave2", "chave3", "valorhash")


async def _execute(db: AsyncSession, op: str, sql: str, params: dict[str, Any] | None = None):
    try:
        return await db.execute(text(sql), params or {})
    except Exception as e:
        log.error("falha no banco em %s: %s", op, e)
        await db.rollback()
        raise DatastoreError.from_exception(e) from e


async def _commit(db: AsyncSession, op: str) -> None:
    try:
        await db.commit()
    except Exception as e:
        log.error("falha no commit em %s: %s", op, e)
        await db.rollback()
        raise DatastoreError.from_exception(e) from e


async def _fetch_all(db: AsyncSession, op: str, sql: str, params: dict[str, Any] | None = None) -> List[dict[str, Any]]:
    res = await _execute(db, op, sql, params)
    return [dict(r) for r in res.mappings().all()]


async def _fetch_one(db: AsyncSession, op: str, sql: str, params: dict[str, Any] | None = None) -> Optional[dict[str, Any]]:
    res = await _execute(db, op, sql, params)
    row = res.mappings().first()
    return dict(row) if row else None


async def ping(db: AsyncSession) -> None:
    await _execute(db, "ping", "SELECT 1")


async def list_all(db: AsyncSession) -> List[dict[str, Any]]:
    return await _fetch_all(db, "list_all", "SELECT * FROM codigosliberacao ORDER BY idcodigo")


async def get_by_id(db: AsyncSession, idcodigo: int) -> dict[str, Any]:
    row = await _fetch_one(
        db, "get_by_id",
        "SELECT * FROM codigosliberacao WHERE idcodigo = :idcodigo",
        {"idcodigo": idcodigo},
    )
    if not row:
        raise NotFoundError()
    return row


async def get_by_codigo(db: AsyncSession, codigo: str) -> dict[str, Any]:
    row = await _fetch_one(
        db, "get_by_codigo",
        "SELECT * FROM codigosliberacao WHERE codigo = :codigo",
        {"codigo": codigo},
    )
    if not row:
        raise NotFoundError()
    return row


async def list_by_email(db: AsyncSession, email: str) -> List[dict[str, Any]]:
    """Email não é único: devolve todos os registros que casam (404 se nenhum)."""
    rows = await _fetch_all(
        db, "list_by_email",
        "SELECT * FROM codigosliberacao WHERE email = :email ORDER BY idcodigo",
        {"email": email},
    )
    if not rows:
        raise NotFoundError()
    return rows


async def create(db: AsyncSession, data: dict[str, Any]) -> dict[str, Any]:
    validate_create(data)

    existing = await _fetch_one(
        db, "create",
        "SELECT idcodigo FROM codigosliberacao WHERE codigo = :codigo",
        {"codigo": data["codigo"]},
    )
    if existing:
        log.info("codigo duplicado: %s", data["codigo"])
        raise ConflictError("Código já existe")

    row = await _fetch_one(db, "create", """
        INSERT INTO codigosliberacao
            (idcodigo, codigo, emuso, nome, email, chave1, chave2, chave3, valorhash)
        VALUES
            (:idcodigo, :codigo, :emuso, :nome, :email, :chave1, :chave2, :chave3, :valorhash)
        RETURNING *
    """, {
        "idcodigo": data["idcodigo"],
        "codigo": data["codigo"],
        "emuso": data["emuso"],
        "nome": data["nome"],
        "email": data["email"],
        "chave1": data["chave1"],
        "chave2": data["chave2"],
        "chave3": data["chave3"],
        "valorhash": data["valorhash"],
    })
    await _commit(db, "create")
    log.info("registro criado: idcodigo=%s", row["idcodigo"])
    return row


async def update(db: AsyncSession, idcodigo: int, data: dict[str, Any]) -> dict[str, Any]:
    """Reescreve os seis campos mutáveis; `idcodigo` e `codigo` nunca mudam."""
    validate_update(data)

    params: dict[str, Any] = {name: data.get(name) for name in MUTABLE_FIELDS}
    params["idcodigo"] = idcodigo
    row = await _fetch_one(db, "update", """
        UPDATE codigosliberacao
        SET emuso = :emuso,
            nome = :nome,
            email = :email,
            chave1 = :chave1,
            chave2 = :chave2,
            chave3 = :chave3,
            valorhash = :valorhash
        WHERE idcodigo = :idcodigo
        RETURNING *
    """, params)
    if not row:
        await db.rollback()
        raise NotFoundError()
    await _commit(db, "update")
    return row


async def delete(db: AsyncSession, idcodigo: int) -> None:
    row = await _fetch_one(
        db, "delete",
        "DELETE FROM codigosliberacao WHERE idcodigo = :idcodigo RETURNING idcodigo",
        {"idcodigo": idcodigo},
    )
    if not row:
        await db.rollback()
        raise NotFoundError()
    await _commit(db, "delete")
    log.info("registro removido: idcodigo=%s", idcodigo)
