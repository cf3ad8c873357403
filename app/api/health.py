# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
from datetime import datetime, timezone
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession
from app.api.deps import get_db
from app.core.errors import DatastoreError
from app.services import chaves as chaves_service

"""
Health check.


- `GET /health` executa `SELECT 1` no banco.
- 200 `{status: "ok", timestamp}`; em falha 500 `{status: "error", message}`.
"""

router = APIRouter(tags=["Health"])

@router.get("/health", summary="Verificar conexão com o banco")
async def health(db: AsyncSession = Depends(get_db)):
    try:
        await chaves_service.ping(db)
    except DatastoreError as e:
        return JSONResponse(status_code=500, content={"status": "error", "message": e.message})
    timestamp = datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
    return {"status": "ok", "timestamp": timestamp}
