# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
import json
import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.core.config import settings
from app.core.logging import setup_logging
from app.api.error_handlers import register_error_handlers
from app.api.router import router_api
from app.api import health

"""
API de códigos de liberação – FastAPI entrypoint.

- Cria a instância principal do FastAPI (title/version) e monta /api.
- Configura CORS conforme settings (vazio = qualquer origem).
- Registra os handlers de erro e expõe /health.
- `run()` sobe o uvicorn na porta `PORT` (default 3000).
"""

setup_logging()
log = logging.getLogger("app")

start_server = FastAPI(
    title=settings.APP_NAME,
    version="1.0.0",
)

register_error_handlers(start_server)

start_server.include_router(health.router)
start_server.include_router(router_api, prefix="/api")

def _normalize_cors(origins_setting):
    """
    Aceita: list[str], string JSON (ex: '["http://..."]') ou CSV (ex: 'http://...,http://...').
    Retorna sempre uma lista de strings (sem espaços) ou lista vazia.
    """
    if not origins_setting:
        return []
    if isinstance(origins_setting, (list, tuple)):
        return [o.strip() for o in origins_setting if o and o.strip()]
    if isinstance(origins_setting, str):
        s = origins_setting.strip()
        try:
            parsed = json.loads(s)
            if isinstance(parsed, list):
                return [o.strip() for o in parsed if o and o.strip()]
        except ValueError:
            pass
        return [o.strip() for o in s.split(",") if o and o.strip()]
    return []

origins = _normalize_cors(settings.CORS_ORIGINS) or ["*"]

start_server.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=origins != ["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

log.info("CORS habilitado para: %s", origins)


def run() -> None:
    import uvicorn

    log.info("Servidor rodando na porta %s", settings.PORT)
    uvicorn.run(start_server, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
