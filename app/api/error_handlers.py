# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
import logging
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from app.core.errors import ApiError

"""
Handlers globais de exceção.


- `ApiError` (e subclasses) → `exc.http_status` + `exc.to_response()`.
- `RequestValidationError` (JSON inválido, tipos errados, id não numérico) → 400.
"""

log = logging.getLogger("app")

MSG_REQUISICAO_INVALIDA = "Requisição inválida"


def register_error_handlers(app: FastAPI) -> None:

    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError):
        if exc.http_status >= 500:
            log.error("%s %s -> %s: %s", request.method, request.url.path, exc.http_status, exc.message)
        else:
            log.info("%s %s -> %s: %s", request.method, request.url.path, exc.http_status, exc.message)
        return JSONResponse(status_code=exc.http_status, content=exc.to_response())

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        log.warning("requisição inválida em %s: %s", request.url.path, exc.errors())
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "error": MSG_REQUISICAO_INVALIDA,
                "detalhes": [{"loc": list(e.get("loc", ())), "msg": e.get("msg")} for e in exc.errors()],
            },
        )
