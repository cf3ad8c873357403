# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
from __future__ import annotations
from typing import Any, Optional

"""
Hierarquia de erros da API.


- `ApiError` é a base: cada erro conhece seu status HTTP e o corpo JSON.
- 4xx respondem `{"error": <mensagem>}`.
- `DatastoreError` (500) responde `{"error", "message", "code"}`; `code` é o
  SQLSTATE do driver e some do corpo quando o driver não informa nenhum.
"""

REGISTRO_NAO_ENCONTRADO = "Registro não encontrado"
ERRO_INTERNO = "Erro interno do servidor"


class ApiError(Exception):
    http_status: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_response(self) -> dict[str, Any]:
        return {"error": self.message}


class ValidationError(ApiError):
    """Entrada ausente ou malformada."""
    http_status = 400


class NotFoundError(ApiError):
    http_status = 404

    def __init__(self, message: str = REGISTRO_NAO_ENCONTRADO):
        super().__init__(message)


class ConflictError(ApiError):
    http_status = 409


class DatastoreError(ApiError):
    """Falha em qualquer consulta ao banco; carrega mensagem e SQLSTATE do driver."""
    http_status = 500

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message)
        self.code = code

    @classmethod
    def from_exception(cls, exc: BaseException) -> "DatastoreError":
        # SQLAlchemy embrulha o erro do driver em `.orig`
        orig = getattr(exc, "orig", None) or exc
        code = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
        # o adaptador asyncpg encadeia a exceção original do driver
        source = orig.__cause__ if orig.__cause__ is not None else orig
        return cls(str(source), code)

    def to_response(self) -> dict[str, Any]:
        body: dict[str, Any] = {"error": ERRO_INTERNO, "message": self.message}
        if self.code is not None:
            body["code"] = self.code
        return body
