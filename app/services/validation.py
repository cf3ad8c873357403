# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
from __future__ import annotations
import math
import re
from typing import Any, Mapping
from app.core.errors import ValidationError

"""
Regras de validação dos payloads de códigos de liberação.


- `is_valid_email()` checagem sintática (sem DNS), nunca levanta exceção.
- `is_absent()` "falsy" no sentido do cliente JS: None, False, 0, NaN e "".
- `validate_create()` / `validate_update()` aplicam a ordem de checagens;
  a primeira falha levanta `ValidationError` e interrompe o resto.
"""

EMAIL_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")

EMUSO_VALUES = ("S", "N")

REQUIRED_FIELDS = (
    "idcodigo", "codigo", "emuso", "nome", "email",
    "chave1", "chave2", "chave3", "valorhash",
)

MSG_CAMPOS_OBRIGATORIOS = "Todos os campos são obrigatórios"
MSG_EMAIL_INVALIDO = "Email inválido"
MSG_EMUSO_INVALIDO = "'emuso' deve ser 'S' ou 'N'"


def is_valid_email(email: Any) -> bool:
    if not isinstance(email, str):
        return False
    return EMAIL_RE.fullmatch(email) is not None


def is_absent(value: Any) -> bool:
    # Listas e objetos vazios contam como presentes
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (int, float)):
        return value == 0 or (isinstance(value, float) and math.isnan(value))
    return False


def _check_email_and_emuso(data: Mapping[str, Any]) -> None:
    if not is_valid_email(data.get("email")):
        raise ValidationError(MSG_EMAIL_INVALIDO)
    if data.get("emuso") not in EMUSO_VALUES:
        raise ValidationError(MSG_EMUSO_INVALIDO)


def validate_create(data: Mapping[str, Any]) -> None:
    if any(is_absent(data.get(name)) for name in REQUIRED_FIELDS):
        raise ValidationError(MSG_CAMPOS_OBRIGATORIOS)
    _check_email_and_emuso(data)


def validate_update(data: Mapping[str, Any]) -> None:
    """Sem checagem de presença: campos ausentes seguem como NULL para o UPDATE."""
    _check_email_and_emuso(data)
