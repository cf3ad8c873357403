# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
import logging
from app.core.config import settings

"""
Configuração de logging (stdlib).


- Nível vem de `settings.LOG_LEVEL`.
- Um único handler de stream no root, formato com timestamp e nome do logger.
"""

LOG_FORMAT = "%(asctime)s %(levelname)-7s [%(name)s] %(message)s"

def setup_logging(level: str | None = None) -> None:
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format=LOG_FORMAT,
    )
