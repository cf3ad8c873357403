# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
from typing import AsyncGenerator
from sqlalchemy.ext.asyncio import AsyncSession

"""
Dependências reutilizáveis da API.


- `get_db()` injeta `AsyncSession` do pool compartilhado (abre/fecha sessão corretamente).
- O engine é importado sob demanda para que os testes possam sobrescrever `get_db`.
"""

async def get_db() -> AsyncGenerator[AsyncSession, None]:
    from app.db.session import SessionLocal

    async with SessionLocal() as session:
        yield session
