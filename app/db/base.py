# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
from sqlalchemy import Column, Integer, MetaData, String, Table

"""
Descrição (SQLAlchemy Core) da tabela `codigosliberacao`.


- A tabela é externa e já existe no banco; a API não cria nem migra schema.
- Os endpoints usam SQL textual; este `Table` documenta as colunas e é usado
  pelos testes para montar o schema no SQLite.
"""

metadata = MetaData()

codigos_liberacao = Table(
    "codigosliberacao",
    metadata,
    Column("idcodigo", Integer, primary_key=True, autoincrement=False),
    Column("codigo", String(100), nullable=False),
    Column("emuso", String(1)),
    Column("nome", String(200)),
    Column("email", String(200)),
    Column("chave1", String(500)),
    Column("chave2", String(500)),
    Column("chave3", String(500)),
    Column("valorhash", String(500)),
)
