# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
from fastapi import APIRouter
from app.api import chaves

"""
Roteador principal da API.


- Agrega os sub-routers; importado por `main.py` como `/api`.
"""

router_api = APIRouter()

# Sub-rotas
router_api.include_router(chaves.router, prefix="/chaves", tags=["chaves"])
