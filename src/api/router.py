from fastapi import APIRouter

from src.api import health
from src.api.routes import files

api_router = APIRouter()

api_router.include_router(health.router)

api_router.include_router(files.router)
