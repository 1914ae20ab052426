from fastapi import APIRouter

from format_tiles.api.v1.endpoints import tiles

api_router = APIRouter()
api_router.include_router(tiles.router, prefix="/tiles", tags=["tiles"])
