from fastapi import APIRouter

from app.api.v1.endpoints import colors, imports, records

api_router = APIRouter()

api_router.include_router(records.router, tags=["Records"])
api_router.include_router(colors.router, tags=["Colors"])
api_router.include_router(imports.router, tags=["Import"])
