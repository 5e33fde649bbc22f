from fastapi import APIRouter

from swatches.api.v1.routes_palette import router as palette_router
from swatches.api.v1.routes_project import router as project_router


api_router = APIRouter()

api_router.include_router(project_router, prefix="/projects", tags=["projects"])
api_router.include_router(palette_router, prefix="/palettes", tags=["palettes"])
