from fastapi import APIRouter

from app.api.v1.endpoints import factors, graceful


api_router = APIRouter()

# 包含各模块的路由

api_router.include_router(factors.router, prefix="/factors", tags=["Factor"])
api_router.include_router(graceful.router, tags=["优雅停机"])
