"""
API 路由模块
"""
from fastapi import APIRouter
from .categories import router as categories_router
from .materials import router as materials_router

# 创建主路由
api_router = APIRouter(prefix="/api")

api_router.include_router(categories_router)
api_router.include_router(materials_router)

__all__ = ["api_router"]
