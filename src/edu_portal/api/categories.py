"""
分类 API 路由
"""
from fastapi import APIRouter
from pydantic import BaseModel

from edu_portal.services.catalog_service import get_catalog_service

router = APIRouter(prefix="/categories", tags=["分类"])

# 服务实例
catalog_service = get_catalog_service()


class CategoryOut(BaseModel):
    """分类"""
    id: int
    name: str
    description: str
    icon: str
    color: str


class CategoryListResponse(BaseModel):
    success: bool = True
    data: list[CategoryOut]


@router.get("", response_model=CategoryListResponse)
def list_categories():
    """获取全部分类"""
    return CategoryListResponse(data=catalog_service.list_categories())
