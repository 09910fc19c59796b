"""
教学资料 API 路由
"""
from typing import Any, Optional

from fastapi import APIRouter, Query
from pydantic import BaseModel

from edu_portal.core import get_logger, get_settings
from edu_portal.services.catalog_service import get_catalog_service

logger = get_logger(__name__)
settings = get_settings()

router = APIRouter(prefix="/materials", tags=["教学资料"])

# 服务实例
catalog_service = get_catalog_service()


# ============ 请求/响应模型 ============

class CreateMaterialRequest(BaseModel):
    """
    添加资料请求

    字段不做类型约束，缺失与类型校验由服务层统一完成，
    保证 type=file 时始终返回“未实现”错误
    """
    title: Any = None
    description: Any = None
    category_id: Any = None
    type: Any = None
    file_url: Any = None
    # 浏览器端提交数组，也接受逗号分隔文本
    tags: Any = None


class MaterialOut(BaseModel):
    """资料（含联表分类字段）"""
    id: int
    title: str
    description: str
    category_id: int
    type: str
    file_url: Optional[str]
    file_type: Optional[str]
    file_size: Optional[int]
    tags: list[str]
    keywords: str
    created_at: str
    category_name: str
    category_icon: str
    category_color: str


class MaterialCreated(BaseModel):
    id: int
    title: str
    file_url: Optional[str]


class MaterialListResponse(BaseModel):
    success: bool = True
    data: list[MaterialOut]


class MaterialResponse(BaseModel):
    success: bool = True
    data: MaterialOut


class MaterialCreatedResponse(BaseModel):
    success: bool = True
    data: MaterialCreated


class MessageResponse(BaseModel):
    success: bool = True
    message: str


# ============ API 接口 ============

@router.get("", response_model=MaterialListResponse)
def list_materials(
    category: Optional[str] = None,
    search: Optional[str] = None,
    limit: Optional[int] = Query(default=None, ge=1, le=settings.max_page_limit),
    offset: int = Query(default=0, ge=0),
):
    """获取资料列表"""
    materials = catalog_service.list_materials(
        category=category,
        search=search,
        limit=limit,
        offset=offset,
    )
    return MaterialListResponse(data=materials)


@router.get("/{material_id}", response_model=MaterialResponse)
def get_material(material_id: int):
    """获取资料详情"""
    return MaterialResponse(data=catalog_service.get_material(material_id))


@router.post("", response_model=MaterialCreatedResponse)
def create_material(request: CreateMaterialRequest):
    """添加资料"""
    created = catalog_service.create_material(
        title=request.title,
        description=request.description,
        category_id=request.category_id,
        type=request.type,
        file_url=request.file_url,
        tags=request.tags,
    )
    return MaterialCreatedResponse(data=created)


@router.delete("/{material_id}", response_model=MessageResponse)
def delete_material(material_id: int):
    """删除资料"""
    catalog_service.delete_material(material_id)
    return MessageResponse(message="Material deleted successfully")
