"""
数据模型模块
"""
from .category import Category
from .material import Material, MaterialType

__all__ = [
    "Category",
    "Material",
    "MaterialType",
]
