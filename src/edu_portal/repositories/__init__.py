"""
数据访问层
"""
from .category_repo import CategoryRepo
from .material_repo import MaterialFilter, MaterialRepo

__all__ = ["CategoryRepo", "MaterialFilter", "MaterialRepo"]
