"""
资料数据访问
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from sqlalchemy import or_
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session, func, select

from edu_portal.core.exceptions import StoreError, ValidationError
from edu_portal.models.category import Category
from edu_portal.models.material import Material

# 不做分类筛选的哨兵值
ALL_CATEGORIES = "all"

MaterialRow = tuple[Material, Category]


@dataclass
class MaterialFilter:
    """列表查询条件"""
    category_id: Optional[str] = None
    search_term: Optional[str] = None
    limit: int = 20
    offset: int = 0


class MaterialRepo:
    """
    资料表访问

    只负责持久化，字段校验由 CatalogService 完成；
    唯一的完整性约束是 category_id 外键
    """

    def __init__(self, engine: Engine):
        self.engine = engine

    def _joined(self):
        return select(Material, Category).join(Category, Material.category_id == Category.id)

    def list(self, criteria: MaterialFilter) -> list[MaterialRow]:
        """
        按创建时间倒序查询资料（联表分类）

        Args:
            criteria: 分类 / 关键字 / 分页条件

        Returns:
            [(Material, Category), ...]
        """
        statement = self._joined()

        if criteria.category_id is not None and criteria.category_id != ALL_CATEGORIES:
            try:
                category_id = int(criteria.category_id)
            except (TypeError, ValueError):
                raise ValidationError("Invalid category")
            statement = statement.where(Material.category_id == category_id)

        term = (criteria.search_term or "").strip()
        if term:
            # 匹配语义沿用存储引擎的 LIKE（SQLite 下 ASCII 不区分大小写）
            statement = statement.where(
                or_(
                    Material.title.contains(term, autoescape=True),
                    Material.description.contains(term, autoescape=True),
                    Material.tags.contains(term, autoescape=True),
                )
            )

        statement = (
            statement.order_by(Material.created_at.desc(), Material.id.desc())
            .offset(criteria.offset)
            .limit(criteria.limit)
        )

        try:
            with Session(self.engine) as session:
                return [(material, category) for material, category in session.exec(statement).all()]
        except SQLAlchemyError as e:
            raise StoreError(f"查询资料列表失败: {e}") from e

    def get(self, material_id: int) -> Optional[MaterialRow]:
        """获取单条资料，不存在时返回 None"""
        statement = self._joined().where(Material.id == material_id)
        try:
            with Session(self.engine) as session:
                row = session.exec(statement).first()
        except SQLAlchemyError as e:
            raise StoreError(f"查询资料失败: id={material_id}, {e}") from e
        if row is None:
            return None
        material, category = row
        return material, category

    def create(self, material: Material) -> int:
        """
        原样写入一条资料

        Returns:
            新分配的 id

        Raises:
            ValidationError: category_id 指向不存在的分类
            StoreError: 其它数据库错误
        """
        try:
            with Session(self.engine) as session:
                session.add(material)
                session.commit()
                session.refresh(material)
                return material.id
        except IntegrityError as e:
            raise ValidationError("Category does not exist") from e
        except SQLAlchemyError as e:
            raise StoreError(f"写入资料失败: {e}") from e

    def delete(self, material_id: int) -> bool:
        """删除资料，没有匹配行时返回 False"""
        try:
            with Session(self.engine) as session:
                material = session.get(Material, material_id)
                if not material:
                    return False
                session.delete(material)
                session.commit()
                return True
        except SQLAlchemyError as e:
            raise StoreError(f"删除资料失败: id={material_id}, {e}") from e

    def count(self) -> int:
        try:
            with Session(self.engine) as session:
                return session.exec(select(func.count()).select_from(Material)).one()
        except SQLAlchemyError as e:
            raise StoreError(f"统计资料失败: {e}") from e
