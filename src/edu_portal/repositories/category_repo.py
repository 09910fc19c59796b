"""
分类数据访问
"""
from __future__ import annotations

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, func, select

from edu_portal.core.exceptions import StoreError
from edu_portal.models.category import Category


class CategoryRepo:
    """分类表只读访问"""

    def __init__(self, engine: Engine):
        self.engine = engine

    def list(self) -> list[Category]:
        """按 id 升序返回全部分类"""
        try:
            with Session(self.engine) as session:
                return list(session.exec(select(Category).order_by(Category.id)).all())
        except SQLAlchemyError as e:
            raise StoreError(f"读取分类失败: {e}") from e

    def count(self) -> int:
        try:
            with Session(self.engine) as session:
                return session.exec(select(func.count()).select_from(Category)).one()
        except SQLAlchemyError as e:
            raise StoreError(f"统计分类失败: {e}") from e

    def add_all(self, categories: list[Category]) -> None:
        """写入分类（仅供初始化使用）"""
        try:
            with Session(self.engine) as session:
                session.add_all(categories)
                session.commit()
        except SQLAlchemyError as e:
            raise StoreError(f"写入分类失败: {e}") from e
