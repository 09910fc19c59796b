"""
创建数据库表并写入默认分类
"""
from sqlmodel import SQLModel
from edu_portal.models import Category, Material  # noqa: F401
from edu_portal.core import get_settings
from edu_portal.core.database import create_db_engine
from edu_portal.repositories import CategoryRepo
from edu_portal.services.seed import seed_categories

settings = get_settings()

if __name__ == "__main__":
    # 创建引擎
    engine = create_db_engine(settings.database_url, echo=True)

    # 创建所有表
    SQLModel.metadata.create_all(engine)
    inserted = seed_categories(CategoryRepo(engine))

    print(f"✅ 数据库表创建完成，写入分类 {inserted} 条")
