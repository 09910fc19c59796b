"""
测试配置
"""
import os
import sys
import tempfile

import pytest

# 添加 src 目录到 Python 路径
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

# 设置测试环境变量（必须在导入 edu_portal 之前）
_tmp_dir = tempfile.mkdtemp(prefix="edu_portal_test_")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_tmp_dir, 'test_edu_portal.db')}"
os.environ["LOG_LEVEL"] = "WARNING"


@pytest.fixture
def test_db():
    """内存数据库 fixture（已写入默认分类）"""
    from sqlmodel import SQLModel
    from edu_portal.core.database import create_db_engine
    from edu_portal.models import Category, Material  # noqa: F401
    from edu_portal.repositories import CategoryRepo
    from edu_portal.services.seed import seed_categories

    engine = create_db_engine("sqlite://")
    SQLModel.metadata.create_all(engine)
    seed_categories(CategoryRepo(engine))
    yield engine
    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def service(test_db):
    from edu_portal.services.catalog_service import CatalogService

    return CatalogService(engine=test_db)


@pytest.fixture
def client():
    """API 测试客户端，每个用例重建数据表"""
    from fastapi.testclient import TestClient
    from sqlmodel import SQLModel
    from edu_portal.core.database import engine
    from edu_portal.main import app

    SQLModel.metadata.drop_all(engine)
    # 进入 with 块触发 lifespan：建表 + 写入分类
    with TestClient(app) as test_client:
        yield test_client
    SQLModel.metadata.drop_all(engine)
