"""
数据库连接管理 - 统一管理数据库引擎
"""
from pathlib import Path

from sqlalchemy import event
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import StaticPool
from sqlmodel import create_engine

from edu_portal.core.config import get_settings


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    # SQLite 默认不校验外键
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_db_engine(database_url: str, echo: bool = False) -> Engine:
    """
    创建数据库引擎

    SQLite 下开启外键约束；文件库会自动创建所在目录，内存库使用 StaticPool 共享同一连接
    """
    url = make_url(database_url)
    if not url.drivername.startswith("sqlite"):
        return create_engine(database_url, echo=echo)

    kwargs = {"connect_args": {"check_same_thread": False}}
    if url.database in (None, "", ":memory:"):
        kwargs["poolclass"] = StaticPool
    else:
        Path(url.database).parent.mkdir(parents=True, exist_ok=True)

    engine = create_engine(database_url, echo=echo, **kwargs)
    event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine


# 创建全局数据库引擎
_settings = get_settings()
engine = create_db_engine(_settings.database_url)

__all__ = ["engine", "create_db_engine"]
