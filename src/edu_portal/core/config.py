"""
配置管理 - 从 .env 与环境变量加载
"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """应用配置"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # API 配置
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    debug: bool = False

    # CORS（仅作用于 /api 路由）
    cors_origins: list[str] = ["*"]

    # 数据库配置
    database_url: str = "sqlite:///./data/edu_portal.db"
    auto_create_tables: bool = True
    seed_categories: bool = True

    # 分页
    default_page_limit: int = 20
    max_page_limit: int = 100

    # 日志配置
    log_level: str = "INFO"


@lru_cache()
def get_settings() -> Settings:
    """获取配置单例"""
    return Settings()
