"""
FastAPI 应用入口 - 健康教育资料共享门户
"""
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlmodel import SQLModel

from edu_portal.core import setup_logging, get_settings, get_logger
from edu_portal.core.database import engine
from edu_portal.api import api_router
from edu_portal.api.errors import register_exception_handlers
from edu_portal.api.middleware import AccessLogMiddleware
from edu_portal.repositories import CategoryRepo
from edu_portal.services.seed import seed_categories

# 初始化日志
settings = get_settings()
setup_logging(settings.log_level)

logger = get_logger(__name__)


def init_db() -> None:
    """建表并写入默认分类"""
    if settings.auto_create_tables:
        SQLModel.metadata.create_all(engine)
    if settings.seed_categories:
        seed_categories(CategoryRepo(engine))


@asynccontextmanager
async def lifespan(app: FastAPI):
    """应用生命周期管理"""
    logger.info("🏃 健康教育资料门户 API 启动中...")
    init_db()
    yield
    logger.info("👋 健康教育资料门户 API 关闭")


# 创建 FastAPI 应用
app = FastAPI(
    title="健康教育资料门户 API",
    description="供体育/保健教师浏览、检索、分享教学资料的后端服务",
    version="0.1.0",
    debug=settings.debug,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials="*" not in settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(AccessLogMiddleware)

register_exception_handlers(app)

# 注册 API 路由
app.include_router(api_router)


@app.get("/")
async def root():
    """健康检查"""
    return {"status": "ok", "message": "健康教育资料门户 API 运行中"}


@app.get("/health")
async def health():
    """健康检查"""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn

    logger.info(f"启动服务: http://{settings.api_host}:{settings.api_port}")
    uvicorn.run(
        "edu_portal.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug,
    )
