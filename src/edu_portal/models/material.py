"""
教学资料数据模型
"""
from datetime import datetime, timezone
from enum import Enum
from typing import Optional
from sqlalchemy import Column, DateTime
from sqlmodel import SQLModel, Field


class MaterialType(str, Enum):
    """资料类型"""
    URL = "url"
    FILE = "file"


class Material(SQLModel, table=True):
    """
    共享的教学资料

    tags 以 JSON 数组字符串存储，读取时解码为列表；
    分类名称/图标/颜色不冗余存储，查询时联表获取
    """
    __tablename__ = "materials"

    # 主键
    id: Optional[int] = Field(default=None, primary_key=True)

    # 内容
    title: str = Field(description="资料标题")
    description: str = Field(default="", description="资料说明")
    category_id: int = Field(foreign_key="categories.id", index=True, description="所属分类")

    # 资料来源
    type: str = Field(description="资料类型: url/file，取值见 MaterialType")
    file_url: Optional[str] = Field(default=None, description="资料链接")
    file_type: Optional[str] = Field(default=None, description="链接分类，如 Google Slides")
    file_size: Optional[int] = Field(default=0, description="文件大小（字节），URL 类型为 0")

    # 检索
    tags: Optional[str] = Field(default=None, description="标签（JSON 数组）")
    keywords: str = Field(default="", description="检索文本：标题 + 说明 + 标签")

    # 时间戳
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        sa_column=Column(DateTime(timezone=True), index=True, nullable=False),
        description="创建时间（UTC）",
    )
