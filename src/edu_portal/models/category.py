"""
分类数据模型 - 预置的只读查找表
"""
from typing import Optional
from sqlmodel import SQLModel, Field


class Category(SQLModel, table=True):
    """
    资料分类

    由初始化脚本写入，应用运行期间只读
    """
    __tablename__ = "categories"

    # 主键
    id: Optional[int] = Field(default=None, primary_key=True)

    name: str = Field(description="分类名称")
    description: str = Field(default="", description="分类说明")

    # 展示用
    icon: str = Field(default="", description="图标（emoji）")
    color: str = Field(default="", description="CSS 颜色")
