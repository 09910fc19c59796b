"""
展示适配 - 把联表查询结果整理成接口返回对象
"""
import json
from typing import Iterable, Optional, Union

from edu_portal.core.exceptions import StoreError
from edu_portal.models.category import Category
from edu_portal.models.material import Material


def encode_tags(tags: list[str]) -> str:
    """标签列表 -> JSON 数组字符串"""
    return json.dumps(list(tags), ensure_ascii=False)


def decode_tags(raw: Optional[str]) -> list[str]:
    """
    JSON 数组字符串 -> 标签列表

    空值返回 []；内容损坏时抛出 StoreError，不做静默兜底
    """
    if raw is None or raw == "":
        return []
    try:
        value = json.loads(raw)
    except json.JSONDecodeError as e:
        raise StoreError(f"标签数据损坏: {raw[:100]!r}") from e
    if not isinstance(value, list) or not all(isinstance(tag, str) for tag in value):
        raise StoreError(f"标签数据不是字符串数组: {raw[:100]!r}")
    return value


def parse_tag_input(tags: Union[str, Iterable[str], None]) -> list[str]:
    """
    解析调用方提交的标签

    支持逗号分隔的文本或字符串数组，去除首尾空白并丢弃空项，保留顺序
    """
    if tags is None:
        return []
    items = tags.split(",") if isinstance(tags, str) else tags
    return [item.strip() for item in items if item and item.strip()]


def category_to_dict(category: Category) -> dict:
    return {
        "id": category.id,
        "name": category.name,
        "description": category.description,
        "icon": category.icon,
        "color": category.color,
    }


def material_to_dict(material: Material, category: Category) -> dict:
    """联表行 -> 接口对象（tags 解码，分类字段取当前值）"""
    return {
        "id": material.id,
        "title": material.title,
        "description": material.description,
        "category_id": material.category_id,
        "type": material.type,
        "file_url": material.file_url,
        "file_type": material.file_type,
        "file_size": material.file_size,
        "tags": decode_tags(material.tags),
        "keywords": material.keywords,
        "created_at": material.created_at.isoformat(),
        "category_name": category.name,
        "category_icon": category.icon,
        "category_color": category.color,
    }
