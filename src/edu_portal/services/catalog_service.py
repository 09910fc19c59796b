"""
资料目录服务 - 校验输入、识别链接类型并调用数据访问层
"""
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Any, Iterable, Optional, Union

from sqlalchemy.engine import Engine

from edu_portal.core import get_logger
from edu_portal.core.exceptions import (
    NotFoundError,
    StoreError,
    UnsupportedOperationError,
    ValidationError,
)
from edu_portal.models.material import Material, MaterialType
from edu_portal.repositories import CategoryRepo, MaterialFilter, MaterialRepo
from edu_portal.services.presenter import (
    category_to_dict,
    encode_tags,
    material_to_dict,
    parse_tag_input,
)
from edu_portal.services.url_classifier import classify_url, is_valid_url

logger = get_logger(__name__)

MISSING_FIELDS_MESSAGE = "Required fields are missing"
INVALID_URL_MESSAGE = "Invalid URL format"
FILE_UPLOAD_MESSAGE = "File upload feature is not implemented. Please use URL sharing."


@contextmanager
def _store_failure(message: str):
    """把 StoreError 换成对外的通用描述，原因写日志"""
    try:
        yield
    except StoreError as e:
        logger.error(f"{message}: {e}", exc_info=True)
        raise StoreError(message) from e


def build_keywords(title: str, description: str, tags: list[str]) -> str:
    """标题、说明、标签拼接为检索文本，空字段跳过"""
    return " ".join(part for part in [title, description, *tags] if part)


def _optional_text(value: Any, field: str) -> Optional[str]:
    """None 原样返回，非字符串视为格式错误"""
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(f"Invalid {field}")
    return value


def _category_id(value: Any) -> Optional[int]:
    """接受整数或数字字符串；空字符串（未选择分类）视为缺失"""
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    if isinstance(value, bool):
        raise ValidationError("Invalid category")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            raise ValidationError("Invalid category")
    raise ValidationError("Invalid category")


def _tag_input(value: Any) -> Union[str, list[str], None]:
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, (list, tuple)) and all(isinstance(tag, str) for tag in value):
        return value
    raise ValidationError("Invalid tags")


class CatalogService:
    """
    资料目录服务

    每个操作都是一次“校验 -> 调用存储 -> 整理结果”，不保存请求间状态
    """

    def __init__(self, engine: Optional[Engine] = None, default_limit: int = 20):
        if engine is None:
            from edu_portal.core.database import engine as default_engine
            engine = default_engine
        self.category_repo = CategoryRepo(engine)
        self.material_repo = MaterialRepo(engine)
        self.default_limit = default_limit

    def list_categories(self) -> list[dict]:
        """获取全部分类（按 id 升序）"""
        with _store_failure("Failed to fetch categories"):
            return [category_to_dict(c) for c in self.category_repo.list()]

    def list_materials(
        self,
        category: Optional[str] = None,
        search: Optional[str] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> list[dict]:
        """
        获取资料列表

        Args:
            category: 分类 id，"all" 或空表示不筛选
            search: 关键字，匹配标题 / 说明 / 标签
            limit: 条数，默认 default_limit
            offset: 偏移，默认 0
        """
        criteria = MaterialFilter(
            category_id=category or None,
            search_term=search,
            limit=self.default_limit if limit is None else limit,
            offset=offset or 0,
        )
        with _store_failure("Failed to fetch materials"):
            rows = self.material_repo.list(criteria)
            return [material_to_dict(material, cat) for material, cat in rows]

    def get_material(self, material_id: int) -> dict:
        """获取资料详情"""
        with _store_failure("Failed to fetch material"):
            row = self.material_repo.get(material_id)
            if row is None:
                raise NotFoundError("Material not found")
            return material_to_dict(*row)

    def create_material(
        self,
        title: Any,
        category_id: Any,
        type: Any,
        description: Any = None,
        file_url: Any = None,
        tags: Union[str, Iterable[str], None] = None,
    ) -> dict:
        """
        添加资料（目前仅支持 URL 类型）

        入参可能来自未经类型校验的请求体，type 为 file 时先于其它检查直接拒绝

        Returns:
            {"id": ..., "title": ..., "file_url": ...}

        Raises:
            UnsupportedOperationError: type 为 file
            ValidationError: 必填项缺失、字段类型错误、URL 格式错误、分类不存在
            StoreError: 写入失败
        """
        if type == MaterialType.FILE.value:
            raise UnsupportedOperationError(FILE_UPLOAD_MESSAGE)

        title = _optional_text(title, "title")
        category_id = _category_id(category_id)
        if not title or not title.strip() or category_id is None or not type:
            raise ValidationError(MISSING_FIELDS_MESSAGE)

        if type != MaterialType.URL.value:
            raise ValidationError("Invalid material type")

        file_url = _optional_text(file_url, "URL")
        if not file_url or not file_url.strip():
            raise ValidationError(MISSING_FIELDS_MESSAGE)
        if not is_valid_url(file_url):
            raise ValidationError(INVALID_URL_MESSAGE)

        tag_list = parse_tag_input(_tag_input(tags))
        description = _optional_text(description, "description") or ""

        material = Material(
            title=title,
            description=description,
            category_id=category_id,
            type=type,
            file_url=file_url,
            file_type=classify_url(file_url),
            file_size=0,
            tags=encode_tags(tag_list),
            keywords=build_keywords(title, description, tag_list),
            created_at=datetime.now(timezone.utc),
        )

        logger.info(f"添加资料: {title} ({material.file_type})")

        with _store_failure("Failed to create material"):
            material_id = self.material_repo.create(material)

        return {"id": material_id, "title": title, "file_url": file_url}

    def delete_material(self, material_id: int) -> None:
        """删除资料，不存在时抛出 NotFoundError"""
        with _store_failure("Failed to delete material"):
            deleted = self.material_repo.delete(material_id)
        if not deleted:
            raise NotFoundError("Material not found")
        logger.info(f"删除资料: id={material_id}")


# 全局单例
_catalog_service: Optional[CatalogService] = None


def get_catalog_service() -> CatalogService:
    """获取资料目录服务单例"""
    global _catalog_service
    if _catalog_service is None:
        from edu_portal.core import get_settings
        _catalog_service = CatalogService(default_limit=get_settings().default_page_limit)
    return _catalog_service
