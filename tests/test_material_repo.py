"""
数据访问层测试
"""
from datetime import datetime, timedelta, timezone

import pytest

from edu_portal.core.exceptions import StoreError, ValidationError
from edu_portal.models import Material
from edu_portal.repositories import CategoryRepo, MaterialFilter, MaterialRepo
from edu_portal.services.presenter import encode_tags
from edu_portal.services.seed import DEFAULT_CATEGORIES, seed_categories

BASE_TIME = datetime(2024, 5, 1, 8, 0, 0, tzinfo=timezone.utc)


def _material(title, category_id=1, minutes=0, description="", tags=None) -> Material:
    return Material(
        title=title,
        description=description,
        category_id=category_id,
        type="url",
        file_url=f"https://example.com/{title.replace(' ', '-')}",
        file_type="Web URL",
        file_size=0,
        tags=encode_tags(tags or []),
        keywords=title,
        created_at=BASE_TIME + timedelta(minutes=minutes),
    )


@pytest.fixture
def repo(test_db):
    return MaterialRepo(test_db)


class TestCategoryRepo:

    def test_list_is_ordered_by_id(self, test_db) -> None:
        categories = CategoryRepo(test_db).list()
        assert [c.id for c in categories] == list(range(1, len(DEFAULT_CATEGORIES) + 1))
        assert categories[0].name == DEFAULT_CATEGORIES[0]["name"]

    def test_seed_is_skipped_when_table_has_rows(self, test_db) -> None:
        assert seed_categories(CategoryRepo(test_db)) == 0
        assert CategoryRepo(test_db).count() == len(DEFAULT_CATEGORIES)


class TestMaterialRepo:

    def test_list_orders_newest_first(self, repo) -> None:
        repo.create(_material("old", minutes=0))
        repo.create(_material("new", minutes=10))
        repo.create(_material("middle", minutes=5))

        rows = repo.list(MaterialFilter())

        assert [m.title for m, _ in rows] == ["new", "middle", "old"]

    def test_list_filters_by_category(self, repo) -> None:
        repo.create(_material("a", category_id=1))
        repo.create(_material("b", category_id=2))
        repo.create(_material("c", category_id=2))

        only_two = repo.list(MaterialFilter(category_id="2"))
        everything = repo.list(MaterialFilter(category_id="all"))

        assert sorted(m.title for m, _ in only_two) == ["b", "c"]
        assert all(m.category_id == 2 for m, _ in only_two)
        assert len(everything) == 3

    def test_list_rejects_non_numeric_category(self, repo) -> None:
        with pytest.raises(ValidationError):
            repo.list(MaterialFilter(category_id="sports"))

    def test_search_matches_title_description_and_tags(self, repo) -> None:
        repo.create(_material("school nutrition guide"))
        repo.create(_material("lunch", description="balanced nutrition at lunch"))
        repo.create(_material("snacks", tags=["nutrition", "snack"]))
        repo.create(_material("sleep basics", tags=["sleep"]))

        rows = repo.list(MaterialFilter(search_term="  nutrition "))

        assert sorted(m.title for m, _ in rows) == ["lunch", "school nutrition guide", "snacks"]

    def test_search_follows_engine_like_semantics(self, repo) -> None:
        # SQLite 的 LIKE 对 ASCII 不区分大小写
        repo.create(_material("Nutrition basics"))
        repo.create(_material("sleep basics"))

        rows = repo.list(MaterialFilter(search_term="nutrition"))

        assert [m.title for m, _ in rows] == ["Nutrition basics"]

    def test_search_escapes_like_wildcards(self, repo) -> None:
        repo.create(_material("100% effort"))
        repo.create(_material("1000 steps"))

        rows = repo.list(MaterialFilter(search_term="100%"))

        assert [m.title for m, _ in rows] == ["100% effort"]

    def test_limit_and_offset_apply_after_ordering(self, repo) -> None:
        for i in range(5):
            repo.create(_material(f"item {i}", minutes=i))

        rows = repo.list(MaterialFilter(limit=2, offset=1))

        assert [m.title for m, _ in rows] == ["item 3", "item 2"]

    def test_get_returns_joined_category(self, repo) -> None:
        material_id = repo.create(_material("sleep basics", category_id=4))

        material, category = repo.get(material_id)

        assert material.title == "sleep basics"
        assert category.id == 4
        assert category.name == DEFAULT_CATEGORIES[3]["name"]

    def test_get_missing_returns_none(self, repo) -> None:
        assert repo.get(999) is None

    def test_create_with_unknown_category_is_rejected(self, repo) -> None:
        with pytest.raises(ValidationError):
            repo.create(_material("orphan", category_id=999))
        assert repo.count() == 0

    def test_delete(self, repo) -> None:
        material_id = repo.create(_material("to delete"))

        assert repo.delete(material_id) is True
        assert repo.get(material_id) is None
        assert repo.delete(material_id) is False

    def test_database_failure_surfaces_as_store_error(self, test_db, repo) -> None:
        from sqlmodel import SQLModel

        SQLModel.metadata.drop_all(test_db)

        with pytest.raises(StoreError):
            repo.list(MaterialFilter())
        with pytest.raises(StoreError):
            CategoryRepo(test_db).list()


def test_count_reflects_rows(test_db) -> None:
    repo = MaterialRepo(test_db)
    assert repo.count() == 0

    repo.create(_material("one"))
    repo.create(_material("two"))

    assert repo.count() == 2
