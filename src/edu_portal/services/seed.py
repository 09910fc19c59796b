"""
默认分类数据
"""
from edu_portal.core import get_logger
from edu_portal.models.category import Category
from edu_portal.repositories.category_repo import CategoryRepo

logger = get_logger(__name__)

DEFAULT_CATEGORIES = [
    {"name": "Nutrition & Diet", "description": "Balanced meals, food groups and healthy eating habits", "icon": "🥗", "color": "#10b981"},
    {"name": "Exercise & Fitness", "description": "Physical activity, training and sports science", "icon": "🏃", "color": "#3b82f6"},
    {"name": "Mental Health", "description": "Stress, emotions and wellbeing", "icon": "🧠", "color": "#8b5cf6"},
    {"name": "Sleep & Rest", "description": "Sleep hygiene and recovery", "icon": "😴", "color": "#6366f1"},
    {"name": "Disease Prevention", "description": "Hygiene, infection control and lifestyle diseases", "icon": "🧼", "color": "#f59e0b"},
    {"name": "Safety & First Aid", "description": "Injury prevention, first aid and emergency response", "icon": "🩹", "color": "#ef4444"},
]


def seed_categories(repo: CategoryRepo) -> int:
    """
    分类表为空时写入默认分类

    Returns:
        写入的条数；表中已有数据时为 0
    """
    if repo.count() > 0:
        return 0
    repo.add_all([Category(id=index, **data) for index, data in enumerate(DEFAULT_CATEGORIES, start=1)])
    logger.info(f"已写入默认分类: {len(DEFAULT_CATEGORIES)} 条")
    return len(DEFAULT_CATEGORIES)
