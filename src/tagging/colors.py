"""Display colors for category badges."""
from src.tagging.taxonomy import FALLBACK, Category

CATEGORY_COLORS: dict[Category, str] = {
    Category.TECHNOLOGY: "#3B82F6",
    Category.LIFESTYLE: "#EC4899",
    Category.FOOD: "#F59E0B",
    Category.TRAVEL: "#10B981",
    Category.SOCIETY: "#6366F1",
    Category.FINANCE: "#059669",
    Category.ANIME: "#8B5CF6",
    Category.MOVIES: "#EF4444",
    Category.HEALTH: "#14B8A6",
    Category.SCIENCE: "#6366F1",
    Category.EDUCATION: "#F59E0B",
    Category.SPORTS: "#EF4444",
    Category.BUSINESS: "#3B82F6",
    Category.ART: "#EC4899",
    Category.MUSIC: "#8B5CF6",
    Category.GAMING: "#6366F1",
    Category.PARENTING: "#10B981",
    Category.BOOKS: "#8B5CF6",
    Category.ENVIRONMENT: "#10B981",
    Category.HISTORY: "#6366F1",
    Category.OTHER: "#6B7280",
}


def parse_category(label: str | None) -> Category | None:
    """Return the Category whose exact (case-sensitive) name is label."""
    if label is None:
        return None
    try:
        return Category(label)
    except ValueError:
        return None


def color_of(category: Category | str | None) -> str:
    """Hex color for a category or its stored label; unknown values get Other's color."""
    parsed = category if isinstance(category, Category) else parse_category(category)
    return CATEGORY_COLORS.get(parsed, CATEGORY_COLORS[FALLBACK])
