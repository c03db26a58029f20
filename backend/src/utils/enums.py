from enum import StrEnum


class Category(StrEnum):
    ALL = "All"
    TECHNOLOGY = "Technology"
    BUSINESS = "Business"
    SCIENCE = "Science"
    ENTERTAINMENT = "Entertainment"
    SPORTS = "Sports"

    @classmethod
    def coerce(cls, value: str) -> "Category":
        """Exact (case-sensitive) lookup; unknown keys resolve to ALL."""
        try:
            return cls(value)
        except ValueError:
            return cls.ALL


class RemoteCategory(StrEnum):
    GENERAL = "general"
    TECHNOLOGY = "technology"
    BUSINESS = "business"
    SCIENCE = "science"
    ENTERTAINMENT = "entertainment"
    SPORTS = "sports"


CATEGORY_MAP = {
    Category.ALL: RemoteCategory.GENERAL,
    Category.TECHNOLOGY: RemoteCategory.TECHNOLOGY,
    Category.BUSINESS: RemoteCategory.BUSINESS,
    Category.SCIENCE: RemoteCategory.SCIENCE,
    Category.ENTERTAINMENT: RemoteCategory.ENTERTAINMENT,
    Category.SPORTS: RemoteCategory.SPORTS,
}


def remote_category(category: str) -> RemoteCategory:
    return CATEGORY_MAP.get(category, RemoteCategory.GENERAL)


__all__ = ["Category", "RemoteCategory", "CATEGORY_MAP", "remote_category"]
