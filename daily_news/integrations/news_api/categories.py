from pydantic import BaseModel, ConfigDict

CATEGORIES: dict[int, str] = {
    1: 'Automotive',
    2: 'AI Technology',
    4: 'Trending News',
}


class Category(BaseModel):
    """News category known to the upstream API."""
    model_config = ConfigDict(frozen=True)

    id: int
    name: str


def list_categories() -> list[Category]:
    return [Category(id=category_id, name=name) for category_id, name in CATEGORIES.items()]


def get_category_name(category_id: int | None) -> str | None:
    return CATEGORIES.get(category_id)


def is_known_category(category_id: int) -> bool:
    return category_id in CATEGORIES
