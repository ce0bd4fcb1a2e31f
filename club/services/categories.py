from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Protocol

from club.core.config import settings


@dataclass(frozen=True)
class CategoryModel:
    key: str
    name: str


class CategoryResolver(Protocol):
    def resolve(self, key: str | None) -> CategoryModel | None: ...

    def all(self) -> List[CategoryModel]: ...


class StaticCategoryRegistry:
    """Category registry backed by a fixed key -> name mapping."""

    def __init__(self, categories: Dict[str, str]):
        self._items = [CategoryModel(key=k, name=v) for k, v in categories.items()]

    @classmethod
    def from_settings(cls) -> "StaticCategoryRegistry":
        return cls(settings.categories_map)

    def resolve(self, key: str | None) -> CategoryModel | None:
        text = str(key or "").strip()
        if not text:
            return None
        for item in self._items:
            if item.key == text:
                return item
        return None

    def all(self) -> List[CategoryModel]:
        return list(self._items)
