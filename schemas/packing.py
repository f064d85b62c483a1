"""
schemas/packing.py
------------------
Dataclass definitions for the recommended packing checklist.

A PackingList is unique by item name and keeps generation order; it is
produced wholesale by the recommender and never merged with a prior list.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Optional


class ItemCategory(str, Enum):
    ESSENTIALS = "Essentials"
    TOILETRIES = "Toiletries"
    CLOTHING = "Clothing"
    FOOTWEAR = "Footwear"
    ACCESSORIES = "Accessories"
    SPORTS_GEAR = "Sports Gear"
    FORMAL_WEAR = "Formal Wear"
    BUSINESS_ATTIRE = "Business Attire"
    ELECTRONICS = "Electronics"
    BUSINESS_ESSENTIALS = "Business Essentials"


@dataclass(frozen=True)
class ItemTemplate:
    """Rule-table entry: an item before a quantity has been assigned."""
    name: str
    category: ItemCategory


@dataclass(frozen=True)
class PackingItem:
    name: str
    category: ItemCategory
    quantity: int = 1

    def __post_init__(self):
        if self.quantity < 1:
            raise ValueError(f"quantity must be positive for {self.name!r}")


@dataclass(frozen=True)
class PackingList:
    items: tuple[PackingItem, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # Invariant: names are unique
        seen: set[str] = set()
        for item in self.items:
            if item.name in seen:
                raise ValueError(f"Duplicate packing item {item.name!r}")
            seen.add(item.name)

    def __iter__(self) -> Iterator[PackingItem]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __contains__(self, name: object) -> bool:
        return any(item.name == name for item in self.items)

    def get(self, name: str) -> Optional[PackingItem]:
        for item in self.items:
            if item.name == name:
                return item
        return None

    def names(self) -> list[str]:
        return [item.name for item in self.items]

    def total_quantity(self) -> int:
        return sum(item.quantity for item in self.items)

    def by_category(self) -> dict[ItemCategory, list[PackingItem]]:
        """Group items for display, categories ordered by first appearance."""
        groups: dict[ItemCategory, list[PackingItem]] = {}
        for item in self.items:
            groups.setdefault(item.category, []).append(item)
        return groups
