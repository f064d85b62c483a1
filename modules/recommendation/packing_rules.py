"""
modules/recommendation/packing_rules.py
----------------------------------------
Declarative rule tables for the packing recommender.

Tables
──────
BASE_ITEMS            always included.
TEMPERATURE_BRACKETS  (min_avg_high, items) checked top-down; the first bracket
                      whose threshold is strictly exceeded wins. The last entry
                      has no threshold and catches everything colder.
COLD_EXTRAS           added when avg_low < COLD_LOW_THRESHOLD_F, whatever bracket.
RAIN_GEAR             added when any forecast day is rainy.
ACTIVITY_RULES        keyword fragments → item set. Matching is a
                      case-insensitive substring test, evaluated per activity
                      for every rule; rule order only affects output order.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from schemas.packing import ItemCategory as C, ItemTemplate


def _items(*pairs: tuple[str, C]) -> tuple[ItemTemplate, ...]:
    return tuple(ItemTemplate(name, category) for name, category in pairs)


# ─────────────────────────────────────────────────────────────────────────────
# Base set
# ─────────────────────────────────────────────────────────────────────────────

BASE_ITEMS: tuple[ItemTemplate, ...] = _items(
    ("Passport/ID",           C.ESSENTIALS),
    ("Phone charger",         C.ESSENTIALS),
    ("Wallet/Money",          C.ESSENTIALS),
    ("Travel insurance info", C.ESSENTIALS),
    ("Medications",           C.ESSENTIALS),
    ("Toothbrush",            C.TOILETRIES),
    ("Toothpaste",            C.TOILETRIES),
    ("Deodorant",             C.TOILETRIES),
    ("Shampoo/Conditioner",   C.TOILETRIES),
    ("Body wash/Soap",        C.TOILETRIES),
    ("Face wash",             C.TOILETRIES),
    ("Moisturizer",           C.TOILETRIES),
    ("Razor/Shaving cream",   C.TOILETRIES),
    ("Underwear",             C.CLOTHING),
    ("Socks",                 C.CLOTHING),
    ("T-shirts",              C.CLOTHING),
    ("Pajamas",               C.CLOTHING),
)


# ─────────────────────────────────────────────────────────────────────────────
# Weather
# ─────────────────────────────────────────────────────────────────────────────

TEMPERATURE_BRACKETS: tuple[tuple[Optional[float], tuple[ItemTemplate, ...]], ...] = (
    (80, _items(
        ("Shorts",                     C.CLOTHING),
        ("Tank tops",                  C.CLOTHING),
        ("Sandals",                    C.FOOTWEAR),
        ("Sunglasses",                 C.ACCESSORIES),
        ("Sunscreen",                  C.TOILETRIES),
        ("Hat/Cap",                    C.ACCESSORIES),
        ("Light, breathable clothing", C.CLOTHING),
    )),
    (70, _items(
        ("Shorts",       C.CLOTHING),
        ("T-shirts",     C.CLOTHING),
        ("Light jacket", C.CLOTHING),
        ("Sunglasses",   C.ACCESSORIES),
        ("Sunscreen",    C.TOILETRIES),
    )),
    (60, _items(
        ("Light sweater", C.CLOTHING),
        ("Long pants",    C.CLOTHING),
        ("Light jacket",  C.CLOTHING),
    )),
    (40, _items(
        ("Sweater",          C.CLOTHING),
        ("Medium jacket",    C.CLOTHING),
        ("Long pants",       C.CLOTHING),
        ("Closed-toe shoes", C.FOOTWEAR),
    )),
    (None, _items(
        ("Heavy sweater",     C.CLOTHING),
        ("Winter coat",       C.CLOTHING),
        ("Thermal underwear", C.CLOTHING),
        ("Wool socks",        C.CLOTHING),
        ("Gloves",            C.ACCESSORIES),
        ("Scarf",             C.ACCESSORIES),
        ("Winter hat",        C.ACCESSORIES),
        ("Winter boots",      C.FOOTWEAR),
    )),
)

COLD_LOW_THRESHOLD_F: float = 35

COLD_EXTRAS: tuple[ItemTemplate, ...] = _items(
    ("Heavy coat",       C.CLOTHING),
    ("Thermal layers",   C.CLOTHING),
    ("Warm hat",         C.ACCESSORIES),
    ("Insulated gloves", C.ACCESSORIES),
)

RAIN_GEAR: tuple[ItemTemplate, ...] = _items(
    ("Umbrella",         C.ACCESSORIES),
    ("Rain jacket",      C.CLOTHING),
    ("Waterproof shoes", C.FOOTWEAR),
)


# ─────────────────────────────────────────────────────────────────────────────
# Activities
# ─────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class ActivityRule:
    """Contributes `items` when any keyword fragment occurs in an activity."""
    name: str
    keywords: tuple[str, ...]
    items: tuple[ItemTemplate, ...]

    def matches(self, activity: str) -> bool:
        text = activity.lower()
        return any(keyword in text for keyword in self.keywords)


ACTIVITY_RULES: tuple[ActivityRule, ...] = (
    ActivityRule("golf", ("golf",), _items(
        ("Golf shoes",                 C.SPORTS_GEAR),
        ("Golf socks",                 C.SPORTS_GEAR),
        ("Golf glove",                 C.SPORTS_GEAR),
        ("Golf shirt/polo",            C.SPORTS_GEAR),
        ("Golf hat/visor",             C.SPORTS_GEAR),
        ("Golf pants/shorts",          C.SPORTS_GEAR),
        ("Golf clubs (or rental info)", C.SPORTS_GEAR),
        ("Sunscreen",                  C.TOILETRIES),
    )),
    ActivityRule("hiking", ("hik", "trek"), _items(
        ("Hiking boots/shoes",     C.SPORTS_GEAR),
        ("Hiking socks",           C.SPORTS_GEAR),
        ("Quick-dry pants/shorts", C.SPORTS_GEAR),
        ("Moisture-wicking shirts", C.SPORTS_GEAR),
        ("Hiking backpack",        C.SPORTS_GEAR),
        ("Water bottle",           C.SPORTS_GEAR),
        ("First aid kit",          C.SPORTS_GEAR),
        ("Sunscreen",              C.TOILETRIES),
    )),
    ActivityRule("beach", ("beach", "swim"), _items(
        ("Swimsuit",            C.CLOTHING),
        ("Beach towel",         C.ACCESSORIES),
        ("Flip flops/sandals",  C.FOOTWEAR),
        ("Sunscreen (SPF 30+)", C.TOILETRIES),
        ("Sunglasses",          C.ACCESSORIES),
    )),
    ActivityRule("formal", ("dinner", "formal"), _items(
        ("Formal outfit",      C.FORMAL_WEAR),
        ("Dress shoes",        C.FORMAL_WEAR),
        ("Dress/Evening wear", C.FORMAL_WEAR),
        ("Cologne/Perfume",    C.TOILETRIES),
    )),
    ActivityRule("business", ("business", "meeting"), _items(
        ("Business suit/outfit", C.BUSINESS_ATTIRE),
        ("Dress shoes",          C.BUSINESS_ATTIRE),
        ("Laptop",               C.ELECTRONICS),
        ("Notebook/Planner",     C.BUSINESS_ESSENTIALS),
        ("Business cards",       C.BUSINESS_ESSENTIALS),
    )),
)


# ─────────────────────────────────────────────────────────────────────────────
# Quantities
# ─────────────────────────────────────────────────────────────────────────────

DAILY_ITEMS: frozenset[str] = frozenset({"Underwear", "Socks"})   # days + 1
SHIRT_MARKERS: tuple[str, ...] = ("shirt", "T-shirt")              # ceil(days / 2), case-sensitive
