"""modules/recommendation: Rule-based packing list generation."""

from modules.recommendation.packing_rules import ActivityRule, ACTIVITY_RULES
from modules.recommendation.packing_recommender import PackingRecommender, generate_packing_list

__all__ = [
    "ActivityRule",
    "ACTIVITY_RULES",
    "PackingRecommender",
    "generate_packing_list",
]
