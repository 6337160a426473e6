"""Data models for knights_quest."""

from knights_quest.models.character import Character
from knights_quest.models.item import Item
from knights_quest.models.quest import Quest, QuestAssignment
from knights_quest.models.realm import Realm

__all__ = [
    "Character",
    "Item",
    "Quest",
    "QuestAssignment",
    "Realm",
]
