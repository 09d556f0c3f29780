"""
CardStack - ordered pile of card names backing the deck and the discard pile.

The top of the stack is the end of the list.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any
import random

from .types import CardName


@dataclass
class CardStack:
    """A named, mutable pile of cards."""
    name: str
    cards: list[CardName] = field(default_factory=list)

    @property
    def num_cards(self) -> int:
        return len(self.cards)

    @property
    def is_empty(self) -> bool:
        return len(self.cards) == 0

    def add_to_stack(self, card_name: CardName) -> None:
        self.cards.append(card_name)

    def draw(self) -> CardName:
        """Remove and return the top card."""
        if not self.cards:
            raise IndexError(f"{self.name} is empty")
        return self.cards.pop()

    def take_all(self) -> list[CardName]:
        """Empty the stack, returning its cards."""
        cards, self.cards = self.cards, []
        return cards

    def shuffle(self, rng: random.Random | None = None) -> None:
        (rng or random).shuffle(self.cards)

    def to_json(self, include_private: bool) -> dict[str, Any]:
        return {
            "name": self.name,
            "num_cards": self.num_cards,
            "cards": [c.value for c in self.cards] if include_private else [],
        }

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> CardStack:
        return cls(
            name=data["name"],
            cards=[CardName(c) for c in data.get("cards", [])],
        )
