"""A simple deck holding integer cards."""

from __future__ import annotations

from collections.abc import Iterator
from enum import Enum


class Suit(Enum):
    """Card suits, numbered in declaration order."""

    HEARTS = 0
    CLUBS = 1
    SPADES = 2
    DIAMONDS = 3


class Deck:
    """An ordered list of cards stored as integers."""

    def __init__(self) -> None:
        self._cards: list[int] = []

    def add(self, card: int | Suit) -> None:
        """Append a card; a suit is stored as its number."""
        if isinstance(card, Suit):
            self._cards.append(card.value)
        elif isinstance(card, int) and not isinstance(card, bool):
            self._cards.append(card)
        else:
            raise TypeError(f"a card must be an int or a Suit, not {type(card).__name__}")

    def remove(self, index: int) -> None:
        """Remove the card at ``index``."""
        if not 0 <= index < len(self._cards):
            raise IndexError(f"card index {index} out of range")
        del self._cards[index]

    def __iter__(self) -> Iterator[int]:
        return iter(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __str__(self) -> str:
        return "\n".join(str(card) for card in self._cards)