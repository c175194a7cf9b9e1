#!/usr/bin/env python3
"""
Card model for representing playing cards.

Represents a single playing card with rank and suit normalization.
Host payloads use ranks "2"-"10", "J", "Q", "K", "A" and full suit names;
common short forms ("T", "h", "S") are normalized to those. Unrecognized
tokens are kept as given so hand evaluation can score them as value 0
instead of failing the decision path.
"""

import logging

from pydantic import BaseModel, Field, field_validator

logger = logging.getLogger(__name__)

RANKS = ['2', '3', '4', '5', '6', '7', '8', '9', '10', 'J', 'Q', 'K', 'A']
SUITS = ['clubs', 'spades', 'hearts', 'diamonds']

# Ordinal values, Ace high
RANK_VALUES = {rank: value for value, rank in enumerate(RANKS, start=2)}

_RANK_ALIASES = {'T': '10'}
_SUIT_ALIASES = {'c': 'clubs', 's': 'spades', 'h': 'hearts', 'd': 'diamonds'}
_SUIT_SYMBOLS = {'clubs': 'c', 'spades': 's', 'hearts': 'h', 'diamonds': 'd'}


class Card(BaseModel):
    """Represents an immutable playing card with rank and suit."""
    rank: str = Field(..., description="Card rank (2-10, J, Q, K, A)")
    suit: str = Field(..., description="Card suit (clubs, spades, hearts, diamonds)")

    @field_validator('rank', mode='before')
    @classmethod
    def normalize_rank(cls, v):
        token = str(v).strip().upper()
        token = _RANK_ALIASES.get(token, token)
        if token not in RANK_VALUES:
            logger.warning(f"Unknown card rank token: {v!r}")
        return token

    @field_validator('suit', mode='before')
    @classmethod
    def normalize_suit(cls, v):
        token = str(v).strip().lower()
        token = _SUIT_ALIASES.get(token, token)
        if token not in SUITS:
            logger.warning(f"Unknown card suit token: {v!r}")
        return token

    @property
    def value(self) -> int:
        """Ordinal rank value 2..14 (Ace high), 0 for an unknown rank."""
        return RANK_VALUES.get(self.rank, 0)

    @property
    def is_known(self) -> bool:
        """True when both rank and suit are recognized tokens."""
        return self.rank in RANK_VALUES and self.suit in SUITS

    def __str__(self) -> str:
        """String representation (e.g., 'As' for Ace of spades)."""
        return f"{self.rank}{_SUIT_SYMBOLS.get(self.suit, '?')}"

    class Config:
        frozen = True
        extra = "forbid"
