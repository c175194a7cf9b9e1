#!/usr/bin/env python3
"""
Showdown models for end-of-hand diagnostics.

Per-seat hand strengths computed when the host reports a concluded hand.
"""

from pydantic import BaseModel, Field
from typing import List
from seatbot.models.card import Card


class SeatStrength(BaseModel):
    """Evaluated hand of one seat at showdown."""
    seat_id: int = Field(..., description="Host-assigned player id")
    name: str = Field("", description="Player display name")
    hole_cards: List[Card] = Field(default_factory=list, description="Revealed hole cards")
    hand_strength: int = Field(..., ge=0, description="Evaluator score")
    category: str = Field(..., description="Hand category name (e.g. 'Full House')")
    rating: float = Field(..., ge=0.0, le=100.0, description="Strength on a 0-100 scale")

    class Config:
        frozen = True
        extra = "forbid"


class ShowdownSummary(BaseModel):
    """Evaluated hands of every active seat for a concluded hand."""
    community_cards: List[Card] = Field(default_factory=list, description="Final board")
    results: List[SeatStrength] = Field(default_factory=list, description="One entry per active seat")
    winners: List[int] = Field(default_factory=list, description="Seat ids holding the best hand")

    def strength_of(self, seat_id: int) -> int:
        """Get the evaluated strength for a seat id."""
        for result in self.results:
            if result.seat_id == seat_id:
                return result.hand_strength
        raise KeyError(f"Seat {seat_id} was not evaluated at showdown")

    class Config:
        frozen = True
        extra = "forbid"
