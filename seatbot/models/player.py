#!/usr/bin/env python3
"""
Seat model for representing players at the poker table.

Mirrors the per-player record the game host sends with every snapshot.
Hole cards are only present for the seat in action, or for every
remaining seat after showdown.
"""

from pydantic import BaseModel, Field, field_validator
from typing import Optional, List
from seatbot.models.card import Card

SEAT_STATUSES = ['active', 'folded', 'out']


class Seat(BaseModel):
    """Represents one seat at the poker table."""
    id: int = Field(..., description="Host-assigned player id")
    name: str = Field("", description="Player display name")
    status: str = Field(..., description="Seat status (active/folded/out)")
    version: Optional[str] = Field(None, description="Bot version reported by the host")
    stack: int = Field(..., ge=0, description="Chips behind")
    bet: int = Field(0, ge=0, description="Chips committed this betting round")
    hole_cards: Optional[List[Card]] = Field(None, description="Hole cards, when visible")

    @field_validator('status')
    @classmethod
    def validate_status(cls, v):
        if v not in SEAT_STATUSES:
            raise ValueError(f'Invalid status: {v}. Must be one of {SEAT_STATUSES}')
        return v

    @property
    def is_active(self) -> bool:
        return self.status == 'active'

    @property
    def has_hole_cards(self) -> bool:
        return bool(self.hole_cards)

    class Config:
        frozen = True
        extra = "ignore"
