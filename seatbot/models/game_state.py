#!/usr/bin/env python3
"""
TableState model for the snapshot delivered on every decision.

Read-only view of the table as the host sees it when our seat is in action
(or at showdown). Cross-field validation makes sure the acting index points
at an active seat before any decision logic runs.
"""

from pydantic import BaseModel, Field, field_validator, model_validator
from typing import List, Optional
from seatbot.models.card import Card
from seatbot.models.player import Seat

PHASES_BY_BOARD_SIZE = {0: 'preflop', 3: 'flop', 4: 'turn', 5: 'river'}


class TableState(BaseModel):
    """Complete table snapshot for one decision."""
    tournament_id: Optional[str] = Field(None, description="Tournament identifier")
    game_id: Optional[str] = Field(None, description="Game identifier")
    round: Optional[int] = Field(None, ge=0, description="Hand number within the game")
    bet_index: Optional[int] = Field(None, ge=0, description="Betting step within the hand")
    small_blind: Optional[int] = Field(None, ge=0, description="Small blind amount")
    orbits: Optional[int] = Field(None, ge=0, description="Completed dealer orbits")
    current_buy_in: int = Field(..., ge=0, description="Largest bet on the table this round")
    minimum_raise: int = Field(..., gt=0, description="Minimum raise increment")
    pot: int = Field(0, ge=0, description="Total pot size")
    dealer: int = Field(0, ge=0, description="Dealer seat index")
    in_action: int = Field(..., ge=0, description="Index of the seat to act")
    community_cards: List[Card] = Field(default_factory=list, description="Community cards")
    seats: List[Seat] = Field(..., alias="players", description="Seats in table order")

    @field_validator('community_cards')
    @classmethod
    def validate_community_cards(cls, v):
        if len(v) > 5:
            raise ValueError('Cannot have more than 5 community cards')
        return v

    @model_validator(mode='after')
    def validate_in_action(self):
        if self.in_action >= len(self.seats):
            raise ValueError(
                f'in_action {self.in_action} is out of range for {len(self.seats)} seats'
            )
        if not self.seats[self.in_action].is_active:
            raise ValueError(f'Seat {self.in_action} in action is not active')
        return self

    @property
    def is_preflop(self) -> bool:
        return len(self.community_cards) == 0

    @property
    def phase(self) -> str:
        """Betting street derived from the number of community cards."""
        return PHASES_BY_BOARD_SIZE.get(len(self.community_cards), 'postflop')

    def acting_seat(self) -> Seat:
        """Get the seat whose turn it is."""
        return self.seats[self.in_action]

    def active_seats(self) -> List[Seat]:
        """Get every seat still contesting the pot."""
        return [seat for seat in self.seats if seat.is_active]

    def opponents(self) -> List[Seat]:
        """Get every seat other than the acting one."""
        return [seat for index, seat in enumerate(self.seats) if index != self.in_action]

    class Config:
        frozen = True
        extra = "ignore"
        populate_by_name = True
