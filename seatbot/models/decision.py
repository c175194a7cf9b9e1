#!/usr/bin/env python3
"""
Decision model for the strategy engine's output.

Represents the chosen action, the committed amount and the inputs that
drove the choice.
"""

from pydantic import BaseModel, Field, field_validator
from typing import Optional

ACTIONS = ['fold', 'call', 'raise']


class Decision(BaseModel):
    """Betting decision for one turn."""
    action: str = Field(..., description="Chosen action (fold/call/raise)")
    amount: int = Field(..., ge=0, description="Chips committed; 0 folds or checks")
    hand_strength: int = Field(0, ge=0, description="Evaluator score of hole + community cards")
    strength_rating: float = Field(0.0, ge=0.0, le=100.0, description="Policy strength on a 0-100 scale")
    pot_odds: Optional[float] = Field(None, ge=0.0, le=1.0, description="Call cost relative to the final pot")
    all_in: bool = Field(False, description="Amount was clamped to the remaining stack")
    reasoning: str = Field("", description="Explanation of decision")

    @field_validator('action')
    @classmethod
    def validate_action(cls, v):
        if v not in ACTIONS:
            raise ValueError(f'Invalid action: {v}. Must be one of {ACTIONS}')
        return v

    class Config:
        validate_assignment = True
        extra = "forbid"
