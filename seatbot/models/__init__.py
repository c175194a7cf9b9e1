#!/usr/bin/env python3
"""
Models package for seatbot data models.

Provides Pydantic models for the table snapshot the host sends,
the decisions the engine produces and showdown diagnostics.
"""

from .card import Card
from .player import Seat
from .game_state import TableState
from .decision import Decision
from .showdown import SeatStrength, ShowdownSummary

__all__ = [
    'Card',
    'Seat',
    'TableState',
    'Decision',
    'SeatStrength',
    'ShowdownSummary'
]
