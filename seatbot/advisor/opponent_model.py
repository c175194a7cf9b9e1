#!/usr/bin/env python3
"""
Opponent model tracking per-seat aggression across a session.

Every decision round each seat's counter moves up by one when the seat has
chips in front of it and down by one otherwise. Counters are unbounded and
only meaningful relative to each other.
"""

import logging
from typing import Dict, Iterable, List, NamedTuple

from seatbot.models.player import Seat
from seatbot.config.settings import Settings

logger = logging.getLogger(__name__)


class AggressionSummary(NamedTuple):
    """Count of tracked opponents outside the neutral band."""
    aggressive: int
    passive: int


class OpponentModel:
    """Session-long aggression counters keyed by opponent id."""

    def __init__(self):
        """Initialize an empty aggression table."""
        self.settings = Settings()

        self.settings.create("strategy.opponents.bluff.default", default=0.2)
        self.settings.create("strategy.opponents.bluff.base", default=0.5)
        self.settings.create("strategy.opponents.bluff.slope", default=0.1)
        self.settings.create("strategy.opponents.bluff.floor", default=0.1)
        self.settings.create("strategy.opponents.bluff.ceiling", default=0.7)

        self.default_bluff = self.settings.get("strategy.opponents.bluff.default")
        self.bluff_base = self.settings.get("strategy.opponents.bluff.base")
        self.bluff_slope = self.settings.get("strategy.opponents.bluff.slope")
        self.bluff_floor = self.settings.get("strategy.opponents.bluff.floor")
        self.bluff_ceiling = self.settings.get("strategy.opponents.bluff.ceiling")

        self._aggression: Dict[int, int] = {}

        logger.info("Initialized opponent model")

    def observe(self, seats: Iterable[Seat]) -> None:
        """
        Update aggression counters from one round of seats.

        Args:
            seats: Every seat at the table, in table order
        """
        for seat in seats:
            counter = self._aggression.setdefault(seat.id, 0)
            self._aggression[seat.id] = counter + 1 if seat.bet > 0 else counter - 1

        logger.debug(f"Aggression after observe: {self._aggression}")

    def classify(self, threshold: int) -> AggressionSummary:
        """
        Count aggressive and passive opponents.

        Args:
            threshold: Counters above +threshold are aggressive, below
                -threshold passive; anything in between is neither

        Returns:
            AggressionSummary with both counts
        """
        aggressive = sum(1 for value in self._aggression.values() if value > threshold)
        passive = sum(1 for value in self._aggression.values() if value < -threshold)
        return AggressionSummary(aggressive=aggressive, passive=passive)

    def aggression(self, opponent_id: int) -> int:
        """Get an opponent's counter, 0 if never observed."""
        return self._aggression.get(opponent_id, 0)

    def tracked_ids(self) -> List[int]:
        """Get every opponent id observed so far, in first-seen order."""
        return list(self._aggression)

    def average_aggression(self) -> float:
        """Mean counter across tracked opponents, 0.0 when none are tracked."""
        if not self._aggression:
            return 0.0
        return sum(self._aggression.values()) / len(self._aggression)

    def bluff_frequency(self) -> float:
        """
        Estimate how often a bluff or continuation bet gets through.

        Passive tables fold more, so the estimate falls as average
        aggression rises, clamped to the configured floor and ceiling.
        """
        if not self._aggression:
            return self.default_bluff

        estimate = self.bluff_base - self.average_aggression() * self.bluff_slope
        return max(self.bluff_floor, min(self.bluff_ceiling, estimate))

    def __len__(self) -> int:
        return len(self._aggression)
