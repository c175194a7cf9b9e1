#!/usr/bin/env python3
"""
Regret tracker for the engine's fold/call/raise mixing weights.

A lightweight stand-in for regret matching: every committed chip adds to
the regret of the action that committed it, every fold adds a unit, and the
strategy is each action's share of the total. State accumulates for the
whole session and is never reset.
"""

import logging
from typing import Dict

from seatbot.models.decision import ACTIONS

logger = logging.getLogger(__name__)

FOLD_REGRET = 1


class RegretTracker:
    """Accumulated regret per action and the strategy derived from it."""

    def __init__(self):
        self._regrets: Dict[str, float] = {action: 0.0 for action in ACTIONS}
        self._strategy: Dict[str, float] = {action: 1.0 / len(ACTIONS) for action in ACTIONS}

    def record(self, action: str, amount: int) -> None:
        """
        Accumulate regret for a taken action and refresh the strategy.

        Args:
            action: One of fold/call/raise
            amount: Chips committed by the action

        Raises:
            ValueError: If action is not a known action label
        """
        if action not in self._regrets:
            raise ValueError(f"Invalid action label: {action!r}. Must be one of {ACTIONS}")

        if action == 'fold':
            self._regrets['fold'] += FOLD_REGRET
        else:
            self._regrets[action] += max(0, amount)

        self._update_strategy()

    def _update_strategy(self) -> None:
        total = self.total_regret
        if total <= 0:
            return

        for action, regret in self._regrets.items():
            self._strategy[action] = regret / total

        logger.debug(f"Strategy updated: {self._strategy}")

    @property
    def regrets(self) -> Dict[str, float]:
        return dict(self._regrets)

    @property
    def strategy(self) -> Dict[str, float]:
        return dict(self._strategy)

    @property
    def total_regret(self) -> float:
        return sum(self._regrets.values())

    def mixing_bias(self) -> float:
        """Raise weight minus fold weight, in [-1, 1]."""
        return self._strategy['raise'] - self._strategy['fold']
