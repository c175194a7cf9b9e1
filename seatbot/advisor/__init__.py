#!/usr/bin/env python3
"""
Advisor module for hand evaluation and betting decisions.

Public API:
    - HandEvaluator: Score any set of cards into a totally ordered strength
    - OpponentModel: Track per-opponent aggression across a session
    - RegretTracker: Accumulate action regret and derive mixing weights
    - StrategyEngine: Central coordinator for all decision-making
"""

from seatbot.advisor.hand_evaluator import HandEvaluator, HandCategory
from seatbot.advisor.opponent_model import OpponentModel, AggressionSummary
from seatbot.advisor.regret_tracker import RegretTracker
from seatbot.advisor.strategy_engine import StrategyEngine

__all__ = [
    'HandEvaluator',
    'HandCategory',
    'OpponentModel',
    'AggressionSummary',
    'RegretTracker',
    'StrategyEngine'
]
