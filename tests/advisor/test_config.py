#!/usr/bin/env python3
"""
Configuration and utilities for advisor module tests.

Provides common card, seat and table-state builders.
"""

from typing import List, Optional, Sequence

from seatbot.models.card import Card
from seatbot.models.player import Seat
from seatbot.models.game_state import TableState


def cards(*tokens: str) -> List[Card]:
    """
    Build cards from short tokens such as 'As', '10h', 'Td'.

    Examples:
        >>> cards('As', 'Kd')
        [Card(rank='A', suit='spades'), Card(rank='K', suit='diamonds')]
    """
    return [Card(rank=token[:-1], suit=token[-1]) for token in tokens]


class AdvisorTestFixtures:
    """Common test fixtures for advisor module tests."""

    HERO_ID = 1

    @staticmethod
    def create_seat(seat_id: int, bet: int = 0, stack: int = 1000, status: str = "active",
                    hole_cards: Optional[List[Card]] = None) -> Seat:
        """Create a seat with a predictable name."""
        return Seat(id=seat_id, name=f"player-{seat_id}", status=status,
                    stack=stack, bet=bet, hole_cards=hole_cards)

    @staticmethod
    def create_table_state(hole_cards: Optional[Sequence[str]] = ("As", "Kd"),
                           community_cards: Sequence[str] = (),
                           current_buy_in: int = 20,
                           minimum_raise: int = 20,
                           pot: int = 30,
                           bet: int = 0,
                           stack: int = 1000,
                           opponent_bets: Sequence[int] = (10, 20)) -> TableState:
        """
        Create a table state with the hero in action at index 0.

        Opponents get ids 2, 3, ... with the given bets.
        """
        hero = AdvisorTestFixtures.create_seat(
            AdvisorTestFixtures.HERO_ID, bet=bet, stack=stack,
            hole_cards=cards(*hole_cards) if hole_cards is not None else None
        )
        opponents = [
            AdvisorTestFixtures.create_seat(seat_id, bet=opponent_bet)
            for seat_id, opponent_bet in enumerate(opponent_bets, start=2)
        ]
        return TableState(
            current_buy_in=current_buy_in,
            minimum_raise=minimum_raise,
            pot=pot,
            dealer=len(opponents),
            in_action=0,
            community_cards=cards(*community_cards),
            seats=[hero] + opponents
        )

    @staticmethod
    def create_host_payload(**overrides) -> dict:
        """Create a raw host payload as the game server sends it."""
        payload = {
            "tournament_id": "550d1d68cd7bd10003000003",
            "game_id": "550da1cb2d909006e90004b1",
            "round": 0,
            "bet_index": 0,
            "small_blind": 10,
            "current_buy_in": 20,
            "pot": 30,
            "minimum_raise": 20,
            "dealer": 1,
            "orbits": 0,
            "in_action": 0,
            "players": [
                {
                    "id": 1,
                    "name": "seatbot",
                    "status": "active",
                    "version": "1.0",
                    "stack": 1000,
                    "bet": 0,
                    "hole_cards": [
                        {"rank": "A", "suit": "spades"},
                        {"rank": "A", "suit": "hearts"}
                    ]
                },
                {"id": 2, "name": "Bob", "status": "active", "version": "1.0", "stack": 990, "bet": 10},
                {"id": 3, "name": "Chuck", "status": "active", "version": "1.0", "stack": 980, "bet": 20}
            ],
            "community_cards": []
        }
        payload.update(overrides)
        return payload


class CommitRecorder:
    """Commit callback that records every amount it receives."""

    def __init__(self):
        self.calls: List[int] = []

    def __call__(self, amount: int) -> None:
        self.calls.append(amount)
