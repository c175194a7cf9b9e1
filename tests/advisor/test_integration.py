#!/usr/bin/env python3
"""
Integration tests for the host-facing flow.

Drives StrategyEngine through raw host payloads the way the game server
delivers them: bet requests street by street, then the showdown.
"""

import pytest
from pydantic import ValidationError

from seatbot.advisor.strategy_engine import StrategyEngine
from tests.advisor.test_config import AdvisorTestFixtures, CommitRecorder


def card(rank, suit):
    return {"rank": rank, "suit": suit}


class TestHostFlow:
    """Test cases for bet_request and showdown on raw payloads."""

    def setup_method(self):
        """Set up test fixtures."""
        self.engine = StrategyEngine()
        self.commit = CommitRecorder()

    def test_preflop_bet_request(self):
        """Test pocket aces from the host raise and commit once."""
        payload = AdvisorTestFixtures.create_host_payload()

        decision = self.engine.bet_request(payload, self.commit)

        assert decision.action == "raise"
        assert 40 <= decision.amount <= 1000
        assert self.commit.calls == [decision.amount]

    def test_hand_across_streets(self):
        """Test a hand played from pre-flop to the river keeps committing once per request."""
        preflop = AdvisorTestFixtures.create_host_payload()
        self.engine.bet_request(preflop, self.commit)

        players = preflop["players"]
        flop = AdvisorTestFixtures.create_host_payload(
            bet_index=3,
            current_buy_in=0,
            pot=240,
            community_cards=[card("A", "diamonds"), card("7", "clubs"), card("2", "hearts")],
            players=[dict(player, bet=0) for player in players]
        )
        flop_decision = self.engine.bet_request(flop, self.commit)

        assert flop_decision.action == "raise"
        assert flop_decision.amount >= 20

        river = AdvisorTestFixtures.create_host_payload(
            bet_index=9,
            current_buy_in=200,
            pot=600,
            community_cards=flop["community_cards"] + [card("9", "spades"), card("J", "clubs")],
            players=[dict(player, bet=200 if player["id"] != 1 else 0) for player in players]
        )
        river_decision = self.engine.bet_request(river, self.commit)

        assert river_decision.action in ("call", "raise")
        assert len(self.commit.calls) == 3
        assert self.commit.calls[-1] == river_decision.amount
        assert self.engine.opponent_model.tracked_ids() == [1, 2, 3]
        assert self.engine.regret_tracker.total_regret > 0

    def test_short_form_cards_in_payload(self):
        """Test short rank and suit tokens from the host are normalized."""
        payload = AdvisorTestFixtures.create_host_payload(
            community_cards=[card("T", "h"), card("j", "S"), card("q", "d")]
        )

        decision = self.engine.bet_request(payload, self.commit)

        assert "flop" in decision.reasoning

    def test_unknown_fields_are_ignored(self):
        """Test extra host fields do not break validation."""
        payload = AdvisorTestFixtures.create_host_payload(table_theme="green", big_blind=20)
        payload["players"][1]["avatar"] = "bob.png"

        decision = self.engine.bet_request(payload, self.commit)

        assert decision.action == "raise"

    def test_in_action_out_of_range(self):
        """Test an acting index past the seats is rejected before any commit."""
        payload = AdvisorTestFixtures.create_host_payload(in_action=5)

        with pytest.raises(ValidationError):
            self.engine.bet_request(payload, self.commit)

        assert self.commit.calls == []

    def test_in_action_on_folded_seat(self):
        """Test an acting index on a folded seat is rejected."""
        payload = AdvisorTestFixtures.create_host_payload(in_action=1)
        payload["players"][1]["status"] = "folded"

        with pytest.raises(ValidationError):
            self.engine.bet_request(payload, self.commit)

    def test_zero_minimum_raise_rejected(self):
        """Test the host must send a positive minimum raise."""
        payload = AdvisorTestFixtures.create_host_payload(minimum_raise=0)

        with pytest.raises(ValidationError):
            self.engine.bet_request(payload, self.commit)

    def test_too_many_community_cards_rejected(self):
        """Test a board of six cards is rejected."""
        board = [card(rank, "clubs") for rank in ("2", "3", "4", "5", "6", "7")]
        payload = AdvisorTestFixtures.create_host_payload(community_cards=board)

        with pytest.raises(ValidationError):
            self.engine.bet_request(payload, self.commit)

    def test_showdown_single_winner(self):
        """Test the showdown evaluates active seats and names the best hand."""
        payload = AdvisorTestFixtures.create_host_payload(
            community_cards=[card("2", "spades"), card("7", "hearts"), card("9", "diamonds"),
                             card("J", "clubs"), card("4", "hearts")]
        )
        payload["players"][1]["hole_cards"] = [card("K", "clubs"), card("K", "diamonds")]
        payload["players"][2]["status"] = "folded"
        payload["players"][2]["hole_cards"] = [card("2", "clubs"), card("3", "diamonds")]

        summary = self.engine.showdown(payload)

        assert [result.seat_id for result in summary.results] == [1, 2]
        assert summary.winners == [1]
        assert summary.strength_of(1) > summary.strength_of(2)
        assert summary.results[0].category == "One Pair"

    def test_showdown_split_pot(self):
        """Test a board straight shared by two seats lists both as winners."""
        payload = AdvisorTestFixtures.create_host_payload(
            community_cards=[card("A", "diamonds"), card("K", "hearts"), card("Q", "spades"),
                             card("J", "diamonds"), card("10", "clubs")]
        )
        payload["players"][1]["hole_cards"] = [card("K", "clubs"), card("K", "diamonds")]
        payload["players"][2]["status"] = "out"

        summary = self.engine.showdown(payload)

        assert summary.winners == [1, 2]
        assert {result.category for result in summary.results} == {"Straight"}

    def test_showdown_is_read_only(self):
        """Test the showdown leaves regret and aggression state alone."""
        self.engine.bet_request(AdvisorTestFixtures.create_host_payload(), self.commit)
        regrets = self.engine.regret_tracker.regrets
        strategy = self.engine.regret_tracker.strategy
        aggression = {seat_id: self.engine.opponent_model.aggression(seat_id)
                      for seat_id in self.engine.opponent_model.tracked_ids()}

        payload = AdvisorTestFixtures.create_host_payload(
            community_cards=[card("2", "spades"), card("7", "hearts"), card("9", "diamonds")]
        )
        self.engine.showdown(payload)

        assert self.engine.regret_tracker.regrets == regrets
        assert self.engine.regret_tracker.strategy == strategy
        assert {seat_id: self.engine.opponent_model.aggression(seat_id)
                for seat_id in self.engine.opponent_model.tracked_ids()} == aggression
        assert self.commit.calls == [80]

    def test_showdown_seat_without_cards(self):
        """Test a mucked hand is evaluated on the board alone."""
        payload = AdvisorTestFixtures.create_host_payload(
            community_cards=[card("2", "spades"), card("7", "hearts"), card("9", "diamonds")]
        )

        summary = self.engine.showdown(payload)

        assert summary.results[1].hole_cards == []
        assert summary.results[1].category == "High Card"
        assert summary.winners == [1]
