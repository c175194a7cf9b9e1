#!/usr/bin/env python3
"""
Strategy Engine for single-seat betting decisions.

Central coordinator that turns hand strength, the cost of calling and the
table's aggression profile into a fold/call/raise decision, commits the
chips through the host's callback, and feeds the outcome back into the
regret tracker and opponent model for later decisions.
"""

import logging
from typing import Any, Callable, Dict, NamedTuple
from seatbot.models.game_state import TableState
from seatbot.models.decision import Decision
from seatbot.models.showdown import SeatStrength, ShowdownSummary
from seatbot.advisor.hand_evaluator import HandEvaluator, HandCategory, CATEGORY_RATINGS
from seatbot.advisor.opponent_model import OpponentModel
from seatbot.advisor.regret_tracker import RegretTracker
from seatbot.config.settings import Settings

logger = logging.getLogger(__name__)

CommitFn = Callable[[int], None]


class Thresholds(NamedTuple):
    """Strength ratings (0-100) a hand must reach for each action."""
    raise_at: float
    call_at: float
    premium_at: float


class StrategyEngine:
    """Adaptive betting engine for one seat."""

    def __init__(self):
        """Initialize strategy engine with evaluator, opponent model and regret state."""
        self.settings = Settings()

        self.evaluator = HandEvaluator()
        self.opponent_model = OpponentModel()
        self.regret_tracker = RegretTracker()

        # Create configuration settings
        self.settings.create("strategy.preflop.raise_threshold", default=60)
        self.settings.create("strategy.preflop.call_threshold", default=30)
        self.settings.create("strategy.preflop.premium_threshold", default=85)
        self.settings.create("strategy.postflop.raise_threshold", default=50)
        self.settings.create("strategy.postflop.call_threshold", default=25)
        self.settings.create("strategy.postflop.premium_threshold", default=80)
        self.settings.create("strategy.postflop.pot_odds_weight", default=40)
        self.settings.create("strategy.postflop.continuation_weight", default=20)
        self.settings.create("strategy.postflop.cheap_pot_odds", default=0.5)
        self.settings.create("strategy.opponents.threshold", default=3)
        self.settings.create("strategy.opponents.tight_shift", default=10)
        self.settings.create("strategy.opponents.value_shift", default=10)
        self.settings.create("strategy.raise.multiplier", default=2)
        self.settings.create("strategy.raise.premium_multiplier", default=3)
        self.settings.create("strategy.mixing.weight", default=5)

        # Load configuration
        self.preflop = self.settings.get_group("strategy.preflop")
        self.postflop = self.settings.get_group("strategy.postflop")
        self.opponent_threshold = self.settings.get("strategy.opponents.threshold")
        self.tight_shift = self.settings.get("strategy.opponents.tight_shift")
        self.value_shift = self.settings.get("strategy.opponents.value_shift")
        self.raise_multiplier = self.settings.get("strategy.raise.multiplier")
        self.premium_multiplier = self.settings.get("strategy.raise.premium_multiplier")
        self.mixing_weight = self.settings.get("strategy.mixing.weight")

        logger.info("Initialized strategy engine with all components")

    def decide(self, state: TableState, commit: CommitFn) -> Decision:
        """
        Choose and commit the bet for the seat in action.

        Args:
            state: Table snapshot with our seat in action
            commit: Host callback receiving the chip amount, called exactly once

        Returns:
            Decision with the action and the committed amount
        """
        seat = state.acting_seat()
        call_amount = max(0, state.current_buy_in - seat.bet)

        if not seat.has_hole_cards:
            logger.warning(f"Seat {seat.id} has no hole cards, folding")
            self.regret_tracker.record("fold", 0)
            commit(0)
            self.opponent_model.observe(state.seats)
            return Decision(action="fold", amount=0, reasoning="Default fold: no hole cards")

        hand_strength = self.evaluator.score(seat.hole_cards, state.community_cards)
        pot_odds = self._calculate_pot_odds(call_amount, state.pot)

        if state.is_preflop:
            rating = self.evaluator.rate_preflop(hand_strength)
            thresholds = self._preflop_thresholds()
        else:
            rating = self._board_adjusted_rating(state, hand_strength)
            thresholds = self._postflop_thresholds(state, pot_odds)

        thresholds = self._adjust_for_opponents(thresholds)
        thresholds = self._adjust_for_mixing(thresholds)

        action = self._resolve_action(rating, call_amount, thresholds)
        amount = self._resolve_amount(action, rating, call_amount, state.minimum_raise, thresholds)
        all_in = amount > seat.stack
        if all_in:
            logger.info(f"Clamping {action} of {amount} to remaining stack {seat.stack}")
            amount = seat.stack

        self.regret_tracker.record(action, amount)

        decision = Decision(
            action=action,
            amount=amount,
            hand_strength=hand_strength,
            strength_rating=rating,
            pot_odds=pot_odds,
            all_in=all_in,
            reasoning=(
                f"{state.phase}: {self.evaluator.describe(hand_strength)}, rating {rating:.1f} "
                f"vs raise {thresholds.raise_at:.1f} / call {thresholds.call_at:.1f}"
            )
        )

        logger.info(f"Decision: {decision.action} {decision.amount} ({decision.reasoning})")

        commit(amount)
        self.opponent_model.observe(state.seats)

        return decision

    def summarize(self, state: TableState) -> ShowdownSummary:
        """
        Evaluate every active seat's hand at the end of a hand.

        Read-only: regret, strategy and aggression state are untouched.

        Args:
            state: Final table snapshot with revealed hole cards

        Returns:
            ShowdownSummary with one result per active seat
        """
        results = []
        for seat in state.active_seats():
            hole_cards = seat.hole_cards or []
            strength = self.evaluator.score(hole_cards, state.community_cards)
            result = SeatStrength(
                seat_id=seat.id,
                name=seat.name,
                hole_cards=hole_cards,
                hand_strength=strength,
                category=self.evaluator.describe(strength),
                rating=self.evaluator.rate(strength)
            )
            logger.info(
                f"Player {seat.name} hole cards: {' '.join(str(c) for c in hole_cards) or '-'}, "
                f"hand strength: {strength} ({result.category})"
            )
            results.append(result)

        best = max((result.hand_strength for result in results), default=None)
        winners = [result.seat_id for result in results if result.hand_strength == best]

        return ShowdownSummary(
            community_cards=state.community_cards,
            results=results,
            winners=winners
        )

    def bet_request(self, game_state: Dict[str, Any], bet_callback: CommitFn) -> Decision:
        """Validate a raw host payload and decide on it."""
        return self.decide(TableState.model_validate(game_state), bet_callback)

    def showdown(self, game_state: Dict[str, Any]) -> ShowdownSummary:
        """Validate a raw host payload and summarize it."""
        return self.summarize(TableState.model_validate(game_state))

    def _preflop_thresholds(self) -> Thresholds:
        return Thresholds(
            raise_at=self.preflop["raise_threshold"],
            call_at=self.preflop["call_threshold"],
            premium_at=self.preflop["premium_threshold"]
        )

    def _postflop_thresholds(self, state: TableState, pot_odds: float) -> Thresholds:
        """
        Postflop thresholds with pot odds and continuation betting applied.

        Expensive calls need a stronger hand. When the call is cheap and the
        board is dry, the raise threshold drops by the estimated bluff
        success rate.
        """
        raise_at = self.postflop["raise_threshold"]
        call_at = self.postflop["call_threshold"] + pot_odds * self.postflop["pot_odds_weight"]

        if pot_odds < self.postflop["cheap_pot_odds"] and not self._is_board_coordinated(state):
            bluff_frequency = self.opponent_model.bluff_frequency()
            raise_at -= bluff_frequency * self.postflop["continuation_weight"]
            logger.debug(f"Continuation spot, bluff frequency {bluff_frequency:.2f}")

        return Thresholds(raise_at=raise_at, call_at=call_at,
                          premium_at=self.postflop["premium_threshold"])

    def _adjust_for_opponents(self, thresholds: Thresholds) -> Thresholds:
        """
        Tighten against aggressive tables, raise lighter against passive ones.
        """
        summary = self.opponent_model.classify(self.opponent_threshold)

        if summary.aggressive > summary.passive:
            logger.debug(f"Aggressive table {summary}, tightening")
            return thresholds._replace(
                raise_at=thresholds.raise_at + self.tight_shift,
                call_at=thresholds.call_at + self.tight_shift
            )
        if summary.passive > summary.aggressive:
            logger.debug(f"Passive table {summary}, raising for value")
            return thresholds._replace(raise_at=thresholds.raise_at - self.value_shift)
        return thresholds

    def _adjust_for_mixing(self, thresholds: Thresholds) -> Thresholds:
        bias = self.regret_tracker.mixing_bias()
        raise_at = thresholds.raise_at - bias * self.mixing_weight
        return thresholds._replace(raise_at=raise_at, call_at=min(thresholds.call_at, raise_at))

    def _resolve_action(self, rating: float, call_amount: int, thresholds: Thresholds) -> str:
        """
        Pick the action for a rating. Stronger ratings never pick a weaker action.
        """
        if rating >= thresholds.raise_at:
            return "raise"
        if rating >= thresholds.call_at:
            return "call"
        if call_amount == 0:
            # Checking is free
            return "call"
        return "fold"

    def _resolve_amount(self, action: str, rating: float, call_amount: int,
                        minimum_raise: int, thresholds: Thresholds) -> int:
        if action == "fold":
            return 0
        if action == "call":
            return call_amount

        multiplier = self.premium_multiplier if rating >= thresholds.premium_at else self.raise_multiplier
        return call_amount + multiplier * minimum_raise

    def _board_adjusted_rating(self, state: TableState, hand_strength: int) -> float:
        """
        Rating that ignores strength the board hands to everyone.

        Hole cards that reach a higher category than the board, or a higher
        deciding rank inside the board's category (a bigger straight, a
        higher flush card), keep the full rating. When they only add kickers
        the hand is rated inside the high-card band by how far the kickers
        lift it over the board. Never decreases as hand_strength grows.
        """
        board_strength = self.evaluator.score([], state.community_cards)
        board_category = self.evaluator.category_of(board_strength)

        if (board_category == HandCategory.HIGH_CARD
                or self.evaluator.category_of(hand_strength) > board_category
                or self.evaluator.lead_of(hand_strength) > self.evaluator.lead_of(board_strength)):
            return self.evaluator.rate(hand_strength)

        ceiling = self.evaluator.lead_ceiling(board_strength)
        kicker_lift = (hand_strength - board_strength) / (ceiling - board_strength)
        low, high = CATEGORY_RATINGS[HandCategory.HIGH_CARD]
        return round(low + (high - low) * kicker_lift, 2)

    def _is_board_coordinated(self, state: TableState) -> bool:
        """A board that repeats a rank (paired, trips) is coordinated."""
        distinct_ranks = {card.rank for card in state.community_cards}
        return len(distinct_ranks) < len(state.community_cards)

    def _calculate_pot_odds(self, call_amount: int, pot: int) -> float:
        """
        Share of the final pot the call would contribute.

        Returns:
            Pot odds as decimal (0.0 when the pot is empty)
        """
        if pot <= 0:
            return 0.0
        return call_amount / (pot + call_amount)
