#!/usr/bin/env python3
"""
Hand evaluator for scoring any set of hold'em cards.

Scores the union of hole and community cards as a single integer where a
higher score is strictly a better hand. Each category owns a disjoint band
of scores; inside a band the deciding ranks (then kickers) break ties, so
two hands compare with plain integer comparison.

Score layout:
    category * 15**5 + tiebreak

where tiebreak packs up to five ordinals (2..14, Ace high) base 15, most
significant first. Unknown ranks count as 0 and cards with unknown suits
never make a flush, so evaluation never raises.
"""

from collections import Counter
from enum import IntEnum
from typing import Iterable, List, Optional, Tuple

from seatbot.models.card import Card, SUITS

TIEBREAK_BASE = 15
TIEBREAK_SLOTS = 5
CATEGORY_BAND = TIEBREAK_BASE ** TIEBREAK_SLOTS
# Score step of one deciding rank inside a category
LEAD_UNIT = TIEBREAK_BASE ** (TIEBREAK_SLOTS - 1)

ACE = 14
WHEEL_HIGH = 5


class HandCategory(IntEnum):
    """Hand categories, weakest first."""
    HIGH_CARD = 0
    ONE_PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8

    @property
    def label(self) -> str:
        return CATEGORY_NAMES[self]


CATEGORY_NAMES = {
    HandCategory.HIGH_CARD: "High Card",
    HandCategory.ONE_PAIR: "One Pair",
    HandCategory.TWO_PAIR: "Two Pair",
    HandCategory.THREE_OF_A_KIND: "Three of a Kind",
    HandCategory.STRAIGHT: "Straight",
    HandCategory.FLUSH: "Flush",
    HandCategory.FULL_HOUSE: "Full House",
    HandCategory.FOUR_OF_A_KIND: "Four of a Kind",
    HandCategory.STRAIGHT_FLUSH: "Straight Flush",
}

# Rating band (low, high) on the 0-100 scale for each category
CATEGORY_RATINGS = {
    HandCategory.HIGH_CARD: (0.0, 20.0),
    HandCategory.ONE_PAIR: (25.0, 45.0),
    HandCategory.TWO_PAIR: (50.0, 60.0),
    HandCategory.THREE_OF_A_KIND: (62.0, 70.0),
    HandCategory.STRAIGHT: (72.0, 78.0),
    HandCategory.FLUSH: (80.0, 85.0),
    HandCategory.FULL_HOUSE: (87.0, 92.0),
    HandCategory.FOUR_OF_A_KIND: (94.0, 97.0),
    HandCategory.STRAIGHT_FLUSH: (98.0, 100.0),
}

# Starting hands: every pair outranks every unpaired hand, which are placed
# by high card then kicker
PREFLOP_PAIR_RATING = (50.0, 100.0)
PREFLOP_HIGH_CARD_WEIGHT = 40.0
PREFLOP_KICKER_WEIGHT = 3.0


def _straight_high(values: Iterable[int]) -> int:
    """Return the high card of the best straight in ``values``, or 0."""
    ranks = {v for v in values if v >= 2}
    for high in range(ACE, WHEEL_HIGH, -1):
        if all(high - offset in ranks for offset in range(5)):
            return high
    # A-2-3-4-5: the Ace plays low only here
    if ACE in ranks and all(v in ranks for v in range(2, WHEEL_HIGH + 1)):
        return WHEEL_HIGH
    return 0


def _rank_fraction(value: int) -> float:
    """Position of a rank between 2 (0.0) and Ace (1.0); unknown ranks count as 2."""
    return (min(max(value, 2), ACE) - 2) / (ACE - 2)


def _top(values: Iterable[int], n: int, exclude: Tuple[int, ...] = ()) -> List[int]:
    return sorted((v for v in values if v not in exclude), reverse=True)[:n]


class HandEvaluator:
    """Total-order hand scorer for any number of cards."""

    def score(self, hole_cards: Optional[List[Card]], community_cards: Optional[List[Card]]) -> int:
        """
        Score hole and community cards together.

        Args:
            hole_cards: Seat's hole cards (may be empty or None)
            community_cards: Board cards (0-5)

        Returns:
            Integer strength; higher is strictly better
        """
        category, tiebreak = self.classify(hole_cards, community_cards)
        return self._encode(category, tiebreak)

    def classify(self, hole_cards: Optional[List[Card]],
                 community_cards: Optional[List[Card]]) -> Tuple[HandCategory, Tuple[int, ...]]:
        """
        Resolve the best hand category and its deciding ranks.

        Returns:
            (category, tiebreak ranks most significant first)
        """
        cards = list(hole_cards or []) + list(community_cards or [])
        values = [card.value for card in cards]
        rank_counts = Counter(v for v in values if v)
        suit_counts = Counter(card.suit for card in cards if card.suit in SUITS)

        flush_suit = next((suit for suit, count in suit_counts.items() if count >= 5), None)

        if flush_suit is not None:
            suited = [card.value for card in cards if card.suit == flush_suit]
            high = _straight_high(suited)
            if high:
                return HandCategory.STRAIGHT_FLUSH, (high,)

        quads = sorted((v for v, c in rank_counts.items() if c >= 4), reverse=True)
        trips = sorted((v for v, c in rank_counts.items() if c == 3), reverse=True)
        pairs = sorted((v for v, c in rank_counts.items() if c == 2), reverse=True)

        if quads:
            quad = quads[0]
            return HandCategory.FOUR_OF_A_KIND, (quad,) + tuple(_top(values, 1, exclude=(quad,)))

        if trips and (len(trips) >= 2 or pairs):
            # A second set of trips plays as the pair
            pair = max(trips[1:] + pairs)
            return HandCategory.FULL_HOUSE, (trips[0], pair)

        if flush_suit is not None:
            return HandCategory.FLUSH, tuple(_top(suited, 5))

        high = _straight_high(values)
        if high:
            return HandCategory.STRAIGHT, (high,)

        if trips:
            return HandCategory.THREE_OF_A_KIND, (trips[0],) + tuple(_top(values, 2, exclude=(trips[0],)))

        if len(pairs) >= 2:
            high_pair, low_pair = pairs[0], pairs[1]
            kicker = _top(values, 1, exclude=(high_pair, low_pair))
            return HandCategory.TWO_PAIR, (high_pair, low_pair) + tuple(kicker)

        if pairs:
            return HandCategory.ONE_PAIR, (pairs[0],) + tuple(_top(values, 3, exclude=(pairs[0],)))

        return HandCategory.HIGH_CARD, tuple(_top(values, 5))

    def category_of(self, score: int) -> HandCategory:
        """Get the category band a score falls in."""
        return HandCategory(min(max(score // CATEGORY_BAND, 0), HandCategory.STRAIGHT_FLUSH))

    def describe(self, score: int) -> str:
        """Human-readable category name for a score."""
        return self.category_of(score).label

    def lead_of(self, score: int) -> int:
        """Deciding rank of a score (pair rank, straight high, top card...)."""
        return (score % CATEGORY_BAND) // LEAD_UNIT

    def lead_ceiling(self, score: int) -> int:
        """Lowest score of the same category with a higher deciding rank."""
        return (score // LEAD_UNIT + 1) * LEAD_UNIT

    def rate(self, score: int) -> float:
        """
        Map a score onto a 0-100 strength scale.

        The leading deciding rank positions the hand inside its category's
        band. The result never decreases as the score increases.
        """
        return self.rate_lead(self.category_of(score), self.lead_of(score))

    def rate_lead(self, category: HandCategory, lead: int) -> float:
        """Rating of a hand of ``category`` whose deciding rank is ``lead``."""
        low, high = CATEGORY_RATINGS[category]
        return round(low + (high - low) * _rank_fraction(lead), 2)

    def rate_preflop(self, score: int) -> float:
        """
        Map a starting-hand score onto the 0-100 scale used before the flop.

        Pairs take the upper half (22 = 50, AA = 100). Unpaired hands stay
        below every pair, placed by their high card and then the kicker.
        Never decreases as the score increases.
        """
        category = self.category_of(score)
        if category > HandCategory.ONE_PAIR:
            return 100.0

        lead = self.lead_of(score)
        if category == HandCategory.ONE_PAIR:
            low, high = PREFLOP_PAIR_RATING
            return round(low + (high - low) * _rank_fraction(lead), 2)

        kicker = (score % LEAD_UNIT) // (LEAD_UNIT // TIEBREAK_BASE)
        return round(
            PREFLOP_HIGH_CARD_WEIGHT * _rank_fraction(lead) + PREFLOP_KICKER_WEIGHT * _rank_fraction(kicker), 2
        )

    def _encode(self, category: HandCategory, tiebreak: Tuple[int, ...]) -> int:
        packed = 0
        for slot in range(TIEBREAK_SLOTS):
            value = tiebreak[slot] if slot < len(tiebreak) else 0
            packed = packed * TIEBREAK_BASE + value
        return int(category) * CATEGORY_BAND + packed
