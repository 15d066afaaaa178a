"""
Property-based Tests for Hand Evaluation - 牌型评估属性测试

使用hypothesis对任意五张牌验证评估器和计分的通用性质.

Tests:
    test_classification_shape_property: 牌型与决胜点数个数一致
    test_reflexive_tie_property: 与自身比较必为平局
    test_antisymmetry_property: 交换双方结果相反
    test_category_dominates_property: 牌型等级优先于点数
    test_partition_invariance_property: 任意切分后合并结果不变
"""

from typing import List

import pytest
from hypothesis import given, settings, strategies as st

from poker_hands.application.scoring_service import partition_lines, score_lines
from poker_hands.application.types import WinTally
from poker_hands.core.deck import Card, Hand, Rank, Suit
from poker_hands.core.eval import (
    ComparisonResult,
    HandCategory,
    HandEvaluator,
    TIEBREAK_LENGTHS,
)

evaluator = HandEvaluator()

# Hypothesis策略定义
card_strategy = st.builds(Card, st.sampled_from(list(Suit)), st.sampled_from(list(Rank)))
hand_strategy = st.lists(card_strategy, min_size=5, max_size=5).map(lambda cards: Hand(tuple(cards)))
line_strategy = st.tuples(hand_strategy, hand_strategy).map(lambda hands: f"{hands[0]} {hands[1]}")


@pytest.mark.property_test
@given(hand_strategy)
def test_classification_shape_property(hand: Hand):
    """Property test: 牌型在1-10之间，决胜点数个数由牌型决定且均来自手牌"""
    result = evaluator.classify(hand)

    assert 1 <= result.category <= 10
    assert len(result.tiebreak) == TIEBREAK_LENGTHS[result.category]
    assert all(rank in hand.ranks for rank in result.tiebreak)


@pytest.mark.property_test
@given(hand_strategy)
def test_reflexive_tie_property(hand: Hand):
    """Property test: 任意手牌与自身比较为平局"""
    classification = evaluator.classify(hand)
    assert evaluator.compare(classification, classification) is ComparisonResult.TIE


@pytest.mark.property_test
@given(hand_strategy, hand_strategy)
def test_antisymmetry_property(first: Hand, second: Hand):
    """Property test: compare(a, b)与compare(b, a)结果相反，或都为平局"""
    forward = evaluator.compare_hands(first, second)
    backward = evaluator.compare_hands(second, first)
    assert backward is forward.reversed()


@pytest.mark.property_test
@given(hand_strategy, hand_strategy)
def test_category_dominates_property(first: Hand, second: Hand):
    """Property test: 牌型等级不同时，等级高者必胜"""
    a = evaluator.classify(first)
    b = evaluator.classify(second)

    if a.category > b.category:
        assert evaluator.compare(a, b) is ComparisonResult.A_WINS
    elif a.category < b.category:
        assert evaluator.compare(a, b) is ComparisonResult.B_WINS


@pytest.mark.property_test
@given(st.permutations(list(Suit)), st.sampled_from(list(Suit)))
def test_low_ace_never_straight_property(suits: List[Suit], fifth_suit: Suit):
    """Property test: 花色不全相同的A-2-3-4-5是高牌，不是顺子"""
    ranks = [Rank.ACE, Rank.TWO, Rank.THREE, Rank.FOUR, Rank.FIVE]
    hand = Hand(tuple(Card(suit, rank) for suit, rank in zip(suits + [fifth_suit], ranks)))

    category = evaluator.classify(hand).category
    assert category == HandCategory.HIGH_CARD


@pytest.mark.property_test
@settings(max_examples=50)
@given(st.lists(line_strategy, max_size=30), st.integers(min_value=1, max_value=8))
def test_partition_invariance_property(lines: List[str], workers: int):
    """Property test: 任意切分后各分块统计之和等于整体统计"""
    whole = score_lines(lines)
    partial = WinTally.total(
        score_lines(chunk, start) for start, chunk in partition_lines(lines, workers)
    )
    assert partial == whole
    assert whole.player_one + whole.player_two <= len(lines)
