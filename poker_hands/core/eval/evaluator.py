"""
五张牌牌型评估器.

提供牌型识别和比较功能.
规则说明：
- 花色只用于同花判定，比较时不区分花色
- A-2-3-4-5不算顺子，按高牌处理
- 葫芦只比较三条的点数
"""

from collections import Counter
from typing import Dict, List

from ..deck.hand import Hand
from ..deck.types import Rank, Suit, sort_ranks_desc
from .types import ComparisonResult, HandCategory, HandClassification


class HandEvaluator:
    """
    五张牌牌型评估器.

    无状态，classify和compare都是纯函数，对任何合法的Hand都不会抛出异常.

    Examples:
        >>> evaluator = HandEvaluator()
        >>> result = evaluator.classify(Hand.from_tokens(["TS", "KD", "TH", "TC", "TD"]))
        >>> result.category
        <HandCategory.FOUR_OF_A_KIND: 8>
        >>> result.tiebreak
        (<Rank.TEN: 10>,)
    """

    def classify(self, hand: Hand) -> HandClassification:
        """
        识别一手牌的牌型和决胜点数.

        Args:
            hand: 五张牌

        Returns:
            HandClassification: 牌型等级和最小化的决胜点数

        Raises:
            TypeError: 当输入不是Hand类型时
        """
        if not isinstance(hand, Hand):
            raise TypeError(f"手牌必须是Hand类型，实际: {type(hand)}")

        buckets = self._bucket_by_frequency(hand.ranks)

        if 4 in buckets:  # 四条
            return HandClassification(HandCategory.FOUR_OF_A_KIND, (buckets[4][0],))

        if 3 in buckets:
            triple = buckets[3][0]
            if 2 in buckets:  # 葫芦，对子点数不参与比较
                return HandClassification(HandCategory.FULL_HOUSE, (triple,))
            return HandClassification(HandCategory.THREE_OF_A_KIND, (triple,))

        if 2 in buckets:
            pairs = buckets[2]
            singles = buckets[1]
            if len(pairs) == 2:  # 两对
                return HandClassification(
                    HandCategory.TWO_PAIR, (pairs[0], pairs[1], singles[0])
                )
            return HandClassification(HandCategory.ONE_PAIR, (pairs[0], *singles))

        return self._classify_distinct(hand)

    def compare(self, a: HandClassification, b: HandClassification) -> ComparisonResult:
        """
        比较两个牌型评估结果.

        Args:
            a: 第一手牌的评估结果
            b: 第二手牌的评估结果

        Returns:
            ComparisonResult: A_WINS、B_WINS或TIE

        Raises:
            TypeError: 当输入参数类型无效时
        """
        if not isinstance(a, HandClassification):
            raise TypeError(f"a必须是HandClassification类型，实际: {type(a)}")
        if not isinstance(b, HandClassification):
            raise TypeError(f"b必须是HandClassification类型，实际: {type(b)}")

        return ComparisonResult.from_int(a.compare_to(b))

    def compare_hands(self, a: Hand, b: Hand) -> ComparisonResult:
        """识别并比较两手牌."""
        return self.compare(self.classify(a), self.classify(b))

    def _classify_distinct(self, hand: Hand) -> HandClassification:
        """
        识别五个点数互不相同的手牌.

        Args:
            hand: 没有重复点数的五张牌

        Returns:
            HandClassification: 皇家同花顺、同花顺、同花、顺子或高牌
        """
        ordered = sort_ranks_desc(hand.ranks)
        straight = self._is_straight(ordered)
        flush = self._is_flush(hand.suits)

        if straight and flush:
            if ordered[0] == Rank.ACE:
                return HandClassification(HandCategory.ROYAL_FLUSH)
            return HandClassification(HandCategory.STRAIGHT_FLUSH, (ordered[0],))

        if straight:
            return HandClassification(HandCategory.STRAIGHT, (ordered[0],))

        if flush:
            return HandClassification(HandCategory.FLUSH, tuple(ordered))

        return HandClassification(HandCategory.HIGH_CARD, tuple(ordered))

    @staticmethod
    def _bucket_by_frequency(ranks: List[Rank]) -> Dict[int, List[Rank]]:
        """
        按出现次数对点数分组.

        Args:
            ranks: 五张牌的点数

        Returns:
            Dict[int, List[Rank]]: 出现次数 -> 该次数下的全部点数（降序）
        """
        buckets: Dict[int, List[Rank]] = {}
        for rank, count in Counter(ranks).items():
            buckets.setdefault(count, []).append(rank)
        return {count: sort_ranks_desc(values) for count, values in buckets.items()}

    @staticmethod
    def _is_straight(ordered_ranks: List[Rank]) -> bool:
        """
        检查降序且无重复的五个点数是否为顺子.

        最高点与最低点恰好相差4即为顺子；A只作最大牌.
        """
        return ordered_ranks[0] - ordered_ranks[-1] == 4

    @staticmethod
    def _is_flush(suits: List[Suit]) -> bool:
        """检查相邻两张牌的花色是否全部相同."""
        return all(first == second for first, second in zip(suits, suits[1:]))
