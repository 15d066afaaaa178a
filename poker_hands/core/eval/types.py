"""
牌型评估相关类型定义.

定义牌型等级、评估结果和比较结果等核心数据结构.
"""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Dict, Tuple

from ..deck.types import Rank, compare_ranks


class HandCategory(IntEnum):
    """
    五张牌牌型枚举.

    数值越大表示牌型越强，不同牌型之间直接按数值比较，与具体点数无关.
    """

    HIGH_CARD = 1          # 高牌
    ONE_PAIR = 2           # 一对
    TWO_PAIR = 3           # 两对
    THREE_OF_A_KIND = 4    # 三条
    STRAIGHT = 5           # 顺子
    FLUSH = 6              # 同花
    FULL_HOUSE = 7         # 葫芦
    FOUR_OF_A_KIND = 8     # 四条
    STRAIGHT_FLUSH = 9     # 同花顺
    ROYAL_FLUSH = 10       # 皇家同花顺


# 每种牌型的决胜点数个数，同一牌型的长度固定
TIEBREAK_LENGTHS: Dict[HandCategory, int] = {
    HandCategory.HIGH_CARD: 5,
    HandCategory.ONE_PAIR: 4,
    HandCategory.TWO_PAIR: 3,
    HandCategory.THREE_OF_A_KIND: 1,
    HandCategory.STRAIGHT: 1,
    HandCategory.FLUSH: 5,
    HandCategory.FULL_HOUSE: 1,
    HandCategory.FOUR_OF_A_KIND: 1,
    HandCategory.STRAIGHT_FLUSH: 1,
    HandCategory.ROYAL_FLUSH: 0,
}


class ComparisonResult(Enum):
    """两手牌比较结果."""

    A_WINS = "a_wins"
    B_WINS = "b_wins"
    TIE = "tie"

    @classmethod
    def from_int(cls, value: int) -> 'ComparisonResult':
        """从compare_to风格的整数（1/-1/0）转换."""
        if value > 0:
            return cls.A_WINS
        if value < 0:
            return cls.B_WINS
        return cls.TIE

    def reversed(self) -> 'ComparisonResult':
        """交换两手牌后的结果."""
        if self is ComparisonResult.A_WINS:
            return ComparisonResult.B_WINS
        if self is ComparisonResult.B_WINS:
            return ComparisonResult.A_WINS
        return self


@dataclass(frozen=True)
class HandClassification:
    """
    牌型评估结果.

    包含牌型等级和最小化的决胜点数序列，支持牌型比较.

    Attributes:
        category: 牌型等级
        tiebreak: 同牌型比较时使用的点数，最具决定性的在前

    Examples:
        >>> result = HandClassification(HandCategory.TWO_PAIR, (Rank.KING, Rank.NINE, Rank.TWO))
        >>> result.category
        <HandCategory.TWO_PAIR: 3>
    """

    category: HandCategory
    tiebreak: Tuple[Rank, ...] = ()

    def __post_init__(self) -> None:
        """
        验证评估结果的有效性.

        Raises:
            TypeError: 当牌型等级或决胜点数类型无效时
            ValueError: 当决胜点数个数与牌型不符时
        """
        if not isinstance(self.category, HandCategory):
            raise TypeError(f"牌型等级必须是HandCategory类型，实际: {type(self.category)}")

        for value in self.tiebreak:
            if not isinstance(value, Rank):
                raise TypeError(f"决胜点数必须是Rank类型，实际: {type(value)}")

        expected = TIEBREAK_LENGTHS[self.category]
        if len(self.tiebreak) != expected:
            raise ValueError(
                f"{self.category.name}的决胜点数必须是{expected}个，实际: {len(self.tiebreak)}"
            )

    def compare_to(self, other: 'HandClassification') -> int:
        """
        比较两个牌型的强弱.

        先比较牌型等级，再逐个比较决胜点数，第一个不同的点数决定胜负.

        Args:
            other: 另一个牌型评估结果

        Returns:
            int: 1表示当前牌型更强，-1表示更弱，0表示相等

        Raises:
            TypeError: 当other不是HandClassification类型时
        """
        if not isinstance(other, HandClassification):
            raise TypeError(f"比较对象必须是HandClassification类型，实际: {type(other)}")

        if self.category != other.category:
            return 1 if self.category > other.category else -1

        for mine, theirs in zip(self.tiebreak, other.tiebreak):
            result = compare_ranks(mine, theirs)
            if result != 0:
                return result

        return 0

    def __str__(self) -> str:
        """返回牌型名称和决胜点数，如"TWO_PAIR(K 9 2)"."""
        if not self.tiebreak:
            return self.category.name
        values = " ".join(rank.char for rank in self.tiebreak)
        return f"{self.category.name}({values})"
