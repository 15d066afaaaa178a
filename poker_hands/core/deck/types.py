"""
扑克牌相关类型定义.

定义扑克牌的花色、点数枚举，以及点数强弱顺序的工具函数.
"""

from enum import Enum, IntEnum
from typing import Dict, Iterable, List


class Suit(Enum):
    """
    扑克牌花色枚举.

    定义四种标准扑克牌花色，使用Unicode符号表示.
    花色只用于同花判定，从不参与大小比较.
    """

    HEARTS = "♥"      # 红桃
    DIAMONDS = "♦"    # 方块
    CLUBS = "♣"       # 梅花
    SPADES = "♠"      # 黑桃

    @property
    def char(self) -> str:
        """返回花色在输入文件中的单字符表示，如"H"."""
        return _SUIT_TO_CHAR[self]

    @classmethod
    def from_char(cls, char: str) -> 'Suit':
        """
        从单字符解析花色（大小写不敏感）.

        Raises:
            ValueError: 当字符不是S/H/D/C之一时
        """
        try:
            return _CHAR_TO_SUIT[char.upper()]
        except KeyError:
            raise ValueError(f"无效的花色: {char}") from None


class Rank(IntEnum):
    """
    扑克牌点数枚举.

    这是固定的点数强弱表：数值越大点数越强，A最强，2最弱.
    本工具不支持A作为最小牌（A-2-3-4-5不算顺子）.
    """

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    @property
    def char(self) -> str:
        """返回点数在输入文件中的单字符表示，如"T"."""
        return _RANK_TO_CHAR[self]

    @classmethod
    def from_char(cls, char: str) -> 'Rank':
        """
        从单字符解析点数（大小写不敏感）.

        Raises:
            ValueError: 当字符不在AKQJT98765432中时
        """
        try:
            return _CHAR_TO_RANK[char.upper()]
        except KeyError:
            raise ValueError(f"无效的点数: {char}") from None


# 点数字符按强弱排列，最强在前
CARD_VALUE_ORDERING = "AKQJT98765432"

_CHAR_TO_RANK: Dict[str, Rank] = {
    char: Rank(14 - index) for index, char in enumerate(CARD_VALUE_ORDERING)
}
_RANK_TO_CHAR: Dict[Rank, str] = {rank: char for char, rank in _CHAR_TO_RANK.items()}

_CHAR_TO_SUIT: Dict[str, Suit] = {
    "H": Suit.HEARTS,
    "D": Suit.DIAMONDS,
    "C": Suit.CLUBS,
    "S": Suit.SPADES,
}
_SUIT_TO_CHAR: Dict[Suit, str] = {suit: char for char, suit in _CHAR_TO_SUIT.items()}


def sort_ranks_desc(ranks: Iterable[Rank]) -> List[Rank]:
    """
    按强弱降序排列点数.

    Args:
        ranks: 任意顺序的点数

    Returns:
        List[Rank]: 最强点数在前的新列表
    """
    return sorted(ranks, reverse=True)


def compare_ranks(a: Rank, b: Rank) -> int:
    """
    比较两个点数的强弱.

    Returns:
        int: 1表示a更强，-1表示b更强，0表示相同
    """
    if a == b:
        return 0
    return 1 if a > b else -1

