"""
扑克牌数据结构.

定义不可变的Card类，支持从两字符牌面解析和字符串表示.
"""

from dataclasses import dataclass

from .types import Suit, Rank


@dataclass(frozen=True)
class Card:
    """
    表示一张扑克牌.

    不可变数据类，包含花色和点数.

    Attributes:
        suit: 花色
        rank: 点数

    Examples:
        >>> card = Card.from_str("TH")
        >>> str(card)
        'TH'
        >>> card.rank
        <Rank.TEN: 10>
    """

    suit: Suit
    rank: Rank

    def __post_init__(self) -> None:
        """
        验证扑克牌数据的有效性.

        Raises:
            TypeError: 当花色或点数类型无效时
        """
        if not isinstance(self.suit, Suit):
            raise TypeError(f"花色必须是Suit类型，实际: {type(self.suit)}")
        if not isinstance(self.rank, Rank):
            raise TypeError(f"点数必须是Rank类型，实际: {type(self.rank)}")

    def __str__(self) -> str:
        """返回与输入文件一致的两字符表示，如"AH"."""
        return f"{self.rank.char}{self.suit.char}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    @classmethod
    def from_str(cls, card_str: str) -> 'Card':
        """
        从两字符牌面创建扑克牌对象.

        Args:
            card_str: 点数字符+花色字符，如"AH"、"2c"

        Returns:
            Card: 对应的扑克牌对象

        Raises:
            TypeError: 当输入不是字符串时
            ValueError: 当长度不为2或点数/花色字符无效时
        """
        if not isinstance(card_str, str):
            raise TypeError(f"输入必须是字符串，实际: {type(card_str)}")

        if len(card_str) != 2:
            raise ValueError(f"卡牌字符串格式错误: {card_str}")

        rank_char, suit_char = card_str[0], card_str[1]
        return cls(Suit.from_char(suit_char), Rank.from_char(rank_char))
