"""
五张牌手牌数据结构.
"""

from dataclasses import dataclass
from typing import Iterator, List, Sequence, Tuple

from ..exceptions import MalformedHandError
from .card import Card
from .types import Rank, Suit

HAND_SIZE = 5


@dataclass(frozen=True)
class Hand:
    """
    表示恰好五张牌的一手牌.

    解析后不可变；牌数不为5视为输入格式错误.

    Attributes:
        cards: 按输入顺序排列的五张牌

    Examples:
        >>> hand = Hand.from_tokens(["2S", "KD", "TH", "9H", "AD"])
        >>> str(hand)
        '2S KD TH 9H AD'
    """

    cards: Tuple[Card, ...]

    def __post_init__(self) -> None:
        """
        验证手牌的牌数.

        Raises:
            MalformedHandError: 当牌数不是5张时
        """
        if len(self.cards) != HAND_SIZE:
            raise MalformedHandError(
                [str(card) for card in self.cards],
                f"手牌必须是{HAND_SIZE}张，实际: {len(self.cards)}",
            )

    @classmethod
    def from_tokens(cls, tokens: Sequence[str]) -> 'Hand':
        """
        从牌面字符串序列创建手牌.

        Args:
            tokens: 五个两字符牌面，如["2S", "KD", "TH", "9H", "AD"]

        Returns:
            Hand: 解析后的手牌

        Raises:
            MalformedHandError: 当牌数不是5张或任一牌面无效时
        """
        if len(tokens) != HAND_SIZE:
            raise MalformedHandError(
                tokens, f"手牌必须是{HAND_SIZE}张，实际: {len(tokens)}"
            )

        cards: List[Card] = []
        for token in tokens:
            try:
                cards.append(Card.from_str(token))
            except ValueError as e:
                raise MalformedHandError(tokens, str(e)) from e
        return cls(tuple(cards))

    @property
    def ranks(self) -> List[Rank]:
        """按输入顺序返回五张牌的点数."""
        return [card.rank for card in self.cards]

    @property
    def suits(self) -> List[Suit]:
        """按输入顺序返回五张牌的花色."""
        return [card.suit for card in self.cards]

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __len__(self) -> int:
        return len(self.cards)

    def __str__(self) -> str:
        return " ".join(str(card) for card in self.cards)
