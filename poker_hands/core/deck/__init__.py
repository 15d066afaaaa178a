"""
扑克牌与手牌模块.

提供Card、Hand类以及花色、点数和点数强弱顺序.
"""

from .types import Suit, Rank, CARD_VALUE_ORDERING, sort_ranks_desc, compare_ranks
from .card import Card
from .hand import Hand, HAND_SIZE

__all__ = [
    'Suit',
    'Rank',
    'CARD_VALUE_ORDERING',
    'sort_ranks_desc',
    'compare_ranks',
    'Card',
    'Hand',
    'HAND_SIZE',
]
