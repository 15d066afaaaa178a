"""
牌型评估模块.

提供HandEvaluator类和相关类型，实现牌型识别和比较.
"""

from .types import HandCategory, HandClassification, ComparisonResult, TIEBREAK_LENGTHS
from .evaluator import HandEvaluator

__all__ = [
    'HandCategory',
    'HandClassification',
    'ComparisonResult',
    'TIEBREAK_LENGTHS',
    'HandEvaluator',
]
