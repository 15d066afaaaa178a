"""
Application Layer Types - 应用层类型定义

定义胜场统计结果.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable

from ..core.eval.types import ComparisonResult


@dataclass(frozen=True)
class WinTally:
    """
    Player 1和Player 2的累计胜场.

    各分块的部分统计可以按任意顺序相加，结果不变.
    平局不计入任何一方.
    """

    player_one: int = 0
    player_two: int = 0

    def __post_init__(self) -> None:
        if self.player_one < 0 or self.player_two < 0:
            raise ValueError(f"胜场数不能为负数: ({self.player_one}, {self.player_two})")

    def __add__(self, other: 'WinTally') -> 'WinTally':
        if not isinstance(other, WinTally):
            return NotImplemented
        return WinTally(
            self.player_one + other.player_one,
            self.player_two + other.player_two,
        )

    @classmethod
    def from_result(cls, result: ComparisonResult) -> 'WinTally':
        """把单行比较结果转换为(1, 0)、(0, 1)或(0, 0)."""
        if result is ComparisonResult.A_WINS:
            return cls(1, 0)
        if result is ComparisonResult.B_WINS:
            return cls(0, 1)
        return cls()

    @classmethod
    def total(cls, tallies: Iterable['WinTally']) -> 'WinTally':
        """合并多个部分统计."""
        result = cls()
        for tally in tallies:
            result = result + tally
        return result

    def to_dict(self) -> Dict[str, Any]:
        """转换为字典格式"""
        return {
            'player_one': self.player_one,
            'player_two': self.player_two,
        }
