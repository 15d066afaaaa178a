"""
Core Module - 纯领域逻辑层

核心模块只能依赖其他核心模块，不能依赖应用层或UI层。

Modules:
    deck: 扑克牌、手牌和点数强弱顺序
    eval: 牌型识别和手牌比较
    exceptions: 业务异常定义
"""

from .exceptions import PokerHandsError, InputIOError, MalformedHandError

__all__ = [
    'PokerHandsError',
    'InputIOError',
    'MalformedHandError',
]
