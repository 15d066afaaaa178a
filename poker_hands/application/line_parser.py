"""
逐行解析输入.

每行恰好10个以空白分隔的牌面：前5个是Player 1的手牌，后5个是Player 2的手牌.
"""

import logging
from typing import Optional, Tuple

from ..core.deck.hand import Hand, HAND_SIZE
from ..core.exceptions import MalformedHandError

TOKENS_PER_LINE = HAND_SIZE * 2

logger = logging.getLogger(__name__)


def parse_line(line: str, line_number: Optional[int] = None) -> Tuple[Hand, Hand]:
    """
    把一行文本解析为两手牌.

    Args:
        line: 输入行
        line_number: 行号（从1开始），用于错误提示

    Returns:
        Tuple[Hand, Hand]: (Player 1的手牌, Player 2的手牌)

    Raises:
        MalformedHandError: 当牌面数量不是10个或任一牌面无效时
    """
    tokens = line.split()

    if len(tokens) != TOKENS_PER_LINE:
        error = MalformedHandError(
            tokens,
            f"每行必须是{TOKENS_PER_LINE}张牌，实际: {len(tokens)}",
            line_number,
        )
        logger.error(error.message)
        raise error

    try:
        first = Hand.from_tokens(tokens[:HAND_SIZE])
        second = Hand.from_tokens(tokens[HAND_SIZE:])
    except MalformedHandError as e:
        # 报告整行牌面而不是单手牌
        error = MalformedHandError(tokens, e.reason, line_number)
        logger.error(error.message)
        raise error from e

    return first, second
