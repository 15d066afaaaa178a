"""
扑克手牌统计业务异常定义
只有两类错误，检测到即终止整个运行，不做降级或重试
"""

from typing import Optional, Sequence, Tuple


class PokerHandsError(Exception):
    """扑克手牌统计基础异常类"""

    def __init__(self, message: str, error_code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code


class InputIOError(PokerHandsError):
    """输入文件缺失或不可读异常"""

    def __init__(self, filename: str, reason: str):
        super().__init__(
            f"failed to read from file {filename}: {reason}",
            error_code="INPUT_IO",
        )
        self.filename = filename
        self.reason = reason

    def __reduce__(self):
        return self.__class__, (self.filename, self.reason)


class MalformedHandError(PokerHandsError):
    """
    手牌格式错误异常.

    一行不能拆成恰好两手五张牌，或者某张牌的点数/花色字符无效.

    Attributes:
        tokens: 出错行（或出错手牌）的全部牌面字符串
        line_number: 出错行号（从1开始），未知时为None
    """

    def __init__(self, tokens: Sequence[str], reason: str = "",
                 line_number: Optional[int] = None):
        self.tokens: Tuple[str, ...] = tuple(tokens)
        self.line_number = line_number
        self.reason = reason

        message = f"invalid hand found: {list(self.tokens)}"
        if reason:
            message += f" ({reason})"
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message, error_code="MALFORMED_HAND")

    def __reduce__(self):
        # 工作进程抛出的异常需要原样传回主进程
        return self.__class__, (self.tokens, self.reason, self.line_number)
