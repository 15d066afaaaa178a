"""胜场统计CLI渲染模块.

这个模块负责把统计结果和错误渲染为命令行输出字符串，
实现显示逻辑与计分逻辑的分离。
"""

from typing import List

import click

from poker_hands.application.types import WinTally
from poker_hands.core.exceptions import InputIOError, MalformedHandError


class CLIRenderer:
    """CLI渲染器.

    所有渲染方法都是纯函数，仅依赖传入的数据。
    """

    @staticmethod
    def render_reading_file(filename: str) -> str:
        """渲染读取文件提示，文件名为绿色."""
        return f"Reading file: {click.style(filename, fg='green')}"

    @staticmethod
    def render_tally(tally: WinTally) -> str:
        """渲染两位玩家的总胜场.

        Args:
            tally: 累计胜场

        Returns:
            两行结果字符串
        """
        lines: List[str] = [
            f"Player 1: {tally.player_one} hands",
            f"Player 2: {tally.player_two} hands",
        ]
        return "\n".join(lines)

    @staticmethod
    def render_missing_filename() -> str:
        return click.style("Missing filename", fg='red')

    @staticmethod
    def render_io_error(error: InputIOError) -> str:
        """渲染文件读取错误，"Error:"和文件名为红色."""
        return (
            f"{click.style('Error:', fg='red')} failed to read from file "
            f"{click.style(error.filename, fg='red')}: {error.reason}"
        )

    @staticmethod
    def render_malformed_hand(error: MalformedHandError) -> str:
        """渲染手牌格式错误，列出出错行的全部牌面."""
        return f"{click.style('Error:', fg='red')} {error.message}"
