"""
ScoringService - 胜场统计服务

把输入行切成连续的分块，每个分块由一个工作进程独立计分，
所有分块完成后按加法合并.分块之间没有共享的可变状态，
唯一的同步点是最后的等待与合并.
"""

import logging
import math
from concurrent.futures import ProcessPoolExecutor
from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union

from ..core.deck.hand import Hand
from ..core.eval.evaluator import HandEvaluator
from ..core.exceptions import InputIOError, MalformedHandError
from .config_service import ScoringConfig
from .line_parser import parse_line
from .types import WinTally

logger = logging.getLogger(__name__)

_evaluator = HandEvaluator()

# (第一行的行号, 该分块的行)
Chunk = Tuple[int, List[str]]


def score_hands(first: Hand, second: Hand) -> WinTally:
    """
    比较两手牌并返回单行胜场.

    Returns:
        WinTally: (1, 0)、(0, 1)，平局时为(0, 0)
    """
    return WinTally.from_result(_evaluator.compare_hands(first, second))


def score_line(line: str, line_number: Optional[int] = None) -> WinTally:
    """
    解析并计分一行.

    Raises:
        MalformedHandError: 当该行格式错误时
    """
    first, second = parse_line(line, line_number)
    tally = score_hands(first, second)
    logger.debug(f"第{line_number}行: {first} | {second} -> {tally.to_dict()}")
    return tally


def score_lines(lines: Sequence[str], first_line_number: int = 1) -> WinTally:
    """
    顺序计分一组行.

    Args:
        lines: 输入行
        first_line_number: lines[0]在整个文件中的行号

    Returns:
        WinTally: 这组行的部分统计

    Raises:
        MalformedHandError: 遇到第一行格式错误时立即抛出
    """
    result = WinTally()
    for offset, line in enumerate(lines):
        result = result + score_line(line, first_line_number + offset)
    return result


def score_chunk(chunk: Chunk) -> WinTally:
    """工作进程入口：计分一个分块."""
    first_line_number, lines = chunk
    logger.debug(f"开始计分分块: 第{first_line_number}行起，共{len(lines)}行")
    return score_lines(lines, first_line_number)


def partition_lines(lines: Sequence[str], workers: int) -> List[Chunk]:
    """
    把输入行切成不超过workers个的连续分块.

    分块大小为ceil(行数 / workers)，最后一块可能较小；没有输入行时返回空列表.

    Raises:
        ValueError: 当workers小于1时
    """
    if workers < 1:
        raise ValueError(f"工作进程数必须至少为1，实际: {workers}")
    if not lines:
        return []

    chunk_size = math.ceil(len(lines) / workers)
    return [
        (start + 1, list(lines[start:start + chunk_size]))
        for start in range(0, len(lines), chunk_size)
    ]


def read_input(path: Union[str, Path]) -> str:
    """
    读取UTF-8输入文件.

    Raises:
        InputIOError: 当文件不存在、不可读或不是合法的UTF-8时
    """
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        error = InputIOError(str(path), str(e))
        logger.error(error.message)
        raise error from e


class ScoringService:
    """胜场统计服务"""

    def __init__(self, config: Optional[ScoringConfig] = None):
        """
        初始化统计服务.

        Args:
            config: 并行计分配置，为None时使用默认配置
        """
        self.config = config or ScoringConfig()
        self.logger = logging.getLogger(__name__)

    def score_file(self, path: Union[str, Path]) -> WinTally:
        """
        统计输入文件中两位玩家的总胜场.

        Raises:
            InputIOError: 当文件无法读取时
            MalformedHandError: 当任一行格式错误时
        """
        return self.score_text(read_input(path))

    def score_text(self, text: str) -> WinTally:
        """统计一段文本（每行一局）中两位玩家的总胜场."""
        return self.score_all(text.splitlines())

    def score_all(self, lines: Sequence[str]) -> WinTally:
        """
        并行计分所有行并合并结果.

        只有一个工作进程或只有一个分块时直接在当前进程计分.

        Raises:
            MalformedHandError: 当任一行格式错误时，整个运行终止
        """
        chunks = partition_lines(lines, self.config.workers)
        self.logger.info(
            f"共{len(lines)}行，切分为{len(chunks)}个分块，工作进程数: {self.config.workers}"
        )

        if len(chunks) <= 1:
            partials = [score_chunk(chunk) for chunk in chunks]
        else:
            partials = self._score_in_parallel(chunks)

        total = WinTally.total(partials)
        self.logger.info(f"统计完成: {total.to_dict()}")
        return total

    def _score_in_parallel(self, chunks: List[Chunk]) -> List[WinTally]:
        """每个分块交给一个工作进程，等待全部完成后返回各分块结果."""
        with ProcessPoolExecutor(max_workers=len(chunks)) as executor:
            futures = [executor.submit(score_chunk, chunk) for chunk in chunks]
            try:
                return [future.result() for future in futures]
            except MalformedHandError:
                executor.shutdown(wait=False, cancel_futures=True)
                raise
