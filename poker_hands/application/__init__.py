"""
Application Layer - 应用服务层

应用层可以访问核心层，但不能被核心层访问。

Services:
    ScoringService: 逐行解析、并行计分和结果合并
    ConfigService: 运行配置管理

Types:
    WinTally: 两位玩家的累计胜场
"""

from .types import WinTally
from .line_parser import parse_line, TOKENS_PER_LINE
from .config_service import ConfigService, ScoringConfig, LoggingConfig, configure_logging
from .scoring_service import (
    ScoringService,
    score_hands,
    score_line,
    score_lines,
    partition_lines,
    read_input,
)

__all__ = [
    # 类型
    "WinTally",

    # 服务
    "ScoringService",
    "ConfigService",

    # 配置
    "ScoringConfig",
    "LoggingConfig",
    "configure_logging",

    # 函数
    "parse_line",
    "TOKENS_PER_LINE",
    "score_hands",
    "score_line",
    "score_lines",
    "partition_lines",
    "read_input",
]
