"""
ConfigService - 配置管理服务

集中管理运行配置，包括：
- 并行计分配置（工作进程数）
- 日志配置

配置以命名档案（profile）的形式提供，命令行参数可在档案基础上覆盖.
"""

import logging
import os
from typing import Dict, Optional

from pydantic import Field, field_validator
from pydantic.dataclasses import dataclass as pydantic_dataclass

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def default_worker_count() -> int:
    """默认工作进程数：可用CPU核数，无法检测时为1."""
    return os.cpu_count() or 1


@pydantic_dataclass(frozen=True)
class ScoringConfig:
    """并行计分配置"""
    workers: int = Field(default_factory=default_worker_count, ge=1, description="工作进程数")


@pydantic_dataclass(frozen=True)
class LoggingConfig:
    """日志配置"""
    log_level: str = Field("WARNING", description="日志级别")
    log_format: str = Field(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        min_length=1,
        description="日志格式",
    )

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """日志级别必须是标准级别名之一（大小写不敏感）."""
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"无效的日志级别: {v}，可选: {', '.join(LOG_LEVELS)}")
        return level


class ConfigService:
    """配置管理服务"""

    def __init__(self):
        """初始化配置服务"""
        self.logger = logging.getLogger(__name__)
        self._scoring_profiles: Dict[str, ScoringConfig] = {}
        self._logging_profiles: Dict[str, LoggingConfig] = {}
        self._load_default_configs()

    def _load_default_configs(self) -> None:
        """加载默认配置"""
        self._scoring_profiles = {
            'default': ScoringConfig(),
            'serial': ScoringConfig(workers=1),
        }
        self._logging_profiles = {
            'default': LoggingConfig(),
            'debug': LoggingConfig(log_level='DEBUG'),
        }
        self.logger.debug("默认配置加载完成")

    def list_profiles(self) -> Dict[str, list]:
        """列出所有可用的配置档案名."""
        return {
            'scoring': sorted(self._scoring_profiles),
            'logging': sorted(self._logging_profiles),
        }

    def get_scoring_config(self, profile: str = "default",
                           workers: Optional[int] = None) -> ScoringConfig:
        """
        获取并行计分配置.

        Args:
            profile: 配置档案名
            workers: 覆盖档案中的工作进程数

        Returns:
            ScoringConfig: 合并后的配置

        Raises:
            KeyError: 当档案不存在时
            ValueError: 当覆盖值无效时
        """
        if profile not in self._scoring_profiles:
            raise KeyError(f"未知的计分配置档案: {profile}")

        config = self._scoring_profiles[profile]
        if workers is not None:
            config = ScoringConfig(workers=workers)
        return config

    def get_logging_config(self, profile: str = "default",
                           log_level: Optional[str] = None) -> LoggingConfig:
        """
        获取日志配置.

        Args:
            profile: 配置档案名
            log_level: 覆盖档案中的日志级别

        Returns:
            LoggingConfig: 合并后的配置

        Raises:
            KeyError: 当档案不存在时
            ValueError: 当覆盖值无效时
        """
        if profile not in self._logging_profiles:
            raise KeyError(f"未知的日志配置档案: {profile}")

        config = self._logging_profiles[profile]
        if log_level is not None:
            config = LoggingConfig(log_level=log_level, log_format=config.log_format)
        return config


def configure_logging(config: LoggingConfig) -> None:
    """按日志配置初始化根日志器，只应由程序入口调用一次."""
    logging.basicConfig(level=getattr(logging, config.log_level), format=config.log_format)
