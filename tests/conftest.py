"""
Test Configuration - pytest配置文件

提供测试的基础设施，包括：
- 通用的测试fixture（评估器、手牌构造、输入文件）
- 测试标记定义
"""

from pathlib import Path
from typing import Callable, List

import pytest

from poker_hands.core.deck import Hand
from poker_hands.core.eval import HandEvaluator


@pytest.fixture
def evaluator() -> HandEvaluator:
    """牌型评估器fixture"""
    return HandEvaluator()


@pytest.fixture
def make_hand() -> Callable[[str], Hand]:
    """从"2S KD TH 9H AD"形式的字符串构造手牌"""
    def _make_hand(text: str) -> Hand:
        return Hand.from_tokens(text.split())
    return _make_hand


@pytest.fixture
def sample_lines() -> List[str]:
    """示例输入行：Player 1赢3局，Player 2赢1局，平局1局"""
    return [
        "QH KH TH AH JH 2S KD TH 9H AD",   # 皇家同花顺胜高牌
        "TS KD TH TC TD 3S KD 3H KH 3D",   # 四条胜葫芦
        "2S 2D KH KD 9H 3S 3D QH QD 9H",   # 两对K胜两对Q
        "2S KD TH 9H AD 2S KD TH 9H AD",   # 平局
        "2S 4D 5H 3H AD 2S 6D 5H 3H 4D",   # A-2-3-4-5是高牌，输给顺子
    ]


@pytest.fixture
def input_file(tmp_path: Path, sample_lines: List[str]) -> Path:
    """写有示例输入行的临时文件"""
    path = tmp_path / "hands.txt"
    path.write_text("\n".join(sample_lines) + "\n", encoding="utf-8")
    return path


# 测试标记定义
def pytest_configure(config):
    """pytest配置"""
    config.addinivalue_line(
        "markers", "property_test: 标记基于属性的测试"
    )
    config.addinivalue_line(
        "markers", "integration: 标记集成测试"
    )
