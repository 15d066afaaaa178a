"""
命令行入口的集成测试.

使用click的CliRunner端到端运行poker-hands命令.
"""

import pytest
from click.testing import CliRunner

from poker_hands import __version__
from poker_hands.ui.cli import main

pytestmark = pytest.mark.integration


@pytest.fixture
def runner():
    """CliRunner fixture，分开stdout和stderr"""
    try:
        return CliRunner(mix_stderr=False)
    except TypeError:
        # click 8.2起stderr默认单独收集
        return CliRunner()


class TestCLI:
    """poker-hands命令的集成测试."""

    def test_counts_wins(self, runner, input_file):
        """测试输出两位玩家的总胜场."""
        result = runner.invoke(main, [str(input_file), "--workers", "1"])

        assert result.exit_code == 0
        assert f"Reading file: {input_file}" in result.output
        assert "Player 1: 3 hands" in result.output
        assert "Player 2: 1 hands" in result.output

    def test_parallel_workers(self, runner, input_file):
        """测试多进程结果一致."""
        result = runner.invoke(main, [str(input_file), "-w", "2"])

        assert result.exit_code == 0
        assert "Player 1: 3 hands" in result.output

    def test_workers_from_env(self, runner, input_file):
        """测试从环境变量读取工作进程数."""
        result = runner.invoke(main, [str(input_file)], env={"POKER_HANDS_WORKERS": "1"})

        assert result.exit_code == 0
        assert "Player 2: 1 hands" in result.output

    def test_missing_filename(self, runner):
        """测试缺少文件名参数."""
        result = runner.invoke(main, [])

        assert result.exit_code == 1
        assert "Missing filename" in result.stderr

    def test_missing_file(self, runner, tmp_path):
        """测试文件不存在时非零退出且不输出统计."""
        missing = tmp_path / "nope.txt"
        result = runner.invoke(main, [str(missing), "-w", "1"])

        assert result.exit_code == 1
        assert "Error:" in result.stderr
        assert "failed to read from file" in result.stderr
        assert "Player 1" not in result.stdout

    def test_malformed_line(self, runner, tmp_path):
        """测试只有9张牌的行终止运行且不输出统计."""
        path = tmp_path / "bad.txt"
        path.write_text(
            "QH KH TH AH JH 2S KD TH 9H AD\n"
            "2S KD TH 9H AD 2S KD TH 9H\n",
            encoding="utf-8",
        )
        result = runner.invoke(main, [str(path), "-w", "1"])

        assert result.exit_code == 1
        assert "invalid hand found" in result.stderr
        assert "line 2" in result.stderr
        assert "Player 1" not in result.stdout
        assert "Player 2" not in result.stdout

    def test_invalid_workers(self, runner, input_file):
        """测试无效工作进程数由click报告用法错误."""
        result = runner.invoke(main, [str(input_file), "-w", "0"])
        assert result.exit_code == 2

    def test_log_level_option(self, runner, input_file):
        """测试日志级别选项."""
        result = runner.invoke(main, [str(input_file), "-w", "1", "--log-level", "debug"])
        assert result.exit_code == 0

    def test_version(self, runner):
        """测试版本输出."""
        result = runner.invoke(main, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output
