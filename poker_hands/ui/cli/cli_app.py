"""胜场统计命令行入口.

用法: poker-hands [OPTIONS] FILENAME
"""

import logging
import sys
from typing import Optional

import click

from poker_hands import __version__
from poker_hands.application.config_service import (
    LOG_LEVELS,
    ConfigService,
    configure_logging,
)
from poker_hands.application.scoring_service import ScoringService
from poker_hands.core.exceptions import InputIOError, MalformedHandError
from .render import CLIRenderer

# 任何错误都以该状态码终止整个运行
EXIT_FAILURE = 1


@click.command(name="poker-hands")
@click.argument("filename", required=False)
@click.option(
    "-w", "--workers",
    type=click.IntRange(min=1),
    default=None,
    envvar="POKER_HANDS_WORKERS",
    help="工作进程数（默认: CPU核数）",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    envvar="POKER_HANDS_LOG_LEVEL",
    help="日志级别（默认: WARNING）",
)
@click.version_option(__version__, prog_name="poker-hands")
def main(filename: Optional[str], workers: Optional[int], log_level: Optional[str]) -> None:
    """统计FILENAME中每行两手牌的胜负，输出Player 1和Player 2的总胜场."""
    if not filename:
        click.echo(CLIRenderer.render_missing_filename(), err=True)
        sys.exit(EXIT_FAILURE)

    config_service = ConfigService()
    configure_logging(config_service.get_logging_config(log_level=log_level))
    logger = logging.getLogger(__name__)
    scoring_config = config_service.get_scoring_config(workers=workers)

    click.echo(CLIRenderer.render_reading_file(filename))

    service = ScoringService(scoring_config)
    try:
        tally = service.score_file(filename)
    except InputIOError as e:
        click.echo(CLIRenderer.render_io_error(e), err=True)
        sys.exit(EXIT_FAILURE)
    except MalformedHandError as e:
        click.echo(CLIRenderer.render_malformed_hand(e), err=True)
        sys.exit(EXIT_FAILURE)

    logger.debug(f"输出结果: {tally.to_dict()}")
    click.echo(CLIRenderer.render_tally(tally))


if __name__ == "__main__":
    main()
