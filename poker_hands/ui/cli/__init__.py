"""胜场统计CLI用户界面模块.

这个包提供命令行入口，包括：
- click命令（参数解析、退出码）
- 渲染器（显示逻辑）
"""

from .cli_app import main
from .render import CLIRenderer

__all__ = [
    'main',
    'CLIRenderer',
]
