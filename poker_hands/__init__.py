"""
poker_hands - 五张牌扑克手牌胜负统计工具

读取每行包含两手五张牌的文本文件，按标准牌型规则判定每行胜者，
并统计Player 1和Player 2的总胜场数.

Packages:
    core: 纯领域逻辑（扑克牌、手牌、牌型评估）
    application: 应用服务（逐行解析、并行计分、配置）
    ui: 命令行界面
"""

__version__ = "1.0.0"

__all__ = ["__version__"]
