"""支持 python -m poker_hands 运行."""

from poker_hands.ui.cli import main

if __name__ == "__main__":
    main()
