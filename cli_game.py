#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
钓鱼游戏CLI启动脚本
不安装包时也可以直接运行: python cli_game.py --seed 42
"""

from gofish.ui.cli.cli_game import main


if __name__ == "__main__":
    main()
