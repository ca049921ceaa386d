#!/usr/bin/env python3
"""
kubelens CLI
列出 RBAC 资源
"""

from dotenv import load_dotenv

# 加载环境变量
load_dotenv()

from kubelens.core.logging import setup_logging

# 使用统一日志配置
setup_logging()

from kubelens.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
