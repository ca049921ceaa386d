"""
Logging configuration for kubelens.
统一的日志配置模块，标准库 logging 负责输出，structlog 负责结构化渲染。
"""
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

import structlog

from ..config import Settings, get_settings

_CONFIGURED = False

LOG_FORMAT = "%(message)s"


def _build_renderer(json_output: bool, use_color: bool):
    if json_output:
        return structlog.processors.JSONRenderer(ensure_ascii=False)
    return structlog.dev.ConsoleRenderer(colors=use_color)


def setup_logging(
    settings: Optional[Settings] = None,
    level: Optional[str] = None,
    log_file: Optional[str] = None,
    use_color: bool = True,
) -> structlog.stdlib.BoundLogger:
    """配置日志系统（统一配置 root logger 与 structlog）

    Args:
        settings: 应用配置，默认读取环境变量
        level: 日志级别，覆盖配置
        log_file: 日志文件路径，覆盖配置
        use_color: 控制台是否使用彩色输出（仅在 TTY 下生效）

    Returns:
        配置好的 structlog 日志记录器
    """
    global _CONFIGURED
    settings = settings or get_settings()

    if _CONFIGURED:
        return get_logger("kubelens")

    root = logging.getLogger()
    root.setLevel((level or settings.log_level).upper())

    # 清理默认 handler，避免重复输出
    for h in list(root.handlers):
        root.removeHandler(h)

    # 日志统一写到 stderr，stdout 留给命令输出
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.DEBUG if settings.is_debug else logging.INFO)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(console_handler)

    # 文件 handler（可选）
    file_path = log_file or settings.log_file
    if file_path:
        log_path = Path(file_path)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            file_path,
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(file_handler)

    # kubernetes 客户端的 urllib3 日志过于冗长
    logging.getLogger("urllib3").setLevel(logging.WARNING)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            _build_renderer(settings.log_json, use_color and sys.stderr.isatty()),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    _CONFIGURED = True
    return get_logger("kubelens")


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """获取日志记录器

    Args:
        name: 日志记录器名称

    Returns:
        structlog 日志记录器
    """
    return structlog.get_logger(name)
