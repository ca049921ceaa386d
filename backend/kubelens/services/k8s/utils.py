"""
Kubernetes工具函数模块
提供资源年龄计算和对象属性读取等通用函数
"""

from datetime import datetime, timezone
from typing import Any, Optional, Union

MINUTES_PER_HOUR = 60
MINUTES_PER_DAY = 24 * MINUTES_PER_HOUR
MINUTES_PER_WEEK = 7 * MINUTES_PER_DAY

Timestamp = Union[datetime, str, None]


def parse_timestamp(value: Timestamp) -> Optional[datetime]:
    """
    将创建时间戳规范化为带时区的UTC时间

    Args:
        value: datetime、RFC 3339 字符串（如 "2022-06-27T16:33:06Z"）或 None

    Returns:
        带时区的 datetime；无法解析时返回 None
    """
    if value is None:
        return None

    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            value = datetime.fromisoformat(text.replace("Z", "+00:00"))
        except ValueError:
            return None

    if not isinstance(value, datetime):
        return None

    # 无时区信息时按UTC处理
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def to_age(creation_timestamp: Timestamp, now: datetime) -> str:
    """
    计算资源年龄

    Args:
        creation_timestamp: 创建时间戳
        now: 参考时刻，测试时显式传入以获得可复现的结果

    Returns:
        格式化的年龄字符串，如 "1w2d", "3h5m", "10m", "0m"；时间戳缺失时返回空字符串
    """
    created = parse_timestamp(creation_timestamp)
    reference = parse_timestamp(now)
    if created is None or reference is None:
        return ""

    # 时钟偏差导致的未来时间按0处理
    elapsed = max(0, int((reference - created).total_seconds()))
    total_minutes = elapsed // 60

    weeks = total_minutes // MINUTES_PER_WEEK
    total_days = total_minutes // MINUTES_PER_DAY
    days = total_days - weeks * 7
    total_hours = total_minutes // MINUTES_PER_HOUR
    hours = total_hours - total_days * 24
    minutes = total_minutes - total_hours * MINUTES_PER_HOUR

    parts = []
    if weeks:
        parts.append(f"{weeks}w")
    if days:
        parts.append(f"{days}d")
    if hours:
        parts.append(f"{hours}h")
    # 超过一天后不再显示分钟
    if minutes and total_days == 0:
        parts.append(f"{minutes}m")

    return "".join(parts) or "0m"


def utc_now() -> datetime:
    """当前UTC时刻"""
    return datetime.now(tz=timezone.utc)


def safe_get(obj: Any, *attrs: str, default: Any = None) -> Any:
    """
    安全地逐级读取 kubernetes SDK 对象的属性

    Args:
        obj: 任意对象
        attrs: 属性路径，如 ("metadata", "name")
        default: 任一级为 None 时的返回值

    Returns:
        属性值或默认值
    """
    current = obj
    for attr in attrs:
        if current is None:
            return default
        current = getattr(current, attr, None)
    return current if current is not None else default
