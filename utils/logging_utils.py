"""
logging_utils - 日志配置

日志级别与格式可通过环境变量 TORCH_TRAJECTORY_LOG_LEVEL、
TORCH_TRAJECTORY_LOG_FORMAT 设置。
"""

import logging
import os


def get_logger(name: str = "torch_trajectory", level: str | None = None) -> logging.Logger:
    """
    返回配置好的 logger。

    - 使用 StreamHandler 与简洁的格式
    - 读取 TORCH_TRAJECTORY_LOG_LEVEL 与 TORCH_TRAJECTORY_LOG_FORMAT 环境变量
    - 重复调用不会添加重复的 handler

    Args:
        name: logger 名称
        level: 日志级别名称，优先于环境变量

    Returns:
        logging.Logger
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        fmt = os.environ.get(
            "TORCH_TRAJECTORY_LOG_FORMAT",
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        )
        handler.setFormatter(logging.Formatter(fmt))
        logger.addHandler(handler)

        level_name = (level or os.environ.get("TORCH_TRAJECTORY_LOG_LEVEL", "INFO")).upper()
        logger.setLevel(getattr(logging, level_name, logging.INFO))

        # 用户已配置 root logger 时避免重复输出
        logger.propagate = False

    return logger
