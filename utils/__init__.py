"""
utils - 工具函数模块

包含:
- geometry: 几何计算与输入校验
- logging_utils: 日志配置
- report: 结果表格输出
"""

from .geometry import normalize, normalize_strict, as_vector3, as_finite_scalar, angle_between_deg
from .logging_utils import get_logger
from .report import format_trajectory_table

__all__ = [
    "normalize",
    "normalize_strict",
    "as_vector3",
    "as_finite_scalar",
    "angle_between_deg",
    "get_logger",
    "format_trajectory_table",
]
