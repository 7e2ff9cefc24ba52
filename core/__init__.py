"""
core - 核心算法模块

包含:
- frame: 圆周平面正交基与焊枪姿态标架
- sampler: 圆周等角度采样
- rotation: 旋转矩阵到四元数转换
- validation: 轨迹结果校验
"""

from .frame import build_frame, compose_pose, batch_compose_pose, angle_from_normal
from .sampler import sample_angle, sample_angles, circle_point, batch_circle_points
from .rotation import matrix_to_quaternion, batch_matrix_to_quaternion
from .validation import ValidationSummary, summarize_trajectory

__all__ = [
    "build_frame",
    "compose_pose",
    "batch_compose_pose",
    "angle_from_normal",
    "sample_angle",
    "sample_angles",
    "circle_point",
    "batch_circle_points",
    "matrix_to_quaternion",
    "batch_matrix_to_quaternion",
    "ValidationSummary",
    "summarize_trajectory",
]
