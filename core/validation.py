"""
validation - 轨迹结果校验

统计各采样点焊枪方向与法向量夹角的一致性，并用 scipy 的 Rotation
独立检查四元数与姿态标架是否一致。
"""

from dataclasses import dataclass

import numpy as np
from scipy.spatial.transform import Rotation


@dataclass(frozen=True)
class ValidationSummary:
    """轨迹校验统计量 (角度单位均为度)"""

    num_points: int
    requested_angle_deg: float
    mean_angle_deg: float
    max_deviation_deg: float  # max |angle_i - mean|
    mean_error_deg: float  # |mean - requested|
    max_quaternion_norm_error: float  # max | |q| - 1 |
    max_frame_error: float  # max |R(q) - [x y z]|

    def is_valid(self, tolerance_deg: float = 0.1, frame_tolerance: float = 1e-6) -> bool:
        """夹角恒定且等于目标倾角，四元数与标架一致。"""
        if self.num_points == 0:
            return False
        return (
            self.max_deviation_deg <= tolerance_deg
            and self.mean_error_deg <= tolerance_deg
            and self.max_quaternion_norm_error <= frame_tolerance
            and self.max_frame_error <= frame_tolerance
        )


def summarize_trajectory(points, torch_angle: float) -> ValidationSummary:
    """
    计算轨迹校验统计量。

    Args:
        points: TrajectoryPoint 序列
        torch_angle: 目标焊枪倾角 (rad)，按 2π 周期折算到 [0°, 180°] 后比较

    Returns:
        ValidationSummary；空序列时统计量为 NaN
    """
    # 实测夹角为 arccos(cos θ)，目标值同样折算
    requested = float(np.degrees(np.arccos(np.clip(np.cos(torch_angle), -1.0, 1.0))))
    N = len(points)
    if N == 0:
        nan = float("nan")
        return ValidationSummary(0, requested, nan, nan, nan, nan, nan)

    angles = np.array([p.angle_from_normal for p in points])
    quaternions = np.array([p.quaternion for p in points])
    frames = np.array([p.rotation_matrix for p in points])

    mean_angle = float(np.mean(angles))
    norms = np.linalg.norm(quaternions, axis=1)

    # scipy 使用 [x, y, z, w] 顺序
    reconstructed = Rotation.from_quat(quaternions[:, [1, 2, 3, 0]]).as_matrix()

    return ValidationSummary(
        num_points=N,
        requested_angle_deg=requested,
        mean_angle_deg=mean_angle,
        max_deviation_deg=float(np.max(np.abs(angles - mean_angle))),
        mean_error_deg=abs(mean_angle - requested),
        max_quaternion_norm_error=float(np.max(np.abs(norms - 1.0))),
        max_frame_error=float(np.max(np.abs(reconstructed - frames))),
    )
