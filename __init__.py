"""
torch_trajectory - 圆周焊枪姿态轨迹计算库

在圆周轨迹上等角度采样焊枪位姿：每个采样点给出位置、右手正交姿态标架
及其四元数 (w, x, y, z)。焊枪方向相对圆周法向量倾斜固定角度，
并沿行进切向倾斜。
"""

from .algorithm import TorchTrajectory, TrajectoryInput, TrajectoryPoint, calculate_torch_quaternions
from .exceptions import DegenerateInputError, InvalidParameterError, TorchTrajectoryError

__version__ = "0.1.0"
__all__ = [
    "TorchTrajectory",
    "TrajectoryInput",
    "TrajectoryPoint",
    "calculate_torch_quaternions",
    "TorchTrajectoryError",
    "DegenerateInputError",
    "InvalidParameterError",
]
