"""
defaults - 操作员参数与预设

参数以操作员习惯的单位给出 (倾角为度)，to_input() 是唯一做
度到弧度换算的地方，核心计算只接受弧度。

默认值:
    圆心 (0, 0, 0)，半径 1.0，法向量 (0, 0, 1)，倾角 30°，8 个采样点
"""

from dataclasses import dataclass

import numpy as np

from ..algorithm import TrajectoryInput


@dataclass
class TorchParameters:
    """焊枪轨迹操作员参数"""

    center: tuple = (0.0, 0.0, 0.0)  # 圆心
    radius: float = 1.0  # 半径
    normal: tuple = (0.0, 0.0, 1.0)  # 圆周法向量
    torch_angle_deg: float = 30.0  # 焊枪倾角 (deg)
    num_points: int = 8  # 采样点数

    def to_input(self) -> TrajectoryInput:
        """转换为核心计算输入 (倾角换算为弧度并校验)。"""
        return TrajectoryInput(
            center_point=self.center,
            radius=self.radius,
            normal_vector=self.normal,
            torch_angle=np.radians(self.torch_angle_deg),
            num_points=self.num_points,
        )


def default_torch_parameters() -> TorchParameters:
    """
    获取默认参数。

    Returns:
        TorchParameters: 水平圆周，倾角 30°，8 个采样点
    """
    return TorchParameters()


def tilted_plane_parameters() -> TorchParameters:
    """
    获取倾斜平面上的预设参数。

    法向量不沿坐标轴，用于检查任意方向法向量下的夹角恒定性。

    Returns:
        TorchParameters
    """
    return TorchParameters(
        center=(10.0, -5.0, 2.5),
        radius=25.0,
        normal=(1.0, 2.0, 2.0),
        torch_angle_deg=15.0,
        num_points=12,
    )


if __name__ == "__main__":
    for params in (default_torch_parameters(), tilted_plane_parameters()):
        trajectory_input = params.to_input()
        print(params)
        print(f"  倾角: {trajectory_input.torch_angle:.6f} rad")
