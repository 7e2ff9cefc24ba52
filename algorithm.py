"""
algorithm - 圆周焊枪姿态轨迹计算主算法

给定圆心、半径、法向量与焊枪倾角，在圆周上等角度采样，
为每个采样点计算位置、右手正交姿态标架及其四元数。
焊枪方向 (标架 z 轴) 与法向量的夹角在所有采样点上恒等于倾角，
标架 x 轴沿圆周行进方向。

计算是纯函数：不持有可变状态，不依赖任何渲染或界面。
"""

from dataclasses import dataclass

import numpy as np

from .core.frame import (
    angle_from_normal,
    batch_compose_pose,
    build_frame,
    compose_pose,
)
from .core.rotation import batch_matrix_to_quaternion, frame_to_matrix, matrix_to_quaternion
from .core.sampler import (
    batch_circle_points,
    check_num_points,
    circle_point,
    sample_angle,
    sample_angles,
)
from .core.validation import ValidationSummary, summarize_trajectory
from .utils.geometry import as_finite_scalar, as_vector3
from .utils.logging_utils import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True, eq=False)
class TrajectoryInput:
    """
    轨迹计算输入 (构造时校验)。

    Attributes:
        center_point: (3,) 圆心
        radius: 半径，可为负 (采样点关于圆心反向)
        normal_vector: (3,) 圆周法向量，非零
        torch_angle: 焊枪倾角 (rad)
        num_points: 采样点数，0 表示空轨迹
    """

    center_point: np.ndarray
    radius: float
    normal_vector: np.ndarray
    torch_angle: float
    num_points: int

    def __post_init__(self):
        object.__setattr__(self, "center_point", as_vector3(self.center_point, "center_point"))
        object.__setattr__(self, "normal_vector", as_vector3(self.normal_vector, "normal_vector"))
        object.__setattr__(self, "radius", as_finite_scalar(self.radius, "radius"))
        object.__setattr__(self, "torch_angle", as_finite_scalar(self.torch_angle, "torch_angle"))
        object.__setattr__(self, "num_points", check_num_points(self.num_points))


@dataclass(frozen=True, eq=False)
class TrajectoryPoint:
    """
    单个采样点的焊枪位姿。

    Attributes:
        index: 采样序号 i
        angle: 圆周角 2πi/N (rad)
        position: (3,) 圆周上的位置
        quaternion: (4,) 姿态四元数 [w, x, y, z]
        torch_direction: (3,) 焊枪方向 (标架 z 轴)
        tangent: (3,) 行进切向 (标架 x 轴)
        y_axis: (3,) 标架 y 轴
        normal: (3,) 单位法向量
        angle_from_normal: 焊枪方向与法向量的实测夹角 (度)
    """

    index: int
    angle: float
    position: np.ndarray
    quaternion: np.ndarray
    torch_direction: np.ndarray
    tangent: np.ndarray
    y_axis: np.ndarray
    normal: np.ndarray
    angle_from_normal: float

    @property
    def rotation_matrix(self) -> np.ndarray:
        """(3, 3) 旋转矩阵，列为 x, y, z 轴。"""
        return frame_to_matrix(self.tangent, self.y_axis, self.torch_direction)

    def to_dict(self) -> dict:
        """转换为普通列表组成的字典，供表格显示或序列化。"""
        return {
            "position": self.position.tolist(),
            "quaternion": self.quaternion.tolist(),
            "torchDirection": self.torch_direction.tolist(),
            "tangent": self.tangent.tolist(),
            "normal": self.normal.tolist(),
            "angleFromNormal": float(self.angle_from_normal),
        }


class TorchTrajectory:
    """
    圆周焊枪姿态轨迹。

    平面正交基在构造时计算一次，之后各采样点的计算互不依赖，
    对象构造后不再修改。

    Attributes:
        params: TrajectoryInput 输入参数
        tangent1: (3,) 平面基向量
        tangent2: (3,) 平面基向量
        unit_normal: (3,) 单位法向量
    """

    def __init__(self, params: TrajectoryInput):
        self.params = params
        self.tangent1, self.tangent2, self.unit_normal = build_frame(params.normal_vector)

        if params.radius == 0.0:
            logger.warning("radius is zero; all positions collapse onto the center point")
        logger.debug(
            "circle basis t1=%s t2=%s n=%s, %d samples",
            self.tangent1,
            self.tangent2,
            self.unit_normal,
            params.num_points,
        )

    @property
    def basis(self) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
        """平面右手正交基 (tangent1, tangent2, unit_normal)。"""
        return self.tangent1, self.tangent2, self.unit_normal

    def __len__(self) -> int:
        return self.params.num_points

    def evaluate(self, i: int) -> TrajectoryPoint:
        """
        计算第 i 个采样点的位姿。

        Args:
            i: 采样序号, 0 <= i < N

        Returns:
            TrajectoryPoint
        """
        p = self.params
        angle = sample_angle(i, p.num_points)
        position, circular_tangent = circle_point(
            p.center_point, p.radius, self.tangent1, self.tangent2, angle
        )
        x_axis, y_axis, z_axis = compose_pose(self.unit_normal, circular_tangent, p.torch_angle)
        quaternion = matrix_to_quaternion(x_axis, y_axis, z_axis)

        return TrajectoryPoint(
            index=i,
            angle=angle,
            position=position,
            quaternion=quaternion,
            torch_direction=z_axis,
            tangent=x_axis,
            y_axis=y_axis,
            normal=self.unit_normal.copy(),
            angle_from_normal=float(angle_from_normal(z_axis, self.unit_normal)),
        )

    def evaluate_batch(self) -> list[TrajectoryPoint]:
        """
        批量计算全部采样点的位姿。

        Returns:
            长度为 N 的 TrajectoryPoint 列表，第 i 项对应圆周角 2πi/N
        """
        p = self.params
        angles = sample_angles(p.num_points)
        positions, circular_tangents = batch_circle_points(
            p.center_point, p.radius, self.tangent1, self.tangent2, angles
        )
        x_axes, y_axes, z_axes = batch_compose_pose(
            self.unit_normal, circular_tangents, p.torch_angle
        )
        quaternions = batch_matrix_to_quaternion(x_axes, y_axes, z_axes)
        measured = angle_from_normal(z_axes, self.unit_normal)

        return [
            TrajectoryPoint(
                index=i,
                angle=float(angles[i]),
                position=positions[i],
                quaternion=quaternions[i],
                torch_direction=z_axes[i],
                tangent=x_axes[i],
                y_axis=y_axes[i],
                normal=self.unit_normal.copy(),
                angle_from_normal=float(measured[i]),
            )
            for i in range(p.num_points)
        ]

    def positions(self) -> np.ndarray:
        """(N, 3) 全部采样位置。"""
        p = self.params
        positions, _ = batch_circle_points(
            p.center_point, p.radius, self.tangent1, self.tangent2, sample_angles(p.num_points)
        )
        return positions

    def quaternions(self) -> np.ndarray:
        """(N, 4) 全部姿态四元数 [w, x, y, z]。"""
        p = self.params
        _, circular_tangents = batch_circle_points(
            p.center_point, p.radius, self.tangent1, self.tangent2, sample_angles(p.num_points)
        )
        x_axes, y_axes, z_axes = batch_compose_pose(
            self.unit_normal, circular_tangents, p.torch_angle
        )
        return batch_matrix_to_quaternion(x_axes, y_axes, z_axes)

    def summary(self) -> ValidationSummary:
        """校验统计量 (夹角一致性、四元数有效性)。"""
        return summarize_trajectory(self.evaluate_batch(), self.params.torch_angle)

    def __repr__(self) -> str:
        p = self.params
        return (
            f"TorchTrajectory(N={p.num_points}, radius={p.radius:.3f}, "
            f"torch_angle={np.degrees(p.torch_angle):.1f}°)"
        )


def calculate_torch_quaternions(
    center_point,
    radius: float,
    normal_vector,
    torch_angle: float,
    num_points: int,
) -> list[TrajectoryPoint]:
    """
    计算圆周轨迹上各采样点的焊枪位姿。

    Args:
        center_point: (3,) 圆心
        radius: 半径
        normal_vector: (3,) 圆周法向量 (非零，无需单位化)
        torch_angle: 焊枪相对法向量的倾角 (rad)
        num_points: 采样点数 (0 返回空列表)

    Returns:
        长度为 num_points 的 TrajectoryPoint 列表

    Raises:
        DegenerateInputError: 法向量长度为零
        InvalidParameterError: 点数为负或非整数，或输入含 NaN/∞
    """
    params = TrajectoryInput(
        center_point=center_point,
        radius=radius,
        normal_vector=normal_vector,
        torch_angle=torch_angle,
        num_points=num_points,
    )
    return TorchTrajectory(params).evaluate_batch()


if __name__ == "__main__":
    from torch_trajectory.presets import default_torch_parameters
    from torch_trajectory.utils.report import format_trajectory_table

    params = default_torch_parameters()

    print("=== 圆周焊枪姿态轨迹测试 ===")
    print(params)

    trajectory = TorchTrajectory(params.to_input())
    points = trajectory.evaluate_batch()
    print(repr(trajectory))
    print()
    print(format_trajectory_table(points))

    summary = trajectory.summary()
    print(f"\n平均夹角: {summary.mean_angle_deg:.1f}°")
    print(f"最大偏差: {summary.max_deviation_deg:.2e}°")
    print(f"校验通过: {summary.is_valid()}")
