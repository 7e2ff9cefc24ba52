"""
frame - 圆周平面标架与焊枪姿态标架

实现:
1. 由法向量构造右手正交基 (tangent1, tangent2, normal)
2. 由切向与倾角构造焊枪姿态标架 (x, y, z)
"""

import numpy as np

from ..utils.geometry import angle_between_deg, as_vector3, normalize, normalize_strict

# 辅助向量选择阈值：|n_x| < 0.9 时取 x 轴，否则取 y 轴。
# 保证辅助向量与法向量夹角不小于约 26°。
AUXILIARY_THRESHOLD = 0.9


def build_frame(normal: np.ndarray) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    构造圆周平面的右手正交基。

    对辅助向量 a 做 Gram-Schmidt 正交化:
        tangent1 = normalize(a - (a·n) n)
        tangent2 = normalize(n × tangent1)
    满足 tangent1 × tangent2 = n。

    Args:
        normal: (3,) 圆周法向量，非零，无需单位化

    Returns:
        tangent1: (3,) 平面内第一个单位切向量
        tangent2: (3,) 平面内第二个单位切向量
        unit_normal: (3,) 单位法向量

    Raises:
        DegenerateInputError: 法向量长度为零
        InvalidParameterError: 法向量含非有限分量
    """
    unit_normal = normalize_strict(as_vector3(normal, "normal_vector"), "normal_vector")

    if abs(unit_normal[0]) < AUXILIARY_THRESHOLD:
        auxiliary = np.array([1.0, 0.0, 0.0])
    else:
        auxiliary = np.array([0.0, 1.0, 0.0])

    tangent1 = normalize(auxiliary - np.dot(auxiliary, unit_normal) * unit_normal)
    tangent2 = normalize(np.cross(unit_normal, tangent1))

    return tangent1, tangent2, unit_normal


def compose_pose(
    unit_normal: np.ndarray,
    circular_tangent: np.ndarray,
    torch_angle: float,
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    构造单个采样点的焊枪姿态标架。

        torch_direction = cos(θ) n + sin(θ) t
        z = normalize(torch_direction)
        x = normalize(t)
        y = normalize(z × x)

    n 与 t 正交且均为单位向量，torch_direction 在构造上即为单位向量，
    这里的归一化只用于吸收浮点误差。

    Args:
        unit_normal: (3,) 单位法向量
        circular_tangent: (3,) 圆周单位切向量
        torch_angle: 焊枪倾角 θ (rad)

    Returns:
        x_axis: (3,) 切向 (行进方向)
        y_axis: (3,)
        z_axis: (3,) 焊枪方向
    """
    torch_direction = np.cos(torch_angle) * unit_normal + np.sin(torch_angle) * circular_tangent

    z_axis = normalize(torch_direction)
    x_axis = normalize(circular_tangent)
    y_axis = normalize(np.cross(z_axis, x_axis))

    return x_axis, y_axis, z_axis


def batch_compose_pose(
    unit_normal: np.ndarray,
    circular_tangents: np.ndarray,
    torch_angle: float,
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    批量构造焊枪姿态标架。

    Args:
        unit_normal: (3,) 单位法向量 (所有点共用)
        circular_tangents: (N, 3) 圆周单位切向量
        torch_angle: 焊枪倾角 (rad)

    Returns:
        x_axes, y_axes, z_axes: 各为 (N, 3)
    """
    circular_tangents = np.asarray(circular_tangents, dtype=np.float64).reshape(-1, 3)
    torch_directions = (
        np.cos(torch_angle) * unit_normal[np.newaxis, :]
        + np.sin(torch_angle) * circular_tangents
    )

    z_axes = normalize(torch_directions)
    x_axes = normalize(circular_tangents)
    y_axes = normalize(np.cross(z_axes, x_axes))

    return x_axes, y_axes, z_axes


def angle_from_normal(z_axis: np.ndarray, unit_normal: np.ndarray) -> float | np.ndarray:
    """
    焊枪方向与法向量的实测夹角 (度)。

    Args:
        z_axis: (3,) 或 (N, 3) 焊枪方向
        unit_normal: (3,) 单位法向量

    Returns:
        夹角 (度)
    """
    return angle_between_deg(z_axis, unit_normal)


if __name__ == "__main__":
    print("=== 标架构造测试 ===")

    for n in ([0, 0, 1], [1, 0, 0], [1, 1, 1]):
        t1, t2, un = build_frame(np.array(n, dtype=float))
        print(f"法向量 {n}:")
        print(f"  t1={t1}, t2={t2}")
        print(f"  t1 × t2 - n = {np.linalg.norm(np.cross(t1, t2) - un):.2e}")

    t1, t2, un = build_frame(np.array([0.0, 0.0, 1.0]))
    x, y, z = compose_pose(un, t2, np.radians(30))
    print(f"\n30° 倾角: x={x}, y={y}, z={z}")
    print(f"实测夹角: {angle_from_normal(z, un):.4f}°")
