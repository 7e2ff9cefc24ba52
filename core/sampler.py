"""
sampler - 圆周等角度采样

给定平面正交基 (tangent1, tangent2)，在圆周上等角度采样位置与切向:
    position = c + r (cos φ t1 + sin φ t2)
    tangent  = -sin φ t1 + cos φ t2
"""

import numbers

import numpy as np

from ..exceptions import InvalidParameterError


def check_num_points(num_points) -> int:
    """
    校验采样点数：必须为非负整数。

    N = 0 是合法输入，对应空轨迹。

    Args:
        num_points: 采样点数

    Returns:
        int 类型的采样点数
    """
    if isinstance(num_points, bool) or not isinstance(num_points, numbers.Integral):
        raise InvalidParameterError(f"num_points must be an integer, got {num_points!r}")
    if num_points < 0:
        raise InvalidParameterError(f"num_points must be non-negative, got {num_points}")
    return int(num_points)


def sample_angle(i: int, num_points: int) -> float:
    """
    第 i 个采样点的圆周角 φ_i = 2π i / N。

    Args:
        i: 采样序号, 0 <= i < N
        num_points: 采样点数 N

    Returns:
        圆周角 (rad)
    """
    num_points = check_num_points(num_points)
    if num_points <= 0:
        raise InvalidParameterError(f"num_points must be positive, got {num_points}")
    if not 0 <= i < num_points:
        raise InvalidParameterError(f"sample index {i} out of range [0, {num_points})")
    return 2 * np.pi * i / num_points


def sample_angles(num_points: int) -> np.ndarray:
    """
    全部采样点的圆周角。

    Args:
        num_points: 采样点数 N (N = 0 时返回空数组)

    Returns:
        (N,) 圆周角数组，不含 2π 端点
    """
    num_points = check_num_points(num_points)
    return 2 * np.pi * np.arange(num_points) / max(num_points, 1)


def circle_point(
    center: np.ndarray,
    radius: float,
    tangent1: np.ndarray,
    tangent2: np.ndarray,
    angle: float,
) -> tuple[np.ndarray, np.ndarray]:
    """
    计算圆周角 φ 处的位置与切向。

    切向为位置对 φ 的导数方向 (φ 增大的方向)，与半径的符号和大小无关。

    Args:
        center: (3,) 圆心
        radius: 半径 (负值使采样点关于圆心反向)
        tangent1: (3,) 平面单位基向量
        tangent2: (3,) 平面单位基向量
        angle: 圆周角 φ (rad)

    Returns:
        position: (3,) 圆周上的点
        circular_tangent: (3,) 单位切向量
    """
    cos_a, sin_a = np.cos(angle), np.sin(angle)
    position = center + radius * (cos_a * tangent1 + sin_a * tangent2)
    circular_tangent = -sin_a * tangent1 + cos_a * tangent2
    return position, circular_tangent


def batch_circle_points(
    center: np.ndarray,
    radius: float,
    tangent1: np.ndarray,
    tangent2: np.ndarray,
    angles: np.ndarray,
) -> tuple[np.ndarray, np.ndarray]:
    """
    批量计算圆周位置与切向。

    Args:
        center: (3,) 圆心
        radius: 半径
        tangent1: (3,) 平面单位基向量
        tangent2: (3,) 平面单位基向量
        angles: (N,) 圆周角数组

    Returns:
        positions: (N, 3) 位置数组
        circular_tangents: (N, 3) 单位切向量数组
    """
    angles = np.asarray(angles, dtype=np.float64).reshape(-1, 1)
    cos_a, sin_a = np.cos(angles), np.sin(angles)
    positions = center + radius * (cos_a * tangent1 + sin_a * tangent2)
    circular_tangents = -sin_a * tangent1 + cos_a * tangent2
    return positions, circular_tangents


if __name__ == "__main__":
    print("=== 圆周采样测试 ===")

    t1 = np.array([1.0, 0.0, 0.0])
    t2 = np.array([0.0, 1.0, 0.0])
    angles = sample_angles(4)
    positions, tangents = batch_circle_points(np.zeros(3), 1.0, t1, t2, angles)
    for phi, p, t in zip(angles, positions, tangents):
        print(f"φ={np.degrees(phi):6.1f}°  位置={np.round(p, 6)}  切向={np.round(t, 6)}")
