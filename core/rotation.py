"""
rotation - 旋转矩阵与四元数转换

四元数按 (w, x, y, z) 排列，不对符号做规范化 (q 与 -q 表示同一旋转)。
"""

import numpy as np


def frame_to_matrix(x_axis: np.ndarray, y_axis: np.ndarray, z_axis: np.ndarray) -> np.ndarray:
    """以三个轴为列向量组成 3x3 旋转矩阵。"""
    return np.column_stack([x_axis, y_axis, z_axis])


def matrix_to_quaternion(x_axis: np.ndarray, y_axis: np.ndarray, z_axis: np.ndarray) -> np.ndarray:
    """
    将正交标架转换为单位四元数。

    旋转矩阵 R 的列为 x, y, z 轴。trace > 0 时由 w 分量求解，
    否则选择最大对角元对应的分支，避免除以接近零的量。

    输入须为右手单位正交标架，函数本身不做校验。

    Args:
        x_axis: (3,) 标架 x 轴
        y_axis: (3,) 标架 y 轴
        z_axis: (3,) 标架 z 轴

    Returns:
        quaternion: (4,) 单位四元数 [w, x, y, z]
    """
    R = frame_to_matrix(x_axis, y_axis, z_axis)
    trace = R[0, 0] + R[1, 1] + R[2, 2]

    if trace > 0:
        s = 0.5 / np.sqrt(trace + 1.0)
        w = 0.25 / s
        x = (R[2, 1] - R[1, 2]) * s
        y = (R[0, 2] - R[2, 0]) * s
        z = (R[1, 0] - R[0, 1]) * s
    elif R[0, 0] > R[1, 1] and R[0, 0] > R[2, 2]:
        s = 2.0 * np.sqrt(1.0 + R[0, 0] - R[1, 1] - R[2, 2])
        w = (R[2, 1] - R[1, 2]) / s
        x = 0.25 * s
        y = (R[0, 1] + R[1, 0]) / s
        z = (R[0, 2] + R[2, 0]) / s
    elif R[1, 1] > R[2, 2]:
        s = 2.0 * np.sqrt(1.0 + R[1, 1] - R[0, 0] - R[2, 2])
        w = (R[0, 2] - R[2, 0]) / s
        x = (R[0, 1] + R[1, 0]) / s
        y = 0.25 * s
        z = (R[1, 2] + R[2, 1]) / s
    else:
        s = 2.0 * np.sqrt(1.0 + R[2, 2] - R[0, 0] - R[1, 1])
        w = (R[1, 0] - R[0, 1]) / s
        x = (R[0, 2] + R[2, 0]) / s
        y = (R[1, 2] + R[2, 1]) / s
        z = 0.25 * s

    return np.array([w, x, y, z])


def batch_matrix_to_quaternion(
    x_axes: np.ndarray, y_axes: np.ndarray, z_axes: np.ndarray
) -> np.ndarray:
    """
    批量转换标架为四元数。

    Args:
        x_axes, y_axes, z_axes: 各为 (N, 3)

    Returns:
        quaternions: (N, 4) 四元数数组 [w, x, y, z]
    """
    N = len(x_axes)
    quaternions = np.zeros((N, 4))

    for i in range(N):
        quaternions[i] = matrix_to_quaternion(x_axes[i], y_axes[i], z_axes[i])

    return quaternions


if __name__ == "__main__":
    print("=== 四元数转换测试 ===")

    # 绕 z 轴旋转 90°
    x = np.array([0.0, 1.0, 0.0])
    y = np.array([-1.0, 0.0, 0.0])
    z = np.array([0.0, 0.0, 1.0])
    q = matrix_to_quaternion(x, y, z)
    print(f"绕z轴90°: q={q}, |q|={np.linalg.norm(q):.6f}")

    # 绕 x 轴旋转 180° (trace = -1)
    q = matrix_to_quaternion(np.array([1.0, 0, 0]), np.array([0, -1.0, 0]), np.array([0, 0, -1.0]))
    print(f"绕x轴180°: q={q}")
