"""
geometry - 几何计算工具函数

提供向量归一化、输入校验、夹角计算等基础几何操作。
"""

import numpy as np

from ..exceptions import DegenerateInputError, InvalidParameterError

EPSILON = 1e-16


def normalize(vectors: np.ndarray) -> np.ndarray:
    """
    将向量归一化为单位向量。

    仅用于已知非零的向量 (构造上保证单位长度、只需吸收浮点误差的场合)；
    需要检测退化输入时使用 normalize_strict。

    Args:
        vectors: 单个向量 (n,) 或向量数组 (m, n)

    Returns:
        归一化后的单位向量，与输入形状相同
    """
    vectors = np.asarray(vectors, dtype=np.float64)
    if vectors.ndim == 1:
        norm = np.linalg.norm(vectors)
        return vectors / (norm + EPSILON)
    norm = np.linalg.norm(vectors, axis=-1, keepdims=True)
    return vectors / (norm + EPSILON)


def normalize_strict(vector: np.ndarray, name: str = "vector") -> np.ndarray:
    """
    归一化单个向量，零长度时抛出 DegenerateInputError。

    先除以最大分量绝对值再求模，极大或极小的有限分量不会上溢/下溢。

    Args:
        vector: (3,) 向量
        name: 出错时报告的参数名

    Returns:
        (3,) 单位向量
    """
    vector = np.asarray(vector, dtype=np.float64)
    scale = np.max(np.abs(vector))
    if scale == 0.0:
        raise DegenerateInputError(f"{name} has zero length and cannot be normalized")
    scaled = vector / scale
    return scaled / np.linalg.norm(scaled)


def as_vector3(value, name: str = "vector") -> np.ndarray:
    """
    将输入转换为 (3,) float64 数组并校验有限性。

    Args:
        value: 长度为 3 的序列或数组
        name: 出错时报告的参数名

    Returns:
        (3,) 新数组 (不与输入共享内存)
    """
    try:
        vector = np.array(value, dtype=np.float64).reshape(-1)
    except (TypeError, ValueError) as exc:
        raise InvalidParameterError(f"{name} must be a sequence of 3 numbers") from exc
    if vector.shape != (3,):
        raise InvalidParameterError(f"{name} must have 3 components, got {vector.size}")
    if not np.all(np.isfinite(vector)):
        raise InvalidParameterError(f"{name} has non-finite components: {vector}")
    return vector


def as_finite_scalar(value, name: str = "value") -> float:
    """将输入转换为有限浮点数，NaN/∞ 或非标量抛出 InvalidParameterError。"""
    if np.ndim(value) != 0:
        raise InvalidParameterError(f"{name} must be a scalar, got shape {np.shape(value)}")
    try:
        scalar = float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidParameterError(f"{name} must be a real number") from exc
    if not np.isfinite(scalar):
        raise InvalidParameterError(f"{name} must be finite, got {scalar}")
    return scalar


def angle_between_deg(a: np.ndarray, b: np.ndarray) -> float | np.ndarray:
    """
    计算单位向量之间的夹角 (度)。

    点积在 arccos 之前截断到 [-1, 1]，避免浮点误差越界产生 NaN。

    Args:
        a: (3,) 或 (N, 3) 单位向量
        b: (3,) 单位向量 (对 a 的每一行广播)

    Returns:
        夹角，单位为度；输入为 (N, 3) 时返回 (N,)
    """
    dots = np.asarray(a) @ np.asarray(b)
    return np.degrees(np.arccos(np.clip(dots, -1.0, 1.0)))


if __name__ == "__main__":
    print("=== 几何工具测试 ===")

    v = normalize(np.array([3.0, 4.0, 0.0]))
    print(f"归一化 [3, 4, 0]: {v}")

    z = np.array([0.0, 0.0, 1.0])
    tilted = np.array([0.0, np.sin(np.radians(30)), np.cos(np.radians(30))])
    print(f"与 z 轴夹角: {angle_between_deg(tilted, z):.4f}°")

    try:
        normalize_strict(np.zeros(3), "normal")
    except DegenerateInputError as exc:
        print(f"零向量: {exc}")
