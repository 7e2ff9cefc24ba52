"""
exceptions - 轨迹计算的异常类型

所有异常都继承自 ValueError，与 numpy 及本库其它函数对非法参数的处理方式一致。
"""


class TorchTrajectoryError(ValueError):
    """焊枪轨迹计算错误的基类。"""


class DegenerateInputError(TorchTrajectoryError):
    """输入退化，无法计算 (例如零长度法向量无法归一化)。"""


class InvalidParameterError(TorchTrajectoryError):
    """参数非法：采样点数为负或非整数，或向量/标量中含有 NaN、∞。"""
