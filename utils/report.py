"""
report - 轨迹结果表格输出

位置与四元数按固定小数位输出，夹角单位为度。
"""


def _format_vector(values, precision: int) -> str:
    return "[" + ", ".join(f"{v:.{precision}f}" for v in values) + "]"


def format_trajectory_table(points, precision: int = 3, angle_precision: int = 1) -> str:
    """
    将轨迹结果格式化为文本表格。

    Args:
        points: TrajectoryPoint 序列
        precision: 位置与四元数的小数位数
        angle_precision: 夹角的小数位数

    Returns:
        表头加每个采样点一行的字符串
    """
    rows = [("Point", "Position (x, y, z)", "Quaternion (w, x, y, z)", "Angle from Normal")]
    for p in points:
        rows.append(
            (
                str(p.index + 1),
                _format_vector(p.position, precision),
                _format_vector(p.quaternion, precision),
                f"{p.angle_from_normal:.{angle_precision}f}°",
            )
        )

    widths = [max(len(row[k]) for row in rows) for k in range(len(rows[0]))]
    lines = ["  ".join(cell.ljust(w) for cell, w in zip(row, widths)).rstrip() for row in rows]
    return "\n".join(lines)
