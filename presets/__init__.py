"""
presets - 参数预设

包含:
- defaults: 操作员参数 (度) 与命名预设
"""

from .defaults import TorchParameters, default_torch_parameters, tilted_plane_parameters

__all__ = [
    "TorchParameters",
    "default_torch_parameters",
    "tilted_plane_parameters",
]
