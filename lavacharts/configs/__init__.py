from lavacharts.configs.base import ConfigObject
from lavacharts.configs.layout import (
    Axis,
    ChartArea,
    HorizontalAxis,
    Legend,
    Tooltip,
    VerticalAxis,
)
from lavacharts.configs.styles import BoxStyle, Gradient, TextStyle

__all__ = [
    "Axis",
    "BoxStyle",
    "ChartArea",
    "ConfigObject",
    "Gradient",
    "HorizontalAxis",
    "Legend",
    "TextStyle",
    "Tooltip",
    "VerticalAxis",
]
