"""User interface modules"""

from .gate_operations import gate_operations_panel
from .trend import trend_panel, build_trend_figure

__all__ = ['gate_operations_panel', 'trend_panel', 'build_trend_figure']
