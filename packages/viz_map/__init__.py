"""
Plotting for the global beacon map.
"""

from .map_plot import plot_global_map

__all__ = ['plot_global_map']
