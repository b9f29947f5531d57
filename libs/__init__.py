"""
Library modules for the Global Temperature Heatmap application.
"""

from . import fn__libs
from . import fn__scales
from . import fn__tooltip
from . import fn__libs_charts

__all__ = ['fn__libs', 'fn__scales', 'fn__tooltip', 'fn__libs_charts']
