"""Panel application components"""

from .matrix_explorer import MatrixExplorer
from .widgets import create_sidebar_widgets

__all__ = ["MatrixExplorer", "create_sidebar_widgets"]
