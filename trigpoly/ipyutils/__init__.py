r"""@package trigpoly.ipyutils

Utility functions for interactive IPython/Jupyter sessions.
"""

from .plotctx import matplotlib_rc, plot_ctx, pi_ticks
from .plotting import plot_trig, curve_data
