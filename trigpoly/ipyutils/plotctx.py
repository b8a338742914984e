r"""@package trigpoly.ipyutils.plotctx

Contexts for convenient plot setup/management.
"""

from contextlib import contextmanager
import os
import os.path as op

import numpy as np
import matplotlib as mpl
import matplotlib.pyplot as plt
import matplotlib.ticker as plticker

from ..utils import insert_missing


__all__ = [
    "matplotlib_rc",
    "plot_ctx",
    "pi_ticks",
]


@contextmanager
def matplotlib_rc(opts):
    r"""Context manager to temporarily modify Matplotlib settings.

    The option keys should be valid keys in the `matplotlib.rcParams` dict.
    """
    old_values = dict((k, mpl.rcParams[k]) for k in opts)
    try:
        for k in opts:
            mpl.rcParams[k] = opts[k]
        yield
    finally:
        for k in old_values:
            mpl.rcParams[k] = old_values[k]


@contextmanager
def plot_ctx(figsize=(10, 3), nrows=1, ncols=1, sharey=False, grid=True,
             titles=None, xlabel=None, pi_xticks=None, fontsize=None,
             dpi=None, tight_layout=True, save=None, save_opts=None,
             show=True, close=False):
    r"""Context manager for preparing a figure and applying configuration.

    A figure with ``nrows x ncols`` axes is created and the figure and a flat
    list of its axes are yielded for plotting into. After this, the axes are
    configured with the chosen settings and the figure is optionally saved to
    a file and/or shown using the current Matplotlib driver.

    @param figsize (2-tuple, optional)
        Size of the figure. Default is `(10, 3)`.
    @param sharey (boolean, optional)
        Whether all axes share their y-axis.
    @param grid (boolean, optional)
        Whether to draw grid lines. Default is `True`.
    @param titles (list of strings, optional)
        Titles of the individual axes.
    @param xlabel (string, optional)
        Label for the x-axis of all axes.
    @param pi_xticks (boolean or dict, optional)
        Label the x-axis in multiples of pi. A dict is passed as arguments to
        pi_ticks().
    @param fontsize (int, optional)
        Global size for all text elements.
    @param tight_layout (boolean or dict, optional)
        If `True`, calls `tight_layout()` on the figure object without
        arguments. May also be a `dict` containing the options to pass to
        `tight_layout`.
    @param save (string, optional)
        Optional filename for saving the created plot to disk. If this
        contains no dot, ``'.pdf'`` is appended.
    @param show (boolean, optional)
        Whether to conclude by showing the plot (the default).
    @param close (boolean, optional)
        Whether to close the figure at the end. Can only be used if
        `show=False`. This can be useful to save plots to files without
        displaying them.
    """
    if close and show:
        raise ValueError("Cannot close and show figures.")
    rc_opts = dict()
    if fontsize is not None:
        rc_opts['font.size'] = fontsize
    with matplotlib_rc(rc_opts):
        figopts = dict(figsize=figsize)
        if dpi:
            figopts['dpi'] = dpi
        fig, axes = plt.subplots(nrows, ncols, sharey=sharey, squeeze=False,
                                 **figopts)
        axes = list(axes.flat)
        yield fig, axes
        for i, ax in enumerate(axes):
            ax.grid(grid)
            if titles is not None and i < len(titles):
                ax.set_title(titles[i])
            if xlabel is not None:
                ax.set_xlabel(xlabel)
            if pi_xticks:
                pi_ticks(ax, **(dict() if pi_xticks is True else pi_xticks))
        if tight_layout:
            opts = tight_layout if isinstance(tight_layout, dict) else dict()
            fig.tight_layout(**opts)
        if save is not None and save is not False:
            if "." not in op.basename(save):
                save += ".pdf"
            fname = op.expanduser(save)
            os.makedirs(op.normpath(op.dirname(op.abspath(fname))), exist_ok=True)
            fig.savefig(fname, **insert_missing(save_opts or dict(),
                                                bbox_inches='tight'))
        if show:
            plt.show()
        elif close:
            plt.close(fig)


def pi_ticks(ax, axis='x', major=2, minor=1):
    r"""Show ticks in multiples of pi.

    @param ax
        The axis object to modify.
    @param axis
        String representing the axis to change. Default: ``"x"``
    @param major
        How many sub-intervals of `[0,pi]` to create. Default is `2`, i.e. a
        label will appear every ``pi/2``.
    @param minor
        Steps between the major steps. Set to `1` for no steps and `2` for one
        additional marker. Default is `1`.
    """
    a = getattr(ax, "%saxis" % axis)
    pi = np.pi
    denom = major
    a.set_major_locator(plticker.MultipleLocator(pi / major))
    if minor > 1:
        a.set_minor_locator(plticker.MultipleLocator(pi / (major * minor)))
    def _gcd(a, b):
        return _gcd(b, a % b) if b else a
    def _formatter(x, pos):
        num = int(round(denom*x/pi))
        if num == 0:
            return "$0$"
        common = _gcd(abs(num), denom)
        num, den = num//common, denom//common
        den = "" if den == 1 else "/%s" % den
        if num == 1:
            num = ""
        elif num == -1:
            num = "-"
        return r"$%s\pi%s$" % (num, den)
    a.set_major_formatter(plticker.FuncFormatter(_formatter))
