# src/sepaxes/plot/base.py
"""Shared building blocks for the separated-axes decoration."""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal, Optional, Tuple

from ..imports import matplotlib as mpl  # type: ignore
from ..imports import numpy as np  # type: ignore
from ..imports import pyplot as plt  # type: ignore
from ..logutil import get_logger

if TYPE_CHECKING:  # pragma: no cover - only for static typing
	from matplotlib.axes import Axes
	from matplotlib.figure import Figure
	from matplotlib.lines import Line2D
	from numpy.typing import NDArray

Axis = Literal["x", "y"]
AXES_PAIR: Tuple[Axis, Axis] = ("x", "y")

# Relative tolerance used when comparing tick positions with axis limits.
FLUSH_RTOL = 1e-9

LOG = get_logger(__name__)


# --- Surface queries ---
def root_figure(axes: "Axes") -> Optional["Figure"]:
	"""Return the top-level figure holding ``axes`` (sub-figures resolve to their root)."""
	if axes.figure is None:
		return None
	try:
		return axes.get_figure(root=True)
	except TypeError:  # matplotlib < 3.10
		return getattr(axes.figure, "figure", axes.figure)


def axes_alive(axes: Optional["Axes"]) -> bool:
	"""``True`` while ``axes`` still belongs to a figure."""
	if axes is None or axes.figure is None:
		return False
	return axes in axes.figure.axes


def line_alive(line: Optional["Line2D"], axes: "Axes") -> bool:
	"""``True`` while ``line`` is still drawn inside ``axes``."""
	return line is not None and line.axes is axes and line in axes.lines


def is_close(a: float, b: float, span: float) -> bool:
	return abs(a - b) <= FLUSH_RTOL * abs(span)


def axis_limits(axes: "Axes", axis: Axis) -> Tuple[float, float]:
	"""Return ``(origin_end, far_end)`` of an axis; the origin end is where the axes corner is."""
	lo, hi = getattr(axes, f"get_{axis}lim")()
	return float(lo), float(hi)


def visible_ticks(axes: "Axes", axis: Axis) -> "NDArray":
	"""
	Return the major tick positions inside the current limits, nearest to the origin first.

	Matplotlib locators may report ticks just beyond the view interval; those are
	never drawn and are dropped here. For inverted axes the order is reversed, so
	index ``0`` is always the tick closest to the corner.
	"""
	lo, hi = axis_limits(axes, axis)
	ticks = np.asarray(getattr(axes, f"get_{axis}ticks")(), dtype=float)
	tol = FLUSH_RTOL * abs(hi - lo)
	low, high = min(lo, hi) - tol, max(lo, hi) + tol
	ticks = np.sort(ticks[(ticks >= low) & (ticks <= high)])
	return ticks[::-1] if lo > hi else ticks


def background_color(axes: "Axes") -> Tuple[float, float, float, float]:
	"""Colour the cover lines are drawn in: the axes face, or the figure face when the axes are transparent."""
	face = mpl.colors.to_rgba(axes.get_facecolor())
	if face[3] == 0 and axes.figure is not None:
		face = mpl.colors.to_rgba(axes.figure.get_facecolor())
	return face


class BasePlot:
	"""Own a figure with one primary axes and resolve the active axes explicitly."""

	def __init__(self, figsize: Tuple[float, float] = (6, 4)) -> None:
		self.figsize = figsize
		self.fig, self.ax = plt.subplots(figsize=figsize)
		LOG.debug("Initialized Plot with figsize=%s", self.figsize)

	def _axes_or_default(self, ax: Optional["Axes"]) -> "Axes":
		"""Return ``ax`` when provided or fall back to the default axes."""
		if ax is not None:
			return ax
		if self.ax is None:
			raise RuntimeError("Default axes missing; create a subplot first.")
		return self.ax

	@property
	def active_axes(self) -> "Axes":
		"""The axes a call without an explicit ``ax`` operates on."""
		return self._axes_or_default(None)

	def close(self) -> None:
		"""Close the managed figure."""
		plt.close(self.fig)
