# src/sepaxes/plot/reactor.py
"""Geometry pass that pushes the axes origin apart and draws the cover lines."""

from __future__ import annotations

import weakref
from typing import TYPE_CHECKING, Any, Iterable, Optional, Tuple, Union

from ..config import SeparationSettings, current_settings
from ..imports import matplotlib as mpl  # type: ignore
from ..imports import numpy as np  # type: ignore
from ..logutil import get_logger
from .base import (
	AXES_PAIR,
	Axis,
	axes_alive,
	axis_limits,
	background_color,
	is_close,
	line_alive,
	root_figure,
	visible_ticks,
)
from .observers import remove_resize_observer
from .state import REGISTRY, Anchor, DecorationState, ResizeCallback

if TYPE_CHECKING:  # pragma: no cover - import for typing only
	from matplotlib.axes import Axes
	from matplotlib.figure import Figure
	from matplotlib.lines import Line2D

LOG = get_logger(__name__)

# spine drawn along each axis
_SPINES = {"x": "bottom", "y": "left"}

ChainLike = Union[None, ResizeCallback, Iterable[ResizeCallback]]


def _as_chain(resize_chain: ChainLike) -> Tuple[ResizeCallback, ...]:
	if resize_chain is None:
		return ()
	if callable(resize_chain):
		return (resize_chain,)
	return tuple(resize_chain)


def _shift_axis(axes: "Axes", axis: Axis, proportion: float, state: DecorationState) -> Optional[Anchor]:
	"""
	Push one axis away from the origin corner.

	:return: ``(range_start, first_tick)`` spanned by the cover line, or ``None``
		when the axis gets no cover line.
	"""
	ticks = visible_ticks(axes, axis)
	anchor_attr = f"{axis}_anchor"
	if ticks.size < 2:
		setattr(state, anchor_attr, None)
		return None

	lo, hi = axis_limits(axes, axis)
	first = float(ticks[0])
	anchor: Optional[Anchor] = getattr(state, anchor_attr)

	if anchor is not None and is_close(lo, anchor[0], hi - lo) and is_close(first, anchor[1], hi - lo):
		# already pushed out by an earlier pass; the tick marks the original corner
		origin = first
	elif is_close(first, lo, hi - lo):
		origin = lo
	else:
		setattr(state, anchor_attr, None)
		return None

	start = origin - (hi - origin) * proportion
	if not is_close(start, lo, hi - origin):
		axis_obj = getattr(axes, f"{axis}axis")
		previous = axis_obj.get_major_locator()
		getattr(axes, f"set_{axis}lim")(start, hi)
		getattr(axes, f"set_{axis}ticks")(np.sort(ticks))
		if getattr(state, f"{axis}_locator") is None:
			# held by the side-table; drop the back-reference to the axis
			previous.set_axis(None)
			setattr(state, f"{axis}_locator", previous)
		LOG.debug("Shifted %s-axis start %g -> %g", axis, lo, start)

	anchor = (start, first)
	setattr(state, anchor_attr, anchor)
	return anchor


def _cover_line(axes: "Axes", existing: Optional["Line2D"], settings: SeparationSettings) -> "Line2D":
	"""Return ``existing`` when still drawn in ``axes``; otherwise create a fresh, empty cover line."""
	if line_alive(existing, axes):
		return existing
	if existing is not None:
		LOG.debug("Cover line was removed externally; recreating it.")
	line = mpl.lines.Line2D(
		[np.nan], [np.nan],
		color=settings.cover_color or background_color(axes),
		linestyle="-",
		marker="None",
		solid_capstyle="butt",
		clip_on=False,
		zorder=settings.cover_zorder,
		label="_sepaxes_cover",
	)
	axes.add_line(line)
	return line


def on_resize(
		axes: Optional["Axes"],
		proportion: float,
		resize_chain: ChainLike = None,
		*,
		event: Any = None,
		figure: Optional["Figure"] = None,
		observer: Optional[ResizeCallback] = None,
		settings: Optional[SeparationSettings] = None,
) -> None:
	"""
	Re-apply the origin separation of ``axes``.

	Repeated calls with unchanged limits and ticks leave the geometry untouched.

	:param axes: Decorated axes; ``None`` or an axes removed from its figure makes
		the pass unregister ``observer`` from ``figure`` and return.
	:param proportion: Fraction of each axis range the origin is pushed out by.
	:param resize_chain: Handlers invoked with ``event`` before the pass (a callable
		or an iterable of callables). Observers registered on the figure earlier
		than this one have already run, so observer-driven passes leave it ``None``.
	:param event: Triggering resize event, forwarded to ``resize_chain``.
	:param figure: Figure the observer is registered on.
	:param observer: The observer invoking this pass.
	:param settings: Separation settings; the process-wide settings by default.
	"""
	if not axes_alive(axes):
		if figure is not None and observer is not None:
			remove_resize_observer(figure, observer)
		if axes is not None:
			REGISTRY.pop(axes)
		LOG.debug("Decorated axes no longer exist; resize observer removed.")
		return

	chain = _as_chain(resize_chain)
	for handler in chain:
		handler(event)

	settings = settings or current_settings()
	state = REGISTRY.ensure(axes, proportion)
	state.proportion = proportion

	spans = {axis: _shift_axis(axes, axis, proportion, state) for axis in AXES_PAIR}
	xlo, _ = axis_limits(axes, "x")
	ylo, _ = axis_limits(axes, "y")

	x_line = _cover_line(axes, state.x_cover_line, settings)
	y_line = _cover_line(axes, state.y_cover_line, settings)

	if spans["x"] is not None:
		x_line.set_data(list(spans["x"]), [ylo, ylo])
		x_line.set_linewidth(settings.linewidth_factor * axes.spines[_SPINES["x"]].get_linewidth())
	else:
		x_line.set_data([np.nan], [np.nan])

	if spans["y"] is not None:
		y_line.set_data([xlo, xlo], list(spans["y"]))
		y_line.set_linewidth(settings.linewidth_factor * axes.spines[_SPINES["y"]].get_linewidth())
	else:
		y_line.set_data([np.nan], [np.nan])

	state.x_cover_line = x_line
	state.y_cover_line = y_line
	if resize_chain is not None:
		state.resize_chain = chain

	LOG.debug("Separation pass on %r: x=%s y=%s", axes, spans["x"], spans["y"])

	canvas_figure = root_figure(axes)
	if settings.redraw and canvas_figure is not None and canvas_figure.canvas is not None:
		canvas_figure.canvas.draw_idle()


class ResizeReactor:
	"""
	Resize observer re-applying the separation of one axes.

	Axes and figure are referenced weakly, so a registered reactor never keeps a
	discarded plot alive.
	"""

	__slots__ = ("_axes", "_figure", "proportion", "settings", "__weakref__")

	def __init__(
			self,
			axes: "Axes",
			figure: "Figure",
			proportion: float,
			settings: Optional[SeparationSettings] = None,
	) -> None:
		self._axes = weakref.ref(axes)
		self._figure = weakref.ref(figure)
		self.proportion = proportion
		self.settings = settings

	@property
	def axes(self) -> Optional["Axes"]:
		return self._axes()

	@property
	def figure(self) -> Optional["Figure"]:
		return self._figure()

	def __call__(self, event: Any = None) -> None:
		on_resize(
			self.axes,
			self.proportion,
			event=event,
			figure=self.figure,
			observer=self,
			settings=self.settings,
		)

	def __repr__(self) -> str:
		return f"<ResizeReactor axes={self.axes!r} proportion={self.proportion}>"
