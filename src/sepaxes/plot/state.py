# src/sepaxes/plot/state.py
"""Per-axes decoration state, kept in a side-table keyed by the axes object."""

from __future__ import annotations

import weakref
from typing import TYPE_CHECKING, Any, Callable, Optional, Tuple

if TYPE_CHECKING:  # pragma: no cover - import for typing only
	from matplotlib.axes import Axes
	from matplotlib.figure import Figure
	from matplotlib.lines import Line2D
	from matplotlib.ticker import Locator

ResizeCallback = Callable[[Any], None]

# (shifted range minimum, first tick) of an axis that has been pushed out
Anchor = Tuple[float, float]


def _deref(ref: Optional["weakref.ref[Any]"]) -> Any:
	return None if ref is None else ref()


class DecorationState:
	"""
	Everything the separation remembers about one axes.

	Artists and the figure are held through weak references: the state lives in a
	:class:`weakref.WeakKeyDictionary` keyed by the axes, and a strong path back to
	the axes would keep the entry alive forever.
	"""

	__slots__ = (
		"_x_cover_line", "_y_cover_line", "_figure",
		"observer", "resize_chain", "proportion",
		"x_anchor", "y_anchor", "x_locator", "y_locator",
	)

	def __init__(self, proportion: Optional[float] = None) -> None:
		self._x_cover_line: Optional["weakref.ref[Line2D]"] = None
		self._y_cover_line: Optional["weakref.ref[Line2D]"] = None
		self._figure: Optional["weakref.ref[Figure]"] = None
		self.observer: Optional[ResizeCallback] = None
		self.resize_chain: Tuple[ResizeCallback, ...] = ()
		self.proportion = proportion
		self.x_anchor: Optional[Anchor] = None
		self.y_anchor: Optional[Anchor] = None
		self.x_locator: Optional["Locator"] = None
		self.y_locator: Optional["Locator"] = None

	@property
	def x_cover_line(self) -> Optional["Line2D"]:
		return _deref(self._x_cover_line)

	@x_cover_line.setter
	def x_cover_line(self, line: Optional["Line2D"]) -> None:
		self._x_cover_line = None if line is None else weakref.ref(line)

	@property
	def y_cover_line(self) -> Optional["Line2D"]:
		return _deref(self._y_cover_line)

	@y_cover_line.setter
	def y_cover_line(self, line: Optional["Line2D"]) -> None:
		self._y_cover_line = None if line is None else weakref.ref(line)

	@property
	def figure(self) -> Optional["Figure"]:
		"""Figure the resize observer is registered on."""
		return _deref(self._figure)

	@figure.setter
	def figure(self, figure: Optional["Figure"]) -> None:
		self._figure = None if figure is None else weakref.ref(figure)

	def cover_lines(self) -> Tuple[Optional["Line2D"], Optional["Line2D"]]:
		return self.x_cover_line, self.y_cover_line

	def __repr__(self) -> str:
		return (
			f"DecorationState(proportion={self.proportion!r}, "
			f"x_anchor={self.x_anchor!r}, y_anchor={self.y_anchor!r}, "
			f"observer={'set' if self.observer is not None else None})"
		)


class DecorationRegistry:
	"""Side-table mapping each decorated axes to its :class:`DecorationState`."""

	def __init__(self) -> None:
		self._states: "weakref.WeakKeyDictionary[Axes, DecorationState]" = weakref.WeakKeyDictionary()

	def get(self, axes: "Axes") -> Optional[DecorationState]:
		return self._states.get(axes)

	def ensure(self, axes: "Axes", proportion: Optional[float] = None) -> DecorationState:
		"""Return the state of ``axes``, creating an empty one first if needed."""
		state = self._states.get(axes)
		if state is None:
			state = DecorationState(proportion)
			self._states[axes] = state
		return state

	def pop(self, axes: "Axes") -> Optional[DecorationState]:
		return self._states.pop(axes, None)

	def __contains__(self, axes: object) -> bool:
		try:
			return axes in self._states
		except TypeError:
			return False

	def __len__(self) -> int:
		return len(self._states)


REGISTRY = DecorationRegistry()
