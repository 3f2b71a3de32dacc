# src/sepaxes/plot/observers.py
"""
Ordered resize observers per figure.

Each figure gets one ``resize_event`` connection on its canvas; that connection
dispatches to the registered observers in registration order. Decorations add
and remove themselves here instead of wrapping one another's handlers, so
switching one off never disturbs what was registered before or after it.

    add_resize_observer(fig, relayout)
    add_resize_observer(fig, other)
    resize_observers(fig)        # (relayout, other)
    remove_resize_observer(fig, other)
"""

from __future__ import annotations

import weakref
from typing import TYPE_CHECKING, Any, List, Optional, Tuple

from ..logutil import get_logger
from .state import ResizeCallback

if TYPE_CHECKING:  # pragma: no cover - import for typing only
	from matplotlib.figure import Figure

LOG = get_logger(__name__)

__all__ = [
	"ResizeObservers",
	"has_resize_support",
	"add_resize_observer",
	"remove_resize_observer",
	"resize_observers",
	"notify_resize",
]


class ResizeObservers:
	"""
	Observer list of a single figure.

	The instance itself is connected to the canvas, so the canvas callback
	registry is what keeps it alive; the module table only refers to it weakly.
	"""

	def __init__(self, figure: "Figure") -> None:
		self._figure = weakref.ref(figure)
		self._callbacks: List[ResizeCallback] = []
		canvas = figure.canvas
		self._resize_cid: Optional[int] = canvas.mpl_connect("resize_event", self)
		self._close_cid: Optional[int] = canvas.mpl_connect("close_event", self._on_close)

	@property
	def callbacks(self) -> Tuple[ResizeCallback, ...]:
		return tuple(self._callbacks)

	@property
	def connected(self) -> bool:
		return self._resize_cid is not None

	def add(self, callback: ResizeCallback) -> None:
		if any(existing is callback for existing in self._callbacks):
			return
		self._callbacks.append(callback)

	def remove(self, callback: ResizeCallback) -> bool:
		for index, existing in enumerate(self._callbacks):
			if existing is callback:
				del self._callbacks[index]
				break
		else:
			return False
		if not self._callbacks:
			self.disconnect()
		return True

	def disconnect(self) -> None:
		"""Drop every observer and detach from the canvas."""
		self._callbacks.clear()
		figure = self._figure()
		if figure is not None and figure.canvas is not None:
			for cid in (self._resize_cid, self._close_cid):
				if cid is not None:
					figure.canvas.mpl_disconnect(cid)
		self._resize_cid = self._close_cid = None
		if figure is not None and _lookup(figure) is self:
			del _TABLE[figure]

	def __call__(self, event: Any = None) -> None:
		# copy: observers may deregister themselves while being notified
		for callback in tuple(self._callbacks):
			callback(event)

	def _on_close(self, event: Any = None) -> None:
		LOG.debug("Figure closed; dropping %d resize observer(s).", len(self._callbacks))
		self.disconnect()

	def __repr__(self) -> str:
		return f"<ResizeObservers n={len(self._callbacks)} connected={self.connected}>"


_TABLE: "weakref.WeakKeyDictionary[Figure, weakref.ref[ResizeObservers]]" = weakref.WeakKeyDictionary()


def _lookup(figure: "Figure") -> Optional[ResizeObservers]:
	ref = _TABLE.get(figure)
	return None if ref is None else ref()


def has_resize_support(figure: Optional["Figure"]) -> bool:
	"""``True`` when the figure's canvas can deliver resize notifications."""
	canvas = getattr(figure, "canvas", None)
	return callable(getattr(canvas, "mpl_connect", None))


def add_resize_observer(figure: "Figure", callback: ResizeCallback) -> None:
	"""
	Append ``callback`` to the figure's resize observers.

	Registering the same callable twice has no effect.

	:param figure: Top-level figure whose canvas emits ``resize_event``.
	:param callback: Callable receiving the Matplotlib resize event (or ``None``).
	:raises RuntimeError: If the canvas cannot deliver resize notifications.
	"""
	if not has_resize_support(figure):
		raise RuntimeError("Figure canvas does not provide resize notifications.")
	observers = _lookup(figure)
	if observers is None or not observers.connected:
		observers = ResizeObservers(figure)
		_TABLE[figure] = weakref.ref(observers)
	observers.add(callback)


def remove_resize_observer(figure: "Figure", callback: ResizeCallback) -> bool:
	"""
	Remove ``callback`` from the figure's resize observers.

	:return: ``True`` if it was registered.
	"""
	observers = _lookup(figure)
	if observers is None:
		return False
	return observers.remove(callback)


def resize_observers(figure: "Figure") -> Tuple[ResizeCallback, ...]:
	"""Registered observers of ``figure`` in notification order."""
	observers = _lookup(figure)
	return () if observers is None else observers.callbacks


def notify_resize(figure: "Figure", event: Any = None) -> None:
	"""Run the figure's resize observers as if the canvas had been resized."""
	observers = _lookup(figure)
	if observers is not None:
		observers(event)
