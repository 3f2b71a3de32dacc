# src/sepaxes/plot/__init__.py

"""
Separated-origin axes for Matplotlib.

Re-exports (lazy at runtime, friendly to type checkers):

    from sepaxes.plot import Plot, separate, separate_axes
"""

from importlib import import_module
from typing import TYPE_CHECKING

_MAP = {
	"Plot": "sepaxes.plot.plot:Plot",
	"separate": "sepaxes.plot.separation:separate",
	"separate_axes": "sepaxes.plot.separation:separate_axes",
	"parse_arguments": "sepaxes.plot.separation:parse_arguments",
	"on_resize": "sepaxes.plot.reactor:on_resize",
	"ResizeReactor": "sepaxes.plot.reactor:ResizeReactor",
	"DecorationState": "sepaxes.plot.state:DecorationState",
	"REGISTRY": "sepaxes.plot.state:REGISTRY",
	"add_resize_observer": "sepaxes.plot.observers:add_resize_observer",
	"remove_resize_observer": "sepaxes.plot.observers:remove_resize_observer",
	"resize_observers": "sepaxes.plot.observers:resize_observers",
	"notify_resize": "sepaxes.plot.observers:notify_resize",
}

__all__ = list(_MAP.keys())


def __getattr__(name: str):
	try:
		spec = _MAP[name]
	except KeyError as exc:
		raise AttributeError(f"module 'sepaxes.plot' has no attribute {name!r}") from exc

	mod_path, _, attr = spec.partition(":")
	return getattr(import_module(mod_path), attr)


if TYPE_CHECKING:
	from .plot import Plot  # noqa: F401
	from .separation import separate, separate_axes, parse_arguments  # noqa: F401
	from .reactor import on_resize, ResizeReactor  # noqa: F401
	from .state import DecorationState, REGISTRY  # noqa: F401
	from .observers import (  # noqa: F401
		add_resize_observer, remove_resize_observer, resize_observers, notify_resize,
	)
