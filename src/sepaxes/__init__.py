"""
sepaxes: separated-origin axes for Matplotlib.

Top-level API keeps imports lazy, so a backend can still be selected first:

    import matplotlib
    matplotlib.use("Agg")

    from sepaxes import separate_axes
    separate_axes(ax)            # push the axes apart at the origin
    separate_axes(ax, 0.1)       # by 10 % of each axis range
    separate_axes(ax, mode="off")

    from sepaxes import Plot
    plot = Plot()
    plot.separate_axes()
"""

from importlib import import_module
from importlib.metadata import version, PackageNotFoundError as _PNF
from typing import TYPE_CHECKING

try:
	__version__ = version("sepaxes")
except _PNF:
	__version__ = "0.0.0+local"

__all__ = [
	"__version__",
	# main facades
	"Plot", "separate", "separate_axes",
	# resize observers
	"add_resize_observer", "remove_resize_observer", "resize_observers", "notify_resize",
	# settings & logging
	"SeparationSettings", "load_settings", "configure_logging",
	# errors
	"SepAxesError", "UsageError", "InvalidArgument", "ConfigError", "StaleReferenceWarning",
	# namespaces
	"config", "errors", "imports", "logutil", "plot",
]

_PLOT_EXPORTS = {
	"Plot", "separate", "separate_axes",
	"add_resize_observer", "remove_resize_observer", "resize_observers", "notify_resize",
}
_CONFIG_EXPORTS = {"SeparationSettings", "load_settings"}
_ERROR_EXPORTS = {"SepAxesError", "UsageError", "InvalidArgument", "ConfigError", "StaleReferenceWarning"}
_NAMESPACES = {"config", "errors", "imports", "logutil", "plot"}


def __getattr__(name: str):
	if name == "configure_logging":
		return import_module("sepaxes.logutil").configure_logging
	if name in _NAMESPACES:
		return import_module(f"sepaxes.{name}")
	if name in _PLOT_EXPORTS:
		return getattr(import_module("sepaxes.plot"), name)
	if name in _CONFIG_EXPORTS:
		return getattr(import_module("sepaxes.config"), name)
	if name in _ERROR_EXPORTS:
		return getattr(import_module("sepaxes.errors"), name)

	raise AttributeError(f"module 'sepaxes' has no attribute {name!r}")


if TYPE_CHECKING:
	from . import config, errors, imports, logutil, plot  # noqa: F401
	from .logutil import configure_logging  # noqa: F401
	from .config import SeparationSettings, load_settings  # noqa: F401
	from .errors import (  # noqa: F401
		SepAxesError, UsageError, InvalidArgument, ConfigError, StaleReferenceWarning,
	)
	from .plot import (  # noqa: F401
		Plot, separate, separate_axes,
		add_resize_observer, remove_resize_observer, resize_observers, notify_resize,
	)
