# src/sepaxes/plot/separation.py
"""Switch the origin separation of an axes on or off."""

from __future__ import annotations

import math
import numbers
import warnings
from typing import TYPE_CHECKING, Any, List, Literal, Optional, Tuple

from ..config import SeparationSettings, current_settings
from ..errors import InvalidArgument, StaleReferenceWarning, UsageError
from ..imports import matplotlib as mpl  # type: ignore
from ..logutil import get_logger
from .base import AXES_PAIR, BasePlot, axes_alive, line_alive, root_figure
from .observers import add_resize_observer, has_resize_support, remove_resize_observer, resize_observers
from .reactor import ResizeReactor, on_resize
from .state import REGISTRY

if TYPE_CHECKING:  # pragma: no cover - import for typing only
	from matplotlib.axes import Axes

LOG = get_logger(__name__)

Mode = Literal["on", "off"]
MODES: Tuple[str, ...] = ("on", "off")
MAX_ARGS = 3

USAGE = """\
Usage: separate()
       separate(..., ax)
       separate(..., proportion)
       separate(..., 'on')
       separate(..., 'off')

Push the X and Y axes of a 2D plot apart at the origin corner.
Arguments may be given in any order:
   ax:          the axes to separate (default: the active axes of ``context``)
   proportion:  fraction of each axis range to separate by (default: 0.025)
   'on'/'off':  'off' removes the separation from the axes"""


# --- Argument normalization ---
def normalize_mode(mode: Any) -> Mode:
	"""Return ``'on'`` or ``'off'`` for a case-insensitive mode token."""
	token = mode.strip().lower() if isinstance(mode, str) else mode
	if token not in MODES:
		raise InvalidArgument(
			f"Command [{mode}] not recognised. One of {{'on', 'off'}} must be provided.",
			token=mode,
		)
	return token


def normalize_proportion(proportion: Any) -> float:
	"""Validate a separation proportion; it must lie strictly between 0 and 1."""
	if not _is_number(proportion):
		raise InvalidArgument(f"Proportion must be a real number, got {proportion!r}.", token=proportion)
	value = float(proportion)
	if not math.isfinite(value) or not 0.0 < value < 1.0:
		raise InvalidArgument(f"Proportion must lie in (0, 1), got {value!r}.", token=proportion)
	return value


def _is_number(value: Any) -> bool:
	return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _is_axes(value: Any) -> bool:
	return isinstance(value, mpl.axes.Axes)


def resolve_active_axes(context: Any) -> "Axes":
	"""
	Return the active axes of an explicit ``context``.

	:param context: A :class:`~sepaxes.plot.base.BasePlot`, a Matplotlib figure
		(its current axes), or an axes.
	:raises UsageError: When no context is given or it holds no axes.
	"""
	if context is None:
		raise UsageError("No axes given and no context to take the active axes from.", usage=USAGE)
	if _is_axes(context):
		return context
	if isinstance(context, BasePlot):
		return context.active_axes
	if isinstance(context, mpl.figure.FigureBase):
		return context.gca()
	raise UsageError(f"Cannot resolve active axes from {type(context).__name__}.", usage=USAGE)


def parse_arguments(args: Tuple[Any, ...], *, context: Any = None) -> Tuple["Axes", Optional[float], Mode]:
	"""
	Sort order-independent arguments into ``(axes, proportion, mode)``.

	The first argument of each kind wins. Nothing is modified here.

	:raises UsageError: More than three arguments or an argument of unknown kind.
	:raises InvalidArgument: A mode string other than ``'on'``/``'off'``.
	"""
	if len(args) > MAX_ARGS:
		raise UsageError(f"Expected at most {MAX_ARGS} arguments, got {len(args)}.", usage=USAGE)

	handles: List[Any] = []
	amounts: List[Any] = []
	commands: List[str] = []
	unknown: List[Any] = []
	for arg in args:
		if _is_axes(arg):
			handles.append(arg)
		elif isinstance(arg, str):
			commands.append(arg)
		elif _is_number(arg):
			amounts.append(arg)
		else:
			unknown.append(arg)

	mode = normalize_mode(commands[0]) if commands else "on"
	if unknown:
		raise UsageError(f"Unrecognised argument {unknown[0]!r}.", usage=USAGE)

	proportion = normalize_proportion(amounts[0]) if amounts else None
	axes = handles[0] if handles else resolve_active_axes(context)
	return axes, proportion, mode


# --- State transitions ---
def _separate_on(axes: "Axes", proportion: float, reactive: bool, settings: SeparationSettings) -> None:
	state = REGISTRY.get(axes)
	# a bare Reactor pass leaves state behind without an observer
	observed = state is not None and state.observer is not None
	if observed:
		LOG.debug("Axes already separated; refreshing with proportion %g.", proportion)
		state.proportion = proportion
		if isinstance(state.observer, ResizeReactor):
			state.observer.proportion = proportion
			state.observer.settings = settings

	# on a first "on" the pass runs before the observer exists, so the recorded chain is the pre-decoration one
	on_resize(axes, proportion, settings=settings)

	axes.spines["top"].set_visible(False)
	axes.spines["right"].set_visible(False)
	axes.tick_params(axis="both", which="both", direction=settings.tick_direction_on)

	if reactive and not observed:
		figure = root_figure(axes)
		state = REGISTRY.ensure(axes, proportion)
		state.resize_chain = resize_observers(figure)
		state.figure = figure
		state.observer = ResizeReactor(axes, figure, proportion, settings)
		add_resize_observer(figure, state.observer)

	LOG.info("Separated axes origin by %g of the axis range.", proportion)


def _separate_off(axes: "Axes", settings: SeparationSettings) -> None:
	state = REGISTRY.pop(axes)
	if state is not None:
		figure = state.figure
		if state.observer is not None and figure is not None:
			remove_resize_observer(figure, state.observer)
		for line in state.cover_lines():
			if line_alive(line, axes):
				line.remove()
		for axis in AXES_PAIR:
			locator = getattr(state, f"{axis}_locator")
			if locator is not None:
				getattr(axes, f"{axis}axis").set_major_locator(locator)
	else:
		LOG.debug("Axes were not separated; restoring default appearance only.")

	if not axes_alive(axes):
		LOG.debug("Axes are no longer part of a figure; decoration dropped.")
		return

	for spine in axes.spines.values():
		spine.set_visible(True)
	axes.tick_params(axis="both", which="both", direction=settings.tick_direction_off)
	axes.relim()
	axes.autoscale(enable=True)
	LOG.info("Removed axes origin separation.")


def separate_axes(
		axes: "Axes",
		proportion: Optional[float] = None,
		mode: Mode = "on",
		*,
		settings: Optional[SeparationSettings] = None,
) -> "Axes":
	"""
	Separate (or rejoin) the X and Y axes of ``axes`` at the origin corner.

	With ``mode='on'`` the axes are decorated immediately and kept decorated
	whenever the figure is resized. Calling it again on separated axes refreshes
	the decoration with the new proportion. ``mode='off'`` removes the cover
	lines, stops reacting to resizes and restores the default box, inward ticks
	and autoscaled limits.

	:param axes: Axes to decorate.
	:param proportion: Fraction of each axis range to separate by; the configured
		default (0.025) when ``None``.
	:param mode: ``'on'`` or ``'off'`` (case-insensitive).
	:param settings: Separation settings; the process-wide settings by default.
	:return: The decorated axes.
	:raises InvalidArgument: On an unknown mode, a proportion outside (0, 1), or
		``mode='on'`` on axes that are not part of a figure. ``'off'`` on such axes
		only drops the decoration state and its resize observer.
	"""
	settings = settings or current_settings()
	mode = normalize_mode(mode)
	proportion = normalize_proportion(settings.proportion if proportion is None else proportion)
	if mode == "off":
		_separate_off(axes, settings)
		return axes

	if not axes_alive(axes):
		raise InvalidArgument("Axes are not part of a figure.", token=axes)

	reactive = has_resize_support(root_figure(axes))
	if not reactive:
		message = "Could not find a resize notification for this figure. Axes will not update if resized."
		LOG.warning(message)
		warnings.warn(message, StaleReferenceWarning, stacklevel=2)
	_separate_on(axes, proportion, reactive, settings)
	return axes


def separate(*args: Any, context: Any = None, settings: Optional[SeparationSettings] = None) -> "Axes":
	"""
	Order-independent front end of :func:`separate_axes`.

	    separate(ax)
	    separate(ax, 0.1)
	    separate("off", ax)
	    separate(context=plot)          # the plot's active axes

	:param args: Up to three of: an axes, a proportion, ``'on'``/``'off'``.
	:param context: Where to take the active axes from when none is passed.
	:param settings: Separation settings; the process-wide settings by default.
	:return: The decorated axes.
	"""
	axes, proportion, mode = parse_arguments(args, context=context)
	return separate_axes(axes, proportion, mode, settings=settings)
