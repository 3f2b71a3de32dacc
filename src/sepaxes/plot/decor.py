# src/sepaxes/plot/decor.py
"""Axes decorations exposed on :class:`~sepaxes.plot.Plot`."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from ..config import SeparationSettings
from .base import BasePlot
from .separation import Mode, separate_axes

if TYPE_CHECKING:  # pragma: no cover - import for typing only
	from matplotlib.axes import Axes


class Decor(BasePlot):
	"""Cosmetic adjustments applied to the plot's axes."""

	def separate_axes(
			self,
			proportion: Optional[float] = None,
			*,
			mode: Mode = "on",
			settings: Optional[SeparationSettings] = None,
			ax: Optional["Axes"] = None,
	) -> "Axes":
		"""
		Push the X and Y axes apart at the origin corner.

		:param proportion: Fraction of each axis range to separate by.
			Defaults to the configured value (0.025).
		:param mode: ``"on"`` to separate, ``"off"`` to restore the default look.
		:param settings: Separation settings; the process-wide settings by default.
		:param ax: Axes to decorate; defaults to the primary axes.
		:return: The decorated axes.
		"""
		axes = self._axes_or_default(ax)
		return separate_axes(axes, proportion, mode, settings=settings)
