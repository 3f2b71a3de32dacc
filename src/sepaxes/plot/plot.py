# src/sepaxes/plot/plot.py

from __future__ import annotations

from .decor import Decor


class Plot(Decor):
	"""Matplotlib figure manager with separated-axes decoration."""

	__slots__ = ()
