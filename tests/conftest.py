# tests/conftest.py

from pathlib import Path
import sys

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

np = pytest.importorskip("numpy")
matplotlib = pytest.importorskip("matplotlib")
matplotlib.use("Agg", force=True)

from sepaxes.config import SeparationSettings, set_settings  # noqa: E402
from sepaxes.imports import pyplot as plt  # noqa: E402


@pytest.fixture(autouse=True)
def default_settings():
	"""Keep tests independent of any sepaxes.json on the machine."""
	set_settings(SeparationSettings())
	try:
		yield
	finally:
		set_settings(None)


@pytest.fixture()
def fig_ax():
	fig, ax = plt.subplots(figsize=(4, 3))
	try:
		yield fig, ax
	finally:
		plt.close(fig)


@pytest.fixture()
def unit_axes(fig_ax):
	"""Axes spanning [0, 1] on both axes with ticks at 0, 0.5 and 1."""
	fig, ax = fig_ax
	ax.set_xlim(0, 1)
	ax.set_ylim(0, 1)
	ax.set_xticks([0, 0.5, 1])
	ax.set_yticks([0, 0.5, 1])
	return fig, ax
