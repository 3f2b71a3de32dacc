# tests/test_plot.py

import pytest

np = pytest.importorskip("numpy")
matplotlib = pytest.importorskip("matplotlib")

from sepaxes import Plot, separate  # noqa: E402
from sepaxes.plot.observers import resize_observers  # noqa: E402
from sepaxes.plot.state import REGISTRY  # noqa: E402


@pytest.fixture()
def plot_instance():
	plot = Plot(figsize=(4, 3))
	plot.ax.set_xlim(0, 1)
	plot.ax.set_ylim(0, 1)
	try:
		yield plot
	finally:
		plot.close()


def test_plot_separates_its_primary_axes(plot_instance):
	plot = plot_instance
	ax = plot.separate_axes(0.1)

	assert ax is plot.ax
	assert ax.get_xlim()[0] == pytest.approx(-0.1)
	assert len(resize_observers(plot.fig)) == 1

	plot.separate_axes(mode="off")
	assert ax not in REGISTRY
	assert resize_observers(plot.fig) == ()


def test_plot_separates_explicit_axes(plot_instance):
	plot = plot_instance
	other = plot.fig.add_subplot(2, 1, 2)
	other.set_xlim(0, 1)
	other.set_ylim(0, 1)

	plot.separate_axes(ax=other)

	assert other in REGISTRY
	assert plot.ax not in REGISTRY


def test_plot_as_context_for_variadic_call(plot_instance):
	plot = plot_instance
	ax = separate(0.05, context=plot)

	assert ax is plot.ax
	assert ax.get_ylim()[0] == pytest.approx(-0.05)


def test_subfigure_axes_register_on_root_figure(fig_ax):
	fig, _ = fig_ax
	if not hasattr(fig, "subfigures"):
		pytest.skip("subfigures require matplotlib >= 3.4")
	sub = fig.subfigures(1, 2)[1]
	ax = sub.add_subplot()
	ax.set_xlim(0, 1)
	ax.set_ylim(0, 1)

	separate(ax)

	assert len(resize_observers(fig)) == 1
