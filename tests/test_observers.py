"""Resize observer registry."""

from __future__ import annotations

from types import SimpleNamespace

import pytest

matplotlib = pytest.importorskip("matplotlib")

from matplotlib.backend_bases import CloseEvent, ResizeEvent  # noqa: E402

from sepaxes.plot.observers import (  # noqa: E402
	add_resize_observer,
	has_resize_support,
	notify_resize,
	remove_resize_observer,
	resize_observers,
)


def test_observers_run_in_registration_order(fig_ax):
	fig, _ = fig_ax
	calls = []

	def first(event):
		calls.append("first")

	def second(event):
		calls.append("second")

	add_resize_observer(fig, first)
	add_resize_observer(fig, second)
	fig.canvas.callbacks.process("resize_event", ResizeEvent("resize_event", fig.canvas))

	assert calls == ["first", "second"]
	assert resize_observers(fig) == (first, second)


def test_adding_twice_registers_once(fig_ax):
	fig, _ = fig_ax
	calls = []

	def observer(event):
		calls.append(event)

	add_resize_observer(fig, observer)
	add_resize_observer(fig, observer)
	notify_resize(fig, "evt")

	assert calls == ["evt"]


def test_remove_reports_whether_registered(fig_ax):
	fig, _ = fig_ax

	def observer(event):
		pass

	assert remove_resize_observer(fig, observer) is False
	add_resize_observer(fig, observer)
	assert remove_resize_observer(fig, observer) is True
	assert resize_observers(fig) == ()


def test_reconnects_after_last_observer_removed(fig_ax):
	fig, _ = fig_ax
	calls = []

	def observer(event):
		calls.append(event)

	add_resize_observer(fig, observer)
	remove_resize_observer(fig, observer)
	fig.canvas.callbacks.process("resize_event", ResizeEvent("resize_event", fig.canvas))
	assert calls == []

	add_resize_observer(fig, observer)
	notify_resize(fig)
	assert calls == [None]


def test_observer_may_remove_itself_while_notified(fig_ax):
	fig, _ = fig_ax
	calls = []

	def once(event):
		calls.append("once")
		remove_resize_observer(fig, once)

	def always(event):
		calls.append("always")

	add_resize_observer(fig, once)
	add_resize_observer(fig, always)
	notify_resize(fig)
	notify_resize(fig)

	assert calls == ["once", "always", "always"]


def test_close_event_drops_observers(fig_ax):
	fig, _ = fig_ax
	add_resize_observer(fig, lambda event: None)

	fig.canvas.callbacks.process("close_event", CloseEvent("close_event", fig.canvas))

	assert resize_observers(fig) == ()


def test_resize_support_detection(fig_ax):
	fig, _ = fig_ax
	assert has_resize_support(fig)
	assert not has_resize_support(None)
	assert not has_resize_support(SimpleNamespace(canvas=None))


def test_adding_to_unsupported_figure_raises():
	with pytest.raises(RuntimeError):
		add_resize_observer(SimpleNamespace(canvas=None), lambda event: None)


def test_notify_without_observers_is_noop(fig_ax):
	fig, _ = fig_ax
	notify_resize(fig)
	assert resize_observers(fig) == ()
