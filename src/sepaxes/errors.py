# src/sepaxes/errors.py
"""Exceptions and warnings raised by :mod:`sepaxes`."""

from __future__ import annotations

from typing import Any, Optional

__all__ = [
	"SepAxesError",
	"UsageError",
	"InvalidArgument",
	"ConfigError",
	"StaleReferenceWarning",
]


class SepAxesError(Exception):
	"""Base class for all errors raised by the package."""


class UsageError(SepAxesError, TypeError):
	"""
	Wrong number or shape of arguments.

	:param message: What went wrong.
	:param usage: Usage text appended to the message.
	"""

	def __init__(self, message: str, *, usage: Optional[str] = None) -> None:
		self.usage = usage
		super().__init__(f"{message}\n\n{usage}" if usage else message)


class InvalidArgument(SepAxesError, ValueError):
	"""
	An argument has the right shape but an unacceptable value.

	:param message: What went wrong.
	:param token: The offending value.
	"""

	def __init__(self, message: str, *, token: Any = None) -> None:
		self.token = token
		super().__init__(message)


class ConfigError(SepAxesError):
	"""Settings file is missing, unreadable or fails validation."""


class StaleReferenceWarning(UserWarning):
	"""The figure offers no resize notification; the decoration stays static."""
