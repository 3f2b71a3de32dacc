# src/sepaxes/logutil.py

from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Literal, Optional, Union

PathLike = Union[str, Path]

ROOT_LOGGER = "sepaxes"
CONSOLE_FORMAT = "[%(levelname)s] %(message)s"
FILE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

ConsoleLevelName = Literal[
	"CRITICAL",
	"ERROR",
	"WARNING",
	"INFO",
	"DEBUG",
	"NOTSET",
]

LevelLike = Union[int, ConsoleLevelName]


def _normalize_level(value: LevelLike, *, param_name: str) -> int:
	if isinstance(value, int):
		return value

	resolved = logging.getLevelName(value.upper())
	if isinstance(resolved, int):
		return resolved

	raise ValueError(f"Unknown logging level name for {param_name}: {value}")


def get_logger(name: str = ROOT_LOGGER) -> logging.Logger:
	"""
	Return a package logger.

	The console handler lives on the ``sepaxes`` root logger only; module loggers
	(``sepaxes.plot.reactor`` and friends) propagate to it.

	:param name: Logger name, usually ``__name__``.
	:return: The logger.
	"""
	root = logging.getLogger(ROOT_LOGGER)
	if not root.handlers:
		handler = logging.StreamHandler()
		handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
		root.addHandler(handler)
		root.setLevel(logging.INFO)
	return logging.getLogger(name)


def configure_logging(
		*,
		name: str = ROOT_LOGGER,
		console_level: ConsoleLevelName = "INFO",
		file_path: Optional[PathLike] = None,
		file_level: Optional[LevelLike] = None,
		mode: str = "a",
		rotate: bool = False,
		max_bytes: int = 1_000_000,
		backup_count: int = 3,
		formatter: Optional[logging.Formatter] = None,
		propagate: bool = False
) -> logging.Logger:
	"""
	Configure console and optional file output of the package logger.

	:param name: Logger name.
	:param console_level: Console handler level.
	:param file_path: Optional log file; adds a file handler when given.
	:param file_level: File handler level (defaults to ``console_level``).
	:param mode: ``'a'`` to append or ``'w'`` to overwrite the log file.
	:param rotate: Use :class:`~logging.handlers.RotatingFileHandler` when ``True``.
	:param max_bytes: Rotation threshold per file.
	:param backup_count: Number of rotated backups kept.
	:param formatter: Custom formatter; the default includes a timestamp.
	:param propagate: Whether records reach ancestor loggers.
	:return: The configured logger.
	"""
	console_level_value = _normalize_level(console_level, param_name="console_level")
	file_level_value = (
		_normalize_level(file_level, param_name="file_level")
		if file_level is not None
		else console_level_value
	)

	log = get_logger(name)
	log.setLevel(min(console_level_value, file_level_value))
	log.propagate = propagate

	fmt = formatter or logging.Formatter(FILE_FORMAT)

	streams = [
		handler for handler in log.handlers
		if isinstance(handler, logging.StreamHandler) and not isinstance(handler, logging.FileHandler)
	]
	if not streams:
		stream_handler = logging.StreamHandler()
		log.addHandler(stream_handler)
		streams = [stream_handler]
	for handler in streams:
		handler.setLevel(console_level_value)
		handler.setFormatter(fmt)

	if file_path:
		path = Path(file_path)
		path.parent.mkdir(parents=True, exist_ok=True)
		already = any(
			getattr(handler, "baseFilename", None) == os.path.abspath(path)
			for handler in log.handlers
		)
		if not already:
			file_handler: logging.Handler
			if rotate:
				file_handler = RotatingFileHandler(
					path,
					mode=mode,
					maxBytes=max_bytes,
					backupCount=backup_count,
					encoding="utf-8"
				)
			else:
				file_handler = logging.FileHandler(path, mode=mode, encoding="utf-8")
			file_handler.setLevel(file_level_value)
			file_handler.setFormatter(fmt)
			log.addHandler(file_handler)

	return log
