# src/sepaxes/config/store.py
"""Where ``sepaxes.json`` lives, and JSON reads/writes that never leave a half-written file."""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Any, Literal, Optional, Union

from ..logutil import get_logger

LOG = get_logger(__name__)

PathLike = Union[str, Path]

APP = "sepaxes"


def resolve_config_path(
		name: str,
		*,
		prefer: Literal["user", "project"] = "user",
		env_var: Optional[str] = None,
) -> Path:
	"""
	Resolve the absolute path of the settings file *name*.

	``env_var`` (when set in the environment) wins; otherwise the project
	directory ``<cwd>/sepaxes/configs`` or the user directory
	(``%APPDATA%/sepaxes`` on Windows, ``$XDG_CONFIG_HOME/sepaxes`` elsewhere).

	:raises ValueError: If ``prefer`` is neither ``'user'`` nor ``'project'``.
	"""
	override = os.getenv(env_var) if env_var else None
	if override:
		return Path(override).expanduser().resolve()

	if prefer == "project":
		base = Path.cwd() / APP / "configs"
	elif prefer == "user":
		if os.name == "nt":
			root = Path(os.getenv("APPDATA", Path.home() / "AppData" / "Roaming"))
		else:
			root = Path(os.getenv("XDG_CONFIG_HOME", Path.home() / ".config"))
		base = root / APP
	else:
		raise ValueError(f"prefer must be 'user' or 'project', not {prefer!r}")
	return (base / name).resolve()


def read_json(path: PathLike) -> Any:
	with Path(path).expanduser().resolve().open("r", encoding="utf-8") as fh:
		return json.load(fh)


def write_json(path: PathLike, obj: Any, *, backup_ext: Optional[str] = None) -> Path:
	"""
	Write *obj* as indented JSON through a temporary sibling file.

	:param backup_ext: Keep the replaced file under this extra suffix (e.g. ``".bak"``).
	:return: The absolute path written.
	"""
	dest = Path(path).expanduser().resolve()
	dest.parent.mkdir(parents=True, exist_ok=True)
	fd, tmp = tempfile.mkstemp(prefix=dest.name + ".", dir=str(dest.parent))
	try:
		with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as fh:
			json.dump(obj, fh, ensure_ascii=False, indent=2)
			fh.flush()
			os.fsync(fh.fileno())
		if backup_ext and dest.exists():
			os.replace(dest, dest.with_suffix(dest.suffix + backup_ext))
		os.replace(tmp, dest)
	except BaseException:
		if os.path.exists(tmp):
			os.remove(tmp)
		raise
	LOG.info("Wrote JSON to %s", dest)
	return dest


__all__ = ["PathLike", "APP", "resolve_config_path", "read_json", "write_json"]
