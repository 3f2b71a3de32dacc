# src/sepaxes/config/settings.py
"""Tunable defaults of the axes separation, optionally read from ``sepaxes.json``."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, replace
from pathlib import Path
from typing import Any, Dict, List, Literal, Optional

from ..errors import ConfigError
from ..logutil import get_logger
from . import store
from .schema import KeySpec, make_choices_validator, make_range_validator, validate_section

LOG = get_logger(__name__)

SETTINGS_FILE = "sepaxes.json"
SECTION = "separate_axes"
ENV_VAR = "SEPAXES_CONFIG"

_TICK_DIRECTIONS = ("in", "out", "inout")


@dataclass(frozen=True)
class SeparationSettings:
	"""
	Defaults used when separating axes.

	:param proportion: Fraction of the axis range the origin is pushed out by.
	:param cover_color: Colour of the cover lines; ``None`` uses the axes background.
	:param cover_zorder: Drawing order of the cover lines (spines sit at 2.5).
	:param linewidth_factor: Cover line width relative to the spine width.
	:param tick_direction_on: Tick direction while separated.
	:param tick_direction_off: Tick direction restored when switched off.
	:param redraw: Request a canvas redraw after each pass.
	"""
	proportion: float = 0.025
	cover_color: Optional[str] = None
	cover_zorder: float = 2.6
	linewidth_factor: float = 2.0
	tick_direction_on: str = "out"
	tick_direction_off: str = "in"
	redraw: bool = True

	def updated(self, **changes: Any) -> "SeparationSettings":
		"""Return a copy with *changes* applied after validation."""
		values = validate_section(changes, SCHEMA, section=SECTION)
		return replace(self, **values)

	def to_dict(self) -> Dict[str, Any]:
		return asdict(self)


SCHEMA: Dict[str, KeySpec] = {
	"proportion": KeySpec((float, int), validator=make_range_validator(0.0, 1.0)),
	"cover_color": KeySpec((str, type(None))),
	"cover_zorder": KeySpec((float, int)),
	"linewidth_factor": KeySpec((float, int), validator=make_range_validator(0.0, float("inf"))),
	"tick_direction_on": KeySpec(str, validator=make_choices_validator(_TICK_DIRECTIONS)),
	"tick_direction_off": KeySpec(str, validator=make_choices_validator(_TICK_DIRECTIONS)),
	"redraw": KeySpec(bool),
}


def _candidate_paths() -> List[Path]:
	"""Settings locations in lookup order: environment override, project, user."""
	override = store.resolve_config_path(SETTINGS_FILE, env_var=ENV_VAR)
	project = store.resolve_config_path(SETTINGS_FILE, prefer="project")
	user = store.resolve_config_path(SETTINGS_FILE, prefer="user")
	ordered: List[Path] = []
	for path in (override, project, user):
		if path not in ordered:
			ordered.append(path)
	return ordered


def load_settings(path: Optional[store.PathLike] = None) -> SeparationSettings:
	"""
	Load settings from the ``"separate_axes"`` section of a JSON file.

	Without *path* the first existing file among ``$SEPAXES_CONFIG``,
	``<cwd>/sepaxes/configs/sepaxes.json`` and the user config directory is
	used; when none exists the built-in defaults are returned.

	:param path: Explicit settings file.
	:return: Validated settings.
	:raises ConfigError: If an explicit *path* is missing, or a file cannot be
		parsed or fails validation.
	"""
	if path is not None:
		target: Optional[Path] = Path(path).expanduser().resolve()
		if not target.exists():
			raise ConfigError(f"Missing settings file: {target}")
	else:
		target = next((p for p in _candidate_paths() if p.exists()), None)
		if target is None:
			LOG.debug("No %s found; using built-in defaults.", SETTINGS_FILE)
			return SeparationSettings()

	try:
		payload = store.read_json(target)
	except (OSError, json.JSONDecodeError) as exc:
		raise ConfigError(f"Failed reading settings '{target}': {exc}") from exc
	if not isinstance(payload, dict):
		raise ConfigError(f"Settings file '{target}' must contain a JSON object.")

	values = validate_section(payload.get(SECTION, {}), SCHEMA, section=SECTION)
	LOG.debug("Loaded settings from %s: %s", target, values)
	return SeparationSettings(**values)


def bootstrap_settings_file(
		*,
		prefer: Literal["project", "user"] = "project",
		overwrite: bool = False,
) -> Path:
	"""
	Write a settings file holding the built-in defaults unless one exists.

	:param prefer: ``'project'`` (``<cwd>/sepaxes/configs``) or ``'user'``.
	:param overwrite: Replace an existing file.
	:return: Absolute path of the (existing or created) file.
	"""
	dest = store.resolve_config_path(SETTINGS_FILE, prefer=prefer)
	if dest.exists() and not overwrite:
		LOG.info("Settings already exist, keeping them: %s", dest)
		return dest
	return store.write_json(
		dest,
		{SECTION: SeparationSettings().to_dict()},
		backup_ext=".bak" if dest.exists() else None,
	)


_CURRENT: Optional[SeparationSettings] = None


def current_settings() -> SeparationSettings:
	"""Return the process-wide settings, loading them on first use."""
	global _CURRENT
	if _CURRENT is None:
		_CURRENT = load_settings()
	return _CURRENT


def set_settings(settings: Optional[SeparationSettings]) -> None:
	"""Replace the process-wide settings; ``None`` forces a reload on next use."""
	global _CURRENT
	_CURRENT = settings
