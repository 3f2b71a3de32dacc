"""Settings files for the separation defaults."""

from __future__ import annotations

import json

import pytest

from sepaxes.config import (
	KeySpec,
	SeparationSettings,
	bootstrap_settings_file,
	current_settings,
	load_settings,
	set_settings,
	validate_section,
)
from sepaxes.config import store
from sepaxes.config.settings import ENV_VAR, SECTION
from sepaxes.errors import ConfigError


@pytest.fixture()
def isolated_dirs(tmp_path, monkeypatch):
	"""Point project and user config lookups at empty temporary directories."""
	monkeypatch.chdir(tmp_path)
	monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
	monkeypatch.setenv("APPDATA", str(tmp_path / "appdata"))
	monkeypatch.delenv(ENV_VAR, raising=False)
	return tmp_path


def _write(path, payload):
	path.parent.mkdir(parents=True, exist_ok=True)
	path.write_text(json.dumps(payload), encoding="utf-8")
	return path


def test_defaults_without_any_file(isolated_dirs):
	assert load_settings() == SeparationSettings()
	assert SeparationSettings().proportion == pytest.approx(0.025)


def test_explicit_file_overrides_defaults(tmp_path):
	path = _write(tmp_path / "custom.json", {SECTION: {"proportion": 0.1, "cover_color": "white"}})

	settings = load_settings(path)

	assert settings.proportion == pytest.approx(0.1)
	assert settings.cover_color == "white"
	assert settings.tick_direction_on == "out"


def test_environment_variable_wins(isolated_dirs, monkeypatch):
	env_file = _write(isolated_dirs / "env.json", {SECTION: {"proportion": 0.05}})
	_write(isolated_dirs / "sepaxes" / "configs" / "sepaxes.json", {SECTION: {"proportion": 0.2}})
	monkeypatch.setenv(ENV_VAR, str(env_file))

	assert load_settings().proportion == pytest.approx(0.05)


def test_project_file_is_found(isolated_dirs):
	_write(isolated_dirs / "sepaxes" / "configs" / "sepaxes.json", {SECTION: {"redraw": False}})

	assert load_settings().redraw is False


def test_missing_explicit_file(tmp_path):
	with pytest.raises(ConfigError):
		load_settings(tmp_path / "nope.json")


def test_malformed_json(tmp_path):
	path = tmp_path / "broken.json"
	path.write_text("{not json", encoding="utf-8")

	with pytest.raises(ConfigError):
		load_settings(path)


@pytest.mark.parametrize(
	"section",
	[
		{"proportion": 1.5},
		{"proportion": "0.1"},
		{"tick_direction_on": "sideways"},
		{"redraw": 1},
		{"unknown_key": 1},
	],
)
def test_invalid_values_raise_config_error(tmp_path, section):
	path = _write(tmp_path / "bad.json", {SECTION: section})

	with pytest.raises(ConfigError):
		load_settings(path)


def test_bootstrap_writes_defaults_once(isolated_dirs):
	path = bootstrap_settings_file(prefer="project")

	assert path.exists()
	assert path == (isolated_dirs / "sepaxes" / "configs" / "sepaxes.json").resolve()
	assert load_settings() == SeparationSettings()

	path.write_text(json.dumps({SECTION: {"proportion": 0.3}}), encoding="utf-8")
	assert bootstrap_settings_file(prefer="project") == path
	assert load_settings().proportion == pytest.approx(0.3)


def test_updated_validates_changes():
	settings = SeparationSettings().updated(proportion=0.2)
	assert settings.proportion == pytest.approx(0.2)

	with pytest.raises(ConfigError):
		SeparationSettings().updated(proportion=True)


def test_current_settings_are_cached_and_replaceable():
	custom = SeparationSettings(proportion=0.1)
	set_settings(custom)
	assert current_settings() is custom


def test_required_keys_are_enforced():
	schema = {"name": KeySpec(str, required=True)}
	with pytest.raises(ConfigError):
		validate_section({}, schema, section="demo")
	assert validate_section({"NAME": "x"}, schema, section="demo") == {"name": "x"}


def test_rewrite_keeps_backup_of_previous_file(tmp_path):
	target = tmp_path / "nested" / "sepaxes.json"
	store.write_json(target, {SECTION: {"proportion": 0.1}})
	store.write_json(target, {SECTION: {"proportion": 0.2}}, backup_ext=".bak")

	assert load_settings(target).proportion == pytest.approx(0.2)
	backup = target.with_suffix(".json.bak")
	assert json.loads(backup.read_text(encoding="utf-8")) == {SECTION: {"proportion": 0.1}}
	assert sorted(p.name for p in target.parent.iterdir()) == ["sepaxes.json", "sepaxes.json.bak"]


def test_unknown_location_preference():
	with pytest.raises(ValueError):
		store.resolve_config_path("sepaxes.json", prefer="system")
