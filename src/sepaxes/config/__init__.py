from .schema import KeySpec, make_choices_validator, make_range_validator, validate_section
from .settings import (
	SeparationSettings,
	bootstrap_settings_file,
	current_settings,
	load_settings,
	set_settings,
)

__all__ = [
	"KeySpec",
	"make_choices_validator",
	"make_range_validator",
	"validate_section",
	"SeparationSettings",
	"bootstrap_settings_file",
	"current_settings",
	"load_settings",
	"set_settings",
]
