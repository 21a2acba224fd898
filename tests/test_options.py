"""
Pytest coverage for script options and the yaml options file.
"""

# Standard Library
import os
import sys

# PIP3 modules
import pytest

REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if REPO_ROOT not in sys.path:
	sys.path.insert(0, REPO_ROOT)

# local repo modules
from avsserlib.core import options
from avsserlib.core.errors import ConfigError
from avsserlib.dialects.avisynth import AvisynthDialect

#============================================

def write_text_file(path: str, text: str) -> str:
	with open(path, 'w', encoding='utf-8') as handle:
		handle.write(text)
	return path

#============================================

def test_defaults() -> None:
	script_options = options.ScriptOptions()
	assert script_options.dialect == 'avisynth'
	assert script_options.default_filters is True
	assert script_options.ass_extract is None
	assert script_options.resize is None
	assert script_options.wants_audio is False
	assert script_options.filter_list(AvisynthDialect()) == ["RemoveGrain(1)"]

#============================================

def test_filter_list_user_filters_first() -> None:
	script_options = options.ScriptOptions(filters=["Sharpen(0.2)"])
	assert script_options.filter_list(AvisynthDialect()) == ["Sharpen(0.2)", "RemoveGrain(1)"]
	script_options = options.ScriptOptions(filters=["Sharpen(0.2)"], default_filters=False)
	assert script_options.filter_list(AvisynthDialect()) == ["Sharpen(0.2)"]

#============================================

def test_audio_ext_implies_audio() -> None:
	script_options = options.ScriptOptions(audio_ext=".flac")
	assert script_options.audio_ext == "flac"
	assert script_options.wants_audio is True

#============================================

@pytest.mark.parametrize("raw_value, expected", [
	("1280x720", (1280, 720)),
	("1920X1080", (1920, 1080)),
	([640, 480], (640, 480)),
	(None, None),
])
def test_parse_resize(raw_value, expected) -> None:
	assert options.parse_resize(raw_value) == expected

#============================================

@pytest.mark.parametrize("raw_value", ["1280", "axb", "0x720", [1, 2, 3], 720])
def test_parse_resize_rejects(raw_value) -> None:
	with pytest.raises(ConfigError):
		options.parse_resize(raw_value)

#============================================

def test_parse_track() -> None:
	assert options.parse_track("3") == 3
	assert options.parse_track(None) is None
	with pytest.raises(ConfigError):
		options.parse_track(-1)
	with pytest.raises(ConfigError):
		options.parse_track("eng")

#============================================

def test_load_options_file(tmp_path) -> None:
	yaml_file = write_text_file(str(tmp_path / "avsser.yaml"), "\n".join([
		"dialect: vapoursynth",
		"filters:",
		"  - core.std.Invert()",
		"resize: [1280, 720]",
		"to_cfr: true",
	]))
	values = options.load_options_file(yaml_file)
	assert values["dialect"] == "vapoursynth"
	assert values["filters"] == ["core.std.Invert()"]
	script_options = options.build_options(values)
	assert script_options.resize == (1280, 720)
	assert script_options.to_cfr is True

#============================================

def test_load_options_file_empty(tmp_path) -> None:
	yaml_file = write_text_file(str(tmp_path / "empty.yaml"), "")
	assert options.load_options_file(yaml_file) == {}

#============================================

@pytest.mark.parametrize("text", [
	"- a\n- b\n",
	"colour: red\n",
	"filters: RemoveGrain(1)\n",
	"dialect: [unclosed\n",
])
def test_load_options_file_rejects(tmp_path, text) -> None:
	yaml_file = write_text_file(str(tmp_path / "bad.yaml"), text)
	with pytest.raises(ConfigError):
		options.load_options_file(yaml_file)

#============================================

def test_overrides_win_over_file_values() -> None:
	"""
	Ensure explicit values replace file values and None leaves them alone.
	"""
	file_values = {"dialect": "vapoursynth", "audio": True, "resize": "640x480"}
	overrides = {"dialect": "avisynth", "audio": None, "resize": None}
	script_options = options.build_options(file_values, overrides)
	assert script_options.dialect == "avisynth"
	assert script_options.audio is True
	assert script_options.resize == (640, 480)

#============================================

@pytest.mark.parametrize("text", [
	"audio_ext: 5\n",
	"dialect: 2\n",
	"default_filters: 'no'\n",
	"to_cfr: 1\n",
	"filters: [3]\n",
	"ass_extract: true\n",
])
def test_load_options_file_rejects_value_types(tmp_path, text) -> None:
	"""
	Ensure a value of the wrong type is reported, not used or coerced.
	"""
	yaml_file = write_text_file(str(tmp_path / "types.yaml"), text)
	with pytest.raises(ConfigError):
		options.build_options(options.load_options_file(yaml_file))

#============================================

def test_build_options_rejects_value_types() -> None:
	with pytest.raises(ConfigError):
		options.build_options({"audio_ext": 5})
	with pytest.raises(ConfigError):
		options.build_options({}, {"filters": ["Sharpen(0.2)", None]})
