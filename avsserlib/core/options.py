#!/usr/bin/env python3

import os
import yaml
from avsserlib.core.errors import ConfigError

OPTION_KEYS = (
	'dialect', 'filters', 'default_filters', 'ass', 'ass_extract',
	'audio', 'audio_ext', 'resize', 'to_cfr', 'downsample', 'fonts',
	'recursive',
)
BOOL_KEYS = ('default_filters', 'ass', 'audio', 'to_cfr', 'downsample',
	'fonts', 'recursive')
STR_KEYS = ('dialect', 'audio_ext')

#============================================

def parse_resize(raw_resize):
	"""
	Accept [width, height] or a 'WIDTHxHEIGHT' string.
	"""
	if raw_resize is None:
		return None
	if isinstance(raw_resize, str):
		parts = raw_resize.lower().split('x')
	elif isinstance(raw_resize, (list, tuple)):
		parts = list(raw_resize)
	else:
		raise ConfigError("resize must be [width, height] or WIDTHxHEIGHT")
	if len(parts) != 2:
		raise ConfigError("resize must be [width, height] or WIDTHxHEIGHT")
	try:
		width = int(parts[0])
		height = int(parts[1])
	except ValueError as exc:
		raise ConfigError(f"resize values must be integers: {raw_resize}") from exc
	if width <= 0 or height <= 0:
		raise ConfigError("resize width and height must be positive")
	return (width, height)

#============================================

def parse_track(raw_track):
	if raw_track is None:
		return None
	if isinstance(raw_track, bool):
		raise ConfigError(f"subtitle track must be an integer: {raw_track}")
	try:
		track = int(raw_track)
	except (TypeError, ValueError) as exc:
		raise ConfigError(f"subtitle track must be an integer: {raw_track}") from exc
	if track < 0:
		raise ConfigError("subtitle track must not be negative")
	return track

#============================================

class ScriptOptions():
	def __init__(self, dialect: str = 'avisynth', filters: list = None,
		default_filters: bool = True, ass: bool = False, ass_extract: int = None,
		audio: bool = False, audio_ext: str = None, resize=None,
		to_cfr: bool = False, downsample: bool = False, fonts: bool = False,
		recursive: bool = False):
		self.dialect = dialect
		self.filters = list(filters) if filters is not None else []
		self.default_filters = bool(default_filters)
		self.ass = bool(ass)
		self.ass_extract = parse_track(ass_extract)
		self.audio = bool(audio)
		self.audio_ext = audio_ext.lstrip('.') if audio_ext else None
		self.resize = parse_resize(resize)
		self.to_cfr = bool(to_cfr)
		self.downsample = bool(downsample)
		self.fonts = bool(fonts)
		self.recursive = bool(recursive)

	#============================
	@property
	def wants_audio(self) -> bool:
		return self.audio or self.audio_ext is not None

	#============================
	def filter_list(self, dialect) -> list:
		"""
		User filters first, then the dialect default unless disabled.
		"""
		filters = list(self.filters)
		if self.default_filters:
			filters.extend(dialect.default_filters)
		return filters

#============================================

def check_option_types(values: dict) -> None:
	"""
	Reject option values of the wrong type; None means unset.
	"""
	for key in BOOL_KEYS:
		value = values.get(key)
		if value is not None and not isinstance(value, bool):
			raise ConfigError(f"{key} must be true or false, not {value!r}")
	for key in STR_KEYS:
		value = values.get(key)
		if value is not None and not isinstance(value, str):
			raise ConfigError(f"{key} must be a string, not {value!r}")
	filters = values.get('filters')
	if filters is None:
		return
	if not isinstance(filters, list):
		raise ConfigError("filters must be a list of filter calls")
	for item in filters:
		if not isinstance(item, str):
			raise ConfigError(f"filter calls must be strings, not {item!r}")
	return

#============================================

def load_options_file(yaml_file: str) -> dict:
	file_size = os.path.getsize(yaml_file)
	if file_size > 10 ** 7:
		raise ConfigError("options file is larger than 10MB")
	with open(yaml_file, 'r') as data_file:
		try:
			data = yaml.safe_load(data_file)
		except yaml.YAMLError as exc:
			raise ConfigError(f"could not parse {yaml_file}: {exc}") from exc
	if data is None:
		return {}
	if not isinstance(data, dict):
		raise ConfigError("options file must be a mapping at the top level")
	unknown = sorted(str(key) for key in data if key not in OPTION_KEYS)
	if len(unknown) > 0:
		raise ConfigError(f"unknown option keys: {', '.join(unknown)}")
	check_option_types(data)
	return data

#============================================

def build_options(file_values: dict = None, overrides: dict = None) -> ScriptOptions:
	"""
	Merge options file values with explicit overrides; None means unset.
	"""
	values = {}
	for source in (file_values or {}, overrides or {}):
		for key, value in source.items():
			if value is not None:
				values[key] = value
	check_option_types(values)
	return ScriptOptions(**values)
