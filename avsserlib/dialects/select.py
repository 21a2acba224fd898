#!/usr/bin/env python3

from avsserlib.core.errors import ConfigError
from avsserlib.dialects.avisynth import AvisynthDialect
from avsserlib.dialects.vapoursynth import VapoursynthDialect

DIALECTS = {
	'avisynth': AvisynthDialect,
	'vapoursynth': VapoursynthDialect,
}

#============================================

def get_dialect(name: str):
	dialect_class = DIALECTS.get(str(name).lower())
	if dialect_class is None:
		raise ConfigError(
			f"unknown script dialect {name}, expected one of: {', '.join(DIALECTS)}"
		)
	return dialect_class()
