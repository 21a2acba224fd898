#!/usr/bin/env python3

#============================================

class AvsserError(RuntimeError):
	"""Base class for every failure raised while building a script."""

#============================================

class ToolInvocationError(AvsserError):
	"""An external command failed to start or gave unreadable output."""

#============================================

class MissingFieldError(AvsserError):
	"""An expected line is absent from a diagnostic dump."""

#============================================

class LinkResolutionError(AvsserError):
	"""A foreign segment id does not resolve to a sibling file."""

#============================================

class ScriptIOError(AvsserError):
	"""The script or one of its sidecar files could not be used."""

#============================================

class UnsupportedInputError(AvsserError):
	"""The container type has no source filter in the chosen dialect."""

#============================================

class ConfigError(AvsserError):
	"""The options file or an option value is malformed."""
