#!/usr/bin/env python3

from avsserlib.core import inputs
from avsserlib.core.errors import UnsupportedInputError

#============================================

class ScriptDialect():
	"""
	Text fragments for one scripting language.

	Subclasses fill in the filter names and literal syntax. A dialect
	holds no per-run state; the synthesizer passes in everything a
	fragment needs.
	"""
	name = None
	extension = None
	default_filters = ()
	# container kind -> source filter name; None marks unsupported kinds
	source_filters = {}
	fallback_source_filter = None

	#============================
	def escape(self, text: str) -> str:
		return text

	#============================
	def quote(self, text: str) -> str:
		raise NotImplementedError

	#============================
	def source_filter_name(self, filepath: str) -> str:
		kind = inputs.determine_input_type(filepath)
		if kind is None:
			raise UnsupportedInputError(f"not a known video container: {filepath}")
		name = self.source_filters.get(kind, self.fallback_source_filter)
		if name is None:
			raise UnsupportedInputError(
				f"{self.name} has no source filter for {kind} input: {filepath}"
			)
		return name

	#============================
	def source(self, filepath: str, downsample: bool = False,
		timecodes: str = None) -> str:
		raise NotImplementedError

	#============================
	def downsample(self):
		"""Return a standalone downsample fragment, or None if the source
		filter already handles it."""
		return None

	#============================
	def rate_conversion(self, timecodes: str) -> str:
		raise NotImplementedError

	#============================
	def audio(self, audio_file: str) -> str:
		raise NotImplementedError

	#============================
	def subtitle(self, subtitle_file: str) -> str:
		raise NotImplementedError

	#============================
	def resize(self, width: int, height: int) -> str:
		raise NotImplementedError

	#============================
	def trim(self, start_frame: int, end_frame: int) -> str:
		raise NotImplementedError

	#============================
	def header(self) -> list:
		return []

	#============================
	def assembly(self, labels: list) -> str:
		return " + ".join(labels)

	#============================
	def footer(self, audio_file: str = None) -> list:
		return []

	#============================
	def chain(self, fragment: str, label: str) -> str:
		"""
		Rewrite a fragment so the running clip is its first argument.
		"""
		index = fragment.find("(")
		if index < 0:
			return f"{fragment}({label})"
		head = fragment[:index + 1]
		tail = fragment[index + 1:]
		if tail.startswith(")"):
			return f"{head}{label}{tail}"
		return f"{head}{label}, {tail}"
