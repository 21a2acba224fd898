#!/usr/bin/env python3

import os
import uuid
from avsserlib.core import inputs
from avsserlib.core import utils
from avsserlib.core.errors import AvsserError
from avsserlib.core.errors import LinkResolutionError

#============================================

class ExternalLinkResolver():
	"""
	Map foreign segment ids to sibling files in the same directory.

	Every probed sibling is cached whether or not it matched, so a later
	foreign id in the same run does not probe the directory again. One
	resolver lives for one script; nothing is kept between inputs.
	"""
	def __init__(self, probe):
		self.probe = probe
		self.cache = {}
		self.probed = set()

	#============================
	def resolve(self, foreign_id: uuid.UUID, directory: str,
		current_path: str) -> str:
		current_abs = os.path.abspath(current_path)
		found = self.cache.get(foreign_id)
		if found is None:
			found = self._search(foreign_id, directory, current_abs)
		if found is None:
			raise LinkResolutionError(
				f"could not find file with segment uid {foreign_id} "
				f"linked through ordered chapters of {current_path}"
			)
		if os.path.abspath(found) == current_abs:
			raise LinkResolutionError(
				f"segment uid {foreign_id} links {current_path} to itself"
			)
		return found

	#============================
	def _search(self, foreign_id: uuid.UUID, directory: str, current_abs: str):
		extension = inputs.get_extension(current_abs)
		for candidate in self._candidates(directory, extension, current_abs):
			try:
				candidate_id = self.probe.get_segment_id(candidate)
			except AvsserError as exc:
				utils.warn(f"skipping {candidate}: {exc}")
				continue
			finally:
				self.probed.add(candidate)
			self.cache[candidate_id] = candidate
			if candidate_id == foreign_id:
				return candidate
		return None

	#============================
	def _candidates(self, directory: str, extension: str, current_abs: str) -> list:
		directory = directory or '.'
		candidates = []
		for name in sorted(os.listdir(directory)):
			path = os.path.join(directory, name)
			if not os.path.isfile(path):
				continue
			if inputs.get_extension(path) != extension:
				continue
			if os.path.abspath(path) == current_abs:
				continue
			if path in self.probed:
				continue
			candidates.append(path)
		return candidates
