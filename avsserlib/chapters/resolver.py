#!/usr/bin/env python3

from avsserlib.core import inputs
from avsserlib.core import utils
from avsserlib.core.errors import MissingFieldError
from avsserlib.core.models import Breakpoint

#============================================

def merge_atoms(atoms: list) -> list:
	"""
	Collapse chapter atoms into the smallest list of playback units.

	A foreign atom is always its own unit. Consecutive local atoms merge
	into one unit running from the first start to the last end.
	"""
	breakpoints = []
	run_start = None
	run_end = None
	for atom in atoms:
		if atom.end_frame is None:
			raise MissingFieldError(
				f"chapter starting at frame {atom.start_frame} has no ChapterTimeEnd"
			)
		if atom.end_frame < atom.start_frame:
			utils.warn(f"dropping empty chapter at frame {atom.start_frame}")
			continue
		if atom.foreign_id is not None:
			if run_start is not None:
				breakpoints.append(Breakpoint(run_start, run_end))
				run_start = None
			breakpoints.append(Breakpoint(atom.start_frame, atom.end_frame,
				atom.foreign_id))
			continue
		if run_start is None:
			run_start = atom.start_frame
		run_end = atom.end_frame
	if run_start is not None:
		breakpoints.append(Breakpoint(run_start, run_end))
	return breakpoints

#============================================

class ChapterResolver():
	def __init__(self, probe):
		self.probe = probe

	#============================
	def resolve(self, filepath: str, force_rate: float = None):
		"""
		Return the ordered breakpoints of a file, or None when it has no
		ordered chapters and should be handled as one segment.
		"""
		if inputs.determine_input_type(filepath) != inputs.MATROSKA:
			return None
		(ordered, atoms) = self.probe.get_chapter_atoms(filepath, force_rate)
		if not ordered:
			return None
		breakpoints = merge_atoms(atoms)
		if len(breakpoints) == 0:
			raise MissingFieldError(f"ordered chapters of {filepath} hold no playable chapter")
		return breakpoints
