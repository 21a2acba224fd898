#!/usr/bin/env python3

#python wrapper for mkvinfo and mkvmerge identification output

import uuid
from avsserlib.core import utils
from avsserlib.core.errors import MissingFieldError
from avsserlib.core.models import ChapterAtom
from avsserlib.probe import patterns

# frame rate forced when converting variable frame rate input to 120000/1001
CFR_FPS = 120000.0 / 1001.0

# chapter scan states
SEEKING_VIDEO = 'seeking_video'
SEEKING_CHAPTERS = 'seeking_chapters'
IN_CHAPTERS = 'in_chapters'
DONE = 'done'

#============================================

def decode_uid(groups) -> uuid.UUID:
	return uuid.UUID(bytes=bytes(int(group, 16) for group in groups))

#============================================

def _captured_time(match) -> tuple:
	hours = int(match.group(1))
	minutes = int(match.group(2))
	seconds = float(match.group(3)) + float(match.group(4)) / 1000000000.0
	return (hours, minutes, seconds)

#============================================

def _in_video_track(line: str, in_video_track: bool) -> bool:
	"""
	Track whether a line falls inside a video track section.
	"""
	if line == patterns.VIDEO_TRACK_MARKER:
		return True
	if patterns.TRACK_TYPE_REGEX.match(line):
		return False
	if patterns.TRACK_HEADER_REGEX.match(line):
		return False
	if line.startswith(patterns.TOP_LEVEL_PREFIX):
		return False
	return in_video_track

#============================================

def parse_fps(text: str) -> float:
	in_video_track = False
	for raw_line in text.splitlines():
		line = raw_line.rstrip()
		in_video_track = _in_video_track(line, in_video_track)
		if not in_video_track:
			continue
		match = patterns.FPS_REGEX.search(line)
		if match:
			return float(match.group(1))
	raise MissingFieldError("no video frame rate found in mkvinfo output")

#============================================

def parse_segment_id(text: str, filepath: str = None) -> uuid.UUID:
	for line in text.splitlines():
		match = patterns.SEGMENT_UID_REGEX.search(line)
		if match:
			return decode_uid(match.groups())
	name = filepath if filepath is not None else "mkvinfo output"
	raise MissingFieldError(f"no segment uid found in {name}, is this a valid Matroska file?")

#============================================

def parse_chapter_atoms(text: str, force_fps: float = None) -> tuple:
	"""
	Scan an mkvinfo dump for the chapter table.

	The frame rate is read from the first video track unless force_fps
	is given. Returns (ordered, atoms) where atoms keep document order.
	Start frames are floored; end frames are floored and pulled back one
	frame so a chapter ends just before the next one starts.
	"""
	fps = force_fps
	state = SEEKING_CHAPTERS if fps is not None else SEEKING_VIDEO
	in_video_track = False
	ordered = False
	raw_atoms = []
	current = None
	for raw_line in text.splitlines():
		line = raw_line.rstrip()
		if state == SEEKING_VIDEO:
			if line == patterns.CHAPTERS_MARKER:
				state = IN_CHAPTERS
				continue
			in_video_track = _in_video_track(line, in_video_track)
			if in_video_track:
				match = patterns.FPS_REGEX.search(line)
				if match:
					fps = float(match.group(1))
					state = SEEKING_CHAPTERS
			continue
		if state == SEEKING_CHAPTERS:
			if line == patterns.CHAPTERS_MARKER:
				state = IN_CHAPTERS
			continue
		if patterns.EDITION_FLAG_ORDERED_REGEX.search(line):
			ordered = True
			continue
		if patterns.CHAPTER_ATOM_REGEX.search(line):
			if current is not None:
				raw_atoms.append(current)
			current = {'start': None, 'end': None, 'foreign_id': None}
			continue
		if current is not None:
			match = patterns.TIME_START_REGEX.search(line)
			if match:
				current['start'] = _captured_time(match)
				continue
			match = patterns.TIME_END_REGEX.search(line)
			if match:
				current['end'] = _captured_time(match)
				continue
			match = patterns.FOREIGN_UID_REGEX.search(line)
			if match:
				current['foreign_id'] = decode_uid(match.groups())
				continue
		if patterns.EBML_VOID_REGEX.search(line):
			state = DONE
			break
	if current is not None:
		raw_atoms.append(current)
	if fps is None:
		if ordered:
			raise MissingFieldError("ordered chapters found but no video frame rate")
		return (False, [])
	atoms = [_build_atom(item, fps) for item in raw_atoms]
	return (ordered, atoms)

#============================================

def _build_atom(item: dict, fps: float) -> ChapterAtom:
	start_frame = 0
	if item['start'] is not None:
		(hours, minutes, seconds) = item['start']
		start_frame = utils.timestamp_to_frame(hours, minutes, seconds, fps)
	end_frame = None
	if item['end'] is not None:
		(hours, minutes, seconds) = item['end']
		end_frame = utils.timestamp_to_frame(hours, minutes, seconds, fps) - 1
	return ChapterAtom(start_frame, end_frame, item['foreign_id'])

#============================================

def parse_font_attachments(text: str) -> dict:
	attachments = {}
	for line in text.splitlines():
		if not line.startswith(patterns.ATTACHMENT_PREFIX):
			continue
		lower = line.lower()
		if not any(ext in lower for ext in patterns.FONT_EXTENSIONS):
			continue
		match = patterns.ATTACHMENT_REGEX.search(line)
		if match is None:
			raise MissingFieldError(f"unreadable attachment line: {line.strip()}")
		attachments[int(match.group(1))] = match.group(2)
	return attachments

#============================================

class MkvInfoProbe():
	def __init__(self, mkvinfo: str = 'mkvinfo', mkvmerge: str = 'mkvmerge'):
		self.mkvinfo = mkvinfo
		self.mkvmerge = mkvmerge

	#============================
	def read_dump(self, filepath: str) -> str:
		return utils.readCmd([self.mkvinfo, filepath])

	#============================
	def read_identify(self, filepath: str) -> str:
		return utils.readCmd([self.mkvmerge, '-i', filepath])

	#============================
	def get_fps(self, filepath: str, force_fps: float = None) -> float:
		if force_fps is not None:
			return force_fps
		return parse_fps(self.read_dump(filepath))

	#============================
	def get_chapter_atoms(self, filepath: str, force_fps: float = None) -> tuple:
		return parse_chapter_atoms(self.read_dump(filepath), force_fps)

	#============================
	def get_segment_id(self, filepath: str) -> uuid.UUID:
		return parse_segment_id(self.read_dump(filepath), filepath)

	#============================
	def get_fonts_list(self, filepath: str) -> dict:
		return parse_font_attachments(self.read_identify(filepath))
