#!/usr/bin/env python3

import os
from avsserlib.core.errors import ScriptIOError

# container kinds, classified by extension only
MATROSKA = 'matroska'
MPEG4 = 'mpeg4'
AVI = 'avi'
DGINDEX = 'dgindex'
DGAVC = 'dgavc'
OTHER = 'other'

EXTENSION_TYPES = {
	'mkv': MATROSKA,
	'mp4': MPEG4,
	'avi': AVI,
	'd2v': DGINDEX,
	'dga': DGAVC,
	'mpeg': OTHER,
	'mpg': OTHER,
	'wmv': OTHER,
	'mov': OTHER,
	'flv': OTHER,
	'webm': OTHER,
	'ivf': OTHER,
}

#============================================

def get_extension(filepath: str) -> str:
	_, ext = os.path.splitext(filepath)
	return ext[1:].lower()

#============================================

def determine_input_type(filepath: str):
	"""
	Return the container kind for a path, or None if it is not a video.
	"""
	return EXTENSION_TYPES.get(get_extension(filepath))

#============================================

def get_list_of_files(path: str, recursive: bool = False) -> list:
	if os.path.isfile(path):
		return [path]
	if not os.path.isdir(path):
		raise ScriptIOError(
			f"cannot read {path}, perhaps it is a broken symlink "
			"or you do not have permission"
		)
	files = []
	for name in sorted(os.listdir(path)):
		next_path = os.path.join(path, name)
		if os.path.isfile(next_path):
			files.append(next_path)
		elif recursive and os.path.isdir(next_path):
			files.extend(get_list_of_files(next_path, recursive))
	return files

#============================================

def get_video_files(path: str, recursive: bool = False) -> list:
	return [item for item in get_list_of_files(path, recursive)
		if determine_input_type(item) is not None]
