#!/usr/bin/env python3

import os
from avsserlib.core import utils
from avsserlib.core.errors import ToolInvocationError

#============================================

def subtitle_path(movfile: str) -> str:
	return utils.with_extension(movfile, 'ass')

#============================================

def extract_subtitles(movfile: str, sub_track: int = 0) -> str:
	"""
	Pull one subtitle track out of a container into a sibling .ass file.
	"""
	assfile = subtitle_path(movfile)
	cmd = ['ffmpeg', '-nostdin', '-i', movfile]
	cmd += ['-map', f"0:s:{sub_track}"]
	cmd += ['-map_chapters', '-1']
	cmd += [assfile]
	utils.runCmd(cmd)
	if not os.path.isfile(assfile):
		raise ToolInvocationError(f"extract subtitles failed for {movfile}")
	return assfile

#============================================

def extract_fonts(movfile: str, probe) -> list:
	"""
	Extract every font attachment next to the container, keeping any
	font file that already exists.
	"""
	fonts = probe.get_fonts_list(movfile)
	directory = os.path.dirname(movfile)
	written = []
	for attachment_id, filename in fonts.items():
		font_path = os.path.join(directory, filename)
		if os.path.exists(font_path):
			continue
		cmd = ['mkvextract', 'attachments', movfile]
		cmd += [f"{attachment_id}:{font_path}"]
		utils.runCmd(cmd)
		written.append(font_path)
	return written
