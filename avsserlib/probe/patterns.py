#!/usr/bin/env python3

"""
Line markers and regular expressions for mkvinfo and mkvmerge output.

mkvinfo prints a human readable tree, not a versioned format. Every
pattern the parsers depend on lives here so a wording change in a new
MKVToolNix release only touches this module.
"""

import re

_HEX_GROUP = r"0x([0-9a-fA-F]{2})"
_UID_BYTES = " ".join([_HEX_GROUP] * 16)
_TIMESTAMP = r"(\d{2}):(\d{2}):(\d{2})\.(\d{9})"

# whole-line markers, compared after stripping trailing whitespace
VIDEO_TRACK_MARKER = "|  + Track type: video"
CHAPTERS_MARKER = "|+ Chapters"

# a track section ends at the next track, or at the next top level element
TRACK_HEADER_REGEX = re.compile(r"^\| \+ (?:A )?[tT]rack$")
TRACK_TYPE_REGEX = re.compile(r"^\|  \+ Track type: ")
TOP_LEVEL_PREFIX = "|+ "

SEGMENT_UID_REGEX = re.compile(r"Segment UID: " + _UID_BYTES)
FPS_REGEX = re.compile(r"Default duration:.+\((\d+\.\d+) frames/fields per second")
EDITION_FLAG_ORDERED_REGEX = re.compile(r"Edition ?[fF]lag ?[oO]rdered: 1")
CHAPTER_ATOM_REGEX = re.compile(r"Chapter ?[aA]tom")
TIME_START_REGEX = re.compile(r"Chapter ?[tT]ime ?[sS]tart: " + _TIMESTAMP)
TIME_END_REGEX = re.compile(r"Chapter ?[tT]ime ?[eE]nd: " + _TIMESTAMP)
FOREIGN_UID_REGEX = re.compile(
	r"Chapter ?[sS]egment ?UID: length 16, data: " + _UID_BYTES
)
EBML_VOID_REGEX = re.compile(r"(?:Ebml|EBML) ?[vV]oid")

ATTACHMENT_PREFIX = "Attachment"
ATTACHMENT_REGEX = re.compile(r"Attachment ID (\d+): .* file name '(.+)'")
FONT_EXTENSIONS = ('.ttf', '.otf')
