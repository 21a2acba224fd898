"""
Fake mkvinfo output and a probe that serves it, for tests.
"""

# Standard Library
import os
import sys

REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if REPO_ROOT not in sys.path:
	sys.path.insert(0, REPO_ROOT)

# local repo modules
from avsserlib.core.errors import ToolInvocationError
from avsserlib.probe.mkvinfo import MkvInfoProbe

#============================================

def uid_text(uid_bytes: bytes) -> str:
	return " ".join(f"0x{value:02x}" for value in uid_bytes)

#============================================

def make_uid(seed: int) -> bytes:
	"""
	Build a distinct 16 byte segment uid from a small integer.
	"""
	return bytes((seed + index) % 256 for index in range(16))

#============================================

def make_dump(segment_uid: bytes, fps: str = "24.000", chapters: list = None,
	ordered: bool = True) -> str:
	"""
	Build an mkvinfo style dump.

	Args:
		segment_uid: 16 bytes for the Segment UID line, or None to omit it.
		fps: frame rate text for the video track, or None to omit it.
		chapters: list of (start, end, foreign_uid) with HH:MM:SS.NNNNNNNNN
			strings; foreign_uid may be None and end may be None.
		ordered: write the ordered edition flag.
	"""
	lines = []
	lines.append("+ EBML head")
	lines.append("|+ EBML version: 1")
	lines.append("|+ Document type: matroska")
	lines.append("+ Segment: size 1048576")
	lines.append("|+ Seek head (subentries will be skipped)")
	lines.append("|+ EBML void: size 4012")
	lines.append("|+ Segment information")
	lines.append("| + Timestamp scale: 1000000")
	lines.append("| + Multiplexing application: libebml v1.4.2 + libmatroska v1.6.4")
	if segment_uid is not None:
		lines.append(f"| + Segment UID: {uid_text(segment_uid)}")
	lines.append("|+ Tracks")
	lines.append("| + Track")
	lines.append("|  + Track number: 1 (track ID for mkvmerge & mkvextract: 0)")
	lines.append("|  + Track type: video")
	lines.append("|  + Codec ID: V_MPEG4/ISO/AVC")
	if fps is not None:
		lines.append(
			f"|  + Default duration: 00:00:00.041666666 ({fps} frames/fields "
			"per second for a video track)"
		)
	lines.append("| + Track")
	lines.append("|  + Track number: 2 (track ID for mkvmerge & mkvextract: 1)")
	lines.append("|  + Track type: audio")
	lines.append("|  + Default duration: 00:00:00.021333333 (46.875 frames/fields per second for a video track)")
	if chapters is not None:
		lines.append("|+ Chapters")
		lines.append("| + Edition entry")
		lines.append("|  + Edition flag hidden: 0")
		lines.append(f"|  + Edition flag ordered: {1 if ordered else 0}")
		for (start, end, foreign_uid) in chapters:
			lines.append("|  + Chapter atom")
			lines.append("|   + Chapter UID: 123456789")
			lines.append(f"|   + Chapter time start: {start}")
			if end is not None:
				lines.append(f"|   + Chapter time end: {end}")
			if foreign_uid is not None:
				lines.append(f"|   + Chapter segment UID: length 16, data: {uid_text(foreign_uid)}")
			lines.append("|   + Chapter flag hidden: 0")
			lines.append("|   + Chapter display")
			lines.append("|    + Chapter string: Part")
		lines.append("|+ EBML void: size 120")
	lines.append("|+ Cluster")
	return "\n".join(lines) + "\n"

#============================================

class FakeProbe(MkvInfoProbe):
	"""
	Serve prepared dumps by absolute path instead of running mkvinfo.
	"""
	def __init__(self, dumps: dict = None, identify: dict = None):
		super().__init__()
		self.dumps = {}
		self.identify = {}
		self.calls = []
		for path, text in (dumps or {}).items():
			self.dumps[os.path.abspath(path)] = text
		for path, text in (identify or {}).items():
			self.identify[os.path.abspath(path)] = text

	#============================
	def read_dump(self, filepath: str) -> str:
		key = os.path.abspath(filepath)
		self.calls.append(key)
		if key not in self.dumps:
			raise ToolInvocationError(f"no fake dump for {filepath}")
		return self.dumps[key]

	#============================
	def read_identify(self, filepath: str) -> str:
		key = os.path.abspath(filepath)
		if key not in self.identify:
			raise ToolInvocationError(f"no fake identify output for {filepath}")
		return self.identify[key]

#============================================

def touch(path: str) -> str:
	with open(path, 'w') as handle:
		handle.write("")
	return path
