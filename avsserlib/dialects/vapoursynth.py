#!/usr/bin/env python3

from avsserlib.core import inputs
from avsserlib.core import utils
from avsserlib.dialects.base import ScriptDialect

#============================================

def escape_python_string(text: str) -> str:
	return text.replace("\\", "\\\\").replace("'", "\\'")

#============================================

class VapoursynthDialect(ScriptDialect):
	name = 'vapoursynth'
	extension = 'vpy'
	default_filters = ("core.rgvs.RemoveGrain(1)",)
	source_filters = {
		inputs.DGINDEX: "core.d2v.Source",
		inputs.DGAVC: None,
	}
	fallback_source_filter = "core.ffms2.Source"
	# keyword naming the input file, per source plugin
	source_keywords = {
		"core.d2v.Source": "input",
	}

	#============================
	def escape(self, text: str) -> str:
		return escape_python_string(text)

	#============================
	def quote(self, text: str) -> str:
		return f"'{self.escape(text)}'"

	#============================
	def source(self, filepath: str, downsample: bool = False,
		timecodes: str = None) -> str:
		filter_name = self.source_filter_name(filepath)
		keyword = self.source_keywords.get(filter_name, "source")
		options = ""
		if timecodes is not None:
			options += f", timecodes={self.quote(timecodes)}"
		return f"{filter_name}({keyword}={self.quote(filepath)}{options})"

	#============================
	def downsample(self) -> str:
		return "core.resize.Spline36(format=vs.YUV420P8)"

	#============================
	def rate_conversion(self, timecodes: str) -> str:
		return f"core.vfrtocfr.VFRToCFR({self.quote(timecodes)}, 120000, 1001)"

	#============================
	def audio(self, audio_file: str) -> str:
		return f"core.damb.Read({self.quote(audio_file)})"

	#============================
	def subtitle(self, subtitle_file: str) -> str:
		return f"core.sub.TextFile({self.quote(subtitle_file)})"

	#============================
	def resize(self, width: int, height: int) -> str:
		return f"core.resize.Spline36({width}, {height})"

	#============================
	def trim(self, start_frame: int, end_frame: int) -> str:
		return f"core.std.Trim({start_frame}, {end_frame})"

	#============================
	def header(self) -> list:
		return ["import vapoursynth as vs", "core = vs.core"]

	#============================
	def assembly(self, labels: list) -> str:
		return "video = " + " + ".join(labels)

	#============================
	def footer(self, audio_file: str = None) -> list:
		lines = []
		if audio_file is not None:
			flac_file = utils.with_extension(audio_file, 'flac')
			lines.append(f"core.damb.Write(video, {self.quote(flac_file)})")
		lines.append("video.set_output()")
		return lines
