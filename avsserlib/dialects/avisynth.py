#!/usr/bin/env python3

from avsserlib.core import inputs
from avsserlib.dialects.base import ScriptDialect

#============================================

class AvisynthDialect(ScriptDialect):
	name = 'avisynth'
	extension = 'avs'
	default_filters = ("RemoveGrain(1)",)
	source_filters = {
		inputs.DGINDEX: "DGDecode_MPEG2Source",
		inputs.DGAVC: "AVCSource",
	}
	fallback_source_filter = "FFVideoSource"
	# L-SMASH decodes high bit depth input and can dither on load
	downsample_source_filter = "LWLibAvVideoSource"

	#============================
	def quote(self, text: str) -> str:
		return f"\"{self.escape(text)}\""

	#============================
	def source(self, filepath: str, downsample: bool = False,
		timecodes: str = None) -> str:
		if downsample:
			filter_name = self.downsample_source_filter
		else:
			filter_name = self.source_filter_name(filepath)
		options = ""
		if downsample:
			options += ", format=\"YUV420P8\""
		if timecodes is not None:
			options += f", timecodes={self.quote(timecodes)}"
		return f"{filter_name}({self.quote(filepath)}{options})"

	#============================
	def rate_conversion(self, timecodes: str) -> str:
		return f"vfrtocfr(timecodes={self.quote(timecodes)}, fpsnum=120000, fpsden=1001)"

	#============================
	def audio(self, audio_file: str) -> str:
		return f"AudioDub(FFAudioSource({self.quote(audio_file)}))"

	#============================
	def subtitle(self, subtitle_file: str) -> str:
		return f"TextSub({self.quote(subtitle_file)})"

	#============================
	def resize(self, width: int, height: int) -> str:
		return f"Spline64Resize({width}, {height})"

	#============================
	def trim(self, start_frame: int, end_frame: int) -> str:
		return f"Trim({start_frame},{end_frame})"
