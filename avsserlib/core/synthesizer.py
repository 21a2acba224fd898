#!/usr/bin/env python3

import os
from avsserlib.chapters.links import ExternalLinkResolver
from avsserlib.chapters.resolver import ChapterResolver
from avsserlib.core import utils
from avsserlib.core.errors import ScriptIOError
from avsserlib.media import extract
from avsserlib.probe.mkvinfo import CFR_FPS
from avsserlib.probe.mkvinfo import MkvInfoProbe

#============================================

def default_output_path(in_file: str, dialect) -> str:
	return utils.with_extension(in_file, dialect.extension)

#============================================

def timecodes_path(source_file: str) -> str:
	return utils.with_extension(source_file, 'timecodes.txt')

#============================================

class ScriptDocument():
	"""
	A finished script: preloads, one filter chain per segment, and the
	statement that joins the segments. Rendering is pure, so the same
	document always produces the same text.
	"""
	def __init__(self, dialect, preloads: list, segments: list,
		audio_file: str = None):
		self.dialect = dialect
		self.preloads = preloads
		self.segments = segments
		self.audio_file = audio_file

	#============================
	def labels(self) -> list:
		return [f"video{index}" for index in range(1, len(self.segments) + 1)]

	#============================
	def render(self) -> str:
		lines = []
		header = self.dialect.header()
		if len(header) > 0:
			lines.extend(header)
			lines.append("")
		if len(self.preloads) > 0:
			lines.extend(self.preloads)
			lines.append("")
		labels = self.labels()
		for label, fragments in zip(labels, self.segments):
			for index, fragment in enumerate(fragments):
				if index > 0:
					fragment = self.dialect.chain(fragment, label)
				lines.append(f"{label} = {fragment}")
			lines.append("")
		lines.append(self.dialect.assembly(labels))
		footer = self.dialect.footer(self.audio_file)
		if len(footer) > 0:
			lines.append("")
			lines.extend(footer)
		return "\n".join(lines) + "\n"

	#============================
	def write(self, out_file: str) -> None:
		try:
			with open(out_file, 'w', encoding='utf-8') as script:
				script.write(self.render())
		except OSError as exc:
			raise ScriptIOError(f"could not write script {out_file}: {exc}") from exc
		return

#============================================

class ScriptSynthesizer():
	def __init__(self, dialect, options, probe=None):
		self.dialect = dialect
		self.options = options
		self.probe = probe if probe is not None else MkvInfoProbe()

	#============================
	def synthesize(self, in_file: str) -> ScriptDocument:
		in_file = os.path.abspath(in_file)
		force_rate = CFR_FPS if self.options.to_cfr else None
		breakpoints = ChapterResolver(self.probe).resolve(in_file, force_rate)
		if breakpoints is None:
			units = [None]
		else:
			units = breakpoints
			utils.report(f"{os.path.basename(in_file)}: "
				f"{len(breakpoints)} ordered chapter segment(s)")
		links = ExternalLinkResolver(self.probe)
		# keyed by resolved source, in order of first reference
		preloads = {}
		prepared = set()
		segments = []
		audio_file = None
		for unit in units:
			source_file = self._resolve_source(unit, in_file, links)
			if self.options.to_cfr and source_file not in preloads:
				preloads[source_file] = self.dialect.source(source_file,
					downsample=self.options.downsample,
					timecodes=timecodes_path(source_file))
			if source_file not in prepared:
				self._prepare_source(source_file)
				prepared.add(source_file)
			(fragments, segment_audio) = self._build_chain(source_file, unit)
			if segment_audio is not None:
				audio_file = segment_audio
			segments.append(fragments)
		return ScriptDocument(self.dialect, list(preloads.values()), segments,
			audio_file)

	#============================
	def create_script(self, in_file: str, out_file: str = None) -> str:
		if out_file is None:
			out_file = default_output_path(in_file, self.dialect)
		document = self.synthesize(in_file)
		document.write(out_file)
		return out_file

	#============================
	def _resolve_source(self, unit, in_file: str, links) -> str:
		if unit is None or not unit.is_foreign:
			return in_file
		found = links.resolve(unit.foreign_id, os.path.dirname(in_file), in_file)
		return os.path.abspath(found)

	#============================
	def _prepare_source(self, source_file: str) -> None:
		"""
		Run the extraction commands once per source, before any overlay
		fragment refers to their output.
		"""
		if self.options.ass_extract is not None:
			assfile = extract.subtitle_path(source_file)
			if os.path.exists(assfile):
				utils.warn(f"Cowardly refusing to overwrite existing subtitles: {assfile}")
			else:
				extract.extract_subtitles(source_file, self.options.ass_extract)
		if self.options.fonts:
			extract.extract_fonts(source_file, self.probe)
		return

	#============================
	def _build_chain(self, source_file: str, unit) -> tuple:
		dialect = self.dialect
		options = self.options
		fragments = [dialect.source(source_file, downsample=options.downsample)]
		if options.downsample:
			downsample = dialect.downsample()
			if downsample is not None:
				fragments.append(downsample)
		if options.to_cfr:
			# must come before the audio is dubbed in
			fragments.append(dialect.rate_conversion(timecodes_path(source_file)))
		audio_file = None
		if options.wants_audio:
			audio_file = source_file
			if options.audio_ext is not None:
				audio_file = utils.with_extension(source_file, options.audio_ext)
			utils.ensure_file_exists(audio_file)
			fragments.append(dialect.audio(audio_file))
		fragments.extend(options.filter_list(dialect))
		if options.ass:
			assfile = extract.subtitle_path(source_file)
			utils.ensure_file_exists(assfile)
			fragments.append(dialect.subtitle(assfile))
		if options.resize is not None:
			(width, height) = options.resize
			fragments.append(dialect.resize(width, height))
		if unit is not None:
			fragments.append(dialect.trim(unit.start_frame, unit.end_frame))
		return (fragments, audio_file)

#============================================

def create_script(in_file: str, out_file: str, dialect, options, probe=None) -> str:
	return ScriptSynthesizer(dialect, options, probe).create_script(in_file, out_file)
