#!/usr/bin/env python3

import argparse
import sys
from tqdm import tqdm
from avsserlib.core import inputs
from avsserlib.core import options as options_module
from avsserlib.core import utils
from avsserlib.core.errors import AvsserError
from avsserlib.core.synthesizer import ScriptSynthesizer
from avsserlib.dialects.select import DIALECTS
from avsserlib.dialects.select import get_dialect

#============================================

def parse_args(argv: list = None):
	"""
	Parse command-line arguments.
	"""
	parser = argparse.ArgumentParser(
		description="Write AviSynth or VapourSynth scripts for video files, "
		"splitting Matroska ordered chapters into trimmed segments")
	parser.add_argument('input', help='video file or directory of video files')
	parser.add_argument('-c', '--config', dest='config_file',
		help='yaml file with default script options')
	parser.add_argument('-o', '--output', dest='output_file',
		help='script path, only valid for a single input file')
	parser.add_argument('-d', '--dialect', dest='dialect', choices=sorted(DIALECTS),
		help='script language to write (default: avisynth)')
	parser.add_argument('-f', '--filter', dest='filters', action='append',
		help='extra filter call added to every segment, may be repeated')
	parser.add_argument('-F', '--no-default-filters', dest='default_filters',
		action='store_false', help='do not add the default noise reduction filter')
	parser.add_argument('-a', '--ass', dest='ass', action='store_true',
		help='overlay subtitles from input_filename.ass')
	parser.add_argument('-A', '--ass-extract', dest='ass_extract', type=int,
		nargs='?', const=0, metavar='TRACK',
		help='extract a subtitle track from the inputs first (default track 0)')
	parser.add_argument('-u', '--audio', dest='audio', action='store_true',
		help='dub the audio of the input file into the script')
	parser.add_argument('-U', '--audio-ext', dest='audio_ext', metavar='EXT',
		help='dub audio from a sibling file with this extension instead')
	parser.add_argument('-r', '--resize', dest='resize', metavar='WIDTHxHEIGHT',
		help='resize the output')
	parser.add_argument('-C', '--to-cfr', dest='to_cfr', action='store_true',
		help='convert variable frame rate input to 120000/1001 constant')
	parser.add_argument('-D', '--downsample', dest='downsample', action='store_true',
		help='downsample high bit depth input to 8 bit')
	parser.add_argument('-t', '--fonts', dest='fonts', action='store_true',
		help='extract font attachments next to the inputs')
	parser.add_argument('-R', '--recursive', dest='recursive', action='store_true',
		help='search directories recursively')
	parser.add_argument('-q', '--quiet', dest='quiet', action='store_true',
		help='only report errors')
	parser.set_defaults(default_filters=None, ass=None, audio=None, to_cfr=None,
		downsample=None, fonts=None, recursive=None)
	args = parser.parse_args(argv)
	return args

#============================================

def build_options(args) -> options_module.ScriptOptions:
	file_values = {}
	if args.config_file is not None:
		file_values = options_module.load_options_file(args.config_file)
	overrides = {}
	for key in options_module.OPTION_KEYS:
		overrides[key] = getattr(args, key, None)
	return options_module.build_options(file_values, overrides)

#============================================

def main(argv: list = None) -> int:
	args = parse_args(argv)
	utils.set_quiet_mode(args.quiet)
	try:
		options = build_options(args)
		dialect = get_dialect(options.dialect)
		files = inputs.get_video_files(args.input, options.recursive)
	except AvsserError as exc:
		print(f"ERROR: {exc}", file=sys.stderr)
		return 1
	if args.output_file is not None and len(files) != 1:
		print("ERROR: --output needs exactly one input file", file=sys.stderr)
		return 1
	failures = 0
	for in_file in tqdm(files, disable=utils.is_quiet_mode() or len(files) < 2):
		synthesizer = ScriptSynthesizer(dialect, options)
		try:
			out_file = synthesizer.create_script(in_file, args.output_file)
		except AvsserError as exc:
			failures += 1
			print(f"ERROR: {in_file}: {exc}", file=sys.stderr)
			continue
		utils.report(f"wrote {out_file}")
	if failures > 0:
		return 1
	return 0


if __name__ == '__main__':
	sys.exit(main())
