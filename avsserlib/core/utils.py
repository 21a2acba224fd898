#!/usr/bin/env python3

import math
import os
import subprocess
import sys
from avsserlib.core.errors import ScriptIOError
from avsserlib.core.errors import ToolInvocationError

_QUIET_MODE = False

#============================================

def set_quiet_mode(enabled: bool) -> None:
	global _QUIET_MODE
	_QUIET_MODE = bool(enabled)
	return

#============================================

def is_quiet_mode() -> bool:
	return _QUIET_MODE

#============================================

def report(msg: str) -> None:
	if not _QUIET_MODE:
		print(msg)
	return

#============================================

def warn(msg: str) -> None:
	if not _QUIET_MODE:
		print(f"WARNING: {msg}", file=sys.stderr)
	return

#============================================

def format_cmd(args: list) -> str:
	parts = []
	for arg in args:
		text = str(arg)
		if ' ' in text or text == '':
			text = f"\"{text}\""
		parts.append(text)
	return ' '.join(parts)

#============================================

def runCmd(args: list) -> None:
	"""
	Run an external command, echoing it first, and wait for it to exit.
	"""
	report(f"CMD: '{format_cmd(args)}'")
	try:
		proc = subprocess.run([str(arg) for arg in args],
			stdout=subprocess.PIPE, stderr=subprocess.PIPE)
	except OSError as exc:
		raise ToolInvocationError(f"could not start {args[0]}: {exc}") from exc
	if proc.returncode != 0:
		raise ToolInvocationError(
			f"{args[0]} exited with status {proc.returncode}: "
			f"{proc.stderr.decode('utf-8', errors='replace').strip()}"
		)
	return

#============================================

def readCmd(args: list) -> str:
	"""
	Run an external command and return its standard output as text.

	A non-zero exit status is tolerated as long as the command printed
	something, since mkvinfo and mkvmerge exit with 1 on warnings.
	"""
	report(f"CMD: '{format_cmd(args)}'")
	try:
		proc = subprocess.run([str(arg) for arg in args],
			stdout=subprocess.PIPE, stderr=subprocess.PIPE)
	except OSError as exc:
		raise ToolInvocationError(f"could not start {args[0]}: {exc}") from exc
	if proc.returncode != 0 and len(proc.stdout) == 0:
		raise ToolInvocationError(
			f"{args[0]} exited with status {proc.returncode} and no output"
		)
	try:
		text = proc.stdout.decode('utf-8')
	except UnicodeDecodeError as exc:
		raise ToolInvocationError(f"{args[0]} output is not valid utf-8") from exc
	return text

#============================================

def timestamp_to_frame(hours: int, minutes: int, seconds: float,
	fps: float) -> int:
	return int(math.floor((seconds + 60.0 * minutes + 3600.0 * hours) * fps))

#============================================

def with_extension(filepath: str, extension: str) -> str:
	"""
	Replace the last extension of a path, like a.mkv -> a.timecodes.txt.
	"""
	base, _ = os.path.splitext(filepath)
	return f"{base}.{extension}"

#============================================

def ensure_file_exists(filepath: str) -> None:
	if not os.path.exists(filepath):
		raise ScriptIOError(f"file not found: {filepath}")
	return
