#!/usr/bin/env python3

"""Value types shared by the probe, the chapter resolver and the synthesizer."""

import uuid
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ChapterAtom:
	start_frame: int
	end_frame: Optional[int]       # None when the dump has no ChapterTimeEnd
	foreign_id: Optional[uuid.UUID] = None


@dataclass(frozen=True)
class Breakpoint:
	start_frame: int
	end_frame: int                 # inclusive
	foreign_id: Optional[uuid.UUID] = None

	@property
	def is_foreign(self) -> bool:
		return self.foreign_id is not None
