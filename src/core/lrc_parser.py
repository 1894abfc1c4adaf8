# core/lrc_parser.py
from __future__ import annotations

import re
from typing import List, Optional

from core.models import LyricsDocument, LyricsLine

# Presence of one "mm:ss.cc]" anywhere marks the whole text as synced.
_SYNCED_RE = re.compile(r"\d{2}:\d{2}\.\d{2}\]")

# Leading [mm:ss.cc] tag; centiseconds optional.
_LINE_RE = re.compile(r"^\[(\d{2}):(\d{2})(?:\.(\d{2}))?\](.*)$")


def _ts_to_seconds(mm: str, ss: str, cs: str | None) -> float:
    return int(mm) * 60 + int(ss) + int(cs or "0") / 100


def is_synced(raw: Optional[str]) -> bool:
    return bool(raw) and _SYNCED_RE.search(raw) is not None


def parse_lines(raw: str) -> List[LyricsLine]:
    """
    Returns one LyricsLine per tagged line, in source order.
    Lines without a leading tag (metadata like [ar:], blank lines, prose)
    are skipped. No sorting is applied.
    """
    out: List[LyricsLine] = []
    for raw_line in raw.split("\n"):
        m = _LINE_RE.match(raw_line.strip())
        if not m:
            continue
        mm, ss, cs, text = m.groups()
        out.append(LyricsLine(offset_seconds=_ts_to_seconds(mm, ss, cs), text=text.strip()))
    return out


def strip_timestamps(raw: Optional[str]) -> str:
    """Remove leading [..] blocks (timestamps or tags) from each line, keeping blank lines."""
    if not raw:
        return ""
    out_lines: List[str] = []
    for line in raw.split("\n"):
        line = line.strip()
        while line.startswith("[") and "]" in line:
            line = line.split("]", 1)[1].lstrip()
        out_lines.append(line)
    return "\n".join(out_lines).strip()


def parse(raw: Optional[str]) -> LyricsDocument:
    """
    Classify and parse a raw lyrics payload.

      - None / "" -> ABSENT
      - contains a [mm:ss.cc] tag -> SYNCED (even if no line parses)
      - anything else -> PLAIN, text kept as-is
    """
    if not raw:
        return LyricsDocument.absent()

    if is_synced(raw):
        return LyricsDocument.synced(parse_lines(raw), raw)

    return LyricsDocument.plain(raw)
