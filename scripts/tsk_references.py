#!/usr/bin/env python3
"""Parse Treasury of Scripture Knowledge reference tokens such as ``ro 8:28,29``."""

import re

from bible_books import BOOK_ID_TO_SHORT_NAME, book_name

# Abbreviations as listed in the TSK readme.
ABBREV_TO_BOOK_ID = {
    "ge": 1, "ex": 2, "le": 3, "nu": 4, "de": 5,
    "jos": 6, "jud": 7, "ru": 8, "1sa": 9, "2sa": 10,
    "1ki": 11, "2ki": 12, "1ch": 13, "2ch": 14, "ezr": 15,
    "ne": 16, "es": 17, "job": 18, "ps": 19, "pr": 20,
    "ec": 21, "so": 22, "isa": 23, "jer": 24, "la": 25,
    "eze": 26, "da": 27, "ho": 28, "joe": 29, "am": 30,
    "ob": 31, "jon": 32, "mic": 33, "na": 34, "hab": 35,
    "zep": 36, "hag": 37, "zec": 38, "mal": 39,
    "mt": 40, "mr": 41, "lu": 42, "joh": 43, "ac": 44,
    "ro": 45, "1co": 46, "2co": 47, "ga": 48, "eph": 49,
    "php": 50, "col": 51, "1th": 52, "2th": 53, "1ti": 54,
    "2ti": 55, "tit": 56, "phm": 57, "heb": 58, "jas": 59,
    "1pe": 60, "2pe": 61, "1jo": 62, "2jo": 63, "3jo": 64,
    "jude": 65, "re": 66,
}

REFERENCE_RE = re.compile(r"^\s*([a-z0-9]+)\s+(\d+)\s*:(.+)$", re.S)
LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


def parse_leading_int(value: str):
    """Read the integer at the start of ``value`` ("12a" -> 12); None when there is none."""
    m = LEADING_INT_RE.match(value or "")
    if not m:
        return None
    return int(m.group(1))


def parse_verse_segment(segment: str):
    if "-" in segment:
        start_text, end_text = segment.split("-")[:2]
        start = parse_leading_int(start_text)
        end = parse_leading_int(end_text)
        if start is None or end is None or end < start:
            return None
        return start, end

    verse = parse_leading_int(segment)
    if verse is None:
        return None
    return verse, None


def parse_reference(ref: str):
    """
    Parse one reference token into a list of verse references.

    "ro 8:28,29"   -> two single-verse references
    "isa 40:26-28" -> one range reference with ``verseEnd``
    Unknown abbreviations and unparsable tokens give an empty list.
    """
    m = REFERENCE_RE.match(ref or "")
    if not m:
        return []

    abbrev, chapter_text, verses_part = m.groups()
    book_id = ABBREV_TO_BOOK_ID.get(abbrev)
    if not book_id:
        return []

    chapter = int(chapter_text)
    refs = []
    for segment in verses_part.split(","):
        parsed = parse_verse_segment(segment)
        if parsed is None:
            continue
        verse, verse_end = parsed
        item = {"bookId": book_id, "chapter": chapter, "verse": verse}
        if verse_end is not None:
            item["verseEnd"] = verse_end
        refs.append(item)
    return refs


def parse_reference_list(ref_list: str):
    refs = []
    for part in (ref_list or "").split(";"):
        trimmed = part.strip()
        if trimmed:
            refs.extend(parse_reference(trimmed))
    return refs


def _format_with(name: str, ref: dict) -> str:
    verse_end = ref.get("verseEnd")
    if verse_end and verse_end != ref["verse"]:
        return f"{name} {ref['chapter']}:{ref['verse']}-{verse_end}"
    return f"{name} {ref['chapter']}:{ref['verse']}"


def format_reference(ref: dict) -> str:
    return _format_with(book_name(ref["bookId"]), ref)


def format_short_reference(ref: dict) -> str:
    name = BOOK_ID_TO_SHORT_NAME.get(ref["bookId"]) or str(ref["bookId"])
    return _format_with(name, ref)
