#!/usr/bin/env python3
"""Read xmlBible.org KJV chapter files (``NN-Book/chapter-NNN.xml``)."""

import codecs
import re
import xml.etree.ElementTree as ET
from pathlib import Path

XML_DECLARATION_RE = re.compile(r"^\s*<\?xml[^>]*\?>")


def strip_ns(tag: str) -> str:
    return tag.split("}", 1)[-1]


def book_folder(book_id: int, name: str) -> str:
    return f"{book_id:02d}-{name}"


def chapter_file_name(chapter: int) -> str:
    return f"chapter-{chapter:03d}.xml"


def read_chapter_xml(path: Path) -> str:
    raw = path.read_bytes()
    if raw.startswith(codecs.BOM_UTF16_BE):
        return raw.decode("utf-16")
    if raw.startswith(codecs.BOM_UTF16_LE) or b"\x00" in raw:
        return raw.decode("utf-16-le").lstrip("\ufeff")
    return raw.decode("utf-8-sig")


def _iter_verses(xml_text: str):
    # The declaration may name an encoding that no longer matches the decoded text.
    root = ET.fromstring(XML_DECLARATION_RE.sub("", xml_text, count=1))
    for el in root.iter():
        if strip_ns(el.tag) != "verse":
            continue
        try:
            num = int(el.attrib.get("num", ""))
        except ValueError:
            continue
        yield num, el


def parse_verses(xml_text: str):
    """Return ``[(verse_num, text)]`` with nested markup flattened."""
    verses = []
    for num, el in _iter_verses(xml_text):
        text = re.sub(r"\s+", " ", "".join(el.itertext())).strip()
        verses.append((num, text))
    return verses


def parse_strongs_phrases(xml_text: str):
    """Return ``[(verse_num, phrase_texts, strongs_numbers)]`` for verses tagged with Strong's numbers."""
    results = []
    for num, el in _iter_verses(xml_text):
        phrases = []
        numbers = []
        for child in el.iter():
            if strip_ns(child.tag) != "phrase" or "strongs" not in child.attrib:
                continue
            phrases.append(child.text or "")
            number = child.attrib["strongs"].strip()
            if number and number not in numbers:
                numbers.append(number)
        if numbers:
            results.append((num, phrases, numbers))
    return results


def iter_chapter_files(root: Path, books, warn_missing_chapters: bool = True):
    """
    Yield ``(book_id, name, chapter, path)`` for every chapter file present under ``root``.

    Missing book folders are reported and skipped; missing chapter files are
    reported only when ``warn_missing_chapters`` is set.
    """
    for book_id, name, chapter_count in books:
        folder = root / book_folder(book_id, name)
        if not folder.is_dir():
            print(f"Warning: Book folder not found: {folder}")
            continue
        for chapter in range(1, chapter_count + 1):
            path = folder / chapter_file_name(chapter)
            if not path.exists():
                if warn_missing_chapters:
                    print(f"Warning: Chapter file not found: {path}")
                continue
            yield book_id, name, chapter, path
