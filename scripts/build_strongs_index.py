#!/usr/bin/env python3
"""Build the Strong's concordance index JSON from Strong's-tagged KJV chapter files."""

import argparse
import json
import time
import xml.etree.ElementTree as ET
from pathlib import Path

from bible_books import BIBLE_BOOKS, is_old_testament, verse_key
from kjv_xml import iter_chapter_files, parse_strongs_phrases, read_chapter_xml

INDEX_VERSION = 1


def strongs_id(book_id: int, number: str) -> str:
    prefix = "H" if is_old_testament(book_id) else "G"
    return f"{prefix}{number}"


def build_strongs_index(chapters):
    """
    Index ``(book_id, chapter, phrase_verses)`` triples from ``parse_strongs_phrases``.

    Each Strong's id maps to the unique ``[book_id, chapter, verse]`` locations it occurs in.
    """
    strongs_index = {}
    seen_locations = {}
    verse_texts = {}
    total_verses = 0
    total_entries = 0

    for book_id, chapter, phrase_verses in chapters:
        for num, phrases, numbers in phrase_verses:
            verse_texts[verse_key(book_id, chapter, num)] = " ".join(phrases).strip()
            total_verses += 1
            location = (book_id, chapter, num)
            for number in numbers:
                sid = strongs_id(book_id, number)
                seen = seen_locations.setdefault(sid, set())
                if location in seen:
                    continue
                seen.add(location)
                strongs_index.setdefault(sid, []).append([book_id, chapter, num])
                total_entries += 1

    ids = list(strongs_index)
    return {
        "version": INDEX_VERSION,
        "stats": {
            "totalVerses": total_verses,
            "totalStrongsEntries": total_entries,
            "uniqueStrongsIds": len(ids),
            "hebrewIds": sum(1 for sid in ids if sid.startswith("H")),
            "greekIds": sum(1 for sid in ids if sid.startswith("G")),
        },
        "strongsIndex": strongs_index,
        "verseTexts": verse_texts,
    }


def load_chapters(bible_dir: Path):
    current_book = None
    for book_id, name, chapter, path in iter_chapter_files(bible_dir, BIBLE_BOOKS, warn_missing_chapters=False):
        if book_id != current_book:
            current_book = book_id
            print(f"\rProcessing {name} ({book_id}/{len(BIBLE_BOOKS)})...", end="", flush=True)
        try:
            phrase_verses = parse_strongs_phrases(read_chapter_xml(path))
        except (OSError, ET.ParseError) as err:
            print(f"\nError processing {path}: {err}")
            continue
        yield book_id, chapter, phrase_verses
    print()


def main():
    parser = argparse.ArgumentParser(description="Build the Strong's concordance index JSON.")
    parser.add_argument("--bible-dir", default="public/xmlBible.org-main/KJVs", help="Strong's-tagged KJV XML root")
    parser.add_argument("--output", default="public/strongs-index.json", help="Output JSON path")
    args = parser.parse_args()

    output_path = Path(args.output)
    print("Building Strong's concordance index...")
    start = time.time()

    index = build_strongs_index(load_chapters(Path(args.bible_dir)))

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(index, ensure_ascii=False, separators=(",", ":")), encoding="utf-8")

    stats = index["stats"]
    print("Strong's index built successfully!")
    print(f"- Total verses with Strong's: {stats['totalVerses']}")
    print(f"- Total Strong's entries: {stats['totalStrongsEntries']}")
    print(f"- Unique Strong's IDs: {stats['uniqueStrongsIds']}")
    print(f"- Hebrew IDs (H): {stats['hebrewIds']}")
    print(f"- Greek IDs (G): {stats['greekIds']}")
    print(f"- Output file: {output_path}")
    print(f"- File size: {output_path.stat().st_size / 1024:.2f} KB")
    print(f"- Build time: {time.time() - start:.2f}s")


if __name__ == "__main__":
    main()
