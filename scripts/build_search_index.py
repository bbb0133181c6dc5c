#!/usr/bin/env python3
"""Build the word/prefix search index JSON from xmlBible.org KJV chapter files."""

import argparse
import json
import re
import time
import xml.etree.ElementTree as ET
from pathlib import Path

from bible_books import BIBLE_BOOKS, verse_key
from kjv_xml import iter_chapter_files, parse_verses, read_chapter_xml

INDEX_VERSION = 1
PREFIX_MIN = 2
PREFIX_MAX = 4

# Word characters are ASCII only; other letters are stripped like punctuation.
PUNCTUATION_RE = re.compile(r"[^A-Za-z0-9_\s]")


def tokenize(text: str):
    return PUNCTUATION_RE.sub("", text.lower()).split()


def build_prefix_index(words):
    prefix_index = {}
    for word in words:
        for length in range(PREFIX_MIN, min(PREFIX_MAX, len(word)) + 1):
            prefix_index.setdefault(word[:length], []).append(word)
    return prefix_index


def build_search_index(chapters):
    """
    Index ``(book_id, chapter, verses)`` triples, where ``verses`` is ``[(num, text)]``.

    Every word occurrence is stored as ``[book_id, chapter, verse]``.
    """
    word_index = {}
    verse_cache = {}
    total_verses = 0
    total_chapters = 0

    for book_id, chapter, verses in chapters:
        for num, text in verses:
            verse_cache[verse_key(book_id, chapter, num)] = text
            total_verses += 1
            for word in tokenize(text):
                word_index.setdefault(word, []).append([book_id, chapter, num])
        total_chapters += 1

    prefix_index = build_prefix_index(word_index)
    return {
        "version": INDEX_VERSION,
        "stats": {
            "totalVerses": total_verses,
            "totalChapters": total_chapters,
            "uniqueWords": len(word_index),
            "prefixCount": len(prefix_index),
        },
        "wordIndex": word_index,
        "verseCache": verse_cache,
        "prefixIndex": prefix_index,
    }


def load_chapters(bible_dir: Path):
    current_book = None
    for book_id, name, chapter, path in iter_chapter_files(bible_dir, BIBLE_BOOKS):
        if book_id != current_book:
            current_book = book_id
            print(f"\rProcessing {name} ({book_id}/{len(BIBLE_BOOKS)})...", end="", flush=True)
        try:
            verses = parse_verses(read_chapter_xml(path))
        except (OSError, ET.ParseError) as err:
            print(f"\nError processing {path}: {err}")
            continue
        yield book_id, chapter, verses
    print()


def main():
    parser = argparse.ArgumentParser(description="Build the KJV search index JSON.")
    parser.add_argument("--bible-dir", default="public/xmlBible.org-main/KJV", help="KJV chapter XML root")
    parser.add_argument("--output", default="public/search-index.json", help="Output JSON path")
    args = parser.parse_args()

    output_path = Path(args.output)
    print("Building search index...")
    start = time.time()

    index = build_search_index(load_chapters(Path(args.bible_dir)))

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(index, ensure_ascii=False, separators=(",", ":")), encoding="utf-8")

    stats = index["stats"]
    print("Search index built successfully!")
    print(f"- Total verses: {stats['totalVerses']}")
    print(f"- Total chapters: {stats['totalChapters']}")
    print(f"- Unique words: {stats['uniqueWords']}")
    print(f"- Prefix entries: {stats['prefixCount']}")
    print(f"- Output file: {output_path}")
    print(f"- File size: {output_path.stat().st_size / 1024:.2f} KB")
    print(f"- Build time: {time.time() - start:.2f}s")


if __name__ == "__main__":
    main()
