#!/usr/bin/env python3
"""Build the cross-reference index JSON from the TSK tab-separated data file."""

import argparse
import json
import time
from pathlib import Path

from bible_books import verse_key
from tsk_references import parse_leading_int, parse_reference_list

TSK_COLUMNS = 6


def build_crossref_index(lines):
    """
    Group TSK lines into ``{"book:chapter:verse": [{order, word, refs}, ...]}``.

    Lines are ``bookId, chapter, verse, sortOrder, word, refList`` separated by
    tabs. Short lines and lines with a non-numeric location are skipped.
    """
    index = {}
    total_entries = 0
    total_refs = 0
    skipped = 0

    for line in lines:
        if not line.strip():
            continue
        parts = line.split("\t")
        if len(parts) < TSK_COLUMNS:
            skipped += 1
            continue

        book_text, chapter_text, verse_text, order_text, word, ref_list = parts[:TSK_COLUMNS]
        book_id = parse_leading_int(book_text)
        chapter = parse_leading_int(chapter_text)
        verse = parse_leading_int(verse_text)
        if book_id is None or chapter is None or verse is None:
            skipped += 1
            continue

        order = parse_leading_int(order_text)
        refs = parse_reference_list(ref_list)

        index.setdefault(verse_key(book_id, chapter, verse), []).append({
            "order": order if order is not None else 0,
            "word": word or "",
            "refs": refs,
        })
        total_entries += 1
        total_refs += len(refs)

    # list.sort is stable, so equal orders keep file order.
    for entries in index.values():
        entries.sort(key=lambda entry: entry["order"])

    stats = {
        "entries": total_entries,
        "references": total_refs,
        "verses": len(index),
        "skipped_lines": skipped,
    }
    return index, stats


def write_compact_json(path: Path, payload):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, ensure_ascii=False, separators=(",", ":")), encoding="utf-8")


def main():
    parser = argparse.ArgumentParser(description="Build cross-reference index JSON from TSK data.")
    parser.add_argument("--input", default="data/tskxref.txt", help="TSK tab-separated source file")
    parser.add_argument("--output", default="public/crossref-index.json", help="Output JSON path")
    args = parser.parse_args()

    input_path = Path(args.input)
    output_path = Path(args.output)

    print("Building cross-reference index from TSK data...")
    start = time.time()

    try:
        content = input_path.read_text(encoding="utf-8")
    except OSError as err:
        print(f"Error: could not read {input_path}: {err}")
        raise SystemExit(1)

    index, stats = build_crossref_index(content.split("\n"))
    write_compact_json(output_path, index)

    size_kb = output_path.stat().st_size / 1024
    print("\nCross-reference index built successfully!")
    print(f"- Total TSK entries: {stats['entries']}")
    print(f"- Total references: {stats['references']}")
    print(f"- Verses with cross-refs: {stats['verses']}")
    print(f"- Skipped lines: {stats['skipped_lines']}")
    print(f"- Output file: {output_path}")
    print(f"- File size: {size_kb:.2f} KB")
    print(f"- Build time: {time.time() - start:.2f}s")


if __name__ == "__main__":
    main()
