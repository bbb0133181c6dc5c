#!/usr/bin/env python3
import argparse
import json
from pathlib import Path


def load_json(path: Path):
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


def summarize_crossrefs(data):
    entry_count = 0
    ref_count = 0
    range_count = 0
    books = set()

    for key, entries in data.items():
        books.add(key.split(":", 1)[0])
        entry_count += len(entries)
        for entry in entries:
            refs = entry.get("refs", [])
            ref_count += len(refs)
            range_count += sum(1 for ref in refs if "verseEnd" in ref)

    return {
        "verses": len(data),
        "books": len(books),
        "entries": entry_count,
        "references": ref_count,
        "ranges": range_count,
    }


def summarize_stepbible(data):
    # Several keys share one entry; count distinct entries by eStrong.
    distinct = {entry.get("eStrong") for entry in data.values() if isinstance(entry, dict)}
    with_meaning = {
        entry.get("eStrong") for entry in data.values() if isinstance(entry, dict) and entry.get("meaning")
    }
    return {
        "keys": len(data),
        "distinct entries": len(distinct),
        "entries with meaning": len(with_meaning),
    }


def summarize_ahlb(data):
    with_definition = 0
    word_types = {}
    for entry in data.values():
        if entry.get("definition"):
            with_definition += 1
        word_type = entry.get("wordType") or "(none)"
        word_types[word_type] = word_types.get(word_type, 0) + 1

    return {
        "entries": len(data),
        "entries with definition": with_definition,
        "word types": ", ".join(f"{k}={v}" for k, v in sorted(word_types.items())),
    }


def print_summary(title: str, summary: dict):
    print(title)
    for label, value in summary.items():
        print(f"- {label}: {value}")


def main():
    parser = argparse.ArgumentParser(description="Summarize generated cross-reference and lexicon JSON files.")
    parser.add_argument("--crossrefs", default="public/crossref-index.json", help="Cross-reference index JSON")
    parser.add_argument("--lexicon-dir", default="public/lexicon", help="Directory with lexicon JSON files")
    args = parser.parse_args()

    lexicon_dir = Path(args.lexicon_dir)
    targets = [
        ("Cross-reference Summary", Path(args.crossrefs), summarize_crossrefs),
        ("STEPBible Hebrew Summary", lexicon_dir / "stepbible-hebrew.json", summarize_stepbible),
        ("STEPBible Greek Summary", lexicon_dir / "stepbible-greek.json", summarize_stepbible),
        ("AHLB Summary", lexicon_dir / "ahlb-hebrew.json", summarize_ahlb),
    ]

    for title, path, summarize in targets:
        if path.exists():
            print_summary(title, summarize(load_json(path)))
            print()
        else:
            print(f"Skipping {title.rsplit(' ', 1)[0]} (missing): {path}")


if __name__ == "__main__":
    main()
