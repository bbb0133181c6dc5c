#!/usr/bin/env python3
"""
Convert STEPBible TBESH (Hebrew) and TBESG (Greek) lexicon TSV files to JSON.

Each entry is reachable under its eStrong number, its dStrong and uStrong
variants, and a short form without leading zeros (H0001 -> H1).
"""

import argparse
import json
import re
from pathlib import Path

DEFAULT_DATA_DIR = "../STEPBible-Data-master"
DEFAULT_OUT_DIR = "public/lexicon"

LANGUAGES = {
    "hebrew": {"label": "Hebrew Lexicon (TBESH)", "prefix": "TBESH", "output": "stepbible-hebrew.json"},
    "greek": {"label": "Greek Lexicon (TBESG)", "prefix": "TBESG", "output": "stepbible-greek.json"},
}

ESTRONG_COLUMNS = ("eStrong#", "eStrong")
WORD_COLUMNS = ("Hebrew", "Greek")
MEANING_COLUMN_MARKERS = ("Meaning", "Abbott-Smith", "lexicon")
MEANING_FALLBACK_COLUMN = "Meaning"
DSTRONG_PLACEHOLDER = "="

VALID_STRONG_RE = re.compile(r"^[HGA]\d+")
SHORT_FORM_RE = re.compile(r"^([HG])(\d+)")


def strip_bom(text: str) -> str:
    return text[1:] if text.startswith("\ufeff") else text


def is_header_line(line: str) -> bool:
    starts_with_estrong = any(line.startswith(f"{name}\t") for name in ESTRONG_COLUMNS)
    return starts_with_estrong and "Transliteration" in line and "Gloss" in line


def find_header_index(lines) -> int:
    for i, line in enumerate(lines):
        if is_header_line(line):
            return i
    raise RuntimeError("Could not find data header line in file")


def resolve_columns(headers):
    meaning = next(
        (h for h in headers if any(marker in h for marker in MEANING_COLUMN_MARKERS)),
        MEANING_FALLBACK_COLUMN,
    )
    return {"word": WORD_COLUMNS, "meaning": meaning}


def row_estrong(row: dict) -> str:
    for name in ESTRONG_COLUMNS:
        value = row.get(name)
        if value:
            return value
    return ""


def parse_lexicon_tsv(text: str):
    """Return ``(headers, rows, skipped)`` for the data section of a STEPBible lexicon."""
    lines = strip_bom(text).split("\n")
    header_index = find_header_index(lines)
    headers = [h.strip() for h in lines[header_index].split("\t")]

    rows = []
    skipped = 0
    for raw_line in lines[header_index + 1:]:
        line = raw_line.strip()
        if not line:
            continue
        values = line.split("\t")
        row = {header: (values[i] if i < len(values) else "") for i, header in enumerate(headers)}
        if VALID_STRONG_RE.match(row_estrong(row)):
            rows.append(row)
        else:
            skipped += 1

    return headers, rows, skipped


def normalize_entry(row: dict, columns: dict) -> dict:
    word = ""
    for name in columns["word"]:
        word = row.get(name) or ""
        if word:
            break

    return {
        "eStrong": row_estrong(row),
        "dStrong": row.get("dStrong", ""),
        "uStrong": row.get("uStrong", ""),
        "word": word,
        "transliteration": row.get("Transliteration", ""),
        "morph": row.get("Morph", ""),
        "gloss": row.get("Gloss", ""),
        "meaning": row.get(columns["meaning"]) or row.get(MEANING_FALLBACK_COLUMN, ""),
    }


def short_form(e_strong: str):
    m = SHORT_FORM_RE.match(e_strong or "")
    if not m:
        return None
    return f"{m.group(1)}{int(m.group(2))}"


def lexicon_keys(entry: dict):
    """Lookup keys for one entry, in the order they are written to the index."""
    e_strong = entry["eStrong"]
    d_strong = entry["dStrong"]
    u_strong = entry["uStrong"]

    keys = []
    if e_strong:
        keys.append(e_strong)
    if d_strong and d_strong != DSTRONG_PLACEHOLDER:
        keys.append(d_strong)
    if u_strong and u_strong != e_strong:
        keys.append(u_strong)
    short = short_form(e_strong)
    if short and short != e_strong:
        keys.append(short)
    return keys


def build_lexicon_index(entries):
    """
    Store each entry once and map every lookup key to its position.

    Later rows overwrite earlier ones when they share a key.
    """
    index = {"entries": [], "keys": {}}
    for entry in entries:
        entry_id = len(index["entries"])
        index["entries"].append(entry)
        for key in lexicon_keys(entry):
            index["keys"][key] = entry_id
    return index


def expand_lexicon_index(index: dict) -> dict:
    entries = index["entries"]
    return {key: entries[entry_id] for key, entry_id in index["keys"].items()}


def convert_lexicon_text(text: str):
    headers, rows, skipped = parse_lexicon_tsv(text)
    columns = resolve_columns(headers)
    index = build_lexicon_index(normalize_entry(row, columns) for row in rows)
    stats = {
        "columns": len(headers),
        "entries": len(rows),
        "skipped": skipped,
        "keys": len(index["keys"]),
    }
    return expand_lexicon_index(index), headers, stats


def find_lexicon_file(lexicon_dir: Path, prefix: str) -> Path:
    if not lexicon_dir.is_dir():
        raise RuntimeError(f"Lexicons directory not found: {lexicon_dir}")
    for path in sorted(lexicon_dir.iterdir()):
        if path.is_file() and path.name.startswith(prefix):
            return path
    raise RuntimeError(f"{prefix} file not found in {lexicon_dir}")


def save_json(path: Path, payload: dict):
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        json.dump(payload, f, ensure_ascii=False, indent=2)


def convert_language(language: str, data_dir: Path, out_dir: Path):
    config = LANGUAGES[language]
    print(f"\n=== Converting {config['label']} ===")
    source = find_lexicon_file(data_dir / "Lexicons", config["prefix"])
    print(f"Reading file: {source}")

    lexicon, headers, stats = convert_lexicon_text(source.read_text(encoding="utf-8"))
    print(f"Found {stats['columns']} columns: {', '.join(headers[:8])}")
    print(f"Parsed {stats['entries']} entries (skipped {stats['skipped']} rows)")

    output = out_dir / config["output"]
    save_json(output, lexicon)
    size_mb = output.stat().st_size / (1024 * 1024)
    print(f"- Written to: {output}")
    print(f"- File size: {size_mb:.2f} MB")
    print(f"- Total keys indexed: {stats['keys']}")
    return stats


def main():
    parser = argparse.ArgumentParser(description="Convert STEPBible TBESH/TBESG lexicons to JSON.")
    parser.add_argument(
        "command",
        nargs="?",
        default="all",
        choices=["hebrew", "greek", "all"],
        help="Which lexicon to convert (default: all)",
    )
    parser.add_argument("--data-dir", default=DEFAULT_DATA_DIR, help="STEPBible-Data checkout")
    parser.add_argument("--out-dir", default=DEFAULT_OUT_DIR, help="Output directory")
    args = parser.parse_args()

    data_dir = Path(args.data_dir)
    out_dir = Path(args.out_dir)
    languages = list(LANGUAGES) if args.command == "all" else [args.command]

    print("STEPBible Lexicon Converter")
    print(f"Data source: {data_dir}")
    print(f"Output path: {out_dir}")

    try:
        for language in languages:
            convert_language(language, data_dir, out_dir)
    except (RuntimeError, OSError) as err:
        print(f"\nError: {err}")
        raise SystemExit(1)

    print("\nConversion complete!")


if __name__ == "__main__":
    main()
