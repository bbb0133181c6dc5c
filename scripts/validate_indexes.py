#!/usr/bin/env python3
"""Check generated JSON artifacts against the key scheme the application loads them by."""

import argparse
import json
import re
from pathlib import Path

VERSE_KEY_RE = re.compile(r"^(\d+):(\d+):(\d+)$")
AHLB_ID_RE = re.compile(r"^H\d{4}$")
LEXICON_FIELDS = ("eStrong", "dStrong", "uStrong", "word", "transliteration", "morph", "gloss", "meaning")
AHLB_FIELDS = (
    "strongsId",
    "translation",
    "transliteration",
    "wordType",
    "definition",
    "relationship",
    "kjvTranslations",
    "source",
)


def load_json(path: Path):
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


def check(condition, errors, message):
    if not condition:
        errors.append(message)


def validate_crossrefs(index):
    errors = []
    check(isinstance(index, dict), errors, "Crossrefs: top level must be an object")
    if not isinstance(index, dict):
        return errors

    for key, entries in index.items():
        m = VERSE_KEY_RE.match(key)
        check(bool(m), errors, f"Crossrefs: key {key!r} is not book:chapter:verse")
        if m:
            check(1 <= int(m.group(1)) <= 66, errors, f"Crossrefs: {key} book id out of range")
        check(isinstance(entries, list), errors, f"Crossrefs: {key} must be an array")
        if not isinstance(entries, list):
            continue

        orders = [entry.get("order") for entry in entries if isinstance(entry, dict)]
        if all(isinstance(order, int) for order in orders):
            check(orders == sorted(orders), errors, f"Crossrefs: {key} entries are not sorted by order")
        else:
            errors.append(f"Crossrefs: {key} has a non-integer order")

        for i, entry in enumerate(entries):
            check(isinstance(entry, dict), errors, f"Crossrefs: {key}[{i}] must be an object")
            if not isinstance(entry, dict):
                continue
            check(isinstance(entry.get("word"), str), errors, f"Crossrefs: {key}[{i}].word must be a string")
            refs = entry.get("refs")
            check(isinstance(refs, list), errors, f"Crossrefs: {key}[{i}].refs must be an array")
            if not isinstance(refs, list):
                continue
            for j, ref in enumerate(refs):
                for field in ("bookId", "chapter", "verse"):
                    check(
                        isinstance(ref, dict) and isinstance(ref.get(field), int),
                        errors,
                        f"Crossrefs: {key}[{i}].refs[{j}].{field} must be an integer",
                    )
                if isinstance(ref, dict) and "verseEnd" in ref:
                    check(
                        isinstance(ref["verseEnd"], int)
                        and (not isinstance(ref.get("verse"), int) or ref["verseEnd"] >= ref["verse"]),
                        errors,
                        f"Crossrefs: {key}[{i}].refs[{j}].verseEnd must not precede verse",
                    )

    return errors


def validate_stepbible(lexicon, label):
    errors = []
    check(isinstance(lexicon, dict), errors, f"{label}: top level must be an object")
    if not isinstance(lexicon, dict):
        return errors

    for key, entry in lexicon.items():
        check(isinstance(entry, dict), errors, f"{label}: {key} must be an object")
        if not isinstance(entry, dict):
            continue
        for field in LEXICON_FIELDS:
            check(isinstance(entry.get(field), str), errors, f"{label}: {key}.{field} must be a string")

    return errors


def validate_ahlb(lexicon):
    errors = []
    check(isinstance(lexicon, dict), errors, "AHLB: top level must be an object")
    if not isinstance(lexicon, dict):
        return errors

    for key, entry in lexicon.items():
        check(bool(AHLB_ID_RE.match(key)), errors, f"AHLB: key {key!r} is not H####")
        check(isinstance(entry, dict), errors, f"AHLB: {key} must be an object")
        if not isinstance(entry, dict):
            continue
        for field in AHLB_FIELDS:
            check(isinstance(entry.get(field), str), errors, f"AHLB: {key}.{field} must be a string")
        check(entry.get("strongsId") == key, errors, f"AHLB: {key}.strongsId does not match its key")
        check(
            bool(entry.get("translation") or entry.get("definition")),
            errors,
            f"AHLB: {key} has neither translation nor definition",
        )

    return errors


def main():
    parser = argparse.ArgumentParser(description="Validate generated cross-reference and lexicon JSON.")
    parser.add_argument("--crossrefs", default="public/crossref-index.json", help="Cross-reference index JSON")
    parser.add_argument("--lexicon-dir", default="public/lexicon", help="Directory with lexicon JSON files")
    parser.add_argument("--max-errors", type=int, default=50, help="Maximum errors printed")
    args = parser.parse_args()

    lexicon_dir = Path(args.lexicon_dir)
    targets = [
        ("Crossrefs", Path(args.crossrefs), validate_crossrefs),
        ("STEPBible Hebrew", lexicon_dir / "stepbible-hebrew.json",
         lambda data: validate_stepbible(data, "STEPBible Hebrew")),
        ("STEPBible Greek", lexicon_dir / "stepbible-greek.json",
         lambda data: validate_stepbible(data, "STEPBible Greek")),
        ("AHLB", lexicon_dir / "ahlb-hebrew.json", validate_ahlb),
    ]

    all_errors = []
    print("Validation report")
    for label, path, validate in targets:
        if not path.exists():
            print(f"- {label}: skipped (missing {path})")
            continue
        errors = validate(load_json(path))
        print(f"- {label} errors: {len(errors)}")
        all_errors.extend(errors)

    if all_errors:
        print("\nErrors (truncated):")
        for err in all_errors[: args.max_errors]:
            print(f"- {err}")

    raise SystemExit(1 if all_errors else 0)


if __name__ == "__main__":
    main()
