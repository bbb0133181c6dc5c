#!/usr/bin/env python3
"""
Convert the AHLB (Ancient Hebrew Lexicon of the Bible) page CSV to JSON keyed by Strong's number.

The CSV has ``PageNumber`` and ``Text`` columns, where ``Text`` is a quoted,
multi-line OCR block. Entries are recovered from the flattened text: every
``Strong's Hebrew #: h.NNNN`` marker closes the entry written before it.
"""

import argparse
import csv
import io
import json
import re
from pathlib import Path

AHLB_SOURCE = "AHLB (Ancient Hebrew Lexicon of the Bible)"
# OCR pages can run past the csv module default of 128 KiB per field.
CSV_FIELD_LIMIT = 2**31 - 1

STRONGS_MARKER_RE = re.compile(r"Strong's Hebrew #:\s*(h\.\d+(?:,?\s*h\.\d+)*)")
STRONGS_NUMBER_RE = re.compile(r"h\.(\d+)")

# Each label runs until its boundary; the last match in a span wins.
TRANSLATION_RE = re.compile(r"Translation:\s*([A-Z.\s\-()]+?)(?:\s+Definition:|\Z)")
# A span ends where its Strong's marker begins, so the span end also closes a label.
DEFINITION_RE = re.compile(
    r"Definition:\s*(.+?)(?=\s+(?:Relationship to Root:|KJV Translations:|Strong's)|\s*\Z)",
    re.S,
)
RELATIONSHIP_RE = re.compile(
    r"Relationship to Root:\s*(.+?)(?=\s+(?:KJV Translations:|Strong's)|\s*\Z)",
    re.S,
)
KJV_LABEL = "KJV Translations:"
TRANSLITERATION_RE = re.compile(r"/\s*([a-z\-.]+)\)")
WORD_TYPE_RE = re.compile(r"\(\s*(masc\.|fem\.|common)")


def flatten_csv_text(content: str) -> str:
    """Join the Text column of every data row into one string."""
    csv.field_size_limit(CSV_FIELD_LIMIT)
    parts = []
    for i, row in enumerate(csv.reader(io.StringIO(content))):
        if len(row) < 2:
            continue
        if i == 0 and row[0].strip().lower() == "pagenumber":
            continue
        parts.append(row[1] + " ")
    return "".join(parts)


def find_strongs_markers(text: str):
    """Return ``(start, end, numbers)`` for each Strong's marker, in document order."""
    markers = []
    for m in STRONGS_MARKER_RE.finditer(text):
        numbers = STRONGS_NUMBER_RE.findall(m.group(1))
        markers.append((m.start(), m.end(), numbers))
    return markers


def _last_group(pattern, span: str) -> str:
    last = None
    for last in pattern.finditer(span):
        pass
    return last.group(1).strip() if last else ""


def extract_translation(span: str) -> str:
    """Upper-case gloss after ``Translation:``, ending at ``Definition:`` or the span end."""
    return _last_group(TRANSLATION_RE, span)


def extract_definition(span: str) -> str:
    """Text after ``Definition:``, ending at the next Relationship/KJV/Strong's label."""
    return _last_group(DEFINITION_RE, span)


def extract_relationship(span: str) -> str:
    """Text after ``Relationship to Root:``, ending at the KJV or Strong's label."""
    return _last_group(RELATIONSHIP_RE, span)


def extract_kjv_translations(span: str) -> str:
    """Everything after the last ``KJV Translations:`` label."""
    pos = span.rfind(KJV_LABEL)
    if pos < 0:
        return ""
    return span[pos + len(KJV_LABEL):].strip()


def extract_transliteration(span: str) -> str:
    """Transliteration written as ``/ word-form)``."""
    return _last_group(TRANSLITERATION_RE, span)


def extract_word_type(span: str) -> str:
    """``masc.``, ``fem.`` or ``common`` from an opening parenthesis."""
    return _last_group(WORD_TYPE_RE, span)


def format_strongs_id(number: str) -> str:
    digits = number[2:] if number.lower().startswith("h.") else number
    return f"H{digits.zfill(4)}"


def parse_ahlb_text(text: str):
    entries = {}
    previous_end = 0
    for start, end, numbers in find_strongs_markers(text):
        span = text[previous_end:start]
        previous_end = end

        translation = extract_translation(span)
        definition = extract_definition(span)
        if not translation and not definition:
            continue

        fields = {
            "translation": translation,
            "transliteration": extract_transliteration(span),
            "wordType": extract_word_type(span),
            "definition": definition,
            "relationship": extract_relationship(span),
            "kjvTranslations": extract_kjv_translations(span),
            "source": AHLB_SOURCE,
        }
        for number in numbers:
            strongs_id = format_strongs_id(number)
            entries[strongs_id] = {"strongsId": strongs_id, **fields}
    return entries


def parse_ahlb_csv(path: Path):
    print(f"Reading AHLB CSV: {path}")
    text = flatten_csv_text(path.read_text(encoding="utf-8"))
    print(f"Extracted {len(text)} characters of text")
    print(f"Found {len(find_strongs_markers(text))} Strong's references")
    entries = parse_ahlb_text(text)
    print(f"Parsed {len(entries)} AHLB entries")
    return entries


def main():
    parser = argparse.ArgumentParser(description="Convert AHLB page CSV to Strong's-keyed JSON.")
    parser.add_argument("--input", default="../ahlb_pages.csv", help="AHLB CSV export")
    parser.add_argument("--output", default="public/lexicon/ahlb-hebrew.json", help="Output JSON path")
    args = parser.parse_args()

    input_path = Path(args.input)
    output_path = Path(args.output)

    try:
        entries = parse_ahlb_csv(input_path)
    except (OSError, csv.Error) as err:
        print(f"Error: could not read {input_path}: {err}")
        raise SystemExit(1)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(entries, ensure_ascii=False, indent=2), encoding="utf-8")

    size_mb = output_path.stat().st_size / (1024 * 1024)
    print("\nAHLB conversion complete!")
    print(f"- Entries: {len(entries)}")
    print(f"- Output: {output_path}")
    print(f"- Size: {size_mb:.2f} MB")

    print("\nSample entries:")
    for key in list(entries)[:3]:
        entry = entries[key]
        print(f"- {key}: {entry['translation']} - {entry['definition'][:60]}...")


if __name__ == "__main__":
    main()
