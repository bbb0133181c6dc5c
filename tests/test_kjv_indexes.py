#!/usr/bin/env python3
import codecs
import sys
import tempfile
import unittest
from pathlib import Path
from unittest import mock

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "scripts"))
import build_search_index  # noqa: E402
import build_strongs_index  # noqa: E402
import kjv_xml  # noqa: E402

GENESIS_1 = """<?xml version="1.0" encoding="UTF-8"?>
<chapter num="1">
  <verse num="1">In the beginning God created the heaven and the earth.</verse>
  <verse num="2">And the earth was without form, and void; &amp; darkness.</verse>
</chapter>
"""

GENESIS_1_STRONGS = """<?xml version="1.0" encoding="UTF-8"?>
<chapter num="1">
  <verse num="1"><phrase strongs="7225">In the beginning</phrase> <phrase strongs="430">God</phrase> <phrase strongs="430">God</phrase> <phrase>and</phrase></verse>
  <verse num="2">No tagged words here.</verse>
</chapter>
"""

JOHN_1_STRONGS = """<chapter num="1">
  <verse num="1"><phrase strongs="746">In the beginning</phrase> <phrase strongs="2258">was</phrase></verse>
</chapter>
"""


class KjvXmlTests(unittest.TestCase):
    def test_parse_verses_flattens_text_and_decodes_entities(self):
        verses = kjv_xml.parse_verses(GENESIS_1)
        self.assertEqual(verses[0], (1, "In the beginning God created the heaven and the earth."))
        self.assertEqual(verses[1][1], "And the earth was without form, and void; & darkness.")

    def test_parse_strongs_phrases_keeps_tagged_verses_only(self):
        phrases = kjv_xml.parse_strongs_phrases(GENESIS_1_STRONGS)
        self.assertEqual(phrases, [(1, ["In the beginning", "God", "God"], ["7225", "430"])])

    def test_read_chapter_xml_handles_bom_and_utf16(self):
        with tempfile.TemporaryDirectory() as td:
            utf8 = Path(td) / "a.xml"
            utf8.write_bytes(b"\xef\xbb\xbf" + GENESIS_1.encode("utf-8"))
            self.assertTrue(kjv_xml.read_chapter_xml(utf8).startswith("<?xml"))

            utf16 = Path(td) / "b.xml"
            utf16.write_bytes(GENESIS_1.replace("UTF-8", "UTF-16").encode("utf-16-le"))
            text = kjv_xml.read_chapter_xml(utf16)
            self.assertEqual(len(kjv_xml.parse_verses(text)), 2)

            utf16_be = Path(td) / "c.xml"
            utf16_be.write_bytes(codecs.BOM_UTF16_BE + GENESIS_1.replace("UTF-8", "UTF-16").encode("utf-16-be"))
            text = kjv_xml.read_chapter_xml(utf16_be)
            self.assertTrue(text.startswith("<?xml"))
            self.assertEqual(len(kjv_xml.parse_verses(text)), 2)

    def test_iter_chapter_files_reports_missing(self):
        with tempfile.TemporaryDirectory() as td:
            root = Path(td)
            folder = root / kjv_xml.book_folder(1, "Genesis")
            folder.mkdir()
            (folder / kjv_xml.chapter_file_name(1)).write_text(GENESIS_1, encoding="utf-8")
            books = [(1, "Genesis", 2), (2, "Exodus", 1)]
            with mock.patch("builtins.print") as printed:
                found = list(kjv_xml.iter_chapter_files(root, books))
            self.assertEqual([(b, c) for b, _, c, _ in found], [(1, 1)])
            messages = " ".join(str(call.args[0]) for call in printed.call_args_list)
            self.assertIn("chapter-002.xml", messages)
            self.assertIn("02-Exodus", messages)


class SearchIndexTests(unittest.TestCase):
    def build(self):
        return build_search_index.build_search_index([(1, 1, kjv_xml.parse_verses(GENESIS_1))])

    def test_word_index_and_verse_cache(self):
        index = self.build()
        self.assertEqual(index["wordIndex"]["earth"], [[1, 1, 1], [1, 1, 2]])
        self.assertEqual(index["wordIndex"]["the"][:3], [[1, 1, 1], [1, 1, 1], [1, 1, 1]])
        self.assertNotIn("earth.", index["wordIndex"])
        self.assertTrue(index["verseCache"]["1:1:2"].startswith("And the earth"))

    def test_prefix_index(self):
        index = self.build()
        self.assertEqual(index["prefixIndex"]["beg"], ["beginning"])
        self.assertIn("god", index["prefixIndex"]["go"])
        self.assertEqual(index["prefixIndex"]["in"], ["in"])
        self.assertNotIn("i", index["prefixIndex"])

    def test_stats(self):
        stats = self.build()["stats"]
        self.assertEqual(stats["totalVerses"], 2)
        self.assertEqual(stats["totalChapters"], 1)
        self.assertEqual(stats["uniqueWords"], len(self.build()["wordIndex"]))

    def test_tokenize_keeps_ascii_word_characters_only(self):
        self.assertEqual(
            build_search_index.tokenize("Naïve, Lord's\u00a0day_1!"),
            ["nave", "lords", "day_1"],
        )

    def test_build_prefix_index_caps_length(self):
        self.assertEqual(
            build_search_index.build_prefix_index(["abcdef", "ab"]),
            {"ab": ["abcdef", "ab"], "abc": ["abcdef"], "abcd": ["abcdef"]},
        )


class StrongsIndexTests(unittest.TestCase):
    def build(self):
        return build_strongs_index.build_strongs_index(
            [
                (1, 1, kjv_xml.parse_strongs_phrases(GENESIS_1_STRONGS)),
                (43, 1, kjv_xml.parse_strongs_phrases(JOHN_1_STRONGS)),
            ]
        )

    def test_testament_prefixes_and_unique_locations(self):
        index = self.build()
        self.assertEqual(index["strongsIndex"]["H430"], [[1, 1, 1]])
        self.assertEqual(index["strongsIndex"]["G746"], [[43, 1, 1]])
        self.assertEqual(index["verseTexts"]["1:1:1"], "In the beginning God God")

    def test_stats(self):
        stats = self.build()["stats"]
        self.assertEqual(
            stats,
            {
                "totalVerses": 2,
                "totalStrongsEntries": 4,
                "uniqueStrongsIds": 4,
                "hebrewIds": 2,
                "greekIds": 2,
            },
        )

    def test_main_output_is_identical_on_rerun(self):
        with tempfile.TemporaryDirectory() as td:
            root = Path(td) / "KJVs"
            folder = root / kjv_xml.book_folder(1, "Genesis")
            folder.mkdir(parents=True)
            (folder / kjv_xml.chapter_file_name(1)).write_text(GENESIS_1_STRONGS, encoding="utf-8")
            (folder / kjv_xml.chapter_file_name(2)).write_text("<chapter><verse", encoding="utf-8")
            output = Path(td) / "strongs-index.json"
            argv = ["build_strongs_index.py", "--bible-dir", str(root), "--output", str(output)]

            with mock.patch.object(sys, "argv", argv), mock.patch("builtins.print"):
                build_strongs_index.main()
            first = output.read_bytes()
            with mock.patch.object(sys, "argv", argv), mock.patch("builtins.print"):
                build_strongs_index.main()
            self.assertEqual(first, output.read_bytes())
            self.assertIn(b'"H7225":[[1,1,1]]', first)


if __name__ == "__main__":
    unittest.main()
