#!/usr/bin/env python3
"""Canonical 66-book table shared by the index builders."""

BIBLE_BOOKS = [
    (1, "Genesis", 50), (2, "Exodus", 40), (3, "Leviticus", 27), (4, "Numbers", 36),
    (5, "Deuteronomy", 34), (6, "Joshua", 24), (7, "Judges", 21), (8, "Ruth", 4),
    (9, "1 Samuel", 31), (10, "2 Samuel", 24), (11, "1 Kings", 22), (12, "2 Kings", 25),
    (13, "1 Chronicles", 29), (14, "2 Chronicles", 36), (15, "Ezra", 10), (16, "Nehemiah", 13),
    (17, "Esther", 10), (18, "Job", 42), (19, "Psalms", 150), (20, "Proverbs", 31),
    (21, "Ecclesiastes", 12), (22, "Song of Solomon", 8), (23, "Isaiah", 66), (24, "Jeremiah", 52),
    (25, "Lamentations", 5), (26, "Ezekiel", 48), (27, "Daniel", 12), (28, "Hosea", 14),
    (29, "Joel", 3), (30, "Amos", 9), (31, "Obadiah", 1), (32, "Jonah", 4),
    (33, "Micah", 7), (34, "Nahum", 3), (35, "Habakkuk", 3), (36, "Zephaniah", 3),
    (37, "Haggai", 2), (38, "Zechariah", 14), (39, "Malachi", 4),
    (40, "Matthew", 28), (41, "Mark", 16), (42, "Luke", 24), (43, "John", 21),
    (44, "Acts", 28), (45, "Romans", 16), (46, "1 Corinthians", 16), (47, "2 Corinthians", 13),
    (48, "Galatians", 6), (49, "Ephesians", 6), (50, "Philippians", 4), (51, "Colossians", 4),
    (52, "1 Thessalonians", 5), (53, "2 Thessalonians", 3), (54, "1 Timothy", 6), (55, "2 Timothy", 4),
    (56, "Titus", 3), (57, "Philemon", 1), (58, "Hebrews", 13), (59, "James", 5),
    (60, "1 Peter", 5), (61, "2 Peter", 3), (62, "1 John", 5), (63, "2 John", 1),
    (64, "3 John", 1), (65, "Jude", 1), (66, "Revelation", 22),
]

BOOK_ID_TO_NAME = {book_id: name for book_id, name, _ in BIBLE_BOOKS}

BOOK_ID_TO_SHORT_NAME = {
    1: "Gen", 2: "Exo", 3: "Lev", 4: "Num", 5: "Deu", 6: "Jos", 7: "Jdg", 8: "Rut",
    9: "1Sa", 10: "2Sa", 11: "1Ki", 12: "2Ki", 13: "1Ch", 14: "2Ch", 15: "Ezr",
    16: "Neh", 17: "Est", 18: "Job", 19: "Psa", 20: "Pro", 21: "Ecc", 22: "Son",
    23: "Isa", 24: "Jer", 25: "Lam", 26: "Eze", 27: "Dan", 28: "Hos", 29: "Joe",
    30: "Amo", 31: "Oba", 32: "Jon", 33: "Mic", 34: "Nah", 35: "Hab", 36: "Zep",
    37: "Hag", 38: "Zec", 39: "Mal", 40: "Mat", 41: "Mar", 42: "Luk", 43: "Joh",
    44: "Act", 45: "Rom", 46: "1Co", 47: "2Co", 48: "Gal", 49: "Eph", 50: "Php",
    51: "Col", 52: "1Th", 53: "2Th", 54: "1Ti", 55: "2Ti", 56: "Tit", 57: "Phm",
    58: "Heb", 59: "Jas", 60: "1Pe", 61: "2Pe", 62: "1Jo", 63: "2Jo", 64: "3Jo",
    65: "Jud", 66: "Rev",
}

LAST_OLD_TESTAMENT_BOOK_ID = 39


def is_old_testament(book_id: int) -> bool:
    return 1 <= book_id <= LAST_OLD_TESTAMENT_BOOK_ID


def book_name(book_id: int) -> str:
    return BOOK_ID_TO_NAME.get(book_id) or f"Book {book_id}"


def verse_key(book_id: int, chapter: int, verse: int) -> str:
    return f"{book_id}:{chapter}:{verse}"
