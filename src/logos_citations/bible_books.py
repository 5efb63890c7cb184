"""Book-name and translation tables for the ref.ly verse link scheme.

Keys are lowercase with whitespace removed ("1 John" -> "1john"); values are
the book codes ref.ly expects.
"""
from __future__ import annotations

from typing import Dict, Tuple

_BOOK_ALIASES: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("Ge", ("genesis", "gen", "ge", "gn")),
    ("Ex", ("exodus", "exod", "exo", "ex")),
    ("Le", ("leviticus", "lev", "le", "lv")),
    ("Nu", ("numbers", "num", "nu", "nm")),
    ("Dt", ("deuteronomy", "deut", "dt")),
    ("Jos", ("joshua", "josh", "jos")),
    ("Jdg", ("judges", "judg", "jdg", "jg")),
    ("Ru", ("ruth", "rut", "ru")),
    ("1Sa", ("1samuel", "1sam", "1sa", "1sm")),
    ("2Sa", ("2samuel", "2sam", "2sa", "2sm")),
    ("1Ki", ("1kings", "1kgs", "1ki", "1kg")),
    ("2Ki", ("2kings", "2kgs", "2ki", "2kg")),
    ("1Ch", ("1chronicles", "1chron", "1chr", "1ch")),
    ("2Ch", ("2chronicles", "2chron", "2chr", "2ch")),
    ("Ezr", ("ezra", "ezr")),
    ("Ne", ("nehemiah", "neh", "ne")),
    ("Es", ("esther", "esth", "est", "es")),
    ("Job", ("job", "jb")),
    ("Ps", ("psalms", "psalm", "pss", "psa", "ps")),
    ("Pr", ("proverbs", "prov", "prv", "pro", "pr")),
    ("Ec", ("ecclesiastes", "eccles", "eccl", "ecc", "ec", "qoheleth")),
    ("So", ("songofsongs", "songofsolomon", "song", "canticles", "sos")),
    ("Is", ("isaiah", "isa", "is")),
    ("Je", ("jeremiah", "jer", "je")),
    ("La", ("lamentations", "lam", "la")),
    ("Eze", ("ezekiel", "ezek", "eze", "ezk")),
    ("Da", ("daniel", "dan", "da", "dn")),
    ("Ho", ("hosea", "hos", "ho")),
    ("Joe", ("joel", "joe", "jl")),
    ("Am", ("amos", "am")),
    ("Ob", ("obadiah", "obad", "ob")),
    ("Jon", ("jonah", "jon")),
    ("Mic", ("micah", "mic", "mi")),
    ("Na", ("nahum", "nah", "na")),
    ("Hab", ("habakkuk", "hab")),
    ("Zep", ("zephaniah", "zeph", "zep")),
    ("Hag", ("haggai", "hag")),
    ("Zec", ("zechariah", "zech", "zec")),
    ("Mal", ("malachi", "mal")),
    ("Mt", ("matthew", "matt", "mat", "mt")),
    ("Mk", ("mark", "mrk", "mk", "mr")),
    ("Lk", ("luke", "luk", "lk", "lu")),
    ("Jn", ("john", "joh", "jhn", "jn")),
    ("Ac", ("acts", "act", "ac")),
    ("Ro", ("romans", "rom", "ro", "rm")),
    ("1Co", ("1corinthians", "1cor", "1co")),
    ("2Co", ("2corinthians", "2cor", "2co")),
    ("Ga", ("galatians", "gal", "ga")),
    ("Eph", ("ephesians", "eph")),
    ("Php", ("philippians", "phil", "php", "pp")),
    ("Col", ("colossians", "col")),
    ("1Th", ("1thessalonians", "1thess", "1th")),
    ("2Th", ("2thessalonians", "2thess", "2th")),
    ("1Ti", ("1timothy", "1tim", "1ti")),
    ("2Ti", ("2timothy", "2tim", "2ti")),
    ("Tt", ("titus", "tit", "ti")),
    ("Phm", ("philemon", "philem", "phlm", "phm")),
    ("Heb", ("hebrews", "heb")),
    ("Jas", ("james", "jas", "jm")),
    ("1Pe", ("1peter", "1pet", "1pe", "1pt")),
    ("2Pe", ("2peter", "2pet", "2pe", "2pt")),
    ("1Jn", ("1john", "1jn", "1jo", "1jhn")),
    ("2Jn", ("2john", "2jn", "2jo", "2jhn")),
    ("3Jn", ("3john", "3jn", "3jo", "3jhn")),
    ("Jud", ("jude", "jud", "jd")),
    ("Re", ("revelation", "rev", "re", "rv", "apocalypse")),
)

BIBLE_BOOKS: Dict[str, str] = {
    alias: code for code, aliases in _BOOK_ALIASES for alias in aliases
}

# Translation abbreviations users type -> Logos resource codes.
VERSION_MAPPING: Dict[str, str] = {
    "esv": "esv",
    "nasb": "nasb95",
    "nasb95": "nasb95",
    "niv": "niv2011",
    "niv2011": "niv2011",
    "lsb": "lgcystndrdbblsb",
}
