# src/stylepack/config.py
import re

DEFAULT_DESTINATION_NAME = "style.css"
DEFAULT_EXTENSION = "css"
DEFAULT_IGNORE_FILE = ".minifyignore"

# Punctuation that never needs surrounding whitespace
_PUNCT = r"[,:;\{\}>]"

# (pattern, replacement). Order matters.
CSS_RULES = [
    (r"\s+", " "),
    (r"; }", "}"),
    (rf"({_PUNCT})\s", r"\1"),
    (rf"\s({_PUNCT})", r"\1"),
    (r"0 0 0 0", "0"),
    (r"/\*.*?\*/", ""),
    # Whitespace left behind by a removed comment, plus buffer edges
    (rf"^\s+|\s+$|\s+(?=\s|{_PUNCT})|(?<={_PUNCT})\s+", ""),
]

# Extension (no leading dot) -> rule definitions
RULE_PROFILES = {
    "css": CSS_RULES,
}

FALLBACK_PROFILE = "css"

RULE_FLAGS = re.DOTALL
