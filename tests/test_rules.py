# tests/test_rules.py
import pytest

from stylepack.config import CSS_RULES
from stylepack.core.rules import RuleEngine, compile_rules, profile_for_extension

@pytest.fixture
def rules():
    return compile_rules(CSS_RULES)

@pytest.fixture
def engine():
    return RuleEngine.for_extension("css")

SAMPLE = """/* Layout */
body {
    margin: 0 0 0 0;
    color: #333;
}

/* Links */
a > span,
a:hover {
    color: red;
}
"""

# --- Single rules ---

def test_whitespace_collapse(rules):
    assert rules[0].apply("a\n\n  b") == "a b"

def test_punctuation_trimming(rules):
    text = "a ,  b"
    for i in (0, 2, 3):
        text = rules[i].apply(text)
    assert text == "a,b"

def test_trailing_semicolon_removed(rules):
    assert rules[1].apply("a { b: c; }") == "a { b: c}"

def test_comment_removal_is_non_greedy(rules):
    assert rules[5].apply("/* a */ text /* b */") == " text "

# --- Full pipeline ---

def test_zero_shorthand(engine):
    assert engine.minify("margin: 0 0 0 0;") == "margin:0;"

def test_comment_removed(engine):
    assert engine.minify("a/* drop me */b") == "ab"

def test_multiline_comment_removed(engine):
    assert engine.minify("a/* multi\nline */b") == "ab"

def test_both_comments_removed_independently(engine):
    assert engine.minify("/* a */ text /* b */") == "text"

def test_comment_between_words_leaves_single_space(engine):
    assert engine.minify("a /* x */ b") == "a b"

def test_leading_comment_before_selector(engine):
    assert engine.minify("/* header */ .h1 { margin: 0 0 0 0; }") == ".h1{margin:0}"

def test_realistic_stylesheet(engine):
    expected = "body{margin:0;color:#333}a>span,a:hover{color:red}"
    assert engine.minify(SAMPLE) == expected

def test_deterministic(engine):
    assert engine.minify(SAMPLE) == engine.minify(SAMPLE)

def test_second_pass_is_noop(engine):
    once = engine.minify(SAMPLE)
    assert engine.minify(once) == once

def test_empty_text(engine):
    assert engine.minify("") == ""

# --- Profiles ---

def test_profile_lookup_accepts_dot_and_case():
    assert len(profile_for_extension(".CSS")) == len(CSS_RULES)

def test_unknown_extension_falls_back_to_css():
    engine = RuleEngine.for_extension("scss")
    assert len(engine) == len(CSS_RULES)
    assert engine.minify("a { b: c; }") == "a{b:c}"

# --- Rule order ---

def test_comment_next_to_punctuation(engine):
    assert engine.minify("a { /* c */ color: red; }") == "a{color:red}"

def test_punctuation_trimmed_before_comment_removed(rules):
    # Rules 1-5 touch the whitespace around the comment; rule 6 has not run yet
    text = "a { /* c */ color: red; }"
    for rule in rules[:5]:
        text = rule.apply(text)
    assert text == "a{/* c */ color:red}"
    assert rules[5].apply(text) == "a{ color:red}"
