# src/stylepack/core/rules.py
from typing import Iterable, List, Sequence, Tuple

from stylepack.config import FALLBACK_PROFILE, RULE_FLAGS, RULE_PROFILES
from stylepack.models import RewriteRule

def compile_rules(definitions: Iterable[Tuple[str, str]]) -> List[RewriteRule]:
    """Turns (pattern, replacement) tuples into RewriteRule objects."""
    return [RewriteRule.compile(p, r, RULE_FLAGS) for p, r in definitions]

def profile_for_extension(extension: str) -> List[RewriteRule]:
    """Rules registered for an extension ('css' or '.css'); unknown extensions get the CSS rules."""
    key = extension.lstrip(".").lower()
    definitions = RULE_PROFILES.get(key, RULE_PROFILES[FALLBACK_PROFILE])
    return compile_rules(definitions)

class RuleEngine:
    """Applies an ordered list of rewrite rules, each exactly once."""

    def __init__(self, rules: Sequence[RewriteRule]):
        self.rules = list(rules)

    @classmethod
    def for_extension(cls, extension: str) -> "RuleEngine":
        return cls(profile_for_extension(extension))

    def minify(self, text: str) -> str:
        # The output of rule n is the input of rule n+1
        for rule in self.rules:
            text = rule.apply(text)
        return text

    def __len__(self) -> int:
        return len(self.rules)
