# src/stylepack/models.py
import re
from dataclasses import dataclass, field
from typing import List, Pattern

@dataclass(frozen=True)
class RewriteRule:
    """A single regex rewrite, applied to every match in the text."""
    pattern: Pattern[str]
    replacement: str

    @classmethod
    def compile(cls, pattern: str, replacement: str, flags: int = 0) -> "RewriteRule":
        return cls(re.compile(pattern, flags), replacement)

    def apply(self, text: str) -> str:
        return self.pattern.sub(self.replacement, text)

@dataclass(frozen=True)
class BundleReport:
    """Immutable summary of one bundle build."""
    destination: str
    files: List[str] = field(default_factory=list)
    source_bytes: int = 0
    bundle_bytes: int = 0

    @property
    def saved_bytes(self) -> int:
        return self.source_bytes - self.bundle_bytes
