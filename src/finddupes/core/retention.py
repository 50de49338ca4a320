"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/retention.py
Decides which of two identical files survives.

The policy is an ordered list of named rules. Each rule looks at the current
candidate (the copy we intend to keep) and a newly found identical file and
answers KEEP_CANDIDATE, KEEP_NEW or NO_OPINION. The first rule with an opinion wins.

Default order:
1. "unfiltered" in a path    -> that copy is deleted
2. "preferDelete" in a path  -> that copy is deleted
3. lexicographic             -> the earlier file name is kept (report_2017 over report_2019)
"""

import os
from typing import Iterable, List, Optional, Tuple
from finddupes.core.interfaces import Preference, RetentionRule

UNFILTERED_MARKER = "unfiltered"
PREFER_DELETE_MARKER = "preferDelete"


class SubstringRule(RetentionRule):
    """Paths containing `marker` lose against paths that don't."""

    def __init__(self, marker: str):
        if not marker:
            raise ValueError("Marker cannot be empty")
        self.marker = marker
        self.name = f"substring:{marker}"

    def __call__(self, candidate: str, new_file: str) -> Preference:
        if self.marker in candidate:
            return Preference.KEEP_NEW
        if self.marker in new_file:
            return Preference.KEEP_CANDIDATE
        return Preference.NO_OPINION

    def __repr__(self):
        return f"<SubstringRule {self.marker!r}>"


class LexicographicRule(RetentionRule):
    """
    Keeps the file whose name sorts first, so report_2017.csv beats report_2019.csv
    wherever the two live. Equal names fall back to the full path, so
    full-path order only breaks ties between identical file names. Identical
    keys keep the candidate.
    """
    name = "lexicographic"

    @staticmethod
    def sort_key(path: str) -> Tuple[str, str]:
        return os.path.basename(path), path

    def __call__(self, candidate: str, new_file: str) -> Preference:
        if self.sort_key(candidate) > self.sort_key(new_file):
            return Preference.KEEP_NEW
        return Preference.KEEP_CANDIDATE

    def __repr__(self):
        return "<LexicographicRule>"


class RetentionPolicy:
    """
    Ordered rule chain. If every rule abstains, the candidate is kept,
    so the result is always defined.
    """

    def __init__(self, rules: Iterable[RetentionRule]):
        self.rules: List[RetentionRule] = list(rules)

    @classmethod
    def default(cls, extra_markers: Optional[Iterable[str]] = None) -> "RetentionPolicy":
        """
        Builds the standard chain. Extra delete markers rank below the built-in
        ones and above the lexicographic fallback.
        """
        rules: List[RetentionRule] = [
            SubstringRule(UNFILTERED_MARKER),
            SubstringRule(PREFER_DELETE_MARKER),
        ]
        for marker in extra_markers or []:
            if marker not in (UNFILTERED_MARKER, PREFER_DELETE_MARKER):
                rules.append(SubstringRule(marker))
        rules.append(LexicographicRule())
        return cls(rules)

    def prefer(self, candidate: str, new_file: str) -> Preference:
        for rule in self.rules:
            verdict = rule(candidate, new_file)
            if verdict is not Preference.NO_OPINION:
                return verdict
        return Preference.KEEP_CANDIDATE

    def choose(self, candidate: str, new_file: str) -> Tuple[str, str]:
        """Returns (file to keep, file to delete)."""
        if self.prefer(candidate, new_file) is Preference.KEEP_NEW:
            return new_file, candidate
        return candidate, new_file

    def __repr__(self):
        return f"<RetentionPolicy rules={[r.name for r in self.rules]}>"
