"""Technical term correction.

Speech engines mis-hear jargon in predictable ways. Corrections come from
three places, applied in order:

  1. spelled-out acronyms ("A.P.I.", "a p i") collapsed to their usual form;
  2. a static dictionary of known mis-hearings and casing fixes;
  3. terms taken from the current slide, matched against phonetic and
     word-split variations of themselves.
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Optional

ACRONYMS = ("API", "UI", "UX", "HTML", "CSS", "SQL", "URL", "JSON", "HTTPS", "HTTP")

COMMON_CORRECTIONS: dict[str, str] = {
    "sequel": "SQL",
    "jason": "JSON",
    "no js": "Node.js",
    "node js": "Node.js",
    "react js": "React",
    "type script": "TypeScript",
    "java script": "JavaScript",
    "html": "HTML",
    "css": "CSS",
    "url": "URL",
    "http": "HTTP",
    "https": "HTTPS",
    "ui": "UI",
    "ux": "UX",
    "git": "Git",
    "github": "GitHub",
    "gitlab": "GitLab",
    "cooper netties": "Kubernetes",
    "kuber netties": "Kubernetes",
    "kubernetes": "Kubernetes",
    "docker": "Docker",
    "polly morphism": "polymorphism",
    "polymorphism": "polymorphism",
    "encapsulation": "encapsulation",
    "inheritance": "inheritance",
    "abstraction": "abstraction",
    "algorithm": "algorithm",
    "algorithms": "algorithms",
    "recursion": "recursion",
    "recursive": "recursive",
    "async": "async",
    "await": "await",
    "promise": "Promise",
    "promises": "Promises",
    "callback": "callback",
    "callbacks": "callbacks",
}

_PHONETIC_SUBSTITUTIONS = (
    (re.compile(r"y$"), "ie"),
    (re.compile(r"ie$"), "y"),
    (re.compile(r"ph"), "f"),
    (re.compile(r"f"), "ph"),
    (re.compile(r"ck"), "k"),
    (re.compile(r"k(?=[aou])"), "c"),
    (re.compile(r"c(?=[aou])"), "k"),
    (re.compile(r"tion$"), "sion"),
    (re.compile(r"sion$"), "tion"),
)

# Terms longer than this also get split-word variants ("polly morphism")
SPLIT_MIN_LENGTH = 8

_SLIDE_WORD_SEPARATORS = re.compile(r"[\s\-_.,;:!?()\[\]{}'\"]+")
_TITLE_CASE_RUN = re.compile(r"[A-Z][a-z]+(?:\s+[A-Z][a-z]+)+")
_ALL_CAPS_RUN = re.compile(r"[A-Z]{2,}(?:\s+[A-Z]{2,})*")


def _acronym_pattern(acronym: str) -> re.Pattern[str]:
    # A trailing dot is only eaten mid-sentence, otherwise it ends the sentence
    dotted = r"\.".join(acronym) + r"(?:\.(?=\s+(?-i:[a-z]))|\b)"
    spaced = " ".join(acronym) + r"\b"
    return re.compile(rf"\b(?:{dotted}|{spaced}|{acronym}\b)", re.IGNORECASE)


_ACRONYM_PATTERNS = [(_acronym_pattern(a), a) for a in ACRONYMS]


def _normalize(phrase: str) -> str:
    return " ".join(phrase.lower().split())


def _phrase_regex(phrase: str) -> str:
    return r"\s+".join(re.escape(word) for word in phrase.split())


def _lookup_pattern(phrases) -> re.Pattern[str]:
    # Longest first so "kuber netties" wins over any shorter overlapping key
    ordered = sorted(phrases, key=len, reverse=True)
    return re.compile(rf"\b(?:{'|'.join(_phrase_regex(p) for p in ordered)})\b", re.IGNORECASE)


_CORRECTIONS_PATTERN = _lookup_pattern(COMMON_CORRECTIONS)


def extract_slide_terms(slide_text: Optional[str]) -> list[str]:
    """Candidate vocabulary from slide text, in first-seen order."""
    if not slide_text:
        return []

    terms = [w for w in _SLIDE_WORD_SEPARATORS.split(slide_text) if len(w) > 2]
    terms.extend(_TITLE_CASE_RUN.findall(slide_text))
    terms.extend(_ALL_CAPS_RUN.findall(slide_text))
    return list(dict.fromkeys(terms))


def phonetic_variations(term: str) -> list[str]:
    """Lower-cased spellings a speech engine might produce for ``term``.

    The first entry is the term itself. Split-word variants are generated at
    every position from index 4 onward, always leaving at least four
    characters after the split.
    """
    term = term.lower()
    variations = [term]

    for pattern, replacement in _PHONETIC_SUBSTITUTIONS:
        variant = pattern.sub(replacement, term)
        if variant != term:
            variations.append(variant)

    if len(term) > SPLIT_MIN_LENGTH:
        for i in range(4, len(term) - 3):
            variations.append(f"{term[:i]} {term[i:]}")

    return variations


@lru_cache(maxsize=32)
def _slide_corrections(slide_text: str) -> tuple[Optional[re.Pattern[str]], dict[str, str]]:
    replacements: dict[str, str] = {}
    for term in extract_slide_terms(slide_text):
        canonical = _normalize(term)
        for variant in phonetic_variations(term):
            key = _normalize(variant)
            if key and key != canonical:
                replacements.setdefault(key, term)

    if not replacements:
        return None, replacements
    return _lookup_pattern(replacements), replacements


def _replace_from(table: dict[str, str]):
    def replace(match: re.Match[str]) -> str:
        return table.get(_normalize(match.group(0)), match.group(0))
    return replace


def correct_terms(text: str, slide_text: Optional[str] = None) -> str:
    """Rewrite mis-transcribed technical terms in ``text``.

    Replacements use the canonical casing, never the casing that was heard.
    Without ``slide_text`` only the acronym and dictionary passes run.
    """
    if not text:
        return text

    result = text
    for pattern, acronym in _ACRONYM_PATTERNS:
        result = pattern.sub(acronym, result)

    result = _CORRECTIONS_PATTERN.sub(_replace_from(COMMON_CORRECTIONS), result)

    if slide_text:
        pattern, replacements = _slide_corrections(slide_text)
        if pattern is not None:
            result = pattern.sub(_replace_from(replacements), result)

    return result
