"""Filler and disfluency removal for raw speech-to-text output."""

from __future__ import annotations

import re

from common.schemas import Verbosity

FILLER_WORDS_CLEAN = ("um", "uh", "er", "ah", "uhm", "uhh", "ehm")

FILLER_WORDS_MINIMAL = FILLER_WORDS_CLEAN + (
    "basically", "actually", "literally", "honestly",
    "obviously", "essentially", "definitely",
)

FILLER_PHRASES_MINIMAL = (
    "you know",
    "i mean",
    "kind of",
    "sort of",
    "more or less",
    "if you will",
    "as it were",
)

# Words that make a following "like" a filler when they come right after it
LIKE_HEDGES = ("um", "uh", "er", "ah", "basically", "actually", "really", "just", "so")

# "X is like Y" compares rather than hesitates
SIMILE_VERBS = ("is", "are", "was", "were", "looks", "seems", "feels", "sounds", "be")


def _words_pattern(words: tuple[str, ...]) -> re.Pattern[str]:
    alternation = "|".join(r"\s+".join(re.escape(w) for w in phrase.split()) for phrase in words)
    return re.compile(rf"\b(?:{alternation})\b", re.IGNORECASE)


_CLEAN_FILLERS = _words_pattern(FILLER_WORDS_CLEAN)
_MINIMAL_FILLERS = _words_pattern(FILLER_WORDS_MINIMAL)
_MINIMAL_PHRASES = _words_pattern(FILLER_PHRASES_MINIMAL)

# One fixed-width lookbehind per verb; re has no variable-width lookbehind.
# (?<!\s) pins the match to the first whitespace after the previous word.
_NOT_AFTER_SIMILE = r"(?<!\s)" + "".join(rf"(?<!\b{verb})" for verb in SIMILE_VERBS)

_LIKE_HEDGE = re.compile(rf"\blike\s+(?:{'|'.join(LIKE_HEDGES)})\b", re.IGNORECASE)
_LIKE_REPEATED = re.compile(r"\blike(?:\s+like)+\b", re.IGNORECASE)
_LIKE_THE = re.compile(rf"{_NOT_AFTER_SIMILE}\s+like\s+the\b", re.IGNORECASE)
_LIKE_CODE = re.compile(r"\blike\s+(?=\w+[.(])", re.IGNORECASE)
_LIKE_LEADING = re.compile(r"^like\s+(?!an?\b)", re.IGNORECASE)
_LIKE_BEFORE_WORD = re.compile(rf"{_NOT_AFTER_SIMILE}\s+like\s+(?=[^\W\d_]+\b)", re.IGNORECASE)

_LEADING_SO = re.compile(r"^so\s+(?!(?:that|far|long|much)\b)", re.IGNORECASE)
_LEADING_WHAT = re.compile(r"^what\s+", re.IGNORECASE)

_WHITESPACE = re.compile(r"\s+")
_SPACE_BEFORE_PUNCT = re.compile(r"\s+([.,!?;:])(?!\w)")
# Only a lone mark after a word, before a capitalised word; leaves os.Path,
# std::Vector and Map<String,Integer> alone
_MISSING_SPACE_AFTER_PUNCT = re.compile(
    r"(?<=\w)([,!?;:])(?![,!?;:])(?=[A-Z][a-z]+(?:\s|$|[.!?](?:\s|$)))"
)
_DUPLICATE_WORDS = re.compile(r"\b([^\W\d_]+)(?:\s+\1\b)+", re.IGNORECASE)


def clean_transcript(text: str, verbosity: Verbosity | str = Verbosity.clean) -> str:
    """Strip disfluencies from ``text`` according to ``verbosity``.

    ``verbatim`` is the identity. ``clean`` drops pure filler sounds and
    filler uses of "like". ``minimal`` also drops hedging words, filler
    phrases and a leading "So"/"What".
    """
    verbosity = Verbosity(verbosity)
    if not text or verbosity == Verbosity.verbatim:
        return text

    minimal = verbosity == Verbosity.minimal
    result = text

    if minimal:
        result = _MINIMAL_PHRASES.sub("", result)
    result = (_MINIMAL_FILLERS if minimal else _CLEAN_FILLERS).sub("", result)
    result = _remove_contextual_fillers(result)

    result = _WHITESPACE.sub(" ", result).strip()
    if minimal:
        result = _LEADING_SO.sub("", result)
        result = _LEADING_WHAT.sub("", result)

    result = _SPACE_BEFORE_PUNCT.sub(r"\1", result)
    result = _MISSING_SPACE_AFTER_PUNCT.sub(r"\1 ", result)
    result = _DUPLICATE_WORDS.sub(r"\1", result)

    return (result[:1].upper() + result[1:]).strip()


def _remove_contextual_fillers(text: str) -> str:
    """Drop "like" where it is a pause, keep it where it compares."""
    result = _LIKE_HEDGE.sub("", text)
    result = _LIKE_REPEATED.sub("like", result)
    result = _LIKE_THE.sub(" the", result)
    result = _LIKE_CODE.sub("", result)
    result = _LIKE_LEADING.sub("", result)
    result = _LIKE_BEFORE_WORD.sub(" ", result)
    return result
