#!/usr/bin/env python3
"""
Skill Normalizer - Canonicalize raw skill strings into comparable tokens.

Steps, in order:
1. lowercase + trim, drop a trailing .js/.ts/.jsx/.tsx suffix
2. rewrite symbol-bearing tokens (c++, c#, .net) before punctuation is lost
3. punctuation -> space, collapse whitespace
4. word-by-word abbreviation expansion (js -> javascript, k8s -> kubernetes)
5. whole-token variant collapse (react js -> react, spring boot -> spring)

Unknown tokens pass through unchanged; the function never raises.
"""

import re
from typing import Iterable, List, Optional

from talent_match.matcher.tables import ABBREVIATIONS, SKILL_VARIANTS, SYMBOL_TOKENS

_FILE_SUFFIX_RE = re.compile(r'\.(js|ts|jsx|tsx)$')
_NON_ALNUM_RE = re.compile(r'[^a-z0-9\s]')
_WHITESPACE_RE = re.compile(r'\s+')


def normalize_skill(skill: Optional[str]) -> str:
    """Return the canonical form of a skill name ('' for empty input)."""
    if not skill:
        return ''

    text = _FILE_SUFFIX_RE.sub('', str(skill).lower().strip())
    for token, replacement in SYMBOL_TOKENS.items():
        text = text.replace(token, replacement)
    text = _NON_ALNUM_RE.sub(' ', text)
    text = _WHITESPACE_RE.sub(' ', text).strip()

    words = [ABBREVIATIONS.get(word, word) for word in text.split(' ') if word]
    text = ' '.join(words)

    return SKILL_VARIANTS.get(text, text)


def normalize_skills(skills: Iterable[Optional[str]]) -> List[str]:
    """Normalize a skill list, dropping blanks and duplicates (first occurrence wins)."""
    seen = set()
    normalized = []
    for skill in skills or ():
        token = normalize_skill(skill)
        if token and token not in seen:
            seen.add(token)
            normalized.append(token)
    return normalized
