from __future__ import annotations

import re
from typing import Optional

from .models import Category

_MERGERS = (
    "merger",
    "acquisition",
    "takeover",
    "agrees",
    "buy",
    "sold",
    "buying",
    "stake",
    "m&a",
)

_MAJOR_LOSS = (
    "loss",
    "catastrophe",
    "hurricane",
    "wildfire",
    "flood",
    "cyber",
    "earthquake",
    "typhoon",
    "storm",
    "disaster",
    "claims",
    "insured loss",
    "nat cat",
)


def _keyword_pattern(words: tuple[str, ...]) -> re.Pattern[str]:
    alternation = "|".join(re.escape(word) for word in words)
    return re.compile(rf"\b(?:{alternation})\b")


# Checked in order; a deal story that mentions a storm is still a deal story.
_RULES = (
    (_keyword_pattern(_MERGERS), Category.MERGERS_ACQUISITIONS),
    (_keyword_pattern(_MAJOR_LOSS), Category.MAJOR_LOSS),
)


def classify(text: Optional[str]) -> Category:
    if not text:
        return Category.GENERAL
    lowered = text.lower()
    for pattern, category in _RULES:
        if pattern.search(lowered):
            return category
    return Category.GENERAL


def classify_article(title: Optional[str], summary: Optional[str]) -> Category:
    combined = f"{title or ''} {summary or ''}".lower()
    return classify(combined)
