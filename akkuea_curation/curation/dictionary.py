"""Word lists used by the heuristic filter and the free-text fallback.

Order matters: lists are scanned front to back and the first hit wins.
"""

from __future__ import annotations


# --- Blocklist ---
# Any of these in title or content rejects the resource without asking the provider.

BLOCKLIST: tuple[str, ...] = (
    "porn",
    "nsfw",
    "rape",
    "kill",
    "suicide",
    "bomb",
    "terror",
    "hate",
    "racist",
    "sex",
    "xxx",
)

# Trimmed content shorter than this cannot be auto-approved by heuristics alone.
MIN_CONTENT_LENGTH = 30


# --- Free-text fallback keywords ---
# Used when the model answers in prose instead of the JSON contract.
# Rejection keywords are checked before approval keywords ("unsafe" contains "safe").

REJECTION_KEYWORDS: tuple[str, ...] = ("reject", "unsafe", "inappropriate")
APPROVAL_KEYWORDS: tuple[str, ...] = ("approve", "safe")


def find_first(text: str, terms: tuple[str, ...]) -> str | None:
    """Return the first term contained in *text*, or None."""
    for term in terms:
        if term in text:
            return term
    return None
