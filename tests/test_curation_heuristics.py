"""Heuristic filter + word list tests."""

import pytest

from akkuea_curation.curation.dictionary import (
    APPROVAL_KEYWORDS,
    BLOCKLIST,
    MIN_CONTENT_LENGTH,
    REJECTION_KEYWORDS,
    find_first,
)
from akkuea_curation.curation.heuristics import HeuristicFilter
from akkuea_curation.curation.types import CurationStatus
from tests.helpers import SAFE_CONTENT, SAFE_TITLE


class TestHeuristicFilter:
    def test_clean_text_passes(self):
        """Clean, long enough content is Approved by heuristics."""
        result = HeuristicFilter().evaluate(SAFE_TITLE, SAFE_CONTENT)
        assert result.status == CurationStatus.APPROVED
        assert result.reason == "Heuristics passed"

    @pytest.mark.parametrize("term", BLOCKLIST)
    def test_every_blocklisted_term_rejects(self, term):
        """Each blocklist term rejects, wherever it appears in the content."""
        content = f"{SAFE_CONTENT} {term.upper()} appendix"
        result = HeuristicFilter().evaluate(SAFE_TITLE, content)
        assert result.status == CurationStatus.REJECTED
        assert result.reason == f"Contains prohibited term: {term}"

    def test_term_in_title_rejects(self):
        """The title is checked too, case-insensitively."""
        result = HeuristicFilter().evaluate("NSFW study guide", SAFE_CONTENT)
        assert result.status == CurationStatus.REJECTED
        assert result.reason == "Contains prohibited term: nsfw"

    def test_first_declared_term_wins(self):
        """With several matches, the earliest term in the blocklist is reported."""
        result = HeuristicFilter().evaluate("xxx", "bomb porn")
        assert result.reason == "Contains prohibited term: porn"

    def test_substring_match(self):
        """Containment is plain substring matching, not word matching."""
        result = HeuristicFilter().evaluate(SAFE_TITLE, f"{SAFE_CONTENT} Build your skills.")
        assert result.status == CurationStatus.REJECTED
        assert result.reason == "Contains prohibited term: kill"

    def test_short_content_is_pending(self):
        """Trimmed content under 30 chars cannot be auto-approved."""
        result = HeuristicFilter().evaluate(SAFE_TITLE, "   Short note.   ")
        assert result.status == CurationStatus.PENDING
        assert result.reason == "Content too short for auto-approval"

    def test_length_threshold_boundary(self):
        """Exactly 30 characters is long enough."""
        f = HeuristicFilter()
        assert f.evaluate(SAFE_TITLE, "a" * 29).status == CurationStatus.PENDING
        assert f.evaluate(SAFE_TITLE, "a" * 30).status == CurationStatus.APPROVED

    def test_long_title_does_not_count_as_content(self):
        """Only content length matters for the length check."""
        result = HeuristicFilter().evaluate(SAFE_CONTENT, "")
        assert result.status == CurationStatus.PENDING

    def test_blocklist_checked_before_length(self):
        """A short blocked text is Rejected, not Pending."""
        result = HeuristicFilter().evaluate("", "bomb")
        assert result.status == CurationStatus.REJECTED

    def test_custom_blocklist(self):
        """Blocklist and threshold can be overridden."""
        f = HeuristicFilter(blocklist=("Spam",), min_content_length=5)
        assert f.evaluate("", "buy SPAM now").status == CurationStatus.REJECTED
        assert f.evaluate("", "hello").status == CurationStatus.APPROVED

    def test_deterministic(self):
        """Same input, same verdict."""
        f = HeuristicFilter()
        assert f.evaluate(SAFE_TITLE, SAFE_CONTENT) == f.evaluate(SAFE_TITLE, SAFE_CONTENT)


class TestDictionary:
    def test_blocklist_order(self):
        """Blocklist keeps its declared order."""
        assert BLOCKLIST[0] == "porn"
        assert BLOCKLIST[-1] == "xxx"
        assert len(BLOCKLIST) == 11

    def test_min_content_length(self):
        assert MIN_CONTENT_LENGTH == 30

    def test_find_first(self):
        """find_first returns the first listed term that occurs."""
        assert find_first("this is unsafe", REJECTION_KEYWORDS) == "unsafe"
        assert find_first("all good", APPROVAL_KEYWORDS) is None
