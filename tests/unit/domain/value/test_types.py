"""Unit tests for reader-feedback value objects."""

import pytest
from pydantic import ValidationError

from lyra.domain.value import AccessToken, ChapterSet, InvitationStatus


class TestChapterSet:
    """Tests for ChapterSet."""

    def test_keeps_selection_order_and_drops_repeats(self):
        chapters = ChapterSet(["ch-4", "ch-2", "ch-4"])

        assert chapters.as_list() == ["ch-4", "ch-2"]
        assert len(chapters) == 2
        assert "ch-2" in chapters
        assert "ch-1" not in chapters

    def test_key_ignores_order(self):
        """Two selections of the same chapters belong to the same circle."""
        assert ChapterSet(["ch-1", "ch-3"]).key == ChapterSet(["ch-3", "ch-1"]).key
        assert ChapterSet(["ch-1", "ch-3"]).key != ChapterSet(["ch-1"]).key

    def test_empty_selection_rejected(self):
        with pytest.raises(ValidationError):
            ChapterSet([])

    def test_blank_chapter_id_rejected(self):
        with pytest.raises(ValidationError):
            ChapterSet(["ch-1", "  "])

    def test_plain_string_rejected(self):
        """A bare string must not be split into characters."""
        with pytest.raises(ValidationError):
            ChapterSet("ch-1")


class TestAccessToken:
    """Tests for AccessToken."""

    def test_from_raw_accepts_issued_shape(self):
        raw = "a" * 64

        token = AccessToken.from_raw(raw)

        assert token is not None
        assert token.root == raw

    @pytest.mark.parametrize(
        "raw",
        ["", "abc", "A" * 64, "g" * 64, "a" * 63, "a" * 65, "a" * 64 + "\n"],
    )
    def test_from_raw_rejects_other_strings(self, raw):
        assert AccessToken.from_raw(raw) is None

    def test_hint_only_shows_prefix(self):
        token = AccessToken("0123456789abcdef" * 4)

        assert token.hint() == "01234567..."


class TestInvitationStatus:
    def test_terminal_states(self):
        assert InvitationStatus.EXPIRED.is_terminal
        assert InvitationStatus.REVOKED.is_terminal
        assert not InvitationStatus.PENDING.is_terminal
        assert not InvitationStatus.ACCEPTED.is_terminal
