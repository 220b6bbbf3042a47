"""Tests for filtering module."""

from bunnyhop.filtering import filter_descriptors, is_allowed
from bunnyhop.models import CommandDescriptor, CommandFilter

REDDIT_ALIASES = ("r", "reddit")


class TestIsAllowed:
    """Test is_allowed function."""

    def test_no_filter_allows_everything(self):
        """Test no filter allows everything."""
        assert is_allowed("reddit", REDDIT_ALIASES, None) is True

    def test_empty_filter_allows_everything(self):
        """Test empty filter allows everything."""
        assert is_allowed("reddit", REDDIT_ALIASES, CommandFilter()) is True

    def test_block_by_canonical_name(self):
        """Test block by canonical name."""
        command_filter = CommandFilter.from_lists(blocked=["reddit"])
        assert is_allowed("reddit", REDDIT_ALIASES, command_filter) is False

    def test_block_by_any_alias(self):
        """Test that blocking one alias blocks the whole command."""
        command_filter = CommandFilter.from_lists(blocked=["r"])
        assert is_allowed("reddit", REDDIT_ALIASES, command_filter) is False

    def test_block_does_not_touch_other_commands(self):
        """Test block does not touch other commands."""
        command_filter = CommandFilter.from_lists(blocked=["reddit"])
        assert is_allowed("github", ("gh",), command_filter) is True

    def test_allow_list_permits_only_listed(self):
        """Test allow list permits only listed."""
        command_filter = CommandFilter.from_lists(allowed=["gh"])
        assert is_allowed("github", ("gh",), command_filter) is True
        assert is_allowed("reddit", REDDIT_ALIASES, command_filter) is False

    def test_allow_list_overrides_block_list(self):
        """Test that a non-empty allow-list makes the block-list irrelevant."""
        command_filter = CommandFilter.from_lists(allowed=["github"], blocked=["gh"])
        assert is_allowed("github", ("gh",), command_filter) is True

    def test_unknown_names_in_lists_are_ignored(self):
        """Test unknown names in lists are ignored."""
        command_filter = CommandFilter.from_lists(blocked=["nosuchcommand"])
        assert is_allowed("reddit", REDDIT_ALIASES, command_filter) is True


class TestFilterDescriptors:
    """Test filter_descriptors function."""

    def _descriptor(self, canonical_name, *aliases):
        return CommandDescriptor(
            aliases=aliases,
            canonical_name=canonical_name,
            handler=lambda _query: "https://example.com",
        )

    def test_keeps_input_order(self):
        """Test keeps input order."""
        descriptors = [
            self._descriptor("zeta", "z"),
            self._descriptor("alpha", "a"),
            self._descriptor("mid", "m"),
        ]
        command_filter = CommandFilter.from_lists(blocked=["a"])

        result = filter_descriptors(descriptors, command_filter)

        assert [d.canonical_name for d in result] == ["zeta", "mid"]

    def test_none_filter_returns_all(self):
        """Test none filter returns all."""
        descriptors = [self._descriptor("alpha", "a")]
        assert filter_descriptors(descriptors, None) == descriptors
