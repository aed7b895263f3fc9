"""
Unit tests for quoted-section and thread extraction.
"""
from mail_extraction.extraction.quotes import extract_quoted_sections, parse_thread, quote_level


class TestQuoteLevel:
    def test_levels(self):
        assert quote_level("plain") == 0
        assert quote_level("> one") == 1
        assert quote_level(">> two") == 2
        assert quote_level("> > spaced") == 2
        assert quote_level("  >>> indented") == 3


class TestExtractQuotedSections:
    def test_nested_levels(self, nested_quote_text):
        sections = extract_quoted_sections(nested_quote_text)
        assert [s.level for s in sections] == [1, 2, 3]
        assert sections[0].content == "Can we move the call?"
        assert sections[1].content == "Original proposal was Tuesday."
        assert sections[2].content == "Initial request from the client."

    def test_sender_from_attribution_line(self, nested_quote_text):
        sections = extract_quoted_sections(nested_quote_text)
        assert sections[0].original_sender == "Jane Doe <jane@example.com>"
        assert sections[1].original_sender is None

    def test_from_header_attribution(self):
        sections = extract_quoted_sections("From: Bob Jones\n> quoted text")
        assert sections[0].original_sender == "Bob Jones"

    def test_multiline_block_markers_stripped(self):
        sections = extract_quoted_sections("> a\n> b\nreply")
        assert len(sections) == 1
        assert sections[0].content == "a\nb"

    def test_return_to_plain_text_splits_blocks(self):
        sections = extract_quoted_sections("> a\nreply\n> b")
        assert [(s.level, s.content) for s in sections] == [(1, "a"), (1, "b")]

    def test_no_quotes(self):
        assert extract_quoted_sections("Just a reply\nwith two lines") == []


class TestParseThread:
    def test_split_on_reply_markers(self, nested_quote_text):
        messages = parse_thread(nested_quote_text)
        assert messages[0].content == "Sounds good, see you then."
        assert messages[0].is_quoted is False
        assert len(messages) == 4
        assert all(m.is_quoted for m in messages[1:])

    def test_sender_and_date_unresolved(self, nested_quote_text):
        for message in parse_thread(nested_quote_text):
            assert message.sender == "Unknown"
            assert message.date == ""

    def test_from_header_split(self):
        messages = parse_thread("Thanks!\nFrom: Bob\nSent: Monday\nOld text")
        assert [m.content for m in messages] == ["Thanks!", "Bob\nSent: Monday\nOld text"]
        assert [m.is_quoted for m in messages] == [False, True]

    def test_no_separator_is_not_a_thread(self):
        assert parse_thread("Just one message, nothing quoted.") == []

    def test_inline_greater_than_is_not_a_separator(self):
        assert parse_thread("We need price > 100 for this") == []
