# ==============================================
# Tests for Codec Module
# ==============================================

import pytest

from roster.codec import decode, encode
from roster.errors import CodecError, RaggedRowError


class TestDecode:
    """Tests for splitting text into rows."""

    def test_blank_line_skipped(self):
        rows = decode("1,Ann,Lee,a@x,20\n\n2,Bo,Ng,b@x,15\n")
        assert rows == [
            ["1", "Ann", "Lee", "a@x", "20"],
            ["2", "Bo", "Ng", "b@x", "15"],
        ]

    def test_crlf_line_endings(self):
        rows = decode("1,a,b\r\n2,c,d\r\n")
        assert rows == [["1", "a", "b"], ["2", "c", "d"]]

    def test_mixed_line_endings(self):
        assert decode("1,a\r\n2,b\n3,c") == [["1", "a"], ["2", "b"], ["3", "c"]]

    def test_whitespace_only_lines_skipped(self):
        assert decode("  \n\t\n1,a\n   \n") == [["1", "a"]]

    def test_line_trimmed_but_inner_whitespace_kept(self):
        assert decode("  1, Ann ,Lee  \n") == [["1", " Ann ", "Lee"]]

    def test_empty_text(self):
        assert decode("") == []

    def test_no_trailing_newline(self):
        assert decode("1,a,b") == [["1", "a", "b"]]

    def test_embedded_delimiter_splits_field(self):
        # No quoting support: a comma inside a field becomes a new field.
        assert decode(encode([["a,b", "c"]])) == [["a", "b", "c"]]


class TestEncode:
    """Tests for joining rows into text."""

    def test_terminator_after_every_row(self):
        text = encode([["1", "a"], ["2", "b"]])
        assert text == "1,a\n2,b\n"

    def test_single_row(self):
        assert encode([["1", "Ann", "Lee", "a@x", "20.00"]]) == "1,Ann,Lee,a@x,20.00\n"

    def test_no_rows_gives_empty_text(self):
        assert encode([]) == ""

    def test_ragged_row_rejected(self):
        with pytest.raises(RaggedRowError) as exc_info:
            encode([["1", "a", "b"], ["2", "c"]])
        assert "row 2" in str(exc_info.value)

    def test_ragged_row_is_codec_error(self):
        with pytest.raises(CodecError):
            encode([["1"], ["2", "x"]])

    @pytest.mark.parametrize("rows", [
        [["1", "Ann", "Lee", "a@x", "20.00"]],
        [["1", "a"], ["2", "b"], ["3", "c"]],
        [["x"]],
    ])
    def test_round_trip(self, rows):
        assert decode(encode(rows)) == rows
