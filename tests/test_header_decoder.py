"""Tests for the public decoding entry points."""

import pytest

from mimewords import HeaderDecoder, decode_phrase, decode_text
from mimewords.config.decoder_config import DecoderSettings


class TestDecodeText:
    """Test text mode decoding."""

    def test_base64_word(self):
        """Test decoding a B encoded word."""
        assert decode_text("=?UTF-8?B?SGVsbG8=?=") == "Hello"

    def test_q_underscore(self):
        """Test underscore decodes to space."""
        assert decode_text("=?UTF-8?Q?Hello_World?=") == "Hello World"

    def test_q_hex(self):
        """Test hex escapes in Q encoding."""
        assert decode_text("=?UTF-8?Q?Caf=C3=A9?=") == "Café"

    def test_adjacent_words_fold_whitespace(self):
        """Test whitespace between adjacent decoded words is dropped."""
        assert decode_text("=?UTF-8?Q?Hello?= =?UTF-8?Q?World?=") == "HelloWorld"

    def test_adjacent_words_across_folded_line(self):
        """Test folding whitespace between words is dropped."""
        assert decode_text("=?UTF-8?Q?Hello?=\r\n\t=?UTF-8?Q?_World?=") == "Hello World"

    def test_words_separated_by_text(self):
        """Test whitespace around plain text between words is kept."""
        assert decode_text("=?UTF-8?Q?Hello?= plain =?UTF-8?Q?World?=") == "Hello plain World"

    def test_word_inside_text(self):
        """Test a word surrounded by plain text."""
        assert decode_text("Re: =?ISO-8859-1?Q?Gr=FC=DFe?= und mehr") == "Re: Grüße und mehr"

    def test_multibyte_split_across_words(self):
        """Test each word is converted on its own."""
        assert decode_text("=?UTF-8?B?5Lit?= =?UTF-8?B?5paH?=") == "中文"

    def test_base64_inner_padding_ends_payload(self):
        """Test groups after a padded group are ignored."""
        assert decode_text("=?UTF-8?B?QQ==QUJD?=") == "A"

    def test_invalid_base64_alphabet_unchanged(self):
        """Test invalid base64 is returned literally."""
        assert decode_text("=?UTF-8?B?###?=") == "=?UTF-8?B?###?="

    def test_unknown_charset_stops_decoding(self):
        """Test a failed word leaves the rest of the value undecoded."""
        value = "=?UTF-8?Q?ok?= =?x-unknown?Q?bad?= =?UTF-8?Q?later?="
        assert decode_text(value) == "ok =?x-unknown?Q?bad?= =?UTF-8?Q?later?="

    def test_invalid_bytes_unchanged(self):
        """Test bytes invalid for the charset are returned literally."""
        assert decode_text("Subject =?UTF-8?Q?=FF?=") == "Subject =?UTF-8?Q?=FF?="

    def test_word_over_cap_unchanged(self):
        """Test a word over 255 characters is returned unchanged."""
        word = "=?UTF-8?Q?" + "a" * 244 + "?="
        assert decode_text(word + " =?UTF-8?Q?b?=") == word + " =?UTF-8?Q?b?="

    def test_word_at_cap_decoded(self):
        """Test a word of exactly 255 characters is decoded."""
        word = "=?UTF-8?Q?" + "a" * 243 + "?="
        assert decode_text(word) == "a" * 243

    def test_quotes_kept_in_text_mode(self):
        """Test quoted-strings are not unquoted in text mode."""
        assert decode_text('say "hi"') == 'say "hi"'

    def test_control_characters_removed(self):
        """Test control characters are stripped, also from decoded text."""
        assert decode_text("Hello\x00World =?UTF-8?Q?a=01b?=") == "HelloWorld ab"

    def test_whitespace_normalized(self):
        """Test whitespace is trimmed and collapsed."""
        assert decode_text("  a \t b\r\n  c  ") == "a b c"

    def test_empty_and_none(self):
        """Test empty input gives an empty string."""
        assert decode_text("") == ""
        assert decode_text(None) == ""

    @pytest.mark.parametrize(
        "value",
        ["Plain subject", "a  b", " x ", "Café　au lait", "tab\there", "a=?b"],
    )
    def test_plain_input_only_normalized(self, value):
        """Test values without encoded-words are only normalized."""
        expected = " ".join(value.replace("　", " ").split())
        assert decode_text(value) == expected

    @pytest.mark.parametrize("value", ["Hello World", "Re: [list] status", 'quoted "x"'])
    def test_idempotent(self, value):
        """Test decoding a decoded value changes nothing."""
        once = decode_text(value)
        assert decode_text(once) == once


class TestDecodePhrase:
    """Test phrase mode decoding."""

    def test_quoted_display_name(self):
        """Test quoted display names are unquoted and the cursor stops at '<'."""
        value = '"John Doe" <foo@example.com>'
        assert decode_phrase(value, 0) == ("John Doe", value.index("<"))

    def test_encoded_display_name(self):
        """Test an encoded display name before an address."""
        value = "=?UTF-8?Q?J=C3=B6rg?= <j@example.com>"
        assert decode_phrase(value) == ("Jörg", value.index("<"))

    def test_escaped_quotes(self):
        """Test backslash escapes inside quoted-strings."""
        assert decode_phrase('"Doe, \\"JD\\" John" <jd@example.com>')[0] == 'Doe, "JD" John'

    def test_resume_from_cursor(self):
        """Test decoding from a position inside the value."""
        assert decode_phrase('<x@y> "Bob" <z@y>', 5) == ("Bob", 12)

    def test_word_right_at_cursor(self):
        """Test a word at the start position needs no leading whitespace."""
        value = "x,=?UTF-8?Q?J=C3=B6rg?= <j@example.com>"
        assert decode_phrase(value, 2) == ("Jörg", 24)

    def test_word_followed_by_special(self):
        """Test a word directly followed by a special character."""
        assert decode_phrase("=?UTF-8?Q?Ann?=<a@example.com>") == ("Ann", 15)

    def test_quoted_string_breaks_adjacency(self):
        """Test whitespace after a quoted-string is kept."""
        assert decode_phrase('=?UTF-8?Q?a?= "q" =?UTF-8?Q?b?=') == ("a q b", 31)

    def test_plain_phrase_stops_at_special(self):
        """Test plain phrases stop at the first special character."""
        assert decode_phrase("foo@example.com") == ("foo", 3)

    def test_fallback_then_stop_at_special(self):
        """Test the remainder after a failed word still stops at specials."""
        assert decode_phrase("=?x-bad?Q?a?= b <c@d>") == ("=?x-bad?Q?a?= b", 16)

    def test_unterminated_quote(self):
        """Test an unterminated quoted-string stops the phrase."""
        assert decode_phrase('Bob "Smith <b@s>') == ("Bob", 4)

    def test_cursor_at_end(self):
        """Test decoding from the end of the value."""
        assert decode_phrase("abc", 3) == ("", 3)

    def test_empty_value(self):
        """Test empty input."""
        assert decode_phrase("") == ("", 0)
        assert decode_phrase(None) == ("", 0)

    @pytest.mark.parametrize("cursor", [-1, 4])
    def test_cursor_out_of_range(self, cursor):
        """Test a cursor outside the value raises ValueError."""
        with pytest.raises(ValueError):
            decode_phrase("abc", cursor)


class TestHeaderDecoderSettings:
    """Test decoder configuration."""

    def test_custom_length_cap(self):
        """Test a smaller length cap leaves longer words alone."""
        decoder = HeaderDecoder(settings=DecoderSettings(max_encoded_word_length=10))
        assert decoder.decode_text("=?UTF-8?Q?abc?=") == "=?UTF-8?Q?abc?="

    def test_charset_alias(self):
        """Test configured charset aliases are used."""
        decoder = HeaderDecoder(settings=DecoderSettings(charset_aliases={"x-latin": "latin-1"}))
        assert decoder.decode_text("=?x-latin?Q?caf=E9?=") == "café"

    def test_decoder_is_reusable(self):
        """Test one decoder serves many calls."""
        decoder = HeaderDecoder()
        assert decoder.decode_text("=?UTF-8?Q?a?=") == "a"
        assert decoder.decode_text("=?x-bad?Q?a?=") == "=?x-bad?Q?a?="
        assert decoder.decode_text("=?UTF-8?Q?b?=") == "b"
