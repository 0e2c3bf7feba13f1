"""Unit tests for the binary/text codec helpers."""

import pytest

from imgsign.core.codec import (
    format_bool,
    format_number,
    format_text,
    hex_decode,
    string_to_urlsafe_b64,
    urlsafe_b64encode,
    utf8_bytes,
)
from imgsign.core.constants import GravityType
from imgsign.core.errors import FormatError

LENNA = "https://upload.wikimedia.org/wikipedia/ru/2/24/Lenna.png"
LENNA_CYRILLIC = "https://upload.wikimedia.org/wikipedia/ru/2/24/Лена.png"


class TestHexDecode:
    def test_decodes_lower_and_upper_case(self) -> None:
        assert hex_decode("736563726574") == b"secret"
        assert hex_decode("68656C6C6F") == b"hello"

    def test_empty_string_is_empty_bytes(self) -> None:
        assert hex_decode("") == b""

    def test_odd_length_is_rejected(self) -> None:
        with pytest.raises(FormatError) as exc_info:
            hex_decode("abc")
        assert "odd number of digits" in str(exc_info.value)

    @pytest.mark.parametrize("value", ["zz", "0g", "12 4", "0x12"])
    def test_non_hex_characters_are_rejected(self, value: str) -> None:
        with pytest.raises(FormatError):
            hex_decode(value)

    def test_format_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            hex_decode("q1")


class TestBase64Url:
    def test_empty_input(self) -> None:
        assert urlsafe_b64encode(b"") == ""

    def test_substitutes_alphabet_and_strips_padding(self) -> None:
        # Standard base64 of these bytes is "+/8="
        assert urlsafe_b64encode(b"\xfb\xff") == "-_8"

    def test_source_url(self) -> None:
        assert (
            string_to_urlsafe_b64(LENNA)
            == "aHR0cHM6Ly91cGxvYWQud2lraW1lZGlhLm9yZy93aWtpcGVkaWEvcnUvMi8yNC9MZW5uYS5wbmc"
        )

    def test_non_ascii_source_url_uses_utf8(self) -> None:
        assert utf8_bytes("Лена").hex() == "d09bd0b5d0bdd0b0"
        assert (
            string_to_urlsafe_b64(LENNA_CYRILLIC)
            == "aHR0cHM6Ly91cGxvYWQud2lraW1lZGlhLm9yZy93aWtpcGVkaWEvcnUvMi8yNC_Qm9C10L3QsC5wbmc"
        )


class TestFormatting:
    def test_bools_render_as_digits(self) -> None:
        assert format_bool(True) == "1"
        assert format_bool(False) == "0"

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (300, "300"),
            (0, "0"),
            (-5, "-5"),
            (1.0, "1"),
            (-2.0, "-2"),
            (0.5, "0.5"),
            (0.1, "0.1"),
            (1.25, "1.25"),
        ],
    )
    def test_numbers(self, value: float, expected: str) -> None:
        assert format_number(value) == expected

    def test_text_unwraps_enums_and_none(self) -> None:
        assert format_text(GravityType.NORTH) == "no"
        assert format_text(None) == ""
        assert format_text(0.75) == "0.75"
        assert format_text("ff0000") == "ff0000"
