"""Unit tests for credentials and HMAC path signing."""

import base64
import hashlib
import hmac

import pytest

from imgsign.core.errors import ArgumentError, FormatError
from imgsign.core.signer import DIGEST_SIZE, Credentials, Signer

KEY = "736563726574"
SALT = "68656C6C6F"
PATH = (
    "/fill:300:300:no:1/plain/"
    "https://upload.wikimedia.org/wikipedia/ru/2/24/Lenna.png@jpg"
)

pytestmark = pytest.mark.security


class TestCredentials:
    def test_from_hex_decodes_key_and_salt(self) -> None:
        credentials = Credentials.from_hex(KEY, SALT)
        assert credentials.key == b"secret"
        assert credentials.salt == b"hello"

    @pytest.mark.parametrize(
        ("key", "salt", "argument"),
        [("", SALT, "key"), (KEY, "", "salt"), ("abc", SALT, "key"), (KEY, "abc", "salt")],
    )
    def test_empty_or_odd_values_are_argument_errors(
        self, key: str, salt: str, argument: str
    ) -> None:
        with pytest.raises(ArgumentError) as exc_info:
            Credentials.from_hex(key, salt)
        assert exc_info.value.argument == argument

    def test_non_hex_is_format_error(self) -> None:
        with pytest.raises(FormatError):
            Credentials.from_hex("zz", SALT)

    def test_repr_hides_secrets(self) -> None:
        text = repr(Credentials.from_hex(KEY, SALT))
        assert "secret" not in text
        assert "6 bytes" in text


@pytest.mark.critical
class TestSigner:
    def test_reference_signature(self) -> None:
        signer = Signer(Credentials.from_hex(KEY, SALT))
        assert signer.sign(PATH) == "5brJRkhAX0yf2HM9qVrCvRF72VNmmDvpPcFJhLXnx5k"

    def test_salt_is_prepended_to_path(self) -> None:
        signer = Signer(Credentials.from_hex(KEY, SALT))
        expected = hmac.new(b"secret", b"hello" + PATH.encode(), hashlib.sha256)
        encoded = base64.urlsafe_b64encode(expected.digest()).rstrip(b"=").decode()
        assert signer.sign(PATH) == encoded

    def test_without_credentials_signature_is_insecure(self) -> None:
        signer = Signer()
        assert not signer.is_secure
        assert signer.sign(PATH) == "insecure"
        assert signer.sign("/anything/else") == "insecure"

    def test_digest_requires_credentials(self) -> None:
        with pytest.raises(ArgumentError):
            Signer().digest(PATH)

    def test_signature_size_truncates_digest(self) -> None:
        credentials = Credentials.from_hex(KEY, SALT)
        full = Signer(credentials)
        short = Signer(credentials, signature_size=8)

        assert len(short.digest(PATH)) == 8
        assert short.digest(PATH) == full.digest(PATH)[:8]
        assert short.sign(PATH) == "5brJRkhAX0w"

    @pytest.mark.parametrize("size", [0, DIGEST_SIZE + 1, -1])
    def test_signature_size_bounds(self, size: int) -> None:
        with pytest.raises(ArgumentError):
            Signer(signature_size=size)

    def test_signature_has_no_padding_or_unsafe_characters(self) -> None:
        signature = Signer(Credentials.from_hex(KEY, SALT)).sign("/x")
        assert not set(signature) & {"+", "/", "="}
