"""
Unit tests for ImgSignSettings and builder construction from settings.
"""

import pytest
from pydantic import ValidationError

from imgsign import BasicImgProxyBuilder, ImgProxyBuilder, create_builder
from imgsign.core.settings import CoreSettings, ImgSignSettings

KEY = "736563726574"
SALT = "68656C6C6F"
URL = "https://upload.wikimedia.org/wikipedia/ru/2/24/Lenna.png"


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "IMGSIGN_ENDPOINT",
        "IMGSIGN_KEY",
        "IMGSIGN_SALT",
        "IMGSIGN_SIGNATURE_SIZE",
        "IMGSIGN_DIALECT",
        "IMGSIGN_ENCODE",
        "IMGSIGN_CORE__INTERNAL_LOGGING_ENABLED",
    ):
        monkeypatch.delenv(name, raising=False)


class TestImgSignSettings:
    def test_defaults(self) -> None:
        settings = ImgSignSettings()

        assert settings.endpoint is None
        assert settings.key is None
        assert settings.salt is None
        assert settings.signature_size == 32
        assert settings.dialect == "keyed"
        assert settings.encode is False
        assert settings.core.internal_logging_enabled is False
        assert settings.credentials() is None

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("IMGSIGN_ENDPOINT", "https://cdn.example.com")
        monkeypatch.setenv("IMGSIGN_KEY", KEY)
        monkeypatch.setenv("IMGSIGN_SALT", SALT)
        monkeypatch.setenv("IMGSIGN_DIALECT", "legacy")
        monkeypatch.setenv("IMGSIGN_CORE__INTERNAL_LOGGING_ENABLED", "true")

        settings = ImgSignSettings()

        assert settings.endpoint == "https://cdn.example.com"
        assert settings.dialect == "legacy"
        assert settings.core.internal_logging_enabled is True
        credentials = settings.credentials()
        assert credentials is not None
        assert credentials.key == b"secret"

    def test_blank_values_are_unset(self) -> None:
        settings = ImgSignSettings(endpoint="  ", key="", salt="")
        assert settings.endpoint is None
        assert settings.credentials() is None

    def test_non_hex_key_is_rejected(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            ImgSignSettings(key="nothex", salt=SALT)
        assert "key" in str(exc_info.value)

    def test_key_without_salt_is_rejected(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            ImgSignSettings(key=KEY)
        assert "key and salt must be configured together" in str(exc_info.value)

    @pytest.mark.parametrize("size", [0, 33])
    def test_signature_size_bounds(self, size: int) -> None:
        with pytest.raises(ValidationError):
            ImgSignSettings(signature_size=size)

    def test_unknown_dialect_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ImgSignSettings(dialect="v3")  # type: ignore[arg-type]

    def test_core_settings_standalone(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("IMGSIGN_CORE__INTERNAL_LOGGING_ENABLED", "1")
        assert CoreSettings().internal_logging_enabled is True


class TestBuilderFromSettings:
    def test_keyed_builder_from_settings(self) -> None:
        settings = ImgSignSettings(
            endpoint="https://cdn.example.com/", key=KEY, salt=SALT
        )
        builder = ImgProxyBuilder.from_settings(settings)

        assert builder.host == "https://cdn.example.com"
        assert builder.is_secure
        url = builder.with_resize("fill", 300, 400, True).with_format("jpg").build(URL)
        assert url.startswith(
            "https://cdn.example.com/G-wVPuU_0HLI9b2CMk6FCH464vhvIytv4UeINfVK1Xo/"
        )

    def test_encode_default_from_settings(self) -> None:
        settings = ImgSignSettings(endpoint="https://cdn.example.com", encode=True)
        url = ImgProxyBuilder.from_settings(settings).build(URL)
        assert "/plain/" not in url

    def test_create_builder_picks_dialect(self) -> None:
        legacy = create_builder(
            ImgSignSettings(endpoint="https://cdn.example.com", dialect="legacy")
        )
        keyed = create_builder(ImgSignSettings(endpoint="https://cdn.example.com"))

        assert isinstance(legacy, BasicImgProxyBuilder)
        assert isinstance(keyed, ImgProxyBuilder)

    def test_create_builder_from_environment(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("IMGSIGN_ENDPOINT", "https://cdn.example.com")
        builder = create_builder()
        assert builder.host == "https://cdn.example.com"
        assert not builder.is_secure

    def test_signature_size_from_settings(self) -> None:
        settings = ImgSignSettings(
            endpoint="https://cdn.example.com", key=KEY, salt=SALT, signature_size=8
        )
        url = ImgProxyBuilder.from_settings(settings).build(URL)
        signature = url[len("https://cdn.example.com/") :].split("/", 1)[0]
        assert len(signature) == 11
