"""Fluent builders that render and sign proxy URLs."""

from __future__ import annotations

import copy
from typing import ClassVar, Iterable

from typing_extensions import Self

from .core import diagnostics
from .core.constants import GravityType, ImageFormat, ResizeType
from .core.directives import (
    BasicResize,
    Crop,
    Directive,
    DirectiveSet,
    Format,
    Gravity,
    Height,
    Preset,
    Quality,
    Raw,
    Resize,
    Size,
    Width,
)
from .core.errors import ArgumentError
from .core.render import Dialect, join_url, normalize_endpoint, render_path
from .core.settings import ImgSignSettings
from .core.signer import Credentials, Signer


def _keyed_only(directive: Directive) -> Directive:
    # BasicResize shares the "resize" kind but has no keyed token shape
    if isinstance(directive, BasicResize):
        raise ArgumentError(
            "BasicResize is only valid for BasicImgProxyBuilder; use Resize",
            argument="options",
        )
    return directive


class _BaseBuilder:
    """State and build pipeline shared by both dialects.

    Holds the endpoint, the signer and the persistent directive set. Builders
    are mutable and not safe for concurrent configuration; once configured,
    ``build`` calls without an overlay only read state.
    """

    dialect: ClassVar[Dialect] = Dialect.KEYED

    def __init__(self) -> None:
        self._host: str | None = None
        self._signer = Signer()
        self._directives = DirectiveSet()
        self._default_encode = False
        self._warned_insecure = False

    @classmethod
    def from_settings(cls, settings: ImgSignSettings | None = None) -> Self:
        """Create a builder from settings (environment when omitted)."""
        settings = settings or ImgSignSettings()
        builder = cls()
        if settings.endpoint:
            builder.with_endpoint(settings.endpoint)
        builder._signer = Signer(
            settings.credentials(), signature_size=settings.signature_size
        )
        builder._default_encode = settings.encode
        return builder

    # -- configuration ------------------------------------------------------

    def with_endpoint(self, host: str) -> Self:
        """Set the proxy base URL.

        Raises:
            ArgumentError: If host is empty
        """
        self._host = normalize_endpoint(host, self.dialect)
        return self

    def with_credentials(self, key: str, salt: str) -> Self:
        """Set the hex-encoded signing key and salt.

        Raises:
            ArgumentError: If key or salt is empty or has an odd length
            FormatError: If key or salt is not valid hex
        """
        credentials = Credentials.from_hex(key, salt)
        self._signer = Signer(credentials, signature_size=self._signer.signature_size)
        return self

    def with_signature_size(self, size: int) -> Self:
        """Keep only the first ``size`` bytes of the digest (1-32)."""
        self._signer = Signer(self._signer.credentials, signature_size=size)
        return self

    def with_encode(self, encode: bool = True) -> Self:
        """Set whether ``build`` base64url-encodes source URLs by default."""
        self._default_encode = encode
        return self

    def _add(self, directive: Directive) -> Self:
        previous = self._directives.add(directive)
        if previous is not None and previous != directive:
            diagnostics.debug(
                "builder",
                "directive replaced",
                kind=directive.kind,
                previous=previous.token(),
                current=directive.token(),
            )
        return self

    # -- introspection ------------------------------------------------------

    @property
    def host(self) -> str | None:
        return self._host

    @property
    def is_secure(self) -> bool:
        return self._signer.is_secure

    @property
    def directives(self) -> DirectiveSet:
        """A copy of the persistent directive set."""
        return self._directives.copy()

    def copy(self) -> Self:
        """Return an independent builder with the same configuration."""
        clone = copy.copy(self)
        clone._directives = self._directives.copy()
        return clone

    # -- build --------------------------------------------------------------

    def _build(
        self, url: str, directives: DirectiveSet, encode: bool | None
    ) -> str:
        if self._host is None:
            raise ArgumentError(
                "Endpoint is not configured; call with_endpoint() first",
                argument="host",
            )
        if not url:
            raise ArgumentError("Source URL must not be empty", argument="url")

        path = render_path(
            directives,
            url,
            encode=self._default_encode if encode is None else encode,
            dialect=self.dialect,
        )
        if not self._signer.is_secure and not self._warned_insecure:
            self._warned_insecure = True
            diagnostics.warn(
                "signer",
                "building unsigned URLs; configure credentials to sign them",
                host=self._host,
            )
        return join_url(self._host, self._signer.sign(path), path)


class ImgProxyBuilder(_BaseBuilder):
    """Builder for the keyed URL format (``resize:fill:300:400:0:0/...``).

    Example:
        >>> url = (
        ...     ImgProxyBuilder()
        ...     .with_endpoint("https://cdn.example.com")
        ...     .with_credentials("736563726574", "68656C6C6F")
        ...     .with_resize(ResizeType.FILL, 300, 400)
        ...     .with_format(ImageFormat.JPG)
        ...     .build("https://example.com/cat.png")
        ... )
    """

    dialect: ClassVar[Dialect] = Dialect.KEYED

    def with_resize(
        self,
        type: ResizeType | str,
        width: int,
        height: int,
        enlarge: bool = False,
        extend: bool = False,
    ) -> Self:
        """Set resizing type, width, height, enlarge and extend."""
        return self._add(Resize(type, width, height, enlarge, extend))

    def with_size(
        self, width: int, height: int, enlarge: bool = False, extend: bool = False
    ) -> Self:
        return self._add(Size(width, height, enlarge, extend))

    def with_width(self, width: int) -> Self:
        return self._add(Width(width))

    def with_height(self, height: int) -> Self:
        return self._add(Height(height))

    def with_gravity(
        self,
        type: GravityType | str,
        offset_x: float | None = None,
        offset_y: float | None = None,
    ) -> Self:
        return self._add(Gravity(type, offset_x, offset_y))

    def with_crop(
        self, width: float, height: float, gravity: Gravity | None = None
    ) -> Self:
        return self._add(Crop(width, height, gravity))

    def with_quality(self, quality: int) -> Self:
        return self._add(Quality(quality))

    def with_raw(self) -> Self:
        return self._add(Raw())

    def with_format(self, format: ImageFormat | str) -> Self:
        """Set the resulting image format (rendered as the URL extension)."""
        return self._add(Format(format))

    def with_preset(self, *names: str) -> Self:
        """Use one or more server-side presets."""
        return self._add(Preset(*names))

    def with_options(self, *directives: Directive) -> Self:
        """Add arbitrary directives; later ones replace earlier of the same kind.

        Raises:
            ArgumentError: If a directive only exists in the legacy dialect
        """
        for directive in directives:
            self._add(_keyed_only(directive))
        return self

    def build(self, url: str, *, encode: bool | None = None) -> str:
        """Build the signed URL for ``url`` with the configured directives.

        Args:
            url: Source image URL
            encode: Base64url-encode the source URL; defaults to the builder
                setting (plain unless configured otherwise)

        Raises:
            ArgumentError: If url is empty or no endpoint is configured
        """
        return self._build(url, self._directives, encode)

    def build_with(
        self,
        url: str,
        options: Iterable[Directive] | None,
        *,
        encode: bool | None = None,
    ) -> str:
        """Build with extra directives applied for this call only.

        The extras are laid over a copy of the configured directives; a
        ``Format`` among them overrides the configured format. The builder
        itself is left unchanged.

        Raises:
            ArgumentError: If url is empty, options is None or holds a
                legacy-only directive
        """
        if not url:
            raise ArgumentError("Source URL must not be empty", argument="url")
        if options is None:
            raise ArgumentError("options must not be None", argument="options")
        extras = [_keyed_only(directive) for directive in options]
        return self._build(url, self._directives.overlay(extras), encode)


class BasicImgProxyBuilder(_BaseBuilder):
    """Builder for the legacy positional URL format (``fill:300:300:no:1/...``)."""

    dialect: ClassVar[Dialect] = Dialect.LEGACY

    def with_resize(
        self,
        type: ResizeType | str,
        width: int,
        height: int,
        gravity: GravityType | str,
        enlarge: bool = False,
    ) -> Self:
        """Set resizing type, size, gravity and enlarge in one segment."""
        return self._add(BasicResize(type, width, height, gravity, enlarge))

    def with_format(self, format: ImageFormat | str) -> Self:
        return self._add(Format(format))

    def build(self, url: str, *, encode: bool | None = None) -> str:
        """Build the signed URL for ``url``.

        Raises:
            ArgumentError: If url is empty or no endpoint is configured
        """
        return self._build(url, self._directives, encode)


def create_builder(
    settings: ImgSignSettings | None = None,
) -> ImgProxyBuilder | BasicImgProxyBuilder:
    """Create the builder matching ``settings.dialect``."""
    settings = settings or ImgSignSettings()
    if settings.dialect == Dialect.LEGACY.value:
        return BasicImgProxyBuilder.from_settings(settings)
    return ImgProxyBuilder.from_settings(settings)


__all__ = [
    "BasicImgProxyBuilder",
    "ImgProxyBuilder",
    "create_builder",
]
