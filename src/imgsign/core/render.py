"""
Path rendering for both URL dialects.

The rendered path starts with ``/`` and is exactly the string the signer
hashes, so it has to be reproducible for a given sequence of builder calls.
"""

from __future__ import annotations

from enum import Enum

from .codec import string_to_urlsafe_b64
from .constants import PLAIN_PREFIX
from .directives import Directive, DirectiveSet
from .errors import ArgumentError


class Dialect(str, Enum):
    """Path dialect understood by the proxy."""

    # Positional tokens without keywords (proxy 1.x)
    LEGACY = "legacy"
    # ``kind:args`` tokens (proxy 2.x and later)
    KEYED = "keyed"


def directive_token(directive: Directive, dialect: Dialect) -> str:
    if dialect is Dialect.LEGACY:
        return directive.positional_token()
    return directive.token()


def render_path(
    directives: DirectiveSet,
    url: str,
    *,
    encode: bool = False,
    dialect: Dialect = Dialect.KEYED,
) -> str:
    """Render the canonical path for ``url`` under ``directives``.

    Plain mode embeds the source literally as ``plain/{url}`` with an
    ``@{ext}`` suffix; encoded mode embeds it as unpadded base64url with a
    ``.{ext}`` suffix taken from the set's format slot.
    """
    if not url:
        raise ArgumentError("Source URL must not be empty", argument="url")

    fmt = directives.format
    segments = [directive_token(directive, dialect) for directive in directives]

    if encode:
        source = string_to_urlsafe_b64(url)
        if fmt is not None:
            source = f"{source}.{fmt.suffix}"
    else:
        source = f"{PLAIN_PREFIX}/{url}"
        if fmt is not None:
            source = f"{source}@{fmt.suffix}"

    segments.append(source)
    return "/" + "/".join(segments)


def normalize_endpoint(host: str, dialect: Dialect) -> str:
    """Normalize a host per dialect.

    Keyed hosts lose any trailing ``/``; legacy hosts keep exactly one.
    """
    if not host:
        raise ArgumentError("Endpoint host must not be empty", argument="host")
    stripped = host.rstrip("/")
    if not stripped:
        raise ArgumentError("Endpoint host must not be empty", argument="host")
    if dialect is Dialect.LEGACY:
        return stripped + "/"
    return stripped


def join_url(host: str, signature: str, path: str) -> str:
    """Assemble ``{host}/{signature}{path}`` with a single ``/`` after host."""
    return f"{host.rstrip('/')}/{signature}{path}"


__all__ = [
    "Dialect",
    "directive_token",
    "join_url",
    "normalize_endpoint",
    "render_path",
]
