"""Caller-owned shared builder handle.

Applications that configure one builder at startup can bind it for a scope
instead of keeping it in a module global. The binding lives in a
``ContextVar``, so it follows asyncio tasks and ``contextvars.copy_context``.

Example:
    >>> from imgsign import ImgProxyBuilder
    >>> from imgsign.context import get_builder, use_builder
    >>>
    >>> builder = ImgProxyBuilder().with_endpoint("https://cdn.example.com")
    >>> with use_builder(builder):
    ...     url = get_builder().build("https://example.com/cat.png")
"""

from __future__ import annotations

import contextvars
from contextlib import contextmanager
from typing import TYPE_CHECKING, Iterator, Union

from .core.errors import ArgumentError

if TYPE_CHECKING:
    from .builder import BasicImgProxyBuilder, ImgProxyBuilder

    AnyBuilder = Union[ImgProxyBuilder, BasicImgProxyBuilder]

__all__ = ["get_builder", "use_builder"]

_current_builder: contextvars.ContextVar[AnyBuilder | None] = contextvars.ContextVar(
    "imgsign_builder", default=None
)


@contextmanager
def use_builder(builder: AnyBuilder) -> Iterator[AnyBuilder]:
    """Bind ``builder`` as the current builder for the enclosed block."""
    if builder is None:
        raise ArgumentError("builder must not be None", argument="builder")
    token = _current_builder.set(builder)
    try:
        yield builder
    finally:
        _current_builder.reset(token)


def get_builder() -> AnyBuilder:
    """Return the bound builder.

    Raises:
        ArgumentError: If no builder is bound in the current context
    """
    builder = _current_builder.get()
    if builder is None:
        raise ArgumentError(
            "No builder bound; wrap the call in use_builder()", argument="builder"
        )
    return builder
