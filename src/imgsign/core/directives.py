"""
Processing directives and the keyed container that holds them.

Each directive is an immutable value validated when it is constructed. It
renders to a canonical token: ``kind:arg1:arg2`` for the keyed dialect, or
just ``arg1:arg2`` for the legacy positional dialect. Trailing empty
arguments are omitted from both forms.

``DirectiveSet`` keeps at most one directive per kind in insertion order and
holds the ``Format`` directive in a dedicated slot, since the renderer turns
it into a file-extension suffix instead of a path segment.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, ClassVar, Iterable, Iterator, TypeVar

from .codec import format_bool, format_number, format_text
from .codec import string_to_urlsafe_b64
from .constants import GravityType, ImageFormat, ResampleAlgorithm, ResizeType
from .constants import WatermarkPosition
from .errors import ArgumentError, ValidationError

D = TypeVar("D", bound="Directive")

# -- validation helpers -------------------------------------------------------


def _require_number(name: str, value: Any, *, integral: bool = False) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(
            f"{name} must be a number, got {type(value).__name__}",
            field_name=name,
            field_value=value,
        )
    if not math.isfinite(value):
        raise ValidationError(
            f"{name} must be finite, got {value}", field_name=name, field_value=value
        )
    if integral:
        _require_int(name, value)


def _require_int(name: str, value: int | float) -> None:
    # Integral floats such as 90.0 render as "90" and are accepted
    if isinstance(value, float) and not value.is_integer():
        raise ValidationError(
            f"{name} must be an integer, got {value}",
            field_name=name,
            field_value=value,
        )


def _require_min(
    name: str, value: Any, minimum: float, *, integral: bool = False
) -> None:
    _require_number(name, value, integral=integral)
    if value < minimum:
        raise ValidationError(
            f"{name} must be >= {minimum}, got {value}",
            field_name=name,
            field_value=value,
        )


def _require_positive(name: str, value: Any, *, integral: bool = False) -> None:
    _require_number(name, value, integral=integral)
    if value <= 0:
        raise ValidationError(
            f"{name} must be > 0, got {value}", field_name=name, field_value=value
        )


def _require_range(
    name: str, value: Any, low: float, high: float, *, integral: bool = False
) -> None:
    _require_number(name, value, integral=integral)
    if not low <= value <= high:
        raise ValidationError(
            f"{name} must be between {low} and {high}, got {value}",
            field_name=name,
            field_value=value,
        )


def _require_text(name: str, value: Any) -> None:
    if not format_text(value):
        raise ValidationError(
            f"{name} must not be empty", field_name=name, field_value=value
        )


# -- base ---------------------------------------------------------------------


@dataclass(frozen=True)
class Directive:
    """Base class for all processing directives."""

    kind: ClassVar[str] = ""

    def args(self) -> list[str]:
        """Return the rendered arguments in proxy order."""
        return []

    def _trimmed_args(self) -> list[str]:
        parts = self.args()
        while parts and parts[-1] == "":
            parts.pop()
        return parts

    def token(self) -> str:
        """Keyed-dialect token, e.g. ``resize:fill:300:400:0:0``."""
        return ":".join([self.kind, *self._trimmed_args()])

    def positional_token(self) -> str:
        """Legacy-dialect token: the arguments without the keyword."""
        return ":".join(self._trimmed_args())

    def __str__(self) -> str:
        return self.token()


# -- geometry -----------------------------------------------------------------


@dataclass(frozen=True)
class Resize(Directive):
    """Meta-directive for resizing type, width, height, enlarge and extend."""

    kind: ClassVar[str] = "resize"

    type: ResizeType | str
    width: int
    height: int
    enlarge: bool = False
    extend: bool = False

    def __post_init__(self) -> None:
        _require_text("type", self.type)
        _require_min("width", self.width, 0, integral=True)
        _require_min("height", self.height, 0, integral=True)

    def args(self) -> list[str]:
        return [
            format_text(self.type),
            format_number(self.width),
            format_number(self.height),
            format_bool(self.enlarge),
            format_bool(self.extend),
        ]


@dataclass(frozen=True)
class BasicResize(Directive):
    """Resize directive of the legacy positional URL format.

    Renders as ``{type}:{width}:{height}:{gravity}:{enlarge}``. Both
    dimensions must be strictly positive.
    """

    kind: ClassVar[str] = "resize"

    type: ResizeType | str
    width: int
    height: int
    gravity: GravityType | str
    enlarge: bool = False

    def __post_init__(self) -> None:
        _require_text("type", self.type)
        _require_positive("width", self.width, integral=True)
        _require_positive("height", self.height, integral=True)
        _require_text("gravity", self.gravity)

    def args(self) -> list[str]:
        return [
            format_text(self.type),
            format_number(self.width),
            format_number(self.height),
            format_text(self.gravity),
            format_bool(self.enlarge),
        ]


@dataclass(frozen=True)
class ResizingType(Directive):
    kind: ClassVar[str] = "resizing_type"

    type: ResizeType | str

    def __post_init__(self) -> None:
        _require_text("type", self.type)

    def args(self) -> list[str]:
        return [format_text(self.type)]


@dataclass(frozen=True)
class ResizingAlgorithm(Directive):
    kind: ClassVar[str] = "resizing_algorithm"

    algorithm: ResampleAlgorithm | str

    def __post_init__(self) -> None:
        _require_text("algorithm", self.algorithm)

    def args(self) -> list[str]:
        return [format_text(self.algorithm)]


@dataclass(frozen=True)
class Size(Directive):
    """Meta-directive for width, height, enlarge and extend."""

    kind: ClassVar[str] = "size"

    width: int
    height: int
    enlarge: bool = False
    extend: bool = False

    def __post_init__(self) -> None:
        _require_min("width", self.width, 0, integral=True)
        _require_min("height", self.height, 0, integral=True)

    def args(self) -> list[str]:
        return [
            format_number(self.width),
            format_number(self.height),
            format_bool(self.enlarge),
            format_bool(self.extend),
        ]


@dataclass(frozen=True)
class Width(Directive):
    """Resulting width; ``0`` derives it from the height and aspect ratio."""

    kind: ClassVar[str] = "width"

    width: int

    def __post_init__(self) -> None:
        _require_min("width", self.width, 0, integral=True)

    def args(self) -> list[str]:
        return [format_number(self.width)]


@dataclass(frozen=True)
class Height(Directive):
    """Resulting height; ``0`` derives it from the width and aspect ratio."""

    kind: ClassVar[str] = "height"

    height: int

    def __post_init__(self) -> None:
        _require_min("height", self.height, 0, integral=True)

    def args(self) -> list[str]:
        return [format_number(self.height)]


@dataclass(frozen=True)
class Dpr(Directive):
    kind: ClassVar[str] = "dpr"

    dpr: float

    def __post_init__(self) -> None:
        _require_positive("dpr", self.dpr)

    def args(self) -> list[str]:
        return [format_number(self.dpr)]


@dataclass(frozen=True)
class Enlarge(Directive):
    kind: ClassVar[str] = "enlarge"

    enlarge: bool

    def args(self) -> list[str]:
        return [format_bool(self.enlarge)]


@dataclass(frozen=True)
class Gravity(Directive):
    """Guides the proxy when parts of the image have to be cut off."""

    kind: ClassVar[str] = "gravity"

    type: GravityType | str
    offset_x: float | None = None
    offset_y: float | None = None

    def __post_init__(self) -> None:
        _require_text("type", self.type)
        if self.offset_x is not None:
            _require_number("offset_x", self.offset_x)
        if self.offset_y is not None:
            _require_number("offset_y", self.offset_y)

    @classmethod
    def smart(cls) -> Gravity:
        """Let the proxy detect the most interesting part of the image."""
        return cls(GravityType.SMART)

    @classmethod
    def focus_point(cls, x: float, y: float) -> Gravity:
        """Center the result on relative coordinates, both within ``[0, 1]``."""
        _require_range("x", x, 0, 1)
        _require_range("y", y, 0, 1)
        return cls(GravityType.FOCUS_POINT, x, y)

    @property
    def is_smart(self) -> bool:
        return format_text(self.type) == GravityType.SMART.value

    def args(self) -> list[str]:
        if self.offset_x is None and self.offset_y is None:
            return [format_text(self.type)]
        return [
            format_text(self.type),
            format_text(self.offset_x),
            format_text(self.offset_y),
        ]


@dataclass(frozen=True)
class Extend(Directive):
    """Extend the image to the requested size; smart gravity is not allowed."""

    kind: ClassVar[str] = "extend"

    extend: bool
    gravity: Gravity | None = None

    def __post_init__(self) -> None:
        if self.gravity is not None and self.gravity.is_smart:
            raise ValidationError(
                "extend does not support smart gravity",
                field_name="gravity",
                field_value=self.gravity.token(),
            )

    def args(self) -> list[str]:
        parts = [format_bool(self.extend)]
        if self.gravity is not None:
            parts.extend(self.gravity.args())
        return parts


@dataclass(frozen=True)
class Crop(Directive):
    """Area of the source image to process, applied before resizing."""

    kind: ClassVar[str] = "crop"

    width: float
    height: float
    gravity: Gravity | None = None

    def __post_init__(self) -> None:
        _require_min("width", self.width, 0)
        _require_min("height", self.height, 0)

    def args(self) -> list[str]:
        parts = [format_number(self.width), format_number(self.height)]
        if self.gravity is not None:
            parts.extend(self.gravity.args())
        return parts


@dataclass(frozen=True)
class Padding(Directive):
    kind: ClassVar[str] = "padding"

    top: int
    right: int
    bottom: int
    left: int

    def __post_init__(self) -> None:
        for name in ("top", "right", "bottom", "left"):
            _require_min(name, getattr(self, name), 0, integral=True)

    def args(self) -> list[str]:
        return [
            format_number(self.top),
            format_number(self.right),
            format_number(self.bottom),
            format_number(self.left),
        ]


@dataclass(frozen=True)
class Trim(Directive):
    """Remove the surrounding background."""

    kind: ClassVar[str] = "trim"

    threshold: float
    color: str | None = None
    equal_horizontal: bool = False
    equal_vertical: bool = False

    def __post_init__(self) -> None:
        _require_min("threshold", self.threshold, 0)

    def args(self) -> list[str]:
        return [
            format_number(self.threshold),
            format_text(self.color),
            format_bool(self.equal_horizontal),
            format_bool(self.equal_vertical),
        ]


@dataclass(frozen=True)
class Rotate(Directive):
    kind: ClassVar[str] = "rotate"

    angle: int

    def __post_init__(self) -> None:
        _require_min("angle", self.angle, 0, integral=True)
        if self.angle % 90 != 0:
            raise ValidationError(
                f"angle must be a multiple of 90, got {self.angle}",
                field_name="angle",
                field_value=self.angle,
            )

    def args(self) -> list[str]:
        return [format_number(self.angle)]


@dataclass(frozen=True)
class AutoRotate(Directive):
    kind: ClassVar[str] = "auto_rotate"

    auto_rotate: bool

    def args(self) -> list[str]:
        return [format_bool(self.auto_rotate)]


# -- output -------------------------------------------------------------------


@dataclass(frozen=True)
class Quality(Directive):
    """Resulting image quality, in percent."""

    kind: ClassVar[str] = "quality"

    quality: int

    def __post_init__(self) -> None:
        _require_range("quality", self.quality, 0, 100, integral=True)

    def args(self) -> list[str]:
        return [format_number(self.quality)]


@dataclass(frozen=True)
class MaxBytes(Directive):
    """Degrade quality until the result fits into this many bytes."""

    kind: ClassVar[str] = "max_bytes"

    max_bytes: int

    def __post_init__(self) -> None:
        _require_positive("max_bytes", self.max_bytes, integral=True)

    def args(self) -> list[str]:
        return [format_number(self.max_bytes)]


@dataclass(frozen=True)
class Format(Directive):
    """Resulting image format.

    Held outside the general directive mapping and rendered as the URL's
    extension (``@jpg`` in plain mode, ``.jpg`` in encoded mode).
    """

    kind: ClassVar[str] = "format"

    extension: ImageFormat | str

    def __post_init__(self) -> None:
        _require_text("extension", self.extension)

    @property
    def suffix(self) -> str:
        return format_text(self.extension)

    def args(self) -> list[str]:
        return [self.suffix]


@dataclass(frozen=True)
class JpegOptions(Directive):
    kind: ClassVar[str] = "jpeg_options"

    progressive: bool = False
    no_subsample: bool = False
    trellis_quant: bool = False
    overshoot_deringing: bool = False
    optimize_scans: bool = False
    quant_table: int = 0

    def __post_init__(self) -> None:
        _require_range("quant_table", self.quant_table, 0, 8, integral=True)

    def args(self) -> list[str]:
        return [
            format_bool(self.progressive),
            format_bool(self.no_subsample),
            format_bool(self.trellis_quant),
            format_bool(self.overshoot_deringing),
            format_bool(self.optimize_scans),
            format_number(self.quant_table),
        ]


@dataclass(frozen=True)
class PngOptions(Directive):
    kind: ClassVar[str] = "png_options"

    interlaced: bool = False
    quantize: bool = False
    quantization_colors: int = 255

    def __post_init__(self) -> None:
        _require_range(
            "quantization_colors", self.quantization_colors, 1, 255, integral=True
        )

    def args(self) -> list[str]:
        return [
            format_bool(self.interlaced),
            format_bool(self.quantize),
            format_number(self.quantization_colors),
        ]


@dataclass(frozen=True)
class GifOptions(Directive):
    kind: ClassVar[str] = "gif_options"

    optimize_frames: bool = False
    optimize_transparency: bool = False

    def args(self) -> list[str]:
        return [
            format_bool(self.optimize_frames),
            format_bool(self.optimize_transparency),
        ]


@dataclass(frozen=True)
class StripMetadata(Directive):
    kind: ClassVar[str] = "strip_metadata"

    strip: bool = True

    def args(self) -> list[str]:
        return [format_bool(self.strip)]


@dataclass(frozen=True)
class StripColorProfile(Directive):
    kind: ClassVar[str] = "strip_color_profile"

    strip: bool = True

    def args(self) -> list[str]:
        return [format_bool(self.strip)]


@dataclass(frozen=True)
class Filename(Directive):
    """Filename for the ``Content-Disposition`` header."""

    kind: ClassVar[str] = "filename"

    filename: str

    def __post_init__(self) -> None:
        _require_text("filename", self.filename)

    def args(self) -> list[str]:
        return [self.filename]


# -- colour and effects -------------------------------------------------------


@dataclass(frozen=True)
class Background(Directive):
    """Fill colour, either a hex string or an RGB triple (see ``rgb``)."""

    kind: ClassVar[str] = "background"

    color: str | None = None
    r: int | None = None
    g: int | None = None
    b: int | None = None

    def __post_init__(self) -> None:
        channels = (self.r, self.g, self.b)
        if self.color is not None:
            _require_text("color", self.color)
            if any(ch is not None for ch in channels):
                raise ValidationError(
                    "background takes either a hex color or RGB channels",
                    field_name="color",
                    field_value=self.color,
                )
            return
        for name, value in zip(("r", "g", "b"), channels):
            if value is None:
                raise ValidationError(
                    f"{name} is required when no hex color is given",
                    field_name=name,
                    field_value=value,
                )
            _require_range(name, value, 0, 255, integral=True)

    @classmethod
    def rgb(cls, r: int, g: int, b: int) -> Background:
        return cls(r=r, g=g, b=b)

    def args(self) -> list[str]:
        if self.color is not None:
            return [self.color]
        return [format_text(self.r), format_text(self.g), format_text(self.b)]


@dataclass(frozen=True)
class BackgroundAlpha(Directive):
    kind: ClassVar[str] = "bga"

    alpha: float

    def __post_init__(self) -> None:
        _require_range("alpha", self.alpha, 0, 1)

    def args(self) -> list[str]:
        return [format_number(self.alpha)]


@dataclass(frozen=True)
class Adjust(Directive):
    """Meta-directive for brightness, contrast and saturation."""

    kind: ClassVar[str] = "adjust"

    brightness: int = 0
    contrast: int = 0
    saturation: int = 0

    def __post_init__(self) -> None:
        for name in ("brightness", "contrast", "saturation"):
            _require_range(name, getattr(self, name), -255, 255, integral=True)

    def args(self) -> list[str]:
        return [
            format_number(self.brightness),
            format_number(self.contrast),
            format_number(self.saturation),
        ]


@dataclass(frozen=True)
class Brightness(Directive):
    kind: ClassVar[str] = "brightness"

    brightness: int

    def __post_init__(self) -> None:
        _require_range("brightness", self.brightness, -255, 255, integral=True)

    def args(self) -> list[str]:
        return [format_number(self.brightness)]


@dataclass(frozen=True)
class Contrast(Directive):
    kind: ClassVar[str] = "contrast"

    contrast: int

    def __post_init__(self) -> None:
        _require_range("contrast", self.contrast, -255, 255, integral=True)

    def args(self) -> list[str]:
        return [format_number(self.contrast)]


@dataclass(frozen=True)
class Saturation(Directive):
    kind: ClassVar[str] = "saturation"

    saturation: int

    def __post_init__(self) -> None:
        _require_range("saturation", self.saturation, -255, 255, integral=True)

    def args(self) -> list[str]:
        return [format_number(self.saturation)]


@dataclass(frozen=True)
class Blur(Directive):
    """Gaussian blur; ``sigma`` is the size of the mask."""

    kind: ClassVar[str] = "blur"

    sigma: float

    def __post_init__(self) -> None:
        _require_min("sigma", self.sigma, 0)

    def args(self) -> list[str]:
        return [format_number(self.sigma)]


@dataclass(frozen=True)
class Sharpen(Directive):
    kind: ClassVar[str] = "sharpen"

    sigma: float

    def __post_init__(self) -> None:
        _require_min("sigma", self.sigma, 0)

    def args(self) -> list[str]:
        return [format_number(self.sigma)]


@dataclass(frozen=True)
class Pixelate(Directive):
    kind: ClassVar[str] = "pixelate"

    size: float

    def __post_init__(self) -> None:
        _require_min("size", self.size, 0)

    def args(self) -> list[str]:
        return [format_number(self.size)]


@dataclass(frozen=True)
class Unsharpening(Directive):
    kind: ClassVar[str] = "unsharpening"

    mode: str
    weight: float
    divider: float

    def __post_init__(self) -> None:
        _require_text("mode", self.mode)
        _require_min("weight", self.weight, 0)
        _require_min("divider", self.divider, 0)

    def args(self) -> list[str]:
        return [
            self.mode,
            format_number(self.weight),
            format_number(self.divider),
        ]


# -- watermarks and misc ------------------------------------------------------


@dataclass(frozen=True)
class Watermark(Directive):
    """Put a watermark on the processed image."""

    kind: ClassVar[str] = "watermark"

    opacity: float
    position: WatermarkPosition | str | None = None
    offset_x: float | None = None
    offset_y: float | None = None
    scale: float | None = None

    def __post_init__(self) -> None:
        _require_range("opacity", self.opacity, 0, 1)
        if self.offset_x is not None:
            _require_number("offset_x", self.offset_x)
        if self.offset_y is not None:
            _require_number("offset_y", self.offset_y)
        if self.scale is not None:
            _require_min("scale", self.scale, 0)

    def args(self) -> list[str]:
        return [
            format_number(self.opacity),
            format_text(self.position),
            format_text(self.offset_x),
            format_text(self.offset_y),
            format_text(self.scale),
        ]


@dataclass(frozen=True)
class WatermarkUrl(Directive):
    """Use the image at ``url`` as the watermark; rendered base64url-encoded."""

    kind: ClassVar[str] = "watermark_url"

    url: str

    def __post_init__(self) -> None:
        _require_text("url", self.url)

    def args(self) -> list[str]:
        return [string_to_urlsafe_b64(self.url)]


@dataclass(frozen=True)
class Style(Directive):
    """CSS prepended to the ``<svg>`` node of SVG sources."""

    kind: ClassVar[str] = "style"

    style: str

    def __post_init__(self) -> None:
        _require_text("style", self.style)

    def args(self) -> list[str]:
        return [string_to_urlsafe_b64(self.style)]


@dataclass(frozen=True)
class Page(Directive):
    """Page (PDF, TIFF) or frame (GIF, WebP) of the source to use."""

    kind: ClassVar[str] = "page"

    page: int

    def __post_init__(self) -> None:
        _require_min("page", self.page, 0, integral=True)

    def args(self) -> list[str]:
        return [format_number(self.page)]


@dataclass(frozen=True)
class VideoThumbnailSecond(Directive):
    kind: ClassVar[str] = "video_thumbnail_second"

    seconds: int

    def __post_init__(self) -> None:
        _require_min("seconds", self.seconds, 0, integral=True)

    def args(self) -> list[str]:
        return [format_number(self.seconds)]


@dataclass(frozen=True)
class CacheBuster(Directive):
    """Opaque token that changes the URL without changing the result."""

    kind: ClassVar[str] = "cachebuster"

    token_value: str

    def __post_init__(self) -> None:
        _require_text("token_value", self.token_value)

    def args(self) -> list[str]:
        return [self.token_value]


@dataclass(frozen=True, init=False)
class Preset(Directive):
    """One or more server-side presets, applied in the given order."""

    kind: ClassVar[str] = "preset"

    names: tuple[str, ...] = field(default=())

    def __init__(self, *names: str) -> None:
        if not names:
            raise ValidationError(
                "preset requires at least one name", field_name="names"
            )
        for name in names:
            _require_text("names", name)
        object.__setattr__(self, "names", tuple(names))

    def args(self) -> list[str]:
        return list(self.names)


@dataclass(frozen=True)
class Raw(Directive):
    """Skip processing and return the source as-is."""

    kind: ClassVar[str] = "raw"


# -- container ----------------------------------------------------------------


class DirectiveSet:
    """Directives keyed by kind, plus the privileged format slot.

    Adding a directive whose kind is already present replaces the stored one
    in place: the position of the first insertion is kept and the later value
    wins. Iteration follows that order, which is what the renderer signs.
    """

    def __init__(self, directives: Iterable[Directive] = ()) -> None:
        self._items: dict[str, Directive] = {}
        self.format: Format | None = None
        self.extend(directives)

    def add(self, directive: Directive) -> Directive | None:
        """Insert ``directive`` and return the one it replaced, if any."""
        if directive is None:
            raise ArgumentError("directive must not be None", argument="directive")
        if not isinstance(directive, Directive):
            raise ArgumentError(
                f"Expected a Directive, got {type(directive).__name__}",
                argument="directive",
            )
        if isinstance(directive, Format):
            previous: Directive | None = self.format
            self.format = directive
            return previous
        key = directive.kind
        previous = self._items.get(key)
        self._items[key] = directive
        return previous

    def extend(self, directives: Iterable[Directive]) -> None:
        for directive in directives:
            self.add(directive)

    def copy(self) -> DirectiveSet:
        clone = DirectiveSet()
        clone._items = dict(self._items)
        clone.format = self.format
        return clone

    def overlay(self, directives: Iterable[Directive]) -> DirectiveSet:
        """Return a copy with ``directives`` applied on top; self is untouched."""
        clone = self.copy()
        clone.extend(directives)
        return clone

    def get(self, kind: type[D]) -> D | None:
        """Return the stored directive of class ``kind``, if any."""
        if kind is Format:
            return self.format  # type: ignore[return-value]
        stored = self._items.get(kind.kind)
        return stored if isinstance(stored, kind) else None

    def tokens(self) -> list[str]:
        return [directive.token() for directive in self]

    def __iter__(self) -> Iterator[Directive]:
        return iter(self._items.values())

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, kind: object) -> bool:
        if kind is Format or kind == Format.kind:
            return self.format is not None
        if isinstance(kind, str):
            return kind in self._items
        if isinstance(kind, type) and issubclass(kind, Directive):
            return self.get(kind) is not None
        return False

    def __repr__(self) -> str:
        return f"DirectiveSet(tokens={self.tokens()!r}, format={self.format!r})"


__all__ = [
    "Adjust",
    "AutoRotate",
    "Background",
    "BackgroundAlpha",
    "BasicResize",
    "Blur",
    "Brightness",
    "CacheBuster",
    "Contrast",
    "Crop",
    "Directive",
    "DirectiveSet",
    "Dpr",
    "Enlarge",
    "Extend",
    "Filename",
    "Format",
    "GifOptions",
    "Gravity",
    "Height",
    "JpegOptions",
    "MaxBytes",
    "Padding",
    "Page",
    "Pixelate",
    "PngOptions",
    "Preset",
    "Quality",
    "Raw",
    "Resize",
    "ResizingAlgorithm",
    "ResizingType",
    "Rotate",
    "Saturation",
    "Sharpen",
    "Size",
    "Style",
    "StripColorProfile",
    "StripMetadata",
    "Trim",
    "Unsharpening",
    "VideoThumbnailSecond",
    "Watermark",
    "WatermarkUrl",
    "Width",
]
