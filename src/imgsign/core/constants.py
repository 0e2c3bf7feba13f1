"""Well-known argument values understood by the image proxy."""

from __future__ import annotations

from enum import Enum


class ResizeType(str, Enum):
    """How the source image is fitted into the requested size."""

    FIT = "fit"
    FILL = "fill"
    FILL_DOWN = "fill-down"
    FORCE = "force"
    AUTO = "auto"


class ResampleAlgorithm(str, Enum):
    NEAREST = "nearest"
    LINEAR = "linear"
    CUBIC = "cubic"
    LANCZOS2 = "lanczos2"
    LANCZOS3 = "lanczos3"


class GravityType(str, Enum):
    """Anchor used when parts of the image have to be cut off."""

    NORTH = "no"
    SOUTH = "so"
    EAST = "ea"
    WEST = "we"
    NORTH_EAST = "noea"
    NORTH_WEST = "nowe"
    SOUTH_EAST = "soea"
    SOUTH_WEST = "sowe"
    CENTER = "ce"
    SMART = "sm"
    FOCUS_POINT = "fp"


class WatermarkPosition(str, Enum):
    NORTH = "no"
    SOUTH = "so"
    EAST = "ea"
    WEST = "we"
    NORTH_EAST = "noea"
    NORTH_WEST = "nowe"
    SOUTH_EAST = "soea"
    SOUTH_WEST = "sowe"
    CENTER = "ce"
    REPLICATE = "re"


class ImageFormat(str, Enum):
    """Output formats; the value is the file extension used in URLs."""

    JPG = "jpg"
    PNG = "png"
    WEBP = "webp"
    AVIF = "avif"
    GIF = "gif"
    ICO = "ico"
    SVG = "svg"
    BMP = "bmp"
    TIFF = "tiff"
    MP4 = "mp4"


INSECURE_SIGNATURE = "insecure"
PLAIN_PREFIX = "plain"

__all__ = [
    "GravityType",
    "INSECURE_SIGNATURE",
    "ImageFormat",
    "PLAIN_PREFIX",
    "ResampleAlgorithm",
    "ResizeType",
    "WatermarkPosition",
]
