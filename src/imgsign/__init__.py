"""
Public entrypoints for imgsign.

Build signed URLs for an imgproxy-style image processing proxy:

    from imgsign import ImgProxyBuilder, ResizeType

    url = (
        ImgProxyBuilder()
        .with_endpoint("https://cdn.example.com")
        .with_credentials("736563726574", "68656C6C6F")
        .with_resize(ResizeType.FILL, 300, 400)
        .with_format("jpg")
        .build("https://example.com/cat.png")
    )
"""

from __future__ import annotations

from ._version import __version__
from .builder import BasicImgProxyBuilder, ImgProxyBuilder, create_builder
from .context import get_builder, use_builder
from .core.constants import (
    GravityType,
    ImageFormat,
    ResampleAlgorithm,
    ResizeType,
    WatermarkPosition,
)
from .core.directives import (
    Adjust,
    AutoRotate,
    Background,
    BackgroundAlpha,
    Blur,
    Brightness,
    CacheBuster,
    Contrast,
    Crop,
    Directive,
    DirectiveSet,
    Dpr,
    Enlarge,
    Extend,
    Filename,
    Format,
    GifOptions,
    Gravity,
    Height,
    JpegOptions,
    MaxBytes,
    Padding,
    Page,
    Pixelate,
    PngOptions,
    Preset,
    Quality,
    Raw,
    Resize,
    ResizingAlgorithm,
    ResizingType,
    Rotate,
    Saturation,
    Sharpen,
    Size,
    Style,
    StripColorProfile,
    StripMetadata,
    Trim,
    Unsharpening,
    VideoThumbnailSecond,
    Watermark,
    WatermarkUrl,
    Width,
)
from .core.errors import (
    ArgumentError,
    ErrorCategory,
    FormatError,
    ImgSignError,
    ValidationError,
)
from .core.render import Dialect
from .core.settings import ImgSignSettings
from .core.signer import Credentials, Signer

VERSION = __version__

__all__ = [
    # builders
    "BasicImgProxyBuilder",
    "ImgProxyBuilder",
    "create_builder",
    "get_builder",
    "use_builder",
    # configuration and signing
    "Credentials",
    "Dialect",
    "ImgSignSettings",
    "Signer",
    # errors
    "ArgumentError",
    "ErrorCategory",
    "FormatError",
    "ImgSignError",
    "ValidationError",
    # constants
    "GravityType",
    "ImageFormat",
    "ResampleAlgorithm",
    "ResizeType",
    "WatermarkPosition",
    # directives
    "Adjust",
    "AutoRotate",
    "Background",
    "BackgroundAlpha",
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
    # version
    "VERSION",
    "__version__",
]
