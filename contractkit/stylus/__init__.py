"""Stylus (Rust) dialect: access control, builder and emitter."""

from .access import Access, require_access_control, set_access_control
from .build import StylusOptions, build_stylus
from .emitter import StylusEmitter

__all__ = [
    "Access",
    "StylusEmitter",
    "StylusOptions",
    "build_stylus",
    "require_access_control",
    "set_access_control",
]
