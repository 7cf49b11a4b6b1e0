from .build_layout import build_error_layout, build_layout

__all__ = ["build_error_layout", "build_layout"]
