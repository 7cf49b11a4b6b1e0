"""
Top-level package for the dataset explorer.

This package exposes the core architecture (domain, views, UI adapters).
Most code should import from submodules such as:
    data_explorer.core
    data_explorer.views
    data_explorer.ui
"""

__all__: list[str] = []
