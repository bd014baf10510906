#
# config/__init__.py
#
"""
Configuration handling sub-package for minitest_guard.

Exports the loading function, the option normalizer and the core models.
"""

from .loader import DEFAULT_CONFIG_PATH, load_config
from .models import GlobalConfig, GuardConfig, RunnerOptions
from .options import default_bundler, normalize_options

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "GlobalConfig",
    "GuardConfig",
    "RunnerOptions",
    "default_bundler",
    "load_config",
    "normalize_options",
]

# 🔼⚙️
