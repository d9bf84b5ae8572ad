"""Core subpackage.

- ini: order-preserving INI file model
- config: typed player settings read from the INI file
- paths: per-user config/data directory lookup
"""
# Import explicitly to avoid F403
from .config import ConfigManager
from .ini import IniHandler
from .parsing import ParseError
from .paths import ConfigPathError, PathResolutionError, get_platform_paths

__all__ = [
    "ConfigManager",
    "IniHandler",
    "ParseError",
    "ConfigPathError",
    "PathResolutionError",
    "get_platform_paths",
]
