"""Lazy sliding window iterator adapter."""

from importlib import metadata

from .arrays import windows_array
from .config import WindowConfig, load_window_config
from .logging_utils import configure_logging, log_event
from .windows import Windowed, Windows, windows

try:
    __version__ = metadata.version("windowed-iterator")
except metadata.PackageNotFoundError:  # pragma: no cover - fallback for source checkouts
    __version__ = "0.1.0"

__all__ = [
    "Windows",
    "Windowed",
    "windows",
    "windows_array",
    "WindowConfig",
    "load_window_config",
    "configure_logging",
    "log_event",
    "__version__",
]
