"""
Deployment configuration for the qBittorrent add proxy.

Settings are read once from environment variables at startup. Every value has
a built-in default, and unparsable numeric values fall back to that default
instead of failing startup.

Usage:
    from utils.app_config import AppConfig, Directory

    config = AppConfig.from_env()
    save_path = config.get_directory_path(Directory.MOVIES)
"""

import logging
import math
import os
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional

logger = logging.getLogger(__name__)


DEFAULT_PORT = 3000
DEFAULT_QBITTORRENT_HOST = '0.0.0.0'
DEFAULT_QBITTORRENT_PORT = 8080
DEFAULT_MOVIES_DIRECTORY = '/media/movies'
DEFAULT_SERIES_DIRECTORY = '/media/series'
DEFAULT_STATIC_DIRECTORY = './wwwroot'
DEFAULT_REQUEST_TIMEOUT = 30.0
DEFAULT_LOG_LEVEL = 'INFO'
MAX_PORT = 65535


class Directory(str, Enum):
    """Destination category a torrent is saved into."""
    MOVIES = 'movies'
    SERIES = 'series'


def _env_port(environ: Mapping[str, str], name: str, default: int) -> int:
    raw = environ.get(name)
    if raw is None:
        return default
    try:
        port = int(raw)
    except ValueError:
        port = -1
    # Same range as an unsigned 16-bit port number
    if not 0 <= port <= MAX_PORT:
        logger.debug(f"Ignoring unparsable {name}={raw!r}, using {default}")
        return default
    return port


def _env_timeout(environ: Mapping[str, str], name: str, default: float) -> float:
    raw = environ.get(name)
    if raw is None:
        return default
    try:
        timeout = float(raw)
    except ValueError:
        timeout = 0.0
    # requests only accepts finite, positive timeouts
    if not math.isfinite(timeout) or timeout <= 0:
        logger.debug(f"Ignoring unparsable {name}={raw!r}, using {default}")
        return default
    return timeout


@dataclass(frozen=True)
class AppConfig:
    """Immutable settings snapshot shared by every request handler."""
    port: int = DEFAULT_PORT
    qbittorrent_host: str = DEFAULT_QBITTORRENT_HOST
    qbittorrent_port: int = DEFAULT_QBITTORRENT_PORT
    movies_directory: str = DEFAULT_MOVIES_DIRECTORY
    series_directory: str = DEFAULT_SERIES_DIRECTORY
    static_directory: str = DEFAULT_STATIC_DIRECTORY
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    log_level: str = DEFAULT_LOG_LEVEL
    log_file: Optional[str] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'AppConfig':
        """
        Build a configuration from environment variables.

        Args:
            environ: Mapping to read from (defaults to ``os.environ``)

        Returns:
            AppConfig: Fully populated configuration, never raises
        """
        if environ is None:
            environ = os.environ

        return cls(
            port=_env_port(environ, 'APP_PORT', DEFAULT_PORT),
            qbittorrent_host=environ.get('QBITTORRENT_HOST', DEFAULT_QBITTORRENT_HOST),
            qbittorrent_port=_env_port(environ, 'QBITTORRENT_PORT', DEFAULT_QBITTORRENT_PORT),
            movies_directory=environ.get('MOVIES_DIRECTORY', DEFAULT_MOVIES_DIRECTORY),
            series_directory=environ.get('SERIES_DIRECTORY', DEFAULT_SERIES_DIRECTORY),
            static_directory=environ.get('STATIC_DIRECTORY', DEFAULT_STATIC_DIRECTORY),
            request_timeout=_env_timeout(environ, 'REQUEST_TIMEOUT', DEFAULT_REQUEST_TIMEOUT),
            log_level=environ.get('LOG_LEVEL', DEFAULT_LOG_LEVEL),
            log_file=environ.get('LOG_FILE') or None,
        )

    @property
    def qbittorrent_base_url(self) -> str:
        return f'http://{self.qbittorrent_host}:{self.qbittorrent_port}'

    def get_directory_path(self, directory: Directory) -> str:
        """Return the configured save path for a destination category."""
        if directory == Directory.MOVIES:
            return self.movies_directory
        if directory == Directory.SERIES:
            return self.series_directory
        raise ValueError(f"Unknown directory: {directory!r}")
