"""
Minimal qBittorrent Web API client used by the add endpoint.

One ``requests.Session`` is created per client and reused for every call, so
connections to the daemon are pooled across requests.
"""

import logging
from typing import Optional

import requests

from utils.app_config import AppConfig

logger = logging.getLogger(__name__)


class QBittorrentError(Exception):
    """Raised when the daemon cannot be reached or rejects a request."""


class QBittorrentClient:
    """Forwards torrent-add requests to a qBittorrent daemon."""

    ADD_TORRENT_PATH = '/api/v2/torrents/add'

    def __init__(self, base_url: str, timeout: Optional[float] = None,
                 session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = session if session is not None else requests.Session()

    @classmethod
    def from_config(cls, config: AppConfig, session: Optional[requests.Session] = None) -> 'QBittorrentClient':
        return cls(config.qbittorrent_base_url, timeout=config.request_timeout, session=session)

    def add_torrent(self, url: str, save_path: str) -> None:
        """
        Add a magnet link or torrent URL to the daemon.

        Args:
            url: Magnet URI or HTTP(S) URL of a .torrent file
            save_path: Directory the daemon downloads into

        Raises:
            QBittorrentError: On connection failure, timeout or an error status
        """
        add_url = f'{self.base_url}{self.ADD_TORRENT_PATH}'
        torrent_data = {
            'urls': url,
            'savepath': save_path,
        }

        try:
            response = self.session.post(add_url, data=torrent_data, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            raise QBittorrentError(f"Error adding torrent to {add_url}: {e}") from e

        logger.debug(f"Daemon accepted torrent with status code: {response.status_code}")

    def close(self) -> None:
        self.session.close()
