"""
qBittorrent Add Proxy – API Layer.

This package provides a thin FastAPI facade that adds torrents to a
qBittorrent daemon under a movies or series save path, and serves the
front-end bundle for every other path.

Quick start (Python)::

    from api.qbittorrent import QBittorrentClient
    from utils.app_config import AppConfig, Directory

    config = AppConfig.from_env()
    client = QBittorrentClient.from_config(config)
    client.add_torrent('magnet:?xt=urn:btih:...', config.get_directory_path(Directory.MOVIES))

Quick start (REST)::

    python -m api
"""

from api.qbittorrent import QBittorrentClient, QBittorrentError

__all__ = [
    'QBittorrentClient',
    'QBittorrentError',
]
