"""
Thin FastAPI layer forwarding torrent-add requests to qBittorrent.

Run with::

    uvicorn --factory api.server:create_app --port 3000

or ``python -m api``, which reads ``APP_PORT`` and the other settings from
the environment.
"""

from __future__ import annotations

import os
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from fastapi.staticfiles import StaticFiles
from pydantic import BaseModel

from api.qbittorrent import QBittorrentClient, QBittorrentError
from utils.app_config import AppConfig, Directory
from utils.logging_config import get_logger, setup_logging
from utils.masking import mask_ip_address

logger = get_logger(__name__)

ADD_SUCCESS_MESSAGE = 'Torrent added successfully'
ADD_FAILURE_MESSAGE = 'Failed to add torrent'


# ---------------------------------------------------------------------------
# Request / response schemas (Pydantic models for FastAPI validation)
# ---------------------------------------------------------------------------

class AddTorrentRequest(BaseModel):
    """POST body for the add endpoint."""
    url: str
    directory: Directory


class HealthResponse(BaseModel):
    status: str = 'ok'


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

def health_check():
    """Simple liveness probe. Does not contact the daemon."""
    return HealthResponse()


def add_torrent(payload: AddTorrentRequest, request: Request):
    """Add a torrent to qBittorrent, saving it under the requested directory."""
    config: AppConfig = request.app.state.config
    qbittorrent: QBittorrentClient = request.app.state.qbittorrent

    logger.info(f"Adding torrent: url={payload.url}, directory={payload.directory.value}")
    save_path = config.get_directory_path(payload.directory)

    try:
        qbittorrent.add_torrent(payload.url, save_path)
    except QBittorrentError as exc:
        logger.error(f"Failed to add torrent: {exc}")
        return PlainTextResponse(ADD_FAILURE_MESSAGE, status_code=500)

    return PlainTextResponse(ADD_SUCCESS_MESSAGE, status_code=200)


def create_app(config: Optional[AppConfig] = None,
               qbittorrent: Optional[QBittorrentClient] = None) -> FastAPI:
    """
    Build the application around one configuration snapshot and one client.

    Args:
        config: Settings to serve with (defaults to ``AppConfig.from_env()``)
        qbittorrent: Daemon client (defaults to one built from ``config``)

    Returns:
        FastAPI: App with the API routes and the static fallback mounted
    """
    if config is None:
        config = AppConfig.from_env()
    if qbittorrent is None:
        qbittorrent = QBittorrentClient.from_config(config)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        logger.debug("Closing qBittorrent session")
        qbittorrent.close()

    app = FastAPI(
        title='qBittorrent Add Proxy',
        version='0.1.0',
        description='Adds torrents to a qBittorrent daemon under a movies or series directory.',
        lifespan=lifespan,
    )
    app.state.config = config
    app.state.qbittorrent = qbittorrent

    app.add_api_route('/api/health', health_check, methods=['GET'], response_model=HealthResponse)
    app.add_api_route('/api/qbittorrent/add', add_torrent, methods=['POST'],
                      response_class=PlainTextResponse)

    # Mounted last so the API routes take precedence
    if os.path.isdir(config.static_directory):
        app.mount('/', StaticFiles(directory=config.static_directory, html=True), name='static')
    else:
        logger.warning(f"Static directory not found, serving API only: {config.static_directory}")

    return app


def main():
    config = AppConfig.from_env()
    setup_logging(config.log_file, config.log_level)

    logger.info(
        f"Starting server with port={config.port}, "
        f"qbittorrent=http://{mask_ip_address(config.qbittorrent_host)}:{config.qbittorrent_port}, "
        f"movies={config.movies_directory}, series={config.series_directory}, "
        f"static={config.static_directory}"
    )

    uvicorn.run(create_app(config), host='0.0.0.0', port=config.port, log_config=None)


if __name__ == '__main__':
    main()
