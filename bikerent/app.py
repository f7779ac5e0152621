"""
App
-----
"""

import os
from typing import Callable

import sentry_sdk
from aiohttp import web
from aiohttp_apispec import setup_aiohttp_apispec
from sentry_sdk.integrations.aiohttp import AioHttpIntegration

from bikerent import logger, config
from bikerent.config import api_root, server_mode
from bikerent.middleware import validate_token_middleware
from bikerent.models.util import now_ms
from bikerent.service.background.state_syncer import StateSyncer
from bikerent.service.manager.rental_manager import RentalManager
from bikerent.service.manager.state_manager import StateManager
from bikerent.service.notifications import NotificationSink
from bikerent.service.photos import PhotoStore
from bikerent.service.sync import SyncBridge
from bikerent.service.verify_token import AdminTokenVerifier
from bikerent.signals import register_signals
from bikerent.store import JsonFileStore, PersistentStore
from bikerent.version import __version__, name
from bikerent.views import register_views, redoc


def build_app(
    store: PersistentStore = None, sync: SyncBridge = None, *,
    photos_dir: str = None, uploads_dir: str = None, clock: Callable[[], int] = now_ms
):
    """
    Sets up the app and its services.

    :param store: Where the state is kept. Defaults to the configured state file.
    :param sync: The bridge to the remote state authority. Defaults to the configured url, if any.
    """
    app = web.Application(middlewares=[validate_token_middleware])

    if store is None:
        store = JsonFileStore(config.state_file)
    if sync is None and config.sync_url:
        sync = SyncBridge(config.sync_url)

    app['state_manager'] = StateManager(store, sync)
    app['rental_manager'] = RentalManager(
        app['state_manager'], PhotoStore(photos_dir or config.photos_dir), clock=clock
    )
    app['notification_sink'] = NotificationSink(app['state_manager'], app['rental_manager'])
    app['state_syncer'] = StateSyncer(app['state_manager'])
    app['token_verifier'] = AdminTokenVerifier(config.admin_ids)
    app['uploads_dir'] = uploads_dir or config.uploads_dir
    app['sync_interval'] = config.sync_interval

    # set up the background tasks
    register_signals(app)

    # register views
    register_views(app, api_root, "/api")
    app.router.add_get("/", redoc)
    os.makedirs(app["uploads_dir"], exist_ok=True)
    app.router.add_static("/uploads", app["uploads_dir"], show_index=False)

    setup_aiohttp_apispec(
        app=app, title=name, version=__version__, url=f"{api_root}/docs",
        components={
            "securitySchemes": {
                "AdminToken": {
                    "type": "http",
                    "description": "The base64 encoded \"<admin id>:<secret>\" of an administrator",
                    "scheme": "bearer",
                }
            }
        },
    )

    # set up sentry exception tracking
    if server_mode != "development" and config.sentry_dsn:
        logger.info("Starting Sentry Logging")
        sentry_sdk.init(
            dsn=config.sentry_dsn,
            integrations=[AioHttpIntegration()],
            environment=server_mode,
            release=f"{name}@{__version__}"
        )

    return app
