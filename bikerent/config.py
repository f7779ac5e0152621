import os

server_mode = os.getenv("SERVER_MODE", "development")
"""The operational mode of the server."""

api_root = "/api/v1"
"""The base url for the api."""

state_file = os.getenv("STATE_FILE", os.path.join("data", "state.json"))
"""The JSON file the application state is persisted to."""

photos_dir = os.getenv("PHOTOS_DIR", os.path.join("data", "photos"))
"""Where return photos are copied before a rental is closed."""

uploads_dir = os.getenv("UPLOADS_DIR", os.path.join("data", "uploads"))
"""Where files posted to the upload endpoint are stored."""

sync_url = os.getenv("SYNC_URL") or None
"""The base url of the remote state authority, if any."""

sync_interval = float(os.getenv("SYNC_INTERVAL", "60"))
"""How often (in seconds) a failed push is retried."""

admin_ids = tuple(admin for admin in os.getenv("ADMIN_IDS", "admin_1").split(",") if admin)
"""The admin ids that the base64 admin token may carry."""

sentry_dsn = os.getenv("SENTRY_DSN")
"""The sentry DSN used outside of development."""
