"""FitCoach Suggestions entry point.

Loads environment variables, instantiates the Flask app via the fitcoach_app
factory, verifies the database is reachable and exposes `app` for
`flask --app app run`.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from dotenv import load_dotenv

# Ensure `.env` files are loaded before configuration happens inside `create_app`.
PROJECT_ROOT = Path(__file__).resolve().parent
if os.getenv("FLASK_SKIP_DOTENV") not in {"1", "true", "True"}:
    try:
        load_dotenv(PROJECT_ROOT / ".env")
    except PermissionError:
        pass

from fitcoach_app import create_app, check_database_connection  # noqa: E402  (import after load_dotenv)

app = create_app()

if app.config.get("DB_STARTUP_CHECK", True) and not check_database_connection(app):
    sys.exit(1)


def _resolve_port() -> int:
    """Return the port that should be used when running via `python app.py`."""

    return int(os.getenv("PORT", os.getenv("FLASK_RUN_PORT", 5000)))


if __name__ == "__main__":  # pragma: no cover
    app.run(
        debug=app.config.get("DEBUG", False),
        host=os.getenv("HOST", "0.0.0.0"),
        port=_resolve_port(),
    )
