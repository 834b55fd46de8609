"""fitcoach_app package – application factory and blueprint registration."""

from __future__ import annotations

import os
from datetime import datetime, timedelta, timezone
from time import perf_counter

import click
from flask import Flask, g, request
from sqlalchemy import event, text

from config import resolve_config
from .blueprints import BLUEPRINTS
from .extensions import cors, db, migrate
from .logging_config import configure_logging, assign_request_id
from .metrics import record_request

DB_CHECK_SQL = "SELECT 1"


def create_app(config_name: str | None = None) -> Flask:
    """Application factory used by both CLI and runtime servers."""

    app = Flask(__name__)
    _configure_app(app, config_name)
    configure_logging(app)
    _register_extensions(app)
    _register_blueprints(app)
    _register_shellcontext(app)
    _register_cli(app)
    _register_bootstrap(app)
    _register_request_hooks(app)

    return app


def _configure_app(app: Flask, config_name: str | None) -> None:
    env_name = config_name or os.getenv("FLASK_CONFIG")
    config_obj = resolve_config(env_name)
    app.config.from_object(config_obj)


def _register_extensions(app: Flask) -> None:
    db.init_app(app)
    migrate.init_app(app, db)
    _configure_sqlite_engine(app)
    cors.init_app(
        app,
        resources={r"/generate-suggestion": {"origins": app.config.get("CORS_ORIGINS", "*")}},
    )


def _register_blueprints(app: Flask) -> None:
    for blueprint, prefix in BLUEPRINTS:
        app.register_blueprint(blueprint, url_prefix=prefix)


def _register_shellcontext(app: Flask) -> None:
    # Lazy import inside function to avoid circular dependencies.
    from . import models

    @app.shell_context_processor
    def shell_context():
        return {"db": db, "models": models}


def _register_bootstrap(app: Flask) -> None:
    @app.before_request
    def ensure_schema():
        if app.config.get("_SCHEMA_READY"):
            return
        try:
            _ensure_schema(app)
            app.config["_SCHEMA_READY"] = True
        except Exception as exc:  # pragma: no cover - schema owned by migrations
            app.logger.debug("Schema bootstrap skipped: %s", exc)
            app.config["_SCHEMA_READY"] = False


def _register_request_hooks(app: Flask) -> None:
    @app.before_request
    def start_request():
        assign_request_id()
        g.request_started_at = perf_counter()

    @app.after_request
    def finalize(response):
        request_id = getattr(g, "request_id", None)
        if request_id:
            response.headers["X-Request-ID"] = request_id
        started = getattr(g, "request_started_at", None)
        latency = perf_counter() - started if started else 0.0
        endpoint = request.endpoint or request.path
        record_request(request.method, endpoint, response.status_code, latency)
        return response


def _configure_sqlite_engine(app: Flask) -> None:
    uri = app.config.get("SQLALCHEMY_DATABASE_URI", "")
    if not uri.startswith("sqlite") or ":memory:" in uri:
        return
    busy_timeout_ms = int(app.config.get("SQLITE_BUSY_TIMEOUT_MS", 15000))

    with app.app_context():
        engine = db.engine

        @event.listens_for(engine, "connect")
        def _set_sqlite_pragmas(dbapi_connection, connection_record):  # pragma: no cover
            cursor = dbapi_connection.cursor()
            try:
                cursor.execute("PRAGMA journal_mode=WAL;")
                cursor.execute(f"PRAGMA busy_timeout={busy_timeout_ms};")
                cursor.execute("PRAGMA synchronous=NORMAL;")
            finally:
                cursor.close()


def _ensure_schema(app: Flask) -> None:
    from . import models  # noqa: F401

    with app.app_context():
        db.create_all()


def check_database_connection(app: Flask) -> bool:
    """Run a trivial query against the configured database."""

    with app.app_context():
        try:
            db.session.execute(text(DB_CHECK_SQL))
        except Exception:
            app.logger.exception("Database connection failed")
            db.session.rollback()
            return False
    app.logger.info("Database connection successful!")
    return True


def _register_cli(app: Flask) -> None:
    @app.cli.command("check-db")
    def check_db_command() -> None:
        """Verify the database is reachable."""

        if not check_database_connection(app):
            raise click.ClickException("Database connection failed")
        click.echo("Database connection successful!")

    @app.cli.command("seed-demo")
    @click.option("--username", default=None, help="Username for the demo account.")
    def seed_demo(username: str | None) -> None:
        """Seed a demo user with a goal and a week of workouts."""

        from .models import Exercise, Food, Goal, User, Workout

        username = (username or app.config.get("DEMO_USERNAME", "alice")).strip()
        with app.app_context():
            _ensure_schema(app)
            if User.query.filter_by(username=username).first():
                click.echo(f"User {username} already exists; nothing to do.")
                return

            user = User(username=username)
            user.goal = Goal(
                goal_description="Lose 5 kg before summer",
                health_notes="Mild knee pain when running downhill",
            )
            today = datetime.now(timezone.utc).date()
            plan = [
                (6, [("Oatmeal", 350), ("Chicken salad", 520)], [("Running", "cardio", 30)]),
                (3, [("Protein shake", 220)], [("Squats", "strength", 20), ("Plank", "core", 5)]),
                (0, [("Salmon bowl", 640)], [("Cycling", "cardio", 45)]),
            ]
            for days_ago, foods, exercises in plan:
                workout = Workout(workout_date=today - timedelta(days=days_ago))
                workout.foods = [Food(food_name=name, food_calories=kcal) for name, kcal in foods]
                workout.exercises = [
                    Exercise(exercise_name=name, exercise_type=kind, exercise_duration=minutes)
                    for name, kind, minutes in exercises
                ]
                user.workouts.append(workout)
            db.session.add(user)
            db.session.commit()
            click.echo(f"Seeded demo user {username} with {len(plan)} workouts.")

    @app.cli.command("suggest")
    @click.option("--username", required=True, help="Username to generate a suggestion for.")
    @click.option("--question", required=True, help="Free-text question for the coach.")
    def suggest_command(username: str, question: str) -> None:
        """Generate and store a suggestion from the command line."""

        from .services import suggestion_service

        with app.app_context():
            result = suggestion_service.generate_suggestion(username, question)
        if "error" in result:
            raise click.ClickException(result["error"])
        click.echo(result["suggestion"])
