"""Tests for CLI commands."""

from __future__ import annotations

from conftest import FakeGenerator, create_user
from fitcoach_app.models import Exercise, Goal, Suggestion, User, Workout


def test_seed_demo_creates_user_once(app_with_db):
    runner = app_with_db.test_cli_runner()
    result = runner.invoke(args=["seed-demo", "--username", "demo"])
    assert result.exit_code == 0, result.output
    assert "Seeded demo user demo" in result.output
    with app_with_db.app_context():
        user = User.query.filter_by(username="demo").one()
        assert Goal.query.filter_by(user_id=user.id).count() == 1
        assert Workout.query.filter_by(user_id=user.id).count() == 3
        assert Exercise.query.join(Workout).filter(Workout.user_id == user.id).count() == 4

    again = runner.invoke(args=["seed-demo", "--username", "demo"])
    assert again.exit_code == 0
    assert "already exists" in again.output


def test_suggest_command(app_with_db, monkeypatch):
    generator = FakeGenerator(["Add a rest day."])
    monkeypatch.setattr(
        "fitcoach_app.services.suggestion_service.get_ai_client",
        lambda: generator,
    )
    runner = app_with_db.test_cli_runner()
    with app_with_db.app_context():
        user_id = create_user("cli_user")
    result = runner.invoke(args=["suggest", "--username", "cli_user", "--question", "Rest?"])
    assert result.exit_code == 0, result.output
    assert "Add a rest day." in result.output
    with app_with_db.app_context():
        assert Suggestion.query.filter_by(user_id=user_id).count() == 1


def test_suggest_command_unknown_user(app_with_db, monkeypatch):
    monkeypatch.setattr(
        "fitcoach_app.services.suggestion_service.get_ai_client",
        lambda: FakeGenerator(),
    )
    runner = app_with_db.test_cli_runner()
    result = runner.invoke(args=["suggest", "--username", "ghost", "--question", "Hi"])
    assert result.exit_code != 0
    assert "User not found" in result.output


def test_check_db_command(app_with_db):
    runner = app_with_db.test_cli_runner()
    result = runner.invoke(args=["check-db"])
    assert result.exit_code == 0, result.output
    assert "Database connection successful!" in result.output


def test_check_db_command_fails_when_database_unreachable(app_with_db, monkeypatch):
    monkeypatch.setattr("fitcoach_app.DB_CHECK_SQL", "SELECT 1 FROM no_such_table")
    runner = app_with_db.test_cli_runner()
    result = runner.invoke(args=["check-db"])
    assert result.exit_code == 1
    assert "Database connection failed" in result.output


def test_check_database_connection_reports_failure(app_with_db, monkeypatch):
    from fitcoach_app import check_database_connection

    monkeypatch.setattr("fitcoach_app.DB_CHECK_SQL", "SELECT 1 FROM no_such_table")
    assert check_database_connection(app_with_db) is False
