from judging.db import database


def test_database_url_prefers_explicit_url(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@db:5432/judging")
    assert database._get_database_url() == "postgresql://u:p@db:5432/judging"


def test_database_url_from_components_with_defaults(monkeypatch):
    for var in ("DATABASE_URL", "POSTGRES_USER", "POSTGRES_PASSWORD", "POSTGRES_HOST", "POSTGRES_PORT", "POSTGRES_DB"):
        monkeypatch.delenv(var, raising=False)
    assert database._get_database_url() == "postgresql://postgres:@localhost:5432/automated_judging_system"

    monkeypatch.setenv("POSTGRES_HOST", "store")
    monkeypatch.setenv("POSTGRES_DB", "judging")
    assert database._get_database_url() == "postgresql://postgres:@store:5432/judging"


def test_pytest_runtime_detected():
    assert database._is_pytest_runtime() is True


def test_tests_run_against_sqlite_with_foreign_keys(db_session):
    assert database.engine.dialect.name == "sqlite"
    assert db_session.connection().exec_driver_sql("PRAGMA foreign_keys").scalar() == 1


def test_init_db_logs_and_reports_connection_failure(monkeypatch, caplog):
    from sqlalchemy.exc import OperationalError
    from judging.db import models

    def _unreachable(*args, **kwargs):
        raise OperationalError("connect", {}, Exception("could not connect to server"))

    monkeypatch.setattr(models.Base.metadata, "create_all", _unreachable)
    with caplog.at_level("ERROR", logger="judging.db.database"):
        assert database.init_db() is False
    assert "Database connection failed" in caplog.text


def test_get_db_closes_session():
    gen = database.get_db()
    session = next(gen)
    assert session.is_active
    gen.close()
