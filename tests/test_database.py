"""
Database Tests

Tests for lazy opening and one-time schema creation.
"""
import logging
import threading

import pytest
from sqlalchemy import inspect

from planetas.database import Database, SCHEMA_VERSION
from planetas.exceptions import StorageError
from planetas.models import Planet


class TestLazyOpen:
    """Tests for Database.open()"""

    def test_not_opened_on_construction(self, tmp_path):
        """Should not touch the filesystem until first use."""
        path = tmp_path / "databases" / "planetas.db"
        database = Database(path)

        assert database.is_open is False
        assert not path.exists()

    def test_open_creates_file_and_directory(self, tmp_path):
        """Should create the parent directory and the database file."""
        path = tmp_path / "databases" / "planetas.db"
        database = Database(path)

        database.open()

        assert database.is_open is True
        assert path.exists()
        database.close()

    def test_open_returns_cached_engine(self, test_database):
        """Should reuse the live engine on later calls."""
        first = test_database.open()
        second = test_database.open()

        assert first is second
        assert test_database.engine is first

    def test_session_opens_lazily(self, test_database):
        """Should open the database when a session is requested."""
        session = test_database.session()
        session.close()

        assert test_database.is_open is True

    def test_open_failure_raises_storage_error(self, tmp_path):
        """Should wrap filesystem errors in StorageError."""
        blocker = tmp_path / "not-a-directory"
        blocker.write_text("")
        database = Database(blocker / "planetas.db")

        with pytest.raises(StorageError) as exc_info:
            database.open()

        assert exc_info.value.operation == "open"
        assert database.is_open is False


class TestSchema:
    """Tests for first-run schema creation"""

    def test_creates_planetas_table(self, test_database):
        """Should create the planetas table with the persisted column names."""
        inspector = inspect(test_database.open())
        columns = {c["name"]: c for c in inspector.get_columns("planetas")}

        assert list(columns) == ["id", "nome", "distancia", "tamanho", "apelido"]
        assert columns["nome"]["nullable"] is False
        assert columns["distancia"]["nullable"] is False
        assert columns["tamanho"]["nullable"] is False
        assert columns["apelido"]["nullable"] is True

    def test_stamps_schema_version(self, test_database):
        """Should record schema version 1."""
        assert test_database.schema_version() == SCHEMA_VERSION == 1

    def test_reopen_keeps_data_and_skips_creation(self, tmp_path, caplog):
        """Should not run schema creation again for an existing file."""
        path = tmp_path / "planetas.db"
        first = Database(path)
        with first.session() as session:
            session.add(Planet(name="Venus", distance=0.72, size=12104.0))
            session.commit()
        first.close()

        caplog.set_level(logging.INFO, logger="planetas.database")
        second = Database(path)
        with second.session() as session:
            names = [p.name for p in session.query(Planet).all()]
        second.close()

        assert names == ["Venus"]
        assert "Creating schema" not in caplog.text

    def test_close_then_open_reopens(self, test_database):
        """Should reopen after close."""
        test_database.open()
        test_database.close()

        assert test_database.is_open is False
        assert test_database.open() is not None
        assert test_database.schema_version() == 1


class TestConcurrentOpen:
    """Tests for racing first callers"""

    def test_single_initialization(self, test_database, monkeypatch):
        """Should initialize once when many threads open at the same time."""
        calls = []
        original = Database._open_engine
        barrier = threading.Barrier(8)

        def counting_open(self):
            calls.append(threading.get_ident())
            return original(self)

        monkeypatch.setattr(Database, "_open_engine", counting_open)

        engines = []

        def worker():
            barrier.wait()
            engines.append(test_database.open())

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(calls) == 1
        assert len(engines) == 8
        assert all(engine is engines[0] for engine in engines)
