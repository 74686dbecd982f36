"""Tests for database session management and reference data seeding."""

import pytest

from recipe_tracker.models import Category, Recipe, UnitOfMeasure
from recipe_tracker.services.database import (
    create_database_engine,
    seed_reference_data,
    session_scope,
)
from recipe_tracker.utils.constants import RECIPE_CATEGORIES, UNITS_OF_MEASURE


class TestSeedReferenceData:
    """Tests for seed_reference_data()."""

    def test_fresh_database_is_seeded(self, test_db):
        counts = seed_reference_data()

        assert counts == {
            "units_of_measure": len(UNITS_OF_MEASURE),
            "categories": len(RECIPE_CATEGORIES),
        }
        session = test_db()
        descriptions = {u.description for u in session.query(UnitOfMeasure).all()}
        assert descriptions == set(UNITS_OF_MEASURE)
        assert session.query(Category).count() == len(RECIPE_CATEGORIES)

    def test_seeding_is_idempotent(self, test_db):
        seed_reference_data()
        counts = seed_reference_data()

        assert counts == {"units_of_measure": 0, "categories": 0}
        session = test_db()
        assert session.query(UnitOfMeasure).count() == len(UNITS_OF_MEASURE)

    def test_seeding_fills_gaps(self, test_db):
        session = test_db()
        session.add(UnitOfMeasure(description="Cup"))
        session.commit()

        counts = seed_reference_data()

        assert counts["units_of_measure"] == len(UNITS_OF_MEASURE) - 1


class TestSessionScope:
    """Tests for session_scope() commit/rollback behaviour."""

    def test_commits_on_success(self, test_db):
        with session_scope() as session:
            session.add(Recipe(description="Soup"))

        assert test_db().query(Recipe).count() == 1

    def test_rolls_back_on_error(self, test_db):
        with pytest.raises(RuntimeError):
            with session_scope() as session:
                session.add(Recipe(description="Soup"))
                session.flush()
                raise RuntimeError("boom")

        assert test_db().query(Recipe).count() == 0


class TestEngine:
    """Tests for create_database_engine()."""

    def test_foreign_keys_enabled(self):
        engine = create_database_engine("sqlite:///:memory:")
        with engine.connect() as conn:
            assert conn.exec_driver_sql("PRAGMA foreign_keys").scalar() == 1
        engine.dispose()

    def test_file_database_uses_wal(self, tmp_path, monkeypatch):
        monkeypatch.setenv("RECIPE_TRACKER_DB_TIMEOUT", "5")
        engine = create_database_engine(f"sqlite:///{tmp_path / 'test.db'}")
        with engine.connect() as conn:
            assert conn.exec_driver_sql("PRAGMA journal_mode").scalar() == "wal"
        engine.dispose()
