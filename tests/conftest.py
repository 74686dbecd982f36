"""Pytest configuration and fixtures for Recipe Tracker tests."""

from decimal import Decimal

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, scoped_session
from sqlalchemy.pool import StaticPool

from recipe_tracker.models import Base, Ingredient, Recipe, UnitOfMeasure
from recipe_tracker.services.database import seed_reference_data
from recipe_tracker.utils.config import reset_config


@pytest.fixture(scope="function")
def test_db():
    """Provide a clean test database for each test function.

    This fixture:
    1. Creates an in-memory SQLite database
    2. Creates all tables
    3. Patches the global session factory so services use it
    4. Drops all tables after the test completes
    """
    engine = create_engine(
        "sqlite:///:memory:",
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)

    session_factory = sessionmaker(bind=engine, expire_on_commit=False)
    Session = scoped_session(session_factory)

    import recipe_tracker.services.database as db_module

    original_get_session_factory = db_module.get_session_factory
    db_module.get_session_factory = lambda: Session

    yield Session

    Session.remove()
    Base.metadata.drop_all(engine)
    engine.dispose()
    db_module.get_session_factory = original_get_session_factory


@pytest.fixture(autouse=True)
def clean_config():
    """Reset the configuration singleton around every test."""
    reset_config()
    yield
    reset_config()


@pytest.fixture(scope="function")
def uoms(test_db):
    """Seed reference data and return units of measure keyed by description."""
    seed_reference_data()
    session = test_db()
    return {uom.description: uom for uom in session.query(UnitOfMeasure).all()}


@pytest.fixture(scope="function")
def flour_recipe(test_db, uoms):
    """Provide a recipe with a single ingredient: 2 Cup of Flour."""
    session = test_db()
    recipe = Recipe(description="Pancakes", servings=4)
    recipe.add_ingredient(
        Ingredient(description="Flour", amount=Decimal("2.0"), unit_of_measure=uoms["Cup"])
    )
    session.add(recipe)
    session.commit()
    return recipe


@pytest.fixture(scope="function")
def flour(flour_recipe):
    """The Flour ingredient of flour_recipe."""
    return next(iter(flour_recipe.ingredients))
