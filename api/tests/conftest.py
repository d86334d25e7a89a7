"""
Pytest configuration and fixtures
"""
import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session

from wildcards.core.config import Settings
from wildcards.core.database import create_db_engine, init_db
from wildcards.main import create_app
from wildcards.models import Action, Animal, Attribute, Effect, Image


def _seed_lookups(session: Session) -> dict:
    """
    Lookup rows cards can reference.

    Three animals (each with its own image), three attributes, three actions
    and two effects. Returns their ids keyed by kind.
    """
    images = [Image(url=f"/uploads/imagem-{i}.png") for i in range(3)]
    session.add_all(images)
    session.flush()
    animals = [
        Animal(scientific_name="Panthera onca", description="Onça-pintada", image_id=images[0].id),
        Animal(scientific_name="Chrysocyon brachyurus", description="Lobo-guará", image_id=images[1].id),
        Animal(scientific_name="Myrmecophaga tridactyla", description=None, image_id=images[2].id),
    ]
    attributes = [Attribute(name=name) for name in ("Terrestre", "Noturno", "Predador")]
    actions = [Action(name=name, description=f"Ação {name}") for name in ("Morder", "Correr", "Escalar")]
    effects = [Effect(name=name) for name in ("Veneno", "Atordoar")]
    session.add_all(animals + attributes + actions + effects)
    session.commit()
    return {
        "images": [image.id for image in images],
        "animals": [animal.id for animal in animals],
        "attributes": [attribute.id for attribute in attributes],
        "actions": [action.id for action in actions],
        "effects": [effect.id for effect in effects],
    }


@pytest.fixture(scope="function")
def settings(tmp_path) -> Settings:
    return Settings(
        database_url="sqlite://",
        upload_dir=str(tmp_path / "uploads"),
        max_upload_bytes=64 * 1024,
    )


@pytest.fixture(scope="function")
def engine(settings):
    """Fresh in-memory database with all tables for each test"""
    engine = create_db_engine(settings)
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture(scope="function")
def db(engine):
    """Create a database session for testing"""
    with Session(engine) as session:
        yield session


@pytest.fixture(scope="function")
def seed(db):
    return _seed_lookups(db)


@pytest.fixture(scope="function")
def client(settings, engine):
    """Create test client bound to the test database"""
    app = create_app(settings, engine=engine)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture(scope="function")
def file_settings(tmp_path) -> Settings:
    """Settings for a database file, so each thread gets its own connection"""
    return Settings(
        database_url=f"sqlite:///{tmp_path / 'wildcards.db'}",
        upload_dir=str(tmp_path / "uploads"),
    )


@pytest.fixture(scope="function")
def file_engine(file_settings):
    engine = create_db_engine(file_settings)
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture(scope="function")
def file_seed(file_engine):
    with Session(file_engine) as session:
        return _seed_lookups(session)
