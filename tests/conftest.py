import pytest

from leitner.domain.models import Flashcard
from leitner.infrastructure.persistence.repository import SqlFlashcardRepository


@pytest.fixture(autouse=True)
def mock_home(tmp_path, monkeypatch):
    """Points HOME at a temp dir so no real config or database is touched."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    for var in ("LEITNER_DATABASE_URL", "LEITNER_DECK_PATH", "LEITNER_SEED_ON_INIT", "LEITNER_VERBOSE"):
        monkeypatch.delenv(var, raising=False)
    return home


@pytest.fixture
def card_a():
    return Flashcard("Known as 'Bones'", "Jon Jones", "Oblique kicks.", ("ufc", "usa"))


@pytest.fixture
def card_b():
    return Flashcard("Known as 'The Spider'", "Anderson Silva")


@pytest.fixture
def card_c():
    return Flashcard("The one, the only...", "Magnus Carlsen", tags=("chess",))


@pytest.fixture
def database_url(tmp_path):
    return f"sqlite:///{tmp_path / 'cards.db'}"


@pytest.fixture
def repo(database_url):
    with SqlFlashcardRepository(database_url) as repository:
        repository.create_schema()
        yield repository
