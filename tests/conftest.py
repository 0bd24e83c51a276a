# tests/conftest.py
import pathlib
import sys

import pytest

# Add ./src to sys.path so `import avalanche_mancala...` works in tests
ROOT = pathlib.Path(__file__).resolve().parents[1]
SRC  = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

@pytest.fixture
def board():
    from avalanche_mancala.engine.board import Board
    return Board()

def seeded(counts, **options):
    from avalanche_mancala.engine.board import Board
    b = Board(**options)
    b.populate(counts)
    return b

@pytest.fixture(scope="session")
def app():
    from avalanche_mancala.api.app import create_app
    app = create_app(TESTING=True)
    return app

@pytest.fixture(scope="session")
def client(app):
    return app.test_client()
