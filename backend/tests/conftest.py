import pytest
from typing import Generator
from fastapi.testclient import TestClient
import sys
import os

# Append sys.path to ensure the below imports work from tests folder
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from texttools.main import app

SAMPLE_TEXT = "The cat sat. The cat ran!"

MULTI_PARAGRAPH_TEXT = (
    "I love this wonderful city. The food is great!\n"
    "\n"
    "The traffic is a problem, though. Is it worth it?\n"
)


# Define test client fixture
@pytest.fixture(name="client")
def client_fixture() -> Generator[TestClient, None, None]:
    """Creates a TestClient for the API.

    Yields:
        TestClient: The FastAPI test client.
    """
    yield TestClient(app)


@pytest.fixture(name="sample_text")
def sample_text_fixture() -> str:
    """Two short sentences where "the" and "cat" tie for the top word."""
    return SAMPLE_TEXT


@pytest.fixture(name="multi_paragraph_text")
def multi_paragraph_text_fixture() -> str:
    """Two paragraphs mixing positive and negative words."""
    return MULTI_PARAGRAPH_TEXT
