"""
Shared pytest fixtures.
"""

import pytest

from book_catalog.schema import schema
from book_catalog.server import create_app


@pytest.fixture
def graphql_schema():
    return schema


@pytest.fixture
def app():
    """Flask app configured for testing."""
    return create_app({"TESTING": True})


@pytest.fixture
def client(app):
    return app.test_client()
