import random
import sys
from pathlib import Path
from types import SimpleNamespace

import pytest

BACKEND_ROOT = Path(__file__).resolve().parents[1]
if str(BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(BACKEND_ROOT))

from app.services.route.catalog import RouteCatalog, RouteTemplate


class FakeCursor:
    def __init__(self, documents):
        self._documents = documents

    def sort(self, key, direction):
        return FakeCursor(
            sorted(self._documents, key=lambda doc: doc[key], reverse=direction < 0)
        )

    def __iter__(self):
        return iter(self._documents)


class FakeCollection:
    """In-memory stand-in for the handful of pymongo calls the service makes."""

    def __init__(self):
        self.documents = []

    def create_index(self, *args, **kwargs):
        return "index"

    def insert_one(self, document):
        self.documents.append(dict(document))
        return SimpleNamespace(inserted_id=document.get("id"))

    def find(self, query, projection=None):
        matches = [
            dict(doc)
            for doc in self.documents
            if all(doc.get(key) == value for key, value in query.items())
        ]
        return FakeCursor(matches)

    def update_one(self, query, update):
        for doc in self.documents:
            if all(doc.get(key) == value for key, value in query.items()):
                doc.update(update["$set"])
                return SimpleNamespace(matched_count=1, modified_count=1)
        return SimpleNamespace(matched_count=0, modified_count=0)


@pytest.fixture
def fake_collection():
    return FakeCollection()


@pytest.fixture
def park_template():
    return RouteTemplate(
        name="Park Path Loop",
        start="Template Start",
        summary="Follow the park path past the garden, then take the path home.",
        base_distance_km=4.0,
        tip="Template tip",
    )


@pytest.fixture
def single_template_catalog(park_template):
    return RouteCatalog([park_template])


@pytest.fixture
def seeded_rng():
    return random.Random(42)
