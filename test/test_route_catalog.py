"""Unit tests for the template route catalog."""
import random
from collections import Counter
from dataclasses import FrozenInstanceError

import pytest

from app.config.route_catalog import TEMPLATE_ROUTES
from app.services.route.catalog import RouteCatalog, RouteTemplate
from app.services.route.errors import CatalogConfigurationError


def test_default_catalog_loads_every_template():
    catalog = RouteCatalog.default()

    assert len(catalog) == len(TEMPLATE_ROUTES)
    assert [t.name for t in catalog] == [
        "Sunrise Park Loop",
        "Riverside Explorer",
        "Hill Conqueror Challenge",
    ]
    assert all(t.base_distance_km > 0 for t in catalog)


def test_empty_catalog_is_a_configuration_error():
    with pytest.raises(CatalogConfigurationError):
        RouteCatalog([])


def test_templates_are_immutable():
    template = RouteCatalog.default().templates[0]
    with pytest.raises(FrozenInstanceError):
        template.name = "Changed"


def test_pick_template_is_reproducible_with_seed():
    catalog = RouteCatalog.default()
    first = [catalog.pick_template(random.Random(7)) for _ in range(5)]
    second = [catalog.pick_template(random.Random(7)) for _ in range(5)]
    assert first == second


def test_pick_template_is_uniform():
    catalog = RouteCatalog.default()
    rng = random.Random(2024)
    trials = 30000

    counts = Counter(catalog.pick_template(rng).name for _ in range(trials))

    expected = trials / len(catalog)
    assert set(counts) == {t.name for t in catalog}
    for count in counts.values():
        assert abs(count - expected) / expected < 0.05


def test_template_from_dict_coerces_distance():
    template = RouteTemplate.from_dict(
        {"name": "A", "start": "B", "summary": "C", "base_distance_km": "3", "tip": "D"}
    )
    assert template.base_distance_km == 3.0
