import random

import pytest

from app.services.route.adaptation import NATURE_TIP, URBAN_TIP, adapt_route_text
from app.services.route.catalog import RouteCatalog, RouteTemplate
from app.services.route.errors import (
    InvalidDistance,
    InvalidPace,
    MissingLocation,
    ValidationError,
)
from app.services.route.synthesizer import RouteSynthesizer
from app.services.route.validator import RouteRequest, RouteRequestValidator


class RecordingCatalog(RouteCatalog):
    def __init__(self, templates):
        super().__init__(templates)
        self.picks = 0

    def pick_template(self, rng=None):
        self.picks += 1
        return super().pick_template(rng)


def _payload(**overrides):
    payload = {"location": "Hyde Park Corner", "distance": "5", "pace": "6", "preference": "loop"}
    payload.update(overrides)
    return payload


# Validation

def test_validator_parses_string_numbers_and_trims_location():
    request = RouteRequestValidator().validate(
        _payload(location="  Riverside Dock ", distance=" 7.5", pace="5.25", preference=" Nature ")
    )
    assert request == RouteRequest(
        location="Riverside Dock", distance_km=7.5, pace_min_per_km=5.25, preference="nature"
    )


def test_validator_accepts_numeric_values():
    request = RouteRequestValidator().validate(_payload(distance=10, pace=4.5))
    assert request.distance_km == 10.0
    assert request.pace_min_per_km == 4.5


@pytest.mark.parametrize("location", [None, "", "   ", 42])
def test_missing_location(location):
    with pytest.raises(MissingLocation) as excinfo:
        RouteRequestValidator().validate(_payload(location=location))
    assert excinfo.value.field == "location"
    assert excinfo.value.status_code == 400


@pytest.mark.parametrize("distance", [None, "", "abc", "0", "-3", 0, -1.5, "nan", "inf", True])
def test_invalid_distance(distance):
    with pytest.raises(InvalidDistance):
        RouteRequestValidator().validate(_payload(distance=distance))


@pytest.mark.parametrize("pace", [None, "", "fast", "0", "-6", 0, "NaN"])
def test_invalid_pace(pace):
    with pytest.raises(InvalidPace):
        RouteRequestValidator().validate(_payload(pace=pace))


def test_validation_order_reports_location_first():
    with pytest.raises(MissingLocation):
        RouteRequestValidator().validate({"location": " ", "distance": "x", "pace": "y"})
    with pytest.raises(InvalidDistance):
        RouteRequestValidator().validate({"location": "Quay", "distance": "x", "pace": "y"})


@pytest.mark.parametrize("preference", [None, "", "desert", 7])
def test_unrecognized_preference_means_no_adaptation(preference):
    request = RouteRequestValidator().validate(_payload(preference=preference))
    assert request.preference is None


def test_validation_happens_before_catalog_access(park_template):
    catalog = RecordingCatalog([park_template])
    synthesizer = RouteSynthesizer(catalog=catalog, rng=random.Random(1))

    with pytest.raises(ValidationError):
        synthesizer.synthesize_raw(_payload(pace="-1"))
    assert catalog.picks == 0


# Adaptation

def test_nature_replaces_only_first_path(park_template):
    summary, tip = adapt_route_text(park_template.summary, park_template.tip, "nature")
    assert summary == (
        "Follow the park trail through lush greenery past the garden, then take the path home."
    )
    assert tip == NATURE_TIP


def test_nature_match_is_case_insensitive():
    summary, _ = adapt_route_text("The Route climbs. The route descends.", "tip", "nature")
    assert summary == "The trail through lush greenery climbs. The route descends."


def test_nature_without_match_leaves_summary_unchanged():
    summary, tip = adapt_route_text("Run along the quay.", "Original tip", "nature")
    assert summary == "Run along the quay."
    assert tip == NATURE_TIP


def test_urban_replaces_only_first_green_space(park_template):
    summary, tip = adapt_route_text(park_template.summary, park_template.tip, "urban")
    assert summary == (
        "Follow the vibrant city streets path past the garden, then take the path home."
    )
    assert tip == URBAN_TIP


@pytest.mark.parametrize("preference", ["loop", "flat", "hills", "scenic", None])
def test_other_preferences_leave_text_untouched(park_template, preference):
    assert adapt_route_text(park_template.summary, park_template.tip, preference) == (
        park_template.summary,
        park_template.tip,
    )


# Synthesis

def test_result_echoes_request_start_and_distance(single_template_catalog, park_template):
    synthesizer = RouteSynthesizer(catalog=single_template_catalog, rng=random.Random(3))
    request = RouteRequest(location="Hyde Park Corner", distance_km=12.34, pace_min_per_km=5)

    result = synthesizer.synthesize(request)

    assert result.start == "Hyde Park Corner"
    assert result.distance_km == 12.34
    assert result.distance_km != park_template.base_distance_km
    assert result.name == park_template.name
    assert result.estimated_duration == "1 hr 2 min"


def test_loop_preference_keeps_template_text(single_template_catalog, park_template):
    synthesizer = RouteSynthesizer(catalog=single_template_catalog)
    result = synthesizer.synthesize_raw(_payload(preference="loop"))
    assert result.summary == park_template.summary
    assert result.tip == park_template.tip


def test_urban_preference_applies_to_real_catalog():
    template = RouteTemplate.from_dict(
        {
            "name": "Sunrise Park Loop",
            "start": "Central Park Entrance",
            "summary": "Begin at the Central Park South entrance and follow the main path.",
            "base_distance_km": 5.2,
            "tip": "tip",
        }
    )
    synthesizer = RouteSynthesizer(catalog=RouteCatalog([template]))
    result = synthesizer.synthesize_raw(_payload(preference="urban"))
    assert result.summary == (
        "Begin at the Central vibrant city streets South entrance and follow the main path."
    )
    assert result.tip == URBAN_TIP


def test_seeded_synthesis_is_idempotent():
    first = RouteSynthesizer(rng=random.Random(99)).synthesize_raw(_payload(preference="nature"))
    second = RouteSynthesizer(rng=random.Random(99)).synthesize_raw(_payload(preference="nature"))
    assert first == second


def test_unseeded_calls_agree_on_request_derived_fields():
    synthesizer = RouteSynthesizer()
    results = [synthesizer.synthesize_raw(_payload(distance="10", pace="7")) for _ in range(10)]

    assert {r.start for r in results} == {"Hyde Park Corner"}
    assert {r.distance_km for r in results} == {10.0}
    assert {r.estimated_duration for r in results} == {"1 hr 10 min"}


def test_every_template_is_reachable():
    synthesizer = RouteSynthesizer(rng=random.Random(5))
    names = {synthesizer.synthesize_raw(_payload()).name for _ in range(200)}
    assert names == {t.name for t in RouteCatalog.default()}


def test_overflowing_duration_is_invalid_pace():
    synthesizer = RouteSynthesizer(rng=random.Random(1))
    with pytest.raises(InvalidPace):
        synthesizer.synthesize_raw(_payload(distance="1e200", pace="1e200"))
