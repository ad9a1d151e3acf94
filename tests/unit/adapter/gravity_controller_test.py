"""
Unit tests for the gravity REST controller.

Exercises the HTTP boundary through the Flask test client: parameter
parsing, payload shape and translation of domain errors to 400 responses.
"""

import json
from typing import Callable

import pytest
from flask import Flask
from flask.testing import FlaskClient
from injector import Injector

from gravity_service.adapter.rest.gravity_controller import GravityControllerInterface
from gravity_service.adapter.static.gravity_factor_table import GravityFactorTable
from gravity_service.core.exceptions import UnknownCelestialBodyError
from gravity_service.core.port.gravity_configuration_interface import (
    GravityConfigurationInterface,
)

CALCULATE_URL = "/api/v1/gravity/calculate"
BODIES_URL = "/api/v1/gravity/bodies"


class TestCalculateEndpoint:
    """GET /api/v1/gravity/calculate"""

    def test_returns_force_payload(self, client: FlaskClient) -> None:
        # Given / When
        response = client.get(CALCULATE_URL, query_string={"mass": "100", "body": "Earth"})

        # Then
        assert response.status_code == 200
        payload = response.get_json()
        assert list(payload.keys()) == ["mass", "body", "forceNewtons"]
        assert payload["mass"] == 100.0
        assert payload["body"] == "Earth"
        assert payload["forceNewtons"] == pytest.approx(980.7)

    @pytest.mark.parametrize("identifier", ["jupiter", "JUPITER", " Jupiter "])
    def test_body_identifier_is_case_insensitive(
        self, client: FlaskClient, identifier: str
    ) -> None:
        # Given / When
        response = client.get(CALCULATE_URL, query_string={"mass": "50", "body": identifier})

        # Then
        assert response.status_code == 200
        assert response.get_json()["body"] == "Jupiter"
        assert response.get_json()["forceNewtons"] == pytest.approx(1239.5)

    @pytest.mark.parametrize("mass,expected", [("0", 0.0), ("-10", -16.2)])
    def test_degenerate_masses_are_accepted(
        self, client: FlaskClient, mass: str, expected: float
    ) -> None:
        # Given / When
        response = client.get(CALCULATE_URL, query_string={"mass": mass, "body": "Moon"})

        # Then
        assert response.status_code == 200
        assert response.get_json()["forceNewtons"] == pytest.approx(expected)

    @pytest.mark.parametrize(
        "mass,expected_mass,expected_force",
        [
            ("nan", "NaN", "NaN"),
            ("inf", "Infinity", "Infinity"),
            ("-inf", "-Infinity", "-Infinity"),
            ("1e400", "Infinity", "Infinity"),
        ],
    )
    def test_non_finite_masses_return_strict_json(
        self, client: FlaskClient, mass: str, expected_mass: str, expected_force: str
    ) -> None:
        # Given
        def reject_constant(constant: str) -> None:
            raise ValueError(f"Non-standard JSON constant: {constant}")

        # When
        response = client.get(CALCULATE_URL, query_string={"mass": mass, "body": "Earth"})

        # Then
        assert response.status_code == 200
        payload = json.loads(response.get_data(as_text=True), parse_constant=reject_constant)
        assert payload == {
            "mass": expected_mass,
            "body": "Earth",
            "forceNewtons": expected_force,
        }

    def test_unknown_body_is_client_error(self, client: FlaskClient) -> None:
        # Given / When
        response = client.get(CALCULATE_URL, query_string={"mass": "10", "body": "Pluto"})

        # Then
        assert response.status_code == 400
        payload = response.get_json()
        assert "Pluto" in payload["error"]
        assert "Neptune" in payload["error"]
        assert payload["service"] == "gravity-service"

    @pytest.mark.parametrize(
        "query",
        [{"body": "Earth"}, {"mass": "10"}, {}],
    )
    def test_missing_parameters_are_client_error(self, client: FlaskClient, query: dict) -> None:
        # Given / When
        response = client.get(CALCULATE_URL, query_string=query)

        # Then
        assert response.status_code == 400
        assert "required" in response.get_json()["error"]

    def test_non_numeric_mass_is_client_error(self, client: FlaskClient) -> None:
        # Given / When
        response = client.get(CALCULATE_URL, query_string={"mass": "heavy", "body": "Earth"})

        # Then
        assert response.status_code == 400
        assert "heavy" in response.get_json()["error"]

    def test_missing_configuration_is_client_error(
        self,
        injector: Injector,
        app_factory: Callable[[Injector], Flask],
        factors_without_mars: dict,
    ) -> None:
        # Given
        injector.binder.bind(
            GravityConfigurationInterface, to=GravityFactorTable(factors_without_mars)
        )
        client = app_factory(injector).test_client()

        # When
        response = client.get(CALCULATE_URL, query_string={"mass": "100", "body": "Mars"})

        # Then
        assert response.status_code == 400
        assert response.get_json()["error"] == "Gravity factor for Mars is not configured."

    def test_post_is_not_allowed(self, client: FlaskClient) -> None:
        # Given / When
        response = client.post(CALCULATE_URL, json={"mass": 1, "body": "Earth"})

        # Then
        assert response.status_code == 405


class TestBodiesEndpoint:
    """GET /api/v1/gravity/bodies"""

    def test_lists_all_bodies_in_declaration_order(self, client: FlaskClient) -> None:
        # Given / When
        response = client.get(BODIES_URL)

        # Then
        assert response.status_code == 200
        bodies = response.get_json()["bodies"]
        assert [entry["body"] for entry in bodies][:3] == ["Mercury", "Venus", "Earth"]
        assert len(bodies) == 9
        assert {"body": "Moon", "gravityFactor": 1.62} in bodies


class TestApplicationBoundary:
    """Application-wide handlers registered by the Flask factory."""

    def test_domain_error_outside_controller_is_client_error(
        self, injector: Injector, app_factory: Callable[[Injector], Flask]
    ) -> None:
        # Given
        app = app_factory(injector)

        def failing_view():
            raise UnknownCelestialBodyError("Vulcan")

        app.add_url_rule("/failing", "failing", failing_view)

        # When
        response = app.test_client().get("/failing")

        # Then
        assert response.status_code == 400
        assert "Vulcan" in response.get_json()["error"]

    def test_unknown_endpoint_returns_json_404(self, client: FlaskClient) -> None:
        # Given / When
        response = client.get("/api/v1/unknown")

        # Then
        assert response.status_code == 404
        assert response.get_json() == {
            "error": "Endpoint not found",
            "service": "gravity-service",
        }

    def test_liveness_endpoint(self, client: FlaskClient) -> None:
        # Given / When
        response = client.get("/health/live")

        # Then
        assert response.status_code == 200
        assert response.get_json()["status"] == "alive"

    def test_views_are_bound_to_injected_controller(
        self, injector: Injector, app_factory: Callable[[Injector], Flask]
    ) -> None:
        # Given
        app = app_factory(injector)

        # When
        controller = injector.get(GravityControllerInterface)

        # Then
        assert app.view_functions["calculate_force"].__self__ is controller
        assert app.view_functions["list_bodies"].__self__ is controller

    def test_controller_interface_is_abstract(self) -> None:
        # Given / When / Then
        with pytest.raises(TypeError):
            GravityControllerInterface()

    def test_custom_api_prefix(
        self, injector: Injector, app_factory: Callable[..., Flask]
    ) -> None:
        # Given
        client = app_factory(injector, api_prefix="/gravity/").test_client()

        # When
        response = client.get("/gravity/calculate", query_string={"mass": "1", "body": "Mars"})

        # Then
        assert response.status_code == 200
        assert response.get_json()["forceNewtons"] == pytest.approx(3.71)
