"""
Shared test fixtures for gravity service tests.

Provides the dependency graph, the Flask test client and configuration
fixtures following the Given/When/Then structure of the test suites.
"""

from typing import Callable, Generator, Optional

import pytest
from flask import Flask
from flask.testing import FlaskClient
from injector import Injector

from gravity_service.adapter.web.gravity_route_registrar import GravityRouteRegistrar
from gravity_service.core.model.celestial_body import CelestialBody
from gravity_service.core.service.gravity_calculator import GravityCalculatorInterface
from gravity_service.infrastructure.config.gravity_config import GravityConfig
from gravity_service.infrastructure.config.service_logging_config import (
    ServiceLoggingConfig,
)
from gravity_service.infrastructure.di.gravity_module import GravityModule
from gravity_service.infrastructure.web.generic_flask_app_factory import (
    GenericFlaskAppFactory,
)


@pytest.fixture
def gravity_config() -> GravityConfig:
    """Provide a GravityConfig without file logging for tests."""
    return GravityConfig(
        app_name="gravity-service-test",
        stage="local",
        logging=ServiceLoggingConfig(level="DEBUG", file_logging=False),
    )


@pytest.fixture(scope="class")
def class_injector() -> Generator[Injector, None, None]:
    """
    Build one dependency graph per test class.

    The graph is shared by every (parametrized) case of the class and
    dropped once the class has finished.
    """
    injector = Injector([GravityModule(GravityConfig(app_name="gravity-service-test"))])
    yield injector
    # the graph holds no external resources, releasing it is enough
    del injector


@pytest.fixture(scope="class")
def gravity_calculator(class_injector: Injector) -> GravityCalculatorInterface:
    """Resolve the calculator from the class-scoped dependency graph."""
    return class_injector.get(GravityCalculatorInterface)


@pytest.fixture
def injector(gravity_config: GravityConfig) -> Injector:
    """Provide a fresh dependency graph that a single test may rebind."""
    return Injector([GravityModule(gravity_config)])


@pytest.fixture
def app_factory(gravity_config: GravityConfig) -> Callable[[Injector], Flask]:
    """Create Flask apps for a given injector, after any test-specific rebinding."""

    def _create(injector: Injector, api_prefix: Optional[str] = None) -> Flask:
        app = GenericFlaskAppFactory.create_app(
            service_name="gravity-service",
            injector=injector,
            config=gravity_config,
            route_registrar=GravityRouteRegistrar(api_prefix or gravity_config.web.api_prefix),
        )
        app.config["TESTING"] = True
        return app

    return _create


@pytest.fixture
def client(injector: Injector, app_factory: Callable[[Injector], Flask]) -> FlaskClient:
    """Provide a Flask test client wired to the default dependency graph."""
    return app_factory(injector).test_client()


@pytest.fixture
def factors_without_mars() -> dict:
    """Canonical factors with Mars deliberately removed."""
    from gravity_service.adapter.static.gravity_factor_table import (
        CANONICAL_GRAVITY_FACTORS,
    )

    return {
        body: factor
        for body, factor in CANONICAL_GRAVITY_FACTORS.items()
        if body is not CelestialBody.MARS
    }
