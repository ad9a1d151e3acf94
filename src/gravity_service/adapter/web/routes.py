from flask import Flask
from injector import Injector

from gravity_service.adapter.rest.gravity_controller import GravityControllerInterface

DEFAULT_API_PREFIX = "/api/v1/gravity"


def register_routes(app: Flask, injector: Injector, api_prefix: str = DEFAULT_API_PREFIX) -> None:
    controller = injector.get(GravityControllerInterface)
    prefix = api_prefix.rstrip("/")

    app.add_url_rule(
        f"{prefix}/calculate",
        endpoint="calculate_force",
        view_func=controller.calculate_force,
        methods=["GET"],
    )
    app.add_url_rule(
        f"{prefix}/bodies",
        endpoint="list_bodies",
        view_func=controller.list_bodies,
        methods=["GET"],
    )
