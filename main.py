"""
Main entry point for the Gravity Service.

Minimal main.py: infrastructure bootstrap only. The calculation lives in
the core layer, HTTP handling in the adapter layer.
"""
from gravity_service.infrastructure.bootstrap.gravity_service_bootstrap import bootstrap_gravity_service


def main() -> None:
    """Main entry point for the gravity service."""
    bootstrap_gravity_service()


if __name__ == "__main__":
    main()
