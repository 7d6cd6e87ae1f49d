"""Health status reported by the API."""

from compound_interest import __version__
from compound_interest.schemas.health import HealthResponse


def get_health_status(service_name: str) -> HealthResponse:
    """Describe the running service for load balancers and the frontend."""
    return HealthResponse(status="ok", service=service_name, version=__version__)
