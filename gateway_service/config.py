from functools import lru_cache

from campus_shared.config import BaseServiceSettings


class GatewaySettings(BaseServiceSettings):
    service_name: str = "api-gateway"
    port: int = 2000

    # Backend base URLs
    identity_service_url: str = "http://localhost:3000"
    student_service_url: str = "http://localhost:4000"
    course_service_url: str = "http://localhost:5000"

    # Outbound call timeout in seconds
    upstream_timeout_seconds: float = 5.0


@lru_cache
def get_settings() -> GatewaySettings:
    return GatewaySettings()
