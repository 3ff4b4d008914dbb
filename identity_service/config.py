from functools import lru_cache

from campus_shared.config import BaseServiceSettings


class IdentitySettings(BaseServiceSettings):
    service_name: str = "identity-service"
    port: int = 3000

    access_token_expire_minutes: int = 60


@lru_cache
def get_settings() -> IdentitySettings:
    return IdentitySettings()
