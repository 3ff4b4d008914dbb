from functools import lru_cache

from campus_shared.config import BaseServiceSettings


class StudentSettings(BaseServiceSettings):
    service_name: str = "student-service"
    port: int = 4000


@lru_cache
def get_settings() -> StudentSettings:
    return StudentSettings()
