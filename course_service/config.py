from functools import lru_cache

from campus_shared.config import BaseServiceSettings


class CourseSettings(BaseServiceSettings):
    service_name: str = "course-service"
    port: int = 5000


@lru_cache
def get_settings() -> CourseSettings:
    return CourseSettings()
