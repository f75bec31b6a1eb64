from dataclasses import dataclass
from typing import List

from mashumaro.mixins.orjson import DataClassORJSONMixin


@dataclass(frozen=True)
class Repo(DataClassORJSONMixin):
    """A starred repository, as returned by `users/{user}/starred`."""

    full_name: str
    name: str | None = None
    description: str | None = None
    topics: List[str] | None = None

    def __str__(self) -> str:
        return self.full_name
