"""User data models."""

from typing import Literal

from pydantic import BaseModel

Provider = Literal["facebook", "google", "demo"]

PROVIDERS: tuple[Provider, ...] = ("facebook", "google", "demo")


class User(BaseModel):
    """The signed-in user. At most one is active at a time."""

    id: str
    name: str
    avatar: str
    provider: Provider
