from __future__ import annotations

from typing import TYPE_CHECKING, Any, Self
from enum import Enum

from pydantic import BaseModel, ConfigDict, PrivateAttr, model_validator

from glasscord.missing import MISSING, _MissingType, is_not_missing
from glasscord.errors import InvalidStateError
from glasscord.discord.types import Snowflake

if TYPE_CHECKING:
    from collections.abc import Iterable

    from glasscord.client import Client


__all__ = (
    'DiscordEntity',
    'RawBaseModel',
    'filter_missing',
)


class RawBaseModel(BaseModel):
    model_config = ConfigDict(frozen=True)

    _raw: dict[str, Any] = PrivateAttr(default_factory=dict)

    @model_validator(mode='before')
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:  # noqa: ANN401
        # ? discord sends null and omits keys interchangeably
        if isinstance(data, dict):
            return {
                k: v
                for k, v in data.items()
                if v is not None
            }

        return data

    @property
    def raw(self) -> dict[str, Any]:
        """the payload this model was parsed from"""
        return self._raw

    def as_payload(
        self,
        include: Iterable[str] | None = None
    ) -> dict[str, Any]:
        return filter_missing(self.model_dump(
            include=set(include) if include is not None else None
        ))


class DiscordEntity(RawBaseModel):
    """anything with a snowflake id that belongs to an api context

    two entities are equal when they are the same concrete type and share
    an id, no matter what the rest of their data looks like
    """
    id: Snowflake

    _api: Client | None = PrivateAttr(default=None)

    @classmethod
    def from_payload(
        cls,
        api: Client | None,
        data: dict[str, Any]
    ) -> Self:
        self = cls.model_validate(data)
        self._api = api
        self._raw = data.copy()

        return self

    @property
    def api(self) -> Client:
        if self._api is None:
            raise InvalidStateError(
                f'{self.__class__.__name__} {self.id} is not bound to a client'
            )

        return self._api

    def __eq__(self, other: object) -> bool:
        return (
            self is other or (
                type(other) is type(self) and
                other.id == self.id  # type: ignore[attr-defined]
            )
        )

    def __hash__(self) -> int:
        return hash(self.id)


def _serialize(value: Any) -> Any:  # noqa: ANN401
    match value:
        case dict():
            return filter_missing(value)
        case list() | set():
            return [
                _serialize(i)
                for i in value]
        case Enum():
            return value.value
        case _MissingType():
            return MISSING

    return value


def filter_missing(data: dict) -> dict:
    filtered = {}

    for k, v in data.items():
        if is_not_missing(value := _serialize(v)):
            filtered[k] = value

    return filtered
