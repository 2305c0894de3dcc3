"""
Wall domain records.

Records are persisted with camelCase keys (``firstName``, ``authorId``,
``createdAt`` ...) and used from Python by their snake_case attributes.
Timestamps without an offset are read as UTC.
"""

from datetime import datetime, timezone
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def _as_utc(value: datetime) -> datetime:
    return value.replace(tzinfo=timezone.utc) if value.tzinfo is None else value


UtcDatetime = Annotated[datetime, AfterValidator(_as_utc)]


class Record(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    def to_record(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


class User(Record):
    """A registered user. ``password_secret`` is compared verbatim on sign-in."""

    id: str
    username: str
    first_name: str
    last_name: str
    password_secret: str
    created_at: UtcDatetime

    @property
    def display_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def public(self) -> "PublicUser":
        return PublicUser(
            id=self.id,
            username=self.username,
            first_name=self.first_name,
            last_name=self.last_name,
            created_at=self.created_at,
        )


class PublicUser(BaseModel):
    """User as shown to the view: everything but the credential."""

    id: str
    username: str
    first_name: str
    last_name: str
    created_at: UtcDatetime


class Post(Record):
    """
    A wall post. Author fields are a snapshot taken at post time and are
    never updated afterwards.
    """

    id: str
    content: str
    author_id: str
    author_display_name: str
    author_username: str
    created_at: UtcDatetime
