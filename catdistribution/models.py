# catdistribution/models.py
from datetime import datetime, timezone
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class User(BaseModel):
    """The active session user, handed to the operation-log client."""

    id: str
    username: str = ""


class OperationLogEntry(BaseModel):
    """One entry of the remote operation log.

    The remote service speaks camelCase JSON, so fields accept both the
    Python name and the wire alias.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: Optional[Union[int, str]] = None
    user_id: Optional[str] = Field(default=None, alias="userId")
    action: str
    cat_name: Optional[str] = Field(default=None, alias="catName")
    timestamp: datetime = Field(default_factory=_utcnow)

    def to_payload(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
