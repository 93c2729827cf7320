"""Published description of the last failed fetch."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict

from gasoprice.domain.errors import DecodeError, FetchError, NetworkError

ErrorKind = Literal["network", "decode", "other"]


class ErrorDetails(BaseModel):
    """Why the last fetch failed; status_code is set when a response arrived."""

    model_config = ConfigDict(frozen=True)

    reason: str
    status_code: int | None = None
    kind: ErrorKind = "other"
    occurred_at: datetime | None = None

    @classmethod
    def from_fetch_error(
        cls, error: FetchError, occurred_at: datetime | None = None
    ) -> "ErrorDetails":
        kind: ErrorKind = "other"
        if isinstance(error, NetworkError):
            kind = "network"
        elif isinstance(error, DecodeError):
            kind = "decode"
        return cls(
            reason=error.cause,
            status_code=error.status_code,
            kind=kind,
            occurred_at=occurred_at,
        )
