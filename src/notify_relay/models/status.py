"""Status record model persisted for every submitted job."""

from __future__ import annotations

import time
from typing import override

from pydantic import BaseModel, Field, model_validator


def now_millis() -> int:
    """Current wall-clock time in epoch milliseconds."""
    return int(time.time() * 1000)


class StatusRecord(BaseModel):
    """Externally persisted snapshot of a job's lifecycle state.

    A record is written once when the job is created and once more when it
    reaches a terminal state. Terminal records (completed or failed) are
    never rewritten.
    """

    data: object | None = Field(
        default=None,
        description="Handler result once the job completed",
    )

    completed: bool = Field(
        default=False,
        description="Whether the handler finished successfully",
    )

    failed: bool = Field(
        default=False,
        description="Whether the job gave up after exhausting its retries",
    )

    error: str | None = Field(
        default=None,
        description="Message of the final error for failed jobs",
    )

    position: int | None = Field(
        default=None,
        ge=1,
        description="One-based rank among pending jobs, None once processing started",
    )

    timestamp: int = Field(
        default_factory=now_millis,
        description="Epoch milliseconds of the write",
    )

    @model_validator(mode="after")
    def validate_terminal_state(self) -> StatusRecord:
        """A record cannot be both completed and failed."""
        if self.completed and self.failed:
            raise ValueError("A status record cannot be both completed and failed")
        return self

    @property
    def is_terminal(self) -> bool:
        """Whether the record describes a finished job."""
        return self.completed or self.failed

    @classmethod
    def pending(cls, position: int | None) -> StatusRecord:
        """Initial record for a freshly queued job."""
        return cls(position=position)

    @classmethod
    def succeeded(cls, data: object) -> StatusRecord:
        """Terminal record for a job whose handler returned ``data``."""
        return cls(data=data, completed=True)

    @classmethod
    def gave_up(cls, error: BaseException) -> StatusRecord:
        """Terminal record for a job that failed permanently."""
        return cls(failed=True, error=str(error))

    def to_store(self) -> dict[str, object]:
        """JSON-compatible mapping written to the status store.

        Handler results pydantic cannot encode are stored as their string form.
        """
        return self.model_dump(mode="json", fallback=str)

    @override
    def __str__(self) -> str:
        """String representation of the record."""
        if self.completed:
            state = "completed"
        elif self.failed:
            state = "failed"
        else:
            state = f"pending (position {self.position})"
        return f"StatusRecord({state})"
