"""Pydantic request/response schemas for the Ordering API.

These are external contracts for payment/delivery providers and schedulers,
separate from the internal Protean commands.
"""

from pydantic import BaseModel, Field


class StatusUpdateRequest(BaseModel):
    status: int = Field(ge=-1, le=32767)


class RunJobRequest(BaseModel):
    name: str = Field(min_length=1, max_length=64)


class StatusResponse(BaseModel):
    status: str = "ok"


class JobResponse(BaseModel):
    name: str
    status: str = "finished"
