"""Request/response models for split and unsplit jobs."""
from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field

from filesplit.services.naming import JoinOrder


class JobState(str, Enum):
    """Job lifecycle states."""
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    FAILED = "failed"


class SplitJobRequest(BaseModel):
    """Payload for splitting a file into chunks."""

    filename: str
    size: int
    suffix: str = ""
    extension: Optional[str] = None
    workdir: Optional[str] = None


class UnsplitJobRequest(BaseModel):
    """Payload for joining chunks from a folder."""

    foldername: str = ""
    suffix: str = ""
    filename: str = ""
    order: Optional[JoinOrder] = None
    workdir: Optional[str] = None


class JobStatus(BaseModel):
    job_id: str
    kind: str
    status: JobState
    detail: Optional[str] = None
    files: List[str] = Field(default_factory=list)
    total_bytes: int = 0
