"""Data models (Pydantic) for the application."""

from filesplit.models.jobs import JobState, JobStatus, SplitJobRequest, UnsplitJobRequest

__all__ = [
    "JobState",
    "JobStatus",
    "SplitJobRequest",
    "UnsplitJobRequest",
]
