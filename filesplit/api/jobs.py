"""Split and unsplit job routes."""
from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Callable, Dict
from uuid import uuid4

from fastapi import APIRouter, BackgroundTasks, HTTPException

from filesplit.config import Settings, get_settings
from filesplit.models.jobs import JobState, JobStatus, SplitJobRequest, UnsplitJobRequest
from filesplit.services import (
    FileSplitError,
    JoinResult,
    SplitResult,
    default_output_name,
    split_file,
    unsplit_files,
)

router = APIRouter(prefix="/api/v1", tags=["file split"])
logger = logging.getLogger(__name__)

JOBS: Dict[str, JobStatus] = {}
jobs_lock = threading.Lock()


def _base_dir(workdir: str | None, settings: Settings) -> Path:
    if workdir:
        return Path(workdir)
    if settings.work_dir is not None:
        return settings.work_dir
    return Path.cwd()


def _set_status(job_id: str, **changes) -> JobStatus:
    with jobs_lock:
        status = JOBS[job_id].model_copy(update=changes)
        JOBS[job_id] = status
    return status


def _new_job(kind: str) -> JobStatus:
    status = JobStatus(job_id=str(uuid4()), kind=kind, status=JobState.PENDING)
    with jobs_lock:
        JOBS[status.job_id] = status
    return status


def _run_job(job_id: str, work: Callable[[], SplitResult | JoinResult]) -> None:
    """Run a split or unsplit job and record its outcome."""
    _set_status(job_id, status=JobState.IN_PROGRESS)
    try:
        result = work()
    except FileSplitError as exc:
        logger.error(f"Job {job_id} failed: {exc}")
        _set_status(job_id, status=JobState.FAILED, detail=str(exc))
        return
    except Exception as exc:  # pragma: no cover - background failure logging
        logger.exception("Job failed unexpectedly: %s", job_id)
        _set_status(job_id, status=JobState.FAILED, detail=str(exc))
        return

    if isinstance(result, SplitResult):
        files = [str(path) for path in result.chunk_paths]
        detail = f"Successfully split file {result.source}."
    else:
        files = [str(result.output_path)]
        detail = f"Successfully combined {len(result.part_paths)} files into {result.output_path}."
    _set_status(
        job_id,
        status=JobState.COMPLETED,
        detail=detail,
        files=files,
        total_bytes=result.total_bytes,
    )


@router.post("/splits", response_model=JobStatus)
async def create_split(payload: SplitJobRequest, background_tasks: BackgroundTasks) -> JobStatus:
    settings = get_settings()
    base = _base_dir(payload.workdir, settings)
    extension = payload.extension
    if extension == "":
        extension = settings.default_extension

    def work() -> SplitResult:
        return split_file(
            base / payload.filename,
            payload.size,
            suffix=payload.suffix,
            extension=extension,
            workdir=base,
            settings=settings,
        )

    status = _new_job("split")
    background_tasks.add_task(_run_job, status.job_id, work)
    return status


@router.post("/unsplits", response_model=JobStatus)
async def create_unsplit(payload: UnsplitJobRequest, background_tasks: BackgroundTasks) -> JobStatus:
    settings = get_settings()
    base = _base_dir(payload.workdir, settings)
    folder = base / payload.foldername if payload.foldername else base
    output = base / (
        payload.filename or default_output_name(payload.foldername or base.name)
    )

    def work() -> JoinResult:
        return unsplit_files(
            folder,
            suffix=payload.suffix,
            output_filename=output,
            order=payload.order,
            settings=settings,
        )

    status = _new_job("unsplit")
    background_tasks.add_task(_run_job, status.job_id, work)
    return status


@router.get("/jobs/{job_id}", response_model=JobStatus)
async def get_job(job_id: str) -> JobStatus:
    with jobs_lock:
        status = JOBS.get(job_id)
    if not status:
        raise HTTPException(status_code=404, detail="job_id not found")
    return status
