import logging
from fastapi import APIRouter, HTTPException, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.deps import get_job_service
from app.models.job import Job
from app.schemas.job import JobCreateRequest, JobUpdateRequest, JobResponse, JobFilterOptions
from app.services.job_service import JobService

router = APIRouter(prefix="/jobs", tags=["Jobs"])
logger = logging.getLogger(__name__)


@router.get("", response_model=list[JobResponse])
def list_jobs(service: JobService = Depends(get_job_service)):
    """List every job listing."""
    return service.list_all()


@router.get("/featured", response_model=list[JobResponse])
def list_featured_jobs(service: JobService = Depends(get_job_service)):
    """List featured jobs for the home page."""
    return service.list_featured()


@router.get("/filters", response_model=JobFilterOptions)
def get_job_filters(service: JobService = Depends(get_job_service)):
    """
    Filter options for the careers page.

    - categories: job count per category, plus "all"
    - locations: normalized key -> display name, plus "all" and "remote"
    """
    return service.get_filter_options()


@router.get("/search", response_model=list[JobResponse])
def search_jobs(
    search: str = "",
    category: str = "",
    location: str = "",
    service: JobService = Depends(get_job_service)
):
    """
    Search jobs. Empty parameters are ignored; the rest must all match.

    Args:
        search: Text matched against title, department, description and requirements
        category: Exact category
        location: Location fragment (case-insensitive)
    """
    return service.search(search, category, location)


@router.get("/category/{category}", response_model=list[JobResponse])
def list_jobs_by_category(category: str, service: JobService = Depends(get_job_service)):
    return service.list_by_category(category)


@router.get("/location/{location}", response_model=list[JobResponse])
def list_jobs_by_location(location: str, service: JobService = Depends(get_job_service)):
    return service.list_by_location(location)


@router.get("/{job_id}", response_model=JobResponse)
def get_job(job_id: int, service: JobService = Depends(get_job_service)):
    """Retrieve a job by ID."""
    job = service.get_by_id(job_id)

    if not job:
        raise HTTPException(status_code=404, detail="Job not found")

    return job


@router.post("", status_code=201, response_model=JobResponse)
def create_job(
    request: JobCreateRequest,
    db: Session = Depends(get_db),
    service: JobService = Depends(get_job_service)
):
    """Create a new job listing."""
    try:
        return service.create(Job(**request.model_dump()))

    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error creating job: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to create job: {str(e)}")


@router.put("/{job_id}", response_model=JobResponse)
def update_job(
    job_id: int,
    request: JobUpdateRequest,
    db: Session = Depends(get_db),
    service: JobService = Depends(get_job_service)
):
    """
    Replace the editable fields of a job.

    Applicant count and timestamps are not taken from the request.
    """
    try:
        job = service.update(job_id, request)

    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error updating job {job_id}: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to update job: {str(e)}")

    if not job:
        raise HTTPException(status_code=404, detail="Job not found")

    return job


@router.delete("/{job_id}", status_code=204)
def delete_job(
    job_id: int,
    db: Session = Depends(get_db),
    service: JobService = Depends(get_job_service)
):
    """
    Delete a job by ID. Deleting a missing job is not an error.
    """
    try:
        service.delete(job_id)

    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error deleting job {job_id}: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to delete job: {str(e)}")

    logger.info(f"Deleted job {job_id}")
    return None
