"""
CRUD operations for Job model.

Implements the Repository pattern to encapsulate all database operations
for jobs, providing a clean interface for the service layer.
"""

from typing import List, Optional
from sqlalchemy import or_
from sqlalchemy.orm import Session
from app.models.job import Job


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


class JobRepository:
    """
    Persistence collaborator for Job records, bound to one database session.

    Session errors are not caught here; callers decide whether to roll back.
    """

    def __init__(self, db: Session):
        self.db = db

    def count(self) -> int:
        """Total number of jobs."""
        return self.db.query(Job).count()

    def find_all(self) -> List[Job]:
        return self.db.query(Job).order_by(Job.id).all()

    def find_by_featured_true(self) -> List[Job]:
        return self.db.query(Job).filter(Job.featured.is_(True)).order_by(Job.id).all()

    def find_by_category(self, category: str) -> List[Job]:
        """Jobs whose category equals `category` exactly."""
        return self.db.query(Job).filter(Job.category == category).order_by(Job.id).all()

    def find_by_location_containing_ignore_case(self, location: str) -> List[Job]:
        """Jobs whose location contains `location`, ignoring case."""
        return (
            self.db.query(Job)
            .filter(Job.location.icontains(location, autoescape=True))
            .order_by(Job.id)
            .all()
        )

    def find_jobs_with_filters(
        self,
        search: Optional[str] = None,
        category: Optional[str] = None,
        location: Optional[str] = None
    ) -> List[Job]:
        """
        Retrieve jobs matching every provided filter.

        None or blank values skip that filter. Filters combine with AND:
        - search: case-insensitive substring of title, department,
          description or requirements
        - category: exact match
        - location: case-insensitive substring

        Args:
            search: Free-text search term
            category: Category tag
            location: Location fragment

        Returns:
            List of matching Job instances ordered by id
        """
        query = self.db.query(Job)

        if not _is_blank(search):
            term = search.strip()
            query = query.filter(or_(
                Job.title.icontains(term, autoescape=True),
                Job.department.icontains(term, autoescape=True),
                Job.description.icontains(term, autoescape=True),
                Job.requirements.icontains(term, autoescape=True),
            ))

        if not _is_blank(category):
            query = query.filter(Job.category == category.strip())

        if not _is_blank(location):
            query = query.filter(Job.location.icontains(location.strip(), autoescape=True))

        return query.order_by(Job.id).all()

    def find_all_categories(self) -> List[Optional[str]]:
        """Distinct categories, including None when uncategorised jobs exist."""
        rows = self.db.query(Job.category).distinct().all()
        return [row[0] for row in rows]

    def find_all_locations(self) -> List[str]:
        """Distinct non-null locations."""
        rows = self.db.query(Job.location).filter(Job.location.isnot(None)).distinct().all()
        return [row[0] for row in rows]

    def find_by_id(self, job_id: int) -> Optional[Job]:
        """
        Retrieve a job by its ID.

        Returns:
            Job instance if found, None otherwise
        """
        return self.db.query(Job).filter(Job.id == job_id).first()

    def save(self, job: Job) -> Job:
        """
        Insert or update a job and return the refreshed instance.
        """
        self.db.add(job)
        self.db.commit()
        self.db.refresh(job)
        return job

    def delete_by_id(self, job_id: int) -> None:
        """Delete a job by ID. Does nothing when the job does not exist."""
        job = self.find_by_id(job_id)
        if not job:
            return

        self.db.delete(job)
        self.db.commit()
