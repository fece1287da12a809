"""
Job listing service.

Seeds the default listings on first startup and exposes read/write
operations plus the filter options report used by the careers page.
"""

import logging
from typing import Any, Dict, List, Optional

from app.crud.job import JobRepository
from app.models.job import Job

logger = logging.getLogger(__name__)


# Seeded in this order when the jobs table is empty
DEFAULT_JOBS: List[Dict[str, Any]] = [
    {
        "title": "Senior Frontend Developer",
        "department": "Engineering",
        "location": "Bangalore / Remote",
        "type": "Full-time",
        "experience": "5+ years",
        "salary": "8 LPA - 12 LPA",
        "category": "engineering",
        "description": (
            "Build amazing user interfaces and help shape the future of our platform. "
            "Work with cutting-edge technologies and collaborate with world-class engineers."
        ),
        "requirements": "React, TypeScript, Node.js, 5+ years experience",
        "posted": "true",
        "applicants": 45,
        "featured": True,
    },
    {
        "title": "Product Manager",
        "department": "Product",
        "location": "Hyderabad / Hybrid",
        "type": "Full-time",
        "experience": "3-5 years",
        "salary": "6 LPA - 9 LPA",
        "category": "product",
        "description": (
            "Drive product strategy and work with cross-functional teams to deliver "
            "exceptional products that users love."
        ),
        "requirements": "Product strategy, Data analysis, Leadership, 3+ years experience",
        "posted": "true",
        "applicants": 32,
        "featured": True,
    },
    {
        "title": "Backend Engineer",
        "department": "Engineering",
        "location": "Pune",
        "type": "Full-time",
        "experience": "3-5 years",
        "salary": "7 LPA - 10 LPA",
        "category": "engineering",
        "description": "Design and implement scalable backend systems and APIs that power our platform.",
        "requirements": "Java, Spring Boot, Microservices, 3+ years experience",
        "posted": "true",
        "applicants": 28,
        "featured": False,
    },
    {
        "title": "UX Designer",
        "department": "Design",
        "location": "Bangalore",
        "type": "Full-time",
        "experience": "2-4 years",
        "salary": "5 LPA - 7 LPA",
        "category": "design",
        "description": "Create beautiful and intuitive user experiences that delight our users.",
        "requirements": "Figma, User research, Prototyping, 2+ years experience",
        "posted": "true",
        "applicants": 19,
        "featured": False,
    },
    {
        "title": "Data Scientist",
        "department": "Data",
        "location": "Remote / Pune",
        "type": "Full-time",
        "experience": "4-6 years",
        "salary": "6 LPA - 8 LPA",
        "category": "data",
        "description": "Apply machine learning and statistical analysis to solve complex business problems.",
        "requirements": "Python, Machine Learning, Statistics, 4+ years experience",
        "posted": "true",
        "applicants": 52,
        "featured": True,
    },
]

# Overwritten by update(); id, applicants and timestamps are left alone
UPDATABLE_FIELDS = (
    "title",
    "department",
    "location",
    "type",
    "experience",
    "salary",
    "category",
    "description",
    "requirements",
    "posted",
    "featured",
)


def location_key(location: str) -> str:
    """Normalize a location into a filter key: 'Remote / Pune' -> 'remote-/-pune'."""
    return location.lower().replace(" ", "-")


class JobService:
    """
    Business operations over job listings.

    All persistence goes through the repository passed to the constructor.
    """

    def __init__(self, repository: JobRepository):
        self.repository = repository

    def seed_if_empty(self) -> None:
        """
        Insert the default jobs when no job exists yet.

        Safe to call on every startup: does nothing once any job is stored.
        """
        if self.repository.count() != 0:
            return

        logger.info("Initializing default jobs")
        for values in DEFAULT_JOBS:
            self.repository.save(Job(**values))

        logger.info(f"Created {self.repository.count()} default jobs")

    def list_all(self) -> List[Job]:
        return self.repository.find_all()

    def list_featured(self) -> List[Job]:
        return self.repository.find_by_featured_true()

    def list_by_category(self, category: str) -> List[Job]:
        return self.repository.find_by_category(category)

    def list_by_location(self, location: str) -> List[Job]:
        return self.repository.find_by_location_containing_ignore_case(location)

    def search(self, search_text: Optional[str], category: Optional[str], location: Optional[str]) -> List[Job]:
        """Combined filter; blank values do not filter. See JobRepository.find_jobs_with_filters."""
        return self.repository.find_jobs_with_filters(search_text, category, location)

    def get_by_id(self, job_id: int) -> Optional[Job]:
        return self.repository.find_by_id(job_id)

    def create(self, job: Job) -> Job:
        created = self.repository.save(job)
        logger.info(f"Created job {created.id}: {created.title}")
        return created

    def update(self, job_id: int, new_values: Any) -> Optional[Job]:
        """
        Overwrite the mutable fields of an existing job.

        Args:
            job_id: Job ID to update
            new_values: Object exposing the UPDATABLE_FIELDS as attributes
                (a Job or a JobUpdateRequest)

        Returns:
            Updated Job instance if found, None otherwise (nothing is written)
        """
        job = self.get_by_id(job_id)
        if not job:
            return None

        for field in UPDATABLE_FIELDS:
            setattr(job, field, getattr(new_values, field))

        updated = self.repository.save(job)
        logger.info(f"Updated job {job_id}")
        return updated

    def delete(self, job_id: int) -> None:
        self.repository.delete_by_id(job_id)

    def get_filter_options(self) -> Dict[str, Dict[str, Any]]:
        """
        Build the filter options report.

        Returns:
            {"categories": {"all": total, category: count, ...},
             "locations": {"all": "All Locations", "remote": "Remote", key: display, ...}}
        """
        category_counts: Dict[str, int] = {"all": len(self.list_all())}
        for category in self.repository.find_all_categories():
            # "all" is reserved for the total
            if category is not None and category != "all":
                category_counts[category] = len(self.list_by_category(category))

        location_options: Dict[str, str] = {
            "all": "All Locations",
            "remote": "Remote",
        }
        for location in self.repository.find_all_locations():
            location_options[location_key(location)] = location

        return {
            "categories": category_counts,
            "locations": location_options,
        }
