from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime, func
from app.core.database import Base


class Job(Base):
    """
    Job model representing a job listing shown on the careers page.

    `posted` is stored as the text "true"/"false", matching the existing
    schema the frontend reads.
    """
    __tablename__ = "jobs"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False, index=True)
    department = Column(String(255), nullable=True)
    location = Column(String(255), nullable=True, index=True)
    type = Column(String(100), nullable=True)
    experience = Column(String(100), nullable=True)
    salary = Column(String(100), nullable=True)
    category = Column(String(100), nullable=True, index=True)
    description = Column(Text, nullable=True)
    requirements = Column(Text, nullable=True)
    posted = Column(String(10), nullable=True, default="true")
    applicants = Column(Integer, nullable=False, default=0)
    featured = Column(Boolean, nullable=False, default=False, index=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    def __repr__(self):
        return f"<Job(id={self.id}, title='{self.title}', category={self.category})>"
