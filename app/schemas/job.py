from pydantic import BaseModel, Field
from typing import Dict, Literal, Optional
from datetime import datetime


class JobBase(BaseModel):
    """Fields shared by job create/update requests"""
    title: str = Field(..., min_length=1, max_length=255)
    department: Optional[str] = Field(None, max_length=255)
    location: Optional[str] = Field(None, max_length=255)
    type: Optional[str] = Field(None, max_length=100, description="Employment type, e.g. Full-time")
    experience: Optional[str] = Field(None, max_length=100)
    salary: Optional[str] = Field(None, max_length=100)
    category: Optional[str] = Field(None, max_length=100)
    description: Optional[str] = None
    requirements: Optional[str] = None
    posted: Literal["true", "false"] = "true"
    featured: bool = False


class JobCreateRequest(JobBase):
    """Schema for creating a new job"""
    applicants: int = Field(0, ge=0)


class JobUpdateRequest(JobBase):
    """
    Schema for updating a job.

    Every mutable field is overwritten; applicants and timestamps are kept.
    """
    pass


class JobResponse(BaseModel):
    """Schema for job response"""
    id: int
    title: str
    department: Optional[str] = None
    location: Optional[str] = None
    type: Optional[str] = None
    experience: Optional[str] = None
    salary: Optional[str] = None
    category: Optional[str] = None
    description: Optional[str] = None
    requirements: Optional[str] = None
    posted: Optional[str] = None
    applicants: int
    featured: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True  # Allows conversion from SQLAlchemy models


class JobFilterOptions(BaseModel):
    """Categories with job counts and locations keyed for the filter UI"""
    categories: Dict[str, int]
    locations: Dict[str, str]
