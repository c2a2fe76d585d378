"""
Student models for registration, dashboards and profile browsing.
"""
from typing import Optional
from pydantic import BaseModel, Field


class StudentDocument(BaseModel):
    """A document attached to a student profile."""
    type: str  # e.g., "Marks Memo"
    url: str
    verified: bool = False


class Student(BaseModel):
    """A student seeking sponsorship."""
    id: str
    full_name: str
    email: str
    phone: str
    course: str
    income: float = Field(..., ge=0, description="Yearly family income")
    location: str
    percentage: float = Field(0, ge=0, le=100)
    category: str  # 'Single Parent', 'Orphan', 'Very Poor', etc.
    age: int
    description: str = ""
    is_verified: bool = False
    documents: list[StudentDocument] = []
    photo_url: str


class StudentRegistrationRequest(BaseModel):
    """Fields collected on the student registration screen."""
    full_name: str = Field(..., min_length=1, description="e.g. Rahul Kumar")
    email: str = Field(..., min_length=3, pattern=r"^[^@\s]+@[^@\s]+$")
    phone: str = Field(..., min_length=1)
    course: str = Field(..., min_length=1, description="Class / course, e.g. B.Tech 2nd Year")
    income: float = Field(..., ge=0, description="Yearly family income")
    location: str = Field(..., min_length=1, description="State / district, e.g. Hyderabad, TS")


class AcademicScore(BaseModel):
    """A point on the academic performance chart."""
    name: str  # "10th", "12th", "Curr"
    score: float


class StudentDetailResponse(Student):
    """Student profile with academic performance chart data."""
    academic_history: list[AcademicScore]


class StudentListResponse(BaseModel):
    students: list[Student]
    total: int
    verified_only: Optional[bool] = None
