"""
Student endpoints - registration, dashboard, matched list and profile detail.
"""
import logging
from typing import Optional
from fastapi import APIRouter, Depends, Query, status

from src.dependencies import get_student_service
from src.models import (
    Student,
    StudentDetailResponse,
    StudentListResponse,
    StudentRegistrationRequest,
)
from src.services import StudentService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/students", tags=["Students"])


@router.post("", response_model=Student, status_code=status.HTTP_201_CREATED)
async def register_student(
    request: StudentRegistrationRequest,
    service: StudentService = Depends(get_student_service)
):
    """Register a student and sign in as them."""
    student = service.register(request)
    logger.info(f"Registered student {student.id}")
    return student


@router.get("", response_model=StudentListResponse)
async def list_students(
    verified: Optional[bool] = Query(None, description="Filter by verification status"),
    service: StudentService = Depends(get_student_service)
):
    """List students; verified=true gives the matched-students list."""
    students = service.list_students(verified=verified)
    return StudentListResponse(students=students, total=len(students), verified_only=verified)


@router.get("/me", response_model=Student)
async def get_current_student(service: StudentService = Depends(get_student_service)):
    """Student dashboard for the signed-in student."""
    return service.get_current()


@router.get("/{student_id}", response_model=StudentDetailResponse)
async def get_student(
    student_id: str,
    service: StudentService = Depends(get_student_service)
):
    """Student profile with academic performance chart data."""
    return service.get_detail(student_id)
