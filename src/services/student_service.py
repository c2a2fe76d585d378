"""
Student service - handles registration, dashboards and profile browsing.
"""
import random
import string
from typing import Optional

from marks_memo_verifier import VerificationResult
from src.config import (
    DEFAULT_PHOTO_URL,
    DEFAULT_STUDENT_AGE,
    DEFAULT_STUDENT_CATEGORY,
    MARKS_MEMO_DOCUMENT_TYPE,
)
from src.exceptions import NotFoundError
from src.models import (
    AcademicScore,
    Student,
    StudentDetailResponse,
    StudentDocument,
    StudentRegistrationRequest,
    UserRole,
)
from src.state import AppState

STUDENT_ID_LENGTH = 9


def generate_student_id() -> str:
    """Short random id, e.g. 'k3j9x0a2b'."""
    alphabet = string.ascii_lowercase + string.digits
    return "".join(random.choices(alphabet, k=STUDENT_ID_LENGTH))


class StudentService:
    """Service for student operations."""

    def __init__(self, state: AppState):
        self.state = state

    def register(self, request: StudentRegistrationRequest) -> Student:
        """Create a student with demo defaults and sign in as that student."""
        student = Student(
            id=generate_student_id(),
            full_name=request.full_name,
            email=request.email,
            phone=request.phone,
            course=request.course,
            income=request.income,
            location=request.location,
            percentage=0,
            category=DEFAULT_STUDENT_CATEGORY,
            age=DEFAULT_STUDENT_AGE,
            description="",
            is_verified=False,
            documents=[],
            photo_url=DEFAULT_PHOTO_URL,
        )
        self.state.add_student(student)
        self.state.set_user_role(UserRole.STUDENT)
        return student

    def get_current(self) -> Student:
        student = self.state.current_student
        if student is None:
            raise NotFoundError("Student", "current")
        return student

    def get(self, student_id: str) -> Student:
        student = self.state.get_student(student_id)
        if student is None:
            raise NotFoundError("Student", student_id)
        return student

    def list_students(self, verified: Optional[bool] = None) -> list[Student]:
        """All students, or only those with the given verification status."""
        students = self.state.students
        if verified is None:
            return students
        return [s for s in students if s.is_verified == verified]

    def list_verified(self) -> list[Student]:
        return self.list_students(verified=True)

    @staticmethod
    def academic_history(student: Student) -> list[AcademicScore]:
        """
        Chart data for the profile screen.

        Only the current percentage is known; the 10th and 12th points are
        placeholders offset from it.
        """
        p = student.percentage
        return [
            AcademicScore(name="10th", score=p - 10),
            AcademicScore(name="12th", score=p - 5),
            AcademicScore(name="Curr", score=p),
        ]

    def get_detail(self, student_id: str) -> StudentDetailResponse:
        student = self.get(student_id)
        return StudentDetailResponse(
            **student.model_dump(),
            academic_history=self.academic_history(student),
        )

    def apply_verification(
        self,
        result: VerificationResult,
        student_id: Optional[str] = None,
    ) -> Optional[Student]:
        """
        Mark a student verified with the extracted percentage.

        student_id defaults to the current student. Negative verdicts leave
        the record unchanged.
        """
        if student_id is None:
            current = self.state.current_student
            student_id = current.id if current is not None else None
        if student_id is None:
            return None

        student = self.state.get_student(student_id)
        if student is None or not result.is_valid:
            return student

        documents = [doc.model_dump() for doc in student.documents]
        documents.append(
            StudentDocument(type=MARKS_MEMO_DOCUMENT_TYPE, url="#", verified=True).model_dump()
        )
        return self.state.update_student(
            student_id,
            is_verified=True,
            percentage=result.percentage,
            documents=documents,
        )
