from fastapi import APIRouter, Depends
from typing import Any, Dict, List, Optional
from supabase import Client  # type: ignore
from app.schemas.enrollment import (
    EnrollmentCreate, EnrollmentStatusUpdate, EnrollmentRead,
    MyEnrollmentRead, MessageResponse, EnrollmentStatus
)
from app.schemas.user import Principal
from app.dependencies import get_current_user, get_current_admin, get_supabase_admin
from app.utils.exceptions import AppError, AlreadyEnrolled, UpstreamFailure
import logging

logger = logging.getLogger(__name__)

router = APIRouter()

# Postgres error code for unique constraint violations
UNIQUE_VIOLATION = "23505"


def _course_title(row: Dict[str, Any]) -> Optional[str]:
    course = row.get("courses") or {}
    return course.get("title")


@router.post("/enroll", response_model=MessageResponse)
def enroll_in_course(
    enrollment_data: EnrollmentCreate,
    current_user: Principal = Depends(get_current_user),
    supabase: Client = Depends(get_supabase_admin)
):
    """Enroll current user in a course"""
    course_id = enrollment_data.course_id
    try:
        # Check if already enrolled
        existing = supabase.table("enrollments").select("id").eq(
            "course_id", course_id
        ).eq("user_email", current_user.email).execute()

        if existing.data:
            raise AlreadyEnrolled("Sudah terdaftar")

        supabase.table("enrollments").insert({
            "course_id": course_id,
            "user_email": current_user.email,
            "status": EnrollmentStatus.REGISTERED
        }).execute()

        logger.info(f"{current_user.email} enrolled in course {course_id}")
        return {"message": "Pendaftaran berhasil"}

    except AppError:
        raise
    except Exception as e:
        # A concurrent request won the insert
        if getattr(e, "code", None) == UNIQUE_VIOLATION:
            raise AlreadyEnrolled("Sudah terdaftar")
        logger.error(f"Enrollment failed: {str(e)}")
        raise UpstreamFailure.from_exception(e)


@router.get("/my-enrollments", response_model=List[MyEnrollmentRead])
def get_my_enrollments(
    current_user: Principal = Depends(get_current_user),
    supabase: Client = Depends(get_supabase_admin)
):
    """Get current user's enrollments with course titles"""
    try:
        result = supabase.table("enrollments").select(
            "course_id, status, courses(title)"
        ).eq("user_email", current_user.email).execute()

    except Exception as e:
        logger.error(f"Failed to fetch enrollments: {str(e)}")
        raise UpstreamFailure.from_exception(e)

    return [
        {
            "course_id": row["course_id"],
            "course_title": _course_title(row),
            "status": row.get("status")
        }
        for row in result.data or []
    ]


@router.get("/enrollments", response_model=List[EnrollmentRead])
def list_enrollments(
    current_user: Principal = Depends(get_current_admin),
    supabase: Client = Depends(get_supabase_admin)
):
    """List all enrollments for verification (Admin only)"""
    try:
        result = supabase.table("enrollments").select(
            "id, user_email, status, courses(title)"
        ).execute()

    except Exception as e:
        logger.error(f"Failed to fetch enrollments: {str(e)}")
        raise UpstreamFailure.from_exception(e)

    return [
        {
            "id": row["id"],
            "user_email": row["user_email"],
            "course_title": _course_title(row),
            "status": row.get("status")
        }
        for row in result.data or []
    ]


@router.put("/enrollments/{enrollment_id}", response_model=MessageResponse)
def update_enrollment_status(
    enrollment_id: str,
    status_data: EnrollmentStatusUpdate,
    current_user: Principal = Depends(get_current_admin),
    supabase: Client = Depends(get_supabase_admin)
):
    """Set an enrollment's status, e.g. mark it passed (Admin only)"""
    try:
        supabase.table("enrollments").update(
            {"status": status_data.status}
        ).eq("id", enrollment_id).execute()

        logger.info(
            f"Enrollment {enrollment_id} set to '{status_data.status}' by {current_user.email}"
        )
        return {"message": "Status updated"}

    except Exception as e:
        logger.error(f"Failed to update enrollment {enrollment_id}: {str(e)}")
        raise UpstreamFailure.from_exception(e)
