from fastapi import APIRouter, Depends
from typing import List
from supabase import Client  # type: ignore
from app.schemas.course import CourseCreate, CourseUpdate, CourseResponse
from app.schemas.enrollment import MessageResponse
from app.schemas.user import Principal
from app.dependencies import get_current_admin, get_supabase_admin
from app.utils.exceptions import UpstreamFailure
import logging

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=List[CourseResponse])
def list_courses(
    supabase: Client = Depends(get_supabase_admin)
):
    """List all courses, newest first"""
    try:
        result = supabase.table("courses").select("*").order(
            "created_at", desc=True
        ).execute()

        return result.data or []

    except Exception as e:
        logger.error(f"Failed to fetch courses: {str(e)}")
        raise UpstreamFailure.from_exception(e)


@router.post("", response_model=CourseResponse)
def create_course(
    course_data: CourseCreate,
    current_user: Principal = Depends(get_current_admin),
    supabase: Client = Depends(get_supabase_admin)
):
    """Create a new course (Admin only)"""
    try:
        result = supabase.table("courses").insert(course_data.model_dump()).execute()
        course = result.data[0]

        logger.info(f"Course {course.get('id')} created by {current_user.email}")
        return course

    except Exception as e:
        logger.error(f"Failed to create course: {str(e)}")
        raise UpstreamFailure.from_exception(e)


@router.put("/{course_id}", response_model=MessageResponse)
def update_course(
    course_id: str,
    course_data: CourseUpdate,
    current_user: Principal = Depends(get_current_admin),
    supabase: Client = Depends(get_supabase_admin)
):
    """Update course fields (Admin only)"""
    try:
        update_dict = course_data.model_dump(exclude_unset=True)

        supabase.table("courses").update(update_dict).eq("id", course_id).execute()

        logger.info(f"Course {course_id} updated by {current_user.email}")
        return {"message": "Updated"}

    except Exception as e:
        logger.error(f"Failed to update course {course_id}: {str(e)}")
        raise UpstreamFailure.from_exception(e)


@router.delete("/{course_id}", response_model=MessageResponse)
def delete_course(
    course_id: str,
    current_user: Principal = Depends(get_current_admin),
    supabase: Client = Depends(get_supabase_admin)
):
    """Delete course (Admin only)"""
    try:
        supabase.table("courses").delete().eq("id", course_id).execute()

        logger.info(f"Course {course_id} deleted by {current_user.email}")
        return {"message": "Deleted"}

    except Exception as e:
        logger.error(f"Failed to delete course {course_id}: {str(e)}")
        raise UpstreamFailure.from_exception(e)
