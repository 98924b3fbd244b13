"""
Certificate Endpoints
Streams the completion certificate PDF for a passed enrollment
"""

from fastapi import APIRouter, Depends
from fastapi.responses import Response
from supabase import Client  # type: ignore
from app.services.certificate_service import certificate_service
from app.schemas.user import Principal
from app.dependencies import get_current_user, get_supabase_admin

router = APIRouter()


@router.get(
    "/{course_id}",
    response_class=Response,
    responses={200: {"content": {"application/pdf": {}}}},
)
def get_course_certificate(
    course_id: str,
    current_user: Principal = Depends(get_current_user),
    supabase: Client = Depends(get_supabase_admin)
):
    """
    Render the completion certificate for a course

    Args:
        course_id: Course ID

    Returns:
        Inline PDF document, or 403 when the enrollment has not passed
    """
    pdf = certificate_service.generate_course_certificate(
        supabase, course_id, current_user
    )

    return Response(
        content=pdf,
        media_type="application/pdf",
        headers={
            "Content-Disposition": f'inline; filename="{certificate_service.FILENAME}"'
        },
    )
