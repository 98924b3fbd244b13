from pydantic import BaseModel
from typing import Optional, Union


class EnrollmentStatus:
    REGISTERED = "registered"
    PASSED = "passed"
    FAILED = "failed"


class EnrollmentCreate(BaseModel):
    course_id: Union[int, str]


class EnrollmentStatusUpdate(BaseModel):
    status: str


class MyEnrollmentRead(BaseModel):
    course_id: Union[int, str]
    course_title: Optional[str] = None
    status: Optional[str] = None


class EnrollmentRead(BaseModel):
    id: Union[int, str]
    user_email: str
    course_title: Optional[str] = None
    status: Optional[str] = None


class MessageResponse(BaseModel):
    message: str
