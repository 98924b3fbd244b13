"""
Certificate Generation Service
Renders the course completion certificate for a passed enrollment as a PDF
"""

import time
from io import BytesIO
from pathlib import Path
from typing import Any, Dict, Optional, Tuple
from datetime import date
from reportlab.lib.colors import HexColor
from reportlab.lib.pagesizes import A4
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont
from reportlab.pdfgen import canvas
from supabase import Client  # type: ignore
from app.config import settings
from app.schemas.enrollment import EnrollmentStatus
from app.schemas.user import Principal
from app.utils.exceptions import NotEligible
import logging

logger = logging.getLogger(__name__)


INDONESIAN_MONTHS = [
    "Januari", "Februari", "Maret", "April", "Mei", "Juni",
    "Juli", "Agustus", "September", "Oktober", "November", "Desember",
]


def format_indonesian_date(day: date) -> str:
    """Long Indonesian date, e.g. 18 Oktober 2026"""
    return f"{day.day} {INDONESIAN_MONTHS[day.month - 1]} {day.year}"


def generate_certificate_number() -> str:
    """KK- plus the last six digits of the epoch time in milliseconds"""
    return f"KK-{str(int(time.time() * 1000))[-6:]}"


class CertificateService:
    """Service for certificate eligibility checks and PDF rendering"""

    PRIMARY_COLOR = "#1E3A8A"
    BORDER_COLOR = "#CBD5E1"
    TEXT_COLOR = "#000000"
    MUTED_COLOR = "#374151"

    DEFAULT_RECIPIENT = "Peserta"
    DEFAULT_COURSE_TITLE = "Kursus"
    FOOTER = "KursusKu — Platform Pembelajaran Bahasa Indonesia"
    FILENAME = "sertifikat.pdf"

    def __init__(
        self,
        font_path: str = settings.CERTIFICATE_FONT_PATH,
        bold_font_path: str = settings.CERTIFICATE_BOLD_FONT_PATH,
    ):
        self.font_path = font_path
        self.bold_font_path = bold_font_path
        self._fonts: Optional[Tuple[str, str]] = None

    def _register_font(self, path: str, fallback: str) -> str:
        if not Path(path).exists():
            logger.warning(f"Certificate font {path} not found, using {fallback}")
            return fallback
        name = Path(path).stem
        if name in pdfmetrics.getRegisteredFontNames():
            return name
        try:
            pdfmetrics.registerFont(TTFont(name, path))
        except Exception as e:
            logger.warning(f"Could not load certificate font {path}: {str(e)}")
            return fallback
        return name

    def fonts(self) -> Tuple[str, str]:
        """
        Regular and bold font names for certificate text

        TrueType fonts cover names outside Latin-1; the built-in Helvetica
        pair is used when they cannot be loaded.
        """
        if self._fonts is None:
            self._fonts = (
                self._register_font(self.font_path, "Helvetica"),
                self._register_font(self.bold_font_path, "Helvetica-Bold"),
            )
        return self._fonts

    def get_passed_enrollment(
        self, supabase: Client, course_id: str, email: Optional[str]
    ) -> Dict[str, Any]:
        """
        Fetch the caller's enrollment for a course and require it to be passed

        Args:
            supabase: Data access client
            course_id: Course ID
            email: Email of the requesting principal

        Returns:
            Enrollment row with the joined course title

        Raises:
            NotEligible: No enrollment, lookup failure, or status other than passed
        """
        try:
            result = supabase.table("enrollments").select(
                "status, courses(title)"
            ).eq("course_id", course_id).eq("user_email", email).execute()
        except Exception as e:
            logger.warning(f"Enrollment lookup failed for {email}, course {course_id}: {str(e)}")
            raise NotEligible("Belum lulus")

        enrollment = result.data[0] if result.data else None
        if not enrollment or enrollment.get("status") != EnrollmentStatus.PASSED:
            logger.warning(f"Certificate refused for {email}, course {course_id}")
            raise NotEligible("Belum lulus")

        return enrollment

    def recipient_name(self, principal: Principal) -> str:
        return principal.full_name or principal.email or self.DEFAULT_RECIPIENT

    def course_title(self, enrollment: Dict[str, Any]) -> str:
        course = enrollment.get("courses") or {}
        return course.get("title") or self.DEFAULT_COURSE_TITLE

    def render(
        self,
        recipient: str,
        course_title: str,
        issued_on: Optional[date] = None,
        certificate_number: Optional[str] = None,
    ) -> bytes:
        """Draw the single-page A4 certificate and return the PDF bytes"""
        issued_on = issued_on or date.today()
        certificate_number = certificate_number or generate_certificate_number()
        font, font_bold = self.fonts()

        buf = BytesIO()
        c = canvas.Canvas(buf, pagesize=A4)
        width, height = A4
        center = width / 2

        # border
        c.setLineWidth(3)
        c.setStrokeColor(HexColor(self.PRIMARY_COLOR))
        c.rect(20, height - 822, 555, 802, stroke=1, fill=0)

        c.setLineWidth(1)
        c.setStrokeColor(HexColor(self.BORDER_COLOR))
        c.rect(30, height - 812, 535, 782, stroke=1, fill=0)

        # header
        c.setFont(font_bold, 28)
        c.setFillColor(HexColor(self.PRIMARY_COLOR))
        c.drawCentredString(center, height - 135, "SERTIFIKAT")

        c.setFont(font_bold, 20)
        c.setFillColor(HexColor(self.TEXT_COLOR))
        c.drawCentredString(center, height - 165, "KELULUSAN")

        c.setStrokeColor(HexColor(self.PRIMARY_COLOR))
        c.line(150, height - 200, 450, height - 200)

        # body
        c.setFont(font, 12)
        c.drawCentredString(center, height - 260, "Diberikan kepada:")

        c.setFont(font_bold, 22)
        c.drawCentredString(center, height - 295, recipient)

        c.setFont(font, 12)
        c.drawCentredString(center, height - 345, "Atas keberhasilannya menyelesaikan kursus:")

        c.setFont(font_bold, 18)
        c.drawCentredString(center, height - 378, course_title)

        c.setFont(font, 12)
        c.drawCentredString(center, height - 440, f"Tanggal: {format_indonesian_date(issued_on)}")

        # footer
        c.setFont(font, 10)
        c.setFillColor(HexColor(self.MUTED_COLOR))
        c.drawCentredString(center, height - 510, f"Nomor Sertifikat: {certificate_number}")
        c.drawCentredString(center, height - 528, self.FOOTER)

        c.showPage()
        c.save()
        return buf.getvalue()

    def generate_course_certificate(
        self, supabase: Client, course_id: str, principal: Principal
    ) -> bytes:
        """
        Check eligibility and render the completion certificate

        Args:
            supabase: Data access client
            course_id: Course ID
            principal: Authenticated caller

        Returns:
            PDF document bytes
        """
        enrollment = self.get_passed_enrollment(supabase, course_id, principal.email)
        certificate_number = generate_certificate_number()

        pdf = self.render(
            recipient=self.recipient_name(principal),
            course_title=self.course_title(enrollment),
            certificate_number=certificate_number,
        )

        logger.info(
            f"Certificate {certificate_number} issued to {principal.email}, course {course_id}"
        )
        return pdf


# Singleton instance
certificate_service = CertificateService()
