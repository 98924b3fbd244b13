#!/usr/bin/env python3
"""
Sample Data Seeder for KursusKu
Creates demo courses and, optionally, a passed enrollment for certificate testing

Usage:
    python seed_data.py [student-email]
"""

import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent))

from app.core.supabase_client import get_supabase_admin_client
from app.schemas.course import CourseCreate
from app.schemas.enrollment import EnrollmentStatus

# Use admin client for seeding (bypasses RLS)
db = get_supabase_admin_client()


def create_sample_courses():
    """Create sample courses"""
    print("\n📚 Creating sample courses...")

    courses = [
        CourseCreate(
            title="Bahasa Indonesia A1",
            description="Salam, perkenalan, dan angka untuk pemula.",
            level="A1",
            price=0,
        ),
        CourseCreate(
            title="Bahasa Indonesia A2",
            description="Percakapan sehari-hari: belanja, transportasi, dan makanan.",
            level="A2",
            price=150000,
        ),
        CourseCreate(
            title="Bahasa Indonesia B1",
            description="Membaca berita dan menulis surat resmi.",
            level="B1",
            price=250000,
        ),
    ]

    created_courses = []

    for course in courses:
        try:
            result = db.table("courses").insert(course.model_dump()).execute()
            created_courses.append(result.data[0])
            print(f"   ✅ Created course: {course.title}")
        except Exception as e:
            print(f"   ❌ Error creating course {course.title}: {e}")

    return created_courses


def create_passed_enrollment(course, email):
    """Enroll a student and mark the enrollment passed"""
    print(f"\n🎓 Enrolling {email} in {course['title']}...")

    try:
        db.table("enrollments").insert({
            "course_id": course["id"],
            "user_email": email,
            "status": EnrollmentStatus.PASSED
        }).execute()
        print("   ✅ Enrollment created with status 'passed'")
    except Exception as e:
        print(f"   ❌ Error creating enrollment: {e}")


def main():
    """Main seeding function"""
    print("="*60)
    print("🌱 KursusKu - Sample Data Seeder")
    print("="*60)

    courses = create_sample_courses()

    if len(sys.argv) > 1 and courses:
        create_passed_enrollment(courses[0], sys.argv[1])

    print("\n" + "="*60)
    print(f"✅ Seeding finished: {len(courses)} course(s) created")
    print("="*60)
    print("\n🚀 Run: python run.py")


if __name__ == "__main__":
    main()
