"""
Tests for course endpoints and price coercion
"""

import pytest
from fastapi import status
from postgrest.exceptions import APIError
from app.schemas.course import CourseCreate, CourseUpdate, coerce_price


class TestCourseEndpoints:
    """Tests for course endpoints"""

    def test_list_courses(self, client, mock_courses, mock_supabase_admin):
        """Test listing all courses newest first"""
        mock_supabase_admin.table.return_value.select.return_value.order.return_value.execute.return_value.data = mock_courses

        response = client.get("/api/courses")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert [course["title"] for course in data] == [course["title"] for course in mock_courses]
        mock_supabase_admin.table.assert_called_with("courses")
        mock_supabase_admin.table.return_value.select.return_value.order.assert_called_once_with(
            "created_at", desc=True
        )

    def test_list_courses_empty(self, client, mock_supabase_admin):
        mock_supabase_admin.table.return_value.select.return_value.order.return_value.execute.return_value.data = None

        response = client.get("/api/courses")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == []

    def test_list_courses_database_error(self, client, mock_supabase_admin):
        """Database errors surface verbatim as 500"""
        mock_supabase_admin.table.return_value.select.return_value.order.return_value.execute.side_effect = APIError({
            "message": 'relation "public.courses" does not exist',
            "code": "42P01",
            "hint": None,
            "details": None,
        })

        response = client.get("/api/courses")

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.json() == {"message": 'relation "public.courses" does not exist'}

    def test_create_course(self, client, admin_auth_headers, mock_course, mock_supabase_admin):
        """Test creating a new course"""
        mock_supabase_admin.table.return_value.insert.return_value.execute.return_value.data = [mock_course]

        response = client.post(
            "/api/courses",
            headers=admin_auth_headers,
            json={
                "title": mock_course["title"],
                "description": mock_course["description"],
                "level": "A1",
                "price": "150000",
                "image_url": ""
            }
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["id"] == mock_course["id"]
        assert data["title"] == mock_course["title"]

        inserted = mock_supabase_admin.table.return_value.insert.call_args[0][0]
        assert inserted == {
            "title": mock_course["title"],
            "description": mock_course["description"],
            "level": "A1",
            "price": 150000,
            "image_url": None,
        }

    def test_create_course_non_numeric_price(self, client, admin_auth_headers, mock_supabase_admin):
        """A price that is not a number is stored as 0"""
        mock_supabase_admin.table.return_value.insert.return_value.execute.return_value.data = [
            {"id": 9, "title": "Bahasa A1", "price": 0}
        ]

        response = client.post(
            "/api/courses",
            headers=admin_auth_headers,
            json={"title": "Bahasa A1", "price": "abc"}
        )

        assert response.status_code == status.HTTP_200_OK
        inserted = mock_supabase_admin.table.return_value.insert.call_args[0][0]
        assert inserted["price"] == 0
        assert response.json()["price"] == 0

    def test_update_course(self, client, admin_auth_headers, mock_supabase_admin):
        """Test partial update passes only the submitted fields"""
        response = client.put(
            "/api/courses/5",
            headers=admin_auth_headers,
            json={"title": "Bahasa Indonesia A1 (Baru)", "is_featured": True}
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"message": "Updated"}

        table = mock_supabase_admin.table.return_value
        table.update.assert_called_once_with({"title": "Bahasa Indonesia A1 (Baru)", "is_featured": True})
        table.update.return_value.eq.assert_called_once_with("id", "5")

    def test_create_course_passes_non_string_fields(self, client, admin_auth_headers, mock_supabase_admin):
        """Only price is coerced; other fields reach the store as sent"""
        mock_supabase_admin.table.return_value.insert.return_value.execute.return_value.data = [
            {"id": 10, "title": 123, "level": ["A1", "A2"], "price": 0}
        ]

        response = client.post(
            "/api/courses",
            headers=admin_auth_headers,
            json={"title": 123, "level": ["A1", "A2"]}
        )

        assert response.status_code == status.HTTP_200_OK
        inserted = mock_supabase_admin.table.return_value.insert.call_args[0][0]
        assert inserted["title"] == 123
        assert inserted["level"] == ["A1", "A2"]
        assert response.json()["title"] == 123

    def test_update_course_null_price(self, client, admin_auth_headers, mock_supabase_admin):
        """An explicit null price is forwarded, not turned into 0"""
        response = client.put("/api/courses/5", headers=admin_auth_headers, json={"price": None})

        assert response.status_code == status.HTTP_200_OK
        mock_supabase_admin.table.return_value.update.assert_called_once_with({"price": None})

    def test_update_course_database_error(self, client, admin_auth_headers, mock_supabase_admin):
        mock_supabase_admin.table.return_value.update.return_value.eq.return_value.execute.side_effect = Exception(
            "connection reset"
        )

        response = client.put("/api/courses/5", headers=admin_auth_headers, json={"level": "A2"})

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.json() == {"message": "connection reset"}

    def test_delete_course(self, client, admin_auth_headers, mock_supabase_admin):
        """Test deleting a course"""
        response = client.delete("/api/courses/5", headers=admin_auth_headers)

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"message": "Deleted"}
        mock_supabase_admin.table.return_value.delete.return_value.eq.assert_called_once_with("id", "5")


class TestPriceCoercion:
    """Tests for price parsing on course payloads"""

    @pytest.mark.parametrize("value,expected", [
        ("abc", 0),
        ("", 0),
        (None, 0),
        ("nan", 0),
        ("10", 10),
        ("12.5", 12.5),
        (99.0, 99),
        (150000, 150000),
    ])
    def test_coerce_price(self, value, expected):
        assert coerce_price(value) == expected

    def test_missing_price_defaults_to_zero(self):
        assert CourseCreate(title="Bahasa A1").price == 0

    def test_update_coerces_price_only_when_sent(self):
        assert CourseUpdate(price="abc").model_dump(exclude_unset=True) == {"price": 0}
        assert CourseUpdate(title="B1").model_dump(exclude_unset=True) == {"title": "B1"}
