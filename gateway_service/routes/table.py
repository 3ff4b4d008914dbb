"""
Gateway routing table
"""

from typing import Tuple

from gateway_service.models.route import Resource, RouteDescriptor

ROUTE_TABLE: Tuple[RouteDescriptor, ...] = (
    # ------------------ IDENTITY SERVICE ------------------
    RouteDescriptor(
        name="get_user",
        method="GET",
        path="/user",
        resource=Resource.IDENTITY,
        target_path="/",
        requires_auth=True,
        success_message="Fetched from auth service",
        failure_message="Failed to fetch from auth service",
        expose_identity=True,
    ),
    RouteDescriptor(
        name="create_user",
        method="POST",
        path="/create/user",
        resource=Resource.IDENTITY,
        target_path="/auth/create",
        requires_auth=False,
        success_message="User created successfully (via gateway)",
        failure_message="Error creating user",
    ),
    RouteDescriptor(
        name="auth_create_user",
        method="POST",
        path="/auth/create",
        resource=Resource.IDENTITY,
        target_path="/auth/create",
        requires_auth=False,
        success_message="User created successfully (via gateway)",
        failure_message="Error creating user",
    ),
    RouteDescriptor(
        name="login",
        method="POST",
        path="/auth/login",
        resource=Resource.IDENTITY,
        target_path="/auth/login",
        requires_auth=False,
        success_message="Login successful (via gateway)",
        failure_message="Login failed",
    ),
    # ------------------ STUDENT SERVICE ------------------
    RouteDescriptor(
        name="create_student",
        method="POST",
        path="/students",
        resource=Resource.STUDENT,
        target_path="/students",
        requires_auth=True,
        success_message="Student added successfully.",
        failure_message="Error adding student",
    ),
    RouteDescriptor(
        name="list_students",
        method="GET",
        path="/students",
        resource=Resource.STUDENT,
        target_path="/students",
        requires_auth=True,
        success_message="Students list ready",
        failure_message="Error getting students",
    ),
    RouteDescriptor(
        name="replace_student",
        method="PUT",
        path="/students/{id}",
        resource=Resource.STUDENT,
        target_path="/students/{id}",
        requires_auth=True,
        success_message="Student updated successfully",
        failure_message="Error updating student",
    ),
    RouteDescriptor(
        name="patch_student",
        method="PATCH",
        path="/students/{id}",
        resource=Resource.STUDENT,
        target_path="/students/{id}",
        requires_auth=True,
        success_message="Student patched successfully",
        failure_message="Error patching student",
    ),
    RouteDescriptor(
        name="delete_student",
        method="DELETE",
        path="/students/{id}",
        resource=Resource.STUDENT,
        target_path="/students/{id}",
        requires_auth=True,
        success_message="Student deleted successfully",
        failure_message="Error deleting student",
    ),
    # ------------------ COURSE SERVICE ------------------
    RouteDescriptor(
        name="create_course",
        method="POST",
        path="/courses",
        resource=Resource.COURSE,
        target_path="/courses",
        requires_auth=True,
        success_message="Course created successfully",
        failure_message="Error creating course",
    ),
    RouteDescriptor(
        name="list_courses",
        method="GET",
        path="/courses",
        resource=Resource.COURSE,
        target_path="/courses",
        requires_auth=True,
        success_message="Courses list ready",
        failure_message="Error fetching courses",
    ),
    RouteDescriptor(
        name="enroll_student",
        method="POST",
        path="/courses/enroll/{id}",
        resource=Resource.COURSE,
        target_path="/courses/{id}/enroll",
        requires_auth=True,
        success_message="Student enrolled successfully",
        failure_message="Error enrolling student in course",
    ),
    RouteDescriptor(
        name="list_course_students",
        method="GET",
        path="/courses/students/{id}",
        resource=Resource.COURSE,
        target_path="/courses/{id}/students",
        requires_auth=True,
        success_message="Students of course ready",
        failure_message="Error fetching students of course",
    ),
    RouteDescriptor(
        name="delete_course",
        method="DELETE",
        path="/courses/{id}",
        resource=Resource.COURSE,
        target_path="/courses/{id}",
        requires_auth=True,
        success_message="Course deleted successfully",
        failure_message="Error deleting course",
    ),
)
