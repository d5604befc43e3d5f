"""Architecture tests using pytest-archon.

These tests enforce DDD layer boundaries inside the projects and users
bounded contexts, and keep the two contexts decoupled.
"""

from pytest_archon import archrule


class TestProjectsDomainLayerBoundaries:
    """The domain layer holds pure business logic."""

    def test_domain_does_not_import_infrastructure(self):
        (
            archrule("projects_domain_no_infrastructure")
            .match("projects.domain*")
            .should_not_import("projects.infrastructure*", "infrastructure*")
            .check("projects")
        )

    def test_domain_does_not_import_application(self):
        (
            archrule("projects_domain_no_application")
            .match("projects.domain*")
            .should_not_import("projects.application*")
            .check("projects")
        )

    def test_domain_is_framework_agnostic(self):
        (
            archrule("projects_domain_no_frameworks")
            .match("projects.domain*")
            .should_not_import("fastapi*", "starlette*", "sqlalchemy*", "pydantic*")
            .check("projects")
        )


class TestProjectsApplicationLayerBoundaries:
    def test_application_does_not_import_infrastructure(self):
        """Services depend on ports, never on concrete repositories."""
        (
            archrule("projects_application_no_infrastructure")
            .match("projects.application*")
            .should_not_import("projects.infrastructure*", "infrastructure*")
            .check("projects")
        )

    def test_application_does_not_import_presentation(self):
        (
            archrule("projects_application_no_presentation")
            .match("projects.application*")
            .should_not_import("projects.presentation*", "fastapi*")
            .check("projects")
        )


class TestBoundedContextIsolation:
    def test_projects_core_does_not_import_users(self):
        """Only the composition root may wire the user directory in."""
        (
            archrule("projects_core_no_users")
            .match("projects.domain*", "projects.application*", "projects.ports*")
            .should_not_import("users*")
            .check("projects")
        )

    def test_users_does_not_import_projects(self):
        (
            archrule("users_no_projects")
            .match("users*")
            .should_not_import("projects*")
            .check("users")
        )

    def test_shared_kernel_does_not_import_contexts(self):
        (
            archrule("shared_kernel_no_contexts")
            .match("shared_kernel*")
            .should_not_import("projects*", "users*", "auth*")
            .check("shared_kernel")
        )
