"""Tests for project service and commands."""

import pytest

from purchasedesk.cli.main import cli
from purchasedesk.domain.customer import CustomerService
from purchasedesk.domain.errors import ConflictError, NotFoundError, ValidationError


class TestProjectService:
    """Tests for ProjectService."""

    def test_create_and_get(self, project_service, sample_customer):
        project = project_service.create_project(
            customer_id="C-1", cup_code="J11B22000120004", project_id="P-1"
        )
        assert project_service.get_project("P-1") == project

    def test_customer_and_cup_are_optional(self, project_service):
        project = project_service.create_project(customer_id="", cup_code="  ")
        assert project.customer_id is None
        assert project.cup_code is None
        assert project.id.isdigit()

    def test_cup_code_length(self, project_service):
        with pytest.raises(ValidationError) as exc_info:
            project_service.create_project(cup_code="J11B")
        assert "cup_code" in exc_info.value.errors

    def test_unknown_customer(self, project_service):
        with pytest.raises(ValidationError) as exc_info:
            project_service.create_project(customer_id="C-404")
        assert "customer_id" in exc_info.value.errors

    def test_duplicate_id(self, project_service, sample_project):
        with pytest.raises(ConflictError):
            project_service.create_project(project_id="P-1")

    def test_display_name(self, project_service, sample_project):
        assert project_service.display_name("P-1") == "P-1 - Comune di Milano"
        assert project_service.display_name(None) == "-"

    def test_search_by_customer_name(self, project_service, sample_project):
        project_service.create_project(project_id="P-2")
        assert [p.id for p in project_service.search_projects("milano")] == ["P-1"]
        assert [p.id for p in project_service.search_projects("J11B")] == ["P-1"]

    def test_update_replaces_fields(self, project_service, sample_project):
        updated = project_service.update_project("P-1", customer_id=None, cup_code=None)
        assert updated.customer_id is None
        assert updated.cup_code is None
        assert project_service.get_project("P-1") == updated

    def test_update_missing(self, project_service):
        with pytest.raises(NotFoundError):
            project_service.update_project("P-404")

    def test_delete(self, project_service, sample_project):
        project_service.delete_project("P-1")
        assert project_service.list_projects() == []


def test_project_commands(cli_runner, temp_db):
    """Create, list, update and delete a project through the CLI."""
    CustomerService(temp_db).create_customer("Comune di Milano", customer_id="C-1")
    args = ["--db-path", temp_db.database_path, "project"]

    result = cli_runner.invoke(
        cli, args + ["create", "--customer", "C-1", "--cup", "J11B22000120004", "--id", "P-1"]
    )
    assert result.exit_code == 0
    assert "Created project P-1" in result.output

    result = cli_runner.invoke(cli, args + ["list"])
    assert result.exit_code == 0
    assert "Comune di Milano" in result.output
    assert "J11B22000120004" in result.output

    result = cli_runner.invoke(cli, args + ["update", "P-1", "--customer", "C-1"])
    assert result.exit_code == 0

    result = cli_runner.invoke(cli, args + ["delete", "P-1", "--yes"])
    assert result.exit_code == 0
    assert "Deleted project P-1" in result.output


def test_project_create_invalid_cup(cli_runner, temp_db):
    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "project", "create", "--cup", "SHORT"]
    )
    assert result.exit_code == 1
    assert "cup_code: CUP Code must be exactly 15 characters" in result.output
