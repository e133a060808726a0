from __future__ import annotations

import pytest

from adapters.octopus_api import OctopusApi
from core.domain.validation import Severity, ValidationResult
from core.services.deployment_recorder import DeploymentRequest
from core.services.deployment_validation import DeploymentValidator

from conftest import FakeOctopus, release_item


@pytest.fixture
def validator(api: OctopusApi, fake_octopus: FakeOctopus) -> DeploymentValidator:
    fake_octopus.add("GET", "/api/projects/all", body=[{"Id": "P-1", "Name": "Acme"}])
    fake_octopus.add("GET", "/api/environments/all", body=[{"Id": "E-1", "Name": "Prod"}])
    fake_octopus.add("GET", "/api/projects/P-1/releases", body={"Items": [release_item("R-9", "2.3.1")]})
    return DeploymentValidator(api)


def test_check_project_ok(validator: DeploymentValidator) -> None:
    assert validator.check_project(" Acme ") == ValidationResult.ok()


def test_check_project_empty(validator: DeploymentValidator) -> None:
    assert validator.check_project("   ") == ValidationResult.error("Please provide a project name.")


def test_check_project_not_found(validator: DeploymentValidator) -> None:
    assert validator.check_project("Ghost") == ValidationResult.error("Project not found.")


def test_check_project_case_mismatch_warns(validator: DeploymentValidator) -> None:
    result = validator.check_project("ACME")

    assert result.severity is Severity.WARNING
    assert result.message == "Project name case does not match. Did you mean 'Acme'?"


def test_check_environment_case_mismatch_warns(validator: DeploymentValidator) -> None:
    result = validator.check_environment("prod")

    assert result == ValidationResult.warning("Environment name case does not match. Did you mean 'Prod'?")


def test_check_environment_transport_error(validator: DeploymentValidator, fake_octopus: FakeOctopus) -> None:
    fake_octopus.add("GET", "/api/environments/all", status=403, text="forbidden")

    result = validator.check_environment("Prod")

    assert result.severity is Severity.ERROR
    assert "Code 403" in result.message


def test_check_release_version() -> None:
    assert DeploymentValidator.check_release_version("") == ValidationResult.error(
        "Please provide a release version."
    )
    assert DeploymentValidator.check_release_version("1.0.0").is_ok


def test_validate_deployment_ready(validator: DeploymentValidator) -> None:
    result = validator.validate_deployment(DeploymentRequest("Acme", "2.3.1", "Prod"))

    assert result == ValidationResult.ok("Release is ready to deploy.")


def test_validate_deployment_reports_missing_release(validator: DeploymentValidator) -> None:
    result = validator.validate_deployment(DeploymentRequest("Acme", "9.9.9", "Prod"))

    assert result.severity is Severity.ERROR
    assert result.message == "Release version '9.9.9' not found for project 'Acme'."


def test_validate_deployment_keeps_worst_severity(validator: DeploymentValidator) -> None:
    result = validator.validate_deployment(DeploymentRequest("acme", "2.3.1", "Mars"))

    assert result.severity is Severity.ERROR
    assert result.message.splitlines() == [
        "Project name case does not match. Did you mean 'Acme'?",
        "Environment not found.",
    ]


def test_validate_deployment_warning_only(validator: DeploymentValidator) -> None:
    result = validator.validate_deployment(DeploymentRequest("acme", "2.3.1", "Prod"))

    assert result.severity is Severity.WARNING


def test_severity_worst() -> None:
    assert Severity.worst([]) is Severity.OK
    assert Severity.worst([Severity.OK, Severity.WARNING]) is Severity.WARNING
    assert Severity.worst([Severity.ERROR, Severity.WARNING]) is Severity.ERROR


def test_check_environment_empty(validator: DeploymentValidator) -> None:
    assert validator.check_environment("  ") == ValidationResult.error("Please provide an environment name.")


def test_validate_deployment_resolves_project_once(validator: DeploymentValidator, fake_octopus: FakeOctopus) -> None:
    validator.validate_deployment(DeploymentRequest("Acme", "2.3.1", "Prod"))

    assert fake_octopus.paths("GET").count("/api/projects/all") == 1
    assert "/api/projects/P-1/releases" in fake_octopus.paths("GET")


def test_validate_deployment_skips_release_lookup_without_project(
    validator: DeploymentValidator, fake_octopus: FakeOctopus
) -> None:
    result = validator.validate_deployment(DeploymentRequest("Ghost", "2.3.1", "Prod"))

    assert result == ValidationResult.error("Project not found.")
    assert "/api/projects/P-1/releases" not in fake_octopus.paths()
