"""Pre-flight checks for deployment inputs.

Each check returns a three-level `ValidationResult` (ok/warning/error) meant
for a presentation layer; none of them deploys anything.
"""

from __future__ import annotations

from typing import Callable, TypeVar

from adapters.octopus_api import OctopusApi
from core.domain.models import Environment, Project
from core.domain.validation import Severity, ValidationResult
from core.services.deployment_recorder import (
    DeploymentRequest,
    case_mismatch_message,
    find_release,
)

NamedT = TypeVar("NamedT", Project, Environment)


class DeploymentValidator:
    def __init__(self, api: OctopusApi) -> None:
        self._api = api

    def check_project(self, name: str) -> ValidationResult:
        return self._resolve_project(name)[0]

    def check_environment(self, name: str) -> ValidationResult:
        result, _ = self._resolve_named(
            name,
            empty_message="Please provide an environment name.",
            title="Environment",
            lookup=self._api.get_environment_by_name,
        )
        return result

    @staticmethod
    def check_release_version(version: str) -> ValidationResult:
        if not version.strip():
            return ValidationResult.error("Please provide a release version.")
        return ValidationResult.ok()

    def validate_deployment(self, request: DeploymentRequest) -> ValidationResult:
        """Run every check and, when the project resolves, look up the release."""

        project_result, project = self._resolve_project(request.project)
        version_result = self.check_release_version(request.release_version)
        results = [
            project_result,
            version_result,
            self.check_environment(request.environment),
        ]

        if project is not None and version_result.is_ok:
            results.append(self._check_release_exists(project, request))

        severity = Severity.worst([r.severity for r in results])
        messages = [r.message for r in results if r.message]
        if severity is Severity.OK:
            return ValidationResult.ok("Release is ready to deploy.")
        return ValidationResult(severity, "\n".join(messages))

    def _resolve_project(self, name: str) -> tuple[ValidationResult, Project | None]:
        return self._resolve_named(
            name,
            empty_message="Please provide a project name.",
            title="Project",
            lookup=self._api.get_project_by_name,
        )

    def _check_release_exists(self, project: Project, request: DeploymentRequest) -> ValidationResult:
        try:
            releases = self._api.get_releases_for_project(project.id)
        except (OSError, ValueError) as exc:
            return ValidationResult.error(str(exc))

        if find_release(releases, request.release_version) is None:
            return ValidationResult.error(
                f"Release version '{request.release_version}' not found "
                f"for project '{request.project}'."
            )
        return ValidationResult.ok()

    @staticmethod
    def _resolve_named(
        name: str,
        *,
        empty_message: str,
        title: str,
        lookup: Callable[..., NamedT | None],
    ) -> tuple[ValidationResult, NamedT | None]:
        name = name.strip()
        if not name:
            return ValidationResult.error(empty_message), None
        try:
            record = lookup(name, ignore_case=True)
        except (OSError, ValueError) as exc:
            return ValidationResult.error(str(exc)), None
        if record is None:
            return ValidationResult.error(f"{title} not found."), None
        if name != record.name:
            return (
                ValidationResult.warning(case_mismatch_message(title, record.name)),
                record,
            )
        return ValidationResult.ok(), record
