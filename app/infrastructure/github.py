"""Client that publishes the dashboard's check run on GitHub commits."""

from __future__ import annotations

import logging
from typing import Any, Protocol

import requests

from app.config import Settings, get_settings

logger = logging.getLogger(__name__)

CHECK_NAME = "CDash"


class RepositoryStatusUpdater(Protocol):
    """Anything able to refresh the check associated with a commit."""

    def create_or_update_check(self, sha: str) -> bool:  # pragma: no cover - protocol
        ...


class GitHubCheckService:
    """Create or update the ``CDash`` check run of a commit.

    Every failure is logged and reported as ``False``; nothing is raised to the
    caller.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.session = session or requests.Session()

    @property
    def is_configured(self) -> bool:
        return bool(self.settings.github_token and self.settings.github_repository)

    def create_or_update_check(self, sha: str) -> bool:
        if not self.is_configured:
            logger.info("GitHub integration not configured; skipping check for %s", sha)
            return False

        try:
            existing = self._find_check_run(sha)
            if existing is None:
                response = self.session.post(
                    self._repository_url("check-runs"),
                    json=self._check_run_body(sha, include_identity=True),
                    headers=self._headers(),
                    timeout=self.settings.github_timeout,
                )
            else:
                response = self.session.patch(
                    self._repository_url(f"check-runs/{existing['id']}"),
                    json=self._check_run_body(sha, include_identity=False),
                    headers=self._headers(),
                    timeout=self.settings.github_timeout,
                )
            response.raise_for_status()
        except requests.RequestException as exc:
            logger.error("Failed to publish %s check for %s: %s", CHECK_NAME, sha, exc)
            return False

        logger.info(
            "%s %s check for commit %s",
            "Created" if existing is None else "Updated",
            CHECK_NAME,
            sha,
        )
        return True

    def _find_check_run(self, sha: str) -> dict[str, Any] | None:
        response = self.session.get(
            self._repository_url(f"commits/{sha}/check-runs"),
            params={"check_name": CHECK_NAME},
            headers=self._headers(),
            timeout=self.settings.github_timeout,
        )
        response.raise_for_status()
        runs = response.json().get("check_runs") or []
        return runs[0] if runs else None

    def _check_run_body(self, sha: str, *, include_identity: bool) -> dict[str, Any]:
        body: dict[str, Any] = {"status": "in_progress"}
        if include_identity:
            body["name"] = CHECK_NAME
            body["head_sha"] = sha
        if self.settings.dashboard_url:
            body["details_url"] = (
                f"{self.settings.dashboard_url.rstrip('/')}/index.php?sha={sha}"
            )
        return body

    def _repository_url(self, path: str) -> str:
        base = self.settings.github_api_url.rstrip("/")
        return f"{base}/repos/{self.settings.github_repository}/{path}"

    def _headers(self) -> dict[str, str]:
        return {
            "Accept": "application/vnd.github+json",
            "Authorization": f"Bearer {self.settings.github_token}",
        }


__all__ = ["CHECK_NAME", "GitHubCheckService", "RepositoryStatusUpdater"]
