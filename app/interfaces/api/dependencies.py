"""FastAPI dependency utilities."""

from app.infrastructure.github import GitHubCheckService, RepositoryStatusUpdater


def get_repository_status_updater() -> RepositoryStatusUpdater:
    """Return the updater used to refresh commit checks on GitHub."""

    return GitHubCheckService()
