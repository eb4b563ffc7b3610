"""Configuration parsing and validation for the Cronos merge-duration reporter."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from .errors import AuthenticationError, ConfigurationError

DEFAULT_BASE_URL = "https://gitlab.com"
DEFAULT_SOURCE_BRANCH = "main"
DEFAULT_TARGET_BRANCH = "production"
DEFAULT_TIMEOUT_SECONDS = 30


@dataclass(frozen=True)
class Config:
    """Validated runtime settings, fixed for the lifetime of the process."""

    project_id: str
    private_token: str
    source_branch: str
    target_branch: str
    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: int = DEFAULT_TIMEOUT_SECONDS

    @property
    def api_url(self) -> str:
        return f"{self.base_url}/api/v4"


def load_config(
    project_id: str,
    private_token: str,
    source_branch: str = DEFAULT_SOURCE_BRANCH,
    target_branch: str = DEFAULT_TARGET_BRANCH,
    base_url: Optional[str] = None,
    timeout_seconds: int = DEFAULT_TIMEOUT_SECONDS,
) -> Config:
    """Build and validate application configuration.

    Args:
        project_id: Numeric GitLab project id or ``namespace/project`` path.
        private_token: GitLab personal or project access token.
        source_branch: Branch the merge requests were opened from.
        target_branch: Branch the merge requests were merged into.
        base_url: GitLab instance URL. Falls back to ``GITLAB_BASE_URL`` and
            then to ``https://gitlab.com``.
        timeout_seconds: Per-request timeout in seconds.

    Returns:
        A validated ``Config`` instance.

    Raises:
        ConfigurationError: If a branch name or the project id is blank, or the
            timeout is not greater than ``0``.
        AuthenticationError: If no access token was supplied.
    """
    source_branch = source_branch.strip()
    target_branch = target_branch.strip()
    if not source_branch or not target_branch:
        raise ConfigurationError("Both the origin and destination branch names are required.")

    project_id = project_id.strip()
    if not project_id:
        raise ConfigurationError(
            "Missing GitLab project id. Enter it when prompted or set 'GITLAB_PROJECT_ID'."
        )

    private_token = private_token.strip()
    if not private_token:
        raise AuthenticationError(
            "Missing GitLab access token. Enter it when prompted or set 'GITLAB_TOKEN'."
        )

    if timeout_seconds <= 0:
        raise ConfigurationError(
            "Invalid value for 'timeout': expected an integer greater than 0."
        )

    resolved_base_url = (
        (base_url or "").strip()
        or os.getenv("GITLAB_BASE_URL", "").strip()
        or DEFAULT_BASE_URL
    )

    return Config(
        project_id=project_id,
        private_token=private_token,
        source_branch=source_branch,
        target_branch=target_branch,
        base_url=resolved_base_url.rstrip("/"),
        timeout_seconds=timeout_seconds,
    )
