"""GitLab REST API client for merge request and commit retrieval."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional
from urllib.parse import quote, unquote

import requests

from .config import Config
from .errors import ApiError, ApiStatusError, AuthOrNetworkError, DataValidationError
from .models import Commit, MergeRequest
from .timestamps import parse_timestamp

logger = logging.getLogger(__name__)


class GitLabClient:
    """Small, typed client for the GitLab merge request APIs."""

    def __init__(self, config: Config) -> None:
        """Initialize an authenticated GitLab API client.

        Args:
            config: Validated runtime configuration including project id and token.
        """
        self._config = config
        self._timeout_seconds = config.timeout_seconds
        # Accepts both "group/project" and already encoded "group%2Fproject".
        self._project_path = f"projects/{quote(unquote(config.project_id), safe='')}"

        self._session = requests.Session()
        self._session.headers.update(
            {
                "Accept": "application/json",
                "PRIVATE-TOKEN": config.private_token,
            }
        )

    def _build_url(self, path: str) -> str:
        """Build a fully qualified API URL from a path below ``/projects/{id}``."""
        return f"{self._config.api_url}/{self._project_path}/{path.lstrip('/')}"

    def _get_json(self, path: str, params: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        """Execute one GET request and return the JSON array body.

        Only the first page returned by GitLab is consumed.

        Raises:
            AuthOrNetworkError: If the request could not be completed.
            ApiStatusError: If GitLab returns a non-2xx status.
            ApiError: If the body is not a JSON array.
        """
        url = self._build_url(path)

        try:
            response = self._session.get(url, params=params, timeout=self._timeout_seconds)
        except requests.RequestException as exc:
            raise AuthOrNetworkError(f"GitLab request failed: GET {url} ({exc})") from exc

        status_code = response.status_code
        logger.debug("GitLab API response", extra={"url": url, "status_code": status_code})

        if not 200 <= status_code < 300:
            raise ApiStatusError(status_code, response.reason or "")

        try:
            payload = response.json()
        except ValueError as exc:
            raise ApiError(f"GitLab API returned invalid JSON: GET {url}") from exc

        if not isinstance(payload, list):
            raise ApiError(f"GitLab API returned unexpected payload shape: GET {url}")

        return payload

    def list_merged_requests(self, source_branch: str, target_branch: str) -> List[MergeRequest]:
        """List merged merge requests from ``source_branch`` into ``target_branch``."""
        payload = self._get_json(
            "merge_requests",
            params={
                "state": "merged",
                "source_branch": source_branch,
                "target_branch": target_branch,
            },
        )
        merge_requests: List[MergeRequest] = []

        for item in payload:
            iid = item.get("iid")
            merged_at = item.get("merged_at")
            if iid is None or merged_at is None:
                raise DataValidationError(
                    f"GitLab merge request payload is missing required fields: payload={item}"
                )
            merge_requests.append(MergeRequest(iid=int(iid), merged_at=parse_timestamp(merged_at)))

        logger.info(
            "Fetched merged merge requests",
            extra={
                "source_branch": source_branch,
                "target_branch": target_branch,
                "count": len(merge_requests),
            },
        )
        return merge_requests

    def list_commits(self, iid: int) -> List[Commit]:
        """List the commits of a merge request in the order GitLab returns them."""
        payload = self._get_json(f"merge_requests/{iid}/commits")
        commits: List[Commit] = []

        for item in payload:
            created_at = item.get("created_at")
            if created_at is None:
                raise DataValidationError(
                    f"GitLab commit payload is missing 'created_at': iid={iid}, payload={item}"
                )
            commits.append(
                Commit(
                    created_at=parse_timestamp(created_at),
                    message=str(item.get("message") or ""),
                )
            )

        return commits
