"""Application entry point and orchestration for the merge-duration reporter."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Optional, Sequence

from .cli import parse_args
from .config import DEFAULT_SOURCE_BRANCH, DEFAULT_TARGET_BRANCH, Config, load_config
from .durations import compute_merge_duration
from .errors import CronosError
from .gitlab_client import GitLabClient
from .models import DurationRecord, MergeRequest
from .report import DurationReport
from .terminal import BRIGHT_RED, GREEN, colorize, prompt, render_title

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def collect_config(args: argparse.Namespace) -> Config:
    """Resolve every setting from flags, prompts and environment, then validate it.

    Values given on the command line are used as-is; the rest are prompted for
    with their defaults, or taken straight from the defaults with ``--no-input``.
    """
    color = not args.no_color
    env_token = os.getenv("GITLAB_TOKEN", "")
    env_project_id = os.getenv("GITLAB_PROJECT_ID", "")

    def ask(value: Optional[str], message: str, default: str, secret: bool = False) -> str:
        if value is not None:
            return value
        if args.no_input:
            return default
        return prompt(message, default, secret=secret, color=color)

    source_branch = ask(args.source_branch, "Name of the origin branch", DEFAULT_SOURCE_BRANCH)
    target_branch = ask(args.target_branch, "Destination branch name", DEFAULT_TARGET_BRANCH)
    private_token = ask(None, "Your GitLab token", env_token, secret=True)
    project_id = ask(args.project_id, "Project GitLab ID", env_project_id)

    return load_config(
        project_id=project_id,
        private_token=private_token,
        source_branch=source_branch,
        target_branch=target_branch,
        base_url=args.base_url,
        timeout_seconds=args.timeout,
    )


def process_merge_requests(
    client: GitLabClient,
    merge_requests: Sequence[MergeRequest],
    report: DurationReport,
    source_branch: str,
) -> None:
    """Time each merge request in order, printing each result as it is computed.

    The first failure aborts the whole run; lines already printed stay printed.
    """
    for merge_request in merge_requests:
        commits = client.list_commits(merge_request.iid)
        duration = compute_merge_duration(merge_request, commits, source_branch)
        report.report_one(DurationRecord(iid=merge_request.iid, duration=duration))


def orchestrate_merge_report(argv: Optional[Sequence[str]] = None) -> int:
    """Run the end-to-end reporting workflow.

    Errors are printed to stderr and never change the exit status.

    Returns:
        Always ``0``.
    """
    color = True
    try:
        args = parse_args(argv)
        color = not args.no_color
        _configure_logging(args.verbose)

        print(render_title(enabled=color))
        config = collect_config(args)

        client = GitLabClient(config=config)
        merge_requests = client.list_merged_requests(config.source_branch, config.target_branch)

        report = DurationReport(config.source_branch, config.target_branch, use_color=color)
        process_merge_requests(client, merge_requests, report, config.source_branch)
        report.report_average()

        print(colorize("Execution completed successfully!", GREEN, bold=True, enabled=color))
    except CronosError as exc:
        logger.debug("Run aborted", exc_info=True)
        print(colorize(f"Error: {exc}", BRIGHT_RED, enabled=color), file=sys.stderr)
    except KeyboardInterrupt:
        print(colorize("Error: interrupted by user", BRIGHT_RED, enabled=color), file=sys.stderr)
    except EOFError:
        print(
            colorize("Error: input closed before all prompts were answered", BRIGHT_RED, enabled=color),
            file=sys.stderr,
        )
    except Exception as exc:
        logger.debug("Unexpected error while reporting merge durations", exc_info=True)
        print(colorize(f"Error: {exc}", BRIGHT_RED, enabled=color), file=sys.stderr)

    return 0


def main() -> int:
    """Console script entry point."""
    return orchestrate_merge_report()


if __name__ == "__main__":
    raise SystemExit(main())
