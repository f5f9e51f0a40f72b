"""
Main Module

Demo entry point for the Placeholder API client. Runs a short workflow
against the live API:

1. Fetch all comments
2. Fetch a single comment by id
3. Report results

Run with ``python -m placeholder_client.main``.
"""

import logging
import sys
import time
from dataclasses import dataclass
from typing import List, Optional

from .config import Config, config
from .api import ApiClient, Comment


def setup_logging(log_level: str = "INFO", cfg: Optional[Config] = None) -> logging.Logger:
    """Set up logging for the application."""
    cfg = cfg or config
    cfg.log.log_directory.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger("placeholder_client")
    level = getattr(logging, log_level.upper())
    logger.setLevel(level)

    # Console handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_format = logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(message)s",
        datefmt="%H:%M:%S"
    )
    console_handler.setFormatter(console_format)

    # File handler
    file_handler = logging.FileHandler(
        cfg.log.log_file_path,
        mode='w',
        encoding='utf-8'
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(cfg.log.log_format))

    logger.addHandler(console_handler)
    logger.addHandler(file_handler)

    return logger


@dataclass
class RunResult:
    """Result of a demo run."""
    success: bool
    comment_count: int
    detail: Optional[Comment]
    errors: List[str]
    total_duration_seconds: float


def run(client: ApiClient, comment_id: int = 1) -> RunResult:
    """
    Fetch the comment list and one comment detail.

    Args:
        client: Client to use.
        comment_id: Id of the comment to fetch individually.

    Returns:
        RunResult summarizing both requests.
    """
    logger = logging.getLogger("placeholder_client.main")
    start_time = time.time()
    errors: List[str] = []

    logger.info("Step 1: Fetching comments")
    comments = client.fetch_comments()
    count = 0
    if comments.is_success:
        count = len(comments.value)
        logger.info(f"Fetched {count} comments")
    else:
        errors.append(str(comments.error))

    logger.info(f"Step 2: Fetching comment {comment_id}")
    detail = client.fetch_comment(comment_id)
    comment = None
    if detail.is_success:
        comment = detail.value
        logger.info(f"Comment {comment.id} by {comment.email}: {comment.name}")
    else:
        errors.append(str(detail.error))

    total_duration = time.time() - start_time
    logger.info(f"Done in {total_duration:.2f}s with {len(errors)} error(s)")

    return RunResult(
        success=not errors,
        comment_count=count,
        detail=comment,
        errors=errors,
        total_duration_seconds=total_duration
    )


def main():
    """Main entry point for the demo."""
    logger = setup_logging(config.log.log_level)

    try:
        client = ApiClient(config.api)
        result = run(client)

        if result.success:
            logger.info("Demo completed successfully!")
            sys.exit(0)
        else:
            for error in result.errors:
                logger.error(f"Request failed: {error}")
            sys.exit(1)

    except KeyboardInterrupt:
        logger.info("Demo interrupted by user")
        sys.exit(130)


if __name__ == "__main__":
    main()
