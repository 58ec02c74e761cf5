"""
Version information for the Users API.

Lambda builds inject APP_VERSION / GIT_SHA at deploy time; a local checkout
falls back to asking git.
"""

import os
import subprocess
from datetime import datetime, timezone
from functools import lru_cache
from typing import Optional


@lru_cache(maxsize=1)
def get_version_info() -> dict:
    """Return version, commit and runtime details for the health endpoint."""
    git_sha = os.getenv("GIT_SHA") or _git("rev-parse", "--short", "HEAD")
    build_timestamp = os.getenv("BUILD_TIMESTAMP") or datetime.now(timezone.utc).isoformat()

    return {
        "version": os.getenv("APP_VERSION", "0.1.0"),
        "git_sha": git_sha or "unknown",
        "build_timestamp": build_timestamp,
        "environment": "lambda" if os.getenv("AWS_LAMBDA_FUNCTION_NAME") else "local",
    }


def _git(*args: str) -> Optional[str]:
    try:
        result = subprocess.run(
            ["git", *args],
            capture_output=True,
            text=True,
            timeout=5,
            cwd=os.path.dirname(os.path.abspath(__file__)),
        )
    except (OSError, subprocess.SubprocessError):
        return None
    if result.returncode != 0:
        return None
    return result.stdout.strip()
