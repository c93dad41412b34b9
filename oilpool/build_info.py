"""Build metadata: git state, build time, target and runtime."""

from __future__ import annotations

import os
import platform
import sys
from collections.abc import Mapping
from dataclasses import dataclass

UNKNOWN = "unknown"
SHORT_SHA_LENGTH = 8

_ENV_PREFIX = "OILPOOL_"


@dataclass(frozen=True)
class BuildInfo:
    """Metadata describing the running build."""

    build_timestamp: str = UNKNOWN
    opt_level: str = UNKNOWN
    target_triple: str = UNKNOWN
    runtime_version: str = UNKNOWN
    runtime_channel: str = UNKNOWN
    git_sha: str = UNKNOWN
    git_branch: str = UNKNOWN
    git_commit_timestamp: str = UNKNOWN
    git_dirty: str = "false"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> BuildInfo:
        """Read metadata from ``OILPOOL_*`` variables, filling gaps from the interpreter."""
        env = os.environ if environ is None else environ

        def get(key: str, default: str = UNKNOWN) -> str:
            return env.get(_ENV_PREFIX + key, default)

        target = f"{platform.machine() or UNKNOWN}-{platform.system().lower() or UNKNOWN}"
        return cls(
            build_timestamp=get("BUILD_TIMESTAMP"),
            opt_level=get("OPT_LEVEL", "0" if sys.flags.optimize == 0 else str(sys.flags.optimize)),
            target_triple=get("TARGET_TRIPLE", target),
            runtime_version=get("RUNTIME_VERSION", platform.python_version()),
            runtime_channel=get("RUNTIME_CHANNEL", sys.version_info.releaselevel),
            git_sha=get("GIT_SHA"),
            git_branch=get("GIT_BRANCH"),
            git_commit_timestamp=get("GIT_COMMIT_TIMESTAMP"),
            git_dirty=get("GIT_DIRTY", "false"),
        )

    def is_git_dirty(self) -> bool:
        """Whether the working tree had uncommitted changes."""
        return self.git_dirty == "true"

    def git_sha_short(self) -> str:
        """The first eight characters of the commit hash."""
        return self.git_sha[:SHORT_SHA_LENGTH]

    def version_string(self) -> str:
        """``branch@shortsha``, with ``*`` appended for a dirty tree."""
        marker = "*" if self.is_git_dirty() else ""
        return f"{self.git_branch}@{self.git_sha_short()}{marker}"

    def detailed_info(self) -> str:
        """All metadata, one item per line."""
        dirty = " (dirty)" if self.is_git_dirty() else ""
        return (
            f"Git: {self.git_branch} @ {self.git_sha_short()}{dirty}\n"
            f"Commit Time: {self.git_commit_timestamp}\n"
            f"Built: {self.build_timestamp}\n"
            f"Target: {self.target_triple}\n"
            f"Optimization: {self.opt_level}\n"
            f"Runtime: {self.runtime_version} ({self.runtime_channel})"
        )


def current() -> BuildInfo:
    """Metadata for this process, taken from the environment."""
    return BuildInfo.from_env(os.environ)