"""Build metadata."""

from __future__ import annotations

from dataclasses import dataclass

_SHORT_SHA_LENGTH = 10


@dataclass(frozen=True)
class BuildInfo:
    """Timestamp and commit of a build."""

    build_date: str = ""
    commit_sha: str = ""

    def truncated_commit_sha(self) -> str:
        """Return the first 10 characters of the commit SHA.

        Raises ValueError when the SHA is shorter than that.
        """
        if len(self.commit_sha) < _SHORT_SHA_LENGTH:
            raise ValueError(
                f"commit SHA {self.commit_sha!r} is shorter than {_SHORT_SHA_LENGTH} characters"
            )
        return self.commit_sha[:_SHORT_SHA_LENGTH]