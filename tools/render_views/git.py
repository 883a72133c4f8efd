from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Protocol

from .config import DATE_FORMAT
from .errors import HistoryResolutionError
from .posts import Post
from .utils import run_capture


class HistoryProvider(Protocol):
    def earliest_commit_date(self, path: Path) -> datetime:
        ...


def _run_git_dates(cwd: Path, args: list[str]) -> list[datetime]:
    try:
        proc = run_capture(["git"] + args, cwd=cwd)
    except OSError as exc:
        raise HistoryResolutionError(f"git unavailable: {exc}") from exc
    if proc.returncode != 0:
        raise HistoryResolutionError(
            f"git {' '.join(args)} failed: {proc.stderr.strip()}"
        )
    dates: list[datetime] = []
    for line in proc.stdout.splitlines():
        line = line.strip()
        if not line:
            continue
        # ISO 8601, e.g. 2025-03-01T10:23:45+00:00
        try:
            dates.append(datetime.fromisoformat(line))
        except ValueError as exc:
            raise HistoryResolutionError(f"bad git date {line!r}") from exc
    return dates


class GitHistory:
    """Earliest author date of a path, straight from `git log`."""

    def earliest_commit_date(self, path: Path) -> datetime:
        path = Path(path)
        # newest first, so the oldest commit is the last line
        dates = _run_git_dates(
            path.parent, ["log", "--format=%aI", "--", path.name]
        )
        if not dates:
            raise HistoryResolutionError(f"no git history for {path}")
        return dates[-1]


def human_readable_date(dt: datetime) -> str:
    return DATE_FORMAT.format(
        month=dt.strftime("%b"), day=dt.day, year=dt.year
    )


def resolve_timestamp(post: Post, history: HistoryProvider) -> Post:
    dt = history.earliest_commit_date(Path(post.path))
    if dt.tzinfo is None:
        dt = dt.astimezone()
    return post.with_(
        timestamp=round(dt.timestamp() * 1000),
        human_readable_date=human_readable_date(dt),
    )
