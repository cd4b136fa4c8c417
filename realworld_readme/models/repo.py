from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

UNKNOWN_STAR_COUNT = -1


class Category(Enum):
    FRONTEND = "frontend"
    BACKEND = "backend"
    MOBILE = "mobile"
    FULLSTACK = "fullstack"

    @property
    def table_placeholder(self):
        return f"INSERT_{self.name}_REPOS"

    @property
    def wip_placeholder(self):
        return f"INSERT_{self.name}_WIP"

    @property
    def config_filename(self):
        return f"{self.value}-repos.yaml"

    @property
    def label(self):
        return self.value


class RepoDescriptor:
    def __init__(self, repo: str, title: str, logo: str):
        self.repo = repo
        self.title = title
        self.logo = logo
        self.stargazers_count = None

    @classmethod
    def from_dict(cls, data: dict, source="configuration"):
        if not isinstance(data, dict):
            raise ValueError(f"Entry {data!r} in {source} is not a mapping")
        missing = [key for key in ("repo", "title", "logo") if key not in data]
        if missing:
            raise ValueError(f"Entry {data!r} in {source} is missing: {', '.join(missing)}")

        return cls(repo=str(data["repo"]), title=str(data["title"]), logo=str(data["logo"]))

    @property
    def url(self):
        return f"https://github.com/{self.repo}"

    def __repr__(self):
        return f"RepoDescriptor(repo={self.repo!r}, stargazers_count={self.stargazers_count!r})"


@dataclass(frozen=True)
class StarCount:
    """Outcome of a single star-count lookup.

    A failed lookup still sorts: it resolves to UNKNOWN_STAR_COUNT, which
    ranks after every real count.
    """

    count: int | None = None
    reason: str | None = None

    @classmethod
    def success(cls, count: int) -> StarCount:
        return cls(count=count)

    @classmethod
    def failure(cls, reason: str) -> StarCount:
        return cls(reason=reason)

    @property
    def ok(self) -> bool:
        return self.count is not None

    @property
    def value(self) -> int:
        return self.count if self.ok else UNKNOWN_STAR_COUNT


@dataclass(frozen=True)
class WipIssue:
    title: str
    html_url: str
