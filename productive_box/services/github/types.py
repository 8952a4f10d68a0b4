"""Data types for GitHub API responses."""

from dataclasses import dataclass, field


@dataclass
class ViewerIdentity:
    """The authenticated user."""

    login: str
    id: str  # GraphQL node id, used as the commit author filter


@dataclass(frozen=True)
class RepoRef:
    """A non-fork repository the viewer contributed to."""

    name: str
    owner: str

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.name}"


@dataclass
class GistFile:
    """Single file inside a gist."""

    filename: str
    content: str | None  # None when GitHub truncates large files


@dataclass
class Gist:
    """Gist metadata and files, keyed by filename."""

    id: str
    description: str | None
    files: dict[str, GistFile] = field(default_factory=dict)
