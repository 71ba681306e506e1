from collections.abc import Callable
from dataclasses import asdict, dataclass, field
from typing import Any

DEFAULT_API_URL = "https://api.github.com"


@dataclass(frozen=True)
class NotesConfig:
	"""Where release notes are collected from.

	Attributes:
		org: GitHub organization owning the repository
		repo: Repository name
		branch: Branch the release is cut from
		api_url: Base URL of the GitHub REST API
		timeout: Request timeout in seconds
	"""

	org: str = "kubernetes"
	repo: str = "kubernetes"
	branch: str = "master"
	api_url: str = DEFAULT_API_URL
	timeout: float = 30.0


ConfigOption = Callable[[dict[str, Any]], None]


def _setter(name: str, value: Any) -> ConfigOption:
	def apply(fields: dict[str, Any]) -> None:
		fields[name] = value

	return apply


def with_org(org: str) -> ConfigOption:
	return _setter("org", org)


def with_repo(repo: str) -> ConfigOption:
	return _setter("repo", repo)


def with_branch(branch: str) -> ConfigOption:
	return _setter("branch", branch)


def with_api_url(api_url: str) -> ConfigOption:
	return _setter("api_url", api_url.rstrip("/"))


def with_timeout(timeout: float) -> ConfigOption:
	return _setter("timeout", float(timeout))


def build_config(*options: ConfigOption, base: NotesConfig | None = None) -> NotesConfig:
	"""Apply options in order on top of `base`, or the defaults.

	Later options win when they set the same field.

	Example:
		build_config(with_org("marpaia")) -> NotesConfig(org="marpaia", repo="kubernetes", ...)
	"""
	fields = asdict(base or NotesConfig())
	for option in options:
		option(fields)
	return NotesConfig(**fields)


@dataclass
class GitHubConfig:
	token: str

	def __post_init__(self):
		if not self.token:
			raise ValueError("GitHub token is required")


@dataclass
class CollectorConfig:
	github: GitHubConfig
	notes: NotesConfig = field(default_factory=NotesConfig)
