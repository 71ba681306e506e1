import logging

import requests

from .core.config import DEFAULT_API_URL
from .errors import SourceUnavailableError
from .models import Commit, PullRequest

logger = logging.getLogger(__name__)


class GitHubClient:
	"""Client to read commits and pull requests from the GitHub API."""

	def __init__(self, token: str, api_url: str = DEFAULT_API_URL, timeout: float = 30.0):
		self.api_url = api_url.rstrip("/")
		self.timeout = timeout
		self.session = requests.Session()
		self.session.headers.update(
			{
				"Authorization": f"Bearer {token}",
				"Accept": "application/vnd.github+json",
			}
		)

	def get_commit(self, org: str, repo: str, sha: str) -> Commit:
		"""Return a single commit."""
		return Commit.from_dict(self._get(f"/repos/{org}/{repo}/commits/{sha}"))

	def get_pull_request(self, org: str, repo: str, number: int) -> PullRequest:
		"""Get PR information from GitHub API."""
		return PullRequest.from_dict(self._get(f"/repos/{org}/{repo}/pulls/{number}"))

	def list_commits(self, org: str, repo: str, start: str, end: str) -> list[Commit]:
		"""Return the commits between two revisions, oldest first.

		`start` itself is excluded, `end` is included.
		"""
		data = self._get(f"/repos/{org}/{repo}/compare/{start}...{end}")
		return [Commit.from_dict(commit) for commit in data.get("commits", [])]

	def _get(self, path: str) -> dict:
		url = f"{self.api_url}{path}"
		logger.debug(f"GET {url}")
		try:
			r = self.session.get(url, timeout=self.timeout)
			r.raise_for_status()
			return r.json()
		except requests.RequestException as e:
			raise SourceUnavailableError(f"GitHub request to {url} failed: {e}") from e
