from release_notes_collector.errors import SourceUnavailableError
from release_notes_collector.models import Commit, PullRequest


class FakeCommitSource:
	"""In-memory stand-in for the GitHub API."""

	def __init__(self, commits: list[Commit] | None = None, pull_requests: list[PullRequest] | None = None):
		self.commits = {commit.sha: commit for commit in commits or []}
		self.pull_requests = {pr.number: pr for pr in pull_requests or []}
		self.requests: list[tuple] = []

	def get_commit(self, org: str, repo: str, sha: str) -> Commit:
		self.requests.append(("commit", org, repo, sha))
		try:
			return self.commits[sha]
		except KeyError:
			raise SourceUnavailableError(f"commit {sha} not found") from None

	def get_pull_request(self, org: str, repo: str, number: int) -> PullRequest:
		self.requests.append(("pull", org, repo, number))
		try:
			return self.pull_requests[number]
		except KeyError:
			raise SourceUnavailableError(f"pull request {number} not found") from None

	def list_commits(self, org: str, repo: str, start: str, end: str) -> list[Commit]:
		self.requests.append(("compare", org, repo, start, end))
		return list(self.commits.values())


def make_pr(number: int, body: str, labels: set[str] | None = None, author: str = "andrewsykim") -> PullRequest:
	return PullRequest(
		number=number,
		title=f"PR {number}",
		body=body,
		html_url=f"https://github.com/kubernetes/kubernetes/pull/{number}",
		author=author,
		author_url=f"https://github.com/{author}",
		labels=labels or set(),
	)
