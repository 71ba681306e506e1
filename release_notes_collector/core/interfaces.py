from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
	from release_notes_collector.models.commit import Commit
	from release_notes_collector.models.pull_request import PullRequest


class CommitSource(Protocol):
	"""Supplies commit and pull request records.

	Implementations raise SourceUnavailableError when the backing service
	cannot be reached or rejects the request.
	"""

	def get_commit(self, org: str, repo: str, sha: str) -> "Commit":
		"""Return the commit with the given hash."""
		...

	def get_pull_request(self, org: str, repo: str, number: int) -> "PullRequest":
		"""Return the pull request with the given number."""
		...

	def list_commits(self, org: str, repo: str, start: str, end: str) -> list["Commit"]:
		"""Return the commits after `start` up to and including `end`, oldest first."""
		...
