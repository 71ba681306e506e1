class ReleaseNotesError(Exception):
	"""Base class for all errors raised while collecting release notes."""


class PRNumberError(ReleaseNotesError):
	"""A pull request number could not be derived from a commit message."""

	def __init__(self, message: str, reason: str):
		self.message = message
		super().__init__(f"{reason}: {message!r}")


class NoPRReferenceError(PRNumberError):
	def __init__(self, message: str):
		super().__init__(message, "no PR reference found in commit message")


class MalformedPRNumberError(PRNumberError):
	def __init__(self, message: str, digits: str):
		self.digits = digits
		super().__init__(message, f"malformed PR number {digits!r} in commit message")


class CommitAssociationError(ReleaseNotesError):
	"""A commit cannot be associated with a pull request."""

	def __init__(self, sha: str, reason: str):
		self.sha = sha
		super().__init__(f"cannot associate commit {sha} with a pull request: {reason}")


class SourceUnavailableError(ReleaseNotesError):
	"""The commit source could not be reached or refused the request."""
