"""Release Notes Collector - Extract release notes from GitHub pull requests."""

# Public API exports for library usage
from .core.config import (
	CollectorConfig,
	GitHubConfig,
	NotesConfig,
	build_config,
	with_api_url,
	with_branch,
	with_org,
	with_repo,
	with_timeout,
)
from .core.interfaces import CommitSource
from .errors import (
	CommitAssociationError,
	MalformedPRNumberError,
	NoPRReferenceError,
	ReleaseNotesError,
	SourceUnavailableError,
)
from .github_client import GitHubClient
from .models import Commit, PullRequest, ReleaseNote
from .notes import (
	extract_note_text,
	get_pr_number_from_commit_message,
	list_release_notes,
	release_note_from_commit,
	release_note_from_sha,
	strip_action_required,
	strip_star,
)

__version__ = "1.0.0"

__all__ = [
	# Configuration
	"NotesConfig",
	"GitHubConfig",
	"CollectorConfig",
	"build_config",
	"with_org",
	"with_repo",
	"with_branch",
	"with_api_url",
	"with_timeout",
	# Sources and models
	"CommitSource",
	"GitHubClient",
	"Commit",
	"PullRequest",
	"ReleaseNote",
	# Extraction
	"extract_note_text",
	"strip_action_required",
	"strip_star",
	"get_pr_number_from_commit_message",
	"release_note_from_commit",
	"release_note_from_sha",
	"list_release_notes",
	# Errors
	"ReleaseNotesError",
	"NoPRReferenceError",
	"MalformedPRNumberError",
	"CommitAssociationError",
	"SourceUnavailableError",
]
