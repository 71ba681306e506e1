from .commit import Commit
from .pull_request import PullRequest
from .release_note import ReleaseNote

__all__ = [
	"Commit",
	"PullRequest",
	"ReleaseNote",
]
