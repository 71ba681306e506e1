from dataclasses import dataclass, field


@dataclass
class ReleaseNote:
	"""A release note extracted from the pull request behind a commit."""

	commit: str  # sha
	text: str
	markdown: str
	pr_number: int
	pr_url: str
	release_version: str
	author: str = ""
	author_url: str = ""
	sigs: list[str] = field(default_factory=list)
	kinds: list[str] = field(default_factory=list)
	areas: list[str] = field(default_factory=list)
	feature: bool = False
	duplicate: bool = False
	action_required: bool = False

	def __str__(self):
		return self.markdown
