from dataclasses import dataclass, field

ACTION_REQUIRED_LABEL = "release-note-action-required"


@dataclass
class PullRequest:
	number: int
	title: str
	body: str
	html_url: str
	author: str = ""
	author_url: str = ""
	labels: set[str] = field(default_factory=set)

	@property
	def is_action_required(self) -> bool:
		return ACTION_REQUIRED_LABEL in self.labels

	def labels_with_prefix(self, prefix: str) -> list[str]:
		"""Return the label names that follow `prefix/`, sorted.

		Examples:
		{'sig/node', 'sig/apps', 'kind/bug'}, 'sig' -> ['apps', 'node']
		"""
		start = f"{prefix}/"
		return sorted(label[len(start) :] for label in self.labels if label.startswith(start))

	@classmethod
	def from_dict(cls, data: dict) -> "PullRequest":
		user = data.get("user") or {}
		return cls(
			number=data["number"],
			title=data["title"],
			body=data.get("body") or "",
			html_url=data["html_url"],
			author=user.get("login", ""),
			author_url=user.get("html_url", ""),
			labels={label["name"] for label in data.get("labels", [])},
		)

	def __str__(self):
		return f"""PR #{self.number}: {self.title}"""
