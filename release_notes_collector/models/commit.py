from dataclasses import dataclass


@dataclass
class Commit:
	sha: str
	message: str
	author: str = ""
	html_url: str = ""

	@property
	def summary(self) -> str:
		"""Return the first line of the commit message."""
		return self.message.split("\n", 1)[0].strip()

	@classmethod
	def from_dict(cls, data: dict) -> "Commit":
		# `author` is null when the commit email is not linked to a GitHub account
		author = data.get("author") or {}
		return cls(
			sha=data["sha"],
			message=data["commit"]["message"],
			author=author.get("login", ""),
			html_url=data.get("html_url", ""),
		)

	def __str__(self):
		return f"""Commit {self.sha[:12]}: {self.summary}"""
