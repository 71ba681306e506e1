"""Extract release notes from the pull requests behind commits.

A pull request carries its release note in a fenced block of its body:

	```release-note
	Added a new flag to the scheduler.
	```

The helpers in this module find that block, clean it up and combine it with
the pull request's metadata into a ReleaseNote.
"""

import logging
import re

from .core.config import NotesConfig
from .core.interfaces import CommitSource
from .errors import CommitAssociationError, MalformedPRNumberError, NoPRReferenceError, PRNumberError
from .models import Commit, PullRequest, ReleaseNote

logger = logging.getLogger(__name__)

NOTE_BLOCK = re.compile(r"```release-note[ \t]*\r?\n(.*?)```", re.DOTALL)
ACTION_REQUIRED = re.compile(r"^\s*\[action required\][\s:-]*", re.IGNORECASE)
LEADING_STAR = re.compile(r"^\*(?!\*)\s*")
LEADING_HASH = re.compile(r"^([ \t]{0,3})#")
NONE_NOTE = re.compile(r"^(none|n/a)\.?$", re.IGNORECASE)

MERGE_COMMIT = re.compile(r"^\s*Merge pull request #(\d\w*) from\b", re.MULTILINE)
SQUASH_SUFFIX = re.compile(r"\(#(\d\w*)\)")
PR_DIGITS = re.compile(r"[0-9]+")


def extract_note_text(body: str | None) -> tuple[str, bool]:
	"""Return the content of the release-note block in `body` and whether one was found.

	Line endings are normalised to "\\n" and a leading "#" is escaped as "&#35;"
	so Markdown renderers don't turn the note into a heading.

	Examples:
	'```release-note\\r\\ntest\\r\\ntest\\r\\n```' -> ('test\\ntest', True)
	'```release-note\\n#test\\n```' -> ('&#35;test', True)
	'no note here' -> ('', False)
	"""
	if not body:
		return "", False

	match = NOTE_BLOCK.search(body)
	if not match:
		return "", False

	text = match.group(1).replace("\r\n", "\n").replace("\r", "\n").strip("\n")
	if not text.strip():
		return "", False

	return _escape_heading(text), True


def strip_action_required(note: str) -> str:
	"""Remove a leading "[action required]" annotation, in any letter case."""
	return ACTION_REQUIRED.sub("", note, count=1)


def strip_star(note: str) -> str:
	"""Remove a leading "*" bullet and the whitespace after it."""
	return LEADING_STAR.sub("", note, count=1)


def get_pr_number_from_commit_message(message: str) -> int:
	"""Return the number of the pull request a commit message refers to.

	Two message shapes are understood, tried in this order:
	'Merge pull request #76030 from andrewsykim/e2e-legacyscheme' -> 76030
	'Add swapoff to centos so kubelet starts (#504)' -> 504

	For squash merges the last "(#N)" of the summary line wins, so cherry-picks
	like 'fix: foo (#12) (#34)' resolve to the PR that landed the commit.

	Raises:
		NoPRReferenceError: If neither shape matches
		MalformedPRNumberError: If the reference is not a plain decimal number
	"""
	match = MERGE_COMMIT.search(message)
	if match:
		digits = match.group(1)
	else:
		summary = message.split("\n", 1)[0]
		references = SQUASH_SUFFIX.findall(summary)
		if not references:
			raise NoPRReferenceError(message)
		digits = references[-1]

	if not PR_DIGITS.fullmatch(digits):
		raise MalformedPRNumberError(message, digits)

	return int(digits)


def release_note_from_commit(
	commit: Commit,
	source: CommitSource,
	version: str,
	config: NotesConfig | None = None,
) -> ReleaseNote | None:
	"""Build the release note for a commit, or return None if its PR has none.

	Args:
		commit: Commit whose message references a pull request
		source: Where the pull request is fetched from
		version: Release the note belongs to, e.g. "v1.15.0"
		config: Organization and repository of the pull request

	Raises:
		CommitAssociationError: If the message doesn't reference a pull request
		SourceUnavailableError: If the pull request cannot be fetched
	"""
	config = config or NotesConfig()

	try:
		pr_number = get_pr_number_from_commit_message(commit.message)
	except PRNumberError as e:
		raise CommitAssociationError(commit.sha, str(e)) from e

	pr = source.get_pull_request(config.org, config.repo, pr_number)

	text, found = extract_note_text(pr.body)
	if not found:
		logger.debug(f"{pr} has no release-note block")
		return None

	text = strip_star(text)
	without_annotation = strip_action_required(text)
	annotated = without_annotation != text
	text = _escape_heading(without_annotation)

	if not text.strip() or NONE_NOTE.match(text.strip()):
		logger.debug(f"{pr} opted out of a release note")
		return None

	return _assemble(commit, pr, text, version, config, annotated)


def release_note_from_sha(
	source: CommitSource,
	sha: str,
	version: str,
	config: NotesConfig | None = None,
) -> ReleaseNote | None:
	"""Fetch a commit by hash and build its release note."""
	config = config or NotesConfig()
	commit = source.get_commit(config.org, config.repo, sha)
	return release_note_from_commit(commit, source, version, config)


def list_release_notes(
	source: CommitSource,
	start: str,
	end: str,
	version: str,
	config: NotesConfig | None = None,
) -> list[ReleaseNote]:
	"""Collect the release notes of all commits after `start` up to `end`.

	Commits that can't be associated with a pull request, or whose pull request
	has no note, are skipped. A pull request reached by several commits yields
	a single note.
	"""
	config = config or NotesConfig()
	commits = source.list_commits(config.org, config.repo, start, end)
	logger.info(f"Scanning {len(commits)} commits in {config.org}/{config.repo} ({start}...{end})")

	notes: list[ReleaseNote] = []
	seen_prs: set[int] = set()
	for commit in commits:
		try:
			note = release_note_from_commit(commit, source, version, config)
		except CommitAssociationError as e:
			logger.info(f"Skipping commit: {e}")
			continue

		if note is None or note.pr_number in seen_prs:
			continue

		seen_prs.add(note.pr_number)
		notes.append(note)

	logger.info(f"Found {len(notes)} release notes")
	return notes


def _escape_heading(text: str) -> str:
	"""Escape a leading "#" as "&#35;" so Markdown doesn't render the note as a heading."""
	return LEADING_HASH.sub(r"\1&#35;", text, count=1)


def _assemble(
	commit: Commit,
	pr: PullRequest,
	text: str,
	version: str,
	config: NotesConfig,
	annotated: bool,
) -> ReleaseNote:
	pr_url = pr.html_url or f"https://github.com/{config.org}/{config.repo}/pull/{pr.number}"
	author = pr.author or commit.author
	author_url = pr.author_url or (f"https://github.com/{author}" if author else "")

	sigs = pr.labels_with_prefix("sig")
	kinds = pr.labels_with_prefix("kind")
	feature = "feature" in kinds
	action_required = pr.is_action_required or annotated

	markdown = f"{text} ([#{pr.number}]({pr_url}), [@{author}]({author_url}))"
	if sigs and (action_required or feature):
		markdown += f" [SIG {_pretty_sigs(sigs)}]"

	return ReleaseNote(
		commit=commit.sha,
		text=text,
		markdown=markdown,
		pr_number=pr.number,
		pr_url=pr_url,
		release_version=version,
		author=author,
		author_url=author_url,
		sigs=sigs,
		kinds=kinds,
		areas=pr.labels_with_prefix("area"),
		feature=feature,
		duplicate=len(sigs) > 1,
		action_required=action_required,
	)


def _pretty_sigs(sigs: list[str]) -> str:
	"""Examples:
	['node'] -> 'Node'
	['apps', 'cluster-lifecycle', 'node'] -> 'Apps, Cluster Lifecycle and Node'
	"""
	names = [sig.replace("-", " ").title() for sig in sigs]
	if len(names) == 1:
		return names[0]
	return f"{', '.join(names[:-1])} and {names[-1]}"
