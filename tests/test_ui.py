"""Tests for the console helpers."""

from unittest.mock import Mock

from release_notes_collector.models import ReleaseNote
from release_notes_collector.ui import CLI


def _note(markdown: str) -> ReleaseNote:
	return ReleaseNote(
		commit="abc",
		text=markdown,
		markdown=markdown,
		pr_number=1,
		pr_url="https://github.com/kubernetes/kubernetes/pull/1",
		release_version="0.1",
	)


def test_show_release_notes_keeps_multi_line_notes_in_their_bullet():
	cli = CLI()
	cli.show_markdown_text = Mock()

	cli.show_release_notes("v0.1", [_note("first line\n- detail"), _note("second note")])

	assert [call.args[0] for call in cli.show_markdown_text.call_args_list] == [
		"# v0.1",
		"* first line\n  - detail\n* second note",
	]
