#!/usr/bin/env python
"""Release Notes Collector CLI."""

import logging
from pathlib import Path

import typer

from .core.config import NotesConfig, build_config, with_org, with_repo
from .core.config_loader import TomlConfigLoader
from .errors import ReleaseNotesError
from .github_client import GitHubClient
from .notes import list_release_notes, release_note_from_sha
from .ui import CLI

app = typer.Typer(
	help="Collect release notes from GitHub pull requests",
	invoke_without_command=True,
	no_args_is_help=True,
)


@app.callback()
def callback(verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging")):
	"""Collect release notes from GitHub pull requests."""
	logging.basicConfig(
		level=logging.DEBUG if verbose else logging.INFO,
		format="%(asctime)s - %(levelname)s - %(message)s",
	)


def _setup(org: str | None, repo: str | None, config_path: Path | None) -> tuple[GitHubClient, NotesConfig]:
	"""Load the config file and apply command line overrides on top of it."""
	config = TomlConfigLoader(config_path).load()

	options = []
	if org:
		options.append(with_org(org))
	if repo:
		options.append(with_repo(repo))
	notes_config = build_config(*options, base=config.notes)

	client = GitHubClient(config.github.token, api_url=notes_config.api_url, timeout=notes_config.timeout)
	return client, notes_config


@app.command()
def note(
	sha: str,
	version: str = "",
	org: str | None = None,
	repo: str | None = None,
	config_path: Path | None = None,
):
	"""Show the release note of a single commit.

	Configuration is loaded from ~/.release-notes-collector/config.toml by default.
	Use --config-path to specify a different location.
	"""
	cli = CLI()
	client, notes_config = _setup(org, repo, config_path)

	try:
		release_note = release_note_from_sha(client, sha, version, notes_config)
	except ReleaseNotesError as e:
		cli.show_error(str(e))
		raise typer.Exit(1)

	if release_note is None:
		cli.show_error(f"Commit {sha} has no release note.")
		raise typer.Exit(1)

	cli.show_markdown_text(release_note.markdown)


@app.command()
def notes(
	start: str,
	end: str,
	version: str = "",
	org: str | None = None,
	repo: str | None = None,
	config_path: Path | None = None,
):
	"""Show the release notes of all commits after START up to END."""
	cli = CLI()
	client, notes_config = _setup(org, repo, config_path)

	try:
		release_notes = list_release_notes(client, start, end, version, notes_config)
	except ReleaseNotesError as e:
		cli.show_error(str(e))
		raise typer.Exit(1)

	cli.show_release_notes(version or f"{start}...{end}", release_notes)
	cli.show_success(f"Collected {len(release_notes)} release notes.")


if __name__ == "__main__":
	app()
