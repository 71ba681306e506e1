"""Tests for the command line interface."""

from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from release_notes_collector.main import app
from release_notes_collector.models import Commit

from fakes import FakeCommitSource, make_pr

runner = CliRunner()


@pytest.fixture
def config_file(tmp_path):
	path = tmp_path / "config.toml"
	path.write_text(
		"""
[github]
token = "gh_token"

[notes]
org = "kubernetes"
repo = "kubeadm"
"""
	)
	return path


@pytest.fixture
def source():
	return FakeCommitSource(
		commits=[
			Commit(sha="1111", message="Add swapoff to centos so kubelet starts (#504)"),
			Commit(sha="2222", message="Update OWNERS"),
		],
		pull_requests=[make_pr(504, "```release-note\nkubeadm: disable swap on CentOS\n```", author="neolit123")],
	)


def test_note(config_file, source):
	with patch("release_notes_collector.main.GitHubClient", return_value=source) as MockClient:
		result = runner.invoke(app, ["note", "1111", "--config-path", str(config_file)])

	assert result.exit_code == 0, result.output
	assert "kubeadm: disable swap on CentOS" in result.output
	MockClient.assert_called_once_with("gh_token", api_url="https://api.github.com", timeout=30.0)
	assert ("pull", "kubernetes", "kubeadm", 504) in source.requests


def test_note_repo_override(config_file, source):
	with patch("release_notes_collector.main.GitHubClient", return_value=source):
		result = runner.invoke(app, ["note", "1111", "--repo", "kubernetes", "--config-path", str(config_file)])

	assert result.exit_code == 0, result.output
	assert ("pull", "kubernetes", "kubernetes", 504) in source.requests


def test_note_without_pr_reference(config_file, source):
	with patch("release_notes_collector.main.GitHubClient", return_value=source):
		result = runner.invoke(app, ["note", "2222", "--config-path", str(config_file)])

	assert result.exit_code == 1


def test_notes(config_file, source):
	with patch("release_notes_collector.main.GitHubClient", return_value=source):
		result = runner.invoke(
			app, ["notes", "v1.14.0", "v1.15.0", "--version", "v1.15.0", "--config-path", str(config_file)]
		)

	assert result.exit_code == 0, result.output
	assert "kubeadm: disable swap on CentOS" in result.output
	assert "Collected 1 release notes." in result.output
