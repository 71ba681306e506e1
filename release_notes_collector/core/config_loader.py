import tomllib
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

from dotenv import dotenv_values

from .config import (
	CollectorConfig,
	ConfigOption,
	GitHubConfig,
	build_config,
	with_api_url,
	with_branch,
	with_org,
	with_repo,
	with_timeout,
)


def _options_from(values: dict[str, Any]) -> list[ConfigOption]:
	"""Translate the present, non-empty values into config options."""
	factories = {
		"org": with_org,
		"repo": with_repo,
		"branch": with_branch,
		"api_url": with_api_url,
		"timeout": with_timeout,
	}
	return [factories[key](value) for key, value in values.items() if key in factories and value]


class ConfigLoader(ABC):
	@abstractmethod
	def load(self) -> CollectorConfig:
		"""Load configuration from source."""
		pass


class DictConfigLoader(ConfigLoader):
	"""Load from dictionary (for programmatic usage)."""

	def __init__(self, config_dict: dict[str, Any]):
		self.config_dict = config_dict

	def load(self) -> CollectorConfig:
		return CollectorConfig(
			github=GitHubConfig(token=self.config_dict["github_token"]),
			notes=build_config(*_options_from(self.config_dict)),
		)


class EnvConfigLoader(ConfigLoader):
	"""Load from .env file."""

	def __init__(self, env_path: str = ".env"):
		self.env_path = env_path

	def load(self) -> CollectorConfig:
		config = dotenv_values(self.env_path)

		# Required field - will raise KeyError if missing
		github_token = config["GH_TOKEN"]
		if github_token is None:
			raise ValueError("GH_TOKEN is required in .env file")

		return CollectorConfig(
			github=GitHubConfig(token=github_token),
			notes=build_config(
				*_options_from(
					{
						"org": config.get("NOTES_ORG"),
						"repo": config.get("NOTES_REPO"),
						"branch": config.get("NOTES_BRANCH"),
						"api_url": config.get("GITHUB_API_URL"),
						"timeout": config.get("GITHUB_TIMEOUT"),
					}
				)
			),
		)


class TomlConfigLoader(ConfigLoader):
	"""Load from TOML file (default config format)."""

	DEFAULT_CONFIG_PATH = Path.home() / ".release-notes-collector" / "config.toml"

	def __init__(self, config_path: Path | str | None = None):
		"""Initialize TOML config loader.

		Args:
			config_path: Path to config file. If None, uses DEFAULT_CONFIG_PATH.
		"""
		if config_path is None:
			self.config_path = self.DEFAULT_CONFIG_PATH
		else:
			self.config_path = Path(config_path)

	def load(self) -> CollectorConfig:
		"""Load configuration from TOML file.

		Raises:
			FileNotFoundError: If config file doesn't exist
			ValueError: If the GitHub token is missing
		"""
		if not self.config_path.exists():
			raise FileNotFoundError(
				f"Config file not found at {self.config_path}. "
				f"Create it with the required fields or use --config-path to specify a different location."
			)

		with open(self.config_path, "rb") as f:
			config = tomllib.load(f)

		github_config = config.get("github", {})
		notes_config = config.get("notes", {})

		github_token = github_config.get("token")
		if not github_token:
			raise ValueError("github.token is required in config file")

		return CollectorConfig(
			github=GitHubConfig(token=github_token),
			notes=build_config(
				*_options_from(notes_config),
				*_options_from(
					{
						"api_url": github_config.get("api_url"),
						"timeout": github_config.get("timeout"),
					}
				),
			),
		)
