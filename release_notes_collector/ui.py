import typer
from rich.console import Console
from rich.markdown import Markdown

from .models import ReleaseNote


class CLI:
	def __init__(self):
		self.console = Console()

	def show_markdown_text(self, text: str) -> None:
		self.console.print(Markdown(text))

	def show_release_notes(self, heading: str, notes: list[ReleaseNote]) -> None:
		"""Show release notes as a markdown bullet list.

		Args:
			heading (str): The heading of the release notes (without leading #).
			notes (list[ReleaseNote]): The notes to show, in order.
		"""
		self.show_markdown_text(f"# {heading}")
		bullets = []
		for note in notes:
			# continuation lines are indented to stay inside their bullet
			lines = note.markdown.replace("\n", "\n  ")
			bullets.append(f"* {lines}")
		self.show_markdown_text("\n".join(bullets))

	def show_error(self, message: str) -> None:
		"""Show a red error message, to stderr.

		Args:
			message (str): The error message to show.
		"""
		typer.secho(message, err=True, fg=typer.colors.RED)

	def show_success(self, message: str) -> None:
		"""Show a green success message, to stdout.

		Args:
			message (str): The success message to show.
		"""
		typer.secho(message, fg=typer.colors.GREEN)
