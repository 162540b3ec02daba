"""Prompt and status printing on the diagnostic stream."""

from rich.console import Console

from clipfrag.display.theme import DEFAULT_THEME, Theme


class PromptPrinter:
    """Writes prompts, notices and errors to the shared stderr console."""

    def __init__(self, console: Console, theme: Theme = DEFAULT_THEME) -> None:
        self.console = console
        self.theme = theme

    def prompt(self, text: str) -> None:
        """Print a prompt verbatim, leaving the cursor on the same line.

        Args:
            text: Prompt text, printed without markup or wrapping.
        """
        self.console.print(text, end="", markup=False, highlight=False, soft_wrap=True)

    def end_line(self) -> None:
        """Terminate a prompt line that received no typed newline."""
        self.console.print()

    def notice(self, message: str) -> None:
        """Print a corrective notice (e.g. after unrecognized input)."""
        self.console.print(message, style=self.theme.notice, markup=False)

    def info(self, message: str) -> None:
        """Print an informational line."""
        self.console.print(message, style=self.theme.info, markup=False)

    def error(self, message: str) -> None:
        """Print an error message in red."""
        self.console.print(f"[{self.theme.error}]Error:[/] ", end="")
        self.console.print(message, markup=False)
