"""
Interactive prompts.

Answers are compared as plain strings: publishing happens only on an exact
``y`` and the proxy question counts as declined only on an exact ``n``.
"""
from dataclasses import dataclass

import typer

PUBLISH_DEFAULT = "y"
PROXY_DEFAULT = "n"


@dataclass
class SessionInputs:
    """Answers collected for one run."""

    package_name: str
    publish: bool
    proxy_url: str = ""
    author: str = ""


class SessionPrompter:
    """Asks the questions that drive a run."""

    def ask(self, text: str, default=None) -> str:
        # show_default=False: the default is already spelled out in the question
        if default is None:
            return typer.prompt(text, default="", show_default=False)
        return typer.prompt(text, default=default, show_default=False)

    def prompt_inputs(self, author: str = "") -> SessionInputs:
        package_name = self.ask("Enter the package name")
        publish_answer = self.ask(
            f"Do you want to publish this package on npm? (default: {PUBLISH_DEFAULT})",
            default=PUBLISH_DEFAULT,
        )
        proxy_answer = self.ask(
            f"Are you behind a proxy? (default: {PROXY_DEFAULT})",
            default=PROXY_DEFAULT,
        )

        proxy_url = ""
        if proxy_answer != PROXY_DEFAULT:
            proxy_url = self.ask("Enter the proxy URL")

        return SessionInputs(
            package_name=package_name,
            publish=publish_answer == PUBLISH_DEFAULT,
            proxy_url=proxy_url,
            author=author,
        )

    def prompt_alternative_name(self) -> str:
        return self.ask("Try another package name")
