"""Factory method for building user-facing alert text boxes."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass

PROMPT = "Please enter a message type: {error, warning, success} "

ERROR_MESSAGE = "Some Error has occurred. Exiting Program."
WARNING_MESSAGE = (
    "This is a warning! Continuing the program, but beware that things might not work as expected."
)
SUCCESS_MESSAGE = "Success! Congratulations! Everything worked as expected."


@dataclass(frozen=True)
class TextBox:
    """A box holding one message."""

    message: str

    def render(self) -> str:
        return self.message


class Alert(ABC):
    """Creator of text boxes for one kind of alert."""

    @abstractmethod
    def create_text_box(self) -> TextBox:
        """Return the text box for this alert."""


class ErrorAlert(Alert):
    def create_text_box(self) -> TextBox:
        return TextBox(ERROR_MESSAGE)


class WarningAlert(Alert):
    def create_text_box(self) -> TextBox:
        return TextBox(WARNING_MESSAGE)


class SuccessAlert(Alert):
    def create_text_box(self) -> TextBox:
        return TextBox(SUCCESS_MESSAGE)


def alert_for(message_type: str) -> Alert:
    """Pick an alert by name; unknown names give an error alert."""
    if message_type == "success":
        return SuccessAlert()
    if message_type == "warning":
        return WarningAlert()
    return ErrorAlert()


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if args:
        message_type = args[0]
    else:
        message_type = input(PROMPT).strip()
    print(alert_for(message_type).create_text_box().render())
    return 1


if __name__ == "__main__":
    raise SystemExit(main())