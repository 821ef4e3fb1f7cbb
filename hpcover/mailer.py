"""Composition of the order e-mail from the generator results and contact data."""

from __future__ import annotations

import logging
from os import PathLike
from typing import Union

PathType = Union[str, "PathLike[str]"]

log = logging.getLogger(__name__)

NO_CONTENT = "No content generated.\n"
CONTACT_HEADER = "Dane kontaktowe klienta\n"
MAIL_LABEL = "Adres email: "
PHONE_LABEL = "Numer telefonu: "


def _read_content(path: PathType) -> str:
    """Whole text of ``path``, or an empty string if it cannot be read."""
    try:
        with open(path, encoding="utf-8") as handle:
            return handle.read()
    except OSError:
        log.error("unable to open mail title file %s", path)
        return ""


class EmailComposer:
    """Builds the title and body of the e-mail sent with an order."""

    def __init__(self, std_title: str = "", special_title: str = "", order_id: int = 0) -> None:
        self.std_title = std_title
        self.special_title = special_title
        self.order_id = order_id
        self.text = NO_CONTENT
        self.title = ""
        self.summary = ""
        self.content = ""

    @classmethod
    def from_files(
        cls, std_path: PathType, special_path: PathType, order_id: int = 0
    ) -> "EmailComposer":
        """Read both mail titles from files; an unreadable file gives an empty title."""
        return cls(_read_content(std_path), _read_content(special_path), order_id)

    def create_summary(self, std_cover: bool, results: str) -> str:
        """Set the title for the cover type and attach the generator results.

        Returns the displayed summary (title line followed by the results).
        """
        base_title = self.std_title if std_cover else self.special_title
        self.text = f"{base_title}\n{results}"
        self.title = f"{base_title} (ID: {self.order_id})"
        self.summary = self.text
        return self.summary

    def generate(self, mail_address: str, phone_number: str) -> str:
        """Prepend the user's contact data to the summary and return the message."""
        self.content = (
            f"{CONTACT_HEADER}{MAIL_LABEL}{mail_address}\n"
            f"{PHONE_LABEL}{phone_number}\n{self.summary}"
        )
        return self.content