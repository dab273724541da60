"""
Notes that can be emitted while building a Bearer challenge.

PLEASE NOTE: the summary field is automatically HTML escaped, so it can contain arbitrary text (as
long as it's unicode).

However, the longer text field IS NOT ESCAPED, and therefore all variables to be interpolated into
it need to be escaped to be safe for use in HTML.
"""

from enum import Enum
from typing import Any, Dict, Union

from markdown import markdown
from markupsafe import Markup, escape


class categories(Enum):
    "Note classifications."
    GENERAL = "General"
    SYNTAX = "Syntax"
    ERROR = "Error Reporting"


class levels(Enum):
    "Note levels."
    WARN = "warning"
    BAD = "bad"


class Note:
    """
    A note about a Bearer challenge, or one of its attributes.
    """

    category = None  # type: categories
    level = None  # type: levels
    summary = ""
    text = ""

    def __init__(self, subject: str, vrs: Dict[str, Union[str, int]] = None) -> None:
        self.subject = subject
        self.vars = vrs or {}

    def __eq__(self, other: Any) -> bool:
        return bool(
            self.__class__ == other.__class__
            and self.vars == other.vars
            and self.subject == other.subject
        )

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.subject} {self.vars!r}>"

    def show_summary(self) -> Markup:
        """
        Output a textual summary of the message as a Unicode string.

        Note that if it is displayed in an environment that needs
        encoding (e.g., HTML), that is *NOT* done.
        """
        return Markup(self.summary % self.vars)

    def show_text(self) -> Markup:
        """
        Show the HTML text for the message as a Unicode string.

        The resulting string is already HTML-encoded.
        """
        return Markup(
            markdown(
                self.text % {k: escape(str(v)) for k, v in self.vars.items()},
                output_format="html",
            )
        )


def display_string(instr: str, truncate: int = 40) -> str:
    """
    Format an arbitrary piece of input for display.

    Printable characters are displayed without modification;
    everything else is shown as an escape sequence.
    """
    out = []
    for char in instr[:truncate]:
        if not char.isprintable():
            char = char.encode("unicode_escape").decode("ascii")
        out.append(char)
    if len(instr) > truncate:
        out.append("...")
    return "".join(out)
