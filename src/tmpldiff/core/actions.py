"""Text actions applied to template source content before rendering"""

import re
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field


_TRAILING_WS_RE = re.compile(r'[ \t]+(?=\r?$)', re.MULTILINE)


class PrependAction(BaseModel):
    kind: Literal["prepend"] = "prepend"
    text: str

    def apply(self, content: str) -> str:
        return self.text + content


class AppendAction(BaseModel):
    kind: Literal["append"] = "append"
    text: str

    def apply(self, content: str) -> str:
        return content + self.text


class ReplaceAction(BaseModel):
    """Plain substring replacement; count -1 replaces every occurrence."""
    kind: Literal["replace"] = "replace"
    old: str = Field(..., min_length=1)
    new: str = ""
    count: int = Field(default=-1, ge=-1)

    def apply(self, content: str) -> str:
        return content.replace(self.old, self.new, self.count)


class StripTrailingWhitespaceAction(BaseModel):
    kind: Literal["strip_trailing_whitespace"] = "strip_trailing_whitespace"

    def apply(self, content: str) -> str:
        return _TRAILING_WS_RE.sub("", content)


TextAction = Annotated[
    Union[PrependAction, AppendAction, ReplaceAction, StripTrailingWhitespaceAction],
    Field(discriminator="kind"),
]


def apply_actions(actions: list[TextAction], content: str) -> str:
    """Apply actions to content in order."""
    for action in actions:
        content = action.apply(content)
    return content
