"""
Path Types

A path is an ordered list of segments from the document root to the
current location.

Models:
    - KeySegment: One hop through an object key
    - IndexSegment: One hop through an array index, with its cached name
"""

from typing import Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class KeySegment(BaseModel):
    """
    Selects ``node[key]`` on an object.

    Attributes:
        kind: Always "object-key"
        key: The object key
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["object-key"] = "object-key"
    key: str

    @property
    def label(self) -> str:
        return self.key


class IndexSegment(BaseModel):
    """
    Selects ``node[index]`` on an array.

    The derived name is captured when the segment is pushed so the prompt
    keeps showing the same label for the rest of the session.

    Attributes:
        kind: Always "array-index"
        index: Zero-based array index
        derived_name: Display name computed at descent time
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["array-index"] = "array-index"
    index: int = Field(..., ge=0)
    derived_name: str = ""

    @property
    def label(self) -> str:
        return self.derived_name or f"{self.index + 1}.txt"


PathSegment = Union[KeySegment, IndexSegment]
