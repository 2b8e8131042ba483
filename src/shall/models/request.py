"""Immutable hashing request built once per invocation."""

from typing import Annotated

from pydantic import BaseModel, Field

from shall.models.algorithm import Algorithm
from shall.models.source import DirectorySource, InputSource


class HashRequest(BaseModel):
    """Resolved configuration for a single run.

    ``algorithms`` holds the flags exactly as the user gave them. The
    effective set is derived later by the selector.
    """

    source: InputSource
    algorithms: Annotated[
        frozenset[Algorithm],
        Field(default_factory=frozenset, description="Algorithm flags that were set"),
    ]
    verbose: Annotated[bool, Field(default=False)]

    @property
    def is_directory(self) -> bool:
        return isinstance(self.source, DirectorySource)

    model_config = {"frozen": True}
