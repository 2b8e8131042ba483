"""Digest result model."""

from typing import Annotated

from pydantic import BaseModel, Field

from shall.models.algorithm import Algorithm


class DigestResult(BaseModel):
    """One digest of one input unit.

    ``subject`` is the file name in directory mode and None for
    single-input runs.
    """

    algorithm: Annotated[Algorithm, Field(description="Algorithm that produced the digest")]
    subject: Annotated[str | None, Field(default=None, description="File name, if any")]
    digest: Annotated[bytes, Field(description="Raw digest bytes")]

    @property
    def label(self) -> str:
        return self.algorithm.label

    @property
    def hex_digest(self) -> str:
        """Return the digest as lowercase hexadecimal."""
        return self.digest.hex()

    def to_record(self) -> dict[str, str | None]:
        """Return a JSON-friendly representation."""
        return {
            "algorithm": self.label,
            "subject": self.subject,
            "digest": self.hex_digest,
        }

    model_config = {"frozen": True}
