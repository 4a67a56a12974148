"""Triple model - the atomic subject-predicate-object fact of the dataset."""

from dataclasses import dataclass
from typing import Any


def _as_text(value: Any) -> str:
    """Coerce a raw JSON field to text; missing or null becomes empty."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return str(value)


@dataclass(frozen=True)
class Triple:
    """
    A subject-predicate-object fact extracted from a research publication.

    Example: ("microgravity", "affects", "bone density")

    Provenance fields are carried through untouched.
    """

    subject: str
    predicate: str
    object: str

    # Provenance
    title: str | None = None
    chunk_id: str | None = None
    faiss_verified: bool | None = None

    @property
    def is_complete(self) -> bool:
        """True when subject, predicate and object are all non-empty."""
        return bool(self.subject and self.predicate and self.object)

    def to_dict(self) -> dict:
        """Convert to dictionary, omitting unset provenance fields."""
        data: dict[str, Any] = {
            "subject": self.subject,
            "predicate": self.predicate,
            "object": self.object,
        }
        if self.title is not None:
            data["title"] = self.title
        if self.chunk_id is not None:
            data["chunk_id"] = self.chunk_id
        if self.faiss_verified is not None:
            data["faiss_verified"] = self.faiss_verified
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "Triple":
        """Create from a decoded dataset record."""
        title = data.get("title")
        chunk_id = data.get("chunk_id")
        faiss_verified = data.get("faiss_verified")
        return cls(
            subject=_as_text(data.get("subject")),
            predicate=_as_text(data.get("predicate")),
            object=_as_text(data.get("object")),
            title=_as_text(title) if title is not None else None,
            chunk_id=_as_text(chunk_id) if chunk_id is not None else None,
            # Only real booleans; "false" must not become True
            faiss_verified=faiss_verified if isinstance(faiss_verified, bool) else None,
        )
