"""Domain models for the Color API.

All classes use `attrs` for concise, correct class definitions.
"""

from typing import Any

import attrs


@attrs.define(frozen=True, slots=True)
class Color:
    """A named color value.

    Attributes:
        key: Unique lookup key (e.g. "primary").
        value: Opaque color value (e.g. "blue" or "#007bff").
    """

    key: str
    value: str

    def to_document(self) -> dict[str, Any]:
        """Convert to a MongoDB document.

        Returns:
            Document with `key` and `value` fields.
        """
        return {"key": self.key, "value": self.value}

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> "Color":
        """Create a Color from a MongoDB document.

        The document's `_id` and any other stored fields are ignored.

        Args:
            document: Document as returned by the database client.

        Returns:
            Color instance.
        """
        return cls(key=str(document["key"]), value=str(document["value"]))
