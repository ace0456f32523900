"""Custom exceptions for the intake context."""

from typing import Optional


class InvalidItemError(ValueError):
    """
    Exception raised when raw item data cannot be turned into a SummaryItem.

    Raised at the collaborator boundary (item loading, from_dict); the
    summarization engine itself never raises.

    Attributes:
        message: Error description
        item_id: Identifier of the offending item, when known
        field: Name of the missing or invalid field, when known
    """

    def __init__(
        self,
        message: str,
        item_id: Optional[str] = None,
        field: Optional[str] = None,
    ):
        self.message = message
        self.item_id = item_id
        self.field = field

        parts = [message]
        if item_id is not None:
            parts.append(f"Item: {item_id}")
        if field is not None:
            parts.append(f"Field: {field}")

        super().__init__("\n".join(parts))
