"""Domain validation helpers."""

from collections.abc import Sequence

from src.domain.errors import InvalidInputError


def validate_record_collection(records, name: str) -> Sequence:
    """Ensure records arrive as a list-like collection.

    Args:
        records: Collection supplied by the caller.
        name: Collection name used in error messages.

    Returns:
        Sequence: The same collection, unchanged.

    Raises:
        InvalidInputError: If the value is not a list or tuple-like sequence.
    """
    if isinstance(records, (str, bytes, bytearray)) or not isinstance(
        records, Sequence
    ):
        raise InvalidInputError(
            f"Expected {name} to be a list of records, "
            f"got {type(records).__name__}"
        )
    return records


__all__ = ["validate_record_collection"]
