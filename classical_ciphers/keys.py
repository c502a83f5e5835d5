"""
Raw key parsing.

Callers often collect keys as text (form fields, CLI arguments). These
helpers turn that text into the shapes the tiers expect and raise the
matching ``CipherError`` when it does not fit.
"""

from typing import Sequence, Tuple, Union

from .errors import InvalidNumericKey, MalformedKey, NonNumericKey

IntKey = Union[int, str]


def parse_int_key(raw: IntKey, label: str = "Key") -> int:
    """Accept an int, or text holding one (surrounding spaces allowed)."""
    if isinstance(raw, bool):
        raise InvalidNumericKey(f"{label} must be a whole number.")
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str):
        try:
            return int(raw.strip())
        except ValueError:
            pass
    raise InvalidNumericKey(f"{label} must be a whole number, got {raw!r}.")


def parse_int_list(raw: Union[str, Sequence[int]], count: int) -> Tuple[int, ...]:
    """
    Parse ``count`` comma-separated integers ("3,3,2,5") or validate an
    already-split sequence of them.

    Raises MalformedKey on the wrong number of values and NonNumericKey
    when one of them is not an integer. The count is checked first.
    """
    tokens = raw.split(",") if isinstance(raw, str) else list(raw)
    if len(tokens) != count:
        raise MalformedKey(
            f"Key must be {count} numbers separated by commas "
            f"(e.g., \"3,3,2,5\"), got {len(tokens)}."
        )
    values = []
    for tok in tokens:
        if isinstance(tok, bool):
            raise NonNumericKey("All key values must be valid numbers.")
        if isinstance(tok, int):
            values.append(tok)
            continue
        try:
            values.append(int(str(tok).strip()))
        except ValueError:
            raise NonNumericKey(
                f"All key values must be valid numbers, got {tok!r}."
            ) from None
    return tuple(values)
