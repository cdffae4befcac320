"""Small text helpers shared by the message model."""

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


def case_insensitive_find(text: str, sub: str) -> int:
    """Return the index of the first occurrence of ``sub`` in ``text``.

    Letters are compared with ASCII case folding only; other characters
    must match exactly. An empty ``sub`` is found at index 0, and -1 is
    returned when there is no match.
    """
    if not sub:
        return 0
    return text.translate(_ASCII_LOWER).find(sub.translate(_ASCII_LOWER))