# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Generate opaque replacement names from a per-file counter."""

_ALPHABET = "abcdefghijklmnopqrstuvwxyz"


class NameGenerator:
    """Produce the opaque name sequence for one source file.

    Each instance owns its counter, so every file starts again at ``a``.
    """

    def __init__(self) -> None:
        """Initialize the counter at zero."""
        self.counter: int = 0

    def next_name(self) -> str:
        """Return the name for the current counter and advance it by one.

        Returns:
            Lower-case alphabetic identifier.
        """
        name = alphabetic_name(self.counter)
        self.counter += 1
        return name


def alphabetic_name(counter: int) -> str:
    """Convert an integer counter into a positional base-26 name.

    Digits map straight to letters, so ``0`` is ``a`` and ``26`` is ``ba``
    (there is no ``aa``).

    Args:
        counter: Zero-based integer index.

    Returns:
        Alphabetic identifier in base-26 lowercase.
    """
    index = counter
    chars: list[str] = []
    while True:
        chars.append(_ALPHABET[index % 26])
        index = index // 26
        if index == 0:
            break
    return "".join(reversed(chars))
