"""Result types exchanged across the parser port."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ParseFailure:
    """The parser could not interpret the input. reason is a human-readable message."""

    reason: str
