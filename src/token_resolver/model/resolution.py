from dataclasses import dataclass


@dataclass(frozen=True)
class Resolved:
    """A token that was recognised and replaced with a generated value."""

    value: str


@dataclass(frozen=True)
class Literal:
    """Input that is not a recognised token, passed through unchanged."""

    value: str


type Resolution = Resolved | Literal
