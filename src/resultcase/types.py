"""Marker types shared by Result combinators."""

from __future__ import annotations

from typing import Final, final


@final
class Rejected:
    """Unit error produced by the error-agnostic require()/fail_if()/fail().

    Carries no information. Construction always yields the same instance,
    so every Rejected is equal (and identical) to every other.
    """

    __slots__ = ()
    _instance: Rejected | None = None

    def __new__(cls) -> Rejected:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Rejected"

    def __reduce__(self) -> tuple[type[Rejected], tuple[()]]:
        return (Rejected, ())


REJECTED: Final = Rejected()
