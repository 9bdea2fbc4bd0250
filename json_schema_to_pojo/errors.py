"""
Errors raised while generating a class model.

Only conditions that make the rest of the document ungeneratable are
raised; everything else degrades to a skipped annotation.
"""

from __future__ import annotations


class GenerationError(Exception):
    """Base class for fatal generation errors.

    Aborts generation of the whole schema document.
    """

    pass


class UnresolvableReferenceError(GenerationError):
    """Raised when a $ref target cannot be loaded or its fragment path does not exist."""

    def __init__(self, ref: str, reason: str):
        super().__init__(f"Unable to resolve $ref '{ref}': {reason}")
        self.ref = ref
        self.reason = reason


class CyclicReferenceError(GenerationError):
    """Raised when a chain of $ref keywords points back to itself."""

    def __init__(self, chain: list[str]):
        super().__init__("Cyclic $ref chain: " + " -> ".join(chain))
        self.chain = chain


class DuplicateMemberError(GenerationError):
    """Raised when a class, field or method name is declared twice."""

    pass
