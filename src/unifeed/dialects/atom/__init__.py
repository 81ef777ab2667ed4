"""Atom dialect (Atom 1.0 and 0.3)."""

from unifeed.dialects.atom.parser import AtomParser
from unifeed.dialects.atom.translator import DefaultAtomTranslator
from unifeed.dialects.atom.types import AtomEntry, AtomFeed, AtomLink

__all__ = [
    "AtomParser",
    "DefaultAtomTranslator",
    "AtomFeed",
    "AtomEntry",
    "AtomLink",
]
