"""Text-side collaborators: classifiers, edit descriptors, documents."""

from .classifier import CharacterClassifier, CharacterSet
from .document import DocumentRangeError, TextDocument
from .edits import EditOperation, SingleEditOperation

__all__ = [
    "CharacterClassifier",
    "CharacterSet",
    "DocumentRangeError",
    "EditOperation",
    "SingleEditOperation",
    "TextDocument",
]
