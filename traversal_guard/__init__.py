"""Traversal-safe path extraction for FastAPI route parameters, forms and JSON bodies."""

from traversal_guard.components import ComponentKind, PathComponent, is_traversal_attack, split_components
from traversal_guard.deps import SafePathDep, SafePathParam
from traversal_guard.errors import (
    REJECTION_MESSAGE,
    PathExtractionError,
    SafePathRejection,
    TraversalAttackError,
    install_rejection_handlers,
)
from traversal_guard.safe_path import SafePath

__all__ = [
    "REJECTION_MESSAGE",
    "ComponentKind",
    "PathComponent",
    "PathExtractionError",
    "SafePath",
    "SafePathDep",
    "SafePathParam",
    "SafePathRejection",
    "TraversalAttackError",
    "install_rejection_handlers",
    "is_traversal_attack",
    "split_components",
]
