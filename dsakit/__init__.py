"""Classic data structures and algorithms: searching, expressions, lists, trees and bounded containers."""

__version__ = "0.1.0"
__all__ = ["bounded", "bst", "cli", "expressions", "linked_list", "numeric", "searching"]