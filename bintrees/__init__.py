"""Binary trees with parent links: nodes, measurements, drawing, search trees and max heaps."""

__version__ = "0.1.0"
__all__ = ["node", "properties", "printing", "bst", "heap"]