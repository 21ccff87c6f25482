"""Classic algorithms and data structures: search, sorting, hashing, trees, graphs, spanning trees and disjoint sets."""

__version__ = "0.1.0"