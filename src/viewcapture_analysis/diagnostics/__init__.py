"""Diagnostics for analyzer error messages."""

from .node_path import describe_node, path_element, path_from_root, simple_class_name

__all__ = [
    "describe_node",
    "path_element",
    "path_from_root",
    "simple_class_name",
]
