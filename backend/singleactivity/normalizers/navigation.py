# singleactivity/normalizers/navigation.py
from __future__ import annotations

from typing import Any, Dict
from singleactivity.domain.navigation import NavigationNode, NavigationTree


def normalize_navigation_node(tree: NavigationTree, node: NavigationNode) -> Dict[str, Any]:
    return {
        "text": node.text,
        "action": node.action,
        "type": node.type,
        "key": node.key,
        "icon": node.icon,
        "nodetype": node.nodetype,
        "isactive": node.isactive,
        "display": node.display,
        "classes": list(node.classes),
        "children": [
            normalize_navigation_node(tree, child)
            for child in tree.children(node)
        ],
    }


def normalize_navigation(tree: NavigationTree) -> Dict[str, Any]:
    """Nested JSON view of the live part of a navigation tree."""
    return normalize_navigation_node(tree, tree.root)
