# singleactivity/domain/navigation.py
"""
Navigation tree stored as an index arena.

Nodes reference their parent and children by index into the tree's node list,
so moving a node between parents never leaves two owners pointing at it: a
node has to be detached before it can be attached elsewhere. Removed nodes
keep their slot but can no longer be looked up.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional

TYPE_ROOT = 0
TYPE_COURSE = 20
TYPE_SECTION = 30
TYPE_ACTIVITY = 40
TYPE_CUSTOM = 60

NODETYPE_LEAF = 0
NODETYPE_BRANCH = 1


@dataclass
class NavigationNode:
    index: int
    text: str
    action: Optional[str] = None
    type: int = TYPE_CUSTOM
    key: Optional[str] = None
    icon: Optional[str] = None
    nodetype: int = NODETYPE_LEAF
    isactive: bool = False
    display: bool = True
    classes: List[str] = field(default_factory=list)
    parent: Optional[int] = None
    children: List[int] = field(default_factory=list)
    removed: bool = False


class NavigationTree:
    def __init__(self, text: str = "Home", action: Optional[str] = "/"):
        self._nodes: List[NavigationNode] = []
        self.root = self._new(text=text, action=action, type=TYPE_ROOT, key="root")

    def _new(self, **fields) -> NavigationNode:
        node = NavigationNode(index=len(self._nodes), **fields)
        self._nodes.append(node)
        return node

    def node(self, index: int) -> NavigationNode:
        node = self._nodes[index]
        if node.removed:
            raise KeyError(f"Navigation node {index} has been removed")
        return node

    def add(
        self,
        parent: NavigationNode,
        text: str,
        action: Optional[str] = None,
        type: int = TYPE_CUSTOM,
        key: Optional[str] = None,
        icon: Optional[str] = None,
    ) -> NavigationNode:
        parent = self.node(parent.index)
        child = self._new(
            text=text,
            action=action,
            type=type,
            key=key,
            icon=icon,
            parent=parent.index,
        )
        parent.children.append(child.index)
        return child

    def children(self, node: NavigationNode) -> List[NavigationNode]:
        return [self.node(i) for i in self.node(node.index).children]

    def walk(self, start: Optional[NavigationNode] = None) -> Iterator[NavigationNode]:
        """Depth-first, pre-order, over live nodes reachable from ``start``."""
        stack = [(start or self.root).index]
        while stack:
            node = self.node(stack.pop())
            yield node
            stack.extend(reversed(node.children))

    def find(self, key: Optional[str], type: int) -> Optional[NavigationNode]:
        for node in self.walk():
            if node.key == key and node.type == type:
                return node
        return None

    def detach(self, node: NavigationNode) -> NavigationNode:
        """Take ``node`` (and its subtree) off its parent, keeping it alive."""
        node = self.node(node.index)
        if node.parent is not None:
            self.node(node.parent).children.remove(node.index)
            node.parent = None
        return node

    def add_node(self, parent: NavigationNode, child: NavigationNode) -> NavigationNode:
        parent = self.node(parent.index)
        child = self.node(child.index)
        if child.parent is not None:
            raise ValueError(
                f"Navigation node {child.index} still belongs to node {child.parent}"
            )
        if child.index == parent.index or child.index in {n.index for n in self.walk_up(parent)}:
            raise ValueError("Cannot attach a navigation node below itself")

        child.parent = parent.index
        parent.children.append(child.index)
        return child

    def walk_up(self, node: NavigationNode) -> Iterator[NavigationNode]:
        current = self.node(node.index)
        while current.parent is not None:
            current = self.node(current.parent)
            yield current

    def remove(self, node: NavigationNode) -> None:
        if node.index == self.root.index:
            raise ValueError("The root navigation node cannot be removed")

        node = self.detach(node)
        for descendant in list(self.walk(node)):
            descendant.removed = True

    def make_active(self, node: NavigationNode) -> None:
        self.node(node.index).isactive = True

    def search_for_active_node(self, node: NavigationNode, url: Optional[str]) -> bool:
        """
        Mark the first node under ``node``, itself included, whose action is
        ``url`` as active.
        """
        if not url:
            return False

        for candidate in self.walk(node):
            if candidate.action == url:
                self.make_active(candidate)
                return True
        return False


def splice_activity_into_course(
    tree: NavigationTree,
    *,
    activity_key: str,
    course_key: str,
    page_url: Optional[str] = None,
) -> bool:
    """
    Let the course node stand in for the activity node.

    The course node takes over the activity's action, type, key and active
    state, adopts its children, and the activity node is removed. Returns
    False, leaving the tree untouched, when either node is missing.
    """
    activity_node = tree.find(activity_key, TYPE_ACTIVITY)
    course_node = tree.find(course_key, TYPE_COURSE)
    if activity_node is None or course_node is None:
        return False

    course_node.action = activity_node.action
    course_node.type = activity_node.type
    course_node.key = activity_node.key
    course_node.isactive = course_node.isactive or activity_node.isactive
    course_node.icon = None

    children = tree.children(activity_node)
    for child in children:
        tree.detach(child)
        tree.add_node(course_node, child)

    tree.remove(activity_node)
    if not children:
        tree.search_for_active_node(course_node, page_url)
    return True
