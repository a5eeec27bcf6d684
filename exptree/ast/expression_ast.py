# exptree/ast/expression_ast.py

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Union

from exptree.parser.error_handler import MalformedTreeError

OPERATORS = ('+', '-', '*', '/')


class NodeKind(Enum):
    NUMBER = "number"
    IDENTIFIER = "identifier"
    SYMBOL = "symbol"


@dataclass(eq=False)
class ExpressionTree:
    """
    A node of a binary expression tree.

    NUMBER and IDENTIFIER nodes are leaves; a SYMBOL node carries one of
    ``+ - * /`` and always has both children. Each node is owned by exactly
    one parent (or by the caller holding the root).
    """
    kind: NodeKind
    value: Union[int, float, str]
    left: Optional["ExpressionTree"] = None
    right: Optional["ExpressionTree"] = None

    @property
    def is_leaf(self) -> bool:
        return self.kind != NodeKind.SYMBOL

    def __str__(self) -> str:
        if self.kind == NodeKind.SYMBOL:
            return f"({self.left} {self.value} {self.right})"
        return str(self.value)


def number_node(value: Union[int, float]) -> ExpressionTree:
    return ExpressionTree(NodeKind.NUMBER, value)


def identifier_node(name: str) -> ExpressionTree:
    return ExpressionTree(NodeKind.IDENTIFIER, name)


def symbol_node(operator: str, left: ExpressionTree, right: ExpressionTree) -> ExpressionTree:
    if operator not in OPERATORS:
        raise MalformedTreeError(f"unknown operator {operator!r}")
    if left is None or right is None:
        raise MalformedTreeError(f"operator {operator!r} needs two operands")
    return ExpressionTree(NodeKind.SYMBOL, operator, left, right)


def release_tree(tree: Optional[ExpressionTree]) -> int:
    """
    Release a tree in post-order and return the number of nodes released.

    Every node has its children detached exactly once, so the released
    nodes no longer keep each other alive. Releasing None does nothing.
    """
    if tree is None:
        return 0
    released = release_tree(tree.left) + release_tree(tree.right)
    tree.left = None
    tree.right = None
    return released + 1


def count_nodes(tree: Optional[ExpressionTree]) -> int:
    if tree is None:
        return 0
    return 1 + count_nodes(tree.left) + count_nodes(tree.right)


def tree_depth(tree: Optional[ExpressionTree]) -> int:
    if tree is None:
        return 0
    return 1 + max(tree_depth(tree.left), tree_depth(tree.right))


def visualize_expression_tree(tree: Optional[ExpressionTree], indent: int = 0) -> str:
    """Indented outline of a tree, one node per line."""
    if tree is None:
        return ""
    lines: List[str] = [f"{'  ' * indent}{tree.kind.value}: {tree.value}"]
    if tree.kind == NodeKind.SYMBOL:
        lines.append(visualize_expression_tree(tree.left, indent + 1))
        lines.append(visualize_expression_tree(tree.right, indent + 1))
    return "\n".join(lines)


def copy_tree(tree: Optional[ExpressionTree]) -> Optional[ExpressionTree]:
    """Structural copy; the copy shares no node with its source."""
    if tree is None:
        return None
    return ExpressionTree(tree.kind, tree.value, copy_tree(tree.left), copy_tree(tree.right))
