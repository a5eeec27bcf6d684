# exptree/ast/__init__.py

from .expression_ast import (
    ExpressionTree,
    NodeKind,
    OPERATORS,
    number_node,
    identifier_node,
    symbol_node,
    release_tree,
    copy_tree,
    count_nodes,
    tree_depth,
    visualize_expression_tree
)
from .visitor import ExpressionVisitor

__all__ = [
    'ExpressionTree',
    'NodeKind',
    'OPERATORS',
    'number_node',
    'identifier_node',
    'symbol_node',
    'release_tree',
    'copy_tree',
    'count_nodes',
    'tree_depth',
    'visualize_expression_tree',
    'ExpressionVisitor'
]
