# exptree/ast/visitor.py

from abc import ABC, abstractmethod

from exptree.ast.expression_ast import ExpressionTree, NodeKind
from exptree.parser.error_handler import MalformedTreeError


class ExpressionVisitor(ABC):
    """Base visitor for expression trees, dispatching on node kind."""

    def visit(self, tree: ExpressionTree):
        if tree is None:
            raise MalformedTreeError("cannot visit an absent node")
        method_name = f"visit_{tree.kind.value}"
        method = getattr(self, method_name, self.visit_default)
        return method(tree)

    def visit_default(self, tree: ExpressionTree):
        raise MalformedTreeError(f"unsupported node kind {tree.kind!r}")

    @abstractmethod
    def visit_number(self, tree: ExpressionTree):
        pass

    @abstractmethod
    def visit_identifier(self, tree: ExpressionTree):
        pass

    @abstractmethod
    def visit_symbol(self, tree: ExpressionTree):
        pass
