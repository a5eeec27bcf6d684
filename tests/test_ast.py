import unittest

from exptree.ast.expression_ast import (
    ExpressionTree,
    NodeKind,
    copy_tree,
    count_nodes,
    identifier_node,
    number_node,
    release_tree,
    symbol_node,
    tree_depth,
    visualize_expression_tree
)
from exptree.parser.error_handler import MalformedTreeError


def right_chain():
    return symbol_node('+', number_node(1), symbol_node('+', number_node(2), number_node(3)))


class TestExpressionTree(unittest.TestCase):

    def test_leaves_have_no_children(self):
        for leaf in (number_node(3), identifier_node("x")):
            self.assertTrue(leaf.is_leaf)
            self.assertIsNone(leaf.left)
            self.assertIsNone(leaf.right)

    def test_symbol_node(self):
        node = symbol_node('*', number_node(2), number_node(3))
        self.assertEqual(node.kind, NodeKind.SYMBOL)
        self.assertEqual(node.value, '*')
        self.assertFalse(node.is_leaf)
        self.assertEqual(str(node), "(2 * 3)")

    def test_symbol_node_rejects_unknown_operator(self):
        with self.assertRaises(MalformedTreeError):
            symbol_node('%', number_node(1), number_node(2))

    def test_symbol_node_requires_both_children(self):
        with self.assertRaises(MalformedTreeError):
            symbol_node('+', number_node(1), None)

    def test_count_and_depth(self):
        tree = right_chain()
        self.assertEqual(count_nodes(tree), 5)
        self.assertEqual(tree_depth(tree), 3)
        self.assertEqual(count_nodes(None), 0)

    def test_copy_shares_no_nodes(self):
        tree = right_chain()
        copy = copy_tree(tree)
        self.assertEqual(str(copy), str(tree))
        self.assertIsNot(copy, tree)
        self.assertIsNot(copy.right, tree.right)


class TestReleaseTree(unittest.TestCase):

    def test_release_counts_every_node_once(self):
        self.assertEqual(release_tree(right_chain()), 5)

    def test_release_detaches_children(self):
        tree = right_chain()
        inner = tree.right
        release_tree(tree)
        self.assertIsNone(tree.left)
        self.assertIsNone(tree.right)
        self.assertIsNone(inner.left)
        self.assertIsNone(inner.right)

    def test_release_absent_tree_is_noop(self):
        self.assertEqual(release_tree(None), 0)

    def test_release_leaf(self):
        self.assertEqual(release_tree(ExpressionTree(NodeKind.IDENTIFIER, "x")), 1)


class TestASTVisualization(unittest.TestCase):

    def test_expression_visualization(self):
        visualization = visualize_expression_tree(symbol_node('-', identifier_node("a"), number_node(42)))
        self.assertEqual(visualization.splitlines(), [
            "symbol: -",
            "  identifier: a",
            "  number: 42",
        ])

    def test_empty_visualization(self):
        self.assertEqual(visualize_expression_tree(None), "")


if __name__ == '__main__':
    unittest.main()
