# tests/test_unit_huffman.py

import sys, os
# Добавляем src/ в путь
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

import random
import unittest
from unittest import mock

from Huffman import *
from utils import *

REFERENCE = [("a", 5), ("b", 9), ("c", 12), ("d", 13), ("e", 16), ("f", 45)]

def random_table(rng: random.Random, n: int):
    symbols = rng.sample([chr(c) for c in range(33, 127)], n)
    return [(s, rng.randint(1, 50)) for s in symbols]

# ======================================================================
#                        UNIT TESTS FOR TREE BUILDER
# ======================================================================

class TestBuildTree(unittest.TestCase):

    def test_leaf_weights_sum_to_total_frequency(self):
        rng = random.Random(12345)
        for n in (1, 2, 3, 7, 40):
            table = random_table(rng, n)
            root = build_tree(table)
            leaves = list(iter_leaves(root))
            self.assertEqual(sum(leaf.weight for leaf in leaves), sum(f for _, f in table))
            self.assertEqual(root.weight, sum(f for _, f in table))

    def test_every_symbol_in_exactly_one_leaf(self):
        root = build_tree(REFERENCE)
        symbols = [leaf.symbol for leaf in iter_leaves(root)]
        self.assertEqual(sorted(symbols), ["a", "b", "c", "d", "e", "f"])

    def test_internal_weight_is_sum_of_children(self):
        def check(node):
            if node.is_leaf:
                return
            children = [c for c in (node.left, node.right) if c is not None]
            self.assertEqual(node.weight, sum(c.weight for c in children))
            self.assertIsNone(node.symbol)
            for c in children:
                check(c)

        check(build_tree(random_table(random.Random(7), 20)))

    def test_reference_tree_shape(self):
        root = build_tree(REFERENCE)
        self.assertEqual(root.weight, 100)
        # f (45) извлекается раньше узла 55
        self.assertTrue(root.left.is_leaf)
        self.assertEqual(root.left.symbol, "f")
        self.assertEqual(root.right.weight, 55)

    def test_single_symbol_is_wrapped(self):
        root = build_tree([("x", 7)])
        self.assertFalse(root.is_leaf)
        self.assertEqual(root.weight, 7)
        self.assertEqual(root.left.symbol, "x")
        self.assertIsNone(root.right)

    def test_accepts_mapping(self):
        root = build_tree(dict(REFERENCE))
        self.assertEqual(root.weight, 100)

    def test_empty_table_raises(self):
        with self.assertRaises(FrequencyTableError):
            build_tree([])
        with self.assertRaises(FrequencyTableError):
            build_tree({})

    def test_non_positive_frequency_raises(self):
        for bad in (0, -3):
            with self.assertRaises(FrequencyTableError):
                build_tree([("a", 5), ("b", bad)])

    def test_non_integer_frequency_raises(self):
        for bad in (2.5, "3", True):
            with self.assertRaises(FrequencyTableError):
                build_tree([("a", bad)])

    def test_duplicate_symbol_raises(self):
        with self.assertRaises(FrequencyTableError):
            build_tree([("a", 5), ("b", 9), ("a", 1)])

    def test_unhashable_symbol_raises(self):
        with self.assertRaises(FrequencyTableError):
            build_tree([(["a"], 5), ("b", 9)])
        with self.assertRaises(FrequencyTableError):
            Huffman().build([("a", 5), ({"b": 1}, 9)])

    def test_tie_break_follows_creation_order(self):
        # равные веса: листья в порядке таблицы
        codes = generate_codes(build_tree([("p", 1), ("q", 1), ("r", 1), ("s", 1)]))
        self.assertEqual(codes, {"p": "00", "q": "01", "r": "10", "s": "11"})

        # внутренний узел веса 2 создан позже листа веса 2
        codes = generate_codes(build_tree([("x", 1), ("y", 1), ("z", 2)]))
        self.assertEqual(codes, {"z": "0", "x": "10", "y": "11"})

# ======================================================================
#                        UNIT TESTS FOR CODE GENERATOR
# ======================================================================

class TestGenerateCodes(unittest.TestCase):

    def test_reference_codes(self):
        codes = generate_codes(build_tree(REFERENCE))
        self.assertEqual(codes, {
            "f": "0",
            "c": "100",
            "d": "101",
            "a": "1100",
            "b": "1101",
            "e": "111",
        })

    def test_highest_frequency_gets_shortest_code(self):
        codes = generate_codes(build_tree(REFERENCE))
        lengths = {s: len(c) for s, c in codes.items()}
        self.assertEqual(min(lengths, key=lengths.get), "f")
        self.assertEqual(lengths["a"], max(lengths.values()))
        self.assertEqual(lengths["b"], max(lengths.values()))

    def test_codes_are_prefix_free_and_cover_table(self):
        rng = random.Random(2024)
        for n in (2, 5, 17, 60):
            table = random_table(rng, n)
            codes = generate_codes(build_tree(table))
            self.assertEqual(set(codes), {s for s, _ in table})
            self.assertTrue(all(codes.values()))
            self.assertTrue(all(set(c) <= {"0", "1"} for c in codes.values()))
            self.assertTrue(is_prefix_free(codes.values()))

    def test_single_symbol_code_is_not_empty(self):
        self.assertEqual(generate_codes(build_tree({"x": 7})), {"x": "0"})

    def test_leaf_root(self):
        self.assertEqual(generate_codes(HuffmanNode("x", 3)), {"x": "0"})

    def test_traversal_does_not_mutate_tree(self):
        root = build_tree(REFERENCE)
        before = [(leaf.symbol, leaf.weight) for leaf in iter_leaves(root)]
        generate_codes(root)
        generate_codes(root)
        self.assertEqual([(leaf.symbol, leaf.weight) for leaf in iter_leaves(root)], before)
        self.assertEqual(root.weight, 100)

    def test_deep_tree_does_not_hit_recursion_limit(self):
        # частоты Фибоначчи дают вырожденное дерево глубины n-1
        n = sys.getrecursionlimit() + 50
        a, b = 1, 1
        table = []
        for i in range(n):
            table.append((i, a))
            a, b = b, a + b

        codes = generate_codes(build_tree(table))
        self.assertEqual(len(codes), n)
        self.assertEqual(max(len(c) for c in codes.values()), n - 1)

# ======================================================================
#                        UNIT TESTS FOR HUFFMAN CODEC
# ======================================================================

class TestHuffmanCodec(unittest.TestCase):

    def test_build_keeps_table_order(self):
        h = Huffman()
        codes = h.build(REFERENCE)
        self.assertEqual(list(codes), ["a", "b", "c", "d", "e", "f"])
        self.assertEqual(h.freqs, tuple(REFERENCE))
        self.assertEqual(h.code_lengths(), {"a": 4, "b": 4, "c": 3, "d": 3, "e": 3, "f": 1})

    def test_build_is_idempotent(self):
        h1, h2 = Huffman(), Huffman()
        self.assertEqual(h1.build(REFERENCE), h2.build(REFERENCE))

    def test_build_checks_leaf_weights(self):
        # дерево, у которого вес корня не равен сумме весов листьев
        broken = HuffmanNode(None, 14, left=HuffmanNode("a", 5), right=HuffmanNode("b", 8))
        h = Huffman()
        with mock.patch("Huffman.build_tree", return_value=broken):
            with self.assertRaises(RuntimeError):
                h.build([("a", 5), ("b", 9)])
        self.assertEqual(h.codes, {})

    def test_iter_leaves_left_to_right(self):
        leaves = list(iter_leaves(build_tree(REFERENCE)))
        self.assertEqual([leaf.symbol for leaf in leaves], ["f", "c", "d", "a", "b", "e"])

    def test_failed_build_keeps_previous_state(self):
        h = Huffman()
        codes = h.build(REFERENCE)
        with self.assertRaises(FrequencyTableError):
            h.build([("a", 0)])
        self.assertEqual(h.codes, codes)

    def test_encode_decode(self):
        h = Huffman()
        h.build(REFERENCE)
        bits = h.encode("abcdef")
        self.assertEqual(bits, "1100" "1101" "100" "101" "111" "0")
        self.assertEqual(h.decode(bits), list("abcdef"))

    def test_decode_random_message(self):
        rng = random.Random(1)
        table = random_table(rng, 12)
        h = Huffman()
        h.build(table)
        message = [rng.choice(table)[0] for _ in range(500)]
        self.assertEqual(h.decode(h.encode(message)), message)

    def test_encode_unknown_symbol_raises(self):
        h = Huffman()
        h.build(REFERENCE)
        with self.assertRaises(CodeLookupError):
            h.encode("abz")

    def test_decode_rejects_incomplete_or_bad_bits(self):
        h = Huffman()
        h.build(REFERENCE)
        with self.assertRaises(ValueError):
            h.decode("110")
        with self.assertRaises(ValueError):
            h.decode("012")


if __name__ == "__main__":
    unittest.main()
