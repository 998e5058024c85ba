import unittest
from huffcodec.models import SymbolFrequency, Alphabet
from huffcodec.errors import InvalidInput, SymbolNotFound

class TestSymbolFrequency(unittest.TestCase):
    def test_equality_and_hash(self):
        sf1 = SymbolFrequency('a', 0.5)
        sf2 = SymbolFrequency('a', 0.5)
        sf3 = SymbolFrequency('b', 0.5)
        self.assertEqual(sf1, sf2)
        self.assertNotEqual(sf1, sf3)
        self.assertEqual(hash(sf1), hash(sf2))

    def test_internal_value_has_no_symbol(self):
        sf = SymbolFrequency(None, 3)
        self.assertIsNone(sf.symbol)
        self.assertEqual(sf.weight, 3)

    def test_immutable(self):
        sf = SymbolFrequency('a', 1)
        with self.assertRaises(AttributeError):
            sf.weight = 2
        with self.assertRaises(AttributeError):
            sf.symbol = 'b'

    def test_str_and_repr(self):
        sf = SymbolFrequency('x', 10)
        self.assertEqual(str(sf), "['x', 10]")
        self.assertEqual(repr(sf), "SymbolFrequency('x', 10)")

    def test_zero_weight_allowed(self):
        self.assertEqual(SymbolFrequency('z', 0).weight, 0)

    def test_invalid_values(self):
        for symbol, weight in [('ab', 1), ('', 1), (5, 1), ('a', -1), ('a', float('nan')),
                               ('a', float('inf')), ('a', True), ('a', "1")]:
            with self.assertRaises(InvalidInput):
                SymbolFrequency(symbol, weight)

class TestAlphabet(unittest.TestCase):
    def test_add_and_contains(self):
        alphabet = Alphabet()
        entry = alphabet.add('a', 3)
        self.assertEqual(entry, SymbolFrequency('a', 3))
        self.assertTrue(alphabet.contains('a'))
        self.assertFalse(alphabet.contains('b'))
        self.assertEqual(alphabet.get_size(), 1)

    def test_duplicate_symbol(self):
        alphabet = Alphabet()
        alphabet.add('a', 1)
        with self.assertRaises(InvalidInput):
            alphabet.add('a', 2)

    def test_none_symbol(self):
        with self.assertRaises(InvalidInput):
            Alphabet().add(None, 1)

    def test_add_multiple_keeps_order(self):
        alphabet = Alphabet()
        count = alphabet.add_multiple([('c', 1), SymbolFrequency('a', 2), ('b', 3)])
        self.assertEqual(count, 3)
        self.assertEqual(alphabet.get_symbols(), ['c', 'a', 'b'])
        self.assertEqual([entry.weight for entry in alphabet], [1, 2, 3])

    def test_add_multiple_rejects_malformed_pairs(self):
        with self.assertRaises(InvalidInput):
            Alphabet().add_multiple([('a', 1, 2)])
        with self.assertRaises(InvalidInput):
            Alphabet().add_multiple([7])

    def test_from_mapping(self):
        alphabet = Alphabet.from_mapping({'x': 0.25, 'y': 0.75})
        self.assertEqual(len(alphabet), 2)
        self.assertEqual(alphabet.get_weight('y'), 0.75)
        self.assertAlmostEqual(alphabet.get_total_weight(), 1.0)

    def test_from_pairs_duplicates(self):
        with self.assertRaises(InvalidInput):
            Alphabet.from_pairs([('a', 1), ('a', 1)])

    def test_from_text(self):
        alphabet = Alphabet.from_text("abracadabra")
        self.assertEqual(alphabet.get_symbols(), ['a', 'b', 'r', 'c', 'd'])
        self.assertEqual(alphabet.get_weight('a'), 5)
        self.assertEqual(alphabet.get_weight('r'), 2)
        self.assertEqual(alphabet.get_total_weight(), 11)

    def test_from_text_empty(self):
        self.assertEqual(Alphabet.from_text("").get_size(), 0)

    def test_get_weight_missing(self):
        alphabet = Alphabet.from_mapping({'a': 1})
        with self.assertRaises(SymbolNotFound):
            alphabet.get_weight('b')

    def test_coerce(self):
        alphabet = Alphabet.from_mapping({'a': 1})
        self.assertIs(Alphabet.coerce(alphabet), alphabet)
        self.assertEqual(Alphabet.coerce({'a': 1}), alphabet)
        self.assertEqual(Alphabet.coerce([('a', 1)]), alphabet)
        with self.assertRaises(InvalidInput):
            Alphabet.coerce("abc")

    def test_equality(self):
        a1 = Alphabet.from_mapping({'a': 1, 'b': 2})
        a2 = Alphabet.from_mapping({'b': 2, 'a': 1})
        a3 = Alphabet.from_mapping({'a': 1, 'b': 3})
        self.assertEqual(a1, a2)
        self.assertNotEqual(a1, a3)
        self.assertNotEqual(a1, {'a': 1, 'b': 2})

if __name__ == '__main__':
    unittest.main()
