import unittest

from pyprops import InvalidProperty, Properties, Property, new_from_string


class TestProperties(unittest.TestCase):
    def setUp(self) -> None:
        self.props = Properties()
        self.props['b'] = '2'
        self.props['a'] = Property(key='a', value='1')
        self.props['c'] = '3'

    def test_insertion_order(self) -> None:
        self.assertEqual(self.props.keys(), ['b', 'a', 'c'])
        self.assertEqual(list(self.props), ['b', 'a', 'c'])
        self.assertEqual(len(self.props), 3)

    def test_str_value_is_wrapped(self) -> None:
        self.assertEqual(self.props['b'], Property(key='b', value='2'))

    def test_property_is_rekeyed(self) -> None:
        self.props['d'] = Property(key='x', value='4')
        self.assertEqual(self.props['d'].key, 'd')

    def test_update_keeps_position(self) -> None:
        self.props['b'] = '20'
        self.assertEqual(self.props.keys(), ['b', 'a', 'c'])
        self.assertEqual(self.props.getvalue('b'), '20')

    def test_delete_then_reinsert_goes_last(self) -> None:
        del self.props['b']
        self.assertNotIn('b', self.props)
        self.assertEqual(self.props.keys(), ['a', 'c'])
        self.props['b'] = '2'
        self.assertEqual(self.props.keys(), ['a', 'c', 'b'])

    def test_missing_key(self) -> None:
        with self.assertRaises(KeyError):
            self.props['missing']
        self.assertIsNone(self.props.get('missing'))
        self.assertEqual(self.props.getvalue('missing', 'dflt'), 'dflt')

    def test_keys_is_a_copy(self) -> None:
        self.props.keys().append('z')
        self.assertEqual(len(self.props), 3)

    def test_to_dict(self) -> None:
        self.assertEqual(self.props.to_dict(), {'b': '2', 'a': '1', 'c': '3'})

    def test_repr(self) -> None:
        self.assertEqual(repr(self.props), 'Properties { .cnt = 3 }')


class TestSerialization(unittest.TestCase):
    def test_to_string_escapes_separators(self) -> None:
        props = Properties()
        props['my key'] = 'a=b: c'
        props['empty'] = ''
        self.assertEqual(props.to_string(), 'my\\ key=a\\=b\\:\\ c\nempty=')
        self.assertEqual(str(props), props.to_string())

    def test_to_string_parses_back(self) -> None:
        props = Properties()
        props['server.url'] = 'http://localhost:8080/path?q=1'
        props['greeting'] = '  hello world  '
        props['windows.path'] = 'C:\\Program Files\\app'
        props['tabbed\tkey'] = 'v'
        self.assertEqual(new_from_string(props.to_string()), props)
        self.assertEqual(
            new_from_string(props.to_string(' ')).keys(), props.keys())

    def test_line_break_is_refused(self) -> None:
        props = Properties()
        props['a'] = 'line1\nline2'
        with self.assertRaises(InvalidProperty):
            props.to_string()

    def test_trailing_backslash_is_refused(self) -> None:
        props = Properties()
        props['a'] = 'dir\\'
        with self.assertRaises(InvalidProperty):
            props.to_string()

    def test_comment_mark_keys_parse_back(self) -> None:
        props = Properties()
        props['#a'] = '1'
        props['!a'] = '2'
        props['b'] = '#3'
        self.assertEqual(props.to_string(), '\\#a=1\n\\!a=2\nb=#3')
        self.assertEqual(new_from_string(props.to_string()), props)

    def test_key_with_trailing_backslash_is_refused(self) -> None:
        props = Properties()
        props['dir\\'] = 'x'
        with self.assertRaises(InvalidProperty):
            props.to_string()

    def test_empty_key_is_refused(self) -> None:
        props = Properties()
        props[''] = 'x'
        with self.assertRaises(InvalidProperty) as ctx:
            props.to_string()
        self.assertEqual(ctx.exception.reason, 'empty key')

    def test_empty_collection(self) -> None:
        self.assertEqual(Properties().to_string(), '')


if __name__ == '__main__':
    unittest.main()
