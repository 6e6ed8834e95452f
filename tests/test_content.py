import unittest
from unittest.mock import Mock

import parquet_files  # noqa: F401
from parquet_browser.content import check_data_page, extract_page_values, page_value_range
from parquet_browser.errors import InvalidPageIndexError, UnsupportedPageKindError
from parquet_browser.pages import PageDescriptor


def page(index, page_type, num_values):
    return PageDescriptor(
        index=index,
        offset=4 + index * 100,
        page_type=page_type,
        compressed_size=90,
        uncompressed_size=90,
        num_values=num_values,
    )


def cursor_returning(values):
    cursor = Mock()
    cursor.read_column.return_value = list(values)
    return cursor


class TestExtractPageValues(unittest.TestCase):
    def setUp(self):
        self.pages = [page(0, "DATA_PAGE", 2), page(1, "DATA_PAGE", 3)]
        self.values = ["a", "b", "c", "d", "e"]

    def test_second_page_slice(self):
        """Test that page 1 of a 2+3 value chunk is values[2:5]"""
        cursor = cursor_returning(self.values)
        result = extract_page_values(self.pages, 1, cursor, 0, 5)
        self.assertEqual(result, self.values[2:5])
        cursor.read_column.assert_called_once_with(0, 5)
        cursor.skip_rows.assert_not_called()

    def test_first_page_slice(self):
        result = extract_page_values(self.pages, 0, cursor_returning(self.values), 0, 5)
        self.assertEqual(result, ["a", "b"])

    def test_dictionary_page_does_not_shift_values(self):
        pages = [page(0, "DICTIONARY_PAGE", 10)] + [
            page(1, "DATA_PAGE_V2", 2),
            page(2, "DATA_PAGE_V2", 3),
        ]
        result = extract_page_values(pages, 2, cursor_returning(self.values), 3, 5)
        self.assertEqual(result, ["c", "d", "e"])
        self.assertEqual(page_value_range(pages, 1), (0, 2))

    def test_skips_rows_of_previous_row_groups(self):
        cursor = cursor_returning(self.values)
        extract_page_values(self.pages, 0, cursor, 2, 5, rows_before=120)
        cursor.skip_rows.assert_called_once_with(120)
        cursor.read_column.assert_called_once_with(2, 5)

    def test_short_read_truncates(self):
        """Test clamping when the column read returns fewer values than declared"""
        self.assertEqual(extract_page_values(self.pages, 1, cursor_returning("abc"), 0, 5), ["c"])
        self.assertEqual(extract_page_values(self.pages, 1, cursor_returning("a"), 0, 5), [])

    def test_non_data_pages_are_rejected_before_reading(self):
        """Test that index and dictionary pages never yield values"""
        pages = [page(0, "DICTIONARY_PAGE", 4), page(1, "INDEX_PAGE", 0), page(2, "DATA_PAGE", 5)]
        for index, kind in ((0, "DICTIONARY_PAGE"), (1, "INDEX_PAGE")):
            with self.subTest(kind=kind):
                cursor = cursor_returning(self.values)
                with self.assertRaises(UnsupportedPageKindError) as ctx:
                    extract_page_values(pages, index, cursor, 0, 5)
                self.assertEqual(ctx.exception.page_type, kind)
                cursor.skip_rows.assert_not_called()
                cursor.read_column.assert_not_called()

    def test_invalid_page_index(self):
        cursor = cursor_returning(self.values)
        for index in (-1, 2):
            with self.assertRaises(InvalidPageIndexError):
                extract_page_values(self.pages, index, cursor, 0, 5)
        cursor.read_column.assert_not_called()

    def test_column_read_failure_propagates(self):
        cursor = Mock()
        cursor.read_column.side_effect = OSError("read failed")
        with self.assertRaises(OSError):
            extract_page_values(self.pages, 0, cursor, 0, 5)

    def test_check_data_page_returns_page(self):
        self.assertIs(check_data_page(self.pages, 1), self.pages[1])


if __name__ == "__main__":
    unittest.main()
