import logging

from .errors import InvalidPageIndexError, UnsupportedPageKindError

logger = logging.getLogger(__name__)


def check_data_page(pages, page_index):
    if not 0 <= page_index < len(pages):
        raise InvalidPageIndexError(page_index, len(pages))
    page = pages[page_index]
    if not page.is_data_page:
        raise UnsupportedPageKindError(page.page_type)
    return page


def page_value_range(pages, page_index):
    """``[start, end)`` of a data page within its chunk's physical values.

    Only data pages contribute to ``start``; a dictionary page holds no
    column values of its own.
    """
    start = sum(page.num_values for page in pages[:page_index] if page.is_data_page)
    return start, start + pages[page_index].num_values


def extract_page_values(pages, page_index, cursor, column_index, num_values, rows_before=0):
    """Return the physical values stored in ``pages[page_index]``.

    A page's value count is physical, so for repeated columns page
    boundaries do not line up with rows. The whole chunk is read through a
    fresh ``cursor`` positioned after ``rows_before`` rows, then sliced.
    A short read truncates the page, or empties it when it starts past the
    last value returned.
    """
    check_data_page(pages, page_index)

    if rows_before > 0:
        cursor.skip_rows(rows_before)
    values = cursor.read_column(column_index, num_values)

    start, end = page_value_range(pages, page_index)
    if len(values) < num_values:
        logger.debug(f"Column {column_index} returned {len(values)} of {num_values} values")
    start = min(start, len(values))
    end = min(end, len(values))
    return values[start:end]
