class ParquetBrowserError(Exception):
    pass


class InvalidParquetFileError(ParquetBrowserError, ValueError):
    pass


class InvalidIndexError(ParquetBrowserError, IndexError):
    kind = "index"

    def __init__(self, index, count):
        super().__init__(f"Invalid {self.kind} index: {index} (valid range 0-{count - 1})")
        self.index = index
        self.count = count


class InvalidRowGroupIndexError(InvalidIndexError):
    kind = "row group"


class InvalidColumnIndexError(InvalidIndexError):
    kind = "column"


class InvalidPageIndexError(InvalidIndexError):
    kind = "page"


class HeaderDecodeError(ParquetBrowserError):
    """A page header at ``offset`` could not be decoded."""

    def __init__(self, offset, cause):
        super().__init__(f"Failed to read page header at offset {offset}: {cause}")
        self.offset = offset
        self.cause = cause


class UnsupportedPageKindError(ParquetBrowserError):
    def __init__(self, page_type):
        super().__init__(f"Page content is only available for data pages, not {page_type}")
        self.page_type = page_type


class DecodeValueError(ParquetBrowserError, ValueError):
    pass
