from .errors import (
    DecodeValueError,
    HeaderDecodeError,
    InvalidColumnIndexError,
    InvalidIndexError,
    InvalidPageIndexError,
    InvalidParquetFileError,
    InvalidRowGroupIndexError,
    ParquetBrowserError,
    UnsupportedPageKindError,
)
from .pages import PageDescriptor, build_page_index
from .reader import ColumnChunkInfo, FileInfo, ParquetReader, RowGroupInfo
from .schema import SchemaLeaf, find_schema_element, resolve_leaf
from .source import open_source
from .summary import column_meta_from_summary, parse_compression_codec, parse_physical_type

__version__ = "0.1.0"
