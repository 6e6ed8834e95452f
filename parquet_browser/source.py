"""
Access to Parquet files through pyarrow.

``ParquetSource`` owns a file location on a pyarrow filesystem. It parses
the Thrift footer itself, because the footer structs keep details pyarrow's
metadata objects drop (schema child counts, raw statistics bytes). Every
raw byte source and every ``ColumnCursor`` is opened fresh so concurrent
callers never share a file position.
"""

import logging
import os
import struct

import pyarrow as pa
import pyarrow.parquet as pq
from pyarrow import fs
from thrift.protocol import TCompactProtocol
from thrift.transport.TTransport import TMemoryBuffer

from .errors import InvalidColumnIndexError, InvalidParquetFileError
from .ttypes import FileMetaData

logger = logging.getLogger(__name__)

MAGIC = b"PAR1"
ENCRYPTED_MAGIC = b"PARE"
DEFAULT_PARALLELISM = 4


def read_footer(f):
    """Parse the ``FileMetaData`` footer of the seekable binary file ``f``."""
    f.seek(0, 2)
    file_size = f.tell()
    if file_size < 12:
        raise InvalidParquetFileError(f"Not a valid Parquet file - only {file_size} bytes")

    f.seek(0)
    header = f.read(4)
    if header != MAGIC:
        raise InvalidParquetFileError("Not a valid Parquet file - missing PAR1 header")

    f.seek(file_size - 8)
    footer_size_bytes = f.read(4)
    footer_magic = f.read(4)
    if footer_magic == ENCRYPTED_MAGIC:
        raise InvalidParquetFileError("Encrypted Parquet footers are not supported")
    if footer_magic != MAGIC:
        raise InvalidParquetFileError("Not a valid Parquet file - missing PAR1 footer")
    footer_size = struct.unpack("<I", footer_size_bytes)[0]

    footer_start = file_size - 8 - footer_size
    if footer_start < 4:
        raise InvalidParquetFileError(f"Footer length {footer_size} exceeds file size {file_size}")
    f.seek(footer_start)
    footer_data = f.read(footer_size)

    footer = FileMetaData()
    try:
        footer.read(TCompactProtocol.TCompactProtocol(TMemoryBuffer(footer_data)))
    except Exception as e:
        raise InvalidParquetFileError(f"Failed to decode footer metadata: {e}") from e
    logger.debug(
        f"Footer at {footer_start}: {footer_size} bytes, "
        f"{len(footer.row_groups or [])} row groups"
    )
    return footer


def resolve_filesystem(uri, filesystem=None):
    """Return ``(filesystem, path)`` for a local path or a filesystem URI."""
    if filesystem is not None:
        return filesystem, uri
    if "://" not in uri:
        return fs.LocalFileSystem(), os.path.abspath(uri)
    return fs.FileSystem.from_uri(uri)


def open_source(uri, filesystem=None):
    filesystem, path = resolve_filesystem(uri, filesystem)
    return ParquetSource(filesystem, path, uri)


class ParquetSource:
    logger = logging.getLogger(__qualname__)

    def __init__(self, filesystem, path, uri=None):
        self.filesystem = filesystem
        self.path = path
        self.uri = uri or path
        with self.open_raw() as f:
            self.footer = read_footer(f)

    def open_raw(self):
        """Open an independent seekable byte source positioned at 0."""
        return self.filesystem.open_input_file(self.path)

    def new_column_cursor(self, parallelism=DEFAULT_PARALLELISM):
        return ColumnCursor(self, use_threads=parallelism > 1)

    @property
    def row_groups(self):
        return self.footer.row_groups or []

    @property
    def schema(self):
        return self.footer.schema or []


def _physical_type(arrow_type):
    """Arrow type whose Python values are the Parquet physical values."""
    if pa.types.is_timestamp(arrow_type) or pa.types.is_date64(arrow_type):
        return pa.int64()
    if pa.types.is_time64(arrow_type) or pa.types.is_duration(arrow_type):
        return pa.int64()
    if pa.types.is_date32(arrow_type) or pa.types.is_time32(arrow_type):
        return pa.int32()
    if pa.types.is_map(arrow_type):
        return pa.map_(_physical_type(arrow_type.key_type), _physical_type(arrow_type.item_type))
    if pa.types.is_list(arrow_type):
        field = arrow_type.value_field
        return pa.list_(field.with_type(_physical_type(field.type)))
    if pa.types.is_large_list(arrow_type):
        field = arrow_type.value_field
        return pa.large_list(field.with_type(_physical_type(field.type)))
    if pa.types.is_struct(arrow_type):
        return pa.struct(
            [
                arrow_type.field(i).with_type(_physical_type(arrow_type.field(i).type))
                for i in range(arrow_type.num_fields)
            ]
        )
    return arrow_type


def to_physical_pylist(column):
    """Python values of an Arrow column, with temporal types as plain ints."""
    physical = _physical_type(column.type)
    if physical != column.type:
        try:
            column = column.cast(physical)
        except (pa.ArrowInvalid, pa.ArrowNotImplementedError, pa.ArrowTypeError) as e:
            logger.debug(f"Keeping {column.type} values, cast to {physical} failed: {e}")
    return column.to_pylist()


def _after(path, name):
    if name in path:
        return path[path.index(name) + 1:]
    return path


def _struct_child(arrow_type, path):
    names = [arrow_type.field(i).name for i in range(arrow_type.num_fields)]
    for depth, segment in enumerate(path):
        if segment in names:
            return arrow_type.field(names.index(segment)), path[depth + 1:]
    if arrow_type.num_fields == 1:
        return arrow_type.field(0), path[1:]
    raise KeyError(f"No field of {arrow_type} matches {path}")


def leaf_slots(value, arrow_type, path):
    """Flatten one row into the physical value slots of a single leaf column.

    Parquet stores one slot for every leaf value, plus one for each null or
    empty list/map/struct on the way to the leaf. ``path`` is the rest of
    ``path_in_schema`` below ``arrow_type``.
    """
    if value is None:
        return [None]
    if pa.types.is_map(arrow_type):
        if not value:
            return [None]
        use_items = arrow_type.item_field.name in path
        field = arrow_type.item_field if use_items else arrow_type.key_field
        rest = _after(path, field.name)
        slots = []
        for key, item in value:
            slots.extend(leaf_slots(item if use_items else key, field.type, rest))
        return slots
    if pa.types.is_list(arrow_type) or pa.types.is_large_list(arrow_type) \
            or pa.types.is_fixed_size_list(arrow_type):
        if not value:
            return [None]
        field = arrow_type.value_field
        rest = _after(path, field.name)
        slots = []
        for item in value:
            slots.extend(leaf_slots(item, field.type, rest))
        return slots
    if pa.types.is_struct(arrow_type):
        child, rest = _struct_child(arrow_type, path)
        return leaf_slots(value.get(child.name), child.type, rest)
    return [value]


class ColumnCursor:
    """Sequential reader of physical column values across row groups."""

    logger = logging.getLogger(__qualname__)

    def __init__(self, source, use_threads=True):
        self.source = source
        self.use_threads = use_threads
        self._file = source.open_raw()
        self._parquet_file = pq.ParquetFile(self._file)
        self._row_group = 0
        self._row_offset = 0

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self):
        self._parquet_file.close()
        self._file.close()

    def skip_rows(self, num_rows):
        """Move the cursor ``num_rows`` rows forward."""
        remaining = self._row_offset + num_rows
        row_groups = self.source.row_groups
        while self._row_group < len(row_groups) and remaining >= row_groups[self._row_group].num_rows:
            remaining -= row_groups[self._row_group].num_rows
            self._row_group += 1
        self._row_offset = remaining
        self.logger.debug(f"Skipped {num_rows} rows, now at row group {self._row_group} row {remaining}")

    def read_column(self, column_index, count):
        """Read up to ``count`` physical values of the leaf column ``column_index``.

        Nulls, including null or empty repeated values, are returned as None.
        Fewer values are returned when the file ends first.
        """
        values = []
        row_groups = self.source.row_groups
        while len(values) < count and self._row_group < len(row_groups):
            columns = row_groups[self._row_group].columns or []
            if not 0 <= column_index < len(columns):
                raise InvalidColumnIndexError(column_index, len(columns))
            path = columns[column_index].meta_data.path_in_schema
            table = self._parquet_file.read_row_group(
                self._row_group, columns=[".".join(path)], use_threads=self.use_threads
            )
            column = table.column(0).slice(self._row_offset)
            arrow_type = column.type
            for row in to_physical_pylist(column):
                values.extend(leaf_slots(row, _physical_type(arrow_type), path[1:]))
                if len(values) >= count:
                    break
            self._row_group += 1
            self._row_offset = 0
        self.logger.debug(f"Read {len(values)} values of column {column_index}")
        return values[:count]
