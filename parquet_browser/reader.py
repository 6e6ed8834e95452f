import logging
from dataclasses import dataclass
from typing import List, Optional

from .content import check_data_page, extract_page_values
from .errors import InvalidColumnIndexError, InvalidPageIndexError, InvalidRowGroupIndexError
from .format import format_bytes, format_stat_value, format_value
from .pages import build_page_index
from .schema import (
    count_leaf_columns,
    find_schema_element,
    format_converted_type,
    format_logical_type,
    format_path_in_schema,
)
from .source import DEFAULT_PARALLELISM, open_source
from .ttypes import CompressionCodec, Type, enum_name


def _ratio(uncompressed, compressed):
    if compressed > 0:
        return uncompressed / compressed
    return 0.0


def _row_group_compressed_size(row_group):
    if row_group.total_compressed_size is not None:
        return row_group.total_compressed_size
    return sum(col.meta_data.total_compressed_size or 0 for col in row_group.columns or [])


@dataclass(frozen=True)
class FileInfo:
    version: int
    num_row_groups: int
    num_rows: int
    num_leaf_columns: int
    total_compressed_size: int
    total_uncompressed_size: int
    compression_ratio: float
    created_by: str

    def to_dict(self):
        return {
            "version": self.version,
            "numRowGroups": self.num_row_groups,
            "numRows": self.num_rows,
            "numLeafColumns": self.num_leaf_columns,
            "totalCompressedSize": self.total_compressed_size,
            "totalUncompressedSize": self.total_uncompressed_size,
            "compressionRatio": self.compression_ratio,
            "createdBy": self.created_by,
        }


@dataclass(frozen=True)
class RowGroupInfo:
    index: int
    num_rows: int
    num_columns: int
    compressed_size: int
    uncompressed_size: int
    compression_ratio: float

    def to_dict(self):
        return {
            "index": self.index,
            "numRows": self.num_rows,
            "numColumns": self.num_columns,
            "compressedSize": self.compressed_size,
            "uncompressedSize": self.uncompressed_size,
            "compressionRatio": self.compression_ratio,
        }


@dataclass(frozen=True)
class ColumnChunkInfo:
    index: int
    path_in_schema: List[str]
    name: str
    physical_type: str
    logical_type: str
    converted_type: str
    codec: str
    num_values: int
    null_count: Optional[int]
    compressed_size: int
    uncompressed_size: int
    compression_ratio: float
    min_value: str
    max_value: str

    def to_dict(self):
        return {
            "index": self.index,
            "pathInSchema": list(self.path_in_schema),
            "name": self.name,
            "physicalType": self.physical_type,
            "logicalType": self.logical_type,
            "convertedType": self.converted_type,
            "codec": self.codec,
            "numValues": self.num_values,
            "nullCount": self.null_count,
            "compressedSize": self.compressed_size,
            "uncompressedSize": self.uncompressed_size,
            "compressedSizeFormatted": format_bytes(self.compressed_size),
            "uncompressedSizeFormatted": format_bytes(self.uncompressed_size),
            "compressionRatio": self.compression_ratio,
            "minValue": self.min_value,
            "maxValue": self.max_value,
        }


class ParquetReader:
    """Read-only view of one Parquet file for the browser front ends.

    Page indexes and page contents are rebuilt on every call, each with its
    own byte source or column cursor.
    """

    logger = logging.getLogger(__qualname__)

    def __init__(self, source, parallelism=DEFAULT_PARALLELISM):
        self.source = source
        self.parallelism = parallelism

    @classmethod
    def open(cls, uri, filesystem=None, parallelism=DEFAULT_PARALLELISM):
        return cls(open_source(uri, filesystem), parallelism)

    @property
    def metadata(self):
        return self.source.footer

    def _row_group(self, rg_index):
        row_groups = self.source.row_groups
        if not 0 <= rg_index < len(row_groups):
            raise InvalidRowGroupIndexError(rg_index, len(row_groups))
        return row_groups[rg_index]

    def _column(self, rg_index, col_index):
        columns = self._row_group(rg_index).columns or []
        if not 0 <= col_index < len(columns):
            raise InvalidColumnIndexError(col_index, len(columns))
        return columns[col_index].meta_data

    def _schema_element(self, column_meta):
        return find_schema_element(self.source.schema, column_meta.path_in_schema)

    def file_info(self):
        row_groups = self.source.row_groups
        compressed = sum(_row_group_compressed_size(rg) for rg in row_groups)
        uncompressed = sum(rg.total_byte_size or 0 for rg in row_groups)
        return FileInfo(
            version=self.metadata.version,
            num_row_groups=len(row_groups),
            num_rows=self.metadata.num_rows,
            num_leaf_columns=count_leaf_columns(self.source.schema),
            total_compressed_size=compressed,
            total_uncompressed_size=uncompressed,
            compression_ratio=_ratio(uncompressed, compressed),
            created_by=self.metadata.created_by or "",
        )

    def row_group_info(self, rg_index):
        rg = self._row_group(rg_index)
        compressed = _row_group_compressed_size(rg)
        return RowGroupInfo(
            index=rg_index,
            num_rows=rg.num_rows,
            num_columns=len(rg.columns or []),
            compressed_size=compressed,
            uncompressed_size=rg.total_byte_size,
            compression_ratio=_ratio(rg.total_byte_size, compressed),
        )

    def all_row_groups_info(self):
        return [self.row_group_info(i) for i in range(len(self.source.row_groups))]

    def column_chunk_info(self, rg_index, col_index):
        meta = self._column(rg_index, col_index)
        schema_elem = self._schema_element(meta)

        null_count = None
        min_value = max_value = ""
        if meta.statistics is not None:
            stats = meta.statistics
            null_count = stats.null_count
            min_value = format_stat_value(stats.min_value or stats.min, meta, schema_elem)
            max_value = format_stat_value(stats.max_value or stats.max, meta, schema_elem)

        return ColumnChunkInfo(
            index=col_index,
            path_in_schema=list(meta.path_in_schema),
            name=format_path_in_schema(meta.path_in_schema),
            physical_type=enum_name(Type, meta.type),
            logical_type=format_logical_type(schema_elem.logicalType) if schema_elem else "",
            converted_type=format_converted_type(schema_elem.converted_type) if schema_elem else "",
            codec=enum_name(CompressionCodec, meta.codec),
            num_values=meta.num_values,
            null_count=null_count,
            compressed_size=meta.total_compressed_size,
            uncompressed_size=meta.total_uncompressed_size,
            compression_ratio=_ratio(meta.total_uncompressed_size, meta.total_compressed_size),
            min_value=min_value,
            max_value=max_value,
        )

    def all_column_chunks_info(self, rg_index):
        rg = self._row_group(rg_index)
        return [self.column_chunk_info(rg_index, i) for i in range(len(rg.columns or []))]

    def page_metadata_list(self, rg_index, col_index):
        meta = self._column(rg_index, col_index)
        with self.source.open_raw() as f:
            return build_page_index(f, meta, self._schema_element(meta))

    def page_metadata(self, rg_index, col_index, page_index):
        pages = self.page_metadata_list(rg_index, col_index)
        if not 0 <= page_index < len(pages):
            raise InvalidPageIndexError(page_index, len(pages))
        return pages[page_index]

    def page_content(self, rg_index, col_index, page_index):
        meta = self._column(rg_index, col_index)
        pages = self.page_metadata_list(rg_index, col_index)
        rows_before = sum(rg.num_rows for rg in self.source.row_groups[:rg_index])
        self.logger.debug(
            f"Reading page {page_index} of row group {rg_index} column {col_index}, "
            f"skipping {rows_before} rows"
        )
        check_data_page(pages, page_index)
        with self.source.new_column_cursor(self.parallelism) as cursor:
            return extract_page_values(
                pages, page_index, cursor, col_index, meta.num_values, rows_before
            )

    def page_content_formatted(self, rg_index, col_index, page_index):
        meta = self._column(rg_index, col_index)
        schema_elem = self._schema_element(meta)
        values = self.page_content(rg_index, col_index, page_index)
        return [format_value(value, meta.type, schema_elem) for value in values]
