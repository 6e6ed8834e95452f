"""
Fixture builders shared by the test modules.

Real files are written with pandas/pyarrow. Synthetic column chunks are
assembled from page headers serialized with the package's own Thrift
structs, so page boundaries and header fields are fully controlled.
"""

import datetime
import io
import os
import struct
import sys

import pandas as pd
import pyarrow as pa
import pyarrow.parquet as pq
from thrift.protocol import TCompactProtocol
from thrift.transport import TTransport

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from parquet_browser.ttypes import (  # noqa: E402
    ColumnMetaData,
    DataPageHeader,
    DataPageHeaderV2,
    DictionaryPageHeader,
    Encoding,
    IndexPageHeader,
    PageHeader,
    PageType,
    Statistics,
    Type,
)


def encode(thrift_struct):
    """Serialize a Thrift struct the way Parquet writers do."""
    buf = TTransport.TMemoryBuffer()
    thrift_struct.write(TCompactProtocol.TCompactProtocol(buf))
    return buf.getvalue()


def data_page_header(num_values, payload_size, statistics=None, crc=None):
    return PageHeader(
        type=PageType.DATA_PAGE,
        uncompressed_page_size=payload_size,
        compressed_page_size=payload_size,
        crc=crc,
        data_page_header=DataPageHeader(
            num_values=num_values,
            encoding=Encoding.PLAIN,
            definition_level_encoding=Encoding.RLE,
            repetition_level_encoding=Encoding.RLE,
            statistics=statistics,
        ),
    )


def data_page_v2_header(num_values, payload_size, statistics=None):
    return PageHeader(
        type=PageType.DATA_PAGE_V2,
        uncompressed_page_size=payload_size,
        compressed_page_size=payload_size,
        data_page_header_v2=DataPageHeaderV2(
            num_values=num_values,
            num_nulls=0,
            num_rows=num_values,
            encoding=Encoding.RLE_DICTIONARY,
            definition_levels_byte_length=0,
            repetition_levels_byte_length=0,
            statistics=statistics,
        ),
    )


def dictionary_page_header(num_values, payload_size):
    return PageHeader(
        type=PageType.DICTIONARY_PAGE,
        uncompressed_page_size=payload_size,
        compressed_page_size=payload_size,
        dictionary_page_header=DictionaryPageHeader(
            num_values=num_values, encoding=Encoding.PLAIN
        ),
    )


def index_page_header(payload_size):
    return PageHeader(
        type=PageType.INDEX_PAGE,
        uncompressed_page_size=payload_size,
        compressed_page_size=payload_size,
        index_page_header=IndexPageHeader(),
    )


class SyntheticChunk:
    """A column chunk assembled from page headers and filler payloads.

    ``prefix`` bytes precede the chunk so offsets are not zero based.
    """

    def __init__(self, headers, prefix=b"PAR1", physical_type=Type.INT32, trailer=b""):
        self.offsets = []
        data = bytearray(prefix)
        for header in headers:
            self.offsets.append(len(data))
            data += encode(header)
            data += b"\xab" * max(header.compressed_page_size, 0)
        self.end = len(data)
        data += trailer
        self.data = bytes(data)
        self.headers = headers
        self.physical_type = physical_type

    def source(self):
        return io.BytesIO(self.data)

    def column_meta(self, num_values=None, dictionary=None):
        if num_values is None:
            num_values = sum(
                (h.data_page_header or h.data_page_header_v2).num_values
                for h in self.headers
                if h.type in (PageType.DATA_PAGE, PageType.DATA_PAGE_V2)
            )
        if dictionary is None:
            dictionary = self.headers[0].type == PageType.DICTIONARY_PAGE
        start = self.offsets[0]
        data_offsets = [
            offset
            for offset, h in zip(self.offsets, self.headers)
            if h.type != PageType.DICTIONARY_PAGE
        ]
        return ColumnMetaData(
            type=self.physical_type,
            encodings=[Encoding.PLAIN],
            path_in_schema=["value"],
            codec=0,
            num_values=num_values,
            total_uncompressed_size=self.end - start,
            total_compressed_size=self.end - start,
            data_page_offset=data_offsets[0] if data_offsets else start,
            dictionary_page_offset=start if dictionary else None,
        )


def int32_statistics(min_value, max_value, null_count=0):
    return Statistics(
        min_value=struct.pack("<i", min_value),
        max_value=struct.pack("<i", max_value),
        null_count=null_count,
    )


class TestParquetFileGenerator:
    """Helper class to generate test Parquet files for testing"""

    @staticmethod
    def create_flat_parquet(file_path, num_rows=1000, row_group_size=None, **write_options):
        """Several primitive columns, written in many small pages."""
        df = pd.DataFrame(
            {
                "id": list(range(num_rows)),
                "name": [f"name-{i % 37}" if i % 11 else None for i in range(num_rows)],
                "score": [i * 0.5 for i in range(num_rows)],
                "day": [
                    datetime.date(2021, 1, 1) + datetime.timedelta(days=i % 365)
                    for i in range(num_rows)
                ],
            }
        )
        table = pa.Table.from_pandas(df, preserve_index=False)
        options = {
            "data_page_size": 512,
            "write_batch_size": 64,
            "row_group_size": row_group_size or num_rows,
        }
        options.update(write_options)
        pq.write_table(table, file_path, **options)
        return df

    @staticmethod
    def create_nested_parquet(file_path, row_group_size=None):
        """A list column with nulls and empty lists, and a struct column."""
        tags = []
        points = []
        for i in range(300):
            if i % 7 == 0:
                tags.append(None)
            elif i % 5 == 0:
                tags.append([])
            else:
                tags.append([i, i + 1, i + 2][: 1 + i % 3])
            points.append({"x": i, "y": float(i) / 2} if i % 9 else None)
        table = pa.table(
            {
                "tags": pa.array(tags, type=pa.list_(pa.int64())),
                "point": pa.array(
                    points, type=pa.struct([("x", pa.int32()), ("y", pa.float64())])
                ),
            }
        )
        pq.write_table(
            table,
            file_path,
            data_page_size=256,
            write_batch_size=32,
            row_group_size=row_group_size or 300,
            use_dictionary=False,
        )
        return tags, points

    @staticmethod
    def create_corrupt_parquet(file_path):
        """Creates a corrupted Parquet file for error testing"""
        with open(file_path, "wb") as f:
            f.write(b"XXXX")
            f.write(b"\x00" * 50)
            f.write((50).to_bytes(4, byteorder="little"))
            f.write(b"PAR1")


def flatten_list_slots(rows):
    """Physical slots of a list<int> leaf: one per element, one per null/empty list."""
    slots = []
    for row in rows:
        if not row:
            slots.append(None)
        else:
            slots.extend(row)
    return slots
