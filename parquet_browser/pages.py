import logging
from dataclasses import dataclass
from typing import Optional

from .errors import HeaderDecodeError
from .format import format_bytes, format_stat_value
from .protocol import read_page_header
from .ttypes import Encoding, PageType, enum_name

logger = logging.getLogger(__name__)

MAX_PAGES = 10000

DATA_PAGE_TYPES = ("DATA_PAGE", "DATA_PAGE_V2")


@dataclass(frozen=True)
class PageDescriptor:
    index: int
    offset: int
    page_type: str
    compressed_size: int
    uncompressed_size: int
    num_values: int = 0
    encoding: str = ""
    def_level_encoding: str = ""
    rep_level_encoding: str = ""
    has_statistics: bool = False
    has_crc: bool = False
    min_value: str = ""
    max_value: str = ""
    null_count: Optional[int] = None

    @property
    def is_data_page(self):
        return self.page_type in DATA_PAGE_TYPES

    def to_dict(self):
        return {
            "index": self.index,
            "offset": self.offset,
            "pageType": self.page_type,
            "compressedSize": self.compressed_size,
            "uncompressedSize": self.uncompressed_size,
            "compressedSizeFormatted": format_bytes(self.compressed_size),
            "uncompressedSizeFormatted": format_bytes(self.uncompressed_size),
            "numValues": self.num_values,
            "encoding": self.encoding,
            "defLevelEncoding": self.def_level_encoding,
            "repLevelEncoding": self.rep_level_encoding,
            "hasStatistics": self.has_statistics,
            "hasCRC": self.has_crc,
            "minValue": self.min_value,
            "maxValue": self.max_value,
            "nullCount": self.null_count,
        }


def column_start_offset(column_meta):
    if column_meta.dictionary_page_offset is not None:
        return column_meta.dictionary_page_offset
    return column_meta.data_page_offset


def _statistics_fields(stats, column_meta, schema_elem):
    # min_value/max_value supersede the deprecated min/max pair
    min_raw = stats.min_value or stats.min
    max_raw = stats.max_value or stats.max
    fields = {"null_count": stats.null_count}
    if min_raw:
        fields["min_value"] = format_stat_value(min_raw, column_meta, schema_elem)
    if max_raw:
        fields["max_value"] = format_stat_value(max_raw, column_meta, schema_elem)
    return fields


def _data_page_fields(header, column_meta, schema_elem):
    fields = {
        "num_values": header.num_values or 0,
        "encoding": enum_name(Encoding, header.encoding, ""),
        "def_level_encoding": enum_name(Encoding, header.definition_level_encoding, ""),
        "rep_level_encoding": enum_name(Encoding, header.repetition_level_encoding, ""),
        "has_statistics": header.statistics is not None,
    }
    if header.statistics is not None:
        fields.update(_statistics_fields(header.statistics, column_meta, schema_elem))
    return fields


def _data_page_v2_fields(header, column_meta, schema_elem):
    fields = {
        "num_values": header.num_values or 0,
        "encoding": enum_name(Encoding, header.encoding, ""),
        "has_statistics": header.statistics is not None,
    }
    if header.statistics is not None:
        fields.update(_statistics_fields(header.statistics, column_meta, schema_elem))
    return fields


def _dictionary_page_fields(header, column_meta, schema_elem):
    return {
        "num_values": header.num_values or 0,
        "encoding": enum_name(Encoding, header.encoding, ""),
    }


# page type -> (PageHeader attribute, field extractor)
PAGE_FIELD_EXTRACTORS = {
    PageType.DATA_PAGE: ("data_page_header", _data_page_fields),
    PageType.DATA_PAGE_V2: ("data_page_header_v2", _data_page_v2_fields),
    PageType.DICTIONARY_PAGE: ("dictionary_page_header", _dictionary_page_fields),
}


def describe_page(header, offset, index, column_meta=None, schema_elem=None):
    fields = {}
    attr, extractor = PAGE_FIELD_EXTRACTORS.get(header.type, (None, None))
    sub_header = getattr(header, attr) if attr else None
    if sub_header is not None:
        fields = extractor(sub_header, column_meta, schema_elem)
    return PageDescriptor(
        index=index,
        offset=offset,
        page_type=enum_name(PageType, header.type),
        compressed_size=header.compressed_page_size,
        uncompressed_size=header.uncompressed_page_size or 0,
        has_crc=header.crc is not None,
        **fields,
    )


def build_page_index(source, column_meta, schema_elem=None, max_pages=MAX_PAGES):
    """Walk the page headers of one column chunk.

    Reading starts at the dictionary page when there is one and stops once
    the data pages account for the chunk's ``num_values``, at the end of the
    chunk, on an undecodable header, once more than ``max_pages`` pages are
    read, or when a header fails to move the offset forward. The pages read
    so far are returned in every case.
    """
    start_offset = column_start_offset(column_meta)
    end_offset = start_offset + (column_meta.total_compressed_size or 0)
    num_values = column_meta.num_values or 0

    pages = []
    offset = start_offset
    values_read = 0

    while values_read < num_values:
        try:
            header, header_size = read_page_header(source, offset)
        except HeaderDecodeError as e:
            logger.debug(f"Stopping page scan: {e}")
            break

        page = describe_page(header, offset, len(pages), column_meta, schema_elem)
        pages.append(page)
        if page.is_data_page:
            values_read += page.num_values

        next_offset = offset + header_size + header.compressed_page_size
        if next_offset <= offset:
            logger.warning(f"Page at offset {offset} does not advance, stopping page scan")
            break
        offset = next_offset

        if offset >= end_offset:
            break
        if len(pages) > max_pages:
            logger.warning(f"Stopping page scan after {len(pages)} pages")
            break

    logger.debug(
        f"Found {len(pages)} pages, {values_read} of {num_values} values, "
        f"offsets {start_offset}-{offset}"
    )
    return pages
