"""
Rebuild footer structs from the JSON summaries the reader emits.

Remote front ends only see ``ColumnChunkInfo.to_dict()`` payloads but still
want the page and statistics formatters, which take ``ColumnMetaData``.
Unknown type and codec names fall back to BYTE_ARRAY and UNCOMPRESSED. The
fallback keeps exotic columns browsable, but values of such columns may be
decoded as the wrong type.
"""

import logging

from .ttypes import ColumnMetaData, CompressionCodec, Type

logger = logging.getLogger(__name__)


def _parse_enum(enum_class, name, default):
    value = enum_class._NAMES_TO_VALUES.get((name or "").upper())
    if value is None:
        logger.warning(
            f"Unknown {enum_class.__name__} {name!r}, using "
            f"{enum_class._VALUES_TO_NAMES[default]}"
        )
        return default
    return value


def parse_physical_type(name):
    return _parse_enum(Type, name, Type.BYTE_ARRAY)


def parse_compression_codec(name):
    return _parse_enum(CompressionCodec, name, CompressionCodec.UNCOMPRESSED)


def column_meta_from_summary(info):
    path = info.get("pathInSchema")
    if not path:
        path = (info.get("name") or "").split(".")
    return ColumnMetaData(
        type=parse_physical_type(info.get("physicalType")),
        path_in_schema=list(path),
        codec=parse_compression_codec(info.get("codec")),
        num_values=info.get("numValues", 0),
        total_compressed_size=info.get("compressedSize", 0),
        total_uncompressed_size=info.get("uncompressedSize", 0),
    )
