"""
Thrift definitions for the part of parquet.thrift that parquet-browser reads.

The layout follows what ``thrift --gen py:dynamic`` emits: plain enum holder
classes with ``_VALUES_TO_NAMES`` tables, and ``TBase`` structs whose
``thrift_spec`` tuples drive the generic ``TProtocolBase.readStruct`` path.
Fields not listed here are skipped by the protocol while decoding.
"""

from thrift.protocol.TBase import TBase
from thrift.Thrift import TType
from thrift.TRecursive import fix_spec

all_structs = []


class Type(object):
    BOOLEAN = 0
    INT32 = 1
    INT64 = 2
    INT96 = 3
    FLOAT = 4
    DOUBLE = 5
    BYTE_ARRAY = 6
    FIXED_LEN_BYTE_ARRAY = 7

    _VALUES_TO_NAMES = {
        0: "BOOLEAN",
        1: "INT32",
        2: "INT64",
        3: "INT96",
        4: "FLOAT",
        5: "DOUBLE",
        6: "BYTE_ARRAY",
        7: "FIXED_LEN_BYTE_ARRAY",
    }

    _NAMES_TO_VALUES = {v: k for k, v in _VALUES_TO_NAMES.items()}


class ConvertedType(object):
    UTF8 = 0
    MAP = 1
    MAP_KEY_VALUE = 2
    LIST = 3
    ENUM = 4
    DECIMAL = 5
    DATE = 6
    TIME_MILLIS = 7
    TIME_MICROS = 8
    TIMESTAMP_MILLIS = 9
    TIMESTAMP_MICROS = 10
    UINT_8 = 11
    UINT_16 = 12
    UINT_32 = 13
    UINT_64 = 14
    INT_8 = 15
    INT_16 = 16
    INT_32 = 17
    INT_64 = 18
    JSON = 19
    BSON = 20
    INTERVAL = 21

    _VALUES_TO_NAMES = {
        0: "UTF8",
        1: "MAP",
        2: "MAP_KEY_VALUE",
        3: "LIST",
        4: "ENUM",
        5: "DECIMAL",
        6: "DATE",
        7: "TIME_MILLIS",
        8: "TIME_MICROS",
        9: "TIMESTAMP_MILLIS",
        10: "TIMESTAMP_MICROS",
        11: "UINT_8",
        12: "UINT_16",
        13: "UINT_32",
        14: "UINT_64",
        15: "INT_8",
        16: "INT_16",
        17: "INT_32",
        18: "INT_64",
        19: "JSON",
        20: "BSON",
        21: "INTERVAL",
    }

    _NAMES_TO_VALUES = {v: k for k, v in _VALUES_TO_NAMES.items()}


class FieldRepetitionType(object):
    REQUIRED = 0
    OPTIONAL = 1
    REPEATED = 2

    _VALUES_TO_NAMES = {
        0: "REQUIRED",
        1: "OPTIONAL",
        2: "REPEATED",
    }

    _NAMES_TO_VALUES = {v: k for k, v in _VALUES_TO_NAMES.items()}


class Encoding(object):
    PLAIN = 0
    PLAIN_DICTIONARY = 2
    RLE = 3
    BIT_PACKED = 4
    DELTA_BINARY_PACKED = 5
    DELTA_LENGTH_BYTE_ARRAY = 6
    DELTA_BYTE_ARRAY = 7
    RLE_DICTIONARY = 8
    BYTE_STREAM_SPLIT = 9

    _VALUES_TO_NAMES = {
        0: "PLAIN",
        2: "PLAIN_DICTIONARY",
        3: "RLE",
        4: "BIT_PACKED",
        5: "DELTA_BINARY_PACKED",
        6: "DELTA_LENGTH_BYTE_ARRAY",
        7: "DELTA_BYTE_ARRAY",
        8: "RLE_DICTIONARY",
        9: "BYTE_STREAM_SPLIT",
    }

    _NAMES_TO_VALUES = {v: k for k, v in _VALUES_TO_NAMES.items()}


class CompressionCodec(object):
    UNCOMPRESSED = 0
    SNAPPY = 1
    GZIP = 2
    LZO = 3
    BROTLI = 4
    LZ4 = 5
    ZSTD = 6
    LZ4_RAW = 7

    _VALUES_TO_NAMES = {
        0: "UNCOMPRESSED",
        1: "SNAPPY",
        2: "GZIP",
        3: "LZO",
        4: "BROTLI",
        5: "LZ4",
        6: "ZSTD",
        7: "LZ4_RAW",
    }

    _NAMES_TO_VALUES = {v: k for k, v in _VALUES_TO_NAMES.items()}


class PageType(object):
    DATA_PAGE = 0
    INDEX_PAGE = 1
    DICTIONARY_PAGE = 2
    DATA_PAGE_V2 = 3

    _VALUES_TO_NAMES = {
        0: "DATA_PAGE",
        1: "INDEX_PAGE",
        2: "DICTIONARY_PAGE",
        3: "DATA_PAGE_V2",
    }

    _NAMES_TO_VALUES = {v: k for k, v in _VALUES_TO_NAMES.items()}


def enum_name(enum_class, value, default="-"):
    """Name of ``value`` in ``enum_class``, ``default`` when unset."""
    if value is None:
        return default
    return enum_class._VALUES_TO_NAMES.get(value, f"UNKNOWN({value})")


class Statistics(TBase):
    __slots__ = (
        'max',
        'min',
        'null_count',
        'distinct_count',
        'max_value',
        'min_value',
        'is_max_value_exact',
        'is_min_value_exact',
    )

    def __init__(self, max=None, min=None, null_count=None, distinct_count=None,
                 max_value=None, min_value=None, is_max_value_exact=None,
                 is_min_value_exact=None):
        self.max = max
        self.min = min
        self.null_count = null_count
        self.distinct_count = distinct_count
        self.max_value = max_value
        self.min_value = min_value
        self.is_max_value_exact = is_max_value_exact
        self.is_min_value_exact = is_min_value_exact


class _EmptyStruct(TBase):
    """Marker structs of the LogicalType and TimeUnit unions carry no fields."""
    __slots__ = ()
    thrift_spec = (None,)


class StringType(_EmptyStruct):
    __slots__ = ()


class UUIDType(_EmptyStruct):
    __slots__ = ()


class MapType(_EmptyStruct):
    __slots__ = ()


class ListType(_EmptyStruct):
    __slots__ = ()


class EnumType(_EmptyStruct):
    __slots__ = ()


class DateType(_EmptyStruct):
    __slots__ = ()


class Float16Type(_EmptyStruct):
    __slots__ = ()


class NullType(_EmptyStruct):
    __slots__ = ()


class JsonType(_EmptyStruct):
    __slots__ = ()


class BsonType(_EmptyStruct):
    __slots__ = ()


class MilliSeconds(_EmptyStruct):
    __slots__ = ()


class MicroSeconds(_EmptyStruct):
    __slots__ = ()


class NanoSeconds(_EmptyStruct):
    __slots__ = ()


class DecimalType(TBase):
    __slots__ = (
        'scale',
        'precision',
    )

    def __init__(self, scale=None, precision=None):
        self.scale = scale
        self.precision = precision


class TimeUnit(TBase):
    __slots__ = (
        'MILLIS',
        'MICROS',
        'NANOS',
    )

    def __init__(self, MILLIS=None, MICROS=None, NANOS=None):
        self.MILLIS = MILLIS
        self.MICROS = MICROS
        self.NANOS = NANOS

    def name(self):
        for unit in self.__slots__:
            if getattr(self, unit) is not None:
                return unit
        return "UNKNOWN"


class TimestampType(TBase):
    __slots__ = (
        'isAdjustedToUTC',
        'unit',
    )

    def __init__(self, isAdjustedToUTC=None, unit=None):
        self.isAdjustedToUTC = isAdjustedToUTC
        self.unit = unit


class TimeType(TBase):
    __slots__ = (
        'isAdjustedToUTC',
        'unit',
    )

    def __init__(self, isAdjustedToUTC=None, unit=None):
        self.isAdjustedToUTC = isAdjustedToUTC
        self.unit = unit


class IntType(TBase):
    __slots__ = (
        'bitWidth',
        'isSigned',
    )

    def __init__(self, bitWidth=None, isSigned=None):
        self.bitWidth = bitWidth
        self.isSigned = isSigned


class LogicalType(TBase):
    __slots__ = (
        'STRING',
        'MAP',
        'LIST',
        'ENUM',
        'DECIMAL',
        'DATE',
        'TIME',
        'TIMESTAMP',
        'INTEGER',
        'UNKNOWN',
        'JSON',
        'BSON',
        'UUID',
        'FLOAT16',
    )

    def __init__(self, STRING=None, MAP=None, LIST=None, ENUM=None, DECIMAL=None,
                 DATE=None, TIME=None, TIMESTAMP=None, INTEGER=None, UNKNOWN=None,
                 JSON=None, BSON=None, UUID=None, FLOAT16=None):
        self.STRING = STRING
        self.MAP = MAP
        self.LIST = LIST
        self.ENUM = ENUM
        self.DECIMAL = DECIMAL
        self.DATE = DATE
        self.TIME = TIME
        self.TIMESTAMP = TIMESTAMP
        self.INTEGER = INTEGER
        self.UNKNOWN = UNKNOWN
        self.JSON = JSON
        self.BSON = BSON
        self.UUID = UUID
        self.FLOAT16 = FLOAT16

    def set_member(self):
        """Name of the union member that is set, or None."""
        for member in self.__slots__:
            if getattr(self, member) is not None:
                return member
        return None


class SchemaElement(TBase):
    __slots__ = (
        'type',
        'type_length',
        'repetition_type',
        'name',
        'num_children',
        'converted_type',
        'scale',
        'precision',
        'field_id',
        'logicalType',
    )

    def __init__(self, type=None, type_length=None, repetition_type=None, name=None,
                 num_children=None, converted_type=None, scale=None, precision=None,
                 field_id=None, logicalType=None):
        self.type = type
        self.type_length = type_length
        self.repetition_type = repetition_type
        self.name = name
        self.num_children = num_children
        self.converted_type = converted_type
        self.scale = scale
        self.precision = precision
        self.field_id = field_id
        self.logicalType = logicalType


class DataPageHeader(TBase):
    __slots__ = (
        'num_values',
        'encoding',
        'definition_level_encoding',
        'repetition_level_encoding',
        'statistics',
    )

    def __init__(self, num_values=None, encoding=None, definition_level_encoding=None,
                 repetition_level_encoding=None, statistics=None):
        self.num_values = num_values
        self.encoding = encoding
        self.definition_level_encoding = definition_level_encoding
        self.repetition_level_encoding = repetition_level_encoding
        self.statistics = statistics


class IndexPageHeader(_EmptyStruct):
    __slots__ = ()


class DictionaryPageHeader(TBase):
    __slots__ = (
        'num_values',
        'encoding',
        'is_sorted',
    )

    def __init__(self, num_values=None, encoding=None, is_sorted=None):
        self.num_values = num_values
        self.encoding = encoding
        self.is_sorted = is_sorted


class DataPageHeaderV2(TBase):
    __slots__ = (
        'num_values',
        'num_nulls',
        'num_rows',
        'encoding',
        'definition_levels_byte_length',
        'repetition_levels_byte_length',
        'is_compressed',
        'statistics',
    )

    def __init__(self, num_values=None, num_nulls=None, num_rows=None, encoding=None,
                 definition_levels_byte_length=None, repetition_levels_byte_length=None,
                 is_compressed=True, statistics=None):
        self.num_values = num_values
        self.num_nulls = num_nulls
        self.num_rows = num_rows
        self.encoding = encoding
        self.definition_levels_byte_length = definition_levels_byte_length
        self.repetition_levels_byte_length = repetition_levels_byte_length
        self.is_compressed = is_compressed
        self.statistics = statistics


class PageHeader(TBase):
    __slots__ = (
        'type',
        'uncompressed_page_size',
        'compressed_page_size',
        'crc',
        'data_page_header',
        'index_page_header',
        'dictionary_page_header',
        'data_page_header_v2',
    )

    def __init__(self, type=None, uncompressed_page_size=None, compressed_page_size=None,
                 crc=None, data_page_header=None, index_page_header=None,
                 dictionary_page_header=None, data_page_header_v2=None):
        self.type = type
        self.uncompressed_page_size = uncompressed_page_size
        self.compressed_page_size = compressed_page_size
        self.crc = crc
        self.data_page_header = data_page_header
        self.index_page_header = index_page_header
        self.dictionary_page_header = dictionary_page_header
        self.data_page_header_v2 = data_page_header_v2


class KeyValue(TBase):
    __slots__ = (
        'key',
        'value',
    )

    def __init__(self, key=None, value=None):
        self.key = key
        self.value = value


class PageEncodingStats(TBase):
    __slots__ = (
        'page_type',
        'encoding',
        'count',
    )

    def __init__(self, page_type=None, encoding=None, count=None):
        self.page_type = page_type
        self.encoding = encoding
        self.count = count


class ColumnMetaData(TBase):
    __slots__ = (
        'type',
        'encodings',
        'path_in_schema',
        'codec',
        'num_values',
        'total_uncompressed_size',
        'total_compressed_size',
        'key_value_metadata',
        'data_page_offset',
        'index_page_offset',
        'dictionary_page_offset',
        'statistics',
        'encoding_stats',
        'bloom_filter_offset',
        'bloom_filter_length',
    )

    def __init__(self, type=None, encodings=None, path_in_schema=None, codec=None,
                 num_values=None, total_uncompressed_size=None, total_compressed_size=None,
                 key_value_metadata=None, data_page_offset=None, index_page_offset=None,
                 dictionary_page_offset=None, statistics=None, encoding_stats=None,
                 bloom_filter_offset=None, bloom_filter_length=None):
        self.type = type
        self.encodings = encodings
        self.path_in_schema = path_in_schema
        self.codec = codec
        self.num_values = num_values
        self.total_uncompressed_size = total_uncompressed_size
        self.total_compressed_size = total_compressed_size
        self.key_value_metadata = key_value_metadata
        self.data_page_offset = data_page_offset
        self.index_page_offset = index_page_offset
        self.dictionary_page_offset = dictionary_page_offset
        self.statistics = statistics
        self.encoding_stats = encoding_stats
        self.bloom_filter_offset = bloom_filter_offset
        self.bloom_filter_length = bloom_filter_length


class ColumnChunk(TBase):
    __slots__ = (
        'file_path',
        'file_offset',
        'meta_data',
        'offset_index_offset',
        'offset_index_length',
        'column_index_offset',
        'column_index_length',
        'encrypted_column_metadata',
    )

    def __init__(self, file_path=None, file_offset=0, meta_data=None,
                 offset_index_offset=None, offset_index_length=None,
                 column_index_offset=None, column_index_length=None,
                 encrypted_column_metadata=None):
        self.file_path = file_path
        self.file_offset = file_offset
        self.meta_data = meta_data
        self.offset_index_offset = offset_index_offset
        self.offset_index_length = offset_index_length
        self.column_index_offset = column_index_offset
        self.column_index_length = column_index_length
        self.encrypted_column_metadata = encrypted_column_metadata


class RowGroup(TBase):
    __slots__ = (
        'columns',
        'total_byte_size',
        'num_rows',
        'file_offset',
        'total_compressed_size',
        'ordinal',
    )

    def __init__(self, columns=None, total_byte_size=None, num_rows=None,
                 file_offset=None, total_compressed_size=None, ordinal=None):
        self.columns = columns
        self.total_byte_size = total_byte_size
        self.num_rows = num_rows
        self.file_offset = file_offset
        self.total_compressed_size = total_compressed_size
        self.ordinal = ordinal


class FileMetaData(TBase):
    __slots__ = (
        'version',
        'schema',
        'num_rows',
        'row_groups',
        'key_value_metadata',
        'created_by',
        'footer_signing_key_metadata',
    )

    def __init__(self, version=None, schema=None, num_rows=None, row_groups=None,
                 key_value_metadata=None, created_by=None,
                 footer_signing_key_metadata=None):
        self.version = version
        self.schema = schema
        self.num_rows = num_rows
        self.row_groups = row_groups
        self.key_value_metadata = key_value_metadata
        self.created_by = created_by
        self.footer_signing_key_metadata = footer_signing_key_metadata


all_structs.append(Statistics)
Statistics.thrift_spec = (
    None,  # 0
    (1, TType.STRING, 'max', 'BINARY', None, ),  # 1
    (2, TType.STRING, 'min', 'BINARY', None, ),  # 2
    (3, TType.I64, 'null_count', None, None, ),  # 3
    (4, TType.I64, 'distinct_count', None, None, ),  # 4
    (5, TType.STRING, 'max_value', 'BINARY', None, ),  # 5
    (6, TType.STRING, 'min_value', 'BINARY', None, ),  # 6
    (7, TType.BOOL, 'is_max_value_exact', None, None, ),  # 7
    (8, TType.BOOL, 'is_min_value_exact', None, None, ),  # 8
)
all_structs.append(DecimalType)
DecimalType.thrift_spec = (
    None,  # 0
    (1, TType.I32, 'scale', None, None, ),  # 1
    (2, TType.I32, 'precision', None, None, ),  # 2
)
all_structs.append(TimeUnit)
TimeUnit.thrift_spec = (
    None,  # 0
    (1, TType.STRUCT, 'MILLIS', [MilliSeconds, None], None, ),  # 1
    (2, TType.STRUCT, 'MICROS', [MicroSeconds, None], None, ),  # 2
    (3, TType.STRUCT, 'NANOS', [NanoSeconds, None], None, ),  # 3
)
all_structs.append(TimestampType)
TimestampType.thrift_spec = (
    None,  # 0
    (1, TType.BOOL, 'isAdjustedToUTC', None, None, ),  # 1
    (2, TType.STRUCT, 'unit', [TimeUnit, None], None, ),  # 2
)
all_structs.append(TimeType)
TimeType.thrift_spec = (
    None,  # 0
    (1, TType.BOOL, 'isAdjustedToUTC', None, None, ),  # 1
    (2, TType.STRUCT, 'unit', [TimeUnit, None], None, ),  # 2
)
all_structs.append(IntType)
IntType.thrift_spec = (
    None,  # 0
    (1, TType.BYTE, 'bitWidth', None, None, ),  # 1
    (2, TType.BOOL, 'isSigned', None, None, ),  # 2
)
all_structs.append(LogicalType)
LogicalType.thrift_spec = (
    None,  # 0
    (1, TType.STRUCT, 'STRING', [StringType, None], None, ),  # 1
    (2, TType.STRUCT, 'MAP', [MapType, None], None, ),  # 2
    (3, TType.STRUCT, 'LIST', [ListType, None], None, ),  # 3
    (4, TType.STRUCT, 'ENUM', [EnumType, None], None, ),  # 4
    (5, TType.STRUCT, 'DECIMAL', [DecimalType, None], None, ),  # 5
    (6, TType.STRUCT, 'DATE', [DateType, None], None, ),  # 6
    (7, TType.STRUCT, 'TIME', [TimeType, None], None, ),  # 7
    (8, TType.STRUCT, 'TIMESTAMP', [TimestampType, None], None, ),  # 8
    None,  # 9
    (10, TType.STRUCT, 'INTEGER', [IntType, None], None, ),  # 10
    (11, TType.STRUCT, 'UNKNOWN', [NullType, None], None, ),  # 11
    (12, TType.STRUCT, 'JSON', [JsonType, None], None, ),  # 12
    (13, TType.STRUCT, 'BSON', [BsonType, None], None, ),  # 13
    (14, TType.STRUCT, 'UUID', [UUIDType, None], None, ),  # 14
    (15, TType.STRUCT, 'FLOAT16', [Float16Type, None], None, ),  # 15
)
all_structs.append(SchemaElement)
SchemaElement.thrift_spec = (
    None,  # 0
    (1, TType.I32, 'type', None, None, ),  # 1
    (2, TType.I32, 'type_length', None, None, ),  # 2
    (3, TType.I32, 'repetition_type', None, None, ),  # 3
    (4, TType.STRING, 'name', 'UTF8', None, ),  # 4
    (5, TType.I32, 'num_children', None, None, ),  # 5
    (6, TType.I32, 'converted_type', None, None, ),  # 6
    (7, TType.I32, 'scale', None, None, ),  # 7
    (8, TType.I32, 'precision', None, None, ),  # 8
    (9, TType.I32, 'field_id', None, None, ),  # 9
    (10, TType.STRUCT, 'logicalType', [LogicalType, None], None, ),  # 10
)
all_structs.append(DataPageHeader)
DataPageHeader.thrift_spec = (
    None,  # 0
    (1, TType.I32, 'num_values', None, None, ),  # 1
    (2, TType.I32, 'encoding', None, None, ),  # 2
    (3, TType.I32, 'definition_level_encoding', None, None, ),  # 3
    (4, TType.I32, 'repetition_level_encoding', None, None, ),  # 4
    (5, TType.STRUCT, 'statistics', [Statistics, None], None, ),  # 5
)
all_structs.append(DictionaryPageHeader)
DictionaryPageHeader.thrift_spec = (
    None,  # 0
    (1, TType.I32, 'num_values', None, None, ),  # 1
    (2, TType.I32, 'encoding', None, None, ),  # 2
    (3, TType.BOOL, 'is_sorted', None, None, ),  # 3
)
all_structs.append(DataPageHeaderV2)
DataPageHeaderV2.thrift_spec = (
    None,  # 0
    (1, TType.I32, 'num_values', None, None, ),  # 1
    (2, TType.I32, 'num_nulls', None, None, ),  # 2
    (3, TType.I32, 'num_rows', None, None, ),  # 3
    (4, TType.I32, 'encoding', None, None, ),  # 4
    (5, TType.I32, 'definition_levels_byte_length', None, None, ),  # 5
    (6, TType.I32, 'repetition_levels_byte_length', None, None, ),  # 6
    (7, TType.BOOL, 'is_compressed', None, True, ),  # 7
    (8, TType.STRUCT, 'statistics', [Statistics, None], None, ),  # 8
)
all_structs.append(PageHeader)
PageHeader.thrift_spec = (
    None,  # 0
    (1, TType.I32, 'type', None, None, ),  # 1
    (2, TType.I32, 'uncompressed_page_size', None, None, ),  # 2
    (3, TType.I32, 'compressed_page_size', None, None, ),  # 3
    (4, TType.I32, 'crc', None, None, ),  # 4
    (5, TType.STRUCT, 'data_page_header', [DataPageHeader, None], None, ),  # 5
    (6, TType.STRUCT, 'index_page_header', [IndexPageHeader, None], None, ),  # 6
    (7, TType.STRUCT, 'dictionary_page_header', [DictionaryPageHeader, None], None, ),  # 7
    (8, TType.STRUCT, 'data_page_header_v2', [DataPageHeaderV2, None], None, ),  # 8
)
all_structs.append(KeyValue)
KeyValue.thrift_spec = (
    None,  # 0
    (1, TType.STRING, 'key', 'BINARY', None, ),  # 1
    (2, TType.STRING, 'value', 'BINARY', None, ),  # 2
)
all_structs.append(PageEncodingStats)
PageEncodingStats.thrift_spec = (
    None,  # 0
    (1, TType.I32, 'page_type', None, None, ),  # 1
    (2, TType.I32, 'encoding', None, None, ),  # 2
    (3, TType.I32, 'count', None, None, ),  # 3
)
all_structs.append(ColumnMetaData)
ColumnMetaData.thrift_spec = (
    None,  # 0
    (1, TType.I32, 'type', None, None, ),  # 1
    (2, TType.LIST, 'encodings', (TType.I32, None, False), None, ),  # 2
    (3, TType.LIST, 'path_in_schema', (TType.STRING, 'UTF8', False), None, ),  # 3
    (4, TType.I32, 'codec', None, None, ),  # 4
    (5, TType.I64, 'num_values', None, None, ),  # 5
    (6, TType.I64, 'total_uncompressed_size', None, None, ),  # 6
    (7, TType.I64, 'total_compressed_size', None, None, ),  # 7
    (8, TType.LIST, 'key_value_metadata', (TType.STRUCT, [KeyValue, None], False), None, ),  # 8
    (9, TType.I64, 'data_page_offset', None, None, ),  # 9
    (10, TType.I64, 'index_page_offset', None, None, ),  # 10
    (11, TType.I64, 'dictionary_page_offset', None, None, ),  # 11
    (12, TType.STRUCT, 'statistics', [Statistics, None], None, ),  # 12
    (13, TType.LIST, 'encoding_stats', (TType.STRUCT, [PageEncodingStats, None], False), None, ),  # 13
    (14, TType.I64, 'bloom_filter_offset', None, None, ),  # 14
    (15, TType.I32, 'bloom_filter_length', None, None, ),  # 15
)
all_structs.append(ColumnChunk)
ColumnChunk.thrift_spec = (
    None,  # 0
    (1, TType.STRING, 'file_path', 'UTF8', None, ),  # 1
    (2, TType.I64, 'file_offset', None, 0, ),  # 2
    (3, TType.STRUCT, 'meta_data', [ColumnMetaData, None], None, ),  # 3
    (4, TType.I64, 'offset_index_offset', None, None, ),  # 4
    (5, TType.I32, 'offset_index_length', None, None, ),  # 5
    (6, TType.I64, 'column_index_offset', None, None, ),  # 6
    (7, TType.I32, 'column_index_length', None, None, ),  # 7
    None,  # 8
    (9, TType.STRING, 'encrypted_column_metadata', 'BINARY', None, ),  # 9
)
all_structs.append(RowGroup)
RowGroup.thrift_spec = (
    None,  # 0
    (1, TType.LIST, 'columns', (TType.STRUCT, [ColumnChunk, None], False), None, ),  # 1
    (2, TType.I64, 'total_byte_size', None, None, ),  # 2
    (3, TType.I64, 'num_rows', None, None, ),  # 3
    None,  # 4
    (5, TType.I64, 'file_offset', None, None, ),  # 5
    (6, TType.I64, 'total_compressed_size', None, None, ),  # 6
    (7, TType.I16, 'ordinal', None, None, ),  # 7
)
all_structs.append(FileMetaData)
FileMetaData.thrift_spec = (
    None,  # 0
    (1, TType.I32, 'version', None, None, ),  # 1
    (2, TType.LIST, 'schema', (TType.STRUCT, [SchemaElement, None], False), None, ),  # 2
    (3, TType.I64, 'num_rows', None, None, ),  # 3
    (4, TType.LIST, 'row_groups', (TType.STRUCT, [RowGroup, None], False), None, ),  # 4
    (5, TType.LIST, 'key_value_metadata', (TType.STRUCT, [KeyValue, None], False), None, ),  # 5
    (6, TType.STRING, 'created_by', 'UTF8', None, ),  # 6
    None,  # 7
    None,  # 8
    (9, TType.STRING, 'footer_signing_key_metadata', 'BINARY', None, ),  # 9
)
fix_spec(all_structs)
del all_structs
