"""
Converters from physical Parquet values to their logical meaning.

Each converter takes ``(value, physical_type, schema_elem)`` and returns the
decoded value, or ``value`` unchanged when it is not of a shape the
converter understands. The two dispatch tables at the bottom are keyed by
converted type and by the set member of the ``LogicalType`` union.
"""

import base64
import datetime
import struct
import uuid
from decimal import Decimal

from .schema import decimal_params
from .ttypes import ConvertedType, Type

EPOCH = datetime.datetime(1970, 1, 1)
EPOCH_DATE = datetime.date(1970, 1, 1)

# Julian day number of 1970-01-01
JULIAN_EPOCH_DAY = 2440588
NANOS_PER_DAY = 86400 * 10**9

# unit name -> (ticks per second, fraction digits)
TIME_UNITS = {
    "MILLIS": (10**3, 3),
    "MICROS": (10**6, 6),
    "NANOS": (10**9, 9),
}


def _is_int(value):
    return isinstance(value, int) and not isinstance(value, bool)


def _unit_of(logical_member):
    if logical_member is None or logical_member.unit is None:
        return "MILLIS"
    return logical_member.unit.name()


def decode_decimal(value, physical_type, schema_elem):
    _, scale = decimal_params(schema_elem)
    if _is_int(value):
        unscaled = value
    elif isinstance(value, (bytes, bytearray)) and value:
        unscaled = int.from_bytes(value, "big", signed=True)
    elif isinstance(value, Decimal):
        return f"{value:f}"
    else:
        return value
    return f"{Decimal(unscaled).scaleb(-scale):f}"


def decode_date(value, physical_type=None, schema_elem=None):
    if not _is_int(value):
        return value
    try:
        return (EPOCH_DATE + datetime.timedelta(days=value)).isoformat()
    except OverflowError:
        return value


def format_time_of_day(value, unit):
    if not _is_int(value) or unit not in TIME_UNITS:
        return value
    per_second, digits = TIME_UNITS[unit]
    seconds, fraction = divmod(value, per_second)
    minutes, seconds = divmod(seconds, 60)
    hours, minutes = divmod(minutes, 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}.{fraction:0{digits}d}"


def format_timestamp(value, unit):
    """ISO 8601 UTC text for ``value`` ticks of ``unit`` since the epoch."""
    if not _is_int(value) or unit not in TIME_UNITS:
        return value
    per_second, digits = TIME_UNITS[unit]
    seconds, fraction = divmod(value, per_second)
    try:
        instant = EPOCH + datetime.timedelta(seconds=seconds)
    except OverflowError:
        return value
    return f"{instant:%Y-%m-%dT%H:%M:%S}.{fraction:0{digits}d}Z"


def decode_int96(value, physical_type=None, schema_elem=None):
    # Readers hand INT96 columns over as nanoseconds since the epoch.
    if _is_int(value):
        return format_timestamp(value, "NANOS")
    if not isinstance(value, (bytes, bytearray)) or len(value) != 12:
        return value
    nanos_of_day, julian_day = struct.unpack("<qi", value)
    nanos = (julian_day - JULIAN_EPOCH_DAY) * NANOS_PER_DAY + nanos_of_day
    return format_timestamp(nanos, "NANOS")


def decode_interval(value, physical_type=None, schema_elem=None):
    if not isinstance(value, (bytes, bytearray)) or len(value) != 12:
        return value
    months, days, millis = struct.unpack("<III", value)
    return f"{months} mon {days} day {millis // 1000}.{millis % 1000:03d} sec"


def decode_uuid(value, physical_type=None, schema_elem=None):
    if not isinstance(value, (bytes, bytearray)) or len(value) != 16:
        return value
    return str(uuid.UUID(bytes=bytes(value)))


def decode_bson(value, physical_type=None, schema_elem=None):
    if not isinstance(value, (bytes, bytearray)):
        return value
    return base64.b64encode(value).decode("ascii")


def decode_float16(value, physical_type=None, schema_elem=None):
    if not isinstance(value, (bytes, bytearray)) or len(value) != 2:
        return value
    return struct.unpack("<e", value)[0]


def _decode_converted_time(value, physical_type, schema_elem):
    unit = "MILLIS" if schema_elem.converted_type == ConvertedType.TIME_MILLIS else "MICROS"
    return format_time_of_day(value, unit)


def _decode_converted_timestamp(value, physical_type, schema_elem):
    unit = "MILLIS" if schema_elem.converted_type == ConvertedType.TIMESTAMP_MILLIS else "MICROS"
    return format_timestamp(value, unit)


def _decode_logical_time(value, physical_type, schema_elem):
    return format_time_of_day(value, _unit_of(schema_elem.logicalType.TIME))


def _decode_logical_timestamp(value, physical_type, schema_elem):
    return format_timestamp(value, _unit_of(schema_elem.logicalType.TIMESTAMP))


CONVERTED_TYPE_DECODERS = {
    ConvertedType.DECIMAL: decode_decimal,
    ConvertedType.DATE: decode_date,
    ConvertedType.TIME_MILLIS: _decode_converted_time,
    ConvertedType.TIME_MICROS: _decode_converted_time,
    ConvertedType.TIMESTAMP_MILLIS: _decode_converted_timestamp,
    ConvertedType.TIMESTAMP_MICROS: _decode_converted_timestamp,
    ConvertedType.INTERVAL: decode_interval,
    ConvertedType.BSON: decode_bson,
}

LOGICAL_TYPE_DECODERS = {
    "DECIMAL": decode_decimal,
    "DATE": decode_date,
    "TIME": _decode_logical_time,
    "TIMESTAMP": _decode_logical_timestamp,
    "UUID": decode_uuid,
    "BSON": decode_bson,
    "FLOAT16": decode_float16,
}

BINARY_TYPES = (Type.BYTE_ARRAY, Type.FIXED_LEN_BYTE_ARRAY)


def find_decoder(physical_type, schema_elem):
    """Pick the converter for a column, or None to keep values as they are.

    INT96 always decodes as a legacy timestamp. Otherwise the converted type
    wins over the logical type.
    """
    if physical_type == Type.INT96:
        return decode_int96
    if schema_elem is None:
        return None
    if schema_elem.converted_type is not None:
        decoder = CONVERTED_TYPE_DECODERS.get(schema_elem.converted_type)
        if decoder is not None:
            return decoder
    if schema_elem.logicalType is not None:
        return LOGICAL_TYPE_DECODERS.get(schema_elem.logicalType.set_member())
    return None


def has_type_annotation(schema_elem):
    return schema_elem is not None and (
        schema_elem.converted_type is not None or schema_elem.logicalType is not None
    )
