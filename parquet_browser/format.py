import base64
import datetime
import struct
import uuid
from decimal import Decimal

from .errors import DecodeValueError
from .logical import BINARY_TYPES, find_decoder, has_type_annotation
from .ttypes import Type, enum_name

STAT_DISPLAY_WIDTH = 50
VALUE_DISPLAY_WIDTH = 200

# Above this size an undecodable byte string is summarized instead of hex dumped.
STAT_HEX_LIMIT = 8
VALUE_HEX_LIMIT = 32

FIXED_WIDTH_FORMATS = {
    Type.BOOLEAN: "<?",
    Type.INT32: "<i",
    Type.INT64: "<q",
    Type.FLOAT: "<f",
    Type.DOUBLE: "<d",
}


def format_bytes(num_bytes):
    unit = 1024
    if num_bytes < unit:
        return f"{num_bytes} B"
    div, exp = unit, 0
    n = num_bytes // unit
    while n >= unit:
        div *= unit
        exp += 1
        n //= unit
    return f"{num_bytes / div:.1f} {'KMGTPE'[exp]}B"


def _truncate(text, width):
    if len(text) > width:
        return text[:width] + "..."
    return text


def is_valid_utf8(value):
    """True when ``value`` is UTF-8 text with at least 80% printable characters."""
    if isinstance(value, (bytes, bytearray)):
        try:
            value = bytes(value).decode("utf-8")
        except UnicodeDecodeError:
            return False
    if not value:
        return False
    printable = sum(1 for ch in value if ch.isprintable() or ch.isspace())
    return printable * 100 // len(value) >= 80


def unpack_fixed_width(raw, physical_type):
    fmt = FIXED_WIDTH_FORMATS[physical_type]
    size = struct.calcsize(fmt)
    if len(raw) < size:
        raise DecodeValueError(
            f"{enum_name(Type, physical_type)} needs {size} bytes, got {len(raw)}"
        )
    return struct.unpack_from(fmt, raw)[0]


def retrieve_raw_value(raw, physical_type):
    """Turn statistics bytes into a Python value of the column's physical type.

    Fixed-width types are read little-endian. Everything else, INT96
    included, stays an opaque byte string. A byte string too short for its
    type comes back as an ``error: ...`` string.
    """
    if raw is None:
        return None
    if physical_type not in FIXED_WIDTH_FORMATS:
        return bytes(raw)
    try:
        return unpack_fixed_width(raw, physical_type)
    except DecodeValueError as e:
        return f"error: {e}"


def decode_stat_value(value, physical_type, schema_elem):
    if value is None:
        return None
    if (
        physical_type in BINARY_TYPES
        and isinstance(value, bytes)
        and schema_elem is not None
        and not has_type_annotation(schema_elem)
    ):
        return base64.b64encode(value).decode("ascii")
    decoder = find_decoder(physical_type, schema_elem)
    if decoder is None:
        return value
    return decoder(value, physical_type, schema_elem)


def format_decoded_value(value, width=STAT_DISPLAY_WIDTH):
    if value is None:
        return "-"
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return f"{value:g}"
    if isinstance(value, (bytes, bytearray)):
        value = bytes(value).decode("utf-8", errors="replace")
    return _truncate(str(value), width)


def format_stat_value(raw, column_meta, schema_elem=None):
    if not raw:
        return "-"
    raw_value = retrieve_raw_value(raw, column_meta.type)
    return format_decoded_value(decode_stat_value(raw_value, column_meta.type, schema_elem))


def format_stat_value_simple(raw):
    """Format statistics bytes without knowing the column type."""
    if not raw:
        return "-"
    if is_valid_utf8(raw):
        return _truncate(bytes(raw).decode("utf-8"), STAT_DISPLAY_WIDTH)
    if len(raw) <= STAT_HEX_LIMIT:
        return f"0x{bytes(raw).hex().upper()}"
    return f"<binary:{len(raw)} bytes>"


def _format_binary(value):
    if is_valid_utf8(value):
        return bytes(value).decode("utf-8")
    if len(value) <= VALUE_HEX_LIMIT:
        return f"0x{bytes(value).hex().upper()}"
    return f"<binary:{len(value)} bytes>"


def _to_text(value):
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, float):
        return f"{value:g}"
    if isinstance(value, Decimal):
        return f"{value:f}"
    if isinstance(value, datetime.datetime):
        return value.isoformat()
    if isinstance(value, (datetime.date, datetime.time, uuid.UUID)):
        return str(value)
    if isinstance(value, (bytes, bytearray)):
        return _format_binary(value)
    return str(value)


def format_value(value, physical_type, schema_elem=None, width=VALUE_DISPLAY_WIDTH):
    """Format one value read from a page for display.

    Nulls render as ``NULL`` and empty strings stay empty. Values with a
    converted or logical type go through the same converters as statistics;
    untyped byte strings show as text when printable, else as hex or a size
    placeholder.
    """
    if value is None:
        return "NULL"
    if isinstance(value, str) and value == "":
        return ""
    decoder = find_decoder(physical_type, schema_elem)
    if decoder is not None and not isinstance(value, str):
        value = decoder(value, physical_type, schema_elem)
    return _truncate(_to_text(value), width)
