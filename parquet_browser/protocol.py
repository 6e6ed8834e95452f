import logging

from thrift.protocol import TCompactProtocol
from thrift.transport import TTransport

from .errors import HeaderDecodeError
from .ttypes import PageHeader, PageType, enum_name


class PositionTrackingTransport(TTransport.TFileObjectTransport):
    """File object transport that counts the bytes handed to the protocol.

    The compact protocol pulls bytes one varint at a time, so after a struct
    is decoded ``pos - start`` is exactly the encoded length of that struct.
    """

    def __init__(self, fileobj, start=0):
        super().__init__(fileobj)
        self.start = start
        self.pos = start

    def read(self, sz):
        buf = super().read(sz)
        self.pos += len(buf)
        return buf

    def consumed(self):
        return self.pos - self.start


class PageHeaderProtocol(TCompactProtocol.TCompactProtocol):
    logger = logging.getLogger(__qualname__)

    def readStructBegin(self):
        ret = super().readStructBegin()
        self.logger.debug(f"readStructBegin at {self._get_pos()}")
        return ret

    def readStructEnd(self):
        ret = super().readStructEnd()
        self.logger.debug(f"readStructEnd at {self._get_pos()}")
        return ret

    def _get_pos(self):
        return self.trans.pos


def read_page_header(source, offset):
    """Decode the page header stored at ``offset`` of ``source``.

    ``source`` is a seekable binary file object owned by the caller; its
    position is moved. Returns ``(header, header_size)``.
    """
    try:
        source.seek(offset)
        transport = PositionTrackingTransport(source, offset)
        header = PageHeader()
        header.read(PageHeaderProtocol(transport))
    except Exception as e:
        raise HeaderDecodeError(offset, e) from e

    if header.type is None or header.compressed_page_size is None:
        raise HeaderDecodeError(offset, "required field missing")

    header_size = transport.consumed()
    PageHeaderProtocol.logger.debug(
        f"Page header at {offset}: {enum_name(PageType, header.type)}, "
        f"{header_size} header bytes, {header.compressed_page_size} page bytes"
    )
    return header, header_size
