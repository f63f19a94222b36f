from .chunk_type import ChunkType
from .errors import (LengthByteRead, ChunkTypeByteRead, DataByteRead,
                     CrcByteRead, InvalidChunkType, ChecksumMismatch,
                     TextDecodingFailure)
from ..util.log import log_debug
import io
import struct
import zlib

# The length field is a 4-byte uint
MAX_DATA_LEN = 2**32 - 1


def calc_crc(type_bytes, data):
    ''' CRC-32 as PNG (and zlib and gzip) define it, AKA CRC-32/ISO-HDLC '''
    return zlib.crc32(type_bytes + data) & 0xffffffff


def _read_exactly(stream, n, err_cls):
    b = stream.read(n)
    if len(b) != n:
        raise err_cls(n, len(b))
    return b


class Chunk():
    def __init__(self, chunk_type, data):
        ''' chunk_type is a ChunkType, or a 4 letter string that is turned into
        one. The CRC is always calculated here, never taken from the caller.
        '''
        if isinstance(chunk_type, str):
            chunk_type = ChunkType.from_string(chunk_type)
        assert isinstance(chunk_type, ChunkType)
        data = bytes(data)
        if len(data) > MAX_DATA_LEN:
            raise ValueError('Chunk data can be at most {} bytes'.format(
                MAX_DATA_LEN))
        type_bytes = chunk_type.to_bytes()
        self._chunk_type = chunk_type
        self._data = struct.pack('>I', len(data)) + type_bytes + data +\
            struct.pack('>I', calc_crc(type_bytes, data))

    @classmethod
    def from_byte_stream(cls, stream):
        ''' If you have a stream positioned at the start of a Chunk (with its
        headers and everything), use this function to create a Chunk instance.
        Leaves the stream positioned just after the chunk. '''
        chunk_len, = struct.unpack(
            '>I', _read_exactly(stream, 4, LengthByteRead))
        type_bytes = _read_exactly(stream, 4, ChunkTypeByteRead)
        try:
            chunk_type = ChunkType.from_bytes(type_bytes)
        except InvalidChunkType as e:
            raise InvalidChunkType(
                'Can\'t parse chunk type {!r}: {}'.format(type_bytes, e)) from e
        if not chunk_type.is_valid():
            raise InvalidChunkType(
                'Chunk type {} has its reserved bit set'.format(chunk_type))
        chunk_data = _read_exactly(stream, chunk_len, DataByteRead)
        chunk_crc, = struct.unpack(
            '>I', _read_exactly(stream, 4, CrcByteRead))
        chunk = cls(chunk_type, chunk_data)
        # we just calculated the crc ourselves, so it's the given one that may
        # be wrong
        if chunk.crc != chunk_crc:
            raise ChecksumMismatch(chunk_type, chunk_crc, chunk.crc)
        log_debug('Read chunk', chunk_type, 'with len', chunk_len)
        return chunk

    @classmethod
    def decode(cls, buffer):
        ''' Decode the chunk at the start of buffer. Anything after it is
        ignored. '''
        return cls.from_byte_stream(io.BytesIO(buffer))

    @property
    def length(self):
        ''' 4-byte uint for number of bytes in data field '''
        l, = struct.unpack_from('>I', self._data, 0)
        return l

    @property
    def chunk_type(self):
        return self._chunk_type

    @property
    def type(self):
        ''' 4-letter string naming the chunk type '''
        return str(self._chunk_type)

    @property
    def data(self):
        ''' payload data in this chunk '''
        return self._data[8:8+self.length]

    @property
    def crc(self):
        ''' 4-byte uint crc calculated on type and data (not length) '''
        r, = struct.unpack_from('>I', self._data, 8+self.length)
        return r

    def data_as_text(self):
        try:
            return self.data.decode('utf-8')
        except UnicodeDecodeError as e:
            raise TextDecodingFailure(
                'Chunk {} does not hold UTF-8 text: {}'.format(
                    self.type, e)) from e

    def encode(self):
        ''' the length, type, data, and crc all smooshed together like it
        would appear in a PNG file '''
        return self._data

    def describe(self):
        return 'Chunk {} with len {}, {} bytes of data, crc {}'.format(
            self.type, self.length, len(self.data), self.crc)

    def __eq__(self, other):
        if not isinstance(other, Chunk):
            return NotImplemented
        return self._data == other._data

    def __hash__(self):
        return hash(self._data)

    def __repr__(self):
        return 'Chunk({!r}, <{} bytes>, crc={})'.format(
            self.type, self.length, self.crc)
