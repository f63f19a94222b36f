from .chunk import Chunk
from .chunk_type import ChunkType
from .errors import BadSignature, ChunkNotFound, InvalidChunkType
from ..util.log import log_debug
import io

PNG_SIG = b'\x89PNG\r\n\x1a\n'


def read_image_stream(stream):
    ''' Read a PNG from the given seekable binary stream and return an ordered
    list of its chunks. Assumes we're at the start of a PNG and reads to the
    end of the stream. '''
    start = stream.tell()
    end = stream.seek(0, io.SEEK_END)
    stream.seek(start, io.SEEK_SET)
    sig = stream.read(len(PNG_SIG))
    if sig != PNG_SIG:
        raise BadSignature('Could not find PNG file signature')
    chunks = []
    while stream.tell() < end:
        chunks.append(Chunk.from_byte_stream(stream))
    log_debug('Read', len(chunks), 'chunks')
    return chunks


def _type_bytes(chunk_type):
    if isinstance(chunk_type, ChunkType):
        return chunk_type.to_bytes()
    return ChunkType.from_string(chunk_type).to_bytes()


class Png():
    def __init__(self, chunks=None):
        self._chunks = list(chunks) if chunks is not None else []
        assert all(isinstance(c, Chunk) for c in self._chunks)

    @classmethod
    def from_chunks(cls, chunks):
        return cls(chunks)

    @classmethod
    def decode(cls, buffer):
        ''' Parse a whole PNG file held in memory. Fails on the first bad
        chunk, there is no partial result. '''
        buffer = bytes(buffer)
        if len(buffer) < len(PNG_SIG):
            raise BadSignature('Only {} bytes, too short to be a PNG'.format(
                len(buffer)))
        # must stay a plain BytesIO, its read(n) never allocates more than
        # what is left
        return cls(read_image_stream(io.BytesIO(buffer)))

    @property
    def header(self):
        return PNG_SIG

    @property
    def chunks(self):
        return tuple(self._chunks)

    def append_chunk(self, chunk):
        assert isinstance(chunk, Chunk)
        self._chunks.append(chunk)

    def insert_chunk_before_iend(self, chunk):
        ''' Put chunk right before the IEND chunk so the image stays well
        formed. If there is no IEND, append it. '''
        assert isinstance(chunk, Chunk)
        for i, c in enumerate(self._chunks):
            if c.type == 'IEND':
                self._chunks.insert(i, chunk)
                return
        self._chunks.append(chunk)

    def chunk_by_type(self, chunk_type):
        ''' First chunk of the given type, or None. A type that can't exist
        can't match anything, so that is None too. '''
        try:
            t = _type_bytes(chunk_type)
        except InvalidChunkType:
            return None
        for c in self._chunks:
            if c.chunk_type.to_bytes() == t:
                return c
        return None

    def remove_chunk(self, chunk_type):
        ''' Remove the first chunk of the given type and return it '''
        t = _type_bytes(chunk_type)
        for i, c in enumerate(self._chunks):
            if c.chunk_type.to_bytes() == t:
                return self._chunks.pop(i)
        raise ChunkNotFound(chunk_type)

    def encode(self):
        return PNG_SIG + b''.join(c.encode() for c in self._chunks)

    def describe(self):
        lines = ['PNG with {} chunks'.format(len(self._chunks))]
        for c in self._chunks:
            lines.append(c.describe())
        return '\n'.join(lines)

    def __eq__(self, other):
        if not isinstance(other, Png):
            return NotImplemented
        return self._chunks == other._chunks

    def __repr__(self):
        return 'Png([{}])'.format(', '.join(c.type for c in self._chunks))
