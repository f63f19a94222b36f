class PngError(Exception):
    ''' Base class for everything that can go wrong while taking apart or
    putting together a PNG '''


class TruncatedInput(PngError):
    ''' The buffer ran out before a whole field could be read. Subclasses say
    which field it was. '''
    field = 'field'

    def __init__(self, wanted, got):
        self.wanted = wanted
        self.got = got
        super().__init__('Wanted {} bytes of chunk {} but only {} left'.format(
            wanted, self.field, got))


class LengthByteRead(TruncatedInput):
    field = 'length'


class ChunkTypeByteRead(TruncatedInput):
    field = 'type'


class DataByteRead(TruncatedInput):
    field = 'data'


class CrcByteRead(TruncatedInput):
    field = 'crc'


class InvalidChunkType(PngError, ValueError):
    pass


class ChecksumMismatch(PngError):
    def __init__(self, chunk_type, expected, actual):
        self.chunk_type = chunk_type
        self.expected = expected
        self.actual = actual
        super().__init__(
            'Chunk {} claims CRC {} but its contents give {}'.format(
                chunk_type, expected, actual))


class BadSignature(PngError):
    pass


class ChunkNotFound(PngError, LookupError):
    def __init__(self, chunk_type):
        self.chunk_type = chunk_type
        super().__init__('No chunk of type {}'.format(chunk_type))


class TextDecodingFailure(PngError, ValueError):
    pass


class DecryptionFailure(PngError):
    pass
