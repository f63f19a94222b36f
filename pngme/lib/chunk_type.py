from .errors import InvalidChunkType
from functools import total_ordering

# Each of the four letters in a chunk type carries one property in bit 5,
# which is the ASCII case bit.
# https://www.w3.org/TR/PNG/#table52
# upper 1st: critical, lower 1st: ancillary
# upper 2nd: public, lower 2nd: private/non-standard
# upper 3rd: reserved bit clear, which is the only valid choice today
# lower 4th: safe to copy
PROPERTY_BIT = 0x20


def is_type_letter(b):
    return 65 <= b <= 90 or 97 <= b <= 122


@total_ordering
class ChunkType():
    def __init__(self, b):
        ''' Prefer from_bytes() or from_string(), which say what was wrong with
        bad input. '''
        b = bytes(b)
        if len(b) != 4:
            raise InvalidChunkType(
                'Chunk type must be 4 bytes, not {}'.format(len(b)))
        bad = [c for c in b if not is_type_letter(c)]
        if bad:
            raise InvalidChunkType(
                'Chunk type {!r} contains non-letter byte(s) {}'.format(
                    b, ', '.join(hex(c) for c in bad)))
        self._bytes = b

    @classmethod
    def from_bytes(cls, b):
        return cls(b)

    @classmethod
    def from_string(cls, s):
        assert isinstance(s, str)
        try:
            b = s.encode('ascii')
        except UnicodeEncodeError as e:
            raise InvalidChunkType(
                'Chunk type {!r} is not ASCII'.format(s)) from e
        return cls(b)

    def to_bytes(self):
        return self._bytes

    def _bit_set(self, i):
        return bool(self._bytes[i] & PROPERTY_BIT)

    def is_critical(self):
        return not self._bit_set(0)

    def is_public(self):
        return not self._bit_set(1)

    def is_reserved_bit_valid(self):
        return not self._bit_set(2)

    def is_safe_to_copy(self):
        return self._bit_set(3)

    def is_valid(self):
        return self.is_reserved_bit_valid()

    def __str__(self):
        # can't fail, construction only lets ASCII letters in
        return self._bytes.decode('ascii')

    def __repr__(self):
        return 'ChunkType({!r})'.format(str(self))

    def __eq__(self, other):
        if not isinstance(other, ChunkType):
            return NotImplemented
        return self._bytes == other._bytes

    def __lt__(self, other):
        if not isinstance(other, ChunkType):
            return NotImplemented
        return self._bytes < other._bytes

    def __hash__(self):
        return hash(self._bytes)
