import base64
import struct
import zlib

import pytest

from pngme.lib.chunk import Chunk
from pngme.lib.png import Png

# A real 1x1 RGBA image, as written by an ordinary encoder
REAL_PNG = base64.b64decode(
    'iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR4nGP4z8DwHwAF'
    'AAH/iZk9HQAAAABJRU5ErkJggg==')

MESSAGE = 'This is where your secret message will be!'
MESSAGE_CRC = 2882656334


def basic_chunks():
    ihdr = Chunk('IHDR', struct.pack('>IIBBBBB', 1, 1, 1, 0, 0, 0, 0))
    idat = Chunk('IDAT', zlib.compress(struct.pack('>BB', 0, 0)))
    iend = Chunk('IEND', b'')
    return [ihdr, idat, iend]


@pytest.fixture
def basic_png():
    return Png.from_chunks(basic_chunks())


@pytest.fixture
def png_file(tmp_path, basic_png):
    fname = tmp_path / 'cover.png'
    fname.write_bytes(basic_png.encode())
    return fname


@pytest.fixture
def message_chunk_bytes():
    ''' The RuSt message chunk, put together by hand '''
    data = MESSAGE.encode('utf-8')
    return struct.pack('>I', len(data)) + b'RuSt' + data + \
        struct.pack('>I', MESSAGE_CRC)
