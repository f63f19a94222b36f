from .chunk import Chunk
from .chunk_type import ChunkType
from .errors import DecryptionFailure, TextDecodingFailure
from .png import Png
from ..util import crypto
from ..util.files import read_whole_file, write_whole_file
from ..util.log import log_debug

DEFAULT_OUTPUT = 'output.png'


def load_png(fname):
    return Png.decode(read_whole_file(fname))


def save_png(png, fname):
    write_whole_file(fname, png.encode())
    log_debug('Wrote', len(png.chunks), 'chunks to', fname)


def encode_message(fname, chunk_type, message, out_fname=DEFAULT_OUTPUT,
                   password=None, append=False):
    ''' Store message in a new chunk of type chunk_type in the PNG at fname and
    write the result to out_fname. If password is given, the message is
    encrypted with it first. Normally the chunk goes right before IEND, with
    append=True it goes at the very end. Returns the new chunk. '''
    chunk_type = ChunkType.from_string(chunk_type)
    png = load_png(fname)
    data = message.encode('utf-8') if isinstance(message, str) else message
    if password is not None:
        data = crypto.seal(password, data)
    chunk = Chunk(chunk_type, data)
    if append:
        png.append_chunk(chunk)
    else:
        png.insert_chunk_before_iend(chunk)
    save_png(png, out_fname)
    return chunk


def decode_message(fname, chunk_type, password=None):
    ''' Return the text of the first chunk of type chunk_type in the PNG at
    fname, or None if there is no such chunk. '''
    png = load_png(fname)
    chunk = png.chunk_by_type(chunk_type)
    if chunk is None:
        return None
    if password is None:
        return chunk.data_as_text()
    success, d = crypto.unseal(password, chunk.data)
    if not success:
        raise DecryptionFailure(d)
    try:
        return d.decode('utf-8')
    except UnicodeDecodeError as e:
        raise TextDecodingFailure(
            'Decrypted message is not UTF-8 text: {}'.format(e)) from e


def remove_message(fname, chunk_type, out_fname=None):
    ''' Remove the first chunk of type chunk_type from the PNG at fname and
    write the result to out_fname (fname itself by default). Returns the
    removed chunk. Nothing is written if there is no such chunk. '''
    png = load_png(fname)
    chunk = png.remove_chunk(chunk_type)
    save_png(png, fname if out_fname is None else out_fname)
    return chunk


def chunk_flags(chunk_type):
    return ' '.join([
        'critical' if chunk_type.is_critical() else 'ancillary',
        'public' if chunk_type.is_public() else 'private',
        'safe-to-copy' if chunk_type.is_safe_to_copy() else 'unsafe-to-copy',
    ])


def render_chunks(png):
    ''' One line per chunk: type, length field, payload byte count and CRC,
    followed by the property flags its type encodes. '''
    lines = []
    for i, c in enumerate(png.chunks):
        lines.append('{:>3} {} len={} data={} bytes crc={:#010x} ({})'.format(
            i, c.type, c.length, len(c.data), c.crc,
            chunk_flags(c.chunk_type)))
    return '\n'.join(lines)
