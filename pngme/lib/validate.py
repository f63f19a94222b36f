from .png import Png


def validate_structure(png):
    ''' Given a Png, make sure its chunks seem to form a well formed image:
    one IHDR and it comes first, one IEND and it comes last, at least one IDAT,
    and no chunk with an invalid type. The codec never does this on its own, so
    call it when you care.

    Returns (True, '') or (False, a message saying what is wrong). '''
    assert isinstance(png, Png)
    chunks = png.chunks
    if len(chunks) < 1:
        return False, 'There are no chunks'
    types = [c.type for c in chunks]
    if types.count('IHDR') != 1:
        return False, 'Expected 1 IHDR chunk but there are {}'.format(
            types.count('IHDR'))
    if types[0] != 'IHDR':
        return False, 'First chunk is {}, not IHDR'.format(types[0])
    if types.count('IEND') != 1:
        return False, 'Expected 1 IEND chunk but there are {}'.format(
            types.count('IEND'))
    if types[-1] != 'IEND':
        return False, 'Last chunk is {}, not IEND'.format(types[-1])
    if 'IDAT' not in types:
        return False, 'There is no IDAT chunk'
    for i, chunk in enumerate(chunks):
        if not chunk.chunk_type.is_valid():
            return False, 'Invalid chunk type {} at index {}'.format(
                chunk.type, i)
    return True, ''
