def read_whole_file(fname):
    with open(fname, 'rb') as fd:
        return fd.read()


def write_whole_file(fname, data):
    with open(fname, 'wb') as fd:
        fd.write(data)
