import pytest

from pngme.__main__ import PNGME_VERSION, main
from pngme.lib.message import decode_message, load_png
from pngme.util import crypto

from .conftest import MESSAGE


def run(*argv):
    with pytest.raises(SystemExit) as exc_info:
        main(list(argv))
    return exc_info.value.code


def test_no_command_prints_help(capsys):
    main([])
    assert 'usage' in capsys.readouterr().out


def test_version(capsys):
    assert run('--version') == 0
    assert PNGME_VERSION in capsys.readouterr().out


def test_encode_decode(png_file, tmp_path, capsys):
    out = tmp_path / 'out.png'
    assert run('encode', str(png_file), 'RuSt', MESSAGE, str(out)) == 0
    capsys.readouterr()
    assert run('decode', str(out), 'RuSt') == 0
    assert capsys.readouterr().out == MESSAGE + '\n'


def test_encode_default_output(png_file, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert run('encode', str(png_file), 'ruSt', 'hi') == 0
    assert decode_message(str(tmp_path / 'output.png'), 'ruSt') == 'hi'


def test_encode_bad_type(png_file, tmp_path, capsys):
    assert run('encode', str(png_file), 'r5St', 'hi',
               str(tmp_path / 'o.png')) == 1
    assert 'Unable to encode message' in capsys.readouterr().err


def test_encode_missing_input(tmp_path, capsys):
    assert run('encode', str(tmp_path / 'nope.png'), 'ruSt', 'hi') == 1
    assert 'must exist' in capsys.readouterr().err


def test_key_file_without_encrypt(png_file, tmp_path):
    key = tmp_path / 'key'
    key.write_bytes(b'k')
    assert run('encode', str(png_file), 'ruSt', 'hi', str(tmp_path / 'o.png'),
               '--key-file', str(key)) == 1


def test_encrypted_encode_decode(png_file, tmp_path, capsys):
    key = tmp_path / 'key'
    key.write_bytes(b'hunter2')
    out = tmp_path / 'out.png'
    assert run('encode', '-e', '--key-file', str(key), str(png_file), 'ruSt',
               MESSAGE, str(out)) == 0
    capsys.readouterr()
    assert run('decode', '--key-file', str(key), str(out), 'ruSt') == 0
    assert capsys.readouterr().out == MESSAGE + '\n'
    key.write_bytes(b'hunter3')
    assert run('decode', '--key-file', str(key), str(out), 'ruSt') == 1
    assert 'incorrect' in capsys.readouterr().err


def test_decode_prompts_for_passphrase(png_file, tmp_path, capsys,
                                       monkeypatch):
    out = tmp_path / 'out.png'
    monkeypatch.setattr(crypto, 'getpass', lambda prompt: 'hunter2')
    assert run('encode', '-e', str(png_file), 'ruSt', 'hi', str(out)) == 0
    capsys.readouterr()
    assert run('decode', '-e', str(out), 'ruSt') == 0
    assert capsys.readouterr().out == 'hi\n'


def test_decode_nothing(png_file, capsys):
    assert run('decode', str(png_file), 'ruSt') == 1
    assert 'Nothing to decode' in capsys.readouterr().err


def test_decode_corrupt_file(png_file, capsys):
    data = bytearray(png_file.read_bytes())
    data[-1] ^= 1
    png_file.write_bytes(bytes(data))
    assert run('decode', str(png_file), 'ruSt') == 1
    assert 'CRC' in capsys.readouterr().err


def test_remove(png_file, capsys):
    assert run('encode', str(png_file), 'ruSt', 'hi', str(png_file)) == 0
    assert run('remove', str(png_file), 'ruSt') == 0
    assert 'Removed' in capsys.readouterr().out
    assert load_png(str(png_file)).chunk_by_type('ruSt') is None


def test_remove_missing(png_file, capsys):
    assert run('remove', str(png_file), 'ruSt') == 1
    assert 'No chunk of type ruSt' in capsys.readouterr().err


@pytest.mark.parametrize('command', ['print', 'info'])
def test_print(png_file, capsys, command):
    assert run(command, str(png_file)) == 0
    out = capsys.readouterr().out
    assert 'contains 3 chunks' in out
    assert 'IHDR' in out and 'IDAT' in out and 'IEND' in out


def test_print_check(png_file, tmp_path, capsys):
    out = tmp_path / 'out.png'
    assert run('encode', '--append', str(png_file), 'ruSt', 'hi',
               str(out)) == 0
    assert run('print', '--check', str(png_file)) == 0
    assert 'Structure OK' in capsys.readouterr().out
    assert run('print', '--check', str(out)) == 1
    assert '(INVALID)' in capsys.readouterr().out


def test_print_skips_bad_files(png_file, tmp_path, capsys):
    junk = tmp_path / 'junk.png'
    junk.write_bytes(b'nope')
    assert run('print', str(junk), str(tmp_path / 'missing.png'),
               str(png_file)) == 1
    captured = capsys.readouterr()
    assert 'does not appear to be a valid PNG' in captured.err
    assert 'doesn\'t exist' in captured.err
    assert 'contains 3 chunks' in captured.out


def test_verbose_logs_debug(png_file, capsys):
    assert run('-v', 'print', str(png_file)) == 0
    assert '[debug]' in capsys.readouterr().err
    run('print', str(png_file))
    assert '[debug]' not in capsys.readouterr().err
