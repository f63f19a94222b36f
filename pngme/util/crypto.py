from ..util.log import log_stderr as log
from cryptography.fernet import Fernet
from cryptography.fernet import InvalidToken
from cryptography.hazmat.backends import default_backend
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC
import base64
import os
from getpass import getpass

SALT_LEN = 16
KDF_ITERATIONS = 100000


def gen_salt():
    return os.urandom(SALT_LEN)


def prompt_password(for_encryption=True):
    ''' Ask on the terminal until we get a non-empty passphrase. When
    encrypting, it has to be typed twice. '''
    prompt = 'Passphrase to hide the message with: ' if for_encryption \
        else 'Passphrase the message was hidden with: '
    while True:
        pw = getpass(prompt)
        if not pw:
            log('Passphrase may not be empty')
        elif for_encryption and getpass('Again: ') != pw:
            log('Passphrases do not match.')
        else:
            return bytes(pw, 'utf-8')


def get_password(key_file=None, for_encryption=True):
    ''' The passphrase is the whole content of key_file if given, otherwise
    prompt for it '''
    if key_file is None:
        return prompt_password(for_encryption=for_encryption)
    with open(key_file, 'rb') as fd:
        return fd.read()


def message_fernet(password, salt):
    ''' Fernet for one hidden message. The key is PBKDF2-SHA256 over the
    passphrase and that message's salt, so the same passphrase gives a
    different key for every message. '''
    assert isinstance(password, bytes)
    assert len(salt) == SALT_LEN
    kdf = PBKDF2HMAC(
        algorithm=hashes.SHA256(),
        length=32,
        salt=salt,
        iterations=KDF_ITERATIONS,
        backend=default_backend()
    )
    return Fernet(base64.urlsafe_b64encode(kdf.derive(password)))


def seal(password, data):
    ''' Encrypt data for a chunk payload: salt, then the Fernet token as raw
    bytes rather than its base64 text. '''
    salt = gen_salt()
    token = message_fernet(password, salt).encrypt(data)
    return salt + base64.urlsafe_b64decode(token)


def unseal(password, payload):
    ''' Undo seal(). Returns (True, data), or (False, why not) when the
    payload is too short or the passphrase is wrong. '''
    if len(payload) <= SALT_LEN:
        return False, 'Payload is too short to be encrypted'
    salt, token = payload[:SALT_LEN], payload[SALT_LEN:]
    fernet = message_fernet(password, salt)
    try:
        return True, fernet.decrypt(base64.urlsafe_b64encode(token))
    except InvalidToken:
        return False, 'Passphrase appears to be incorrect'
