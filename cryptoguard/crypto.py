"""AES-256-CBC stream encryption and SHA-256 checksums."""

from __future__ import annotations

import hashlib
import io
from dataclasses import dataclass
from functools import partial
from typing import BinaryIO, Callable

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

KEY_SIZE = 32
IV_SIZE = 16
SALT = b"12345678"
_CHUNK_SIZE = 64 * 1024


class InvalidStreamError(OSError):
    """Raised when a stream cannot be read from or written to."""


class CryptoError(RuntimeError):
    """Raised when the cipher rejects its input."""


@dataclass(frozen=True)
class CipherParams:
    """AES-256 key and CBC initialisation vector."""

    key: bytes
    iv: bytes


def derive_cipher_params(password) -> CipherParams:
    """Derive key and IV from a password (BytesToKey, SHA-256, fixed salt, one round)."""
    encoded = password.encode() if isinstance(password, str) else bytes(password)
    material = b""
    block = b""
    while len(material) < KEY_SIZE + IV_SIZE:
        block = hashlib.sha256(block + encoded + SALT).digest()
        material += block
    return CipherParams(material[:KEY_SIZE], material[KEY_SIZE:KEY_SIZE + IV_SIZE])


def _usable(stream, check: str) -> bool:
    if isinstance(stream, io.TextIOBase):
        return False
    try:
        return not stream.closed and getattr(stream, check)()
    except (AttributeError, ValueError, OSError):
        return False


def _chunks(stream: BinaryIO):
    try:
        yield from iter(partial(stream.read, _CHUNK_SIZE), b"")
    except OSError as exc:
        raise InvalidStreamError("encrypting/decrypting error") from exc


def _pipeline(params: CipherParams, encrypt: bool) -> tuple[Callable, Callable]:
    cipher = Cipher(algorithms.AES(params.key), modes.CBC(params.iv))
    if encrypt:
        padder = padding.PKCS7(algorithms.AES.block_size).padder()
        encryptor = cipher.encryptor()
        return (
            lambda chunk: encryptor.update(padder.update(chunk)),
            lambda: encryptor.update(padder.finalize()) + encryptor.finalize(),
        )
    unpadder = padding.PKCS7(algorithms.AES.block_size).unpadder()
    decryptor = cipher.decryptor()
    return (
        lambda chunk: unpadder.update(decryptor.update(chunk)),
        lambda: unpadder.update(decryptor.finalize()) + unpadder.finalize(),
    )


class CryptoGuard:
    """Encrypts, decrypts and checksums binary streams."""

    def encrypt_file(self, in_stream: BinaryIO, out_stream: BinaryIO, password) -> None:
        """Write the AES-256-CBC encryption of in_stream to out_stream."""
        self._transform(in_stream, out_stream, password, encrypt=True)

    def decrypt_file(self, in_stream: BinaryIO, out_stream: BinaryIO, password) -> None:
        """Write the AES-256-CBC decryption of in_stream to out_stream."""
        self._transform(in_stream, out_stream, password, encrypt=False)

    def calculate_checksum(self, in_stream: BinaryIO) -> str:
        """Return the hex SHA-256 digest of the rest of in_stream."""
        if not _usable(in_stream, "readable"):
            raise InvalidStreamError("Invalid input streams")
        digest = hashlib.sha256()
        for chunk in _chunks(in_stream):
            digest.update(chunk)
        return digest.hexdigest()

    @staticmethod
    def _transform(in_stream, out_stream, password, *, encrypt: bool) -> None:
        if not _usable(in_stream, "readable") or not _usable(out_stream, "writable"):
            raise InvalidStreamError("Invalid input streams")
        update, finalize = _pipeline(derive_cipher_params(password), encrypt)
        try:
            for chunk in _chunks(in_stream):
                out_stream.write(update(chunk))
            out_stream.write(finalize())
        except ValueError as exc:
            raise CryptoError(f"Internal error: '{exc}'") from exc
        except InvalidStreamError:
            raise
        except OSError as exc:
            raise InvalidStreamError("encrypting/decrypting error") from exc