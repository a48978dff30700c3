# cryptoguard

A small command-line tool and library that encrypts and decrypts files with a
password and computes SHA-256 checksums.

Encryption uses AES-256 in CBC mode with PKCS#7 padding. The key and IV are
derived from the password with the BytesToKey scheme (SHA-256, one
iteration, the fixed salt `12345678`), as in OpenSSL's `EVP_BytesToKey`.

## Installation

```
pip install .
```

## Command line

Encrypt a file:

```
cryptoguard --command encrypt -i plain.txt -o secret.bin -p password
```

Decrypt it again:

```
cryptoguard --command decrypt -i secret.bin -o plain.txt -p password
```

Print the SHA-256 checksum of a file:

```
cryptoguard --command checksum -i plain.txt
```

Options:

| Option             | Meaning                              |
|--------------------|--------------------------------------|
| `--command`        | `encrypt`, `decrypt` or `checksum`   |
| `-i`, `--input`    | input file                           |
| `-o`, `--output`   | output file (encrypt/decrypt only)   |
| `-p`, `--password` | password (encrypt/decrypt only)      |
| `-h`, `--help`     | print the list of options            |

Values may follow an option as the next argument, as `--name=value`, or, for
short options, directly (`-ifile.txt`). Each option may be given only once,
and positional arguments are rejected.

The input and output files must differ. The `checksum` command accepts
neither an output file nor a password. With `--help` the tool prints the
options and exits with status 1 without doing anything else. On error it
prints `Error: <message>` to standard error and exits with status 1; the
output file is opened before encryption or decryption starts, so a failed
run may leave it empty or partly written.

## Library

```python
import io
from cryptoguard.crypto import CryptoGuard

guard = CryptoGuard()
password = "password"

encrypted = io.BytesIO()
guard.encrypt_file(io.BytesIO(b"Hello World!"), encrypted, password)
encrypted.seek(0)

decrypted = io.BytesIO()
guard.decrypt_file(encrypted, decrypted, password)
assert decrypted.getvalue() == b"Hello World!"

print(guard.calculate_checksum(io.BytesIO(b"Hello World!")))
# 7f83b1657ff1fc53b92dc18148a1d65dfc2d4b1fa3d677284addd200126d9069
```

The methods work on binary streams. Closed streams, text streams, and
streams that cannot be read (input) or written (output) raise
`InvalidStreamError`, as do I/O failures while copying. Failures inside the
cipher, such as invalid padding after decrypting with the wrong password,
raise `CryptoError`. `calculate_checksum` hashes the stream from its current
position to the end.

`derive_cipher_params(password)` takes a `str` or bytes and returns the
`CipherParams` (`key` and `iv`) used for that password.

Command-line arguments can be parsed on their own with
`cryptoguard.options.ProgramOptions`. Its `parse(argv)` method takes the
arguments without the program name, fills in `command` (a `CommandType`),
`input_file`, `output_file` and `password`, returns `True` when a command is
ready to run and `False` after printing `help_text`, and raises
`OptionsError` for invalid arguments. `cryptoguard.cli.main(argv)` runs a
command and returns the exit status.

## Limitations

The salt is fixed, so the same password always gives the same key and IV,
and identical files encrypt to identical output. The ciphertext carries no
authentication tag: a wrong password is detected only when the padding
happens to be invalid, and tampering is not detected.