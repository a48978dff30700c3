"""Command-line entry point."""

from __future__ import annotations

import sys

from cryptoguard.crypto import CryptoError, CryptoGuard
from cryptoguard.options import CommandType, OptionsError, ProgramOptions


def main(argv=None) -> int:
    """Run the command given by argv (without the program name); return the exit code."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        options = ProgramOptions()
        if not options.parse(args):
            return 1

        guard = CryptoGuard()
        if options.command is CommandType.CHECKSUM:
            with open(options.input_file, "rb") as src:
                checksum = guard.calculate_checksum(src)
            print(f"Checksum: {checksum}")
        else:
            with open(options.input_file, "rb") as src, open(options.output_file, "wb") as dst:
                if options.command is CommandType.ENCRYPT:
                    guard.encrypt_file(src, dst, options.password)
                    print("File encoded successfully")
                else:
                    guard.decrypt_file(src, dst, options.password)
                    print("File decoded successfully")
    except (OptionsError, CryptoError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())