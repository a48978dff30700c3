import pytest

from cryptoguard.options import CommandType, OptionsError, ProgramOptions


@pytest.fixture
def options():
    return ProgramOptions()


def _expect_error(options, argv, message):
    with pytest.raises(OptionsError) as info:
        options.parse(argv)
    assert str(info.value) == message


def test_empty_args(options):
    _expect_error(options, [], "Args error: an empty set of arguments was passed.")


def test_command_not_specified(options):
    _expect_error(
        options,
        ["-i", "input.txt", "-o", "output.txt", "-p", "password"],
        "Args error:'command' not specified",
    )


def test_command_not_supported(options):
    _expect_error(
        options,
        ["-i", "input.txt", "--command", "encrypt_2", "-o", "output.txt", "-p", "password"],
        "Args error:command not supported encrypt_2",
    )


def test_input_file_not_specified(options):
    _expect_error(
        options,
        ["-i", "", "--command", "encrypt", "-o", "output.txt", "-p", "password"],
        "Args error:input file not specified",
    )


def test_output_file_not_specified(options):
    _expect_error(
        options,
        ["-i", "input2.txt", "--command", "encrypt", "-o", "", "-p", "password"],
        "Args error:output file not specified",
    )


def test_password_not_specified(options):
    _expect_error(
        options,
        ["-i", "input.txt", "--command", "encrypt", "-o", "output.txt", "-p", ""],
        "Args error:password not specified",
    )


def test_incorrect_mode(options):
    _expect_error(
        options,
        ["-i", "input.txt", "-o", "output.txt", "--command", "checksum", "-p", "password"],
        "Args error:command checksum cannot be used with args password and output",
    )


def test_input_output_files_are_the_same(options):
    _expect_error(
        options,
        ["-i", "input.txt", "--command", "encrypt", "-o", "input.txt", "-p", "password"],
        "Args error:the input file and output file are the same",
    )


@pytest.mark.parametrize(
    "argv, command",
    [
        (["-i", "input.txt", "-o", "output.txt", "--command", "encrypt", "-p", "password"],
         CommandType.ENCRYPT),
        (["-i", "input.txt", "-o", "output.txt", "--command", "decrypt", "-p", "password"],
         CommandType.DECRYPT),
        (["--input", "input.txt", "--output", "output.txt", "--command", "encrypt",
          "--password", "password"], CommandType.ENCRYPT),
        (["--input", "input.txt", "--output", "output.txt", "--command", "decrypt",
          "--password", "password"], CommandType.DECRYPT),
    ],
)
def test_encrypt_decrypt_calls(options, argv, command):
    assert options.parse(argv) is True
    assert options.input_file == "input.txt"
    assert options.output_file == "output.txt"
    assert options.command is command
    assert options.password == "password"


@pytest.mark.parametrize(
    "argv",
    [
        ["-i", "input.txt", "--command", "checksum"],
        ["--input", "input.txt", "--command", "checksum"],
    ],
)
def test_checksum_calls(options, argv):
    assert options.parse(argv) is True
    assert options.input_file == "input.txt"
    assert options.command is CommandType.CHECKSUM


def test_inline_values(options):
    assert options.parse(["--input=in.bin", "-oout.bin", "--command=encrypt", "-p", "password"])
    assert (options.input_file, options.output_file) == ("in.bin", "out.bin")


def test_help_prints_and_returns_false(options, capsys):
    assert options.parse(["--help"]) is False
    out = capsys.readouterr().out
    assert out.startswith("Allowed options:")
    assert "encrypt, decrypt, checksum" in out


def test_unknown_option(options):
    with pytest.raises(OptionsError, match="unrecognised option '--bogus'"):
        options.parse(["--bogus", "x"])


def test_positional_argument_rejected(options):
    with pytest.raises(OptionsError, match="too many positional options"):
        options.parse(["encrypt"])


def test_missing_value(options):
    with pytest.raises(OptionsError, match="required argument for option '--input'"):
        options.parse(["--command", "checksum", "-i"])


def test_repeated_option(options):
    with pytest.raises(OptionsError, match="cannot be specified more than once"):
        options.parse(["-i", "a", "-i", "b", "--command", "checksum"])