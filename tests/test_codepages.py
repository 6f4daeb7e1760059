import pytest

from hwkit.codepages import (
    UnknownCodePageError,
    convert_file,
    decode_bytes,
    main,
    supported_codepages,
)

CYRILLIC_RANGE = bytes(range(0xC0, 0x100))


def test_supported_codepages():
    assert supported_codepages() == [
        "cp1250",
        "cp1251",
        "cp1252",
        "ibm866",
        "iso-8859-5",
        "koi8-r",
        "koi8-u",
    ]


@pytest.mark.parametrize("codepage", ["cp1250", "cp1251", "ibm866", "koi8-u"])
def test_ascii_passes_through(codepage):
    data = bytes(range(0x80))
    assert decode_bytes(data, codepage) == data.decode("ascii")


def test_cp1251_matches_standard_codec():
    assert decode_bytes(CYRILLIC_RANGE, "cp1251") == CYRILLIC_RANGE.decode("cp1251")


def test_koi8r_matches_standard_codec():
    assert decode_bytes(CYRILLIC_RANGE, "koi8-r") == CYRILLIC_RANGE.decode("koi8_r")


def test_ibm866_matches_standard_codec():
    data = bytes(range(0x80, 0xB0))
    assert decode_bytes(data, "ibm866") == data.decode("cp866")


def test_cp1252_upper_half_is_latin1():
    data = bytes(range(0xA0, 0x100))
    assert decode_bytes(data, "cp1252") == data.decode("latin-1")


def test_undefined_byte_maps_to_warning_sign():
    assert decode_bytes(b"\x81", "cp1252") == chr(9888)


def test_unknown_codepage_raises():
    with pytest.raises(UnknownCodePageError):
        decode_bytes(b"abc", "utf-16")


def test_name_compared_on_first_ten_characters():
    assert decode_bytes(CYRILLIC_RANGE, "iso-8859-5-extra") == decode_bytes(
        CYRILLIC_RANGE, "iso-8859-5"
    )


def test_convert_file_writes_utf8(tmp_path):
    source = tmp_path / "in.txt"
    target = tmp_path / "out.txt"
    data = b"Hello " + CYRILLIC_RANGE + b"\n"
    source.write_bytes(data)
    convert_file(source, "cp1251", target)
    assert target.read_bytes() == data.decode("cp1251").encode("utf-8")


def test_convert_file_unknown_codepage_creates_nothing(tmp_path):
    source = tmp_path / "in.txt"
    target = tmp_path / "out.txt"
    source.write_bytes(b"abc")
    with pytest.raises(UnknownCodePageError):
        convert_file(source, "nope", target)
    assert not target.exists()


def test_main_converts(tmp_path):
    source = tmp_path / "in.txt"
    target = tmp_path / "out.txt"
    source.write_bytes(CYRILLIC_RANGE)
    assert main([str(source), "koi8-r", str(target)]) == 0
    assert target.read_text(encoding="utf-8") == CYRILLIC_RANGE.decode("koi8_r")


def test_main_usage_lists_codepages(capsys):
    assert main([]) == 1
    out = capsys.readouterr().out
    assert all(f"\t{name}" in out for name in supported_codepages())


def test_main_unknown_codepage(tmp_path, capsys):
    source = tmp_path / "in.txt"
    source.write_bytes(b"abc")
    assert main([str(source), "latin9", str(tmp_path / "out.txt")]) == 1
    assert "not supported" in capsys.readouterr().err


def test_main_missing_input(tmp_path, capsys):
    missing = tmp_path / "missing.txt"
    assert main([str(missing), "cp1251", str(tmp_path / "out.txt")]) == 1
    assert str(missing) in capsys.readouterr().err