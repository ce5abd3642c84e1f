import io
import os

import pytest

from krtools.stdio import (
    BUFFER_SIZE,
    MAX_NR_OF_OPEN_FILES,
    SEEK_END,
    BufferedFile,
    FileTable,
    TooManyOpenFiles,
    main,
    open_file,
)


def _write(path, data):
    path.write_bytes(data)
    return str(path)


def test_read_round_trip(tmp_path):
    data = b"hello, world\nsecond line\n"
    name = _write(tmp_path / "in.txt", data)
    with FileTable().open(name, "r") as f:
        assert bytes(f) == data
        assert f.eof is True
        assert f.getc() is None


def test_read_larger_than_buffer(tmp_path):
    data = bytes(range(256)) * 10
    name = _write(tmp_path / "big.bin", data)
    with open_file(name, "r") as f:
        assert bytes(f) == data


def test_write_is_buffered_until_close(tmp_path):
    name = str(tmp_path / "out.txt")
    f = FileTable().open(name, "w")
    for byte in b"abc":
        assert f.putc(byte) == byte
    assert os.path.getsize(name) == 0
    f.close()
    assert (tmp_path / "out.txt").read_bytes() == b"abc"
    assert f.closed


def test_full_buffer_is_written_on_next_putc(tmp_path):
    name = str(tmp_path / "out.bin")
    f = FileTable().open(name, "w")
    for _ in range(BUFFER_SIZE + 1):
        f.putc(ord("x"))
    assert os.path.getsize(name) == BUFFER_SIZE
    f.close()
    assert os.path.getsize(name) == BUFFER_SIZE + 1


def test_flush_writes_pending(tmp_path):
    path = tmp_path / "out.txt"
    f = FileTable().open(str(path), "w")
    f.putc(ord("q"))
    f.flush()
    assert path.read_bytes() == b"q"
    f.close()


def test_write_truncates_existing(tmp_path):
    name = _write(tmp_path / "out.txt", b"old content")
    with FileTable().open(name, "w") as f:
        assert os.path.getsize(name) == 0
        assert f.putc(ord("n")) == ord("n")
    assert (tmp_path / "out.txt").read_bytes() == b"n"


def test_append_mode(tmp_path):
    name = _write(tmp_path / "log.txt", b"first")
    with FileTable().open(name, "a") as f:
        written = [f.putc(byte) for byte in b"second"]
    assert bytes(written) == b"second"
    assert (tmp_path / "log.txt").read_bytes() == b"firstsecond"


def test_append_creates_missing_file(tmp_path):
    path = tmp_path / "new.txt"
    with FileTable().open(str(path), "a") as f:
        f.putc(ord("z"))
    assert path.read_bytes() == b"z"


def test_missing_file_for_reading(tmp_path):
    with pytest.raises(FileNotFoundError):
        FileTable().open(str(tmp_path / "missing.txt"), "r")


@pytest.mark.parametrize("mode", ["x", "", "+"])
def test_invalid_mode(tmp_path, mode):
    with pytest.raises(ValueError):
        FileTable().open(str(tmp_path / "f.txt"), mode)


def test_putc_on_read_file_fails(tmp_path):
    name = _write(tmp_path / "in.txt", b"data")
    with FileTable().open(name, "r") as f:
        with pytest.raises(io.UnsupportedOperation):
            f.putc(ord("a"))
        assert f.error is True


def test_getc_on_write_file_returns_none(tmp_path):
    with FileTable().open(str(tmp_path / "out.txt"), "w") as f:
        assert f.getc() is None


def test_putc_rejects_non_byte(tmp_path):
    with FileTable().open(str(tmp_path / "out.txt"), "w") as f:
        with pytest.raises(ValueError):
            f.putc(256)


def test_seek_on_read(tmp_path):
    data = b"#include <fcntl.h>\n"
    name = _write(tmp_path / "in.txt", data)
    with FileTable().open(name, "r") as f:
        assert f.getc() == data[0]
        assert f.seek(5) == 5
        assert bytes(f) == data[5:]


def test_seek_after_eof_reads_again(tmp_path):
    data = b"abcdef"
    name = _write(tmp_path / "in.txt", data)
    with FileTable().open(name, "r") as f:
        assert bytes(f) == data
        f.seek(-2, SEEK_END)
        assert bytes(f) == data[-2:]


def test_seek_on_write_flushes_then_overwrites(tmp_path):
    path = tmp_path / "out.txt"
    with FileTable().open(str(path), "w") as f:
        for byte in b"hello":
            f.putc(byte)
        f.seek(0)
        f.putc(ord("J"))
    assert path.read_bytes() == b"Jello"


def test_seek_on_closed_file(tmp_path):
    f = FileTable().open(str(tmp_path / "out.txt"), "w")
    f.close()
    with pytest.raises(ValueError):
        f.seek(0)


def test_unbuffered_writes_previous_byte(tmp_path):
    path = tmp_path / "out.txt"
    fd = os.open(str(path), os.O_WRONLY | os.O_CREAT | os.O_TRUNC)
    f = BufferedFile(fd, "w", unbuffered=True)
    assert f.buffer_size == 1
    f.putc(ord("a"))
    f.putc(ord("b"))
    assert path.read_bytes() == b"a"
    f.close()
    assert path.read_bytes() == b"ab"


def test_buffered_file_rejects_bad_mode():
    with pytest.raises(ValueError):
        BufferedFile(0, "q")


def test_table_slots_run_out_and_free_on_close(tmp_path):
    table = FileTable()
    assert table.open_count == 3
    files = []
    for i in range(MAX_NR_OF_OPEN_FILES - 3):
        files.append(table.open(str(tmp_path / f"f{i}.txt"), "w"))
    assert table.open_count == MAX_NR_OF_OPEN_FILES
    with pytest.raises(TooManyOpenFiles):
        table.open(str(tmp_path / "extra.txt"), "w")
    files[0].close()
    extra = table.open(str(tmp_path / "extra.txt"), "w")
    assert table.open_count == MAX_NR_OF_OPEN_FILES
    remaining = files[1:]
    remaining.append(extra)
    for f in remaining:
        f.close()
    assert table.open_count == 3


def test_standard_streams():
    table = FileTable()
    fds = (table.stdin.fd, table.stdout.fd, table.stderr.fd)
    assert fds == (0, 1, 2)
    assert table.stdin.readable
    assert not table.stdin.writable
    assert table.stderr.unbuffered
    assert not table.stdout.unbuffered


def test_main_copies_from_offset(tmp_path):
    data = b"#include <fcntl.h>\nrest of file\n"
    source = _write(tmp_path / "in.txt", data)
    dest = tmp_path / "out.txt"
    assert main([source, str(dest), "5"]) == 0
    assert dest.read_bytes() == data[5:]


def test_main_whole_copy(tmp_path):
    data = b"line one\nline two\n" * 100
    source = _write(tmp_path / "in.txt", data)
    dest = tmp_path / "out.txt"
    assert main([source, str(dest)]) == 0
    assert dest.read_bytes() == data


def test_main_missing_source(tmp_path, capsys):
    assert main([str(tmp_path / "missing.txt"), str(tmp_path / "out.txt")]) == 1
    assert "Error: could not open the file." in capsys.readouterr().out


def test_main_usage_error():
    assert main([]) == 1