import os

import pytest

from sushi_shell import file_check


@pytest.fixture
def sample(tmp_path):
    path = tmp_path / "f.txt"
    path.write_text("data")
    return path


def test_exists(sample, tmp_path):
    assert file_check.exists(str(sample))
    assert file_check.exists(str(tmp_path))
    assert not file_check.exists(str(tmp_path / "missing"))


def test_regular_and_dir(sample, tmp_path):
    assert file_check.is_regular_file(str(sample))
    assert not file_check.is_regular_file(str(tmp_path))
    assert file_check.is_dir(str(tmp_path))
    assert not file_check.is_dir(str(sample))


def test_symlink(sample, tmp_path):
    link = tmp_path / "link"
    os.symlink(sample, link)
    assert file_check.is_symlink(str(link))
    assert not file_check.is_symlink(str(sample))


def test_dangling_symlink_does_not_exist(tmp_path):
    link = tmp_path / "dangling"
    os.symlink(tmp_path / "nowhere", link)
    assert file_check.is_symlink(str(link))
    assert not file_check.exists(str(link))


def test_same_file_via_hard_link(sample, tmp_path):
    other = tmp_path / "hard"
    os.link(sample, other)
    assert file_check.metadata_comp(str(sample), str(other), "-ef")
    assert file_check.metadata_comp(str(sample), str(sample), "-ef")


def test_different_files_not_same(sample, tmp_path):
    other = tmp_path / "g.txt"
    other.write_text("other")
    assert not file_check.metadata_comp(str(sample), str(other), "-ef")


def test_newer_and_older(sample, tmp_path):
    other = tmp_path / "old.txt"
    other.write_text("old")
    os.utime(other, (1_000_000, 1_000_000))
    os.utime(sample, (2_000_000, 2_000_000))
    assert file_check.metadata_comp(str(sample), str(other), "-nt")
    assert not file_check.metadata_comp(str(sample), str(other), "-ot")
    assert file_check.metadata_comp(str(other), str(sample), "-ot")


def test_comparison_with_missing_files(sample, tmp_path):
    missing = str(tmp_path / "missing")
    assert file_check.metadata_comp(str(sample), missing, "-nt")
    assert not file_check.metadata_comp(str(sample), missing, "-ot")
    assert file_check.metadata_comp(missing, str(sample), "-ot")
    assert not file_check.metadata_comp(missing, str(sample), "-nt")
    assert not file_check.metadata_comp(missing, missing, "-ef")


def test_unknown_comparison(sample):
    assert not file_check.metadata_comp(str(sample), str(sample), "-xx")


def test_size_check_reports_empty(tmp_path, sample):
    empty = tmp_path / "empty"
    empty.write_text("")
    assert file_check.metadata_check(str(empty), "-s")
    assert not file_check.metadata_check(str(sample), "-s")


def test_fifo(tmp_path, sample):
    fifo = tmp_path / "fifo"
    os.mkfifo(fifo)
    assert file_check.metadata_check(str(fifo), "-p")
    assert not file_check.metadata_check(str(sample), "-p")


def test_owner(sample):
    assert file_check.metadata_check(str(sample), "-O")


def test_modified_since_read(sample):
    os.utime(sample, (1_000_000, 2_000_000))
    assert file_check.metadata_check(str(sample), "-N")
    os.utime(sample, (3_000_000, 2_000_000))
    assert not file_check.metadata_check(str(sample), "-N")


def test_setuid_bit(sample):
    os.chmod(sample, 0o4755)
    assert file_check.metadata_check(str(sample), "-u")
    os.chmod(sample, 0o755)
    assert not file_check.metadata_check(str(sample), "-u")


def test_sticky_bit(tmp_path):
    sticky = tmp_path / "sticky"
    sticky.mkdir()
    os.chmod(sticky, 0o1777)
    assert file_check.metadata_check(str(sticky), "-k")
    os.chmod(sticky, 0o777)
    assert not file_check.metadata_check(str(sticky), "-k")


def test_missing_file_checks(tmp_path):
    missing = str(tmp_path / "missing")
    for op in ["-b", "-c", "-p", "-s", "-G", "-N", "-O", "-S", "-g", "-k", "-u"]:
        assert not file_check.metadata_check(missing, op)


def test_regular_file_is_not_device(sample):
    assert not file_check.metadata_check(str(sample), "-b")
    assert not file_check.metadata_check(str(sample), "-c")
    assert not file_check.metadata_check(str(sample), "-S")


def test_access(sample, tmp_path):
    os.chmod(sample, 0o755)
    assert file_check.is_readable(str(sample))
    assert file_check.is_writable(str(sample))
    assert file_check.is_executable(str(sample))
    missing = str(tmp_path / "missing")
    assert not file_check.is_readable(missing)
    assert not file_check.is_writable(missing)
    assert not file_check.is_executable(missing)


@pytest.mark.parametrize("name", ["abc", "", "1.5", " 0", "-1", "99999999999"])
def test_is_tty_rejects(name):
    assert not file_check.is_tty(name)


def test_is_tty_on_regular_file(sample):
    with open(sample) as handle:
        assert not file_check.is_tty(str(handle.fileno()))