import os
import subprocess

import pytest

from algosandbox import procns


@pytest.fixture
def proc_root(tmp_path, monkeypatch):
    monkeypatch.setattr(procns, "_PROC_ROOT", tmp_path)
    return tmp_path


def _link(path, target):
    path.parent.mkdir(parents=True, exist_ok=True)
    os.symlink(target, path)


def _fake_pgrep(monkeypatch, stdout, returncode=0):
    calls = []

    def fake_run(args, **kwargs):
        calls.append(list(args))
        return subprocess.CompletedProcess(args, returncode, stdout=stdout, stderr=b"")

    monkeypatch.setattr(subprocess, "run", fake_run)
    return calls


def test_parse_ns_id():
    assert procns.parse_ns_id("mnt:[", "mnt:[4026531840]") == 4026531840


@pytest.mark.parametrize("link", ["mnt:[]", "mnt:[12a]", "mnt:[ 12]"])
def test_parse_ns_id_rejects_non_numbers(link):
    with pytest.raises(ValueError):
        procns.parse_ns_id("mnt:[", link)


def test_mount_namespace_inode_number(proc_root):
    _link(proc_root / "123" / "ns" / "mnt", "mnt:[4026531841]")
    assert procns.mount_namespace_inode_number(123) == 4026531841


def test_network_namespace_inode_number(proc_root):
    _link(proc_root / "1" / "task" / "2" / "ns" / "net", "net:[4026531992]")
    assert procns.network_namespace_inode_number(1, 2) == 4026531992


def test_pid_namespace_inode_number(proc_root):
    _link(proc_root / "1" / "task" / "2" / "ns" / "pid", "pid:[4026531836]")
    assert procns.pid_namespace_inode_number(1, 2) == 4026531836


def test_missing_namespace_link_raises(proc_root):
    with pytest.raises(FileNotFoundError):
        procns.mount_namespace_inode_number(999)


def test_malformed_namespace_link_raises(proc_root):
    _link(proc_root / "5" / "ns" / "mnt", "mnt:[abc]")
    with pytest.raises(ValueError):
        procns.mount_namespace_inode_number(5)


def test_open_network_namespace_returns_readable_descriptor(proc_root):
    path = proc_root / "3" / "task" / "4" / "ns" / "net"
    path.parent.mkdir(parents=True)
    path.write_bytes(b"hello")
    fd = procns.open_network_namespace(3, 4)
    try:
        assert os.read(fd, 5) == b"hello"
    finally:
        os.close(fd)


def test_grep_pids_maps_parent_to_child(proc_root, monkeypatch):
    (proc_root / "10").mkdir()
    (proc_root / "10" / "status").write_bytes(b"Name:\tsleep\nNSpid:\t10\t1\nTgid:\t10\n")
    (proc_root / "11").mkdir()
    (proc_root / "11" / "status").write_bytes(b"Name:\tsleep\nNSpid:\t11\t2\n")
    calls = _fake_pgrep(monkeypatch, b"10\n11\n")

    assert procns.grep_pids_in_host_and_child_ns("sleep") == {10: 1, 11: 2}
    assert calls == [["pgrep", "sleep"]]


def test_parent_pid_by_child_pid(proc_root, monkeypatch):
    (proc_root / "20").mkdir()
    (proc_root / "20" / "status").write_bytes(b"NSpid:\t20\t7\n")
    _fake_pgrep(monkeypatch, b"20\n")
    assert procns.parent_pid_by_child_pid("app", 7) == 20


def test_parent_pid_by_child_pid_not_found(proc_root, monkeypatch):
    (proc_root / "20").mkdir()
    (proc_root / "20" / "status").write_bytes(b"NSpid:\t20\t7\n")
    _fake_pgrep(monkeypatch, b"20\n")
    with pytest.raises(procns.PIDNotFoundError):
        procns.parent_pid_by_child_pid("app", 8)


def test_status_without_child_pid_raises(proc_root, monkeypatch):
    (proc_root / "30").mkdir()
    (proc_root / "30" / "status").write_bytes(b"NSpid:\t30\n")
    _fake_pgrep(monkeypatch, b"30\n")
    with pytest.raises(ValueError):
        procns.grep_pids_in_host_and_child_ns("app")


def test_pgrep_failure_raises(proc_root, monkeypatch):
    _fake_pgrep(monkeypatch, b"", returncode=1)
    with pytest.raises(subprocess.CalledProcessError):
        procns.grep_pids_in_host_and_child_ns("missing")