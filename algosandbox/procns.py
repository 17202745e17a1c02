"""Look up Linux namespace identifiers and process IDs through /proc."""

from __future__ import annotations

import os
import re
import subprocess
from pathlib import Path

_PROC_ROOT = Path("/proc")

_NSPID_RE = re.compile(rb"(?m)NSpid:\s*?(\d*?)\s*?(\d*)$")
_INT_RE = re.compile(r"[+-]?\d+")


class PIDNotFoundError(LookupError):
    """No process matched the requested PID."""

    def __init__(self, message: str = "PID not found") -> None:
        super().__init__(message)


def _to_int(text: str) -> int:
    if not _INT_RE.fullmatch(text):
        raise ValueError(f"string to integer conversion error: {text!r}")
    return int(text)


def parse_ns_id(prefix: str, link: str) -> int:
    """Extract the inode number from a namespace link such as ``net:[4026531840]``."""
    return _to_int(link.replace(prefix, "").replace("]", ""))


def _namespace_id(path: Path, prefix: str) -> int:
    link = os.readlink(path)
    try:
        return parse_ns_id(prefix, link)
    except ValueError as exc:
        raise ValueError(f"parsing link ID `{link}` error: {exc}") from exc


def mount_namespace_inode_number(pid: int) -> int:
    """Return the inode number of the mount namespace of process ``pid``."""
    return _namespace_id(_PROC_ROOT / str(pid) / "ns" / "mnt", "mnt:[")


def network_namespace_inode_number(pid: int, tid: int) -> int:
    """Return the inode number of the network namespace of a thread."""
    return _namespace_id(_PROC_ROOT / str(pid) / "task" / str(tid) / "ns" / "net", "net:[")


def pid_namespace_inode_number(pid: int, tid: int) -> int:
    """Return the inode number of the PID namespace of a thread."""
    return _namespace_id(_PROC_ROOT / str(pid) / "task" / str(tid) / "ns" / "pid", "pid:[")


def open_network_namespace(pid: int, tid: int) -> int:
    """Open the network namespace file of a thread and return its descriptor.

    The caller owns the descriptor and must close it.
    """
    path = _PROC_ROOT / str(pid) / "task" / str(tid) / "ns" / "net"
    return os.open(path, os.O_RDONLY)


def grep_pids_in_host_and_child_ns(command: str) -> dict[int, int]:
    """Map host PIDs of processes named ``command`` to their PIDs in the child namespace."""
    args = ["pgrep", command]
    result = subprocess.run(args, capture_output=True, check=False)
    if result.returncode != 0:
        raise subprocess.CalledProcessError(
            result.returncode, args, output=result.stdout, stderr=result.stderr
        )

    mapping: dict[int, int] = {}
    for pid in result.stdout.strip().split(b"\n"):
        status = (_PROC_ROOT / pid.decode() / "status").read_bytes()
        match = _NSPID_RE.search(status)
        if match is None:
            raise ValueError(f"no NSpid line in status of process {pid.decode()}")
        parent = _to_int(match.group(1).decode())
        child = _to_int(match.group(2).decode())
        mapping[parent] = child
    return mapping


def parent_pid_by_child_pid(process_name: str, child_pid: int) -> int:
    """Return the host PID of the process whose PID inside its namespace is ``child_pid``."""
    for parent, child in grep_pids_in_host_and_child_ns(process_name).items():
        if child == child_pid:
            return parent
    raise PIDNotFoundError()