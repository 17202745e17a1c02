"""Manage network links, bridges and addresses with the ``ip`` tool."""

from __future__ import annotations

import ipaddress
import json
import socket
import subprocess
from dataclasses import dataclass, field
from typing import Any, Sequence


class NetCommandError(RuntimeError):
    """An ``ip`` command could not be run or exited with an error."""

    def __init__(
        self,
        message: str,
        command: Sequence[str] = (),
        returncode: int | None = None,
        output: str = "",
    ) -> None:
        super().__init__(message)
        self.command = list(command)
        self.returncode = returncode
        self.output = output


class IPAddrNotFoundError(LookupError):
    """The IP address was not found."""

    def __init__(self, message: str = "ip address not found") -> None:
        super().__init__(message)


class IPAddrAlreadyInUseError(RuntimeError):
    """The IP address is already assigned to an interface."""

    def __init__(self, message: str = "ip address already in use") -> None:
        super().__init__(message)


@dataclass(frozen=True)
class AddrInfo:
    """One address assigned to an interface, as reported by ``ip --json addr``."""

    family: str = ""
    local: str = ""
    prefixlen: int = 0
    scope: str = ""
    label: str = ""
    valid_life_time: int = 0
    preferred_life_time: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AddrInfo:
        return cls(
            family=data.get("family", ""),
            local=data.get("local", ""),
            prefixlen=data.get("prefixlen", 0),
            scope=data.get("scope", ""),
            label=data.get("label", ""),
            valid_life_time=data.get("valid_life_time", 0),
            preferred_life_time=data.get("preferred_life_time", 0),
        )


@dataclass(frozen=True)
class IPAddr:
    """An interface and its addresses, as reported by ``ip --json addr``."""

    ifindex: int = 0
    ifname: str = ""
    flags: list[str] = field(default_factory=list)
    mtu: int = 0
    qdisc: str = ""
    operstate: str = ""
    group: str = ""
    txqlen: int = 0
    link_type: str = ""
    address: str = ""
    broadcast: str = ""
    addr_info: list[AddrInfo] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> IPAddr:
        return cls(
            ifindex=data.get("ifindex", 0),
            ifname=data.get("ifname", ""),
            flags=list(data.get("flags") or []),
            mtu=data.get("mtu", 0),
            qdisc=data.get("qdisc", ""),
            operstate=data.get("operstate", ""),
            group=data.get("group", ""),
            txqlen=data.get("txqlen", 0),
            link_type=data.get("link_type", ""),
            address=data.get("address", ""),
            broadcast=data.get("broadcast", ""),
            addr_info=[AddrInfo.from_dict(item) for item in data.get("addr_info") or []],
        )


@dataclass(frozen=True)
class Interface:
    """A network interface known to the system."""

    index: int
    name: str


def _run(args: list[str], message: str) -> str:
    try:
        result = subprocess.run(
            args, stdout=subprocess.PIPE, stderr=subprocess.STDOUT, check=False
        )
    except OSError as exc:
        raise NetCommandError(f"{message}: {exc}", args) from exc
    output = (result.stdout or b"").decode(errors="replace")
    if result.returncode != 0:
        raise NetCommandError(
            f"{message}: exit status {result.returncode} {output}".rstrip(),
            args,
            result.returncode,
            output,
        )
    return output


def interface_by_name(name: str) -> Interface:
    """Return the interface called ``name``; raise LookupError if there is none."""
    try:
        index = socket.if_nametoindex(name)
    except OSError as exc:
        raise LookupError(f"no such network interface: {name}") from exc
    return Interface(index=index, name=name)


def ip_addr_list() -> list[IPAddr]:
    """Return all interfaces with their addresses."""
    args = ["ip", "--json", "addr", "show"]
    try:
        result = subprocess.run(args, capture_output=True, check=False)
    except OSError as exc:
        raise NetCommandError(f"showing IP address list error: {exc}", args) from exc
    if result.returncode != 0:
        raise NetCommandError(
            f"showing IP address list error: exit status {result.returncode}",
            args,
            result.returncode,
            (result.stderr or b"").decode(errors="replace"),
        )
    try:
        data = json.loads(result.stdout)
    except ValueError as exc:
        raise ValueError(f"error unmarshalling JSON output: {exc}") from exc
    return [IPAddr.from_dict(item) for item in data or []]


def is_ip_addr_in_use(ip: str) -> bool:
    """True if the address in CIDR form ``ip`` is assigned with that prefix length."""
    if "/" not in ip:
        raise ValueError(f"parsing CIDR error: invalid CIDR address: {ip}")
    try:
        iface = ipaddress.ip_interface(ip)
    except ValueError as exc:
        raise ValueError(f"parsing CIDR error: {exc}") from exc
    host, prefix = str(iface.ip), iface.network.prefixlen
    return any(
        info.local == host and info.prefixlen == prefix
        for addr in ip_addr_list()
        for info in addr.addr_info
    )


def setup_loopback_interface() -> Interface:
    """Bring the loopback interface up and return it."""
    _run(["ip", "link", "set", "dev", "lo", "up"], "adding loopback interface error")
    return interface_by_name("lo")


def setup_veth(veth_name: str, veth_ip: str, peer_name: str, peer_ns_name: str) -> Interface:
    """Create a veth pair with its peer in ``peer_ns_name``, bring it up and address it."""
    _run(
        ["ip", "link", "add", veth_name, "type", "veth",
         "peer", "name", peer_name, "netns", peer_ns_name],
        f"adding veth `{veth_name} - {peer_name}` error",
    )
    _run(["ip", "link", "set", "dev", veth_name, "up"], f"enabling link `{veth_name}` error")
    _run(
        ["ip", "addr", "add", veth_ip, "dev", veth_name],
        f"adding IP address to veth `{veth_name}` error",
    )
    return interface_by_name(veth_name)


def setup_bridge(name: str, ip_addr: str) -> str:
    """Create the bridge if needed, bring it up and give it ``ip_addr``.

    Return the output of the address assignment. Raise IPAddrAlreadyInUseError
    if the address is already assigned.
    """
    try:
        interface_by_name(name)
        exists = True
    except LookupError:
        exists = False

    if not exists:
        _run(["ip", "link", "add", "name", name, "type", "bridge"], f"adding bridge `{name}` error")

    enable_device(name)

    try:
        in_use = is_ip_addr_in_use(ip_addr)
    except IPAddrNotFoundError:
        in_use = False

    if in_use:
        raise IPAddrAlreadyInUseError()

    return _run(
        ["ip", "addr", "add", ip_addr, "dev", name],
        f"attaching IP `{ip_addr}` to the bridge `{name}`",
    )


def remove_bridge(name: str) -> str:
    """Delete the bridge ``name``; return the command's output."""
    return _run(
        ["ip", "link", "delete", name, "type", "bridge"], f"removal bridge `{name}` error"
    )


def attach_device_to_bridge(device_name: str, bridge_name: str) -> str:
    """Attach ``device_name`` to ``bridge_name``; return the command's output."""
    return _run(
        ["ip", "link", "set", "dev", device_name, "master", bridge_name],
        f"attaching device `{device_name}` to the bridge `{bridge_name}` error",
    )


def add_ip_addr_to_interface(ip: str, interface_name: str) -> str:
    """Assign ``ip`` to ``interface_name``; return the command's output."""
    return _run(
        ["ip", "addr", "add", ip, "dev", interface_name],
        f"adding IP `{ip}` to the interface `{interface_name}` error",
    )


def set_default_gateway(ip: str) -> str:
    """Add a default route via ``ip``; return the command's output."""
    return _run(
        ["ip", "route", "add", "default", "via", ip],
        f"adding default route via ip `{ip}` error",
    )


def enable_device(device_name: str) -> str:
    """Bring ``device_name`` up; return the command's output."""
    return _run(
        ["ip", "link", "set", "dev", device_name, "up"],
        f"enabling device `{device_name}` error",
    )


def delete_link(link_name: str) -> str:
    """Delete the link ``link_name``; return the command's output."""
    args = ["ip", "link", "delete", link_name]
    return _run(args, f"running `{' '.join(args)}` command error")