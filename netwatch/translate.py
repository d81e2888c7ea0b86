"""Rendering of a connection tuple as text, with optional name lookup."""

import ipaddress
import socket

_IPPROTO_UDP = 17


def host_name(ip, translate_host: bool) -> str:
    """The address as text, or its reverse-resolved name when asked.

    When resolution fails the numeric form is returned.
    """
    address = str(ipaddress.IPv4Address(ip))
    if not translate_host:
        return address
    try:
        host, _ = socket.getnameinfo((address, 0), 0)
    except OSError:
        return address
    return host


def service_name(port: int, protocol: int, translate_service: bool) -> str:
    """The port as text, or its service name when asked and known."""
    if not 0 <= port <= 0xFFFF:
        raise ValueError(f"port out of range: {port}")
    if translate_service:
        proto = "udp" if protocol == _IPPROTO_UDP else "tcp"
        try:
            return socket.getservbyport(port, proto)
        except OSError:
            pass
    return str(port)


def translate(
    local_ip,
    local_port: int,
    remote_ip,
    remote_port: int,
    protocol: int,
    translate_host: bool,
    translate_service: bool,
) -> str:
    """Format a connection as 'host:service <-> host:service'."""
    local_host = host_name(local_ip, translate_host)
    remote_host = host_name(remote_ip, translate_host)
    local_service = service_name(local_port, protocol, translate_service)
    remote_service = service_name(remote_port, protocol, translate_service)
    return f"{local_host}:{local_service} <-> {remote_host}:{remote_service}"