"""Raw packet socket setup and packet ring geometry."""

import mmap
import os
import socket
from dataclasses import dataclass

N_BLOCKS = 4
FRAMES_PER_BLOCK = 128
LEN_FRAME = 2048
TIMEOUT_FRAME = 0

ETH_P_ALL = 0x0003


class CaptureError(OSError):
    """Raised when the capture socket cannot be set up."""


@dataclass(frozen=True)
class RingRequest:
    """Geometry of a receive ring of blocks holding fixed-size frames."""

    frame_size: int
    block_size: int
    block_nr: int
    frame_nr: int
    retire_blk_tov: int = TIMEOUT_FRAME
    feature_req_word: int = 0
    sizeof_priv: int = 0

    def ring_size(self) -> int:
        """Total bytes mapped for the ring."""
        return self.block_nr * self.block_size

    def block_offsets(self) -> list[tuple[int, int]]:
        """(offset, length) of every block within the mapped ring."""
        return [(i * self.block_size, self.block_size) for i in range(self.block_nr)]


def _page_size() -> int:
    try:
        return os.sysconf("SC_PAGE_SIZE")
    except (ValueError, OSError, AttributeError):
        return mmap.PAGESIZE


def ring_request(page_size: int | None = None) -> RingRequest:
    """Compute the ring layout; blocks are page-aligned and hold the frames."""
    if page_size is None:
        page_size = _page_size()
    if page_size <= 0:
        raise ValueError(f"page size must be positive: {page_size}")

    block_size = page_size
    while block_size < LEN_FRAME * FRAMES_PER_BLOCK:
        block_size <<= 1

    frames_per_block = block_size // LEN_FRAME
    return RingRequest(
        frame_size=LEN_FRAME,
        block_size=block_size,
        block_nr=N_BLOCKS,
        frame_nr=N_BLOCKS * frames_per_block,
    )


def open_socket(iface: str | None = None) -> socket.socket:
    """Open a non-blocking raw socket receiving every protocol.

    With an interface name the socket is bound to it; otherwise it
    receives from all interfaces.
    """
    family = getattr(socket, "AF_PACKET", None)
    if family is None:
        raise CaptureError("packet sockets are not available on this platform")

    try:
        sock = socket.socket(family, socket.SOCK_RAW, socket.htons(ETH_P_ALL))
    except OSError as exc:
        raise CaptureError(f"Error create socket: {exc.strerror or exc}") from exc

    try:
        sock.setblocking(False)
        if iface:
            try:
                socket.if_nametoindex(iface)
            except OSError as exc:
                raise CaptureError(f"unknown interface {iface!r}") from exc
            sock.bind((iface, ETH_P_ALL))
    except CaptureError:
        sock.close()
        raise
    except OSError as exc:
        sock.close()
        raise CaptureError(f"Error bind interface {exc.strerror or exc}") from exc

    return sock


def close_socket(sock: socket.socket | None) -> None:
    """Close the capture socket, if there is one."""
    if sock is not None:
        sock.close()