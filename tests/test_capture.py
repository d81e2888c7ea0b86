import socket

import pytest

from netwatch.capture import (
    FRAMES_PER_BLOCK,
    LEN_FRAME,
    N_BLOCKS,
    CaptureError,
    RingRequest,
    close_socket,
    open_socket,
    ring_request,
)


def test_ring_request_for_4k_pages():
    req = ring_request(4096)
    assert req.frame_size == 2048
    assert req.block_size == 256 * 1024
    assert req.block_nr == 4
    assert req.retire_blk_tov == 0


@pytest.mark.parametrize("page_size", [1024, 4096, 16384, 65536, 1 << 20])
def test_ring_request_invariants(page_size):
    req = ring_request(page_size)
    assert req.block_size >= LEN_FRAME * FRAMES_PER_BLOCK
    assert req.block_size % page_size == 0
    ratio = req.block_size // page_size
    assert ratio & (ratio - 1) == 0
    assert req.frame_nr == req.block_nr * (req.block_size // req.frame_size)
    assert req.block_nr == N_BLOCKS


def test_large_page_is_kept_as_block_size():
    assert ring_request(1 << 20).block_size == 1 << 20


def test_block_offsets_are_contiguous():
    req = ring_request(4096)
    offsets = req.block_offsets()
    assert len(offsets) == req.block_nr
    assert offsets[0][0] == 0
    for (start, length), (next_start, _) in zip(offsets, offsets[1:]):
        assert start + length == next_start
    assert sum(length for _, length in offsets) == req.ring_size()


def test_ring_size_product():
    req = RingRequest(frame_size=2048, block_size=8192, block_nr=3, frame_nr=12)
    assert req.ring_size() == 3 * 8192
    assert req.block_offsets() == [(0, 8192), (8192, 8192), (16384, 8192)]


@pytest.mark.parametrize("page_size", [0, -4096])
def test_ring_request_rejects_bad_page_size(page_size):
    with pytest.raises(ValueError):
        ring_request(page_size)


def test_ring_request_default_page_size():
    req = ring_request()
    assert req.block_size >= LEN_FRAME * FRAMES_PER_BLOCK


def test_open_socket_unknown_interface_fails():
    with pytest.raises(CaptureError):
        open_socket("no-such-iface0")


def test_close_socket_closes():
    left, right = socket.socketpair()
    close_socket(left)
    close_socket(None)
    assert left.fileno() == -1
    right.close()
    assert right.fileno() == -1