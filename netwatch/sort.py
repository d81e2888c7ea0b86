"""Ordering of processes and their connections by a chosen column.

Processes are expected to carry ``pid``, ``net_stat`` and ``connections``;
connections carry ``net_stat``. A ``net_stat`` provides ``avg_bps_rx``,
``avg_bps_tx``, ``tot_bps_rx``, ``tot_bps_tx``, ``avg_pps_rx`` and
``avg_pps_tx``.
"""

from enum import IntEnum
from typing import Any


class SortColumn(IntEnum):
    """Columns the process table can be sorted by, in display order."""

    S_PID = 0
    PPS_TX = 1
    PPS_RX = 2
    RATE_TX = 3
    RATE_RX = 4
    TOT_TX = 5
    TOT_RX = 6

    def next(self) -> "SortColumn":
        """The column after this one, wrapping around to the first."""
        members = list(SortColumn)
        return members[(self.value + 1) % len(members)]


_PROCESS_STAT = {
    SortColumn.RATE_RX: "avg_bps_rx",
    SortColumn.RATE_TX: "avg_bps_tx",
    SortColumn.TOT_RX: "tot_bps_rx",
    SortColumn.TOT_TX: "tot_bps_tx",
    SortColumn.PPS_RX: "avg_pps_rx",
    SortColumn.PPS_TX: "avg_pps_tx",
}

_CONNECTION_STAT = {
    SortColumn.RATE_TX: "avg_bps_tx",
    SortColumn.PPS_RX: "avg_pps_rx",
    SortColumn.PPS_TX: "avg_pps_tx",
}


def process_key(process: Any, mode: int) -> int:
    """Sort key for a process: PID ascending, statistics descending."""
    attribute = _PROCESS_STAT.get(SortColumn(mode))
    if attribute is None:
        return process.pid
    return -getattr(process.net_stat, attribute)


def connection_key(connection: Any, mode: int) -> int:
    """Sort key for a connection; statistics descending, receive rate by default."""
    attribute = _CONNECTION_STAT.get(SortColumn(mode), "avg_bps_rx")
    return -getattr(connection.net_stat, attribute)


def sort_processes(processes: list, mode: int, view_connections: bool) -> None:
    """Sort processes in place, and each process's connections when shown."""
    column = SortColumn(mode)
    processes.sort(key=lambda proc: process_key(proc, column))
    if view_connections:
        for process in processes:
            process.connections.sort(key=lambda conn: connection_key(conn, column))