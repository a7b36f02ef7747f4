"""Searching, summarising, exporting and pruning ticket purchase history."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Optional, Union

from ourtrain.riwayat_stack import (
    KeretaRiwayat,
    RiwayatTiket,
    StackRiwayat,
    UserRiwayat,
)
from ourtrain.waktu import Waktu

MAX_UNIQUE = 100
CSV_HEADER = "Nama_Pengguna,Nama_Kereta,Gerbong,Kursi,Tanggal,Waktu"


@dataclass
class HistorySummary:
    """Totals and extremes over a whole purchase history."""

    total: int = 0
    users: list[str] = field(default_factory=list)
    trains: list[str] = field(default_factory=list)
    newest: Optional[Waktu] = None
    oldest: Optional[Waktu] = None


def _bottom_up(stack: StackRiwayat) -> list[RiwayatTiket]:
    """Records from the oldest push to the newest."""
    return list(stack)[::-1]


def _select(stack: StackRiwayat, keep: Callable[[RiwayatTiket], bool]) -> StackRiwayat:
    """A new stack holding the matching records in their original order."""
    result = StackRiwayat()
    for tiket in _bottom_up(stack):
        if keep(tiket):
            result.push(tiket)
    return result


def record_purchase(
    stack: StackRiwayat,
    user: UserRiwayat,
    kereta: KeretaRiwayat,
    nomor_gerbong: int,
    nomor_kursi: int,
) -> RiwayatTiket:
    """Push a purchase stamped with the current local time and return it."""
    tiket = RiwayatTiket(
        user=user,
        kereta=kereta,
        nomor_gerbong=nomor_gerbong,
        nomor_kursi=nomor_kursi,
        waktu_pemesanan=Waktu.now(),
    )
    stack.push(tiket)
    return tiket


def find_by_user(stack: StackRiwayat, nama: str) -> StackRiwayat:
    return _select(stack, lambda tiket: tiket.user.nama == nama)


def find_by_train(stack: StackRiwayat, nama_kereta: str) -> StackRiwayat:
    return _select(stack, lambda tiket: tiket.kereta.nama_kereta == nama_kereta)


def filter_by_time(stack: StackRiwayat, start: Waktu, end: Waktu) -> StackRiwayat:
    """Records ordered within the inclusive range ``start``..``end``."""
    return _select(stack, lambda tiket: start <= tiket.waktu_pemesanan <= end)


def format_user_history(stack: StackRiwayat, nama: str) -> str:
    hasil = find_by_user(stack, nama)
    text = f"\n=== RIWAYAT PEMBELIAN TIKET PENGGUNA: {nama} ===\n"
    if len(hasil) == 0:
        return text + "Tidak ada riwayat pembelian untuk pengguna ini.\n"
    return text + hasil.format()


def summarize(stack: StackRiwayat) -> HistorySummary:
    """Count purchases, distinct users and trains, and find the time extremes."""
    summary = HistorySummary(total=len(stack))
    for tiket in _bottom_up(stack):
        nama = tiket.user.nama
        if nama not in summary.users and len(summary.users) < MAX_UNIQUE:
            summary.users.append(nama)
        kereta = tiket.kereta.nama_kereta
        if kereta not in summary.trains and len(summary.trains) < MAX_UNIQUE:
            summary.trains.append(kereta)
        waktu = tiket.waktu_pemesanan
        if summary.newest is None or summary.newest < waktu:
            summary.newest = waktu
        if summary.oldest is None or waktu < summary.oldest:
            summary.oldest = waktu
    return summary


def format_summary(summary: HistorySummary) -> str:
    if summary.total == 0:
        return "Tidak ada riwayat pembelian.\n"
    lines = [
        "",
        "=== RINGKASAN RIWAYAT PEMBELIAN TIKET ===",
        f"Total Pembelian    : {summary.total} tiket",
        f"Jumlah Pengguna    : {len(summary.users)} pengguna",
        f"Jumlah Kereta      : {len(summary.trains)} kereta",
    ]
    if summary.newest is not None and summary.oldest is not None:
        lines.append(f"Pembelian Terbaru  : {summary.newest.format_full()}")
        lines.append(f"Pembelian Terlama  : {summary.oldest.format_full()}")
    lines.append("")
    lines.append("Daftar Pengguna yang Membeli Tiket:")
    lines.extend(f"- {nama}" for nama in summary.users)
    lines.append("")
    lines.append("Daftar Kereta yang Dibeli Tiketnya:")
    lines.extend(f"- {nama}" for nama in summary.trains)
    return "\n".join(lines) + "\n"


def export_csv(stack: StackRiwayat, filename: Union[str, Path]) -> None:
    """Write the history as CSV, oldest push first."""
    with open(filename, "w", encoding="utf-8") as handle:
        handle.write(CSV_HEADER + "\n")
        for tiket in _bottom_up(stack):
            w = tiket.waktu_pemesanan
            handle.write(
                f"{tiket.user.nama},{tiket.kereta.nama_kereta},"
                f"{tiket.nomor_gerbong},{tiket.nomor_kursi},"
                f"{w.hari:02d}/{w.bulan:02d}/{w.tahun:04d},"
                f"{w.jam:02d}:{w.menit:02d}:{w.detik:02d}\n"
            )


def remove_before(stack: StackRiwayat, limit: Waktu) -> int:
    """Drop records ordered strictly before ``limit``; return how many went."""
    records = _bottom_up(stack)
    kept = [tiket for tiket in records if not tiket.waktu_pemesanan < limit]
    stack.clear()
    for tiket in kept:
        stack.push(tiket)
    return len(records) - len(kept)


def count_user_purchases(stack: StackRiwayat, nama: str) -> int:
    return len(find_by_user(stack, nama))


def is_valid(tiket: RiwayatTiket) -> bool:
    """Check seat numbers, timestamp ranges and that names are filled in."""
    if tiket.nomor_gerbong <= 0 or tiket.nomor_kursi <= 0:
        return False
    w = tiket.waktu_pemesanan
    if not (
        2000 <= w.tahun <= 2100
        and 1 <= w.bulan <= 12
        and 1 <= w.hari <= 31
        and 0 <= w.jam <= 23
        and 0 <= w.menit <= 59
        and 0 <= w.detik <= 59
    ):
        return False
    return bool(tiket.user.nama) and bool(tiket.kereta.nama_kereta)