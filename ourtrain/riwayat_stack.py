"""A last-in, first-out store of ticket purchase records."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, Union

from ourtrain.waktu import Waktu

FILE_RIWAYAT = "riwayatPembelian.txt"

_INT = r"\s*([+-]?\d+)"
_LINE_PATTERN = re.compile(
    r"([^,]+),([^,]+),"
    + _INT + "," + _INT + ","
    + _INT + ":" + _INT + ":" + _INT
    + _INT + "/" + _INT + "/" + _INT
)


@dataclass
class UserRiwayat:
    """The passenger part of a purchase record."""

    nama: str = ""
    email: str = ""
    nomor_telepon: str = ""


@dataclass
class KeretaRiwayat:
    """The train part of a purchase record."""

    kode_kereta: str = ""
    nama_kereta: str = ""
    stasiun_asal: str = ""
    stasiun_tujuan: str = ""
    jam_berangkat: str = ""
    jam_tiba: str = ""
    tanggal_berangkat: str = ""
    kelas: str = ""
    harga: int = 0


@dataclass
class RiwayatTiket:
    """One purchased ticket with the moment it was ordered."""

    user: UserRiwayat = field(default_factory=UserRiwayat)
    kereta: KeretaRiwayat = field(default_factory=KeretaRiwayat)
    nomor_gerbong: int = 0
    nomor_kursi: int = 0
    waktu_pemesanan: Waktu = field(default_factory=Waktu)


def _stamp(waktu: Waktu) -> str:
    return (
        f"{waktu.jam:02d}:{waktu.menit:02d}:{waktu.detik:02d} "
        f"{waktu.hari:02d}/{waktu.bulan:02d}/{waktu.tahun:04d}"
    )


class StackRiwayat:
    """Purchase history; iteration runs from the top (newest push) downwards."""

    def __init__(self) -> None:
        self._items: list[RiwayatTiket] = []

    def push(self, tiket: RiwayatTiket) -> None:
        self._items.append(tiket)

    def pop(self) -> RiwayatTiket:
        if not self._items:
            raise IndexError("Stack kosong! Tidak dapat melakukan Pop.")
        return self._items.pop()

    def top(self) -> RiwayatTiket:
        if not self._items:
            raise IndexError("Stack kosong! Tidak ada elemen di puncak.")
        return self._items[-1]

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[RiwayatTiket]:
        return reversed(self._items)

    def format(self) -> str:
        """Render the records from top to bottom as a numbered listing."""
        if not self._items:
            return "Stack kosong!\n"
        lines = ["", "--- Riwayat Pembelian Tiket ---"]
        for nomor, tiket in enumerate(self, start=1):
            lines.append(f"Nomor: {nomor}")
            lines.append(f"Pengguna: {tiket.user.nama}")
            lines.append(f"Kereta: {tiket.kereta.nama_kereta}")
            lines.append(f"Gerbong: {tiket.nomor_gerbong}, Kursi: {tiket.nomor_kursi}")
            lines.append(f"Waktu Pemesanan: {_stamp(tiket.waktu_pemesanan)}")
            lines.append("---------------------------------")
        return "\n".join(lines) + "\n"

    def save(self, filename: Union[str, Path]) -> None:
        """Write the records to a file, bottom of the stack first."""
        with open(filename, "w", encoding="utf-8") as handle:
            for tiket in self._items:
                handle.write(
                    f"{tiket.user.nama},{tiket.kereta.nama_kereta},"
                    f"{tiket.nomor_gerbong},{tiket.nomor_kursi},"
                    f"{_stamp(tiket.waktu_pemesanan)}\n"
                )

    @classmethod
    def load(cls, filename: Union[str, Path]) -> StackRiwayat:
        """Read records from a file; the first valid line ends up on top.

        Lines that do not match the record format are skipped.
        """
        records: list[RiwayatTiket] = []
        with open(filename, "r", encoding="utf-8") as handle:
            for line in handle:
                match = _LINE_PATTERN.match(line)
                if match is None:
                    continue
                nama, kereta, *numbers = match.groups()
                gerbong, kursi, jam, menit, detik, hari, bulan, tahun = map(int, numbers)
                records.append(
                    RiwayatTiket(
                        user=UserRiwayat(nama=nama),
                        kereta=KeretaRiwayat(nama_kereta=kereta),
                        nomor_gerbong=gerbong,
                        nomor_kursi=kursi,
                        waktu_pemesanan=Waktu(
                            tahun=tahun, bulan=bulan, hari=hari,
                            jam=jam, menit=menit, detik=detik,
                        ),
                    )
                )
        stack = cls()
        for tiket in reversed(records):
            stack.push(tiket)
        return stack