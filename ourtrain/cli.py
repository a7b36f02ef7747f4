"""Interactive menu for browsing and editing the Java railway routes."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Optional, Sequence

from ourtrain.rute import RouteNetwork

TITLE = (
    "====================================================\n"
    "                    OUR TRAIN                       \n"
    "      SISTEM PEMESANAN TIKET KERETA API JAWA        \n"
    "====================================================\n\n"
)

MENU = (
    "MENU UTAMA:\n"
    "1. Tampilkan Rute Kereta Api\n"
    "2. Cari Stasiun Terdekat\n"
    "3. Cari Jalur Terpendek\n"
    "4. Cek Ketersediaan Rute\n"
    "5. Tambah Stasiun Baru\n"
    "6. Tambah Info Jarak Rute\n"
    "7. Keluar\n"
    "\nPilihan: "
)

EXIT_CHOICE = 7

DEFAULT_ROUTES = (
    ("Jakarta Gambir", "Bandung", 173, 180),
    ("Bandung", "Yogyakarta", 400, 360),
    ("Yogyakarta", "Surabaya Gubeng", 330, 300),
    ("Jakarta Kota", "Cirebon", 220, 210),
    ("Cirebon", "Semarang Tawang", 235, 225),
    ("Semarang Tawang", "Surabaya Pasar Turi", 340, 320),
    ("Gadobangkong", "Padalarang", 12, 15),
    ("Bandung", "Garut", 70, 90),
)


def build_default_network() -> RouteNetwork:
    """The Java rail map with the sample distances between major stations."""
    network = RouteNetwork.create_java()
    for asal, tujuan, jarak, waktu in DEFAULT_ROUTES:
        network.add_route(asal, tujuan, jarak, waktu)
    return network


def run_menu(
    network: RouteNetwork,
    read: Callable[[], str],
    write: Callable[[str], None],
) -> None:
    """Run the menu until the exit choice or until ``read`` raises EOFError."""

    def ask(prompt: str) -> str:
        write(prompt)
        return read().strip()

    def ask_int(prompt: str) -> int:
        return int(ask(prompt))

    def pause(message: str = "\nTekan Enter untuk kembali ke menu utama...") -> None:
        write(message)
        try:
            read()
        except EOFError:
            pass

    def show_routes() -> None:
        write(network.format_routes())

    def nearby() -> None:
        nama = ask("Masukkan nama stasiun: ")
        radius = ask_int("Masukkan radius pencarian (km): ")
        write(network.format_nearby(nama, radius))

    def shortest() -> None:
        asal = ask("Masukkan stasiun asal: ")
        tujuan = ask("Masukkan stasiun tujuan: ")
        write(network.format_shortest(asal, tujuan))

    def availability() -> None:
        asal = ask("Masukkan stasiun asal: ")
        tujuan = ask("Masukkan stasiun tujuan: ")
        if not network.route_available(asal, tujuan):
            write(f"\nRute dari {asal} ke {tujuan} tidak tersedia.\n")
            return
        write(f"\nRute dari {asal} ke {tujuan} tersedia.\n")
        jarak = network.distance(asal, tujuan)
        waktu = network.travel_time(asal, tujuan)
        if jarak is not None and waktu is not None and jarak > 0 and waktu > 0:
            write(f"Jarak: {jarak} km\n")
            write(f"Waktu tempuh: {waktu} menit\n")
        else:
            write("Informasi jarak dan waktu tempuh belum tersedia untuk rute ini.\n")

    def new_station() -> None:
        nama = ask("Masukkan nama stasiun baru: ")
        induk = ask("Masukkan nama stasiun induk: ")
        try:
            network.add_station(nama, induk)
        except (KeyError, ValueError, OverflowError) as error:
            message = error.args[0] if error.args else str(error)
            write(f"{message}\n")
        else:
            write(f'Stasiun "{nama}" berhasil ditambahkan sebagai anak dari "{induk}".\n')

    def new_route() -> None:
        asal = ask("Masukkan stasiun asal: ")
        tujuan = ask("Masukkan stasiun tujuan: ")
        jarak = ask_int("Masukkan jarak (km): ")
        waktu = ask_int("Masukkan waktu tempuh (menit): ")
        network.add_route(asal, tujuan, jarak, waktu)
        write(f'Info rute dari "{asal}" ke "{tujuan}" berhasil ditambahkan.\n')

    actions = {
        1: show_routes,
        2: nearby,
        3: shortest,
        4: availability,
        5: new_station,
        6: new_route,
    }

    while True:
        write(TITLE)
        try:
            raw = ask(MENU)
        except EOFError:
            return
        try:
            pilihan = int(raw)
        except ValueError:
            pilihan = None

        if pilihan == EXIT_CHOICE:
            write("\nTerima kasih telah menggunakan OurTrain!\n")
            return
        action = actions.get(pilihan) if pilihan is not None else None
        if action is None:
            write("\nPilihan tidak valid. Silakan coba lagi.\n")
            pause("Tekan Enter untuk melanjutkan...")
            continue

        write(TITLE)
        try:
            action()
        except EOFError:
            return
        except ValueError:
            write("Input tidak valid.\n")
        pause()


def _write_stdout(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="ourtrain",
        description="Menu rute kereta api Pulau Jawa.",
    )
    parser.parse_args(argv)
    network = build_default_network()
    run_menu(network, input, _write_stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())