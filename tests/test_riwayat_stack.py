import pytest

from ourtrain.riwayat_stack import (
    KeretaRiwayat,
    RiwayatTiket,
    StackRiwayat,
    UserRiwayat,
)
from ourtrain.waktu import Waktu


def make_ticket(nama, kereta, gerbong=2, kursi=15):
    return RiwayatTiket(
        user=UserRiwayat(nama=nama, email="user@example.com"),
        kereta=KeretaRiwayat(nama_kereta=kereta),
        nomor_gerbong=gerbong,
        nomor_kursi=kursi,
        waktu_pemesanan=Waktu(tahun=2025, bulan=2, hari=1, jam=8, menit=5, detik=9),
    )


def test_push_pop_is_last_in_first_out():
    stack = StackRiwayat()
    first = make_ticket("Budi", "Argo")
    second = make_ticket("Sari", "Lodaya")
    stack.push(first)
    stack.push(second)
    assert stack.pop() is second
    assert stack.pop() is first
    assert len(stack) == 0


def test_pop_and_top_on_empty_raise():
    stack = StackRiwayat()
    with pytest.raises(IndexError):
        stack.pop()
    with pytest.raises(IndexError):
        stack.top()


def test_top_does_not_remove():
    stack = StackRiwayat()
    ticket = make_ticket("Budi", "Argo")
    stack.push(ticket)
    assert stack.top() is ticket
    assert len(stack) == 1


def test_iteration_runs_from_top():
    stack = StackRiwayat()
    for name in ("A", "B", "C"):
        stack.push(make_ticket(name, "Argo"))
    assert [t.user.nama for t in stack] == ["C", "B", "A"]


def test_clear_empties_stack():
    stack = StackRiwayat()
    stack.push(make_ticket("A", "Argo"))
    stack.clear()
    assert len(stack) == 0
    assert list(stack) == []


def test_format_empty():
    assert StackRiwayat().format() == "Stack kosong!\n"


def test_format_lists_records():
    stack = StackRiwayat()
    stack.push(make_ticket("Budi", "Argo"))
    text = stack.format()
    assert "--- Riwayat Pembelian Tiket ---" in text
    assert "Nomor: 1\nPengguna: Budi\nKereta: Argo\nGerbong: 2, Kursi: 15\n" in text
    assert "Waktu Pemesanan: 08:05:09 01/02/2025" in text


def test_save_writes_bottom_first(tmp_path):
    stack = StackRiwayat()
    stack.push(make_ticket("Budi", "Argo"))
    stack.push(make_ticket("Sari", "Lodaya", 3, 7))
    path = tmp_path / "riwayat.txt"
    stack.save(path)
    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines == [
        "Budi,Argo,2,15,08:05:09 01/02/2025",
        "Sari,Lodaya,3,7,08:05:09 01/02/2025",
    ]


def test_load_puts_first_line_on_top(tmp_path):
    stack = StackRiwayat()
    stack.push(make_ticket("Budi", "Argo"))
    stack.push(make_ticket("Sari", "Lodaya", 3, 7))
    path = tmp_path / "riwayat.txt"
    stack.save(path)
    loaded = StackRiwayat.load(path)
    assert [t.user.nama for t in loaded] == ["Budi", "Sari"]
    top = loaded.top()
    assert top.kereta.nama_kereta == "Argo"
    assert (top.nomor_gerbong, top.nomor_kursi) == (2, 15)
    assert top.waktu_pemesanan == make_ticket("x", "y").waktu_pemesanan


def test_load_skips_malformed_lines(tmp_path):
    path = tmp_path / "riwayat.txt"
    path.write_text(
        "garbage line\nBudi,Argo,2,15,08:05:09 01/02/2025\nno,commas\n",
        encoding="utf-8",
    )
    loaded = StackRiwayat.load(path)
    assert len(loaded) == 1
    assert loaded.top().user.nama == "Budi"


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        StackRiwayat.load(tmp_path / "missing.txt")