import io

from ourtrain.cli import build_default_network, main, run_menu
from ourtrain.peta import ROOT_NAME
from ourtrain.pohon import MAX_NODES, StationTree
from ourtrain.rute import RouteNetwork

THANKS = "Terima kasih telah menggunakan OurTrain!"


def _run(lines, network=None):
    if network is None:
        network = build_default_network()
    feed = iter(lines)

    def read():
        try:
            return next(feed)
        except StopIteration:
            raise EOFError from None

    out = []
    run_menu(network, read, out.append)
    return network, "".join(out)


def test_build_default_network():
    network = build_default_network()
    assert len(network.routes) == 8
    assert network.distance("Jakarta Gambir", "Bandung") == 173
    assert network.travel_time("Padalarang", "Gadobangkong") == 15
    assert len(network.tree) == MAX_NODES


def test_exit_choice():
    _, text = _run(["7"])
    assert THANKS in text
    assert text.count("MENU UTAMA:") == 1


def test_eof_ends_menu():
    _, text = _run([])
    assert THANKS not in text
    assert "MENU UTAMA:" in text


def test_invalid_choices():
    _, text = _run(["9", "", "abc", "", "7"])
    assert text.count("Pilihan tidak valid. Silakan coba lagi.") == 2
    assert THANKS in text


def test_show_routes():
    _, text = _run(["1", "", "7"])
    assert "=== RUTE KERETA API DI PULAU JAWA ===" in text
    assert f"- {ROOT_NAME}\n" in text


def test_availability_without_distance():
    _, text = _run(["4", "Jakarta Kota", "Ancol", "", "7"])
    assert "Rute dari Jakarta Kota ke Ancol tersedia." in text
    assert "Informasi jarak dan waktu tempuh belum tersedia untuk rute ini." in text


def test_availability_with_distance():
    network = build_default_network()
    network.add_route("Jakarta Kota", "Ancol", 7, 12)
    _, text = _run(["4", "Jakarta Kota", "Ancol", "", "7"], network)
    assert "Jarak: 7 km" in text
    assert "Waktu tempuh: 12 menit" in text


def test_availability_unknown_station():
    _, text = _run(["4", "Jakarta Kota", "Cirebon", "", "7"])
    assert "Rute dari Jakarta Kota ke Cirebon tidak tersedia." in text


def test_nearby_option():
    _, text = _run(["2", "Bandung", "100", "", "7"])
    assert "Garut (70.0 km, 90 menit)" in text
    assert "Jakarta Gambir" not in text.split("STASIUN TERDEKAT")[1]


def test_nearby_bad_radius():
    _, text = _run(["2", "Bandung", "jauh", "", "7"])
    assert "Input tidak valid." in text
    assert THANKS in text


def test_shortest_option():
    _, text = _run(["3", "Bandung", "Jakarta Gambir", "", "7"])
    assert "Rute langsung: Bandung -> Jakarta Gambir (173.0 km, 180 menit)" in text


def test_add_route_option():
    network, text = _run(["6", "Bogor", "Depok", "20", "30", "", "7"])
    assert network.distance("Bogor", "Depok") == 20
    assert network.travel_time("Depok", "Bogor") == 30
    assert 'Info rute dari "Bogor" ke "Depok" berhasil ditambahkan.' in text


def test_add_station_option():
    tree = StationTree()
    tree.insert(ROOT_NAME, 0)
    network, text = _run(["5", "Baru", ROOT_NAME, "", "7"], RouteNetwork(tree))
    assert "Baru" in network.tree
    assert f'berhasil ditambahkan sebagai anak dari "{ROOT_NAME}"' in text


def test_add_station_missing_parent_option():
    network, text = _run(["5", "Baru", "Tidak Ada", "", "7"])
    assert 'Stasiun induk "Tidak Ada" tidak ditemukan.' in text
    assert "Baru" not in network.tree


def test_add_station_full_tree_option():
    network, text = _run(["5", "Baru", ROOT_NAME, "", "7"])
    assert "tree penuh" in text
    assert len(network.tree) == MAX_NODES


def test_main_exits(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("7\n"))
    assert main([]) == 0
    assert THANKS in capsys.readouterr().out