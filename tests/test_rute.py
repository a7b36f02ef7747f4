import pytest

from ourtrain.peta import NORTH_LINE, ROOT_NAME, SOUTH_LINE
from ourtrain.pohon import MAX_NODES, StationTree
from ourtrain.rute import InfoRute, RouteNetwork


def _small_network():
    tree = StationTree(capacity=5)
    a = tree.insert("A", 0)
    b = tree.insert("B", a)
    tree.insert("C", a)
    tree.insert("D", b)
    return RouteNetwork(tree)


def test_create_java_fills_tree():
    net = RouteNetwork.create_java()
    assert len(net.tree) == MAX_NODES
    assert net.tree.level_order()[:3] == [ROOT_NAME, NORTH_LINE, SOUTH_LINE]
    assert net.routes == []


def test_route_available_in_java_tree():
    net = RouteNetwork.create_java()
    assert net.route_available("Jakarta Kota", "Ancol")
    assert not net.route_available("Jakarta Kota", "Bandung")


def test_distance_and_time_either_direction():
    net = RouteNetwork()
    net.add_route("A", "B", 10, 20)
    assert net.distance("A", "B") == 10
    assert net.distance("B", "A") == 10
    assert net.travel_time("B", "A") == 20
    assert net.distance("A", "C") is None
    assert net.travel_time("A", "C") is None


def test_first_matching_route_wins():
    net = RouteNetwork()
    net.add_route("A", "B", 10, 20)
    net.add_route("B", "A", 99, 98)
    assert net.distance("B", "A") == 10


def test_add_route_returns_record():
    net = RouteNetwork()
    rute = net.add_route("X", "Y", 3, 4)
    assert rute == InfoRute("X", "Y", 3, 4)
    assert net.routes == [rute]


def test_add_station_success():
    net = _small_network()
    idx = net.add_station("E", "C")
    assert net.tree.info(idx) == "E"
    assert net.tree.parent(idx) == net.tree.index_of("C")


def test_add_station_missing_parent():
    net = _small_network()
    with pytest.raises(KeyError):
        net.add_station("E", "Nowhere")


def test_add_station_duplicate():
    net = _small_network()
    with pytest.raises(ValueError):
        net.add_station("B", "A")


def test_add_station_full_tree():
    net = RouteNetwork.create_java()
    with pytest.raises(OverflowError):
        net.add_station("Baru", ROOT_NAME)
    assert "Baru" not in net.tree


def test_remove_station_removes_subtree():
    net = _small_network()
    net.remove_station("B")
    assert "B" not in net.tree
    assert "D" not in net.tree
    assert net.tree.level_order() == ["A", "C"]


def test_remove_station_missing():
    net = _small_network()
    with pytest.raises(KeyError):
        net.remove_station("Z")


def test_nearby_stations():
    net = RouteNetwork()
    net.add_route("A", "B", 5, 7)
    net.add_route("C", "A", 15, 20)
    net.add_route("A", "D", 50, 60)
    net.add_route("E", "F", 1, 1)
    names = [name for name, _ in net.nearby_stations("A", 20)]
    assert names == ["B", "C"]


def test_format_nearby():
    net = RouteNetwork()
    net.add_route("A", "B", 5, 7)
    text = net.format_nearby("A", 20)
    assert text.startswith("=== STASIUN TERDEKAT DARI A (RADIUS 20 KM) ===\n\n")
    assert "1. B (5.0 km, 7 menit)" in text


def test_format_nearby_none():
    net = RouteNetwork()
    text = net.format_nearby("Z", 1)
    assert "Tidak ada stasiun yang berada dalam radius 1 km dari Z." in text


def test_format_shortest_direct_reverse():
    net = RouteNetwork()
    net.add_route("A", "B", 12, 15)
    text = net.format_shortest("B", "A")
    assert "Rute langsung: B -> A (12.0 km, 15 menit)" in text


def test_format_shortest_missing():
    net = RouteNetwork()
    text = net.format_shortest("A", "Z")
    assert "Tidak ditemukan rute langsung dari A ke Z." in text
    assert "algoritma Dijkstra" in text


def test_format_routes_small_tree():
    net = _small_network()
    expected = (
        "=== RUTE KERETA API DI PULAU JAWA ===\n\n"
        "A B C D \n"
        "\n=== DETAIL JALUR ===\n"
        "- A\n"
        "  - B\n"
        "    - D\n"
        "  - C\n"
    )
    assert net.format_routes() == expected


def test_format_routes_empty_tree():
    net = RouteNetwork()
    assert net.format_routes() == (
        "=== RUTE KERETA API DI PULAU JAWA ===\n\n\n=== DETAIL JALUR ===\n"
    )


def test_save_load_round_trip(tmp_path):
    tree = StationTree()
    root = tree.insert(ROOT_NAME, 0)
    line = tree.insert(NORTH_LINE, root)
    tree.insert("Jakarta Kota", line)
    tree.insert("Ancol", line)
    net = RouteNetwork(tree)
    net.add_route("Jakarta Kota", "Ancol", 5, 10)
    net.add_route("Bogor", "Depok", 20, 30)
    path = tmp_path / "rute.txt"
    net.save(path)
    loaded = RouteNetwork.load(path)
    assert loaded.tree == net.tree
    assert loaded.routes == net.routes


def test_save_load_java_tree(tmp_path):
    net = RouteNetwork.create_java()
    path = tmp_path / "jawa.txt"
    net.save(path)
    loaded = RouteNetwork.load(path)
    assert loaded.tree == net.tree
    assert loaded.route_available("Jakarta Kota", "Ancol")


def test_save_header(tmp_path):
    net = _small_network()
    net.add_route("A", "B", 1, 2)
    path = tmp_path / "h.txt"
    net.save(path)
    first = path.read_text(encoding="utf-8").splitlines()[0]
    assert first == "4 1"


def test_load_malformed(tmp_path):
    path = tmp_path / "bad.txt"
    path.write_text("x y\n", encoding="utf-8")
    with pytest.raises(ValueError):
        RouteNetwork.load(path)


def test_load_truncated(tmp_path):
    path = tmp_path / "short.txt"
    path.write_text("2 0\n1 A 0 0 0\n", encoding="utf-8")
    with pytest.raises(ValueError):
        RouteNetwork.load(path)


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        RouteNetwork.load(tmp_path / "absent.txt")