"""The Java railway map laid out as a tree of lines, branches and stations."""

from __future__ import annotations

from typing import Iterable, Optional

from ourtrain.pohon import StationTree

ROOT_NAME = "Pulau Jawa"
NORTH_LINE = "Jalur Utara"
SOUTH_LINE = "Jalur Selatan"
CENTRAL_LINE = "Jalur Tengah"
BRANCH_LINE = "Jalur Cabang"

NORTH_STATIONS: tuple[str, ...] = (
    # DKI Jakarta and West Java
    "Jakarta Kota", "Kampung Bandan", "Ancol", "Tanjung Priok", "Kemayoran",
    "Pasar Senen", "Jatinegara", "Bekasi", "Cikarang", "Karawang", "Klari",
    "Kosambi", "Cikampek", "Dawuan", "Haurgeulis", "Terisi", "Jatibarang",
    "Arjawinangun", "Cirebon", "Cirebon Prujakan",
    # Central Java
    "Brebes", "Tegal", "Pemalang", "Petarukan", "Pekalongan", "Batang",
    "Weleri", "Kaliwungu", "Mangkang", "Semarang Poncol", "Semarang Tawang",
    "Alastua", "Demak", "Kudus", "Pati", "Juwana", "Rembang", "Lasem", "Kragan",
    # East Java
    "Tuban", "Babat", "Bojonegoro", "Sumberrejo", "Lamongan", "Duduk", "Cerme",
    "Benowo", "Kandangan", "Tandes", "Surabaya Pasar Turi",
)

SOUTH_STATIONS: tuple[str, ...] = (
    # DKI Jakarta and West Java
    "Jakarta Gambir", "Manggarai", "Depok", "Depok Baru", "Citayam",
    "Bojong Gede", "Cilebut", "Bogor", "Sukabumi", "Cianjur", "Cimahi",
    "Bandung", "Kiaracondong", "Gedebage", "Cicalengka", "Rancaekek",
    "Haurpugur", "Nagreg", "Leles", "Cibatu", "Warungbandrek", "Tasikmalaya",
    "Manonjaya", "Ciamis", "Banjar",
    # Central Java
    "Karangpucung", "Cipari", "Sidareja", "Gandrungmangu", "Kroya", "Gombong",
    "Karanganyar", "Kebumen", "Kutoarjo", "Wates", "Yogyakarta", "Klaten",
    "Solo Balapan", "Purwosari", "Sragen", "Kedungbanteng",
    # East Java
    "Walikukun", "Madiun", "Caruban", "Nganjuk", "Baron", "Kertosono",
    "Jombang", "Peterongan", "Sumobito", "Curahmalang", "Mojokerto", "Tarik",
    "Sepanjang", "Waru", "Wonokromo", "Surabaya Gubeng", "Surabaya Kota",
)

CENTRAL_STATIONS: tuple[str, ...] = (
    # Jakarta - Bandung
    "Jakarta Gambir", "Manggarai", "Jatinegara", "Bekasi", "Tambun",
    "Cikarang", "Lemah Abang", "Karawang", "Cikampek", "Cibungur", "Sadang",
    "Purwakarta", "Plered", "Cisomang", "Cikadondong", "Cilame", "Padalarang",
    "Gadobangkong", "Cimahi", "Cimindi", "Andir", "Ciroyom", "Bandung",
    # Surabaya - Malang
    "Surabaya Gubeng", "Wonokromo", "Sepanjang", "Gedangan", "Sidoarjo",
    "Tanggulangin", "Porong", "Bangil", "Lawang", "Singosari", "Blimbing",
    "Malang", "Malang Kota Lama", "Pakisaji", "Kepanjen", "Sumberpucung",
    "Kesamben", "Wlingi", "Blitar",
)

BRANCHES: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("Cabang Garut", (
        "Cibatu", "Wanaraja", "Garut", "Bayongbong", "Leles", "Cipeundeuy",
    )),
    ("Cabang Cianjur-Sukabumi", (
        "Cianjur", "Cibeber", "Lampegan", "Cicurug", "Parungkuda", "Cisaat",
        "Sukabumi",
    )),
    ("Cabang Purwokerto-Wonosobo", (
        "Purwokerto", "Sokaraja", "Banjarnegara", "Wonosobo",
    )),
    ("Cabang Yogyakarta-Magelang", (
        "Yogyakarta", "Sleman", "Tempel", "Mungkid", "Magelang",
    )),
    ("Cabang Solo-Wonogiri", (
        "Solo Balapan", "Purwosari", "Gawok", "Sukoharjo", "Wonogiri",
    )),
)


def station_index(tree: StationTree, nama: str) -> Optional[int]:
    """Slot of the first node with this name, or None."""
    return tree.index_of(nama)


def station_names(tree: StationTree) -> list[str]:
    """Every name in the tree, in slot order."""
    return [
        name
        for name in (tree.info(idx) for idx in range(1, tree.capacity + 1))
        if name is not None
    ]


def insert_and_get_index(tree: StationTree, name: str, parent_idx: int) -> Optional[int]:
    """Insert a node, then return the slot of the first node carrying that name."""
    tree.insert(name, parent_idx)
    return tree.index_of(name)


def _fill_line(tree: StationTree, line: str, stations: Iterable[str]) -> None:
    parent = tree.index_of(line)
    if parent is None:
        return
    for station in stations:
        tree.insert(station, parent)


def init_north_line(tree: StationTree) -> None:
    """Hang the northern coast stations under the north line node."""
    _fill_line(tree, NORTH_LINE, NORTH_STATIONS)


def init_south_line(tree: StationTree) -> None:
    """Hang the southern line stations under the south line node."""
    _fill_line(tree, SOUTH_LINE, SOUTH_STATIONS)


def init_central_line(tree: StationTree) -> None:
    """Hang the central line stations under the central line node."""
    _fill_line(tree, CENTRAL_LINE, CENTRAL_STATIONS)


def init_branch_lines(tree: StationTree) -> None:
    """Add each branch under the branch line node, with its stations below it."""
    parent = tree.index_of(BRANCH_LINE)
    if parent is None:
        return
    for branch, stations in BRANCHES:
        branch_idx = insert_and_get_index(tree, branch, parent)
        if branch_idx is None:
            continue
        for station in stations:
            tree.insert(station, branch_idx)


def init_route_tree(tree: StationTree) -> None:
    """Reset the tree and fill it with the Java rail map.

    Nodes that do not fit in the tree's slots are left out.
    """
    for idx in range(1, tree.capacity + 1):
        if tree.info(idx) is not None:
            tree.delete(idx)
    if tree.insert(ROOT_NAME, 0) is None:
        return
    root = tree.index_of(ROOT_NAME)
    for line in (NORTH_LINE, SOUTH_LINE, CENTRAL_LINE, BRANCH_LINE):
        tree.insert(line, root)
    init_north_line(tree)
    init_south_line(tree)
    init_central_line(tree)
    init_branch_lines(tree)


def _last_index_of(tree: StationTree, name: str) -> Optional[int]:
    found = None
    for idx in range(1, tree.capacity + 1):
        if tree.info(idx) == name:
            found = idx
    return found


def route_available(tree: StationTree, asal: str, tujuan: str) -> bool:
    """True if both stations exist and share an ancestor in the tree."""
    idx_asal = _last_index_of(tree, asal)
    idx_tujuan = _last_index_of(tree, tujuan)
    if idx_asal is None or idx_tujuan is None:
        return False

    ancestors: set[int] = set()
    current: Optional[int] = idx_asal
    while current is not None:
        ancestors.add(current)
        current = tree.parent(current)

    current = idx_tujuan
    while current is not None:
        if current in ancestors:
            return True
        current = tree.parent(current)
    return False