"""Railway route network: the station tree plus distances between stations."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional, Union

from ourtrain.peta import init_route_tree, route_available, station_names
from ourtrain.pohon import StationTree


@dataclass
class InfoRute:
    """Distance (km) and travel time (minutes) between two stations."""

    stasiun_asal: str
    stasiun_tujuan: str
    jarak: int
    waktu_tempuh: int

    def connects(self, a: str, b: str) -> bool:
        """True if this route joins ``a`` and ``b`` in either direction."""
        return (self.stasiun_asal == a and self.stasiun_tujuan == b) or (
            self.stasiun_asal == b and self.stasiun_tujuan == a
        )


def _split_names(words: list[str], known: set[str]) -> tuple[str, str]:
    """Split the words of a route line into origin and destination names."""
    candidates = [
        (" ".join(words[:k]), " ".join(words[k:])) for k in range(1, len(words))
    ]
    checks = (
        lambda pair: pair[0] in known and pair[1] in known,
        lambda pair: pair[0] in known,
        lambda pair: pair[1] in known,
    )
    for check in checks:
        for pair in candidates:
            if check(pair):
                return pair
    return candidates[0]


class RouteNetwork:
    """A station tree together with the known direct routes between stations."""

    def __init__(
        self,
        tree: Optional[StationTree] = None,
        routes: Optional[Iterable[InfoRute]] = None,
    ) -> None:
        self.tree = tree if tree is not None else StationTree()
        self.routes: list[InfoRute] = list(routes) if routes is not None else []

    @classmethod
    def create_java(cls) -> RouteNetwork:
        """A network whose tree holds the Java rail map and which has no routes yet."""
        tree = StationTree()
        init_route_tree(tree)
        return cls(tree)

    def _direct(self, asal: str, tujuan: str) -> Optional[InfoRute]:
        return next((rute for rute in self.routes if rute.connects(asal, tujuan)), None)

    def route_available(self, asal: str, tujuan: str) -> bool:
        return route_available(self.tree, asal, tujuan)

    def distance(self, asal: str, tujuan: str) -> Optional[int]:
        """Kilometres of the first direct route between the stations, or None."""
        rute = self._direct(asal, tujuan)
        return rute.jarak if rute is not None else None

    def travel_time(self, asal: str, tujuan: str) -> Optional[int]:
        """Minutes of the first direct route between the stations, or None."""
        rute = self._direct(asal, tujuan)
        return rute.waktu_tempuh if rute is not None else None

    def add_station(self, nama: str, induk: str) -> int:
        """Add a station as the last child of ``induk`` and return its slot.

        Raises KeyError if the parent is unknown, ValueError if the station
        already exists and OverflowError if the tree has no free slot.
        """
        parent_idx = self.tree.index_of(induk)
        if parent_idx is None:
            raise KeyError(f'Stasiun induk "{induk}" tidak ditemukan.')
        if nama in self.tree:
            raise ValueError(f'Stasiun "{nama}" sudah ada dalam tree.')
        idx = self.tree.insert(nama, parent_idx)
        if idx is None:
            raise OverflowError(f'Stasiun "{nama}" tidak dapat ditambahkan: tree penuh.')
        return idx

    def add_route(self, asal: str, tujuan: str, jarak: int, waktu_tempuh: int) -> InfoRute:
        rute = InfoRute(asal, tujuan, jarak, waktu_tempuh)
        self.routes.append(rute)
        return rute

    def remove_station(self, nama: str) -> None:
        """Remove a station and everything below it; KeyError if it is unknown."""
        idx = self.tree.index_of(nama)
        if idx is None:
            raise KeyError(f'Stasiun "{nama}" tidak ditemukan.')
        self.tree.delete(idx)

    def nearby_stations(self, nama: str, radius: int) -> list[tuple[str, InfoRute]]:
        """Stations directly connected to ``nama`` within ``radius`` km, in route order."""
        found: list[tuple[str, InfoRute]] = []
        for rute in self.routes:
            if rute.stasiun_asal == nama:
                if rute.jarak <= radius:
                    found.append((rute.stasiun_tujuan, rute))
            elif rute.stasiun_tujuan == nama:
                if rute.jarak <= radius:
                    found.append((rute.stasiun_asal, rute))
        return found

    def format_routes(self) -> str:
        """All stations in slot order followed by an indented view of the tree."""
        parts = ["=== RUTE KERETA API DI PULAU JAWA ===\n\n"]
        names = self.tree.level_order()
        if names:
            parts.append("".join(f"{name} " for name in names) + "\n")
        parts.append("\n=== DETAIL JALUR ===\n")

        def walk(idx: int, level: int) -> None:
            info = self.tree.info(idx)
            if info is None:
                return
            parts.append("  " * level + f"- {info}\n")
            for k in range(1, self.tree.degree(idx) + 1):
                child = self.tree.child(idx, k)
                if child is not None:
                    walk(child, level + 1)

        if self.tree.capacity >= 1:
            walk(1, 0)
        return "".join(parts)

    def format_nearby(self, nama: str, radius: int) -> str:
        lines = [f"=== STASIUN TERDEKAT DARI {nama} (RADIUS {radius} KM) ===", ""]
        found = self.nearby_stations(nama, radius)
        for nomor, (stasiun, rute) in enumerate(found, start=1):
            lines.append(
                f"{nomor}. {stasiun} ({float(rute.jarak):.1f} km, {rute.waktu_tempuh} menit)"
            )
        if not found:
            lines.append(
                f"Tidak ada stasiun yang berada dalam radius {radius} km dari {nama}."
            )
        return "\n".join(lines) + "\n"

    def format_shortest(self, asal: str, tujuan: str) -> str:
        lines = [f"=== JALUR TERPENDEK DARI {asal} KE {tujuan} ===", ""]
        rute = self._direct(asal, tujuan)
        if rute is not None:
            lines.append(
                f"Rute langsung: {asal} -> {tujuan} "
                f"({float(rute.jarak):.1f} km, {rute.waktu_tempuh} menit)"
            )
        else:
            lines.append(f"Tidak ditemukan rute langsung dari {asal} ke {tujuan}.")
            lines.append(
                "Untuk mencari rute dengan stasiun perantara, "
                "implementasi algoritma Dijkstra diperlukan."
            )
        return "\n".join(lines) + "\n"

    def save(self, filename: Union[str, Path]) -> None:
        """Write the tree slots and the routes to a plain-text file."""
        occupied = [
            idx for idx in range(1, self.tree.capacity + 1) if self.tree.info(idx) is not None
        ]
        with open(filename, "w", encoding="utf-8") as handle:
            handle.write(f"{len(occupied)} {len(self.routes)}\n")
            for idx in occupied:
                pr, fs, nb = self.tree._links(idx)
                handle.write(f"{idx} {self.tree.info(idx)} {pr} {fs} {nb}\n")
            for rute in self.routes:
                handle.write(
                    f"{rute.stasiun_asal} {rute.stasiun_tujuan} "
                    f"{rute.jarak} {rute.waktu_tempuh}\n"
                )

    @classmethod
    def load(cls, filename: Union[str, Path]) -> RouteNetwork:
        """Read a network written by :meth:`save`.

        Where route names contain spaces, the split between origin and
        destination prefers names that are stations of the loaded tree.
        Raises ValueError on a malformed file.
        """
        with open(filename, "r", encoding="utf-8") as handle:
            lines = [line.strip() for line in handle if line.strip()]
        if not lines:
            raise ValueError("file rute kosong")
        header = lines[0].split()
        if len(header) != 2:
            raise ValueError(f"header tidak valid: {lines[0]!r}")
        n_stations, n_routes = (int(value) for value in header)
        if len(lines) < 1 + n_stations + n_routes:
            raise ValueError("data rute tidak lengkap")

        tree = StationTree()
        for line in lines[1 : 1 + n_stations]:
            head, rest = line.split(maxsplit=1)
            name, pr, fs, nb = rest.rsplit(maxsplit=3)
            tree._restore(int(head), name, int(pr), int(fs), int(nb))

        known = set(station_names(tree))
        routes: list[InfoRute] = []
        for line in lines[1 + n_stations : 1 + n_stations + n_routes]:
            tokens = line.split()
            if len(tokens) < 4:
                raise ValueError(f"baris rute tidak valid: {line!r}")
            jarak, waktu = int(tokens[-2]), int(tokens[-1])
            asal, tujuan = _split_names(tokens[:-2], known)
            routes.append(InfoRute(asal, tujuan, jarak, waktu))
        return cls(tree, routes)