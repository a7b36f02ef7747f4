# ourtrain

Building blocks for a train ticketing system on Java's railway network,
plus a small interactive menu for the route map. No third-party packages
are needed.

## Modules

- `ourtrain.waktu`: `Waktu` (date and time) and `WaktuSingkat` (time of
  day) values. Both are frozen dataclasses that compare chronologically and
  offer `add_seconds`, `add_minutes`, `add_hours` and the matching
  `subtract_*` methods; `Waktu` also has `add_days`, `add_months`,
  `add_years`, `seconds_until` / `minutes_until` / `hours_until` /
  `days_until`, `format_time` and `format_full`. `WaktuSingkat` wraps
  around midnight. Helpers: `is_leap_year`, `is_time_valid`,
  `is_date_valid`.
- `ourtrain.riwayat_stack`: `RiwayatTiket` purchase records (with
  `UserRiwayat` and `KeretaRiwayat` parts) kept in `StackRiwayat`, a stack
  whose iteration runs from the newest push downwards. `pop` and `top`
  raise `IndexError` on an empty stack. `save(filename)` writes one
  comma-separated line per record and `StackRiwayat.load(filename)` reads
  them back, skipping lines that do not match.
- `ourtrain.riwayat`: working on a history stack: `record_purchase`
  (stamps the current local time), `find_by_user`, `find_by_train`,
  `filter_by_time` (inclusive range), `count_user_purchases`,
  `remove_before`, `is_valid`, `export_csv`, `format_user_history`, and
  `summarize` / `format_summary` built on `HistorySummary`.
- `ourtrain.antrean`: `AntreanQueue`, a first-in first-out queue of
  offline counter numbers with `enqueue`, `dequeue`, `front`, `rear` and
  `format`; the reading methods raise `IndexError` when it is empty.
- `ourtrain.pohon`: `StationTree`, a first-child/next-sibling tree held in
  a fixed number of slots (20 by default), with traversals, `insert`,
  `delete` (removes a whole subtree), `level`, `depth`, `degree` and more.
- `ourtrain.peta`: fills a `StationTree` with the Java rail map
  (`init_route_tree`: a "Pulau Jawa" root, the north, south, central and
  branch lines and their stations) and tells with `route_available`
  whether two stations share an ancestor. Nodes that do not fit in the
  tree's slots are left out, so a default 20-slot tree holds the root, the
  four lines and the first northern stations only.
- `ourtrain.rute`: `RouteNetwork`, the station tree together with
  `InfoRute` distance and travel-time records. It looks up direct routes
  in either direction (`distance`, `travel_time`), lists stations within a
  radius (`nearby_stations`), adds and removes stations, renders text
  views (`format_routes`, `format_nearby`, `format_shortest`) and saves or
  loads the whole network as plain text.
- `ourtrain.hash_tree`: `HashTree` of `HashNode` characters. `encode`
  gives a character's path from the root (`X` per left step, `O` per
  right step) and `hash_password` joins the codes of a password's
  characters with `S`.
- `ourtrain.cli`: the interactive menu behind the `ourtrain` command.

## Installation

```
pip install .
```

## Command line

```
ourtrain
```

starts a menu on a network built by `build_default_network()` (the Java
map plus a few sample distances). It can show the route map, find stations
near a given one, show a direct route, check whether a route is available,
add a station and add distance information. Changes last only while the
menu runs.

## Library use

```python
from ourtrain.rute import RouteNetwork

network = RouteNetwork.create_java()
network.add_route("Jakarta Gambir", "Bandung", 173, 180)
print(network.distance("Bandung", "Jakarta Gambir"))   # 173
print(network.format_shortest("Jakarta Gambir", "Bandung"))
```

```python
from ourtrain.riwayat_stack import KeretaRiwayat, StackRiwayat, UserRiwayat
from ourtrain.riwayat import format_summary, record_purchase, summarize

history = StackRiwayat()
record_purchase(history, UserRiwayat(nama="Budi", email="budi@example.com"),
                KeretaRiwayat(nama_kereta="Argo Parahyangan"), 2, 14)
print(format_summary(summarize(history)))
```

```python
from ourtrain.hash_tree import HashTree

tree = HashTree()
root = tree.insert("*", None)
tree.insert("E", root)
tree.insert("T", root)
print(tree.hash_password("TE"))   # OSX
```

## What it does not do

- There are no user accounts, payments, seat booking or ticket sales; the
  purchase history and the counter queue are data structures to build
  those on, and the command-line menu does not use them.
- Routes are found only between stations joined by a recorded direct
  route; there is no search through intermediate stations.
- The menu keeps everything in memory; it neither loads nor saves a
  network, although `RouteNetwork.save` and `RouteNetwork.load` are
  available from Python.

## Tests

```
pip install .[test]
pytest
```