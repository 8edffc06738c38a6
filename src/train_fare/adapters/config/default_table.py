"""Built-in station distance table."""

# (station_id, segment_km) in travel order
DEFAULT_STATIONS: list[tuple[str, float]] = [
    ("1s", 1.8),
    ("2s", 1.2),
    ("3s", 1.2),
    ("4s", 1.6),
    ("5s", 2.2),
    ("6s", 2.6),
    ("7s", 1.2),
    ("8s", 1.5),
    ("9s", 1.6),
    ("10s", 2.0),
    ("11s", 2.8),
    ("12s", 0.8),
    ("13s", 1.2),
    ("14s", 3.5),
    ("15s", 1.6),
    ("16s", 1.8),
    ("17s", 1.2),
    ("18s", 2.8),
    ("19s", 2.4),
    ("20s", 1.8),
    ("21s", 2.3),
    ("22s", 2.5),
]
