"""Officially observed Hijri month lengths for Iran.

Each entry maps a Hijri year to the lengths (29 or 30) of its months in
order. The most recent year may list fewer than 12 months while its
remaining months have not yet been observed.
"""

from typing import Dict, Tuple

OFFICIAL_MONTH_LENGTHS: Dict[int, Tuple[int, ...]] = {
    1423: (29, 30, 30, 29, 29, 30, 29, 30, 29, 30, 29, 30),
    1424: (30, 29, 30, 29, 30, 29, 30, 29, 30, 29, 30, 29),
    1425: (30, 29, 30, 30, 29, 30, 30, 29, 29, 30, 29, 30),
    1426: (29, 29, 30, 29, 30, 30, 30, 29, 30, 30, 29, 29),
    1427: (30, 29, 29, 30, 29, 30, 30, 30, 29, 30, 29, 30),
    1428: (29, 30, 29, 29, 29, 30, 30, 29, 30, 30, 30, 29),
    1429: (30, 29, 30, 29, 29, 29, 30, 30, 29, 30, 30, 29),
    1430: (30, 30, 29, 29, 30, 29, 30, 29, 29, 30, 30, 29),
    1431: (30, 30, 29, 30, 29, 30, 29, 30, 29, 29, 30, 29),
    1432: (30, 30, 29, 30, 30, 30, 29, 30, 29, 29, 30, 29),
    1433: (29, 30, 29, 30, 30, 30, 29, 30, 29, 30, 29, 30),
    1434: (29, 29, 30, 29, 30, 30, 29, 30, 30, 29, 30, 29),
    1435: (29, 30, 29, 30, 29, 30, 29, 30, 30, 30, 29, 30),
    1436: (29, 30, 29, 29, 30, 29, 30, 29, 30, 29, 30, 30),
    1437: (29, 30, 30, 29, 30, 29, 29, 30, 29, 29, 30, 30),
    1438: (29, 30, 30, 30, 29, 30, 29, 29, 30, 29, 29, 30),
    1439: (29, 30, 30, 30, 30, 29, 30, 29, 29, 30, 29, 29),
    1440: (30, 29, 30, 30, 30, 29, 30, 30, 29, 29, 30, 29),
    1441: (29, 30, 29, 30, 30, 29, 30, 30, 29, 30, 29, 30),
    1442: (29, 29, 30, 29, 30, 29, 30, 30, 29, 30, 30, 29),
    1443: (29, 30, 30, 29, 29, 30, 29, 30, 30, 29, 30, 29),
    1444: (30, 30, 29, 30, 29, 29, 30, 29, 30, 29, 30, 29),
    1445: (30, 30, 30, 29, 30, 29, 29, 30, 29, 30, 29, 29),
    1446: (30, 30, 30, 29, 30, 30, 29, 30, 29, 29, 29, 30),
    1447: (29, 30, 30, 29, 30, 30, 30, 29, 30, 29, 29, 29),
    # Observation still in progress
    1448: (30, 29, 30, 29, 30, 30, 30, 29, 30, 29),
}
