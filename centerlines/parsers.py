"""Module for parsing external route files into GeoPoints"""

__all__ = [
    'parse_csv', 'parse_fastkml', 'parse_kml'
]

import csv
import math
import re
from typing import Any, Dict, Iterator, List, Optional, Sequence, Union

from centerlines.points import GeoPoint
from centerlines.utils.logging import LOGGER

_RE_XML_DECLARATION = re.compile(r'^\s*<\?xml[^>]*\?>')


def _iter_positions(geometry: Dict[str, Any]) -> Iterator[Sequence[float]]:
    """Yields every (lon, lat[, alt]) position of a geo interface mapping"""
    if geometry['type'] == 'GeometryCollection':
        for child in geometry['geometries']:
            yield from _iter_positions(child)
        return

    def _walk(coords):
        if coords and isinstance(coords[0], (int, float)):
            yield coords
            return
        for child in coords:
            yield from _walk(child)

    yield from _walk(geometry['coordinates'])


def parse_fastkml(
    kml,
    _points: Optional[List[GeoPoint]] = None,
    _counter: Optional[List[int]] = None,
) -> List[GeoPoint]:
    """
    Recurses through a KML, extracting the coordinates of every Placemark
    as GeoPoints. Each placemark becomes a section named after it, or
    'Section_<n>' (n being the placemark's position in the document) when
    unnamed.

    Args:
        kml:
            A FastKML.KML object (or a Document, Folder or Placemark)

        _points: (List[GeoPoint])
            Internal use only. Mutated with points as they're
            extracted from the KML

        _counter: (List[int])
            Internal use only. Number of placemarks seen so far.

    Returns:
        List[GeoPoint]
    """
    from fastkml import KML, Document, Folder, Placemark

    _points = _points if _points is not None else []
    _counter = _counter if _counter is not None else [0]

    if isinstance(kml, (KML, Document, Folder)):
        for feature in kml.features:
            parse_fastkml(feature, _points, _counter)

        return _points

    if isinstance(kml, Placemark):
        idx = _counter[0]
        _counter[0] += 1
        if kml.geometry is None:
            # It's possible to create a placeless placemark
            return _points

        section = kml.name or f'Section_{idx}'
        description = kml.description or ''
        for position in _iter_positions(kml.geometry.__geo_interface__):
            _points.append(
                GeoPoint(
                    latitude=position[1],
                    longitude=position[0],
                    altitude=position[2] if len(position) > 2 else 0.,
                    section=section,
                    description=description,
                )
            )
        return _points

    return _points  # pragma: no cover


def parse_kml(kml_content: Union[str, bytes]) -> List[GeoPoint]:
    """
    Parses the text of a KML document into GeoPoints. See parse_fastkml.

    Args:
        kml_content:
            The KML document, as text or UTF-8 bytes

    Returns:
        List[GeoPoint]
    """
    from fastkml import KML

    if isinstance(kml_content, bytes):
        kml_content = kml_content.decode('utf-8')

    # An encoding declaration isn't accepted alongside already-decoded text
    kml_content = _RE_XML_DECLARATION.sub('', kml_content, count=1)
    points = parse_fastkml(KML.from_string(kml_content))
    LOGGER.debug('Parsed %d points from KML', len(points))
    return points


def _to_float(value: str) -> Optional[float]:
    try:
        result = float(value)
    except ValueError:
        return None
    return None if math.isnan(result) else result


def parse_csv(csv_content: str) -> List[GeoPoint]:
    """
    Parses a centerline CSV into GeoPoints.

    Each row holds a section label, latitude, longitude and, optionally,
    altitude (meters) and kilometrage (kilometers, stored on the point as
    chainage in meters). Rows may be comma or tab delimited. Blank lines,
    lines starting with '#' and rows that can't be read are skipped.

    Args:
        csv_content:
            The CSV text

    Returns:
        List[GeoPoint]
    """
    points = []
    for line_no, line in enumerate(csv_content.splitlines()):
        line = line.strip()
        if not line or line.startswith('#'):
            continue

        delimiter = '\t' if '\t' in line else ','
        parts = [x.strip() for x in next(csv.reader([line], delimiter=delimiter))]
        if len(parts) < 3:
            LOGGER.debug('Line %d: not enough columns (%d)', line_no, len(parts))
            continue

        lat, lon = _to_float(parts[1]), _to_float(parts[2])
        if lat is None or lon is None:
            LOGGER.debug('Line %d: invalid lat/lon %r, %r', line_no, parts[1], parts[2])
            continue

        altitude = _to_float(parts[3]) if len(parts) > 3 else None
        kilometrage = _to_float(parts[4]) if len(parts) > 4 else None
        points.append(
            GeoPoint(
                lat,
                lon,
                altitude or 0.,
                section=parts[0],
                chainage=None if kilometrage is None else kilometrage * 1000,
            )
        )

    LOGGER.debug('Parsed %d points from CSV', len(points))
    return points
