"""Module for writing processed centerlines to CSV, KML and KMZ"""

__all__ = [
    'generate_lines_kml', 'write_csv', 'write_kmz'
]

import csv
import io
from pathlib import Path
from typing import BinaryIO, Dict, List, Literal, Mapping, Sequence, Tuple, Union
import zipfile

from centerlines.points import GeoPoint
from centerlines.utils.logging import LOGGER

CSV_HEADER = '#Section,Latitude,Longitude,Altitude,Kilometrage,CurveRadius'

# KML colors are aabbggrr
LINE_COLORS = [
    'ff00ff00',  # Lime
    'ff0000ff',  # Red
    'ffffff00',  # Cyan
    'ff00a5ff',  # Orange
    'ff00ffff',  # Yellow
    'ffff00ff',  # Magenta
    'ff9e9e5f',  # CadetBlue
    'ff008cff',  # DarkOrange
    'ff800000',  # Navy
    'ff800080',  # Purple
]
POST_STYLE_ID = 'post_style'
LOW_DETAIL_MIN_POINTS = 20
LOW_DETAIL_STRIDE = 10


def write_csv(points: Sequence[GeoPoint]) -> str:
    """
    Serializes processed points as centerline CSV: section, latitude,
    longitude, altitude, kilometrage (chainage in kilometers) and curve
    radius. Missing chainage or curve radius is written as 0.

    Args:
        points:
            The points to write

    Returns:
        str
    """
    buf = io.StringIO()
    buf.write(CSV_HEADER + '\n')
    writer = csv.writer(buf, lineterminator='\n')
    for point in points:
        writer.writerow([
            point.section,
            f'{point.latitude:.8f}',
            f'{point.longitude:.8f}',
            f'{point.altitude:.3f}',
            f'{(point.chainage or 0.) / 1000:.3f}',
            f'{point.curve_radius or 0.:.1f}',
        ])

    return buf.getvalue()


def _line_geometry(coords: List[Tuple[float, float, float]]) -> Dict:
    return {'type': 'LineString', 'coordinates': coords}


def generate_lines_kml(
    sections: Mapping[str, Sequence[GeoPoint]],
    exaggeration: float = 1.,
    offset: float = 3.,
    altitude_mode: Literal['absolute', 'clampToGround'] = 'clampToGround',
) -> str:
    """
    Builds a KML document visualising centerlines.

    The document holds a "Lines" folder with one sub-folder per section,
    containing the full-detail line and, for sections of more than 20
    points, a hidden low-detail line through every 10th point. A hidden
    "Posts" folder holds a kilometrage marker for every point with a
    chainage.

    Args:
        sections:
            Section labels mapped to their ordered points

        exaggeration: (float) (Default 1.)
            Altitude multiplier, in absolute altitude mode

        offset: (float) (Default 3.)
            Meters added to altitudes before exaggeration, in absolute
            altitude mode

        altitude_mode: (str) (Default 'clampToGround')
            'absolute' to draw lines at their (offset, exaggerated)
            altitude; anything else clamps them to the ground

    Returns:
        str
    """
    from fastkml import KML, Document, Folder, Placemark
    from fastkml.enums import AltitudeMode
    from fastkml.geometry import create_kml_geometry
    from fastkml.styles import IconStyle, LabelStyle, LineStyle, PolyStyle, Style, StyleUrl

    absolute = altitude_mode == 'absolute'
    kml_altitude_mode = AltitudeMode.absolute if absolute else AltitudeMode.clamp_to_ground

    def _position(point: GeoPoint) -> Tuple[float, float, float]:
        alt = (point.altitude + offset) * exaggeration if absolute else 0.
        return round(point.longitude, 8), round(point.latitude, 8), round(alt, 3)

    def _placemark(name, geometry, style_id, visible):
        return Placemark(
            name=name,
            visibility=visible,
            style_url=StyleUrl(url=f'#{style_id}'),
            kml_geometry=create_kml_geometry(
                geometry,
                tessellate=True if geometry['type'] == 'LineString' else None,
                altitude_mode=kml_altitude_mode,
            ),
        )

    styles = [
        Style(
            id=f'style_{idx}',
            styles=[LineStyle(color=color, width=3), PolyStyle(color=color)]
        )
        for idx, color in enumerate(LINE_COLORS)
    ]
    styles.append(
        Style(
            id=POST_STYLE_ID,
            styles=[IconStyle(color='ffffffff', scale=0.4), LabelStyle(scale=0.7)]
        )
    )

    line_folders, post_folders = [], []
    for section, points in sections.items():
        if not points:
            continue

        # Colours cycle over emitted sections only
        style_id = f'style_{(len(line_folders) + 1) % len(LINE_COLORS)}'
        features = [
            _placemark(
                section,
                _line_geometry([_position(x) for x in points]),
                style_id,
                True,
            )
        ]
        if len(points) > LOW_DETAIL_MIN_POINTS:
            low_detail = list(points[::LOW_DETAIL_STRIDE])
            if (len(points) - 1) % LOW_DETAIL_STRIDE:
                low_detail.append(points[-1])
            features.append(
                _placemark(
                    f'{section} - Low Detail',
                    _line_geometry([_position(x) for x in low_detail]),
                    style_id,
                    False,
                )
            )
        line_folders.append(Folder(name=section, features=features))

        posts = [
            _placemark(
                f'km {point.chainage / 1000:.3f}',
                {'type': 'Point', 'coordinates': _position(point)},
                POST_STYLE_ID,
                False,
            )
            for point in points if point.chainage is not None
        ]
        post_folders.append(Folder(name=section, features=posts))

    document = Document(
        name='Centerlines',
        description='Generated from centerline files',
        styles=styles,
        features=[
            Folder(name='Lines', features=line_folders),
            Folder(name='Posts', visibility=False, features=post_folders),
        ],
    )
    kml_text = KML(features=[document]).to_string(prettyprint=True)
    LOGGER.debug('Generated lines KML for %d sections', len(line_folders))
    return kml_text


def write_kmz(kml_text: str, target: Union[str, Path, BinaryIO]) -> None:
    """
    Packs a KML document into a KMZ archive (as doc.kml).

    Args:
        kml_text:
            The KML document

        target:
            A file path or writable binary file object
    """
    with zipfile.ZipFile(target, 'w', compression=zipfile.ZIP_DEFLATED, compresslevel=9) as zf:
        zf.writestr('doc.kml', kml_text)
