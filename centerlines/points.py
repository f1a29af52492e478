"""
Representation of a surveyed point along a route centerline
"""

__all__ = ['GeoPoint', 'group_sections']

from typing import Dict, Iterable, List, Optional, Tuple

from centerlines._const import DEFAULT_SECTION


class GeoPoint:
    """
    An immutable latitude/longitude/altitude point belonging to a named section.

    Pipeline stages never modify a point; use .replace() to derive a new
    point with some fields changed.

    Args:
        latitude:
            Latitude in degrees

        longitude:
            Longitude in degrees

        altitude: (float) (Default 0.)
            Altitude in meters

        section: (str) (Default '')
            The label of the section this point belongs to

        chainage: (Optional[float])
            Cumulative distance (meters) from the first point of the section

        curve_radius: (Optional[float])
            Local turn radius in meters; 0 means straight

        name: (str)
            Optional point name, carried through from source files

        description: (str)
            Optional point description, carried through from source files
    """

    __slots__ = (
        'latitude', 'longitude', 'altitude', 'section',
        'chainage', 'curve_radius', 'name', 'description'
    )

    def __init__(
        self,
        latitude: float,
        longitude: float,
        altitude: float = 0.,
        section: str = '',
        chainage: Optional[float] = None,
        curve_radius: Optional[float] = None,
        name: str = '',
        description: str = '',
    ):
        _set = object.__setattr__
        _set(self, 'latitude', float(latitude))
        _set(self, 'longitude', float(longitude))
        _set(self, 'altitude', float(altitude))
        _set(self, 'section', section)
        _set(self, 'chainage', None if chainage is None else float(chainage))
        _set(self, 'curve_radius', None if curve_radius is None else float(curve_radius))
        _set(self, 'name', name)
        _set(self, 'description', description)

    def __setattr__(self, key, value):
        raise AttributeError(
            f'{self.__class__.__name__} is immutable; use .replace({key}=...) instead'
        )

    def __delattr__(self, key):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    def __eq__(self, other):
        if not isinstance(other, GeoPoint):
            return False

        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __repr__(self):
        return (
            f'<GeoPoint({self.latitude}, {self.longitude}, {self.altitude}m'
            f'{", " + repr(self.section) if self.section else ""})>'
        )

    def __reduce__(self):
        return self.__class__, self._key()

    def _key(self) -> Tuple:
        return tuple(getattr(self, x) for x in self.__slots__)

    @property
    def __geo_interface__(self):
        return {
            'type': 'Point',
            'coordinates': (self.longitude, self.latitude, self.altitude),
        }

    def replace(self, **changes) -> 'GeoPoint':
        """
        Create a copy of this point with the given fields replaced.

        Keyword Args:
            Any of the GeoPoint constructor arguments

        Returns:
            GeoPoint
        """
        fields = {x: getattr(self, x) for x in self.__slots__}
        unknown = set(changes) - set(fields)
        if unknown:
            raise TypeError(f'Unknown GeoPoint fields: {", ".join(sorted(unknown))}')

        fields.update(changes)
        return GeoPoint(**fields)

    def to_float(self, reverse: bool = False) -> Tuple[float, float, float]:
        """
        Converts the point to a tuple of (longitude, latitude, altitude)

        Args:
            reverse: (bool)
                (Default False) If True, returns (latitude, longitude, altitude)

        Returns:
            Tuple of length 3
        """
        if reverse:
            return self.latitude, self.longitude, self.altitude

        return self.longitude, self.latitude, self.altitude


def group_sections(points: Iterable[GeoPoint]) -> Dict[str, List[GeoPoint]]:
    """
    Groups points by section label, preserving both the order in which
    sections are first seen and the order of points within each section.
    Points without a label are grouped under 'default'.

    Args:
        points:
            An iterable of GeoPoints

    Returns:
        Dict of section label to list of GeoPoints
    """
    sections: Dict[str, List[GeoPoint]] = {}
    for point in points:
        sections.setdefault(point.section or DEFAULT_SECTION, []).append(point)

    return sections
