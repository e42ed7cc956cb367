"""GeoJSON codec for the hub's point and polygon geometries.

Geometry values are shapely geometries. Points keep their optional
elevation: ``[x, y]`` decodes to a 2D point and ``[x, y, z]`` to a 3D one.
Polygons are an exterior ring plus zero or more holes, every ring a closed
sequence of 2D positions.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Annotated, Any

from pydantic import PlainSerializer, PlainValidator
from shapely.geometry import LinearRing, Point, Polygon

from omlox.exceptions import MalformedGeometryError

GEOMETRY_POINT = "Point"
GEOMETRY_POLYGON = "Polygon"

_MIN_RING_POSITIONS = 4


def _position(ring: LinearRing) -> list[list[float]]:
    return [[x, y] for x, y in ring.coords]


def encode_geometry(geom: Point | Polygon) -> dict[str, Any]:
    """Encode a shapely point or polygon as a GeoJSON mapping."""
    if isinstance(geom, Point) and not geom.is_empty:
        coordinates = [geom.x, geom.y, geom.z] if geom.has_z else [geom.x, geom.y]
        return {"type": GEOMETRY_POINT, "coordinates": coordinates}
    if isinstance(geom, Polygon) and not geom.is_empty:
        if geom.has_z:
            raise MalformedGeometryError("polygon rings must be 2D")
        rings = [_position(geom.exterior)]
        rings.extend(_position(hole) for hole in geom.interiors)
        return {"type": GEOMETRY_POLYGON, "coordinates": rings}
    raise MalformedGeometryError(f"unsupported geometry: {getattr(geom, 'geom_type', type(geom).__name__)}")


def _number(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise MalformedGeometryError(f"coordinate must be a number, got {value!r}")
    return float(value)


def _coordinates(value: Any, what: str) -> Sequence[Any]:
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        raise MalformedGeometryError(f"{what} must be an array")
    return value


def _decode_point(coordinates: Any) -> Point:
    coords = _coordinates(coordinates, "point coordinates")
    if len(coords) not in (2, 3):
        raise MalformedGeometryError(
            f"point coordinates must have 2 or 3 values, got {len(coords)}"
        )
    return Point(*(_number(c) for c in coords))


def _decode_ring(ring: Any, index: int) -> list[tuple[float, float]]:
    positions = _coordinates(ring, f"ring {index}")
    if len(positions) < _MIN_RING_POSITIONS:
        raise MalformedGeometryError(
            f"ring {index} needs at least {_MIN_RING_POSITIONS} positions, got {len(positions)}"
        )
    points: list[tuple[float, float]] = []
    for position in positions:
        pair = _coordinates(position, f"ring {index} position")
        if len(pair) != 2:
            raise MalformedGeometryError(f"ring {index} positions must be [x, y]")
        points.append((_number(pair[0]), _number(pair[1])))
    if points[0] != points[-1]:
        raise MalformedGeometryError(f"ring {index} is not closed")
    return points


def _decode_polygon(coordinates: Any) -> Polygon:
    rings = _coordinates(coordinates, "polygon coordinates")
    if not rings:
        raise MalformedGeometryError("polygon needs an exterior ring")
    shell, *holes = (_decode_ring(ring, i) for i, ring in enumerate(rings))
    return Polygon(shell, holes)


def decode_geometry(data: Mapping[str, Any]) -> Point | Polygon:
    """Decode a GeoJSON mapping into a shapely point or polygon.

    Raises:
        MalformedGeometryError: on unknown types, wrong coordinate counts,
            short rings or rings that are not explicitly closed.
    """
    if not isinstance(data, Mapping):
        raise MalformedGeometryError("geometry must be an object")
    if "coordinates" not in data:
        raise MalformedGeometryError("geometry is missing coordinates")

    kind = data.get("type")
    if kind == GEOMETRY_POINT:
        return _decode_point(data["coordinates"])
    if kind == GEOMETRY_POLYGON:
        return _decode_polygon(data["coordinates"])
    raise MalformedGeometryError(f"unsupported geometry type: {kind!r}")


def _validator(*kinds: type[Point] | type[Polygon]):
    names = " or ".join(kind.__name__ for kind in kinds)

    def validate(value: Any) -> Point | Polygon:
        if isinstance(value, (Point, Polygon)):
            encode_geometry(value)
            geom = value
        else:
            geom = decode_geometry(value)
        if not isinstance(geom, kinds):
            raise MalformedGeometryError(f"expected {names}, got {geom.geom_type}")
        return geom

    return PlainValidator(validate)


GeometrySerializer = PlainSerializer(encode_geometry)

Geometry = Annotated[
    Point | Polygon,
    _validator(Point, Polygon),
    GeometrySerializer,
]

PointGeometry = Annotated[
    Point,
    _validator(Point),
    GeometrySerializer,
]

PolygonGeometry = Annotated[
    Polygon,
    _validator(Polygon),
    GeometrySerializer,
]
