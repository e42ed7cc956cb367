"""Tests for the GeoJSON geometry codec."""

from __future__ import annotations

import pytest
from shapely.geometry import LineString, Point, Polygon

from omlox.exceptions import MalformedGeometryError, OmloxValidationError
from omlox.geometry import decode_geometry, encode_geometry

SQUARE = [(0.0, 0.0), (10.0, 0.0), (10.0, 10.0), (0.0, 10.0), (0.0, 0.0)]
HOLE = [(2.0, 2.0), (4.0, 2.0), (4.0, 4.0), (2.0, 4.0), (2.0, 2.0)]


def _rings(polygon: Polygon) -> list[list[tuple[float, ...]]]:
    return [list(polygon.exterior.coords)] + [list(hole.coords) for hole in polygon.interiors]


class TestEncode:
    def test_point_2d(self) -> None:
        assert encode_geometry(Point(7.5, 48.1)) == {"type": "Point", "coordinates": [7.5, 48.1]}

    def test_point_3d(self) -> None:
        assert encode_geometry(Point(7.5, 48.1, 1.5)) == {
            "type": "Point",
            "coordinates": [7.5, 48.1, 1.5],
        }

    def test_polygon_with_hole(self) -> None:
        encoded = encode_geometry(Polygon(SQUARE, [HOLE]))
        assert encoded["type"] == "Polygon"
        assert encoded["coordinates"] == [
            [list(p) for p in SQUARE],
            [list(p) for p in HOLE],
        ]

    def test_polygon_rings_are_closed(self) -> None:
        encoded = encode_geometry(Polygon(SQUARE[:-1]))
        exterior = encoded["coordinates"][0]
        assert exterior[0] == exterior[-1]

    def test_unsupported_kind(self) -> None:
        with pytest.raises(MalformedGeometryError, match="unsupported geometry"):
            encode_geometry(LineString([(0, 0), (1, 1)]))  # type: ignore[arg-type]

    def test_empty_point(self) -> None:
        with pytest.raises(MalformedGeometryError):
            encode_geometry(Point())

    def test_3d_polygon(self) -> None:
        with pytest.raises(MalformedGeometryError):
            encode_geometry(Polygon([(0, 0, 1), (1, 0, 1), (1, 1, 1), (0, 0, 1)]))


class TestDecode:
    def test_point_2d(self) -> None:
        point = decode_geometry({"type": "Point", "coordinates": [1, 2]})
        assert isinstance(point, Point)
        assert not point.has_z
        assert (point.x, point.y) == (1.0, 2.0)

    def test_point_3d(self) -> None:
        point = decode_geometry({"type": "Point", "coordinates": [1.0, 2.0, 3.0]})
        assert isinstance(point, Point)
        assert point.has_z
        assert point.z == 3.0

    @pytest.mark.parametrize("coordinates", [[], [1.0], [1.0, 2.0, 3.0, 4.0]])
    def test_point_wrong_length(self, coordinates: list[float]) -> None:
        with pytest.raises(MalformedGeometryError):
            decode_geometry({"type": "Point", "coordinates": coordinates})

    def test_point_non_numeric(self) -> None:
        with pytest.raises(MalformedGeometryError):
            decode_geometry({"type": "Point", "coordinates": ["1", 2]})

    def test_point_bool_coordinate(self) -> None:
        with pytest.raises(MalformedGeometryError):
            decode_geometry({"type": "Point", "coordinates": [True, 2]})

    def test_polygon_with_hole(self) -> None:
        polygon = decode_geometry(
            {"type": "Polygon", "coordinates": [[list(p) for p in SQUARE], [list(p) for p in HOLE]]}
        )
        assert isinstance(polygon, Polygon)
        assert _rings(polygon) == [SQUARE, HOLE]

    def test_polygon_short_ring(self) -> None:
        with pytest.raises(MalformedGeometryError, match="at least 4"):
            decode_geometry({"type": "Polygon", "coordinates": [[[0, 0], [1, 0], [0, 0]]]})

    def test_polygon_open_ring(self) -> None:
        with pytest.raises(MalformedGeometryError, match="not closed"):
            decode_geometry(
                {"type": "Polygon", "coordinates": [[[0, 0], [1, 0], [1, 1], [0, 1]]]}
            )

    def test_polygon_open_hole(self) -> None:
        open_hole = [list(p) for p in HOLE[:-1]] + [[3.0, 3.0]]
        with pytest.raises(MalformedGeometryError, match="ring 1"):
            decode_geometry(
                {"type": "Polygon", "coordinates": [[list(p) for p in SQUARE], open_hole]}
            )

    def test_polygon_3d_position(self) -> None:
        ring = [[x, y, 0.0] for x, y in SQUARE]
        with pytest.raises(MalformedGeometryError):
            decode_geometry({"type": "Polygon", "coordinates": [ring]})

    def test_polygon_without_rings(self) -> None:
        with pytest.raises(MalformedGeometryError):
            decode_geometry({"type": "Polygon", "coordinates": []})

    def test_unknown_type(self) -> None:
        with pytest.raises(MalformedGeometryError, match="unsupported geometry type"):
            decode_geometry({"type": "LineString", "coordinates": [[0, 0], [1, 1]]})

    def test_missing_coordinates(self) -> None:
        with pytest.raises(MalformedGeometryError):
            decode_geometry({"type": "Point"})

    def test_not_an_object(self) -> None:
        with pytest.raises(MalformedGeometryError):
            decode_geometry([1.0, 2.0])  # type: ignore[arg-type]

    def test_is_a_validation_error(self) -> None:
        with pytest.raises(OmloxValidationError):
            decode_geometry({"type": "Point", "coordinates": [1.0]})


class TestRoundTrip:
    @pytest.mark.parametrize(
        "geom",
        [
            Point(7.815694, 48.13021599999995),
            Point(7.815694, 48.13021599999995, 1.5),
            Point(-0.1, 0.30000000000000004, -12.25),
        ],
    )
    def test_point(self, geom: Point) -> None:
        decoded = decode_geometry(encode_geometry(geom))
        assert decoded.has_z == geom.has_z
        assert list(decoded.coords) == list(geom.coords)

    def test_polygon(self) -> None:
        geom = Polygon(
            [
                (7.815694, 48.13021599999995),
                (7.815724999999997, 48.13031),
                (7.816582, 48.13018799999995),
                (7.816551, 48.13009399999996),
                (7.815694, 48.13021599999995),
            ]
        )
        decoded = decode_geometry(encode_geometry(geom))
        assert _rings(decoded) == _rings(geom)

    def test_polygon_with_holes(self) -> None:
        second_hole = [(6.0, 6.0), (8.0, 6.0), (8.0, 8.0), (6.0, 6.0)]
        geom = Polygon(SQUARE, [HOLE, second_hole])
        decoded = decode_geometry(encode_geometry(geom))
        assert _rings(decoded) == [SQUARE, HOLE, second_hole]
