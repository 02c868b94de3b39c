"""Tests for the GeoJSON point and line projections."""

import json
from datetime import datetime

import pytest
from dateutil import tz

from gpxkit import Format, GpxFile, Point, Route, Track, UnsupportedFormatError
from gpxkit.config import settings


def _geometry_types(collection):
    return [feature["geometry"]["type"] for feature in collection["features"]]


class TestCollection:
    def test_fixed_members(self):
        collection = GpxFile().to_geojson()
        assert collection["type"] == "FeatureCollection"
        assert collection["name"] == "track_points"
        assert collection["crs"] == {
            "type": "name",
            "properties": {"name": "urn:ogc:def:crs:OGC:1.3:CRS84"},
        }
        assert collection["features"] == []

    def test_default_is_points_mode(self, two_point_gpx):
        assert two_point_gpx.to_geojson() == two_point_gpx.to_geojson(
            Format.GEOJSON_POINTS
        )
        assert two_point_gpx.to_geojson(None) == two_point_gpx.to_geojson("geojson-points")

    @pytest.mark.parametrize("format", [Format.XML, "json", "kml"])
    def test_non_geojson_format_is_rejected(self, two_point_gpx, format):
        with pytest.raises(UnsupportedFormatError):
            two_point_gpx.to_geojson(format)

    def test_string_is_compact_json(self, two_point_gpx):
        settings.pretty_print = True
        text = two_point_gpx.to_geojson_string(Format.GEOJSON_LINES)
        assert "\n" not in text
        assert json.loads(text) == two_point_gpx.to_geojson(Format.GEOJSON_LINES)


class TestPointsMode:
    def test_two_point_scenario(self, two_point_gpx):
        features = two_point_gpx.to_geojson(Format.GEOJSON_POINTS)["features"]

        assert _geometry_types({"features": features}) == ["Point", "Point"]
        assert features[0]["geometry"]["coordinates"] == [17.1, 48.1, 150]
        assert features[1]["geometry"]["coordinates"] == [17.2, 48.2]

    def test_properties(self, two_point_gpx, utc_time):
        two_point_gpx.tracks[0][0][0].time = utc_time

        features = two_point_gpx.to_geojson()["features"]

        assert features[0]["properties"] == {
            "ele": 150.0,
            "track_fid": 0,
            "track_seg_id": 0,
            "track_seg_point_id": 0,
            "time": "2020-01-01T12:00:00+00:00",
        }
        assert features[1]["properties"]["ele"] is None
        assert features[1]["properties"]["time"] is None
        assert features[1]["properties"]["track_seg_point_id"] == 1

    def test_indices_across_tracks_and_segments(self, make_track):
        gpx = GpxFile()
        gpx.tracks.append(
            make_track(
                [Point.from_coordinates(0, 0), Point.from_coordinates(0, 1)],
                [Point.from_coordinates(0, 2)],
            )
        )
        gpx.tracks.append(make_track([Point.from_coordinates(1, 0)]))

        features = gpx.to_geojson()["features"]

        assert [
            (
                f["properties"]["track_fid"],
                f["properties"]["track_seg_id"],
                f["properties"]["track_seg_point_id"],
            )
            for f in features
        ] == [(0, 0, 0), (0, 0, 1), (0, 1, 0), (1, 0, 0)]

    def test_feature_count(self, make_track):
        gpx = GpxFile()
        gpx.tracks.append(make_track([Point.from_coordinates(0, 0)] * 3, [Point.from_coordinates(1, 1)]))
        gpx.tracks.append(make_track([]))
        gpx.waypoints.extend([Point.from_coordinates(5, 5), Point.from_coordinates(6, 6)])

        assert len(gpx.to_geojson()["features"]) == 4 + 2

    def test_routes_are_not_projected(self):
        gpx = GpxFile()
        rte = Route()
        rte.rtepts.append(Point.from_coordinates(1, 2))
        gpx.routes.append(rte)

        assert gpx.to_geojson()["features"] == []

    def test_zero_elevation_is_included(self, make_track):
        gpx = GpxFile()
        gpx.tracks.append(make_track([Point.from_coordinates(1, 2, ele=0)]))

        feature = gpx.to_geojson()["features"][0]

        assert feature["geometry"]["coordinates"] == [2.0, 1.0, 0.0]

    def test_negative_elevation_is_included(self, make_track):
        gpx = GpxFile()
        gpx.tracks.append(make_track([Point.from_coordinates(31.5, 35.5, ele=-430)]))

        feature = gpx.to_geojson()["features"][0]

        assert feature["geometry"]["coordinates"] == [35.5, 31.5, -430.0]


class TestLinesMode:
    def test_two_point_scenario(self, two_point_gpx):
        features = two_point_gpx.to_geojson(Format.GEOJSON_LINES)["features"]

        assert len(features) == 1
        assert features[0]["geometry"] == {
            "type": "LineString",
            "coordinates": [[17.1, 48.1, 150], [17.2, 48.2]],
        }
        assert features[0]["properties"] == {
            "name": "Morning ride",
            "time": None,
            "coordTimes": [None, None],
        }

    def test_segments_are_flattened_in_order(self, make_track):
        gpx = GpxFile()
        gpx.tracks.append(
            make_track(
                [Point.from_coordinates(0, 0), Point.from_coordinates(0, 1)],
                [Point.from_coordinates(0, 2)],
            )
        )

        feature = gpx.to_geojson("geojson-lines")["features"][0]

        assert feature["geometry"]["coordinates"] == [[0.0, 0.0], [1.0, 0.0], [2.0, 0.0]]

    def test_times(self, make_track, utc_time):
        later = datetime(2020, 1, 1, 12, 0, 5, tzinfo=tz.UTC)
        gpx = GpxFile()
        gpx.tracks.append(
            make_track(
                [
                    Point.from_coordinates(0, 0, time=utc_time),
                    Point.from_coordinates(0, 1, time=later),
                ]
            )
        )

        properties = gpx.to_geojson(Format.GEOJSON_LINES)["features"][0]["properties"]

        assert properties["time"] == "2020-01-01T12:00:00+00:00"
        assert properties["coordTimes"] == [
            "2020-01-01T12:00:00+00:00",
            "2020-01-01T12:00:05+00:00",
        ]

    def test_empty_track(self):
        gpx = GpxFile()
        gpx.tracks.append(Track())

        feature = gpx.to_geojson(Format.GEOJSON_LINES)["features"][0]

        assert feature["properties"] == {"name": None, "time": None, "coordTimes": []}
        assert feature["geometry"]["coordinates"] == []

    def test_feature_count(self, make_track):
        gpx = GpxFile()
        gpx.tracks.append(make_track([Point.from_coordinates(0, 0)] * 3))
        gpx.tracks.append(make_track([Point.from_coordinates(1, 1)], [Point.from_coordinates(2, 2)]))
        gpx.waypoints.append(Point.from_coordinates(5, 5))

        types = _geometry_types(gpx.to_geojson(Format.GEOJSON_LINES))

        assert types == ["LineString", "LineString", "Point"]


class TestWaypoints:
    @pytest.mark.parametrize("format", [Format.GEOJSON_POINTS, Format.GEOJSON_LINES])
    def test_waypoints_follow_tracks(self, two_point_gpx, format):
        wpt = Point.from_coordinates(48.3, 17.3, ele=200.5)
        wpt.name = "Summit"
        two_point_gpx.waypoints.append(wpt)

        features = two_point_gpx.to_geojson(format)["features"]

        assert features[-1]["geometry"] == {"type": "Point", "coordinates": [17.3, 48.3, 200.5]}

    def test_properties(self, utc_time):
        wpt = Point.from_coordinates(48.3, 17.3, time=utc_time)
        wpt.type = "peak"
        wpt.name = "Summit"
        wpt.cmt = "Nice view"
        wpt.desc = "The top of the hill"
        gpx = GpxFile()
        gpx.waypoints.append(wpt)

        feature = gpx.to_geojson()["features"][0]

        assert feature["properties"] == {
            "type": "peak",
            "name": "Summit",
            "comment": "Nice view",
            "description": "The top of the hill",
            "ele": None,
            "time": "2020-01-01T12:00:00+00:00",
        }
        assert feature["geometry"]["coordinates"] == [17.3, 48.3]


class TestTimeFormatting:
    def test_output_timezone(self, two_point_gpx, utc_time):
        settings.datetime_timezone_output = "Europe/Bratislava"
        two_point_gpx.tracks[0][0][0].time = utc_time

        feature = two_point_gpx.to_geojson()["features"][0]

        assert feature["properties"]["time"] == "2020-01-01T13:00:00+01:00"

    def test_output_format(self, two_point_gpx, utc_time):
        settings.datetime_format = "%Y-%m-%d %H:%M"
        two_point_gpx.tracks[0][0][0].time = utc_time

        feature = two_point_gpx.to_geojson()["features"][0]

        assert feature["properties"]["time"] == "2020-01-01 12:00"

    def test_naive_times_are_utc(self, two_point_gpx):
        two_point_gpx.tracks[0][0][0].time = datetime(2020, 1, 1, 12, 0)

        feature = two_point_gpx.to_geojson()["features"][0]

        assert feature["properties"]["time"] == "2020-01-01T12:00:00+00:00"
