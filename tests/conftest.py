"""Shared fixtures for gpxkit tests."""

import textwrap
from datetime import datetime

import pytest
from dateutil import tz

from gpxkit import GpxFile, Point, Track, TrackSegment
from gpxkit.config import settings


@pytest.fixture(autouse=True)
def restore_settings():
    saved = settings.model_dump()
    yield
    for key, value in saved.items():
        setattr(settings, key, value)


def _make_track(*segments, name=None):
    trk = Track()
    trk.name = name
    for points in segments:
        trkseg = TrackSegment()
        trkseg.trkpts.extend(points)
        trk.trksegs.append(trkseg)
    return trk


@pytest.fixture
def make_track():
    return _make_track


@pytest.fixture
def two_point_gpx():
    """One track, one segment: the first point has an elevation, the second not."""
    gpx = GpxFile()
    gpx.tracks.append(
        _make_track(
            [
                Point.from_coordinates(48.1, 17.1, ele=150),
                Point.from_coordinates(48.2, 17.2),
            ],
            name="Morning ride",
        )
    )
    return gpx


@pytest.fixture
def utc_time():
    return datetime(2020, 1, 1, 12, 0, tzinfo=tz.UTC)


@pytest.fixture
def sample_gpx_string():
    return textwrap.dedent("""\
        <?xml version="1.0" encoding="UTF-8"?>
        <gpx xmlns="http://www.topografix.com/GPX/1/1"
             xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance"
             xmlns:gpxtpx="http://www.garmin.com/xmlschemas/TrackPointExtension/v1"
             xmlns:ex="http://example.com/ext/1"
             version="1.1" creator="Test Device"
             xsi:schemaLocation="http://www.topografix.com/GPX/1/1 http://www.topografix.com/GPX/1/1/gpx.xsd http://example.com/ext/1 http://example.com/ext/1/ext.xsd">
          <metadata>
            <name>Sample</name>
            <desc>A sample file</desc>
            <author>
              <name>Jane</name>
              <email id="jane" domain="example.com"/>
              <link href="https://example.com/jane"><text>Jane's page</text></link>
            </author>
            <copyright author="Jane"><year>2020</year><license>https://example.com/license</license></copyright>
            <time>2020-01-01T10:00:00Z</time>
            <keywords>sample, test</keywords>
            <bounds minlat="48.0" minlon="17.0" maxlat="48.5" maxlon="17.5"/>
          </metadata>
          <wpt lat="48.3" lon="17.3">
            <ele>200.5</ele>
            <time>2020-01-01T11:00:00Z</time>
            <name>Summit</name>
            <cmt>Nice view</cmt>
            <desc>The top of the hill</desc>
            <sym>Flag</sym>
            <type>peak</type>
          </wpt>
          <rte>
            <name>Plan</name>
            <number>1</number>
            <rtept lat="48.0" lon="17.0"/>
            <rtept lat="48.1" lon="17.1"/>
          </rte>
          <trk>
            <name>Ride</name>
            <trkseg>
              <trkpt lat="48.1" lon="17.1">
                <ele>150</ele>
                <time>2020-01-01T12:00:00Z</time>
                <extensions>
                  <gpxtpx:TrackPointExtension>
                    <gpxtpx:hr>140</gpxtpx:hr>
                    <gpxtpx:cad>85</gpxtpx:cad>
                  </gpxtpx:TrackPointExtension>
                </extensions>
              </trkpt>
              <trkpt lat="48.2" lon="17.2">
                <time>2020-01-01T12:00:05Z</time>
              </trkpt>
            </trkseg>
            <trkseg>
              <trkpt lat="48.3" lon="17.3"/>
            </trkseg>
          </trk>
          <extensions>
            <ex:rating>5</ex:rating>
            <note>plain value</note>
          </extensions>
        </gpx>
    """)
