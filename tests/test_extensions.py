"""Tests for extensions and the per-render namespace registry."""

import logging

from lxml import etree

from gpxkit import ExtensionNamespace, Extensions, RenderContext, TrackPointExtension
from gpxkit.extensions import TRACK_POINT_EXTENSION_V1

EXAMPLE = ExtensionNamespace("ex", "http://example.com/ext/1", "http://example.com/ext/1/ext.xsd")


class TestRenderContext:
    def test_dedupes_by_prefix(self):
        context = RenderContext()
        context.use_namespace(EXAMPLE)
        context.use_namespace(EXAMPLE)

        assert list(context.used_namespaces) == ["ex"]
        assert context.nsmap == {"ex": EXAMPLE.uri}

    def test_schema_location_is_filled_in_later(self):
        context = RenderContext()
        context.use_namespace(ExtensionNamespace("ex", EXAMPLE.uri))
        context.use_namespace(EXAMPLE)

        assert context.used_namespaces["ex"].schema_location == EXAMPLE.schema_location

    def test_conflicting_prefix_keeps_first(self, caplog):
        context = RenderContext()
        context.use_namespace(EXAMPLE)

        with caplog.at_level(logging.WARNING, logger="gpxkit.context"):
            context.use_namespace(ExtensionNamespace("ex", "urn:other"))

        assert context.nsmap == {"ex": EXAMPLE.uri}
        assert "urn:other" in caplog.text


class TestExtensions:
    def test_empty_value_tree(self):
        assert Extensions().to_dict() == {
            "trackpointextension": None,
            "unsupported": {},
            "elements": [],
        }

    def test_build_registers_namespaces(self):
        extensions = Extensions()
        extensions.track_point_extension = TrackPointExtension()
        extensions.track_point_extension.speed = 4.25
        rating = extensions.add_element(EXAMPLE, "rating")
        etree.SubElement(rating, f"{{{EXAMPLE.uri}}}stars").text = "5"
        context = RenderContext()

        element = extensions._build(context)

        assert context.used_namespaces == {
            "gpxtpx": TRACK_POINT_EXTENSION_V1,
            "ex": EXAMPLE,
        }
        assert etree.QName(element).localname == "extensions"
        assert extensions.to_dict()["elements"] == [{"ex:rating": {"ex:stars": "5"}}]

    def test_build_does_not_consume_elements(self):
        extensions = Extensions()
        extensions.add_element(EXAMPLE, "rating", "5")

        extensions._build(RenderContext())
        extensions._build(RenderContext())

        assert len(extensions.elements) == 1
        assert extensions.elements[0].getparent() is None

    def test_track_point_extension_value_tree(self):
        extension = TrackPointExtension()
        extension.hr = 150
        extension.atemp = 21.5

        tree = extension.to_dict()

        assert tree["hr"] == 150.0
        assert tree["atemp"] == 21.5
        assert tree["cad"] is None
        assert list(tree) == list(TrackPointExtension.fields)
