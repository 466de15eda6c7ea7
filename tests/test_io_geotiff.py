# -*- coding: utf-8 -*-
"""
GeoTIFF Tag Reader Tests - Unit tests for GeoTIFFTagReader.

Uses synthetic GeoTIFF files written with Pillow.

Dependencies
------------
pytest
Pillow

Author
------
chartgeo developers

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-10-17

Modified
--------
2026-10-18
"""

import pytest

from chartgeo.IO.binary import decode_doubles

try:
    from PIL import Image, TiffImagePlugin, TiffTags
    _HAS_PIL = True
except ImportError:
    _HAS_PIL = False

pytestmark = pytest.mark.skipif(not _HAS_PIL, reason="Pillow not installed")

WIDTH, HEIGHT = 64, 48


def _write_chart(filepath, geo_tags):
    ifd = TiffImagePlugin.ImageFileDirectory_v2()
    for tag_id, (tag_type, values) in geo_tags.items():
        ifd.tagtype[tag_id] = tag_type
        ifd[tag_id] = tuple(values)
    Image.new('L', (WIDTH, HEIGHT)).save(
        str(filepath), format='TIFF', tiffinfo=ifd
    )
    return filepath


def _doubles(tags, name):
    return decode_doubles(tags[name]).tolist()


@pytest.fixture
def scale_chart(tmp_path, reference_tags):
    """Chart georeferenced with pixel scale + tiepoints."""
    return _write_chart(tmp_path / 'scale_chart.tif', {
        33550: (TiffTags.DOUBLE, _doubles(reference_tags, 'geo_pixelscale')),
        33922: (TiffTags.DOUBLE, _doubles(reference_tags, 'geo_tiepoints')),
        34735: (TiffTags.SHORT, reference_tags['geo_keydirectory']),
        34736: (TiffTags.DOUBLE, _doubles(reference_tags, 'geo_doubleparams')),
    })


@pytest.fixture
def matrix_chart(tmp_path, matrix_tags):
    """Chart georeferenced with a transformation matrix."""
    return _write_chart(tmp_path / 'matrix_chart.tif', {
        34264: (TiffTags.DOUBLE, _doubles(matrix_tags, 'geo_transmatrix')),
        34735: (TiffTags.SHORT, matrix_tags['geo_keydirectory']),
        34736: (TiffTags.DOUBLE, _doubles(matrix_tags, 'geo_doubleparams')),
    })


class TestGeoTIFFTagReader:
    """Test tag extraction from TIFF files."""

    def test_semantic_names(self, scale_chart):
        from chartgeo.IO.geotiff import GeoTIFFTagReader

        with GeoTIFFTagReader(scale_chart) as reader:
            assert set(reader.tags) == {
                'image_width', 'image_length', 'geo_pixelscale',
                'geo_tiepoints', 'geo_keydirectory', 'geo_doubleparams',
            }

    def test_payload_types(self, scale_chart, reference_tags):
        from chartgeo.IO.geotiff import read_geotiff_tags

        tags = read_geotiff_tags(scale_chart)
        assert tags['image_width'] == WIDTH
        assert tags['image_length'] == HEIGHT
        assert tags['geo_keydirectory'] == tuple(reference_tags['geo_keydirectory'])
        assert isinstance(tags['geo_doubleparams'], bytes)
        assert _doubles(tags, 'geo_doubleparams') == _doubles(
            reference_tags, 'geo_doubleparams'
        )
        assert _doubles(tags, 'geo_tiepoints') == _doubles(
            reference_tags, 'geo_tiepoints'
        )

    def test_close_releases_image(self, scale_chart):
        from chartgeo.IO.geotiff import GeoTIFFTagReader

        reader = GeoTIFFTagReader(scale_chart)
        assert reader.image is not None
        reader.close()
        assert reader.image is None
        reader.close()

    def test_missing_file(self, tmp_path):
        from chartgeo.IO.geotiff import GeoTIFFTagReader

        with pytest.raises(FileNotFoundError):
            GeoTIFFTagReader(tmp_path / 'nope.tif')

    def test_not_an_image(self, tmp_path):
        from chartgeo.IO.geotiff import GeoTIFFTagReader

        bogus = tmp_path / 'bogus.tif'
        bogus.write_bytes(b'not a tiff at all')
        with pytest.raises(ValueError, match="Failed to open TIFF"):
            GeoTIFFTagReader(bogus)

    def test_not_a_tiff(self, tmp_path):
        from chartgeo.IO.geotiff import GeoTIFFTagReader

        png = tmp_path / 'chart.png'
        Image.new('L', (4, 4)).save(str(png), format='PNG')
        with pytest.raises(ValueError, match="not a TIFF"):
            GeoTIFFTagReader(png)

    def test_undecodable_tag_closes_image(self, tmp_path, monkeypatch):
        from chartgeo.IO.geotiff import GeoTIFFTagReader

        ifd = TiffImagePlugin.ImageFileDirectory_v2()
        ifd.tagtype[34736] = TiffTags.ASCII
        ifd[34736] = 'not a number'
        chart = tmp_path / 'text_doubles.tif'
        Image.new('L', (WIDTH, HEIGHT)).save(
            str(chart), format='TIFF', tiffinfo=ifd
        )

        closed = []
        real_close = GeoTIFFTagReader.close

        def recording_close(reader):
            closed.append(reader.image is not None)
            real_close(reader)

        monkeypatch.setattr(GeoTIFFTagReader, 'close', recording_close)
        with pytest.raises(ValueError, match="geo_doubleparams") as excinfo:
            GeoTIFFTagReader(chart)
        assert closed == [True]
        assert excinfo.value.__cause__ is not None


class TestParseGeotiffFile:
    """End to end: file -> parameters -> pixels."""

    def test_pixel_scale_chart(self, scale_chart):
        from chartgeo.IO.geotiff import parse_geotiff_file
        from chartgeo.projection.lcc import coordinate_to_pixel

        params = parse_geotiff_file(scale_chart)
        assert round(params.easting, 9) == 110334.526523672
        assert params.shape == (HEIGHT, WIDTH)
        assert coordinate_to_pixel(params, (-95, 39)) == (5212, 5934)

    def test_matrix_chart_matches(self, scale_chart, matrix_chart):
        from chartgeo.IO.geotiff import parse_geotiff_file

        assert parse_geotiff_file(matrix_chart) == parse_geotiff_file(scale_chart)

    def test_geolocation_from_file(self, scale_chart):
        from chartgeo.geolocation.lcc import LambertConformalGeolocation

        geo = LambertConformalGeolocation.from_file(scale_chart)
        lat, lon, _ = geo.image_to_latlon(5934, 5212)
        assert lat == pytest.approx(38.99943, abs=1e-5)
        assert lon == pytest.approx(-95.0, abs=1e-4)


class TestMissingPillow:
    """Test DependencyError when Pillow is unavailable."""

    def test_reader_requires_pillow(self, scale_chart, monkeypatch):
        from chartgeo.exceptions import DependencyError
        from chartgeo.IO import geotiff

        monkeypatch.setattr(geotiff, '_HAS_PIL', False)
        with pytest.raises(DependencyError, match="Pillow"):
            geotiff.GeoTIFFTagReader(scale_chart)
