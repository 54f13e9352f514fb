"""Tests for parsing <images> [<cameras>] <prefix> [<dem>]."""

import logging

import pytest

from stereo_args.core.contracts import GeoHeader
from stereo_args.core.exceptions import PathValidationError, UsageError
from stereo_args.core.positional import parse_multiview_cmd_files


def no_dem(path):
    return None


def dem_named(name):
    header = GeoHeader(path=name, crs="EPSG:4326", transform=(1, 0, 0, 0, -1, 0), width=2, height=2)
    return lambda path: header if path == name else None


class TestShape:
    def test_images_and_cameras(self, make_files):
        """Paired images and cameras with a prefix."""
        make_files("a.tif", "b.tif", "a.tsai", "b.tsai")
        out = parse_multiview_cmd_files(["a.tif", "b.tif", "a.tsai", "b.tsai", "out/run"], load_georef=no_dem)
        assert out.images == ["a.tif", "b.tif"]
        assert out.cameras == ["a.tsai", "b.tsai"]
        assert out.prefix == "out/run"
        assert out.dem_path == ""

    def test_cubes_only(self, make_files):
        """Cubes alone need no cameras."""
        make_files("a.cub", "b.cub")
        out = parse_multiview_cmd_files(["a.cub", "b.cub", "out/run"], load_georef=no_dem)
        assert out.images == ["a.cub", "b.cub"]
        assert out.cameras == []

    def test_too_few_inputs(self, make_files):
        """Fewer than three inputs is a usage error."""
        make_files("a.tif")
        with pytest.raises(UsageError) as exc:
            parse_multiview_cmd_files(["a.tif", "out/run"], load_georef=no_dem)
        assert str(exc.value) == "Expecting at least three inputs to stereo.\n"

    def test_empty_tokens(self):
        """No tokens at all is a usage error."""
        with pytest.raises(UsageError, match="at least three inputs"):
            parse_multiview_cmd_files([], load_georef=no_dem)

    def test_dem_does_not_count_towards_minimum(self, make_files):
        """The DEM is removed before counting."""
        make_files("a.tif")
        with pytest.raises(UsageError, match="at least three inputs"):
            parse_multiview_cmd_files(["a.tif", "out/run", "dem.tif"], load_georef=dem_named("dem.tif"))

    @pytest.mark.parametrize("prefix", ["b.tsai", "c.tif", "c.cub", "c.xml"])
    def test_prefix_cannot_be_image_or_camera(self, make_files, prefix):
        """Image or camera names cannot be the prefix."""
        make_files("a.tif", "b.tif", "a.tsai")
        with pytest.raises(UsageError) as exc:
            parse_multiview_cmd_files(["a.tif", "b.tif", "a.tsai", prefix], load_georef=no_dem)
        assert str(exc.value) == f"Invalid output prefix: {prefix}.\n"

    def test_empty_prefix(self, make_files):
        """An empty prefix is rejected."""
        make_files("a.tif", "b.tif")
        with pytest.raises(UsageError, match="Invalid output prefix: ."):
            parse_multiview_cmd_files(["a.tif", "b.tif", ""], load_georef=no_dem)

    def test_odd_pairing(self, make_files):
        """Separator errors propagate."""
        make_files("a.tif", "b.tif", "a.tsai")
        with pytest.raises(UsageError, match="as many images as cameras"):
            parse_multiview_cmd_files(["a.tif", "b.tif", "a.tsai", "out/run"], load_georef=no_dem)


class TestDem:
    def test_last_token_as_dem(self, make_files):
        """A georeferenced last token becomes the DEM."""
        make_files("a.tif", "b.tif")
        out = parse_multiview_cmd_files(
            ["a.tif", "b.tif", "out/run", "terrain.tif"], load_georef=dem_named("terrain.tif")
        )
        assert out.dem_path == "terrain.tif"
        assert out.prefix == "out/run"
        assert out.images == ["a.tif", "b.tif"]
        assert out.cameras == []

    def test_real_geotiff(self, make_files, geotiff):
        """A real GeoTIFF on disk is detected."""
        make_files("a.tif", "b.tif")
        out = parse_multiview_cmd_files(["a.tif", "b.tif", "out/run", geotiff.name])
        assert out.dem_path == "terrain.tif"
        assert out.images == ["a.tif", "b.tif"]

    def test_loader_only_sees_last_token(self, make_files):
        """Only the last token is checked for a georeference."""
        make_files("a.tif", "b.tif")
        seen = []

        def loader(path):
            seen.append(path)
            return None

        parse_multiview_cmd_files(["a.tif", "b.tif", "out/run"], load_georef=loader)
        assert seen == ["out/run"]


class TestExistence:
    def test_missing_image(self, make_files):
        """A missing image is reported by name."""
        make_files("a.tif", "a.tsai", "b.tsai")
        with pytest.raises(PathValidationError) as exc:
            parse_multiview_cmd_files(["a.tif", "b.tif", "a.tsai", "b.tsai", "out/run"], load_georef=no_dem)
        assert str(exc.value) == "Cannot find the image file: b.tif.\n"

    def test_missing_camera(self, make_files):
        """A missing camera is reported by name."""
        make_files("a.tif", "b.tif", "a.tsai")
        with pytest.raises(PathValidationError) as exc:
            parse_multiview_cmd_files(["a.tif", "b.tif", "a.tsai", "b.tsai", "out/run"], load_georef=no_dem)
        assert str(exc.value) == "Cannot find the camera file: b.tsai.\n"

    def test_first_missing_image_reported(self, workdir):
        """The first missing image is the one reported."""
        with pytest.raises(PathValidationError, match="image file: a.tif"):
            parse_multiview_cmd_files(["a.tif", "b.tif", "out/run"], load_georef=no_dem)

    def test_existing_prefix_only_warns(self, make_files, caplog):
        """A prefix that exists as a file only logs a warning."""
        make_files("a.tif", "b.tif", "out/run")
        with caplog.at_level(logging.WARNING, logger="stereo_args.core.positional"):
            out = parse_multiview_cmd_files(["a.tif", "b.tif", "out/run"], load_georef=no_dem)
        assert out.prefix == "out/run"
        assert "output prefix exists as a file: out/run" in caplog.text
