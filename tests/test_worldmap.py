from __future__ import annotations

import pytest
from shapely.geometry import LineString, MultiLineString

from termglobe.worldmap import WorldMapError, load_outline


class FeatureStub:
    created = []

    def __init__(self, category, name, scale):
        self.created.append((category, name, scale))

    def geometries(self):
        return iter([
            LineString([(0, 0), (10, 5)]),
            MultiLineString([[(1, 1), (2, 2)], [(3, 3), (4, 4)]]),
        ])


class OfflineFeature:
    def __init__(self, *args):
        pass

    def geometries(self):
        raise OSError("download failed")


@pytest.fixture
def cfeature():
    import cartopy.feature
    return cartopy.feature


def test_flattens_coastline_vertices(monkeypatch, cfeature):
    FeatureStub.created = []
    monkeypatch.setattr(cfeature, "NaturalEarthFeature", FeatureStub)

    outline = load_outline("110m")

    assert outline == ((0.0, 0.0), (10.0, 5.0), (1.0, 1.0), (2.0, 2.0), (3.0, 3.0), (4.0, 4.0))
    assert FeatureStub.created == [("physical", "coastline", "110m")]


def test_outline_cached_per_resolution(monkeypatch, cfeature):
    FeatureStub.created = []
    monkeypatch.setattr(cfeature, "NaturalEarthFeature", FeatureStub)

    first = load_outline("50m")
    second = load_outline("50m")

    assert first is second
    assert len(FeatureStub.created) == 1


def test_download_failure_wrapped(monkeypatch, cfeature):
    monkeypatch.setattr(cfeature, "NaturalEarthFeature", OfflineFeature)

    with pytest.raises(WorldMapError) as info:
        load_outline("10m")

    assert isinstance(info.value.__cause__, OSError)


def test_unknown_resolution():
    with pytest.raises(WorldMapError, match="unknown resolution"):
        load_outline("5m")


class ShapefileException(Exception):
    pass


class CorruptFeature:
    def __init__(self, *args):
        pass

    def geometries(self):
        raise ShapefileException("Unable to open coastline.shp")


def test_corrupt_shapefile_wrapped(monkeypatch, cfeature):
    monkeypatch.setattr(cfeature, "NaturalEarthFeature", CorruptFeature)

    with pytest.raises(WorldMapError, match="Unable to open"):
        load_outline("50m")
