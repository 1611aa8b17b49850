"""
Batch ingestion: annotate, cap confidence, drop invalid/unresolved records.
"""
import pytest

from whale_water.core.ingest import annotate_sighting, is_likely_on_land, resolve_sightings
from whale_water.core.models import SightingRecord
from whale_water.core.resolver import resolve_coordinates


def _records():
    return [
        SightingRecord(lat=47.60, lon=-122.40, species="Orca", confidence=0.9, sighting_index=1),
        SightingRecord(lat=47.57, lon=-122.65, species="Orca", confidence=0.9, sighting_index=2),
        SightingRecord(lat=46.5, lon=-122.0, location="Near Commencement Bay ferry dock", sighting_index=3),
        SightingRecord(lat=46.5, lon=-122.0, location="somewhere near Olympia", sighting_index=4),
        SightingRecord(lat=95.0, lon=-122.0, sighting_index=5),
    ]


class TestAnnotateSighting:
    def test_adjusted_confidence_capped(self):
        rec = SightingRecord(lat=47.57, lon=-122.65, confidence=0.95)
        result = resolve_coordinates(rec.lat, rec.lon)
        out = annotate_sighting(rec, result, confidence_cap=0.5)
        assert out.confidence == 0.5
        assert out.original_lat == 47.57
        assert out.original_lon == -122.65
        assert (out.lat, out.lon) == (result.lat, result.lon)
        assert out.adjustment_type == "snapped"
        assert rec.confidence == 0.95

    def test_unadjusted_confidence_kept(self):
        rec = SightingRecord(lat=47.60, lon=-122.40, confidence=0.95)
        out = annotate_sighting(rec, resolve_coordinates(rec.lat, rec.lon), confidence_cap=0.5)
        assert out.confidence == 0.95
        assert not out.was_adjusted

    def test_low_confidence_not_raised(self):
        rec = SightingRecord(lat=47.57, lon=-122.65, confidence=0.2)
        out = annotate_sighting(rec, resolve_coordinates(rec.lat, rec.lon), confidence_cap=0.6)
        assert out.confidence == 0.2

    def test_extra_columns_preserved(self):
        rec = SightingRecord(lat=47.60, lon=-122.40, ingest_timestamp="2024-07-01")
        out = annotate_sighting(rec, resolve_coordinates(rec.lat, rec.lon))
        assert out.model_dump()["ingest_timestamp"] == "2024-07-01"


class TestResolveSightings:
    def test_mixed_batch(self):
        report = resolve_sightings(_records(), max_workers=2)
        assert [s.sighting_index for s in report.sightings] == [1, 2, 3]
        assert [s.adjustment_type for s in report.sightings] == ["none", "snapped", "known_location"]
        assert report.counts == {"none": 1, "snapped": 1, "known_location": 1, "unresolved": 1}
        assert report.dropped_invalid == 1
        assert report.dropped_unresolved == 1

    def test_confidence_cap_from_settings(self):
        report = resolve_sightings(_records(), confidence_cap=0.6)
        conf = {s.sighting_index: s.confidence for s in report.sightings}
        assert conf[1] == 0.9
        assert conf[2] == 0.6
        assert conf[3] == 0.6

    def test_keep_unresolved(self):
        report = resolve_sightings(_records(), drop_unresolved=False)
        assert [s.sighting_index for s in report.sightings] == [1, 2, 3, 4]
        unresolved = report.sightings[3]
        assert unresolved.adjustment_type == "unresolved"
        assert (unresolved.lat, unresolved.lon) == (46.5, -122.0)
        assert unresolved.confidence == 0.8
        assert report.dropped_unresolved == 0

    def test_empty(self):
        report = resolve_sightings([])
        assert report.sightings == []
        assert report.summary()["kept"] == 0

    def test_parallel_matches_sequential(self):
        records = _records()[:4] * 50
        report = resolve_sightings(records, max_workers=8, drop_unresolved=False)
        expected = [resolve_coordinates(r.lat, r.lon, r.location) for r in records]
        assert [(s.lat, s.lon) for s in report.sightings] == [(e.lat, e.lon) for e in expected]

    def test_summary(self):
        summary = resolve_sightings(_records()).summary()
        assert summary["kept"] == 3
        assert summary["n_snapped"] == 1
        assert summary["dropped_invalid"] == 1


class TestRawRows:
    def test_rows_without_coordinates_dropped(self):
        rows = [
            {"lat": None, "lon": None, "confidence": None},
            {"lat": 47.60, "lon": -122.40, "species": "Orca"},
            {"species": "Minke"},
        ]
        report = resolve_sightings(rows)
        assert [s.species for s in report.sightings] == ["Orca"]
        assert report.dropped_invalid == 2

    @pytest.mark.parametrize("raw", [None, 0, "", "n/a", float("nan")])
    def test_missing_confidence_defaults(self, raw):
        rec = SightingRecord(lat=47.60, lon=-122.40, confidence=raw)
        assert rec.confidence == 0.8

    def test_explicit_confidence_kept(self):
        assert SightingRecord(lat=47.60, lon=-122.40, confidence="0.45").confidence == 0.45

    def test_blank_text_fields_default(self):
        rec = SightingRecord(lat=47.60, lon=-122.40, species=None, pod="", location=None)
        assert (rec.species, rec.pod, rec.location) == ("Unknown", "Unknown", "")


class TestLandPrefilter:
    @pytest.mark.parametrize(
        "lat,lon",
        [(47.57, -122.65), (47.63, -122.32), (47.44, -122.45), (47.8, -123.4), (49.1, -122.8), (46.9, -122.5)],
    )
    def test_likely_on_land(self, lat, lon):
        assert is_likely_on_land(lat, lon)

    @pytest.mark.parametrize("lat,lon", [(47.60, -122.40), (48.0, -122.6), (47.3, -122.5)])
    def test_water_points_pass(self, lat, lon):
        assert not is_likely_on_land(lat, lon)

    def test_prefilter_in_batch(self):
        report = resolve_sightings(_records(), land_prefilter=True)
        assert [s.sighting_index for s in report.sightings] == [1]
        assert report.dropped_on_land == 3
        assert report.dropped_invalid == 1
        assert report.summary()["dropped_on_land"] == 3

    def test_prefilter_off_by_default(self):
        report = resolve_sightings(_records())
        assert report.dropped_on_land == 0
