"""Tests for report model parsing and the ReportKind mask."""

from __future__ import annotations

import json
from datetime import UTC, datetime

import pytest
from pydantic import ValidationError

from conftest import DEVICES_MSG, TPV_MSG, VERSION_MSG
from pygpsd.models import (
    REPORT_MODELS,
    DevicesReport,
    ErrorReport,
    FixMode,
    PseudorangeNoiseReport,
    PulsePerSecondReport,
    ReportKind,
    Satellite,
    SkyViewReport,
    TimePositionVelocityReport,
    VehicleAttitudeReport,
    VersionReport,
)

# ------------------------------------------------------------------
# ReportKind
# ------------------------------------------------------------------


class TestReportKind:
    def test_from_class(self) -> None:
        assert ReportKind.from_class("TPV") == ReportKind.TPV
        assert ReportKind.from_class("DEVICES") == ReportKind.DEVICES

    def test_from_class_rejects_unknown_and_composites(self) -> None:
        assert ReportKind.from_class("WATCH") is None
        assert ReportKind.from_class("ALL") is None
        assert ReportKind.from_class("tpv") is None
        assert ReportKind.from_class("") is None

    def test_report_class_roundtrips(self) -> None:
        for kind in ReportKind.ALL.single_kinds():
            assert ReportKind.from_class(kind.report_class) == kind

    def test_report_class_of_composite_raises(self) -> None:
        with pytest.raises(ValueError):
            _ = (ReportKind.TPV | ReportKind.SKY).report_class

    def test_single_kinds(self) -> None:
        mask = ReportKind.SKY | ReportKind.TPV
        assert mask.single_kinds() == (ReportKind.TPV, ReportKind.SKY)
        assert ReportKind(0).single_kinds() == ()
        assert len(ReportKind.ALL.single_kinds()) == 8

    def test_every_kind_has_a_model(self) -> None:
        assert set(REPORT_MODELS) == set(ReportKind.ALL.single_kinds())


# ------------------------------------------------------------------
# TPV
# ------------------------------------------------------------------


class TestTimePositionVelocityReport:
    def test_full_payload(self) -> None:
        rpt = TimePositionVelocityReport.model_validate_json(TPV_MSG)
        assert rpt == TimePositionVelocityReport(
            device="/dev/gps0",
            mode=FixMode.MODE_3D,
            time=datetime(2020, 3, 3, 21, 54, 49, tzinfo=UTC),
            ept=0.005,
            lat=40.7828687,
            lon=-73.9675438,
            alt=166.395,
            epx=3.271,
            epy=4.863,
            epv=14.78,
            track=0.0,
            speed=0.0,
            climb=0.0,
            eps=0.19,
            epc=0.58,
        )
        assert rpt.class_ == "TPV"
        assert rpt.tag is None
        assert rpt.epd is None
        assert rpt.has_fix

    def test_unknown_mode_falls_back(self) -> None:
        rpt = TimePositionVelocityReport.model_validate_json(json.dumps({"class": "TPV", "mode": 9}))
        assert rpt.mode == FixMode.UNKNOWN
        assert not rpt.has_fix

    def test_defaults_to_no_value_seen(self) -> None:
        rpt = TimePositionVelocityReport.model_validate_json(json.dumps({"class": "TPV"}))
        assert rpt.mode == FixMode.NO_VALUE_SEEN

    def test_bad_field_type_rejected(self) -> None:
        with pytest.raises(ValidationError):
            TimePositionVelocityReport.model_validate_json(json.dumps({"class": "TPV", "lat": "north"}))

    @pytest.mark.parametrize(
        "fields",
        [
            {"lat": "40.5"},
            {"time": 1583272489},
            {"mode": "garbage"},
            {"mode": "3"},
            {"mode": True},
            {"device": 7},
        ],
    )
    def test_mismatched_json_type_rejected(self, fields: dict[str, object]) -> None:
        with pytest.raises(ValidationError):
            TimePositionVelocityReport.model_validate_json(json.dumps({"class": "TPV", **fields}))

    def test_wrong_class_rejected(self) -> None:
        with pytest.raises(ValidationError):
            TimePositionVelocityReport.model_validate_json(json.dumps({"class": "SKY"}))

    def test_frozen(self) -> None:
        rpt = TimePositionVelocityReport.model_validate_json(json.dumps({"class": "TPV", "lat": 1.0}))
        with pytest.raises(ValidationError):
            rpt.lat = 2.0  # type: ignore[misc]


# ------------------------------------------------------------------
# Other reports
# ------------------------------------------------------------------


def test_version_report() -> None:
    rpt = VersionReport.model_validate_json(VERSION_MSG)
    assert rpt == VersionReport(release="3.17", rev="3.17", proto_major=3, proto_minor=12)
    assert rpt.protocol == (3, 12)
    assert rpt.remote is None


def test_sky_view_report_satellites() -> None:
    payload = {
        "class": "SKY",
        "device": "/dev/gps0",
        "time": "2020-03-03T21:54:49.000Z",
        "hdop": 0.9,
        "pdop": 1.6,
        "satellites": [
            {"PRN": 5, "el": 31, "az": 86, "ss": 45, "used": True},
            {"PRN": 13, "el": 8, "az": 310, "ss": 0, "used": False},
        ],
    }
    rpt = SkyViewReport.model_validate_json(json.dumps(payload))
    assert rpt.hdop == 0.9
    assert rpt.satellites == (
        Satellite(prn=5.0, el=31.0, az=86.0, ss=45.0, used=True),
        Satellite(prn=13.0, el=8.0, az=310.0, ss=0.0, used=False),
    )
    assert [sat.prn for sat in rpt.used_satellites] == [5.0]


@pytest.mark.parametrize("satellite", [{"PRN": "7"}, {"PRN": 7, "used": 1}])
def test_satellite_mismatched_json_type_rejected(satellite: dict[str, object]) -> None:
    with pytest.raises(ValidationError):
        SkyViewReport.model_validate_json(json.dumps({"class": "SKY", "satellites": [satellite]}))


def test_gpsd_enum_fallback_only_for_integers() -> None:
    assert FixMode(42) is FixMode.UNKNOWN
    with pytest.raises(ValueError):
        FixMode("garbage")


def test_devices_report() -> None:
    rpt = DevicesReport.model_validate_json(DEVICES_MSG)
    assert len(rpt.devices) == 1
    device = rpt.devices[0]
    assert device.path == "/dev/gps0"
    assert device.driver == "SiRF"
    assert device.bps == 4800
    assert device.stopbits == 1
    assert device.cycle == 1.0
    assert device.activated == "2020-03-03T21:54:51.357Z"
    assert device.mincycle is None


def test_pseudorange_noise_report() -> None:
    rpt = PseudorangeNoiseReport.model_validate_json(
        json.dumps({"class": "GST", "rms": 2.1, "major": 3.2, "minor": 1.1, "orient": 45.0, "lat": 1.5})
    )
    assert (rpt.rms, rpt.major, rpt.minor, rpt.orient, rpt.lat) == (2.1, 3.2, 1.1, 45.0, 1.5)


def test_vehicle_attitude_report() -> None:
    rpt = VehicleAttitudeReport.model_validate_json(
        json.dumps({"class": "ATT", "heading": 14223.00, "mag_st": "N", "pitch": 169.0, "mag_x": 2454.0, "temperature": 21.5})
    )
    assert rpt.heading == 14223.0
    assert rpt.mag_st == "N"
    assert rpt.mag_x == 2454.0
    assert rpt.gyro_y is None


def test_pulse_per_second_report() -> None:
    rpt = PulsePerSecondReport.model_validate_json(
        json.dumps({"class": "PPS", "device": "/dev/pps0", "real_sec": 1583272489, "real_musec": 0, "clock_sec": 1583272489, "clock_musec": 153})
    )
    assert rpt.real_sec == 1583272489.0
    assert rpt.clock_musec == 153.0


def test_error_report() -> None:
    rpt = ErrorReport.model_validate_json(json.dumps({"class": "ERROR", "message": "Unrecognized request '?FOO'"}))
    assert rpt.message == "Unrecognized request '?FOO'"


def test_unknown_fields_ignored() -> None:
    payload = json.loads(VERSION_MSG)
    payload["future_field"] = {"nested": True}
    assert VersionReport.model_validate_json(json.dumps(payload)) == VersionReport.model_validate_json(VERSION_MSG)
