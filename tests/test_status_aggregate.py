from gnsstrack.status.aggregate import aggregate, carrier_frequencies_mhz
from gnsstrack.status.normalize import normalize_batch
from gnsstrack.status.types import RawMeasurementSample


def _batch(*rows):
    return normalize_batch(
        RawMeasurementSample(svid=svid, constellation=name, cn0_dbhz=cn0, carrier_frequency_hz=hz)
        for svid, name, cn0, hz in rows
    )


def test_summary_counts_and_average() -> None:
    sats = _batch(
        (3, "GPS", 35.0, 1575.42e6),
        (9, "GPS", 25.0, 1176.45e6),
        (15, "GLONASS", None, None),
        (4, "GPS", 28.0, 1575.4201e6),
    )
    status = aggregate(sats)

    assert status.is_gnss_supported
    assert status.satellites_visible == 4
    assert status.satellites_used_in_fix == 1
    assert status.average_signal_to_noise_ratio == 29.3
    assert status.supported_constellations == ("GPS", "GLONASS")
    assert status.carrier_frequencies == (1176.45, 1575.42)
    assert [(b.constellation, b.band) for b in status.frequency_bands] == [("GPS", "L5"), ("GPS", "L1")]
    assert status.is_dual_frequency_supported
    assert not status.is_navic_supported
    assert dict(status.constellation_counts) == {"GPS": 3, "GLONASS": 1}
    assert status.supports_cn0 and status.supports_carrier_freq


def test_empty_batch_is_all_zero() -> None:
    status = aggregate([])
    assert not status.is_gnss_supported
    assert status.satellites_visible == 0
    assert status.satellites_used_in_fix == 0
    assert status.average_signal_to_noise_ratio == 0.0
    assert status.supported_constellations == ()
    assert status.carrier_frequencies == ()
    assert not status.is_dual_frequency_supported
    assert not status.is_navic_supported


def test_synthetic_batch_always_reports_support() -> None:
    assert aggregate([], synthetic=True).is_gnss_supported


def test_navic_presence_and_single_frequency() -> None:
    status = aggregate(_batch((2, "IRNSS", 31.0, 1575.42e6), (3, "GPS", 40.0, 1575.42e6)))
    assert status.is_navic_supported
    assert status.supported_constellations == ("NAVIC", "GPS")
    assert status.carrier_frequencies == (1575.42,)
    assert not status.is_dual_frequency_supported


def test_average_rounds_half_up() -> None:
    status = aggregate(_batch((1, "GPS", 32.0, None), (2, "GPS", 32.5, None)))
    assert status.average_signal_to_noise_ratio == 32.3


def test_carrier_frequencies_dedup_and_sort() -> None:
    sats = _batch((1, "GPS", 30.0, 1575.42e6), (2, "GPS", 30.0, 1176.45e6), (3, "GPS", 30.0, 1575.42e6))
    assert carrier_frequencies_mhz(sats) == [1176.45, 1575.42]


def test_payload_field_names() -> None:
    payload = aggregate(_batch((1, "GPS", 30.0, 1575.42e6))).as_payload(include_satellites=False)
    assert payload["isGNSSSupported"] is True
    assert payload["isNavICSupported"] is False
    assert payload["apiLevel"] == 33
    assert "satellites" not in payload


def test_nan_signal_does_not_poison_the_average() -> None:
    status = aggregate(_batch((1, "GPS", float("nan"), 1575.42e6), (2, "GPS", 40.0, float("nan"))))
    assert status.average_signal_to_noise_ratio == 40.0
    assert status.carrier_frequencies == (1575.42,)
    assert status.supports_cn0
