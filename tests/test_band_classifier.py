from gnsstrack.catalog.bandplan import DEFAULT_BANDS, GnssBandplan, classify_band


def test_known_frequencies_classify_to_first_catalog_match() -> None:
    l1 = classify_band(1575.42)
    assert (l1.constellation, l1.band, l1.is_dual_frequency) == ("GPS", "L1", False)

    shared = classify_band(1176.45)
    assert (shared.constellation, shared.band, shared.is_dual_frequency) == ("GPS", "L5", True)

    e5b = classify_band(1207.14)
    assert (e5b.constellation, e5b.band) == ("GALILEO", "E5b")


def test_tolerance_is_inclusive_and_absolute() -> None:
    assert classify_band(1602.9).band == "L1"
    assert classify_band(1576.3).constellation == "GPS"
    assert classify_band(1561.098 - 0.5).constellation == "BEIDOU"
    assert classify_band(1227.6, tolerance_mhz=0.0).band == "L2"


def test_unmatched_frequency_is_unknown_and_keeps_input() -> None:
    info = classify_band(1400.0)
    assert info.frequency == 1400.0
    assert info.constellation == "UNKNOWN"
    assert info.band == "UNKNOWN"
    assert info.is_dual_frequency is False
    assert info.as_payload() == {
        "frequency": 1400.0,
        "constellation": "UNKNOWN",
        "band": "UNKNOWN",
        "isDualFrequency": False,
    }


def test_csv_override_replaces_catalog_and_skips_bad_rows(tmp_path) -> None:
    path = tmp_path / "bands.csv"
    path.write_text(
        "constellation,band,frequency_mhz,dual_frequency\n"
        "IRNSS,L5,1176.45,yes\n"
        "GPS,L1,not-a-number,no\n"
        "GPS,,1575.42,no\n"
        "GPS,L1,1575.42,no\n",
        encoding="utf-8",
    )
    plan = GnssBandplan(str(path))
    assert [b.key for b in plan.bands] == ["NAVIC_L5", "GPS_L1"]
    assert plan.classify(1176.45).constellation == "NAVIC"
    assert plan.classify(1176.45).is_dual_frequency is True


def test_missing_override_falls_back_to_builtin(tmp_path) -> None:
    plan = GnssBandplan(str(tmp_path / "absent.csv"))
    assert plan.bands == DEFAULT_BANDS
    listed = plan.serialize()["bands"]
    assert len(listed) == 14
    assert listed[0] == {
        "key": "GPS_L1",
        "constellation": "GPS",
        "band": "L1",
        "frequencyMHz": 1575.42,
        "isDualFrequency": False,
    }
