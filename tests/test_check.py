import logging

import pytest

from counters import U8, U16, U32, Severity, UnsignedWidth, check_width


@pytest.mark.parametrize("width", [U8, U16, U32])
def test_registered_widths_are_clean(width: UnsignedWidth) -> None:
    result = check_width(width)
    assert result.is_well_formed
    assert result.width_name == width.name
    assert result.diagnostics == ()


def test_custom_machine_width_is_clean() -> None:
    result = check_width(UnsignedWidth("u4", 0, 15))
    assert result.is_well_formed
    assert not result.warnings


def test_empty_name() -> None:
    res = check_width(UnsignedWidth("", 0, 15))
    assert not res.is_well_formed
    assert any(e.check == "name_nonempty" for e in res.errors)


def test_non_int_bounds() -> None:
    res = check_width(UnsignedWidth("f", 0, 1.5))  # type: ignore[arg-type]
    assert [e.check for e in res.errors] == ["bounds_integral"]


def test_bool_bounds_are_rejected() -> None:
    res = check_width(UnsignedWidth("bit", False, True))  # type: ignore[arg-type]
    assert any(e.check == "bounds_integral" for e in res.errors)


def test_negative_min() -> None:
    res = check_width(UnsignedWidth("s8", -128, 127))
    assert not res.is_well_formed
    assert any(e.check == "bounds_unsigned" for e in res.errors)
    # Wrap laws are skipped when the structure is broken.
    assert not any(d.check.startswith("wraps_") for d in res.diagnostics)


def test_unordered_bounds() -> None:
    res = check_width(UnsignedWidth("backwards", 10, 5))
    assert [e.check for e in res.errors] == ["bounds_ordered"]


def test_registry_collision() -> None:
    res = check_width(UnsignedWidth("u8", 0, 127))
    assert any(e.check == "registry_consistent" for e in res.errors)


def test_warnings_do_not_block() -> None:
    res = check_width(UnsignedWidth("dial", 1, 12))
    assert res.is_well_formed
    assert {w.check for w in res.warnings} == {"zero_based", "power_of_two_span"}
    assert all(w.severity == Severity.WARNING for w in res.warnings)


def test_errors_sort_before_warnings() -> None:
    res = check_width(UnsignedWidth("u8", 1, 100))
    severities = [d.severity for d in res.diagnostics]
    assert severities == sorted(severities, key=lambda s: s != Severity.ERROR)
    assert res.errors and res.warnings


def test_errors_are_logged(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="counters.check"):
        check_width(UnsignedWidth("backwards", 10, 5))
    assert any("bounds_ordered" in r.message for r in caplog.records)


def test_result_is_frozen() -> None:
    res = check_width(U8)
    with pytest.raises(AttributeError):
        res.diagnostics = ()  # type: ignore[misc]
