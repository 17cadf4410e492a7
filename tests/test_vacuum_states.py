"""Tests for the vacuum state and error transforms."""

import pytest

from miio_vacuum.state import DeviceError, map_area, map_error, map_state

EXPECTED_STATES = {
    1: "initiating",
    2: "charger-offline",
    3: "waiting",
    5: "cleaning",
    6: "returning",
    8: "charging",
    9: "charging-error",
    10: "paused",
    11: "spot-cleaning",
    12: "error",
    13: "shutting-down",
    14: "updating",
    15: "docking",
    16: "going-to-location",
    17: "zone-cleaning",
    18: "room-cleaning",
    22: "dust-collection",
    100: "full",
}


@pytest.mark.parametrize(("code", "label"), sorted(EXPECTED_STATES.items()))
def test_known_state_codes(code: int, label: str) -> None:
    """Every documented code maps to its label."""

    assert map_state(code) == label


@pytest.mark.parametrize("code", [0, 4, 7, 19, 21, 23, 99, 101])
def test_unknown_state_codes_are_tagged(code: int) -> None:
    """Codes outside the table surface as ``unknown-<code>``."""

    assert map_state(code) == f"unknown-{code}"


def test_error_code_zero_means_no_error() -> None:
    """Code 0 carries no fault."""

    assert map_error(0) is None


@pytest.mark.parametrize("code", [1, 7, 42])
def test_nonzero_error_codes_keep_the_code(code: int) -> None:
    """Unknown faults still surface with a generic message."""

    error = map_error(code)

    assert error == DeviceError(code=code, message=f"Unknown error {code}")
    assert error.code == code


def test_area_is_converted_to_square_metres() -> None:
    """Raw areas are mm²."""

    assert map_area(26_000_000) == 26.0
