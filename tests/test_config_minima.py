import pytest
from hypothesis import given, strategies as st

import config


@pytest.mark.parametrize(
    "feet, expected_km",
    [
        (0.0, 5.556),
        (2499.9, 5.556),
        (2500.0, 1.852),     # lower band edge is inclusive
        (3000.0, 1.852),
        (3600.0, 1.852),
        (3600.1, 2.778),
        (4300.0, 2.778),
        (4300.1, 3.704),
        (9000.0, 3.704),
        (9000.1, 5.556),
        (20000.0, 5.556),
    ],
)
def test_parallel_approach_bands(feet, expected_km):
    assert config.get_parallel_approach_minimum_km(feet) == pytest.approx(expected_km)


@given(feet=st.floats(0.0, 1e6))
def test_parallel_minimum_never_exceeds_baseline(feet):
    minimum = config.get_parallel_approach_minimum_km(feet)
    assert minimum in {1.852, 2.778, 3.704, config.BASELINE_LATERAL_MIN_KM}
    assert minimum <= config.BASELINE_LATERAL_MIN_KM


def test_bounding_radius_is_eight_nm():
    assert config.BOUNDING_RADIUS_KM == pytest.approx(8 * config.NM_TO_KM)
