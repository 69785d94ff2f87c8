from decimal import ROUND_HALF_UP, Decimal

from glowguide.engine.bmi import compute_bmi


def test_bmi_typical_adult():
    assert compute_bmi(70, 175) == 22.9


def test_bmi_accepts_numeric_strings():
    assert compute_bmi("70", "175") == 22.9


def test_bmi_missing_or_zero_inputs():
    assert compute_bmi(0, 170) is None
    assert compute_bmi(70, 0) is None
    assert compute_bmi(None, 170) is None
    assert compute_bmi(70, None) is None


def test_bmi_rejects_non_finite_and_negative():
    assert compute_bmi(float("nan"), 170) is None
    assert compute_bmi(70, float("inf")) is None
    assert compute_bmi(float("inf"), 170) is None
    assert compute_bmi(-70, 170) is None
    assert compute_bmi(70, -170) is None


def test_bmi_never_raises_on_garbage():
    assert compute_bmi("heavy", 170) is None
    assert compute_bmi(70, "tall") is None


def test_bmi_tiny_height_does_not_divide_by_zero():
    assert compute_bmi(70, 1e-200) is None


# ── Rounding: half away from zero on the decimal value ───────────────────


def test_bmi_rounds_half_up_at_point_05():
    # height 100cm -> ratio equals weight exactly
    assert compute_bmi(0.05, 100) == 0.1
    assert compute_bmi(22.45, 100) == 22.5
    assert compute_bmi(22.44, 100) == 22.4


def test_bmi_matches_formula_for_valid_pairs():
    pairs = [(45, 150), (58.5, 162), (70, 175), (92, 180), (120, 190.5)]
    for weight, height in pairs:
        h = height / 100
        expected = float(
            Decimal(repr(weight / (h * h))).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
        )
        assert compute_bmi(weight, height) == expected


def test_bmi_huge_values_stay_total():
    assert compute_bmi(1e30, 100) == 1e30
    assert compute_bmi(1e300, 100) == 1e300
    assert compute_bmi(1e-300, 100) == 0.0


def test_bmi_is_idempotent():
    assert compute_bmi(64.3, 168) == compute_bmi(64.3, 168)
