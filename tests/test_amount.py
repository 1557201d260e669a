import pytest

from stellarkit.amount import LumenAmount, StroopAmount, into_stroop_amount
from stellarkit.errors import (
    AmountNegative,
    AmountNonPositive,
    AmountOverflow,
    InvalidAmountString,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("23", 230_000_000),
        ("922337203685", 9223372036850_000_000),
        ("0.23", 2_300_000),
        ("0.232442", 2_324_420),
        ("14.2324426", 142_324_426),
        ("420.", 4200_000_000),
        ("922337203685.4775807", 9223372036854775807),
        ("922337203685.4775807", 2**63 - 1),
    ],
)
def test_parse_lumen_string(text, expected):
    assert into_stroop_amount(text, True) == expected


@pytest.mark.parametrize(
    "text, error",
    [
        ("922337203686", AmountOverflow),
        ("14.23244267", InvalidAmountString),
        ("922337203685.4775808", AmountOverflow),
        (".", InvalidAmountString),
        ("", InvalidAmountString),
        ("243. 34", InvalidAmountString),
        ("243.+34", InvalidAmountString),
        ("+243.34", InvalidAmountString),
        ("243.34x", InvalidAmountString),
        ("24?.34x", InvalidAmountString),
    ],
)
def test_parse_lumen_string_errors(text, error):
    with pytest.raises(error):
        into_stroop_amount(text, True)


def test_bytes_input():
    assert into_stroop_amount(b"23", True) == 230_000_000


def test_zero_string_depends_on_allow_zero():
    assert into_stroop_amount("0", True) == 0
    with pytest.raises(AmountNonPositive):
        into_stroop_amount("0.0", False)


def test_stroop_amount_checks():
    assert into_stroop_amount(StroopAmount(0), True) == 0
    assert into_stroop_amount(StroopAmount(1234560000), False) == 1234560000
    with pytest.raises(AmountNegative):
        into_stroop_amount(StroopAmount(-1), True)
    with pytest.raises(AmountNonPositive):
        into_stroop_amount(StroopAmount(0), False)


def test_lumen_amount_conversion():
    assert LumenAmount(23.0).to_stroops() == StroopAmount(230_000_000)
    assert into_stroop_amount(LumenAmount(23.0), False) == 230_000_000


def test_lumen_amount_overflow():
    with pytest.raises(AmountOverflow):
        LumenAmount(1e12).to_stroops()


def test_stroops_to_lumens():
    assert StroopAmount(230_000_000).to_lumens() == LumenAmount(23.0)


def test_unsupported_type():
    with pytest.raises(TypeError):
        into_stroop_amount(23, True)