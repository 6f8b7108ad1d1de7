import pytest

from soraka.validators import (
    excludes_all,
    positive_number,
    transfer_empty_string,
    translate,
    validate_float64_decimal,
    validate_mobile,
    validate_non_negative_number,
)


@pytest.mark.parametrize("value", ["10000000000", "20000", "(010)20000", "010-20000-1", "02020000"])
def test_mobile_accepted(value):
    assert validate_mobile(value)


@pytest.mark.parametrize("value", ["abc", "1000", "", "10000000000\n", "(01020000"])
def test_mobile_rejected(value):
    assert not validate_mobile(value)


@pytest.mark.parametrize("value", ["0", "12", " 12.5 ", "3.0"])
def test_non_negative_accepted(value):
    assert validate_non_negative_number(value)


@pytest.mark.parametrize("value", ["", "   ", "-1", "1.", ".5", "1e3"])
def test_non_negative_rejected(value):
    assert not validate_non_negative_number(value)


@pytest.mark.parametrize("value,param", [(1.25, "2"), (5.0, "0"), (1e20, "0"), (0.1, "1"), (3.5, 4)])
def test_float_decimal_accepted(value, param):
    assert validate_float64_decimal(value, param)


@pytest.mark.parametrize("value,param", [(1.255, "2"), (-1.5, "2"), (1.5, "x"), (1.5, "-1"), (0.5, "0")])
def test_float_decimal_rejected(value, param):
    assert not validate_float64_decimal(value, param)


def test_excludes_all():
    assert not excludes_all("a,b", "0x2C")
    assert excludes_all("ab", "0x2C")
    assert excludes_all("abc", "xyz")
    assert not excludes_all("abc", "zc")
    assert excludes_all("abc", "")


@pytest.mark.parametrize("value", ["1.5", "2", "1e3", "0x1p-2"])
def test_positive_accepted(value):
    assert positive_number(value)


@pytest.mark.parametrize("value", ["0", "-2", "", "abc", "1_0", " 1"])
def test_positive_rejected(value):
    assert not positive_number(value)


def test_transfer_empty_string():
    assert transfer_empty_string("")
    assert transfer_empty_string("anything")


def test_translate_mobile():
    assert translate("mobile", "手机") == "手机必须为手机号码格式!"


def test_translate_ltefield():
    assert translate("ltefield", "开始", "结束") == "开始必须小于或等于结束"


def test_translate_gtefield_ignores_param():
    assert translate("gtefield", "开始", "结束") == "开始 必须大于或等于 最小值"


def test_translate_includes_field_and_param():
    message = translate("float64Decimal", "金额", "2")
    assert message.startswith("金额")
    assert " 2 " in message


def test_translate_does_not_resubstitute_field():
    assert translate("eqfield", "{1}", "x").startswith("{1}")


def test_translate_unknown_tag():
    with pytest.raises(KeyError):
        translate("nosuchtag", "field")