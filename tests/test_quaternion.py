import math

import pytest

from stellargen.quaternion import Quaternion

ONE = Quaternion(1.0)
I = Quaternion(0.0, 1.0, 0.0, 0.0)
J = Quaternion(0.0, 0.0, 1.0, 0.0)
K = Quaternion(0.0, 0.0, 0.0, 1.0)


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (I, J, K),
        (J, K, I),
        (K, I, J),
        (J, I, -K),
        (K, J, -I),
        (I, K, -J),
        (I, I, -ONE),
        (J, J, -ONE),
        (K, K, -ONE),
    ],
)
def test_hamilton_rules(a, b, expected):
    assert a * b == expected


def test_ijk_is_minus_one():
    assert I * J * K == -ONE


def test_from_parts_and_imag_round_trip():
    q = Quaternion.from_parts(1.5, (2.0, -3.0, 4.0))
    assert q.real == 1.5
    assert q.imag() == (2.0, -3.0, 4.0)
    assert list(q) == [1.5, 2.0, -3.0, 4.0]
    assert q[3] == 4.0


def test_from_parts_rejects_wrong_length():
    with pytest.raises(ValueError):
        Quaternion.from_parts(1.0, (1.0, 2.0))


def test_scalar_add_changes_only_real_part():
    q = Quaternion(1.0, 2.0, 3.0, 4.0)
    assert (q + 2.0).imag() == q.imag()
    assert (q + 2.0).real == q.real + 2.0
    assert (q - 2.0).imag() == q.imag()
    assert 2.0 + q == q + 2.0


def test_reverse_subtraction_negates():
    q = Quaternion(1.0, 2.0, 3.0, 4.0)
    assert 5.0 - q == -(q - 5.0)


def test_add_sub_round_trip():
    a = Quaternion(1.0, -2.0, 0.5, 3.0)
    b = Quaternion(0.25, 4.0, -1.0, 2.0)
    assert (a + b) - b == a


def test_scalar_mul_div_round_trip():
    q = Quaternion(1.0, -2.0, 0.5, 3.0)
    assert (q * 4.0) / 4.0 == q
    assert 4.0 * q == q * 4.0


def test_conjugate_product_is_norm2():
    q = Quaternion(1.0, -2.0, 0.5, 3.0)
    product = q * q.conjugate()
    assert product.real == pytest.approx(q.norm2())
    assert product.imag() == pytest.approx((0.0, 0.0, 0.0))


def test_conjugate_twice_is_identity():
    q = Quaternion(1.0, -2.0, 0.5, 3.0)
    assert q.conjugate().conjugate() == q


def test_norm_is_root_of_norm2():
    q = Quaternion(3.0, 1.0, -2.0, 5.0)
    assert q.norm() == pytest.approx(math.sqrt(q.norm2()))


def test_normalized_has_unit_norm():
    q = Quaternion(3.0, 1.0, -2.0, 5.0)
    assert q.normalized().norm() == pytest.approx(1.0)


def test_normalize_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Quaternion().normalized()


def test_norm_is_multiplicative():
    a = Quaternion(1.0, -2.0, 0.5, 3.0)
    b = Quaternion(0.25, 4.0, -1.0, 2.0)
    assert (a * b).norm() == pytest.approx(a.norm() * b.norm())


def test_multiplication_by_one_is_identity():
    q = Quaternion(1.0, -2.0, 0.5, 3.0)
    assert q * ONE == q
    assert ONE * q == q