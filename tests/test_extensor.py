"""Tests for extensor_coding.algebra.extensor."""
import pytest

from extensor_coding.algebra.extensor import Extensor, sum_extensors
from extensor_coding.algebra.monomial import from_indices
from extensor_coding.errors import EncodingOverflowError, ShapeMismatchError

New = Extensor.from_coefficients_and_bases


# --- construction / zero ---

def test_new_shape_mismatch():
    with pytest.raises(ShapeMismatchError):
        New([1, 2], [[1]])


def test_new_index_too_large():
    with pytest.raises(EncodingOverflowError):
        New([1], [[32]])


def test_zero():
    assert Extensor.zero().is_zero()
    assert len(Extensor.zero()) == 0
    assert Extensor.zero().coefficients() == ()


def test_zero_coefficients_are_zero():
    x = New([0, 0], [[1, 2, 3], [4, 5, 6]])
    assert x.is_zero()
    assert x == Extensor.zero()
    assert len(x) == 2


def test_coefficients_and_lookup():
    x = New([2, 5], [[1, 3], [3, 9]])
    assert sorted(x.coefficients()) == [2, 5]
    assert x.coefficient(from_indices([3, 9])) == 5
    assert x.coefficient(from_indices([1])) == 0


# --- addition ---

def test_add():
    x1 = New([2, 5], [[1, 3], [3, 9]])
    x2 = New([1, 1], [[1, 2], [3, 9]])
    expect = New([1, 2, 6], [[1, 2], [1, 3], [3, 9]])
    assert x1 + x2 == expect
    assert x2 + x1 == expect


def test_add_keeps_cancelled_entries():
    a = New([-3, 4], [[1, 3], [3, 9]])
    b = New([3, -4], [[1, 3], [3, 9]])
    c = a + b
    assert c.is_zero()
    assert sorted(c.coefficients()) == [0, 0]


def test_add_does_not_mutate():
    a = New([1], [[1]])
    b = New([2], [[1]])
    _ = a + b
    assert a.coefficient(from_indices([1])) == 1
    assert b.coefficient(from_indices([1])) == 2


def test_sub_and_neg():
    x = New([3, 2], [[1, 2], [3, 4]])
    assert (x - x).is_zero()
    assert -x == New([-3, -2], [[1, 2], [3, 4]])


def test_scalar_mul():
    x = New([3, 2], [[1, 2], [3, 4]])
    expect = New([6, 4], [[1, 2], [3, 4]])
    assert x * 2 == expect
    assert 2 * x == expect


def test_sum_extensors():
    xs = [New([1], [[1]]), New([2], [[2]]), New([3], [[1]])]
    assert sum_extensors(xs) == New([4, 2], [[1], [2]])
    assert sum_extensors([]).is_zero()


# --- wedge product ---

def test_mul_disjoint():
    x1 = New([3], [[3, 4]])
    x2 = New([4], [[2, 6]])
    assert x1 * x2 == New([12], [[2, 3, 4, 6]])


def test_wedge_prod_two_terms():
    x1 = New([2, 3], [[1, 2], [3, 4]])
    x2 = New([4, 5], [[6, 2], [7, 4]])
    assert x1 * x2 == New([12, 10], [[2, 3, 4, 6], [1, 2, 4, 7]])


def test_sign_changes_on_reorder():
    e2 = New([1], [[2]])
    e1 = New([1], [[1]])
    assert e2 * e1 == New([-1], [[1, 2]])


def test_vanish():
    x = New([1], [[1]])
    assert (x * x).is_zero()


def test_vanish_general():
    x = New([9, 8, 7, 12], [[1], [1, 2, 3], [4], [6, 7, 8]])
    assert (x * x).is_zero()


def test_anti_commutative():
    a = New([2], [[1]])
    b = New([4], [[3]])
    assert a * b == New([8], [[1, 3]])
    assert b * a == New([-8], [[1, 3]])
    assert a * b == -(b * a)


def test_mul_then_add():
    x1 = New([1], [[1]])
    x2 = New([2], [[1]])
    x3 = New([1], [[2]])
    x4 = New([2], [[2]])
    assert x1 * x4 + x2 * x1 == New([2], [[1, 2]])
    assert x1 * x3 + x2 * x4 == New([5], [[1, 2]])
    assert x3 * x4 + x4 * x1 == New([-2], [[1, 2]])
    assert (x3 * x3 + x4 * x4).is_zero()


def test_determinant_2x2():
    a = New([2, 3], [[1], [2]])
    b = New([4, 5], [[1], [2]])
    # det [[2, 3], [4, 5]] = -2
    assert a * b == New([-2], [[1, 2]])


def test_determinant_3x3_singular():
    a = New([2, 3, 4], [[1], [2], [3]])
    b = New([5, 6, 7], [[1], [2], [3]])
    c = New([8, 9, 10], [[1], [2], [3]])
    prod = a * b * c
    assert prod.is_zero()
    assert prod == New([0], [[1, 2, 3]])


def test_associative():
    a = New([1, 2], [[1], [2]])
    b = New([3, -1], [[3], [4, 5]])
    c = New([2, 7], [[6], [2]])
    assert (a * b) * c == a * (b * c)


def test_xor_is_wedge():
    a = New([1], [[1]])
    b = New([1], [[2]])
    assert a ^ b == a * b


def test_mul_does_not_mutate():
    a = New([2, 3], [[1], [2]])
    before = dict(a.terms())
    _ = a * a
    assert dict(a.terms()) == before


# --- lift ---

def test_lift():
    x = New([2, 3], [[1], [2]])
    lifted = x.lift(2)
    shifted = New([2, 3], [[3], [4]])
    assert lifted == x * shifted


def test_lift_overflow():
    with pytest.raises(EncodingOverflowError):
        New([1], [[20]]).lift(12)


# --- value semantics ---

def test_equality_ignores_zero_entries():
    a = New([5, 0], [[1], [2]])
    b = New([5], [[1]])
    assert a == b
    assert hash(a) == hash(b)


def test_repr():
    assert repr(Extensor.zero()) == "Extensor(0)"
    assert repr(New([2], [[1, 3]])) == "Extensor(2 e_1∧e_3)"
