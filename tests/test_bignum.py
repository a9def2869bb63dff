import io
import random

import pytest

from contestlib.bignum import BASE, U64_MAX, BigNum, main


def _random_number(rng, digits):
    return rng.randrange(10 ** (digits - 1), 10**digits)


@pytest.mark.parametrize("value", [0, 1, 9999, 10000, 123456789, U64_MAX, 10**100 + 7])
def test_int_and_string_round_trip(value):
    number = BigNum(value)
    assert int(number) == value
    assert str(number) == str(value)
    assert BigNum(str(value)) == number


def test_string_parsing_strips_leading_zeros_and_handles_empty():
    assert str(BigNum("0000123")) == "123"
    assert int(BigNum("")) == 0
    assert BigNum("000").limbs == (0,)


def test_invalid_input_rejected():
    with pytest.raises(ValueError):
        BigNum("12a3")
    with pytest.raises(ValueError):
        BigNum(-1)
    with pytest.raises(TypeError):
        BigNum(1.5)


def test_limbs_are_base_ten_thousand():
    number = BigNum(12345678)
    assert number.limbs == (5678, 1234)
    assert BASE == 10000


def test_comparisons_match_ints():
    rng = random.Random(1)
    for _ in range(200):
        a, b = rng.randrange(10**30), rng.randrange(10**30)
        x, y = BigNum(a), BigNum(b)
        assert (x < y) == (a < b)
        assert (x <= y) == (a <= b)
        assert (x > y) == (a > b)
        assert (x == y) == (a == b)
        assert (x != y) == (a != b)
        assert (x == b) == (a == b)


def test_add_and_subtract_match_ints():
    rng = random.Random(2)
    for _ in range(200):
        a, b = rng.randrange(10**40), rng.randrange(10**40)
        assert int(BigNum(a) + BigNum(b)) == a + b
        hi, lo = max(a, b), min(a, b)
        assert int(BigNum(hi) - BigNum(lo)) == hi - lo
        assert int(BigNum(a) + b) == a + b


def test_subtract_below_zero_raises():
    with pytest.raises(ValueError):
        BigNum(5) - BigNum(6)


def test_small_multiplication_matches_ints():
    rng = random.Random(3)
    for _ in range(100):
        a, b = rng.randrange(10**50), rng.randrange(10**50)
        assert int(BigNum(a) * BigNum(b)) == a * b
        assert int(BigNum(a) * 0) == 0


def test_int_multiplier_including_overflow_cutoff():
    a = 10**45 + 12345
    for mult in (0, 1, 7, 9999, 10**15, U64_MAX, 10**30):
        assert int(BigNum(a) * mult) == a * mult


def test_karatsuba_multiplication():
    rng = random.Random(4)
    a = _random_number(rng, 900)
    b = _random_number(rng, 1000)
    assert int(BigNum(a) * BigNum(b)) == a * b


def test_fft_multiplication_and_square():
    rng = random.Random(5)
    a = _random_number(rng, 3400)
    b = _random_number(rng, 3300)
    assert int(BigNum(a) * BigNum(b)) == a * b
    assert int(BigNum(a) * BigNum(a)) == a * a


def test_division_by_bignum_matches_ints():
    rng = random.Random(6)
    for _ in range(100):
        a = rng.randrange(10**60)
        b = rng.randrange(1, 10 ** rng.randrange(1, 40))
        q, r = divmod(BigNum(a), BigNum(b))
        assert (int(q), int(r)) == divmod(a, b)
        assert int(BigNum(a) // BigNum(b)) == a // b
        assert int(BigNum(a) % BigNum(b)) == a % b


def test_division_by_int_returns_int_remainder():
    rng = random.Random(7)
    for _ in range(100):
        a = rng.randrange(10**50)
        d = rng.choice([1, 2, 3, 10, 16, 9999, 10**12, U64_MAX, 10**25])
        d = rng.randrange(1, d + 1)
        q, r = divmod(BigNum(a), d)
        assert isinstance(r, int)
        assert (int(q), r) == divmod(a, d)
        assert BigNum(a) % d == a % d


def test_large_division():
    rng = random.Random(8)
    a = _random_number(rng, 2000)
    b = _random_number(rng, 700)
    q, r = divmod(BigNum(a), BigNum(b))
    assert int(q) == a // b
    assert int(r) == a % b


def test_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        BigNum(10) // BigNum(0)
    with pytest.raises(ZeroDivisionError):
        BigNum(10) % 0


def test_shifts():
    number = BigNum(123456789)
    assert int(number.shift_left(2)) == 123456789 * BASE**2
    assert int(number.shift_right(1)) == 123456789 // BASE
    assert int(number.shift_right(5)) == 0
    assert BigNum(0).shift_left(3).limbs == (0,)
    with pytest.raises(ValueError):
        number.shift_left(-1)


def test_power_matches_ints():
    for base, exponent in [(0, 0), (7, 0), (2, 100), (12345, 37), (99, 1)]:
        assert int(BigNum(base).power(exponent)) == base**exponent
    with pytest.raises(ValueError):
        BigNum(3).power(-1)


def test_mod_pow_matches_builtin_pow():
    rng = random.Random(9)
    for _ in range(30):
        a = rng.randrange(10**30)
        e = rng.randrange(10**20)
        m = rng.randrange(2, 10**25)
        assert int(BigNum.mod_pow(a, e, m)) == pow(a, e, m)
    assert int(BigNum.mod_pow(5, 0, 7)) == 1


@pytest.mark.parametrize("prime", [2, 3, 29, 998244353, 1711276033, 2113929217])
def test_primes_pass_miller_rabin(prime):
    assert BigNum(prime).is_probable_prime()


@pytest.mark.parametrize(
    "composite", [0, 1, 4, 31 * 37, 998244353 * 1711276033, 1711276033 * 2113929217]
)
def test_composites_fail_miller_rabin(composite):
    assert not BigNum(composite).is_probable_prime()


def test_large_prime_product_is_composite():
    p = BigNum(2).power(127) - 1
    assert p.is_probable_prime(10)
    assert not (p * p).is_probable_prime(10)


def _run_main(monkeypatch, capsys, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    assert main([]) == 0
    return capsys.readouterr().out.split("\n")


def test_main_multiply(monkeypatch, capsys):
    lines = _run_main(monkeypatch, capsys, "multiply 12 34\n0 999\n")
    assert lines[:2] == [str(12 * 34), "0"]


def test_main_bignum(monkeypatch, capsys):
    a, b = 10**30 + 17, 98765
    lines = _run_main(monkeypatch, capsys, f"bignum {a} {b}\n")
    assert lines[:11] == [
        "< false",
        "<= false",
        "> true",
        ">= true",
        "== false",
        "!= true",
        f"+ {a + b}",
        f"- {a - b}",
        f"* {a * b}",
        f"/ {a // b}",
        f"% {a % b}",
    ]
    assert lines[11] == f"{a} {b}"


def test_main_bignum_zero_divisor_skips_division(monkeypatch, capsys):
    lines = _run_main(monkeypatch, capsys, "bignum 5 0\n")
    assert not any(line.startswith("/ ") for line in lines)
    assert lines[8] == "* 0"
    assert lines[9] == "5 0"


def test_main_mod_multiply(monkeypatch, capsys):
    left, right, mod = [1, 2, 3], [4, 5], 7
    text = f"mod_multiply 3 2 {mod} 0\n1 2 3\n4 5\n"
    lines = _run_main(monkeypatch, capsys, text)
    expected = [0] * 4
    for i, x in enumerate(left):
        for j, y in enumerate(right):
            expected[i + j] += x * y
    assert [int(x) for x in lines[:4]] == [x % mod for x in expected]


def test_main_unknown_task(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("divide 1 2"))
    with pytest.raises(SystemExit):
        main([])