# contestlib

A collection of algorithms and data structures of the kind used in
programming contests, written as plain Python modules. The only runtime
dependency is `sortedcontainers`.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `contestlib.bitmasks` | `iterate_bitmasks_with_popcount`, `iterate_submasks`, `iterate_supermasks` (generators) and `format_mask` |
| `contestlib.submask` | `submask_sums`, `supermask_sums`, `mobius_transform`, `super_mobius_transform`, `subset_convolution`, `reverse_subset_convolution`; inputs must have a power-of-two length |
| `contestlib.xor_basis` | `XorBasis`, a linear basis over GF(2) with `add`, `min_value`, `max_value`, `merge` and `XorBasis.combined` |
| `contestlib.subsequences` | `distinct_subsequences` (modulo 998244353 by default), `is_subsequence`, `longest_common_subsequence`, `longest_common_subsequence_quadratic`, `construct_longest_common_subsequence` |
| `contestlib.fft` | floating-point FFT convolution: `square`, `multiply`, `power`, `mod_multiply`, `mod_power`, `mod_multiply_all`, `round_up_power_two` |
| `contestlib.ntt` | number-theoretic transform `NTT` (`mod_multiply`, `mod_power`, `mod_multiply_all`), plus `inv_mod`, `chinese_remainder_theorem`, `triple_crt`, `multi_mod_multiply`, `multi_multiply`, `mod_multiply_any` |
| `contestlib.bignum` | `BigNum`, an arbitrary-size non-negative integer in base 10^4 with Karatsuba and FFT multiplication, `divmod`, `power`, `BigNum.mod_pow` and a Miller-Rabin `is_probable_prime`; also the `main` entry point of the command below |
| `contestlib.prefix_max` | `OnlinePrefixMax` (prefix maximum, or minimum with `maximum_mode=False`) and `merge_into` |
| `contestlib.ordered_set` | `OrderedSet` with `find_by_order` / `order_of_key`, and `process_queries` for `I`/`D`/`K`/`C` query lists |
| `contestlib.count_pairs` | `count_pairs`, counting pairs `i < j` with `compare(values[i], values[j])` |
| `contestlib.splay_lazy` | `LazySplayTree`, an implicit splay tree with lazy `SplayChange` updates (reverse / add / set) and `subtree_sum` / `subtree_max` range queries |
| `contestlib.splay_tree` | `SplayTree`, an ordered splay tree with `lower_bound`, `node_at_index`, rank and range queries |

## Examples

Bitmasks:

```python
from contestlib.bitmasks import iterate_bitmasks_with_popcount, iterate_submasks

list(iterate_bitmasks_with_popcount(4, 2))   # [3, 5, 6, 9, 10, 12]
list(iterate_submasks(0b101))                # [5, 4, 1, 0]
```

Polynomial multiplication:

```python
from contestlib import fft
from contestlib.ntt import NTT

fft.multiply([1, 2], [3, 4], False)                    # [3, 10, 8]
NTT(998244353).mod_multiply([1, 2], [3, 4], False)     # [3, 10, 8]
```

Big integers:

```python
from contestlib.bignum import BigNum

a = BigNum("123456789012345678901234567890")
b = BigNum("987654321")
str(a * b)
quotient, remainder = divmod(a, b)
BigNum("1000000007").is_probable_prime(20)   # True
```

`BigNum` values are never negative: subtracting a larger number raises
`ValueError`. Dividing by a plain `int` gives an `int` remainder.

Order statistics:

```python
from contestlib.ordered_set import OrderedSet

s = OrderedSet([5, 1, 3])
s.find_by_order(1)    # 3
s.order_of_key(4)     # 2
```

Range updates on a sequence:

```python
from contestlib.splay_lazy import LazySplayTree, SplayChange, subtree_sum

tree = LazySplayTree([1, 2, 3, 4])
tree.update(tree.query_range(1, 3), SplayChange(to_add=10))
list(tree)                              # [1, 12, 13, 4]
subtree_sum(tree.query_range(0, 4))     # 30
```

Longest common subsequence:

```python
from contestlib.subsequences import construct_longest_common_subsequence

construct_longest_common_subsequence("ABCBDAB", "BDCABA")
```

## Command line

The `contestlib-bignum` command reads a task name from standard input,
followed by that task's input, and writes the results to standard output.

- `multiply`: pairs of decimal numbers; prints each product on its own line.
- `bignum`: pairs of decimal numbers; for each pair prints the comparisons,
  sum, difference, product, quotient and remainder, then the two numbers.
- `mod_multiply`: `n m mod circular` followed by the `n` and `m`
  coefficients; prints the coefficients of the product modulo `mod`.

```
printf 'multiply\n12345678901234567890 98765432109876543210\n' | contestlib-bignum
```

## What it does not do

Everything other than this one command is library code: there is no
command-line front end for the other modules.