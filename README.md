# numlab

A collection of compact numerical methods, each in its own module. Every
module can be used as a library, and most also run as a small command-line
demonstration. The only runtime dependency is numpy.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `numlab.linalg` | `gaussian_elimination(matrix, rhs)`: Gauss-Jordan elimination without pivoting; raises `ValueError` on a zero pivot or a shape mismatch |
| `numlab.legendre` | `legendre_coefficients`, `eval_polynomial`, `eval_polynomial_derivative`, and `legendre_zeros` (Newton iteration from an asymptotic starting guess) |
| `numlab.quadrature` | `gauss_legendre(order)`: nodes are Legendre zeros, weights solve the moment equations |
| `numlab.fft` | `make_phase`, slow `ft`/`ft_inv`, iterative `fft`/`fft_inv`, recursive `fft_recursive`/`fft_recursive_inv`, `reverse_bits`, `bit_reverse_permute`, `sample_signal` |
| `numlab.interpolation` | `lagrange_interpolate` and `make_noisy_quadratic` test data |
| `numlab.finitediff` | `forward_diff`, `backward_diff`, `central_diff`, and `error_table` for the derivative of sin |
| `numlab.recursion` | `fib_recursive` (value and call count), `fib_trace`, `fib_iterative`, `factorial` |
| `numlab.rootfind` | `newton_step`, `bisection_step`, `fractional_error`, `newton_root`, `bisection_root` returning a `RootResult`, and `convergence_table` |
| `numlab.sorting` | `selection_sort`, `merge_sort`, `merge`; each returns a new list |
| `numlab.timing` | `time_vector_add`: times repeated element-wise vector addition |
| `numlab.search` | `linear_search`, `binary_search`, `dictionary_search` (interpolation search) returning a `SearchResult` with the index and probe count, and `run_trial` |
| `numlab.integration` | `midpoint_1d`, `midpoint_2d` (vectorised midpoint rules) and `gaussian_integral` |
| `numlab.md` | `set_positions`, `lj_forces` (minimum-image Lennard-Jones), `simulate` (leapfrog integration) |
| `numlab.multigrid` | `MultigridParams`, `build_params`, `relax`, `project_residual`, `interpolate_add`, `residual_norm`, `solve_point_source` for 1D and 2D periodic lattices |
| `numlab.jacobi` | `magnitude`, `jacobi_sweeps`, `residual_norm`, `partition`, `solve` for the 1D point-source problem with fixed ends |
| `numlab.poisson2d` | `size_to_2d`, `make_rhs`, `poisson2d_reference`, `jacobi_poisson`, `check_results` for a 2D problem with periodic boundary copies |

## Examples

```python
from numlab.fft import make_phase, fft, fft_inv, sample_signal

signal = sample_signal(64)
omega = make_phase(64)
spectrum = fft(signal, omega)
restored = fft_inv(spectrum, omega)   # matches signal to rounding error
```

```python
from numlab.sorting import merge_sort
from numlab.search import binary_search

values = merge_sort([5, 3, 9, 1, 7])
result = binary_search(values, 7)     # SearchResult(index=3, count=...)
```

```python
from numlab.quadrature import gauss_legendre

nodes, weights = gauss_legendre(4)
```

## Commands

Each demonstration prints its results to standard output:

```
numlab-legendre [ORDER]
numlab-quadrature [ORDER]
numlab-fft [--size N]
numlab-lagrange [--points N] [--refinement R] [--seed S]
numlab-findiff [--x X] [--steps N]
numlab-recursion [N]
numlab-roots [A N LOG10_TOL] [--output FILE]
numlab-timing [--length N] [--repeats R] [--parts P]
numlab-search [--size N] [--trials T] [--seed S]
numlab-integrate [sin|2d|gauss] [--n N]
numlab-md [--particles N] [--box L] [--dim D] [--dt DT] [--steps S] [--record-every K] [--mass M] [--seed S] [--output FILE]
numlab-multigrid [--dim 1|2] [--size N] [--levels L] [--nlev K] [--mass M] [--tol T] [--sweeps S] [--output FILE]
numlab-jacobi [--n N] [--tol T] [--check-every K] [--max-iter M]
numlab-poisson2d [ITER_MAX [NY [NX]]]
```

`numlab-legendre`, `numlab-quadrature`, `numlab-recursion` and `numlab-roots`
ask for their inputs on standard input when they are not given on the
command line.

Some commands also write data files:

- `numlab-roots` writes a convergence table, by default to
  `rootData_<number>.dat` in the current directory.
- `numlab-md` writes one line of particle positions per recorded frame,
  by default to `op.out`.
- `numlab-multigrid` writes the solution field, by default to
  `MGVALUES_1D.dat` (1D) or `MG2D_SOLUTION.dat` (2D).

Pass `--help` to any command to see the options it accepts.

## What the package does not do

Everything runs in a single process. `numlab-timing --parts`,
`numlab.jacobi.partition` and `numlab.poisson2d.size_to_2d` only compute how
work would be divided; nothing is spread over threads, processes or
accelerators. `numlab-poisson2d` runs the same vectorised relaxation for both
the reference and the run under test, so its reported speedup is not a
comparison of different implementations.