"""Discrete Fourier transforms: direct sums, iterative and recursive radix-2 FFTs."""

from __future__ import annotations

import argparse
import math
from typing import Sequence

import numpy as np


def _require_power_of_two(n: int) -> None:
    if n < 1 or n & (n - 1):
        raise ValueError(f"length must be a positive power of two, got {n}")


def _prepare(values: Sequence[complex], omega: Sequence[complex] | None) -> tuple[np.ndarray, np.ndarray]:
    data = np.asarray(values, dtype=complex)
    if data.ndim != 1:
        raise ValueError("values must be one-dimensional")
    if data.size == 0:
        raise ValueError("values must not be empty")
    phases = make_phase(data.size) if omega is None else np.asarray(omega, dtype=complex)
    if phases.shape != data.shape:
        raise ValueError(
            f"omega must have the same length as values ({data.size}), got {phases.size}"
        )
    return data, phases


def make_phase(n: int) -> np.ndarray:
    """Return the n roots of unity exp(2 pi i k / n) for k = 0..n-1."""
    if n < 1:
        raise ValueError("the number of phases must be positive")
    return np.exp(2j * math.pi * np.arange(n) / n)


def ft(values: Sequence[complex], omega: Sequence[complex] | None = None) -> np.ndarray:
    """Slow O(N^2) transform: out[k] = sum_x omega[k x mod N] values[x]."""
    data, phases = _prepare(values, omega)
    n = data.size
    index = np.outer(np.arange(n), np.arange(n)) % n
    return phases[index] @ data


def ft_inv(values: Sequence[complex], omega: Sequence[complex] | None = None) -> np.ndarray:
    """Slow O(N^2) inverse of :func:`ft`, including the 1/N normalisation."""
    data, phases = _prepare(values, omega)
    n = data.size
    index = np.outer(np.arange(n), np.arange(n)) % n
    return np.conj(phases[index]) @ data / n


def reverse_bits(x: int, n: int) -> int:
    """Reverse the log2(n) low bits of ``x``; ``n`` must be a power of two."""
    _require_power_of_two(n)
    if not 0 <= x < n:
        raise ValueError(f"index {x} out of range for length {n}")
    result = 0
    for _ in range(n.bit_length() - 1):
        result = (result << 1) | (x & 1)
        x >>= 1
    return result


def bit_reverse_permute(values: Sequence[complex]) -> np.ndarray:
    """Return a copy with element x moved to position reverse_bits(x, N)."""
    data = np.asarray(values, dtype=complex)
    n = data.size
    _require_power_of_two(n)
    out = np.empty_like(data)
    for x, value in enumerate(data):
        out[reverse_bits(x, n)] = value
    return out


def _butterflies(out: np.ndarray, phases: np.ndarray) -> np.ndarray:
    n = out.size
    size = 2
    while size <= n:
        half = size // 2
        nblocks = n // size
        twiddle = phases[nblocks * np.arange(half)]
        blocks = out.reshape(nblocks, size)
        low = blocks[:, :half].copy()
        high = twiddle * blocks[:, half:]
        blocks[:, :half] = low + high
        blocks[:, half:] = low - high
        size *= 2
    return out


def fft(values: Sequence[complex], omega: Sequence[complex] | None = None) -> np.ndarray:
    """Iterative radix-2 FFT with the same convention as :func:`ft`."""
    data, phases = _prepare(values, omega)
    _require_power_of_two(data.size)
    return _butterflies(bit_reverse_permute(data), phases)


def fft_inv(values: Sequence[complex], omega: Sequence[complex] | None = None) -> np.ndarray:
    """Iterative radix-2 inverse FFT, the inverse of :func:`fft`."""
    data, phases = _prepare(values, omega)
    _require_power_of_two(data.size)
    return _butterflies(bit_reverse_permute(data / data.size), np.conj(phases))


def _recurse(data: np.ndarray, phases: np.ndarray) -> np.ndarray:
    n = data.size
    if n == 1:
        return data.copy()
    if n == 2:
        return np.array([data[0] + data[1], data[0] - data[1]])
    even = _recurse(data[0::2], phases)
    odd = _recurse(data[1::2], phases)
    level = phases.size // n
    twisted = phases[level * np.arange(n // 2)] * odd
    return np.concatenate([even + twisted, even - twisted])


def fft_recursive(values: Sequence[complex], omega: Sequence[complex] | None = None) -> np.ndarray:
    """Recursive even/odd radix-2 FFT with the same convention as :func:`ft`."""
    data, phases = _prepare(values, omega)
    _require_power_of_two(data.size)
    return _recurse(data, phases)


def fft_recursive_inv(values: Sequence[complex], omega: Sequence[complex] | None = None) -> np.ndarray:
    """Recursive inverse FFT, the inverse of :func:`fft_recursive`."""
    data, phases = _prepare(values, omega)
    _require_power_of_two(data.size)
    return _recurse(data, np.conj(phases)) / data.size


def sample_signal(n: int) -> np.ndarray:
    """Return 2 sin(2 pi x/N) + 4 cos(6 pi x/N) - 8 cos(8 pi x/N) for x = 0..N-1."""
    if n < 1:
        raise ValueError("the signal length must be positive")
    x = np.arange(n)
    return (
        2 * np.sin(2.0 * math.pi * x / n)
        + 4 * np.cos(2.0 * math.pi * 3.0 * x / n)
        - 8 * np.cos(2.0 * math.pi * 4.0 * x / n)
    )


def _fmt(z: complex) -> str:
    return f"({z.real:.3f},{z.imag:.3f})"


def _report(title: str, forward, inverse, signal: np.ndarray, omega: np.ndarray) -> None:
    print()
    print(title)
    spectrum = forward(signal, omega)
    for k, value in enumerate(spectrum):
        print(f" k = {k}  Ftilde =   {_fmt(value)}")
    recovered = inverse(spectrum, omega)
    for x, (new, old) in enumerate(zip(recovered, signal)):
        print(f" x = {x:4d} Compare Fnew[x] : {_fmt(new):>25} with F[x]  {_fmt(old)}")


def main(argv: Sequence[str] | None = None) -> int:
    """Compare the slow transform, the recursive FFT and the iterative FFT."""
    parser = argparse.ArgumentParser(description="Fourier transform demonstration.")
    parser.add_argument("--size", type=int, default=64, help="power-of-two signal length")
    args = parser.parse_args(argv)
    try:
        _require_power_of_two(args.size)
    except ValueError as exc:
        parser.error(str(exc))

    omega = make_phase(args.size)
    signal = sample_signal(args.size)
    for x, value in enumerate(signal):
        print(f" x = {x}  F =    {_fmt(complex(value))}")

    _report("Test  Slow FT ", ft, ft_inv, signal, omega)
    _report(" Test  FFTrecursion ", fft_recursive, fft_recursive_inv, signal, omega)
    _report(" Test Iterative   FFT ", fft, fft_inv, signal, omega)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())