"""
Tests for src/tablekde/kernels.py: kernel shape functions and registry.

Every built-in kernel must be a proper density (non-negative, integrates to
1, symmetric) and evaluate element-wise over ndarrays of any shape.
"""

import numpy as np
import pytest

from tablekde import ConfigError
from tablekde.kernels import (
    BUILTIN_KERNELS,
    KERNEL_METHODS,
    Kernel,
    gaussian,
    get_kernel,
    resolve_kernel,
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

_GRID = np.linspace(-8.0, 8.0, 160001)
_DU = _GRID[1] - _GRID[0]

_BOUNDED = [name for name in KERNEL_METHODS if name != 'gaussian']


# ---------------------------------------------------------------------------
# Shape properties
# ---------------------------------------------------------------------------

@pytest.mark.parametrize('name', KERNEL_METHODS)
class TestBuiltinShapes:
    def test_integrates_to_one(self, name):
        total = BUILTIN_KERNELS[name](_GRID).sum() * _DU
        assert total == pytest.approx(1.0, abs=1e-3)

    def test_non_negative(self, name):
        assert np.all(BUILTIN_KERNELS[name](_GRID) >= 0.0)

    def test_symmetric(self, name):
        u = np.linspace(0.0, 3.0, 31)
        k = BUILTIN_KERNELS[name]
        np.testing.assert_allclose(k(u), k(-u))

    def test_preserves_shape(self, name):
        u = np.zeros((4, 7))
        assert BUILTIN_KERNELS[name](u).shape == (4, 7)

    def test_peak_at_zero(self, name):
        k = BUILTIN_KERNELS[name]
        assert k(np.array([0.0]))[0] >= k(np.array([0.5]))[0]


@pytest.mark.parametrize('name', _BOUNDED)
def test_bounded_support(name):
    """Every kernel except the Gaussian is zero outside |u| <= 1."""
    u = np.array([-3.0, -1.0001, 1.0001, 2.5])
    np.testing.assert_array_equal(BUILTIN_KERNELS[name](u), 0.0)


def test_gaussian_matches_normal_pdf():
    u = np.array([-2.0, 0.0, 1.0])
    expected = np.exp(-0.5 * u ** 2) / np.sqrt(2 * np.pi)
    np.testing.assert_allclose(gaussian(u), expected)


def test_gaussian_has_unbounded_support():
    assert gaussian(np.array([5.0]))[0] > 0.0


# ---------------------------------------------------------------------------
# Registry and resolution
# ---------------------------------------------------------------------------

class TestRegistry:
    def test_method_names(self):
        assert set(KERNEL_METHODS) == {
            'uniform', 'triangular', 'epanechnikov', 'quartic',
            'triweight', 'tricube', 'gaussian', 'cosine',
        }

    def test_get_kernel(self):
        assert get_kernel('gaussian') is gaussian

    def test_get_unknown_kernel_raises(self):
        with pytest.raises(ConfigError, match='invalid method'):
            get_kernel('parabolic')

    def test_resolve_name(self):
        k = resolve_kernel('epanechnikov')
        assert k.name == 'epanechnikov'
        assert k.fn is BUILTIN_KERNELS['epanechnikov']

    def test_resolve_callable_has_no_name(self):
        def box(u):
            return np.where(np.abs(u) <= 1, 0.5, 0.0)

        k = resolve_kernel(box)
        assert k.name is None
        assert k.fn is box
        np.testing.assert_array_equal(k(np.array([0.0, 2.0])), [0.5, 0.0])

    def test_resolve_kernel_passthrough(self):
        k = Kernel('gaussian', gaussian)
        assert resolve_kernel(k) is k

    @pytest.mark.parametrize('method', [42, None, ['gaussian']])
    def test_resolve_non_callable_raises(self, method):
        with pytest.raises(ConfigError):
            resolve_kernel(method)
