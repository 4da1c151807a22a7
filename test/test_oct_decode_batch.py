import logging
import numpy as np
import pytest
try:
    import torch  # type: ignore
except Exception:  # pragma: no cover - optional
    torch = None  # type: ignore
try:
    import warp  # type: ignore
    WARP_AVAILABLE = True
except Exception:  # pragma: no cover - optional
    WARP_AVAILABLE = False

from torch_oct import (
    DegenerateNormalization,
    RangeViolation,
    decode_unit_vector,
    oct_decode,
    oct_decode_torch,
    oct_decode_warp,
)

METHODS = ["torch", pytest.param("warp", marks=pytest.mark.skipif(not WARP_AVAILABLE, reason="Warp not available"))]


def code_grid(range_max=255, step=5):
    """All (x, y) codes on a regular grid including the corners of the square."""
    values = np.unique(np.concatenate([np.arange(0, range_max + 1, step), [range_max]]))
    xs, ys = np.meshgrid(values, values, indexing="ij")
    return np.stack([xs.ravel(), ys.ravel()], axis=1)


def decode_scalar(encoded, range_max=255):
    return np.array([decode_unit_vector(int(x), int(y), range_max) for x, y in encoded])


# ============================================================================
# Agreement with the scalar decoder
# ============================================================================

@pytest.mark.parametrize("method", METHODS)
def test_batch_matches_scalar_8bit(method):
    encoded = code_grid(255, step=5)
    vectors = oct_decode(encoded, range_max=255, method=method)

    assert isinstance(vectors, np.ndarray)
    assert vectors.shape == (encoded.shape[0], 3)
    assert np.allclose(vectors, decode_scalar(encoded, 255), atol=1e-5)
    assert np.allclose(np.linalg.norm(vectors, axis=1), 1.0, atol=1e-5)


@pytest.mark.parametrize("method", METHODS)
def test_batch_matches_scalar_10bit(method):
    encoded = code_grid(1023, step=31)
    vectors = oct_decode(encoded, range_max=1023, method=method)
    assert np.allclose(vectors, decode_scalar(encoded, 1023), atol=1e-5)


@pytest.mark.parametrize("method", METHODS)
def test_batch_default_range(method):
    encoded = np.array([[0, 0], [128, 128], [255, 128]])
    assert np.allclose(oct_decode(encoded, method=method), decode_scalar(encoded), atol=1e-5)


def test_method_wrappers():
    encoded = code_grid(255, step=15)
    expected = decode_scalar(encoded)
    assert np.allclose(oct_decode_torch(encoded), expected, atol=1e-5)
    if WARP_AVAILABLE:
        assert np.allclose(oct_decode_warp(encoded), expected, atol=1e-5)


@pytest.mark.skipif(not WARP_AVAILABLE, reason="Warp not available")
def test_torch_vs_warp():
    rng = np.random.default_rng(42)
    encoded = rng.integers(0, 65536, size=(1000, 2))
    vectors_torch = oct_decode(encoded, range_max=65535, method="torch")
    vectors_warp = oct_decode(encoded, range_max=65535, method="warp")
    assert np.allclose(vectors_torch, vectors_warp, atol=1e-5)


# ============================================================================
# Input handling
# ============================================================================

@pytest.mark.skipif(torch is None, reason="PyTorch not available")
@pytest.mark.parametrize("method", METHODS)
def test_torch_cpu_compatibility(method):
    encoded = torch.tensor([[0, 0], [128, 128], [255, 0]], dtype=torch.int32)
    vectors = oct_decode(encoded, method=method)

    assert isinstance(vectors, torch.Tensor)
    assert vectors.shape == (3, 3)
    assert vectors.dtype == torch.float32
    assert np.allclose(vectors.numpy(), decode_scalar(encoded.numpy()), atol=1e-5)


@pytest.mark.skipif(
    torch is None or not torch.cuda.is_available(),
    reason="CUDA not available"
)
@pytest.mark.parametrize("method", METHODS)
def test_torch_cuda_compatibility(method):
    encoded = torch.tensor(code_grid(255, step=5), device="cuda")
    vectors = oct_decode(encoded, method=method)

    assert vectors.device.type == "cuda"
    assert np.allclose(vectors.cpu().numpy(), decode_scalar(encoded.cpu().numpy()), atol=1e-4)


def test_single_vector_is_promoted_to_batch():
    vectors = oct_decode([128, 128])
    assert vectors.shape == (1, 3)
    assert np.allclose(vectors[0], decode_unit_vector(128, 128, 255), atol=1e-6)


def test_empty_input():
    vectors = oct_decode(np.zeros((0, 2), dtype=np.int64))
    assert vectors.shape == (0, 3)


def test_shapes_and_error_handling():
    with pytest.raises(ValueError):
        oct_decode(np.zeros((4, 3), dtype=np.int64))
    with pytest.raises(ValueError):
        oct_decode(np.zeros((4, 2), dtype=np.int64), method="fast")
    with pytest.raises(ValueError):
        oct_decode(np.zeros((4, 2), dtype=np.int64), range_max=0)


# ============================================================================
# Range validation
# ============================================================================

@pytest.mark.parametrize("method", METHODS)
def test_strict_batch_raises_range_violation(method):
    encoded = np.array([[0, 0], [300, 5], [-1, 0]])
    with pytest.raises(RangeViolation) as exc_info:
        oct_decode(encoded, range_max=255, method=method)
    assert exc_info.value.index == 1
    assert exc_info.value.x == 300
    assert exc_info.value.range_max == 255


@pytest.mark.parametrize("method", METHODS)
def test_permissive_batch_clamps(method, caplog):
    caplog.set_level(logging.DEBUG, logger="torch_oct.octahedral")
    encoded = np.array([[300, 128], [-7, 40], [12, 12]])
    clamped = np.array([[255, 128], [0, 40], [12, 12]])

    vectors = oct_decode(encoded, range_max=255, strict=False, method=method)
    assert np.allclose(vectors, decode_scalar(clamped), atol=1e-5)
    assert "Clamping 2" in caplog.text


@pytest.mark.parametrize("method", METHODS)
def test_permissive_nan_is_degenerate(method):
    encoded = np.array([[10.0, 10.0], [np.nan, 0.0]])
    with pytest.raises(DegenerateNormalization) as exc_info:
        oct_decode(encoded, strict=False, method=method)
    assert exc_info.value.index == 1


def test_strict_nan_is_range_violation():
    encoded = np.array([[np.nan, 0.0]])
    with pytest.raises(RangeViolation):
        oct_decode(encoded)
