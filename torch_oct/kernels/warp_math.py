import warp as wp

@wp.func
def sign_or_positive(value: wp.float32) -> wp.float32:
    """Sign of a scalar with 0.0 and -0.0 mapped to 1.0."""
    if value < wp.float32(0.0):
        return wp.float32(-1.0)
    return wp.float32(1.0)

@wp.func
def denormalize_snorm(value: wp.float32, range_max: wp.float32) -> wp.float32:
    """Map a quantized value in [0, range_max] to [-1, 1], clamping values outside the range."""
    return wp.clamp(value, wp.float32(0.0), range_max) / range_max * wp.float32(2.0) - wp.float32(1.0)
