# config.py
from typing import Optional

# Defaults of the reference render
DEFAULT_ASPECT_RATIO = 16.0 / 9.0
DEFAULT_WIDTH = 400
DEFAULT_SAMPLES = 100
DEFAULT_MAX_DEPTH = 50
DEFAULT_SEED = 0

QUALITY_LEVELS = {
    "preview": {"samples": 4, "max_depth": 8},
    "balanced": {"samples": 32, "max_depth": 20},
    "final": {"samples": DEFAULT_SAMPLES, "max_depth": DEFAULT_MAX_DEPTH},
}

class RenderSettings:
    """
    Image size, sampling and seeding for one render. Height is derived
    from width and aspect ratio when not given.
    """
    def __init__(self, width: int = DEFAULT_WIDTH, height: Optional[int] = None,
                 aspect_ratio: float = DEFAULT_ASPECT_RATIO,
                 samples_per_pixel: int = DEFAULT_SAMPLES,
                 max_depth: int = DEFAULT_MAX_DEPTH,
                 seed: int = DEFAULT_SEED, per_pixel_seed: bool = False):
        if aspect_ratio <= 0:
            raise ValueError(f"aspect_ratio must be positive, got {aspect_ratio}")
        if height is None:
            height = max(int(width / aspect_ratio), 1)
        for name, value in (("width", width), ("height", height),
                            ("samples_per_pixel", samples_per_pixel),
                            ("max_depth", max_depth)):
            if value <= 0:
                raise ValueError(f"{name} must be positive, got {value}")
        self.width = width
        self.height = height
        self.aspect_ratio = width / height
        self.samples_per_pixel = samples_per_pixel
        self.max_depth = max_depth
        self.seed = seed
        self.per_pixel_seed = per_pixel_seed

    @classmethod
    def from_quality(cls, level: str, samples_per_pixel: Optional[int] = None,
                     max_depth: Optional[int] = None, **kwargs) -> "RenderSettings":
        """Settings for a named quality level; explicit samples or depth win."""
        quality = QUALITY_LEVELS[level]
        if samples_per_pixel is None:
            samples_per_pixel = quality["samples"]
        if max_depth is None:
            max_depth = quality["max_depth"]
        return cls(samples_per_pixel=samples_per_pixel, max_depth=max_depth, **kwargs)

    def __repr__(self) -> str:
        return (f"RenderSettings({self.width}x{self.height}, "
                f"spp={self.samples_per_pixel}, depth={self.max_depth}, seed={self.seed})")
