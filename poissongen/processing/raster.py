"""Rasterizing point sets into images, density thinning and frame sequences."""

import math
from pathlib import Path
from typing import Iterator, List, Optional, Union

import matplotlib.image as mpimg
import numpy as np
import structlog

from poissongen.core.exceptions import DensityMapError
from poissongen.sampling.prng import DefaultPRNG

logger = structlog.get_logger(__name__)


def load_density_map(
    path: Union[str, Path],
    size: Optional[int] = None,
) -> np.ndarray:
    """Load a grayscale density map with values in [0, 1].

    Colour images use their first channel. Integer images are scaled by 255.

    Args:
        path: Image file path
        size: Required width and height in pixels, if any

    Returns:
        Density array indexed [row, column]

    Raises:
        DensityMapError: If the file is missing, unreadable or the wrong size
    """
    path = Path(path)
    if not path.exists():
        raise DensityMapError(path, "File does not exist")

    try:
        image = mpimg.imread(path)
    except Exception as e:
        raise DensityMapError(path, str(e))

    if image.ndim == 3:
        image = image[:, :, 0]
    elif image.ndim != 2:
        raise DensityMapError(path, f"Unsupported image shape {image.shape}")

    if np.issubdtype(image.dtype, np.integer):
        density = image.astype(np.float64) / 255.0
    else:
        density = image.astype(np.float64)

    height, width = density.shape
    if size is not None and (width != size or height != size):
        raise DensityMapError(
            path, f"Density map is {width}x{height}, expected {size}x{size}"
        )

    logger.debug("density_map_loaded", path=str(path), width=width, height=height)
    return np.clip(density, 0.0, 1.0)


def rasterize_points(
    points: np.ndarray,
    size: int,
    density_map: Optional[np.ndarray] = None,
    rng: Optional[DefaultPRNG] = None,
    value: int = 255,
    image: Optional[np.ndarray] = None,
) -> np.ndarray:
    """Mark the pixel of each point in a square grayscale image.

    Points whose pixel falls outside the image (coordinates on the far
    domain edge) are skipped. With a density map, each point survives when
    a fresh uniform draw is at most the density at its pixel.

    Args:
        points: Point array (N, 2) in [0, 1] coordinates
        size: Image width and height in pixels
        density_map: Optional density array (size, size) indexed [row, column]
        rng: Random source for density thinning
        value: Pixel value written for each point
        image: Existing image to draw into

    Returns:
        Image array (size, size) of uint8, indexed [row, column]
    """
    if image is None:
        image = np.zeros((size, size), dtype=np.uint8)
    if density_map is not None and rng is None:
        rng = DefaultPRNG()

    for x, y in points:
        px = math.floor(x * size)
        py = math.floor(y * size)
        if not (0 <= px < size and 0 <= py < size):
            continue
        if density_map is not None:
            if rng.random_float() > density_map[py, px]:
                continue
        image[py, px] = value

    return image


def render_frames(
    points: np.ndarray,
    size: int,
    every: int = 1,
    value: int = 255,
) -> Iterator[np.ndarray]:
    """Replay a point sequence as cumulative frames.

    Args:
        points: Point array (N, 2) in reveal order
        size: Frame size in pixels
        every: Emit a frame after every `every` points
        value: Pixel value written for each point

    Yields:
        Copies of the image after each batch, ending with the full set
    """
    if every < 1:
        raise ValueError(f"every must be at least 1, got {every}")

    image = np.zeros((size, size), dtype=np.uint8)
    for start in range(0, len(points), every):
        rasterize_points(points[start:start + every], size, value=value, image=image)
        yield image.copy()


def save_raster(image: np.ndarray, path: Union[str, Path]) -> Path:
    """Save a grayscale raster image.

    The format follows the file suffix (PNG, BMP, ...). Row 0 is written at
    the top of the image.

    Args:
        image: Image array (H, W) of uint8
        path: Output file path

    Returns:
        Path written
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    mpimg.imsave(path, image, cmap="gray", vmin=0, vmax=255)
    return path


def save_frames(
    frames: Iterator[np.ndarray],
    directory: Union[str, Path],
    prefix: str = "frame",
) -> List[Path]:
    """Write frames as a numbered PNG sequence.

    Args:
        frames: Frame arrays
        directory: Output directory
        prefix: File name prefix

    Returns:
        Paths of the written frames
    """
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)

    paths = []
    for i, frame in enumerate(frames):
        paths.append(save_raster(frame, directory / f"{prefix}_{i:05d}.png"))

    logger.info("frames_saved", directory=str(directory), count=len(paths))
    return paths
