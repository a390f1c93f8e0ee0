"""Consumers of generated point sets: rasterization and text export."""

from poissongen.processing.export import (
    format_array,
    format_raw,
    read_points,
    write_points,
)
from poissongen.processing.raster import (
    load_density_map,
    rasterize_points,
    render_frames,
    save_frames,
    save_raster,
)

__all__ = [
    "format_array",
    "format_raw",
    "read_points",
    "write_points",
    "load_density_map",
    "rasterize_points",
    "render_frames",
    "save_frames",
    "save_raster",
]
