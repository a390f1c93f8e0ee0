"""Text serialization of point sets."""

from pathlib import Path
from typing import Literal, Union

import numpy as np

from poissongen.core.exceptions import ExportError


def format_raw(points: np.ndarray) -> str:
    """Coordinate dump: a count line followed by one "x y" pair per line."""
    lines = [str(len(points))]
    lines.extend(f"{x!r} {y!r}" for x, y in points.tolist())
    return "\n".join(lines) + "\n"


def format_array(points: np.ndarray, name: str = "points") -> str:
    """Source-embeddable array literal of vec2 values.

    Example::

        const vec2 points[2] = vec2[](
            vec2(0.250000, 0.750000),
            vec2(0.500000, 0.125000)
        );
    """
    entries = [f"    vec2({x:.6f}, {y:.6f})" for x, y in points.tolist()]
    body = ",\n".join(entries)
    return f"const vec2 {name}[{len(points)}] = vec2[](\n{body}\n);\n"


def write_points(
    points: np.ndarray,
    path: Union[str, Path],
    fmt: Literal["raw", "array"] = "raw",
    name: str = "points",
) -> Path:
    """Write a point set to a text file.

    Args:
        points: Point array (N, 2)
        path: Output file path
        fmt: "raw" coordinate dump or "array" source literal
        name: Variable name for the array literal

    Returns:
        Path written

    Raises:
        ExportError: If the format is unknown or the file cannot be written
    """
    path = Path(path)
    if fmt == "raw":
        text = format_raw(points)
    elif fmt == "array":
        text = format_array(points, name=name)
    else:
        raise ExportError(path, f"Unknown format '{fmt}'")

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text)
    except OSError as e:
        raise ExportError(path, str(e))

    return path


def read_points(path: Union[str, Path]) -> np.ndarray:
    """Read a raw coordinate dump written by write_points.

    Args:
        path: Input file path

    Returns:
        Point array (N, 2)

    Raises:
        ExportError: If the file is missing or malformed
    """
    path = Path(path)
    try:
        lines = path.read_text().split("\n")
    except OSError as e:
        raise ExportError(path, str(e))

    lines = [line for line in lines if line.strip()]
    if not lines:
        raise ExportError(path, "File is empty")

    try:
        count = int(lines[0])
        coords = [tuple(float(v) for v in line.split()) for line in lines[1:]]
    except ValueError as e:
        raise ExportError(path, f"Malformed point data: {e}")

    if len(coords) != count:
        raise ExportError(path, f"Header says {count} points, found {len(coords)}")
    if any(len(c) != 2 for c in coords):
        raise ExportError(path, "Each point line must hold two values")

    if not coords:
        return np.empty((0, 2), dtype=np.float64)
    return np.asarray(coords, dtype=np.float64)
