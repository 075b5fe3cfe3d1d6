"""Small PIL helpers for reporting on rendered screenshots."""
from PIL import Image
import os


def png_dimensions(path) -> tuple[int, int]:
    """Pixel (width, height) of an image file on disk."""
    with Image.open(path) as img:
        return img.size


def format_file_size(num_bytes: int) -> str:
    """Human-readable size in KB with two decimals, e.g. '48.25 KB'."""
    return f"{num_bytes / 1024:.2f} KB"


def describe_image(path) -> dict:
    """
    Summary of a written image file.
    Returns {"path", "bytes", "size", "width", "height"}.
    """
    num_bytes = os.path.getsize(path)
    width, height = png_dimensions(path)
    return {
        "path": str(path),
        "bytes": num_bytes,
        "size": format_file_size(num_bytes),
        "width": width,
        "height": height,
    }
