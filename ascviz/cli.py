# -*- coding: utf-8 -*-
"""
ascviz CLI - Render an ASC elevation raster to quick-look images.

Reads one ``.asc`` file and writes four images into the output
directory, each stamped with the time of the run:

- ``output_<ts>.png``                 elevation, grayscale
- ``output_rgb_<ts>_<cmap>.png``      elevation, color gradient
- ``hillshade_gray_<ts>.png``         hillshade, grayscale
- ``hillshade_rgb_<ts>.png``          hillshade, color

Usage:
  ascviz dem.asc
  ascviz dem.asc --cmap terrain --azimuth 270 --altitude 30
  ascviz dem.asc --output-dir renders --format numpy
  ascviz --help

Author
------
Duane Smalley, PhD
duane.d.smalley@gmail.com

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-10-17

Modified
--------
2026-10-17
"""

# Standard library
import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

# ascviz internal
from ascviz.exceptions import ParseError, ValidationError
from ascviz.IO import FORMAT_EXTENSIONS, get_writer
from ascviz.IO.asc import read_asc
from ascviz.image_processing.color import DEFAULT_GRADIENT
from ascviz.image_processing.hillshade import DEFAULT_LIGHT, LightSource
from ascviz.rendering import RenderedProducts, render
from ascviz.vocabulary import OutputFormat, OutputProduct

logger = logging.getLogger(__name__)

#: Directory the rendered images go to unless ``--output-dir`` is given.
DEFAULT_OUTPUT_DIR = Path("output_img")

TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Parameters
    ----------
    argv : Sequence[str], optional
        Arguments without the program name. Defaults to ``sys.argv[1:]``.

    Returns
    -------
    argparse.Namespace
        Parsed arguments.
    """
    parser = argparse.ArgumentParser(
        prog="ascviz",
        description="Render an ASC elevation raster as grayscale, color, "
                    "and hillshade images.",
    )
    parser.add_argument(
        "filepath",
        type=Path,
        help="Path to the .asc elevation raster.",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=DEFAULT_OUTPUT_DIR,
        help=f"Directory for rendered images (default: {DEFAULT_OUTPUT_DIR}).",
    )
    parser.add_argument(
        "--cmap",
        type=str,
        default=DEFAULT_GRADIENT,
        help=f"Matplotlib colormap for color products "
             f"(default: {DEFAULT_GRADIENT}).",
    )
    parser.add_argument(
        "--azimuth",
        type=float,
        default=DEFAULT_LIGHT.azimuth,
        help=f"Light azimuth in degrees clockwise from north "
             f"(default: {DEFAULT_LIGHT.azimuth:g}).",
    )
    parser.add_argument(
        "--altitude",
        type=float,
        default=DEFAULT_LIGHT.altitude,
        help=f"Light altitude above the horizon in degrees "
             f"(default: {DEFAULT_LIGHT.altitude:g}).",
    )
    parser.add_argument(
        "--z-factor",
        type=float,
        default=1.0,
        help="Vertical exaggeration for the hillshade (default: 1).",
    )
    parser.add_argument(
        "--stencil",
        choices=("horn", "central"),
        default="horn",
        help="Hillshade gradient stencil (default: horn).",
    )
    parser.add_argument(
        "--format",
        choices=[f.value for f in OutputFormat],
        default=OutputFormat.PNG.value,
        help="Output file format (default: png).",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    return parser.parse_args(argv)


def output_name(product: OutputProduct, timestamp: str, cmap: str) -> str:
    """File stem for *product*, e.g. ``output_rgb_20261017_120000_turbo``."""
    stem = f"{product.value}_{timestamp}"
    if product is OutputProduct.ELEVATION_RGB:
        stem = f"{stem}_{cmap}"
    return stem


def save_products(
    products: RenderedProducts,
    output_dir: Path,
    timestamp: str,
    cmap: str = DEFAULT_GRADIENT,
    format: str = OutputFormat.PNG.value,
    metadata: Optional[Dict[str, Any]] = None,
) -> List[Path]:
    """Write every non-empty product into *output_dir*.

    Parameters
    ----------
    products : RenderedProducts
        Rendered buffers.
    output_dir : Path
        Destination directory, created if needed.
    timestamp : str
        Run timestamp embedded in every file name.
    cmap : str
        Colormap name, embedded in the elevation RGB file name.
    format : str
        ``'png'`` or ``'numpy'``.
    metadata : Dict[str, Any], optional
        Passed to each writer.

    Returns
    -------
    List[Path]
        Paths written, in ``OutputProduct`` order.
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    extension = FORMAT_EXTENSIONS[format]

    written = []
    for product, buffer in products.items():
        if buffer.is_empty:
            logger.warning("Skipping empty %s image (%dx%d)",
                           product.name.lower(), buffer.width, buffer.height)
            continue
        path = output_dir / (output_name(product, timestamp, cmap) + extension)
        with get_writer(format, path, metadata=metadata) as writer:
            writer.write(buffer.data)
        logger.debug("Wrote %s (%dx%d %s)",
                     path, buffer.width, buffer.height, buffer.mode)
        written.append(path)
    return written


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point of the ``ascviz`` command.

    Returns
    -------
    int
        0 on success, 1 if the input cannot be read or parsed or a
        rendering option is invalid.
    """
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    print(f"Opening: {args.filepath}")
    try:
        grid = read_asc(args.filepath)
    except FileNotFoundError as exc:
        logger.error("%s", exc)
        return 1
    except ParseError as exc:
        logger.error("Could not parse %s: %s", args.filepath, exc)
        return 1

    print(f"  Size:           {grid.n_rows} x {grid.n_cols}")
    print(f"  Cell size:      {grid.cell_size:g}")
    print(f"  Valid cells:    {grid.valid_count} of {grid.n_rows * grid.n_cols}")

    try:
        light = LightSource(azimuth=args.azimuth, altitude=args.altitude)
        products = render(
            grid,
            light=light,
            gradient=args.cmap,
            z_factor=args.z_factor,
            stencil=args.stencil,
        )
    except ValidationError as exc:
        logger.error("%s", exc)
        return 1

    timestamp = datetime.now().strftime(TIMESTAMP_FORMAT)
    written = save_products(
        products,
        args.output_dir,
        timestamp,
        cmap=args.cmap,
        format=args.format,
        metadata=grid.to_dict(),
    )
    for path in written:
        print(f"Saved: {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
