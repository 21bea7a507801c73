#!/usr/bin/env python3
"""Render the demo scene.

This script renders randomly placed spheres above a floor plane, lit by a
single point light, with one primary ray per pixel, and saves the frame as
a PNG.

Usage:
    python -m examples.render_scene [options]

Options:
    --width WIDTH       Image width in pixels (default: 640)
    --height HEIGHT     Image height in pixels (default: 480)
    --shading MODEL     flat, facing-ratio, lambertian or ray-direction
                        (default: lambertian)
    --spheres COUNT     Number of random spheres (default: 12)
    --seed SEED         Random seed for sphere placement (default: 7)
    --fov DEGREES       Field of view in degrees (default: 90)
    --output OUTPUT     Output file path (default: scene.png)
    --show              Open a Matplotlib preview after rendering
    --quiet             Suppress progress output

Example:
    python -m examples.render_scene --width 320 --height 240 --shading facing-ratio
"""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path

import taichi as ti

SHADING_CHOICES = ("flat", "facing-ratio", "lambertian", "ray-direction")


def parse_args() -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Render the demo scene.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--width",
        type=int,
        default=640,
        help="Image width in pixels (default: 640)",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=480,
        help="Image height in pixels (default: 480)",
    )
    parser.add_argument(
        "--shading",
        choices=SHADING_CHOICES,
        default="lambertian",
        help="Shading model (default: lambertian)",
    )
    parser.add_argument(
        "--spheres",
        type=int,
        default=12,
        help="Number of random spheres (default: 12)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=7,
        help="Random seed for sphere placement (default: 7)",
    )
    parser.add_argument(
        "--fov",
        type=float,
        default=90.0,
        help="Field of view in degrees (default: 90)",
    )
    parser.add_argument(
        "--output",
        type=str,
        default="scene.png",
        help="Output file path (default: scene.png)",
    )
    parser.add_argument(
        "--show",
        action="store_true",
        help="Open a Matplotlib preview after rendering",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress progress output",
    )
    return parser.parse_args()


def render_scene(
    width: int = 640,
    height: int = 480,
    shading: str = "lambertian",
    num_spheres: int = 12,
    seed: int | None = 7,
    fov: float = 90.0,
    output_path: str = "scene.png",
    show: bool = False,
    quiet: bool = False,
) -> Path:
    """Render the demo scene and save to file.

    Args:
        width: Image width in pixels.
        height: Image height in pixels.
        shading: Shading model name.
        num_spheres: Number of random spheres.
        seed: Random seed for sphere placement.
        fov: Field of view in degrees.
        output_path: Output file path (PNG).
        show: If True, open a Matplotlib preview of the frame.
        quiet: If True, suppress progress output.

    Returns:
        Path to the saved image file.
    """
    # Lazy imports to allow Taichi initialization first
    from src.minitrace.camera.pinhole import PinholeCamera
    from src.minitrace.core.renderer import RenderSettings, render
    from src.minitrace.preview.display import show_frame
    from src.minitrace.preview.export import save_png
    from src.minitrace.scene.demo import create_demo_scene

    scene = create_demo_scene(num_spheres=num_spheres, seed=seed)
    camera = PinholeCamera(fov=fov)
    settings = RenderSettings(width, height, shading=shading)

    if not quiet:
        print(f"Created {scene.summary()}")
        print(f"Rendering {width}x{height} with {settings.shading.name.lower()} shading...")

    start_time = time.time()
    frame = render(scene, camera, settings)
    render_time = time.time() - start_time

    output_file = save_png(frame, output_path)

    if not quiet:
        print(f"Saved to: {output_file.absolute()}")
        print(f"Render time: {render_time:.2f}s")

    if show:
        show_frame(frame, title=f"{scene.summary()} - {settings.shading.name.lower()}")

    return output_file


def main() -> int:
    """Main entry point."""
    args = parse_args()

    # Initialize Taichi
    # Use GPU if available, fall back to CPU
    try:
        ti.init(arch=ti.gpu)
        if not args.quiet:
            print("Using GPU backend")
    except Exception:
        ti.init(arch=ti.cpu)
        if not args.quiet:
            print("Using CPU backend")

    try:
        render_scene(
            width=args.width,
            height=args.height,
            shading=args.shading,
            num_spheres=args.spheres,
            seed=args.seed,
            fov=args.fov,
            output_path=args.output,
            show=args.show,
            quiet=args.quiet,
        )
        return 0
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
