import argparse
import os

import numpy as np
from .constants import DEFAULT_ORDER, DEFAULT_EDGE_LENGTH, DEFAULT_CHUNK_SIZE, DEFAULT_MAX_POINTS
from .curve_runtime.builder import generate_hilbert_curve


def build_parser():
    parser = argparse.ArgumentParser(
        prog="hilbertgen",
        description="Generates the point sequence of a 2D Hilbert curve.",
    )
    parser.add_argument("--order", type=int, default=DEFAULT_ORDER,
                        help="Number of subdivisions of the curve.")
    parser.add_argument("--edge-length", type=float, default=DEFAULT_EDGE_LENGTH,
                        help="Edge length the curve is filling.")
    parser.add_argument("--max-points", type=int, default=DEFAULT_MAX_POINTS,
                        help="Point budget; orders above it are clamped.")
    parser.add_argument("--method", choices=["vectorized", "scalar"], default="vectorized",
                        help="How the points are evaluated.")
    parser.add_argument("--chunk-size", type=int, default=DEFAULT_CHUNK_SIZE,
                        help="Indices per vectorized batch.")
    parser.add_argument("--output", default=None,
                        help="Path of an .npz file to save the curve to.")
    parser.add_argument("--quiet", action="store_true",
                        help="Only print warnings and errors.")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    verbose = not args.quiet

    builder_config = {"method": args.method, "params": {"chunk_size": args.chunk_size}}
    try:
        result = generate_hilbert_curve(
            args.order,
            args.edge_length,
            builder_config=builder_config,
            max_points=args.max_points,
            verbose=verbose,
        )
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    if args.quiet:
        # Warnings were not printed by the builder
        for message in result.warnings:
            print(f"Warning: {message}")
    else:
        print(f"Number of rows: {result.number_of_rows}")
        print(f"Number of columns: {result.number_of_columns}")
        print(f"Number of points: {result.number_of_points}")
        print(f"Number of segments: {result.number_of_segments}")
        print(f"Segment length: {result.segment_length}")

    if args.output:
        output_dir = os.path.dirname(args.output)
        if output_dir:
            os.makedirs(output_dir, exist_ok=True)
        np.savez(
            args.output,
            points=result.points,
            order=result.order,
            edge_length=result.edge_length,
            number_of_rows=result.number_of_rows,
            number_of_columns=result.number_of_columns,
            number_of_points=result.number_of_points,
            number_of_segments=result.number_of_segments,
            segment_length=result.segment_length,
            warnings=np.array(result.warnings, dtype=str),
        )
        if verbose:
            print(f"Curve saved to {args.output}")

    return 0
