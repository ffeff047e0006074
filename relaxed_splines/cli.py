"""
Relaxed Splines Command Line Interface

Command-line tools for computing relaxed spline control points, Bezier
segments and sampled curves from point files.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional

from tqdm import tqdm

from . import __version__
from .api import load_points, save_points, segments_to_dict, write_json
from .core.bezier import bezier_segments, sample_curve
from .core.control_points import SplineConfig, control_points
from .exceptions import ConfigurationError, RelaxedSplinesError
from .utils.logging import setup_logging
from .utils.tensor_ops import points_to_array

logger = logging.getLogger(__name__)


def setup_cli_logging(verbose: int = 0):
    """Setup logging for CLI with appropriate verbosity"""
    if verbose >= 2:
        level = logging.DEBUG
    elif verbose >= 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    setup_logging(level)


def print_banner():
    """Print Relaxed Splines banner"""
    banner = f"""
Relaxed Splines v{__version__}
Relaxed cubic spline control points via the tridiagonal matrix algorithm
"""
    print(banner)


def print_success(message: str):
    print(f"[ok] {message}")


def print_error(message: str):
    print(f"[error] {message}", file=sys.stderr)


def print_info(message: str):
    print(f"[info] {message}")


def _config_from_args(args) -> SplineConfig:
    return SplineConfig(
        allow_degenerate=not args.strict,
        parallel_axes=args.parallel,
    )


def _write_json(data, output: Optional[str]):
    if output:
        write_json(output, data)
    else:
        print(json.dumps(data, indent=2))


def _batch_output_paths(inputs: List[str], output_dir: Path) -> Dict[str, Path]:
    """Map each input file to ``<stem>.control.json`` in ``output_dir``"""
    outputs = {}
    seen = {}
    for input_path in inputs:
        target = output_dir / f"{Path(input_path).stem}.control.json"
        if target in seen:
            raise ConfigurationError(
                f"'{input_path}' and '{seen[target]}' would both be written to {target}",
                config_key="inputs",
                config_value=Path(input_path).name
            )
        seen[target] = input_path
        outputs[input_path] = target
    return outputs


def control_points_command(args):
    """Handle control point computation for one or more input files"""
    config = _config_from_args(args)

    if len(args.inputs) == 1:
        points = load_points(args.inputs[0])
        result = control_points(points, config)
        if args.output:
            save_points(args.output, result)
            print_success(f"{len(result)} control points written to {args.output}")
        else:
            _write_json(points_to_array(result).tolist(), None)
        return 0

    output_dir = Path(args.output_dir or '.')
    targets = _batch_output_paths(args.inputs, output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    failures = 0
    for input_path in tqdm(args.inputs, desc="Solving", unit="file", disable=args.quiet):
        try:
            result = control_points(load_points(input_path), config)
            save_points(targets[input_path], result)
        except RelaxedSplinesError as e:
            failures += 1
            logger.error(f"Failed to process {input_path}: {e}")
            print_error(f"{input_path}: {e}")

    processed = len(args.inputs) - failures
    print_info(f"Processed {processed}/{len(args.inputs)} files into {output_dir}")
    return 1 if failures else 0


def segments_command(args):
    """Handle Bezier segment export"""
    segments = bezier_segments(load_points(args.input), _config_from_args(args))
    _write_json(segments_to_dict(segments), args.output)
    if args.output:
        print_success(f"{len(segments)} segments written to {args.output}")
    return 0


def sample_command(args):
    """Handle curve sampling"""
    curve = sample_curve(load_points(args.input), args.samples, _config_from_args(args))
    if args.output:
        save_points(args.output, curve)
        print_success(f"{len(curve)} curve samples written to {args.output}")
    else:
        _write_json(curve.tolist(), None)
    return 0


def info_command(args):
    """Show solver information"""
    print_info("Solver: Thomas algorithm on the (1, 4, 1) relaxed spline system")
    print_info("Minimum points: 3 (three points solve a single-row system)")
    print_info("Input and output formats: .json, .csv, .txt, .dat")
    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser"""
    parser = argparse.ArgumentParser(
        prog='relaxed-splines',
        description='Relaxed cubic spline control points from 2D point files',
    )
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument(
        '--verbose', '-v',
        action='count',
        default=0,
        help='Increase verbosity (-v info, -vv debug)'
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    solver_options = argparse.ArgumentParser(add_help=False)
    solver_options.add_argument(
        '--strict',
        action='store_true',
        help='Reject three point inputs instead of solving the single-row system'
    )
    solver_options.add_argument(
        '--parallel',
        action='store_true',
        help='Solve the X and Y axes on separate threads'
    )

    # Control points command
    cp_parser = subparsers.add_parser(
        'control-points',
        parents=[solver_options],
        help='Compute control points for one or more point files'
    )
    cp_parser.add_argument('inputs', nargs='+', help='Point files (.json, .csv, .txt)')
    cp_parser.add_argument('--output', '-o', help='Output file, .json, .csv or .txt (single input only)')
    cp_parser.add_argument('--output-dir', '-d', help='Output directory for multiple inputs')
    cp_parser.add_argument('--quiet', '-q', action='store_true', help='Hide the progress bar')

    # Segments command
    seg_parser = subparsers.add_parser(
        'segments',
        parents=[solver_options],
        help='Export cubic Bezier segments through the points'
    )
    seg_parser.add_argument('input', help='Point file')
    seg_parser.add_argument('--output', '-o', help='Output JSON file')

    # Sample command
    sample_parser = subparsers.add_parser(
        'sample',
        parents=[solver_options],
        help='Sample the spline curve through the points'
    )
    sample_parser.add_argument('input', help='Point file')
    sample_parser.add_argument(
        '--samples', '-n',
        type=int,
        default=SplineConfig.samples_per_segment,
        help='Samples per segment (default: %(default)s)'
    )
    sample_parser.add_argument('--output', '-o', help='Output file (.json, .csv or .txt)')

    # Info command
    subparsers.add_parser('info', help='Show information about the solver')

    return parser


def main(argv: Optional[List[str]] = None):
    """Main CLI entry point"""

    parser = create_parser()
    args = parser.parse_args(argv)

    setup_cli_logging(args.verbose)

    if args.command == 'info':
        print_banner()

    try:
        if args.command == 'control-points':
            if args.output and len(args.inputs) > 1:
                print_error("--output takes a single input; use --output-dir for several")
                return 1
            return control_points_command(args)
        elif args.command == 'segments':
            return segments_command(args)
        elif args.command == 'sample':
            return sample_command(args)
        elif args.command == 'info':
            return info_command(args)
        else:
            parser.print_help()
            return 0

    except KeyboardInterrupt:
        print_info("Operation cancelled by user")
        return 1
    except RelaxedSplinesError as e:
        print_error(str(e))
        return 1
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        if args.verbose >= 2:
            import traceback
            traceback.print_exc()
        return 1


if __name__ == '__main__':
    sys.exit(main())
