import os
import sys
import logging
import argparse

# Add the current directory to Python path for imports
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from configuration import (
    REMOTE_PATH, LOCAL_PATH, SAMPLE_FILE_COUNT, SAMPLE_FILE_SIZE_MB,
    SAMPLE_FILE_PREFIX, DEFAULT_RESULTS_DIR, DEFAULT_PLOTS_DIR,
    DEFAULT_OUTPUT_FORMAT, LOG_FORMAT, EXIT_OK, EXIT_FAILURE, EXIT_USAGE,
)
from common.errors import FatalInputError, FatalInventoryError
from persistence.report import RunStatus

# Set up logging (only if not already configured)
if not logging.root.handlers:
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
logger = logging.getLogger(__name__)


class ShareSpeedTestCLI:
    """CLI interface for the network share speed test."""

    def __init__(self, stdout=None):
        self.stdout = stdout or sys.stdout
        self.subparsers = {}
        self.parser = self._create_parser()

    def _create_parser(self):
        """Create the main argument parser."""
        parser = argparse.ArgumentParser(
            description='Network share speed test',
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  # Create three 10 MB sample files
  python speedtest.py generate --local-path samples --count 3 --size-mb 10

  # Measure write and read throughput against a mounted share
  python speedtest.py run --remote-path /mnt/share/speedtest --local-path samples

  # Plot the saved run history
  python speedtest.py visualize --results-dir results --output-dir plots
            """
        )

        subparsers = parser.add_subparsers(dest='command', help='Available commands')

        # Run command
        run_parser = subparsers.add_parser('run', help='Measure share throughput')
        run_parser.add_argument('--remote-path', type=str, default=REMOTE_PATH,
                                help='Target directory on the network share (env: SPEEDTEST_REMOTE_PATH)')
        run_parser.add_argument('--local-path', type=str, default=LOCAL_PATH,
                                help='Local directory holding the sample files (env: SPEEDTEST_LOCAL_PATH)')
        run_parser.add_argument('--readback-dir', type=str, default=None,
                                help='Directory the read phase copies into (default: the local path)')
        run_parser.add_argument('--format', choices=['json', 'table'], default=DEFAULT_OUTPUT_FORMAT,
                                help=f'Report output format (default: {DEFAULT_OUTPUT_FORMAT})')
        run_parser.add_argument('--results-dir', type=str, default=DEFAULT_RESULTS_DIR,
                                help=f'Directory for the Parquet run history (default: {DEFAULT_RESULTS_DIR})')
        run_parser.add_argument('--no-save', action='store_true',
                                help='Do not save the run records to Parquet')
        run_parser.add_argument('--prom-textfile', type=str, default=None,
                                help='Write Prometheus metrics to this textfile')
        run_parser.add_argument('--cleanup', action='store_true',
                                help='Remove the copied files from the share after the run')
        run_parser.add_argument('-v', '--verbose', action='store_true',
                                help='Show per-file progress messages')
        self.subparsers['run'] = run_parser

        # Generate command
        generate_parser = subparsers.add_parser('generate', help='Create sample files')
        generate_parser.add_argument('--local-path', type=str, default=LOCAL_PATH,
                                     help='Directory to create the sample files in')
        generate_parser.add_argument('--count', type=int, default=SAMPLE_FILE_COUNT,
                                     help=f'Number of files (default: {SAMPLE_FILE_COUNT})')
        generate_parser.add_argument('--size-mb', type=int, default=SAMPLE_FILE_SIZE_MB,
                                     help=f'Size of each file in MB (default: {SAMPLE_FILE_SIZE_MB})')
        generate_parser.add_argument('--prefix', type=str, default=SAMPLE_FILE_PREFIX,
                                     help=f'File name prefix (default: {SAMPLE_FILE_PREFIX})')
        self.subparsers['generate'] = generate_parser

        # Visualize command
        visualize_parser = subparsers.add_parser('visualize', help='Plot saved run history')
        visualize_parser.add_argument('--results-dir', type=str, default=DEFAULT_RESULTS_DIR,
                                      help=f'Directory with saved Parquet runs (default: {DEFAULT_RESULTS_DIR})')
        visualize_parser.add_argument('--output-dir', type=str, default=DEFAULT_PLOTS_DIR,
                                      help=f'Output directory for generated plots (default: {DEFAULT_PLOTS_DIR})')
        self.subparsers['visualize'] = visualize_parser

        return parser

    def _validate_paths(self, args):
        """Both paths must be present and non-empty."""
        missing = [
            name for name, value in (('--remote-path', args.remote_path), ('--local-path', args.local_path))
            if not value or not value.strip()
        ]
        if missing:
            raise FatalInputError(f"missing required argument(s): {', '.join(missing)}")

    def run_speedtest(self, args):
        """Run the speed test and print the report."""
        try:
            self._validate_paths(args)
        except FatalInputError as e:
            parser = self.subparsers['run']
            parser.print_usage(sys.stderr)
            print(f"{parser.prog}: error: {e}", file=sys.stderr)
            return EXIT_USAGE

        if args.verbose:
            logging.getLogger().setLevel(logging.DEBUG)

        try:
            from cli.runner import SpeedTestRunner

            logger.info("=== Share Speed Test ===")

            runner = SpeedTestRunner(
                remote_path=args.remote_path,
                local_path=args.local_path,
                readback_dir=args.readback_dir,
                results_dir=None if args.no_save else args.results_dir,
                prom_textfile=args.prom_textfile,
                cleanup=args.cleanup,
            )
            report = runner.run()

        except FatalInventoryError as e:
            logger.warning(f"{e}")
            logger.error(f"Speed test aborted: {RunStatus.FATAL.value}")
            return EXIT_FAILURE

        if args.format == 'table':
            print(report.to_table(), file=self.stdout)
        else:
            print(report.to_json(), file=self.stdout)

        return EXIT_OK if report.status == RunStatus.OK else EXIT_FAILURE

    def run_generate(self, args):
        """Create sample files."""
        if not args.local_path:
            self.subparsers['generate'].print_usage(sys.stderr)
            return EXIT_USAGE

        try:
            from cli.generator import SampleGenerator

            generator = SampleGenerator(args.local_path, prefix=args.prefix)
            generator.generate(count=args.count, size_mb=args.size_mb)
            return EXIT_OK

        except Exception as e:
            logger.error(f"Error generating sample files: {e}")
            return EXIT_FAILURE

    def run_visualize(self, args):
        """Run the visualization phase."""
        try:
            from cli.visualiser import SpeedTestVisualizer

            logger.info("=== Visualization ===")

            if not os.path.isdir(args.results_dir):
                logger.error(f"Results directory not found: {args.results_dir}")
                return EXIT_FAILURE

            visualizer = SpeedTestVisualizer(args.results_dir, args.output_dir)
            plots = visualizer.create_all_plots()

            if plots:
                logger.info(f"Successfully created {len(plots)} plots in {args.output_dir}")
                for plot in plots:
                    logger.info(f"  - {plot}")
                return EXIT_OK
            else:
                logger.error("No plots were created")
                return EXIT_FAILURE

        except Exception as e:
            logger.error(f"Error in visualization phase: {e}")
            return EXIT_FAILURE

    def run(self, args=None):
        """Run the CLI with the given arguments."""
        if args is None:
            args = sys.argv[1:]

        parsed_args = self.parser.parse_args(args)

        if not parsed_args.command:
            self.parser.print_help(sys.stderr)
            return EXIT_USAGE

        try:
            if parsed_args.command == 'run':
                return self.run_speedtest(parsed_args)
            elif parsed_args.command == 'generate':
                return self.run_generate(parsed_args)
            elif parsed_args.command == 'visualize':
                return self.run_visualize(parsed_args)
            else:
                logger.error(f"Unknown command: {parsed_args.command}")
                return EXIT_FAILURE

        except KeyboardInterrupt:
            logger.info("Operation interrupted by user")
            return EXIT_FAILURE
        except Exception as e:
            logger.error(f"Unexpected error: {e}")
            return EXIT_FAILURE


def main():
    """Main entry point."""
    cli = ShareSpeedTestCLI()
    sys.exit(cli.run())


if __name__ == '__main__':
    main()
