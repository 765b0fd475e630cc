import argparse
import sys
import threading

from . import constants
from .controllers import rendering
from .controllers.collection import SampleSource
from .data import generate_test_data
from .events import Events
from .logger import setup_logger
from .series import SlidingWindowSeries
from .terminal import Terminal


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="pingplot",
        description="Live terminal chart of ping round-trip times. Press the quit key to exit.",
    )
    parser.add_argument("--host", default=constants.DEFAULT_HOST, help="Target to ping (default: %(default)s).")
    parser.add_argument(
        "--ping-path", default=constants.PING_PATH, help="ping executable (default: %(default)s)."
    )
    parser.add_argument(
        "--capacity",
        type=int,
        default=constants.DEFAULT_CAPACITY,
        help="Samples kept on screen (default: %(default)s).",
    )
    parser.add_argument(
        "--y-max",
        type=float,
        default=constants.Y_BOUNDS[1],
        help="Top of the latency axis in ms (default: %(default)s).",
    )
    parser.add_argument(
        "--tick-rate",
        type=int,
        default=constants.DEFAULT_TICK_RATE_MS,
        metavar="MS",
        help="Redraw at least this often when no key is pressed (default: %(default)s).",
    )
    parser.add_argument("--quit-key", default=constants.QUIT_KEY, help="Key that exits (default: %(default)s).")
    parser.add_argument("--log-file", metavar="PATH", help="Write a debug log here.")
    parser.add_argument(
        "--test-data",
        type=int,
        metavar="COUNT",
        help="Prefill the chart with COUNT synthetic samples.",
    )
    args = parser.parse_args(argv)

    if args.capacity < 1:
        parser.error("--capacity must be at least 1")
    if args.y_max <= constants.Y_BOUNDS[0]:
        parser.error(f"--y-max must be greater than {constants.Y_BOUNDS[0]:g}")
    if args.tick_rate < 1:
        parser.error("--tick-rate must be at least 1")
    # Keys are read one byte at a time.
    if len(args.quit_key) != 1 or not args.quit_key.isascii():
        parser.error("--quit-key must be a single ASCII character")
    return args


def main(argv=None):
    args = parse_args(argv if argv is not None else sys.argv[1:])
    logger = setup_logger(args.log_file)
    logger.info("pingplot starting")

    series = SlidingWindowSeries(args.capacity)
    lock = threading.Lock()
    y_bounds = (constants.Y_BOUNDS[0], args.y_max)

    if args.test_data:
        generate_test_data(series, args.test_data)
        logger.info(f"Prefilled {args.test_data} synthetic samples")

    SampleSource(series, lock, host=args.host, ping_path=args.ping_path).start()

    try:
        with Terminal() as terminal:
            events = Events(terminal.fd, args.tick_rate)
            rendering.run(series, lock, terminal, events, quit_key=args.quit_key, y_bounds=y_bounds)
    finally:
        logger.info("pingplot shutdown")


if __name__ == "__main__":
    main()
