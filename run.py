import sys
from argparse import ArgumentParser, RawTextHelpFormatter

from bigdec.domain.services import nth_root, pow, round_off, strip_trailing_zero
from bigdec.domain.values import RoundingMode
from bigdec.shared.config import get_settings
from bigdec.shared.logging import configure_logging, get_logger

settings = get_settings()

configure_logging(
    log_level=settings.LOG_LEVEL,
    json_logs=settings.JSON_LOGS
)

logger = get_logger(__name__)


def setup_arg_parser() -> ArgumentParser:
    parser = ArgumentParser(
        description="Arbitrary-precision decimal power and root calculator",
        formatter_class=RawTextHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", required=True, help="Available commands")

    pow_parser = subparsers.add_parser("pow", help="Raise BASE to a decimal EXPONENT.")
    pow_parser.add_argument("base")
    pow_parser.add_argument("exponent")
    pow_parser.add_argument("--precision", type=int, default=settings.DEFAULT_PRECISION)
    pow_parser.add_argument("--negate", action="store_true", help="Evaluate as -(base ^ exponent)")
    pow_parser.set_defaults(func=run_pow)

    root_parser = subparsers.add_parser(
        "root",
        aliases=["nth-root"],
        help="Extract the N-th root of X."
    )
    root_parser.add_argument("x")
    root_parser.add_argument("n")
    root_parser.add_argument("--precision", type=int, default=settings.DEFAULT_PRECISION)
    root_parser.set_defaults(func=run_root)

    round_parser = subparsers.add_parser("round", help="Round VALUE to a number of fractional digits.")
    round_parser.add_argument("value")
    round_parser.add_argument("--precision", type=int, default=0)
    round_parser.add_argument(
        "--mode",
        type=str.upper,
        choices=[mode.value for mode in RoundingMode],
        default=settings.ROUNDING_MODE.value,
    )
    round_parser.set_defaults(func=run_round)

    return parser


def run_pow(args) -> str:
    logger.debug(
        "pow_starting",
        base=args.base,
        exponent=args.exponent,
        precision=args.precision,
        negate=args.negate,
    )
    return pow(args.base, args.exponent, args.precision, args.negate)


def run_root(args) -> str:
    logger.debug("root_starting", x=args.x, n=args.n, precision=args.precision)
    result = nth_root(args.x, args.n, args.precision, args.precision)
    return strip_trailing_zero(round_off(result, args.precision))


def run_round(args) -> str:
    return round_off(args.value, args.precision, RoundingMode(args.mode))


def main(argv=None) -> None:
    parser = setup_arg_parser()
    args = parser.parse_args(argv)

    logger.debug("command_starting", command=args.command)

    try:
        result = args.func(args)
    except Exception as e:
        logger.error(
            "command_failed",
            command=args.command,
            error=str(e),
            exc_info=True
        )
        sys.exit(1)

    print(result)

    logger.debug("command_completed", command=args.command)
    sys.exit(0)


if __name__ == "__main__":
    main()
