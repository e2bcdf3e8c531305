import argparse
import logging
import sys
from .core import OptionSpec, CALL, PUT
from .black_scholes import price as bs_price, greeks as bs_greeks
from .book import read_book, price_rows, write_results
from .errors import DomainError, InvalidOptionType
from .functions import FUNCTIONS, call_function

logger = logging.getLogger(__name__)

def _kind(s: str):
    s = s.lower()
    if s in {"call", "c"}:
        return CALL
    if s in {"put", "p"}:
        return PUT
    raise argparse.ArgumentTypeError("kind must be 'call' or 'put'")

def add_common(parser: argparse.ArgumentParser):
    parser.add_argument("--S0", type=float, required=True, help="spot price")
    parser.add_argument("--K", type=float, required=True, help="strike")
    parser.add_argument("--sigma", type=float, required=True, help="annualised volatility")
    parser.add_argument("--r", type=float, required=True, help="cont. risk-free")
    parser.add_argument("--q", type=float, default=0.0, help="cont. dividend yield")
    parser.add_argument("--days", type=float, required=True, help="calendar days to expiry")
    parser.add_argument("--kind", type=_kind, default=CALL, help="call|put")

def _spec(args) -> OptionSpec:
    return OptionSpec(args.S0, args.K, args.sigma, args.r, args.q, args.days)

def cmd_price(args):
    print(f"{bs_price(_spec(args), args.kind):.10f}")

def cmd_greeks(args):
    for name, value in bs_greeks(_spec(args), args.kind).items():
        print(f"{name:<6} {value:.10f}")

def cmd_fn(args):
    values = []
    for a in args.args:
        try:
            values.append(float(a))
        except ValueError:
            values.append(a)
    print(f"{call_function(args.name, *values):.10f}")

def cmd_book(args):
    rows = read_book(args.input)
    print(f"Pricing {len(rows)} positions...")
    results = price_rows(rows, greeks=args.greeks)
    write_results(results, args.output)
    print(f"Results written to {args.output}")

    priced = [r for r in results if r.get("price") is not None]
    failed = [r for r in results if r.get("price") is None]
    print(f"  Priced: {len(priced)}  |  Failed: {len(failed)}")

def main(argv=None):
    p = argparse.ArgumentParser(prog="bsfuncs", description="Black-Scholes option functions")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_price = sub.add_parser("price", help="Black-Scholes price")
    add_common(p_price)
    p_price.set_defaults(func=cmd_price)

    p_greeks = sub.add_parser("greeks", help="price and Greeks")
    add_common(p_greeks)
    p_greeks.set_defaults(func=cmd_greeks)

    p_fn = sub.add_parser("fn", help="evaluate a spreadsheet function, e.g. CALLPRICE")
    p_fn.add_argument("name", help=", ".join(FUNCTIONS))
    p_fn.add_argument("args", nargs="+", help="arguments in worksheet order")
    p_fn.set_defaults(func=cmd_fn)

    p_book = sub.add_parser("book", help="batch-price a CSV book")
    p_book.add_argument("--input", required=True, help="path to book CSV")
    p_book.add_argument("--output", required=True, help="output path (.csv or .json)")
    p_book.add_argument("--greeks", action="store_true", help="compute Greeks")
    p_book.set_defaults(func=cmd_book)

    args = p.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        args.func(args)
    except (DomainError, InvalidOptionType, KeyError, TypeError) as e:
        logger.debug("command %s failed", args.cmd, exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 2
    return 0

if __name__ == "__main__":
    sys.exit(main())
