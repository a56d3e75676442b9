from __future__ import annotations

import argparse
from typing import Callable

from .notation import FORMAT_STYLES


def _add_common(p: argparse.ArgumentParser) -> None:
    p.add_argument("--config", default="", help="YAML config with format/wrap/random defaults")


def _add_format(p: argparse.ArgumentParser) -> None:
    p.add_argument("--style", choices=list(FORMAT_STYLES), default=None, help="Output style")
    p.add_argument("--decimals", type=int, default=None, help="Decimal places (smallest unit for d/dm/dms)")


def build_parser(
    *,
    cmd_convert: Callable,
    cmd_wrap: Callable,
    cmd_dms: Callable,
    cmd_trig: Callable,
    cmd_float: Callable,
    cmd_rand: Callable,
) -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="anglecore",
        epilog="Put '--' before a negative angle, e.g. anglecore convert -- -12deg",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    pc = sub.add_parser("convert", help="Parse an angle and print it in another style")
    pc.add_argument("text", help="Angle text, e.g. 12deg, 0.5turn, 12°34′56″")
    _add_format(pc)
    _add_common(pc)
    pc.set_defaults(func=cmd_convert)

    pw = sub.add_parser("wrap", help="Wrap an angle into one turn")
    pw.add_argument("text")
    g = pw.add_mutually_exclusive_group()
    g.add_argument("--signed", dest="signed", action="store_true", default=None, help="(-180°, 180°]")
    g.add_argument("--unsigned", dest="signed", action="store_false", help="[0°, 360°)")
    _add_format(pw)
    _add_common(pw)
    pw.set_defaults(func=cmd_wrap)

    pd = sub.add_parser("dms", help="Print degree/arcminute/arcsecond components")
    pd.add_argument("text")
    pd.add_argument("--unit", choices=["d", "dm", "dms"], default="dms")
    _add_common(pd)
    pd.set_defaults(func=cmd_dms)

    pt = sub.add_parser("trig", help="Print sin, cos and tan")
    pt.add_argument("text")
    _add_common(pt)
    pt.set_defaults(func=cmd_trig)

    pf = sub.add_parser("float", help="Inspect the IEEE-754 layout of a float")
    pf.add_argument("value", help="Any float literal accepted by Python, incl. nan/inf/-0.0")
    _add_common(pf)
    pf.set_defaults(func=cmd_float)

    pr = sub.add_parser("rand", help="Draw random floats")
    pr.add_argument("--min", dest="min_value", type=float, default=None)
    pr.add_argument("--max", dest="max_value", type=float, default=None)
    pr.add_argument("--uniform", action="store_true", help="Evenly spaced draws (needs --min/--max)")
    pr.add_argument("--count", type=int, default=1)
    pr.add_argument("--seed", type=int, default=None)
    _add_common(pr)
    pr.set_defaults(func=cmd_rand)

    return p
