from __future__ import annotations

from . import floats, rng
from .angle import Angle
from .cli_parser import build_parser
from .config import Config, check_decimals, load_config
from .constants import FLOAT_MAX
from .errors import AngleParseError
from .notation import DMS_STYLES


def _load(args) -> Config:
    try:
        return load_config(args.config)
    except (OSError, ValueError) as exc:
        raise SystemExit(f"anglecore: bad config {args.config!r}: {exc}")


def _parse_angle(text: str) -> Angle:
    try:
        return Angle.parse(text)
    except AngleParseError as exc:
        raise SystemExit(f"anglecore: {exc}")


def _style_and_decimals(args, cfg: Config) -> tuple[str, int | None]:
    style = args.style if args.style is not None else cfg.format.style
    if args.decimals is None:
        return style, cfg.format.decimals
    try:
        return style, check_decimals(args.decimals, "--decimals")
    except ValueError as exc:
        raise SystemExit(f"anglecore: {exc}")


def _cmd_convert(args) -> None:
    cfg = _load(args)
    a = _parse_angle(args.text)
    style, decimals = _style_and_decimals(args, cfg)
    print(a.format(style, decimals))


def _cmd_wrap(args) -> None:
    cfg = _load(args)
    a = _parse_angle(args.text)
    signed = cfg.wrap.signed if args.signed is None else bool(args.signed)
    style, decimals = _style_and_decimals(args, cfg)
    print(a.wrap(signed).format(style, decimals))


def _cmd_dms(args) -> None:
    _load(args)
    a = _parse_angle(args.text)
    parts = a.to_dms(DMS_STYLES[args.unit])
    print(" ".join(repr(x) for x in parts))


def _cmd_trig(args) -> None:
    _load(args)
    a = _parse_angle(args.text)
    print(f"sin {a.sin()!r}")
    print(f"cos {a.cos()!r}")
    print(f"tan {a.tan()!r}")


def _cmd_float(args) -> None:
    _load(args)
    try:
        x = float(args.value)
    except ValueError:
        raise SystemExit(f"anglecore: not a float: {args.value!r}")
    parts = floats.disassemble(x)
    print(f"hex {floats.to_hex(x)}")
    print(f"sign {parts.sign} exponent {parts.exponent} fraction {parts.fraction}")
    print(f"special {floats.is_special(x)}")
    print(f"next {floats.next_float(x)!r}")
    print(f"previous {floats.previous_float(x)!r}")


def _cmd_rand(args) -> None:
    cfg = _load(args)
    seed = args.seed if args.seed is not None else cfg.random.seed
    if seed is not None:
        rng.seed(seed)
    if args.count < 1:
        raise SystemExit("anglecore: --count must be >= 1")
    lo = -FLOAT_MAX if args.min_value is None else args.min_value
    hi = FLOAT_MAX if args.max_value is None else args.max_value
    if args.uniform and (args.min_value is None or args.max_value is None):
        raise SystemExit("anglecore: --uniform needs both --min and --max")
    draw = floats.rand_uniform if args.uniform else floats.rand
    for _ in range(args.count):
        try:
            x = draw(lo, hi)
        except ValueError as exc:
            raise SystemExit(f"anglecore: {exc}")
        print(repr(x))


def main() -> None:
    p = build_parser(
        cmd_convert=_cmd_convert,
        cmd_wrap=_cmd_wrap,
        cmd_dms=_cmd_dms,
        cmd_trig=_cmd_trig,
        cmd_float=_cmd_float,
        cmd_rand=_cmd_rand,
    )
    args = p.parse_args()
    func = getattr(args, "func", None)
    if func is None:
        raise SystemExit(f"unsupported cmd: {getattr(args, 'cmd', None)}")
    func(args)


if __name__ == "__main__":
    main()
