import argparse
import logging
import sys

from hexmap import (
    DEFAULT_CONFIG, InvalidParameter, load_config, regenerate, render_ascii, summarize,
)

logger = logging.getLogger("hexmap.cli")


def config_from_args(args):
    cfg = load_config(args.config) if args.config else DEFAULT_CONFIG
    return cfg.with_overrides(
        radius=args.radius,
        hex_size=args.hex_size,
        noise_scale=args.noise_scale,
        water_threshold=args.water,
        mountain_threshold=args.mountain,
        offset=tuple(args.offset) if args.offset else None,
        seed=args.seed,
        noise=args.noise,
        octaves=args.octaves,
    )

def cmd_generate(args):
    hex_map = regenerate(config_from_args(args))
    print(summarize(hex_map))

def cmd_show(args):
    hex_map = regenerate(config_from_args(args))
    print(render_ascii(hex_map))

def cmd_tile(args):
    hex_map = regenerate(config_from_args(args))
    tile = hex_map.get((args.q, args.r))
    if tile is None:
        print("No such tile")
        return 1
    x, y = tile.position
    print(f"({tile.q}, {tile.r}) at ({x:.4f}, {y:.4f}): {tile.terrain.name.lower()}")


def add_map_options(p):
    p.add_argument("--config", default=None, help="JSON config file")
    p.add_argument("--radius", type=int, default=None)
    p.add_argument("--hex-size", type=float, default=None, help="Hex size in world units")
    p.add_argument("--noise-scale", type=float, default=None)
    p.add_argument("--water", type=float, default=None,
                   help="Noise below this is water")
    p.add_argument("--mountain", type=float, default=None,
                   help="Noise above this is mountain")
    p.add_argument("--offset", type=float, nargs=2, metavar=("X", "Y"), default=None,
                   help="Shift of the sampled noise region")
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--noise", choices=["perlin", "value"], default=None)
    p.add_argument("--octaves", type=int, default=None)

def main(argv=None):
    ap = argparse.ArgumentParser(description="Hexagonal terrain map generator")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    sub = ap.add_subparsers()

    ap_gen = sub.add_parser("generate", help="Generate a map and print a summary")
    add_map_options(ap_gen)
    ap_gen.set_defaults(func=cmd_generate)

    ap_show = sub.add_parser("show", help="Print the map as text")
    add_map_options(ap_show)
    ap_show.set_defaults(func=cmd_show)

    ap_tile = sub.add_parser("tile", help="Print one tile")
    ap_tile.add_argument("q", type=int)
    ap_tile.add_argument("r", type=int)
    add_map_options(ap_tile)
    ap_tile.set_defaults(func=cmd_tile)

    args = ap.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(levelname)s %(name)s: %(message)s")
    if not hasattr(args, "func"):
        ap.print_help()
        return 0
    try:
        return args.func(args) or 0
    except InvalidParameter as exc:
        logger.debug("rejected parameters", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 2

if __name__ == "__main__":
    sys.exit(main())
