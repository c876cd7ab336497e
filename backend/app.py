"""
Command line preview for patterns

    python -m backend.app                      list patterns
    python -m backend.app moire --frames 60    render frames, print status
    python -m backend.app moire --out moire.jpg --set angle=0.25
"""

import argparse
import base64
import json
import logging
import sys

from backend.engine import PatternEngine
from backend.params import ParameterError, Toggle
from config import config, configure_logging, get_config
from patterns import list_patterns

logger = logging.getLogger(__name__)


def parse_setting(text):
    """'key=value' -> (key, float or bool); toggles also take 1 and 0"""
    key, sep, raw = text.partition('=')
    if not sep:
        raise argparse.ArgumentTypeError(f"expected key=value, got {text!r}")
    lowered = raw.strip().lower()
    if lowered in ('true', 'on', 'yes'):
        return key, True
    if lowered in ('false', 'off', 'no'):
        return key, False
    try:
        return key, float(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"bad value for {key}: {raw!r}") from None


def build_parser():
    parser = argparse.ArgumentParser(description="Render pattern previews")
    parser.add_argument('pattern', nargs='?', help="pattern name; omit to list patterns")
    parser.add_argument('--frames', type=int, default=1)
    parser.add_argument('--delta-ms', type=float, default=None,
                        help="frame time; defaults to 1000 / TARGET_FPS")
    parser.add_argument('--set', dest='settings', action='append', type=parse_setting, default=[],
                        metavar='KEY=VALUE')
    parser.add_argument('--out', help="write the last frame as JPEG")
    parser.add_argument('--env', default=None, help="configuration name")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    try:
        cfg = get_config(args.env)
    except KeyError:
        logger.error("Unknown configuration %r; choose from %s", args.env, ", ".join(sorted(config)))
        return 2
    configure_logging(cfg)

    if not args.pattern:
        for info in list_patterns():
            print(f"{info['name']:<20} {info['title']} ({info['geometry']})")
        return 0

    engine = PatternEngine(cfg)
    success, message = engine.load_pattern(args.pattern)
    if not success:
        logger.error(message)
        return 1

    try:
        for key, value in args.settings:
            _, decl = engine.params.declaration(key)
            if isinstance(decl, Toggle):
                engine.set_toggle(key, bool(value))
            else:
                engine.set_knob_value(key, value)
    except (ParameterError, TypeError) as e:
        logger.error("Error setting parameter: %s", e)
        return 2

    delta_ms = args.delta_ms if args.delta_ms is not None else 1000.0 / cfg.TARGET_FPS
    image_data = None
    for _ in range(max(1, args.frames)):
        image_data, error = engine.render_frame(delta_ms)
        if error:
            logger.error(error)
            return 1

    if args.out:
        _, encoded = image_data.split(',', 1)
        with open(args.out, 'wb') as f:
            f.write(base64.b64decode(encoded))
        logger.info("Wrote %s", args.out)

    print(json.dumps(engine.get_status(), indent=2))
    return 0


if __name__ == '__main__':
    sys.exit(main())
