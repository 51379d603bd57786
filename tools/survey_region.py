"""Survey a rectangle of hyperspace and dump the systems found as JSON."""
import argparse
import json
import sys
from pathlib import Path

from cosmogen.engine.config import UniverseConfig
from cosmogen.engine.logger import init_logger
from cosmogen.math.prng import SeededRandom
from cosmogen.world.exploration import ExplorationStateMachine

ROOT = Path(__file__).resolve().parents[1]


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--seed", help="universe seed (defaults to settings.json or the built-in seed)")
    parser.add_argument("--x", type=int, default=0, help="west edge of the region")
    parser.add_argument("--y", type=int, default=0, help="north edge of the region")
    parser.add_argument("--width", type=int, default=50)
    parser.add_argument("--height", type=int, default=50)
    parser.add_argument("--settings", type=Path, default=ROOT / "settings.json")
    parser.add_argument("--output", type=Path, help="write JSON here instead of stdout")
    return parser.parse_args(argv)


def survey(machine: ExplorationStateMachine, x: int, y: int, width: int, height: int) -> list:
    systems = []
    for cell_y in range(y, y + height):
        for cell_x in range(x, x + width):
            system = machine.peek_at_system(cell_x, cell_y)
            if system is not None:
                systems.append(system.to_dict())
    return systems


def main(argv=None) -> int:
    args = parse_args(argv)
    logger = init_logger(args.settings)
    config = UniverseConfig.from_settings(args.settings)
    seed = args.seed if args.seed is not None else config.seed
    machine = ExplorationStateMachine(config, SeededRandom(seed), logger=logger)
    report = {
        "seed": seed,
        "region": [args.x, args.y, args.width, args.height],
        "systems": survey(machine, args.x, args.y, args.width, args.height),
    }
    text = json.dumps(report, indent=2)
    if args.output:
        args.output.write_text(text)
    else:
        print(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
