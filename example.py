"""Example workflow: seed agents, program listings and a few generations of breeding."""

import sys

from loguru import logger

from neurevo import BreedingConfig, Position
from neurevo.demos import example_breeding, example_layers, example_listing, example_walk, run_all


def main(mode: str) -> None:
    if mode == "all":
        run_all()
    elif mode == "walk":
        example_walk(steps=8)
    elif mode == "listing":
        example_listing(Position(8, 1))
    elif mode == "layers":
        example_layers(Position(3, 4))
    elif mode == "breeding":
        # any-bit mutation at 1%, then weight-only mutation
        example_breeding(generations=5, population=12, config=BreedingConfig(seed=0))
        example_breeding(generations=5, population=12)
    else:
        logger.error("Unknown mode {!r}: use walk, listing, layers, breeding or all", mode)


if __name__ == "__main__":
    level = "DEBUG" if "--debug" in sys.argv else "INFO"
    args = [arg for arg in sys.argv[1:] if not arg.startswith("--")]
    logger.remove()
    logger.add(sys.stderr, level=level, format="<level>{message}</level>")
    main(args[0].lower() if args else "all")
