"""
Walkabout: drive a pawn around the downtown board from the terminal
====================================================================

WHAT THIS SHOWS:
- Loading a board (graph + layout) from examples/boards
- Subscribing a listener to PawnController events
- Directional moves, building toggles and layer changes
- Pixel anchors a renderer would use for the pawn

RUN:
    python -m examples.walkabout.run --board downtown --seed 3 up right enter
"""

import argparse
import random

from transitboard import (
    BoardLoader,
    GridGeometry,
    PawnController,
    PawnEvent,
    PositionChanged,
    parse_node_id,
    texture_for_layer,
    tile_placements,
)
from transitboard.config import Config
from transitboard.logging_utils import Color, colored

COMMANDS = {"up", "down", "left", "right", "enter", "layer", "reset", "start"}


def main() -> None:
    parser = argparse.ArgumentParser(description="Move a pawn across a transit board")
    parser.add_argument("commands", nargs="*", help=f"Any of: {', '.join(sorted(COMMANDS))}")
    parser.add_argument("--board", default="downtown")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the starting node")
    parser.add_argument("--canvas", type=int, default=800, help="Canvas edge in pixels")
    args = parser.parse_args()

    Config.validate()
    print(Config.display())

    loader = BoardLoader()
    graph, layout = loader.load(args.board)
    geometry = GridGeometry.for_canvas(args.canvas, args.canvas, Config.GRID_SIZE, Config.BOARD_MARGIN)
    print(f"Board '{args.board}': {len(graph)} nodes, {len(tile_placements(layout, geometry))} tiles")

    def on_event(event: PawnEvent) -> None:
        if isinstance(event, PositionChanged):
            x, y = geometry.pawn_anchor(parse_node_id(event.node_id))
            sprite = texture_for_layer(event.layer)
            print(colored(f"  -> {event.node_id} [{sprite}] at ({x:.0f}, {y:.0f})", Color.GREEN))
        else:
            print(colored(f"  .. {event.model_dump()}", Color.CYAN))

    controller = PawnController(
        graph,
        rng=random.Random(args.seed),
        listeners=[on_event],
    )
    controller.start()

    for command in args.commands:
        print(f"> {command}")
        if command in ("up", "down", "left", "right"):
            controller.move(command)
        elif command == "enter":
            controller.toggle_building()
        elif command == "layer":
            controller.change_layer()
        elif command == "reset":
            controller.reset()
        elif command == "start":
            controller.start()
        else:
            print(colored(f"  unknown command {command!r}", Color.RED))

    state = controller.state
    print(f"Final: {state.current_node_id} on {state.current_layer} (inside={state.inside_building})")


if __name__ == "__main__":
    main()
