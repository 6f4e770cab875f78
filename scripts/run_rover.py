from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

# Ensure project root is on path when running this script directly
_script_dir = Path(__file__).resolve().parent
_project_root = _script_dir.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

import yaml

from rover_grid.fleet import run_fleet
from rover_grid.map_generator import MapGeneratorConfig, generate_random_map, save_map
from rover_grid.pathfinder import SearchLimitExceeded, find_path
from rover_grid.render import describe
from rover_grid.rover import Rover
from rover_grid.world import GridWorld
from telemetry.logger import TelemetryLogger

MAPS_DIR = os.path.join(str(_project_root), "rover_grid", "maps")


def load_yaml(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f)


def build_world(cfg: Dict[str, Any], map_name: Optional[str] = None) -> GridWorld:
    """World from a fixed map file if one is named, else from the inline config."""
    map_cfg = cfg.get("map", {}) or {}
    name = map_name or map_cfg.get("name")
    if name:
        return GridWorld.from_map_file(os.path.join(MAPS_DIR, f"{name}.json"))
    return GridWorld.from_map_dict(
        {
            "obstacles": map_cfg.get("obstacles", []),
            "rovers": cfg.get("rovers", []),
            "target": cfg.get("target"),
        },
        name="inline",
    )


def run_sequence(world: GridWorld, sequence: str, telemetry: TelemetryLogger, render: bool) -> int:
    obstacles = world.obstacle_set()
    status = 0
    for i, rover in enumerate(world.rovers):
        print(f"Landed at {rover}")
        telemetry.log_rover("landed", rover, rover_id=i)
        result = rover.process_sequence(sequence, obstacles)
        if result.ok:
            print(f"Moved to {result.rover}")
            telemetry.log_rover("moved", result.rover, rover_id=i, sequence=sequence)
        else:
            print(f"Stayed at {result.rover} ({result.failure.value} at command {result.index})")
            telemetry.log_rover(
                "stayed",
                result.rover,
                rover_id=i,
                sequence=sequence,
                failure=result.failure.value,
                index=result.index,
            )
            status = 1
        world.rovers[i] = result.rover
    if render:
        print(describe(world))
    return status


def run_path(
    world: GridWorld,
    telemetry: TelemetryLogger,
    max_states: Optional[int],
    render: bool,
) -> int:
    if world.target is None or not world.rovers:
        print("Path mode needs a target and at least one rover.")
        return 2
    start = world.rovers[0]
    obstacles = world.obstacle_set()
    print(f"Landed at {start}, target {world.target}")
    try:
        path = find_path(start, world.target, obstacles, max_states=max_states)
    except SearchLimitExceeded as exc:
        print(str(exc))
        telemetry.log_rover("search_limit", start, max_states=exc.max_states)
        return 1

    if not path and start.position != world.target:
        print(f"Target {world.target} is unreachable")
        telemetry.log_rover("unreachable", start, target=[world.target.x, world.target.y])
        return 1

    end = start.process_sequence(path, obstacles).unwrap()
    print(f"Path: {path!r} ({len(path)} commands)")
    print(f"Moved to {end}")
    telemetry.log_rover("path", end, path=path, length=len(path))
    if render:
        world.rovers[0] = end
        print(describe(world))
    return 0


def run_fleet_mode(
    world: GridWorld,
    programs: List[str],
    telemetry: TelemetryLogger,
    render: bool,
) -> int:
    def on_step(round_idx: int, rovers: List[Rover]) -> None:
        for i, rover in enumerate(rovers):
            telemetry.log_rover("fleet_step", rover, round=round_idx, rover_id=i)
        print(f"Round {round_idx}: " + ", ".join(str(r) for r in rovers))

    history = run_fleet(world.rovers, programs, world.obstacle_set(), on_step=on_step)
    world.rovers = list(history[-1])
    if render:
        print(describe(world))
    return 0


def main() -> None:
    parser = argparse.ArgumentParser(description="Drive grid rovers from a YAML scenario.")
    parser.add_argument(
        "--config",
        type=str,
        default="configs/rover.yaml",
        help="Path to scenario YAML config.",
    )
    parser.add_argument(
        "--mode",
        choices=["sequence", "path", "fleet", "generate"],
        default="sequence",
        help="What to run.",
    )
    parser.add_argument("--map", type=str, default=None, help="Fixed map name under rover_grid/maps/.")
    parser.add_argument("--sequence", type=str, default=None, help="Override the command sequence.")
    parser.add_argument("--output", type=str, default=None, help="Where generate mode writes the map.")
    parser.add_argument("--render", action="store_true", help="Print an ASCII map after running.")
    args = parser.parse_args()

    cfg = load_yaml(args.config)
    logging_cfg = cfg.get("logging", {})

    with TelemetryLogger(logging_cfg.get("telemetry_path", "runs/telemetry.jsonl")) as telemetry:
        if args.mode == "generate":
            gen_cfg = MapGeneratorConfig(**cfg.get("generator", {}))
            if gen_cfg.seed is None:
                gen_cfg.seed = cfg.get("seed")
            world = generate_random_map(gen_cfg)
            output = args.output or os.path.join("runs", "random_map.json")
            save_map(world, output)
            print(f"Saved map to {output}")
            print(describe(world))
            status = 0
        elif args.mode == "fleet":
            fleet_cfg = cfg.get("fleet", {})
            world = build_world(cfg, args.map)
            if fleet_cfg.get("rovers") and not args.map:
                world.rovers = [Rover.from_dict(r) for r in fleet_cfg["rovers"]]
            programs = [str(p) for p in fleet_cfg.get("programs", [])]
            status = run_fleet_mode(world, programs, telemetry, args.render)
        elif args.mode == "path":
            world = build_world(cfg, args.map)
            max_states = (cfg.get("search", {}) or {}).get("max_states")
            status = run_path(world, telemetry, max_states, args.render)
        else:
            world = build_world(cfg, args.map)
            sequence = args.sequence if args.sequence is not None else str(cfg.get("sequence", ""))
            status = run_sequence(world, sequence, telemetry, args.render)

    sys.exit(status)


if __name__ == "__main__":
    main()
