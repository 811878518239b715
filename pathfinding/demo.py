"""
Command line demo: run the shortest path search on a built-in network.

Usage:
    python -m pathfinding
    python -m pathfinding D A
    python -m pathfinding --network sample A F
    python -m pathfinding --network random --seed 7 --plot plots/random.png
    python -m pathfinding --network random --seed 7 n0 n5
"""

import argparse
import logging

from pathfinding import config
from pathfinding.dijkstra import dijkstra
from pathfinding.graph import from_networkx, to_networkx
from pathfinding.network_builder import (
    build_cycle_network,
    build_random_network,
    build_sample_network,
)
from pathfinding.visualize_network import draw_graph_with_path, format_path

logger = logging.getLogger(__name__)

NETWORKS = ("cycle", "sample", "random")


def load_network(name, seed=None):
    """Return the adjacency dict for a built-in network."""
    if name == "cycle":
        return build_cycle_network()
    if name == "sample":
        return build_sample_network()
    if name == "random":
        return from_networkx(build_random_network(seed=seed))
    raise ValueError(f"unknown network {name!r}")


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Find the shortest path between two nodes of a built-in network",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("source", nargs="?", default=None)
    parser.add_argument("destination", nargs="?", default=None)
    parser.add_argument(
        "--network",
        choices=NETWORKS,
        default=config.DEFAULT_NETWORK,
        help="Network to search (default: %(default)s)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the random network",
    )
    parser.add_argument(
        "--strategy",
        choices=config.SELECTION_STRATEGIES,
        default=None,
        help="Next-node selection policy (default: config.SELECTION_STRATEGY)",
    )
    parser.add_argument(
        "--plot",
        default=None,
        metavar="FILE",
        help="Also draw the network with the path highlighted to FILE",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)

    default_source, default_destination = config.DEFAULT_ENDPOINTS[args.network]
    if args.source is None:
        args.source = default_source
    if args.destination is None:
        args.destination = default_destination
    return args


def main(argv=None):
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    graph = load_network(args.network, seed=args.seed)
    path, cost = dijkstra(graph, args.source, args.destination, strategy=args.strategy)

    print(format_path(path))
    if path is not None:
        print(f"Total cost: {cost}")

    if args.plot:
        draw_graph_with_path(to_networkx(graph), path, output_link=args.plot)
        print(f"Saved {args.plot}")

    # an unreachable destination is a normal outcome
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
