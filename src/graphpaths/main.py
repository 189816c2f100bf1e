import argparse
import logging
import os
import sys

import numpy as np

from graphpaths.config import DEFAULT_PLOT_PATH, LOG_FORMAT, MAX_VERTICES
from graphpaths.display import format_all, format_pair, path_frame
from graphpaths.errors import GraphError
from graphpaths.reader import load_graphs

logger = logging.getLogger("graphpaths")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="graphpaths",
        description="All-pairs shortest paths (Dijkstra) for graphs read from a file.",
    )
    parser.add_argument("file", help="graph description file")
    parser.add_argument("--pair", nargs=2, type=int, action="append", default=[],
                        metavar=("SOURCE", "DEST"),
                        help="also display the path between two vertices (repeatable)")
    parser.add_argument("--max-vertices", type=int, default=MAX_VERTICES,
                        help=f"vertex capacity of a graph (default {MAX_VERTICES})")
    parser.add_argument("--csv", metavar="OUT", help="write every path to a CSV file")
    parser.add_argument("--matrix", action="store_true", help="print the distance matrix")
    parser.add_argument("--plot", nargs="?", const=DEFAULT_PLOT_PATH, metavar="OUT",
                        help="save a picture of each graph with the first --pair highlighted")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args(argv)


def _numbered(path, index, total):
    # one output file per graph when the input holds several
    if total == 1:
        return path
    root, ext = os.path.splitext(path)
    return f"{root}_{index}{ext}"


def run(graph, args, index=1, total=1):
    graph.find_shortest_paths()
    print(format_all(graph))
    print()

    for src, dst in args.pair:
        try:
            print(format_pair(graph, src, dst))
        except GraphError as e:
            print(f"[ERROR] {e}")
        print()

    if args.matrix:
        with np.printoptions(linewidth=120):
            print(graph.table.distance_matrix())
        print()

    if args.csv:
        out = _numbered(args.csv, index, total)
        path_frame(graph).to_csv(out, index=False)
        logger.info("paths saved to %s", out)

    if args.plot:
        # imported here so that plain runs do not load matplotlib
        from graphpaths.visualize import draw_graph_with_path

        path = None
        if args.pair:
            src, dst = args.pair[0]
            try:
                path = graph.reconstruct_path(src, dst)
            except GraphError as e:
                logger.warning("no path to highlight: %s", e)
            if path is not None:
                path = [src] + path
        draw_graph_with_path(graph, path, _numbered(args.plot, index, total))


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING, format=LOG_FORMAT)

    try:
        graphs = load_graphs(args.file, args.max_vertices)
    except (OSError, GraphError) as e:
        print(f"[ERROR] Cannot read {args.file}: {e}", file=sys.stderr)
        return 1

    if not graphs:
        print("No graph to print. Please enter graph.")
        return 0

    for i, graph in enumerate(graphs, 1):
        run(graph, args, i, len(graphs))
    return 0


if __name__ == "__main__":
    sys.exit(main())
