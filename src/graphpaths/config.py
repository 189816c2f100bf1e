# max number of vertices allowed in a graph
MAX_VERTICES = 100

# distance of a vertex that cannot be reached, larger than any path sum
INF = float('inf')

# marker printed instead of a distance when there is no path
UNREACHABLE = "--"

DEFAULT_PLOT_PATH = "plots/shortest_path.png"

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"
