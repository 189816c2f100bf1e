def reconstruct_path(table, src, dst):
    """
    Vertices on the shortest path from ``src`` to ``dst``.

    The source itself is left out and the destination is included, so a
    direct edge gives ``[dst]`` and ``src == dst`` gives ``[]``. Returns
    ``None`` when ``dst`` cannot be reached from ``src``.
    """
    if src == dst:
        return []
    if table.predecessor(src, dst) is None:
        return None

    path = []
    node = dst
    seen = set()
    while node != src:
        if node is None or node in seen:
            # broken predecessor chain
            return None
        seen.add(node)
        path.append(node)
        node = table.predecessor(src, node)
    path.reverse()

    return path


def full_path(table, src, dst):
    """Same as :func:`reconstruct_path` with ``src`` in front."""
    path = reconstruct_path(table, src, dst)
    if path is None:
        return None
    return [src] + path
