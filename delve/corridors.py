def connect(a, b, grid, horizontal_first):
    """
    Carves an L shaped corridor between two points and returns its elbow.

    Horizontal first runs along a's row to b's column and then up or down to b,
    otherwise the vertical leg comes first along a's column.
    """
    ax, ay = a
    bx, by = b

    if horizontal_first:
        grid.carve_horizontal(ay, ax, bx)
        grid.carve_vertical(bx, ay, by)
        return bx, ay

    grid.carve_vertical(ax, ay, by)
    grid.carve_horizontal(by, ax, bx)
    return ax, by
