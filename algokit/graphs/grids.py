"""Graph searches over rectangular grids: islands, fills, borders, distances and mazes.

Every function leaves its input unchanged and returns new values.
"""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Callable, Iterator, Sequence

_STEPS = ((-1, 0), (0, 1), (1, 0), (0, -1))
_ALL_STEPS = _STEPS + ((-1, -1), (1, 1), (-1, 1), (1, -1))
_MAZE_MOVES = (("D", 1, 0), ("L", 0, -1), ("R", 0, 1), ("U", -1, 0))

Cell = tuple[int, int]


def _neighbours(
    rows: int, cols: int, r: int, c: int, steps: Sequence[Cell] = _STEPS
) -> Iterator[Cell]:
    for dr, dc in steps:
        nr, nc = r + dr, c + dc
        if 0 <= nr < rows and 0 <= nc < cols:
            yield nr, nc


def _component(grid: Sequence[Sequence], start: Cell, belongs: Callable) -> set[Cell]:
    """Cells 4-connected to ``start`` whose values satisfy ``belongs``."""
    rows, cols = len(grid), len(grid[0])
    seen = {start}
    stack = [start]
    while stack:
        r, c = stack.pop()
        for nr, nc in _neighbours(rows, cols, r, c):
            if (nr, nc) not in seen and belongs(grid[nr][nc]):
                seen.add((nr, nc))
                stack.append((nr, nc))
    return seen


def _components(grid: Sequence[Sequence], belongs: Callable) -> Iterator[set[Cell]]:
    seen: set[Cell] = set()
    for r, row in enumerate(grid):
        for c, value in enumerate(row):
            if (r, c) not in seen and belongs(value):
                component = _component(grid, (r, c), belongs)
                seen |= component
                yield component


def _touches_border(cells: set[Cell], rows: int, cols: int) -> bool:
    return any(r in (0, rows - 1) or c in (0, cols - 1) for r, c in cells)


def _check_cell(grid: Sequence[Sequence], row: int, col: int) -> None:
    if not (0 <= row < len(grid) and 0 <= col < len(grid[row])):
        raise IndexError(f"cell ({row}, {col}) is outside the grid")


def flood_fill(image: Sequence[Sequence[int]], row: int, col: int, color: int) -> list[list[int]]:
    """Repaint the 4-connected region of equal colour around (row, col) with ``color``."""
    _check_cell(image, row, col)
    result = [list(line) for line in image]
    original = image[row][col]
    if original == color:
        return result
    for r, c in _component(image, (row, col), lambda value: value == original):
        result[r][c] = color
    return result


def _is_land(value) -> bool:
    return value == "1" or value == 1


def num_islands(grid: Sequence[Sequence[str]]) -> int:
    """Number of 4-connected islands of land ("1") surrounded by water ("0")."""
    return sum(1 for _ in _components(grid, _is_land))


def max_area_of_island(grid: Sequence[Sequence[int]]) -> int:
    """Size of the largest 4-connected island of 1s; 0 when there is no land."""
    return max((len(island) for island in _components(grid, lambda v: v == 1)), default=0)


def closed_island(grid: Sequence[Sequence[int]]) -> int:
    """Number of islands of land (0) that do not touch the grid's edge; 1 is water."""
    if not grid or not grid[0]:
        return 0
    rows, cols = len(grid), len(grid[0])
    return sum(
        1
        for island in _components(grid, lambda v: v == 0)
        if not _touches_border(island, rows, cols)
    )


def num_enclaves(grid: Sequence[Sequence[int]]) -> int:
    """Number of land cells (1) from which the grid's edge cannot be walked to."""
    if not grid or not grid[0]:
        return 0
    rows, cols = len(grid), len(grid[0])
    return sum(
        len(island)
        for island in _components(grid, lambda v: v == 1)
        if not _touches_border(island, rows, cols)
    )


def solve_surrounded(board: Sequence[Sequence[str]]) -> list[list[str]]:
    """Capture every region of "O" not connected to the edge, turning it into "X"."""
    result = [["X"] * len(row) for row in board]
    if not board or not board[0]:
        return result
    rows, cols = len(board), len(board[0])
    for region in _components(board, lambda v: v == "O"):
        if _touches_border(region, rows, cols):
            for r, c in region:
                result[r][c] = "O"
    return result


def color_border(grid: Sequence[Sequence[int]], row: int, col: int, color: int) -> list[list[int]]:
    """Paint the border of the 4-connected component holding (row, col) with ``color``.

    A cell is on the border when it lies on the grid's edge or next to a cell
    outside the component.
    """
    _check_cell(grid, row, col)
    result = [list(line) for line in grid]
    original = grid[row][col]
    if original == color:
        return result
    rows, cols = len(grid), len(grid[0])
    component = _component(grid, (row, col), lambda value: value == original)
    for r, c in component:
        on_edge = r in (0, rows - 1) or c in (0, cols - 1)
        if on_edge or any(cell not in component for cell in _neighbours(rows, cols, r, c)):
            result[r][c] = color
    return result


def _multi_source_distances(
    grid: Sequence[Sequence[int]], is_source: Callable
) -> list[list[float]]:
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    dist: list[list[float]] = [[math.inf] * cols for _ in range(rows)]
    queue: deque[Cell] = deque()
    for r, line in enumerate(grid):
        for c, value in enumerate(line):
            if is_source(value):
                dist[r][c] = 0
                queue.append((r, c))
    while queue:
        r, c = queue.popleft()
        for nr, nc in _neighbours(rows, cols, r, c):
            if dist[r][c] + 1 < dist[nr][nc]:
                dist[nr][nc] = dist[r][c] + 1
                queue.append((nr, nc))
    return dist


def update_matrix(mat: Sequence[Sequence[int]]) -> list[list[float]]:
    """Distance of every cell to the nearest 0, in 4-directional steps.

    Cells are ``math.inf`` when the matrix holds no 0 at all.
    """
    return _multi_source_distances(mat, lambda value: value == 0)


def max_distance(grid: Sequence[Sequence[int]]) -> int | None:
    """Largest distance from a water cell (0) to its nearest land (1).

    None when the grid is all land or all water.
    """
    cells = [value for line in grid for value in line]
    land = sum(1 for value in cells if value)
    if land == 0 or land == len(cells):
        return None
    dist = _multi_source_distances(grid, bool)
    return max(d for line in dist for d in line)


def oranges_rotting(grid: Sequence[Sequence[int]]) -> int | None:
    """Minutes until no fresh orange (1) is left, rot (2) spreading to 4 neighbours a minute.

    None when some fresh orange can never rot.
    """
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    state = [list(line) for line in grid]
    fresh = sum(1 for line in grid for value in line if value == 1)
    queue = deque((r, c) for r, line in enumerate(grid) for c, v in enumerate(line) if v == 2)
    minutes = 0
    while queue and fresh:
        minutes += 1
        for _ in range(len(queue)):
            r, c = queue.popleft()
            for nr, nc in _neighbours(rows, cols, r, c):
                if state[nr][nc] == 1:
                    state[nr][nc] = 2
                    fresh -= 1
                    queue.append((nr, nc))
    return None if fresh else minutes


def shortest_path_binary_matrix(grid: Sequence[Sequence[int]]) -> int | None:
    """Cells on the shortest 8-directional clear path (0s) from top-left to bottom-right, or None."""
    if not grid or not grid[0]:
        return None
    rows, cols = len(grid), len(grid[0])
    target = (rows - 1, cols - 1)
    if grid[0][0] != 0 or grid[target[0]][target[1]] != 0:
        return None
    seen = {(0, 0)}
    queue = deque([((0, 0), 1)])
    while queue:
        (r, c), steps = queue.popleft()
        if (r, c) == target:
            return steps
        for cell in _neighbours(rows, cols, r, c, _ALL_STEPS):
            if cell not in seen and grid[cell[0]][cell[1]] == 0:
                seen.add(cell)
                queue.append((cell, steps + 1))
    return None


def find_paths(maze: Sequence[Sequence[int]]) -> list[str]:
    """Every path through open cells (1) from top-left to bottom-right, never revisiting a cell.

    Paths are strings of moves D, L, R and U, listed in the order found when
    trying the moves in that order.
    """
    if not maze or not maze[0] or maze[0][0] != 1:
        return []
    rows, cols = len(maze), len(maze[0])
    target = (rows - 1, cols - 1)
    paths: list[str] = []
    on_path: set[Cell] = set()

    def walk(r: int, c: int, moves: str) -> None:
        if (r, c) == target:
            paths.append(moves)
            return
        on_path.add((r, c))
        for letter, dr, dc in _MAZE_MOVES:
            nr, nc = r + dr, c + dc
            if (
                0 <= nr < rows
                and 0 <= nc < cols
                and maze[nr][nc] == 1
                and (nr, nc) not in on_path
            ):
                walk(nr, nc, moves + letter)
        on_path.discard((r, c))

    walk(0, 0, "")
    return paths