from __future__ import annotations

import math
from typing import TYPE_CHECKING

import wcwidth
from grandalf import graphs as grandalf_graphs
from grandalf import layouts as grandalf_layouts

from dualgraph import metrics
from dualgraph.config import models

if TYPE_CHECKING:
    from dualgraph.graph import Graph

__all__ = [
    "render_dot",
    "render_ascii",
]


def render_dot(
    graph: Graph,
    weighted: bool = False,
    style: models.ExportConfig | None = None,
) -> str:
    """Render graph as Graphviz DOT.

    One statement per edge record, ``<from><rel><to>[attrs];``, where rel is
    ``->`` for oriented graphs and ``--`` otherwise. Isolated vertices are
    emitted as invisible self-loops so Graphviz still places them, and
    painted vertices get a fill statement.

    Args:
        graph: Graph to render.
        weighted: If True, label each edge with its weight.
        style: Colours, precision and node shape (default: ExportConfig()).

    Returns:
        DOT format string.
    """
    style = style or models.ExportConfig()
    with metrics.timed("export.render_dot"):
        oriented = graph.is_oriented_graph()
        rel = "->" if oriented else "--"
        size = style.node_size

        lines = ["digraph {" if oriented else "graph {"]
        lines.append(
            f"    node [shape={style.node_shape},width={size},height={size},fixedsize=true];"
        )

        edge_paint = f"color={style.paint_color},penwidth={style.paint_penwidth}"
        for edge in graph.get_edges():
            attrs = list[str]()
            if edge.painted:
                attrs.append(edge_paint)
            if weighted:
                attrs.append(f'label="{edge.weight:.{style.precision}f}"')
            tag = f"[{','.join(attrs)}]" if attrs else ""
            lines.append(f"    {edge.source}{rel}{edge.target}{tag};")

        node_paint = f"[style=filled,fillcolor={style.paint_color}]"
        count = graph.get_nodes_count()
        for vertex in range(count):
            if graph.is_isolated_node(vertex):
                lines.append(f"    {vertex}{rel}{vertex}[style=invis];")
        for vertex in range(count):
            if graph.painted_node(vertex):
                lines.append(f"    {vertex}{node_paint};")

        lines.append("}")
    return "\n".join(lines)


def _display_width(s: str) -> int:
    """Get display width of string, accounting for wide characters."""
    width = wcwidth.wcswidth(s)
    return width if width >= 0 else len(s)


class _BoxView:
    """Box dimensions and position assigned by the grandalf layout."""

    w: int
    h: int
    xy: tuple[float, float]

    def __init__(self, w: int, h: int) -> None:
        self.w = w
        self.h = h
        self.xy = (0.0, 0.0)


def _label(graph: Graph, vertex: int) -> str:
    return f"*{vertex}*" if graph.painted_node(vertex) else str(vertex)


def render_ascii(graph: Graph) -> str:
    """Render graph as ASCII boxes and lines using grandalf's Sugiyama layout.

    Painted vertices are shown as ``*v*``. Self-loops are not drawn.

    Returns:
        ASCII art representation of the graph.
    """
    count = graph.get_nodes_count()
    if count == 0:
        return "(empty graph)"
    if count == 1:
        label = _label(graph, 0)
        border = "+" + "-" * (_display_width(label) + 2) + "+"
        return f"{border}\n| {label} |\n{border}"

    boxes = dict[int, grandalf_graphs.Vertex]()
    for vertex in range(count):
        box = grandalf_graphs.Vertex(_label(graph, vertex))
        box.view = _BoxView(w=_display_width(_label(graph, vertex)) + 4, h=3)
        boxes[vertex] = box

    pairs = list(
        dict.fromkeys(
            (edge.source, edge.target)
            for edge in graph.get_edges()
            if edge.source != edge.target
        )
    )
    layout_graph = grandalf_graphs.Graph(
        list(boxes.values()),
        [grandalf_graphs.Edge(boxes[s], boxes[t]) for s, t in pairs],
    )

    # Lay out each connected component, then place them side by side
    placed = list[grandalf_graphs.Vertex]()
    x_offset = 0.0
    for component in layout_graph.C:
        sugiyama = grandalf_layouts.SugiyamaLayout(component)
        sugiyama.init_all()
        sugiyama.draw()

        if component.sV:
            left = min(v.view.xy[0] - v.view.w / 2 for v in component.sV)
            right = max(v.view.xy[0] + v.view.w / 2 for v in component.sV)
            shift = x_offset - left
            for v in component.sV:
                v.view.xy = (v.view.xy[0] + shift, v.view.xy[1])
            x_offset += (right - left) + 10

        placed.extend(component.sV)

    return _draw(placed, [(boxes[s], boxes[t]) for s, t in pairs])


def _draw(
    placed: list[grandalf_graphs.Vertex],
    links: list[tuple[grandalf_graphs.Vertex, grandalf_graphs.Vertex]],
) -> str:
    min_x = min(v.view.xy[0] - v.view.w / 2 for v in placed)
    max_x = max(v.view.xy[0] + v.view.w / 2 for v in placed)
    min_y = min(v.view.xy[1] - v.view.h / 2 for v in placed)
    max_y = max(v.view.xy[1] + v.view.h / 2 for v in placed)

    margin = 2
    width = math.ceil(max_x - min_x) + margin * 2 + 2
    height = math.ceil(max_y - min_y) + margin * 2 + 2

    max_canvas_dim = 10000
    if width > max_canvas_dim or height > max_canvas_dim:
        return f"(graph too large for ASCII: {width}x{height}, use DOT output)"

    canvas = [[" "] * width for _ in range(height)]

    def to_canvas(x: float, y: float) -> tuple[int, int]:
        return int(x - min_x) + margin, int(y - min_y) + margin

    # Lines first so boxes are drawn over them
    for src, dst in links:
        x1, y1 = to_canvas(src.view.xy[0], src.view.xy[1] + src.view.h / 2)
        x2, y2 = to_canvas(dst.view.xy[0], dst.view.xy[1] - dst.view.h / 2)
        _draw_line(canvas, x1, y1, x2, y2)

    for v in placed:
        cx, cy = to_canvas(v.view.xy[0], v.view.xy[1])
        _draw_box(canvas, cx, cy, str(v.data))

    rows = ["".join(row).rstrip() for row in canvas]
    while rows and not rows[0]:
        rows.pop(0)
    while rows and not rows[-1]:
        rows.pop()
    return "\n".join(rows)


def _draw_line(canvas: list[list[str]], x1: int, y1: int, x2: int, y2: int) -> None:
    """Bresenham line of '*', skipping cells already drawn on."""
    height = len(canvas)
    width = len(canvas[0])
    dx = abs(x2 - x1)
    dy = abs(y2 - y1)
    sx = 1 if x1 < x2 else -1
    sy = 1 if y1 < y2 else -1
    err = dx - dy

    x, y = x1, y1
    while True:
        if 0 <= x < width and 0 <= y < height and canvas[y][x] == " ":
            canvas[y][x] = "*"
        if x == x2 and y == y2:
            break
        e2 = 2 * err
        if e2 > -dy:
            err -= dy
            x += sx
        if e2 < dx:
            err += dx
            y += sy


def _draw_box(canvas: list[list[str]], cx: int, cy: int, label: str) -> None:
    box_width = _display_width(label) + 4
    left = cx - box_width // 2
    top = cy - 1
    border = "+" + "-" * (box_width - 2) + "+"
    for offset, text in enumerate((border, f"| {label} |", border)):
        _write(canvas, left, top + offset, text)


def _write(canvas: list[list[str]], x: int, y: int, text: str) -> None:
    if not 0 <= y < len(canvas):
        return
    row = canvas[y]
    for i, ch in enumerate(text):
        if 0 <= x + i < len(row):
            row[x + i] = ch
