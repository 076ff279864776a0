"""Integer plane geometry: orientation tests, segment intersection, polygon area."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

Point = tuple[int, int]

LEFT = "LEFT"
RIGHT = "RIGHT"
TOUCH = "TOUCH"


def point_location(p1: Point, p2: Point, p3: Point) -> str:
    """Tell on which side of the directed line p1->p2 the point p3 lies.

    Returns "LEFT", "RIGHT" or "TOUCH" (p3 is on the line).
    """
    (x1, y1), (x2, y2), (x3, y3) = p1, p2, p3
    lhs = (y3 - y1) * (x2 - x1)
    rhs = (y2 - y1) * (x3 - x1)
    if lhs == rhs:
        return TOUCH
    return LEFT if lhs > rhs else RIGHT


def _straddles(a: Point, b: Point, c: Point, d: Point) -> bool:
    """False when c and d lie strictly on the same side of the line through a and b."""
    s1 = (a[1] - b[1]) * (a[0] - c[0]) - (a[0] - b[0]) * (a[1] - c[1])
    s2 = (a[1] - b[1]) * (a[0] - d[0]) - (a[0] - b[0]) * (a[1] - d[1])
    return not ((s1 > 0 and s2 > 0) or (s1 < 0 and s2 < 0))


def segments_intersect(p1: Point, p2: Point, p3: Point, p4: Point) -> bool:
    """Return whether segment p1-p2 and segment p3-p4 share at least one point."""
    parallel = (p2[1] - p1[1]) * (p4[0] - p3[0]) == (p4[1] - p3[1]) * (p2[0] - p1[0])
    if parallel:
        collinear = (p2[1] - p1[1]) * (p3[0] - p2[0]) == (p3[1] - p2[1]) * (p2[0] - p1[0])
        if not collinear:
            return False
        x_min1, x_max1 = sorted((p1[0], p2[0]))
        x_min2, x_max2 = sorted((p3[0], p4[0]))
        y_min1, y_max1 = sorted((p1[1], p2[1]))
        y_min2, y_max2 = sorted((p3[1], p4[1]))
        if x_min1 > x_max2 or x_min2 > x_max1:
            return False
        if y_min1 > y_max2 or y_min2 > y_max1:
            return False
        return True
    return _straddles(p1, p2, p3, p4) and _straddles(p3, p4, p1, p2)


def doubled_polygon_area(points: Iterable[Point]) -> int:
    """Return twice the area of the polygon with the given vertices (shoelace formula)."""
    vertices: Sequence[Point] = list(points)
    total = sum(
        x1 * y2 - x2 * y1
        for (x1, y1), (x2, y2) in zip(vertices, vertices[1:] + vertices[:1])
    )
    return abs(total)