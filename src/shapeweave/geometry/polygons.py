"""Array-level polygon algorithms.

Every function takes an ``(N, 2)`` array-like of vertices.  Coordinates follow
the canvas convention (``y`` grows downward); orientation tests use the plain
mathematical sign of the cross product, so "counter-clockwise" below means
ascending ``atan2`` around the vertex mean.
"""
from __future__ import annotations

from collections import deque
from typing import Sequence

import numpy as np

from .primitives import DEFAULT_EPS, is_left

Array = np.ndarray


def as_vertices(vertices) -> Array:
    arr = np.asarray(vertices, dtype=float)
    if arr.size == 0:
        return np.zeros((0, 2), dtype=float)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f"vertices must have shape (N, 2), got {arr.shape}")
    return arr


def signed_area(vertices) -> float:
    """Shoelace area; the sign encodes the winding."""
    v = as_vertices(vertices)
    if v.shape[0] == 0:
        return 0.0
    x, y = v[:, 0], v[:, 1]
    return float(0.5 * (np.dot(x, np.roll(y, -1)) - np.dot(y, np.roll(x, -1))))


def area(vertices) -> float:
    return abs(signed_area(vertices))


def vertex_centroid(vertices) -> Array:
    """Arithmetic mean of the vertices (pivot for scale, rotate and ordering)."""
    v = as_vertices(vertices)
    if v.shape[0] == 0:
        return np.zeros(2, dtype=float)
    return v.mean(axis=0)


def bounds(vertices) -> tuple[float, float, float, float]:
    """``(left, top, right, bottom)`` of the vertices."""
    v = as_vertices(vertices)
    lo = v.min(axis=0)
    hi = v.max(axis=0)
    return float(lo[0]), float(lo[1]), float(hi[0]), float(hi[1])


def sort_ccw(vertices) -> Array:
    """Sort vertices by ascending angle around their mean."""
    v = as_vertices(vertices)
    if v.shape[0] < 2:
        return v.copy()
    c = v.mean(axis=0)
    angles = np.arctan2(v[:, 1] - c[1], v[:, 0] - c[0])
    return v[np.argsort(angles, kind="stable")]


def convex_hull(vertices) -> Array:
    """Convex hull of a simple polygon with Melkman's algorithm.

    The hull is kept in a deque seeded with the first three vertices as a
    counter-clockwise triangle; both ends hold the most recently inserted hull
    vertex.  A later vertex is skipped when it is left of both supporting edges
    at the ends, otherwise vertices are popped from each end until it can be
    pushed onto both.  The returned array drops the repeated end vertex.

    Input is assumed to be a simple (non-self-intersecting) polygon; the result
    for self-intersecting input is not guaranteed to be convex.
    """
    v = as_vertices(vertices)
    if v.shape[0] < 3:
        return v.copy()

    pts = [(float(x), float(y)) for x, y in v]
    p0, p1, p2 = pts[0], pts[1], pts[2]
    if is_left(*p2, *p0, *p1):
        d = deque([p2, p0, p1, p2])
    else:
        d = deque([p2, p1, p0, p2])

    for p in pts[3:]:
        if is_left(*p, *d[0], *d[1]) and is_left(*p, *d[-2], *d[-1]):
            continue
        while len(d) > 2 and not is_left(*p, *d[0], *d[1]):
            d.popleft()
        d.appendleft(p)
        while len(d) > 2 and not is_left(*p, *d[-2], *d[-1]):
            d.pop()
        d.append(p)

    hull = list(d)[:-1]
    return np.asarray(hull, dtype=float)


def contains_point(vertices, point: Sequence[float]) -> bool:
    """Even-odd ray casting test.

    An edge ``(i, j)`` is crossed when ``(v[i].y > p.y) != (v[j].y > p.y)`` and
    the crossing lies to the right of ``p``.  Points on the boundary follow that
    convention and may land on either side.
    """
    v = as_vertices(vertices)
    px, py = float(point[0]), float(point[1])
    n = v.shape[0]
    inside = False
    j = n - 1
    for i in range(n):
        xi, yi = v[i]
        xj, yj = v[j]
        if (yi > py) != (yj > py) and px < (xj - xi) * (py - yi) / (yj - yi) + xi:
            inside = not inside
        j = i
    return inside


def contains_points(vertices, points) -> Array:
    """Vectorised :func:`contains_point` over an ``(M, 2)`` array of points."""
    v = as_vertices(vertices)
    p = as_vertices(points)
    if v.shape[0] == 0 or p.shape[0] == 0:
        return np.zeros(p.shape[0], dtype=bool)
    xi, yi = v[:, 0][None, :], v[:, 1][None, :]
    prev = np.roll(v, 1, axis=0)
    xj, yj = prev[:, 0][None, :], prev[:, 1][None, :]
    px, py = p[:, 0][:, None], p[:, 1][:, None]
    straddles = (yi > py) != (yj > py)
    with np.errstate(divide="ignore", invalid="ignore"):
        x_cross = (xj - xi) * (py - yi) / (yj - yi) + xi
    crossings = straddles & (px < x_cross)
    return (np.count_nonzero(crossings, axis=1) % 2) == 1


def edge_intersections(a, b, eps: float = DEFAULT_EPS) -> Array:
    """Every crossing between an edge of polygon ``a`` and an edge of polygon ``b``.

    Same arithmetic as :func:`~shapeweave.geometry.primitives.segment_intersection`,
    broadcast over all edge pairs.
    """
    va = as_vertices(a)
    vb = as_vertices(b)
    if va.shape[0] < 2 or vb.shape[0] < 2:
        return np.zeros((0, 2), dtype=float)
    s1, e1 = va[:, None, :], np.roll(va, -1, axis=0)[:, None, :]
    s2, e2 = vb[None, :, :], np.roll(vb, -1, axis=0)[None, :, :]

    a1 = e1[..., 1] - s1[..., 1]
    b1 = s1[..., 0] - e1[..., 0]
    c1 = a1 * s1[..., 0] + b1 * s1[..., 1]
    a2 = e2[..., 1] - s2[..., 1]
    b2 = s2[..., 0] - e2[..., 0]
    c2 = a2 * s2[..., 0] + b2 * s2[..., 1]

    det = a1 * b2 - a2 * b1
    ok = np.abs(det) >= eps
    with np.errstate(divide="ignore", invalid="ignore"):
        x = (b2 * c1 - b1 * c2) / det
        y = (a1 * c2 - a2 * c1) / det

    for s, e in ((s1, e1), (s2, e2)):
        ok &= (np.minimum(s[..., 0], e[..., 0]) - eps <= x) & (x <= np.maximum(s[..., 0], e[..., 0]) + eps)
        ok &= (np.minimum(s[..., 1], e[..., 1]) - eps <= y) & (y <= np.maximum(s[..., 1], e[..., 1]) + eps)
    return np.stack([x[ok], y[ok]], axis=1)


def convex_intersection_vertices(a, b, eps: float = DEFAULT_EPS) -> Array:
    """Vertex set of the intersection of two convex polygons, sorted counter-clockwise.

    Collects the vertices of ``a`` inside ``b``, the vertices of ``b`` inside
    ``a`` and every crossing between an edge of ``a`` and the edges of ``b``.
    An empty intersection yields an empty ``(0, 2)`` array.
    """
    va = as_vertices(a)
    vb = as_vertices(b)
    pts = np.concatenate(
        [
            va[contains_points(vb, va)],
            vb[contains_points(va, vb)],
            edge_intersections(va, vb, eps),
        ]
    )
    if pts.shape[0] == 0:
        return pts
    return sort_ccw(pts)


def boxes_disjoint(a, b) -> bool:
    al, at, ar, ab = bounds(a)
    bl, bt, br, bb = bounds(b)
    return ar < bl or br < al or ab < bt or bb < at


def overlap_ratio(a, b, eps: float = DEFAULT_EPS) -> float:
    """``max(I / area(a), I / area(b))`` where ``I`` is the intersection area.

    Both inputs must be convex and sorted counter-clockwise.  Disjoint bounding
    boxes short-circuit to ``0.0``; a zero-area operand contributes nothing.
    The result is clamped to ``[0, 1]`` to absorb rounding.
    """
    va = as_vertices(a)
    vb = as_vertices(b)
    if va.shape[0] < 3 or vb.shape[0] < 3 or boxes_disjoint(va, vb):
        return 0.0
    inter = area(convex_intersection_vertices(va, vb, eps))
    if inter <= 0.0:
        return 0.0
    area_a = area(va)
    area_b = area(vb)
    ratio = max(
        inter / area_a if area_a > 0.0 else 0.0,
        inter / area_b if area_b > 0.0 else 0.0,
    )
    return float(min(1.0, ratio))


__all__ = [
    "as_vertices",
    "signed_area",
    "area",
    "vertex_centroid",
    "bounds",
    "sort_ccw",
    "convex_hull",
    "contains_point",
    "contains_points",
    "edge_intersections",
    "convex_intersection_vertices",
    "boxes_disjoint",
    "overlap_ratio",
]
