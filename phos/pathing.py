"""Path finding for units and spreading group destinations around a target."""

from __future__ import annotations

import heapq
import itertools
from collections.abc import Hashable, Iterable
from dataclasses import dataclass
from typing import Optional

from phos.hexgrid import HexCoord
from phos.nav_data import NavData
from phos.world_map import Map

Vec3 = tuple[float, float, float]


@dataclass
class UnitPath:
    """World positions to walk through and the index of the next one."""

    points: list[Vec3]
    index: int = 1


@dataclass(frozen=True)
class PathRequest:
    entity: Hashable
    start: HexCoord


def get_end_points(coord: HexCoord, count: int, world_map: Map) -> list[HexCoord]:
    """The target plus tiles from rings around it, enough for count units."""
    if count == 1:
        return [coord]
    result = [coord]
    ox, oz = coord.to_offset()
    limit = 2 * (world_map.get_tile_width() + world_map.get_tile_height()) + abs(ox) + abs(oz)
    r = 1
    while len(result) < count:
        if r > limit:
            raise ValueError(f"The map cannot hold {count} destinations")
        tiles = coord.select_ring(r)
        needed = count - len(result)
        candidates = tiles if needed >= len(tiles) else tiles[:needed]
        result.extend(t for t in candidates if world_map.is_in_bounds(t))
        r += 1
    return result


def calculate_path(start: HexCoord, goal: HexCoord, nav: NavData) -> Optional[UnitPath]:
    """An A* path from start to goal, or None if the goal cannot be reached."""
    if not nav.is_in_bounds(start):
        raise ValueError(f"{start} is not within the navigation bounds")

    def heuristic(node: HexCoord) -> float:
        return nav.get(node).calculate_heuristic(goal)

    goal_key = goal.axial()
    start_key = start.axial()
    counter = itertools.count()
    open_heap = [(heuristic(start), next(counter), 0.0, start)]
    best = {start_key: 0.0}
    parents: dict[tuple[int, int], Optional[tuple[int, int]]] = {start_key: None}
    nodes = {start_key: start}

    while open_heap:
        _, _, cost, node = heapq.heappop(open_heap)
        key = node.axial()
        if cost > best[key]:
            continue
        if key == goal_key:
            route = []
            cur: Optional[tuple[int, int]] = key
            while cur is not None:
                route.append(nodes[cur])
                cur = parents[cur]
            route.reverse()
            points = [tuple(n.to_world(nav.get_height(n))) for n in route]
            return UnitPath(points=points, index=1)
        for neighbor, step in nav.get_neighbors(node):
            n_key = neighbor.axial()
            new_cost = cost + step
            if n_key not in best or new_cost < best[n_key]:
                best[n_key] = new_cost
                parents[n_key] = key
                nodes[n_key] = neighbor
                heapq.heappush(
                    open_heap, (new_cost + heuristic(neighbor), next(counter), new_cost, neighbor)
                )
    return None


def group_requests_by_target(
    requests: Iterable[tuple[HexCoord, PathRequest]],
) -> list[tuple[HexCoord, list[PathRequest]]]:
    """Group (target, request) pairs by target, in the order targets first appear."""
    groups: dict[tuple[int, int], tuple[HexCoord, list[PathRequest]]] = {}
    for target, request in requests:
        entry = groups.setdefault(target.axial(), (target, []))
        entry[1].append(request)
    return list(groups.values())