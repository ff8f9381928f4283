"""Application states and the messages sent when tiles change."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Union

from phos.hexgrid import HexCoord


class MenuState(Enum):
    LOADING = auto()
    STARTUP = auto()
    MAIN_MENU = auto()
    IN_GAME = auto()
    PAUSED = auto()


class GameplayState(Enum):
    WAITING = auto()
    PLACE_HQ = auto()
    PLAYING = auto()


class AssetLoadState(Enum):
    LOADING = auto()
    FINALIZE_ASSETS = auto()
    LOAD_COMPLETE = auto()


class GeneratorState(Enum):
    STARTUP = auto()
    GENERATE_HEIGHTMAP = auto()
    SPAWN_MAP = auto()
    IDLE = auto()
    REGENERATE = auto()
    CLEANUP = auto()


@dataclass(frozen=True)
class HeightChanged:
    """The height of a tile was changed."""

    coord: HexCoord
    height: float


@dataclass(frozen=True)
class TypeChanged:
    """The tile type of a tile was changed."""

    coord: HexCoord
    tile_type: int


TileModifiedEvent = Union[HeightChanged, TypeChanged]


@dataclass(frozen=True)
class ChunkModifiedEvent:
    """A chunk's contents changed and its meshes need rebuilding."""

    index: int