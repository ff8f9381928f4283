"""Debug images of heightmaps, biome weights and climate noise."""

from __future__ import annotations

import colorsys
import math
from collections.abc import Callable, Sequence

from PIL import Image

from phos.biome_map import BiomeMap
from phos.hexgrid import CHUNK_SIZE, HexCoord
from phos.world_map import Map

Rgba = tuple[float, float, float, float]
Rgb = tuple[float, float, float]
Hsl = tuple[float, float, float]
Pixel = tuple[int, int, int, int]

_LAND_HUE = 138.0
_WATER_HUE = 217.0
_LIGHTNESS_STEP = 0.1
_BIOME_SMOOTH = 0.5


def _to_u8(value: float) -> int:
    if math.isnan(value):
        return 0
    return int(min(255.0, max(0.0, value)))


def _to_pixel(rgb: Sequence[float]) -> Pixel:
    return (_to_u8(rgb[0] * 255.0), _to_u8(rgb[1] * 255.0), _to_u8(rgb[2] * 255.0), 255)


def _lerp(a: Sequence[float], b: Sequence[float], t: float) -> Rgb:
    return (a[0] + (b[0] - a[0]) * t, a[1] + (b[1] - a[1]) * t, a[2] + (b[2] - a[2]) * t)


def _srgb_to_linear(c: float) -> float:
    if c <= 0.0:
        return c
    if c <= 0.04045:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def _linear_to_srgb(c: float) -> float:
    if c <= 0.0:
        return c
    if c <= 0.0031308:
        return c * 12.92
    return 1.055 * c ** (1.0 / 2.4) - 0.055


def _hsl_to_linear(hsl: Hsl) -> Rgb:
    hue, saturation, lightness = hsl
    r, g, b = colorsys.hls_to_rgb((hue / 360.0) % 1.0, lightness, saturation)
    return (_srgb_to_linear(r), _srgb_to_linear(g), _srgb_to_linear(b))


def _linear_to_hsl(rgb: Sequence[float]) -> Hsl:
    r, g, b = (_linear_to_srgb(c) for c in rgb[:3])
    hue, lightness, saturation = colorsys.rgb_to_hls(r, g, b)
    return (hue * 360.0, saturation, lightness)


def _cbrt(v: float) -> float:
    return math.copysign(abs(v) ** (1.0 / 3.0), v)


def _linear_to_oklab(rgb: Sequence[float]) -> Rgb:
    r, g, b = rgb[:3]
    l_ = _cbrt(0.4122214708 * r + 0.5363325363 * g + 0.0514459929 * b)
    m_ = _cbrt(0.2119034982 * r + 0.6806995451 * g + 0.1073969566 * b)
    s_ = _cbrt(0.0883024619 * r + 0.2817188376 * g + 0.6299787005 * b)
    return (
        0.2104542553 * l_ + 0.7936177850 * m_ - 0.0040720468 * s_,
        1.9779984951 * l_ - 2.4285922050 * m_ + 0.4505937099 * s_,
        0.0259040371 * l_ + 0.7827717662 * m_ - 0.8086757660 * s_,
    )


def _oklab_to_linear(lab: Sequence[float]) -> Rgb:
    lightness, a, b = lab
    l_ = (lightness + 0.3963377774 * a + 0.2158037573 * b) ** 3
    m_ = (lightness - 0.1055613458 * a - 0.0638541728 * b) ** 3
    s_ = (lightness - 0.0894841775 * a - 1.2914855480 * b) ** 3
    return (
        4.0767416621 * l_ - 3.3077115913 * m_ + 0.2309699292 * s_,
        -1.2684380046 * l_ + 2.6097574011 * m_ - 0.3413193965 * s_,
        -0.0041960863 * l_ - 0.7034186147 * m_ + 1.7076147010 * s_,
    )


def _get_height_color_blend(base: Hsl, height: float, height2: float, smooth: float) -> Hsl:
    """Lighten toward a higher right neighbour and darken toward a lower one."""
    hue, saturation, lightness = base
    d = height2 - height
    if smooth == 0.0 or abs(d) > smooth:
        if d > 0.0:
            lightness += _LIGHTNESS_STEP
        elif d < 0.0:
            lightness -= _LIGHTNESS_STEP
        return (hue, saturation, lightness)
    d /= smooth
    step = _LIGHTNESS_STEP if d > 0.0 else -_LIGHTNESS_STEP
    target = _hsl_to_linear((hue, saturation, lightness + step))
    return _linear_to_hsl(_lerp(_hsl_to_linear(base), target, abs(d)))


def _fill(image: Image.Image, pixel_at: Callable[[int, int], Pixel]) -> None:
    if image.mode != "RGBA":
        raise ValueError(f"Expected an RGBA image, got mode {image.mode!r}")
    width, height = image.size
    image.putdata([pixel_at(x, y) for y in range(height) for x in range(width)])


def _new_image(width: int, height: int) -> Image.Image:
    return Image.new("RGBA", (width, height))


def render_image(
    size: tuple[int, int], data: Sequence[float], color1: Rgba, color2: Rgba
) -> Image.Image:
    """Render row-major values of a map of size chunks as a two-colour gradient."""
    image = _new_image(size[0] * CHUNK_SIZE, size[1] * CHUNK_SIZE)
    update_image(size, data, color1, color2, image)
    return image


def update_image(
    size: tuple[int, int], data: Sequence[float], color1: Rgba, color2: Rgba, image: Image.Image
) -> None:
    """Redraw image from data, mapping its lowest value to color1 and highest to color2."""
    low = min(data, default=0.0)
    high = max(data, default=1.0)
    span = high - low
    w = size[0] * CHUNK_SIZE

    def pixel_at(x: int, y: int) -> Pixel:
        v = data[y * w + x]
        t = (v - low) / span if span else 0.0
        return _to_pixel(_lerp(color1, color2, t))

    _fill(image, pixel_at)


def render_map(world_map: Map, smooth: float) -> Image.Image:
    """Render land and water with shading from height differences."""
    image = _new_image(world_map.get_tile_width(), world_map.get_tile_height())
    update_map(world_map, smooth, image)
    return image


def update_map(world_map: Map, smooth: float, image: Image.Image) -> None:
    def pixel_at(x: int, y: int) -> Pixel:
        coord = HexCoord.from_offset_pos(x, y)
        right = coord.get_neighbor(1)
        height = world_map.sample_height(coord)
        hue = _WATER_HUE if height < world_map.sealevel else _LAND_HUE
        color: Hsl = (hue, 1.0, 0.4)
        if world_map.is_in_bounds(right):
            color = _get_height_color_blend(color, height, world_map.sample_height(right), smooth)
        return _to_pixel(_hsl_to_linear(color))

    _fill(image, pixel_at)


def render_biome_noise_map(biome_map: BiomeMap, multi: Sequence[float]) -> Image.Image:
    """Render temperature, continentality and moisture as red, green and blue."""
    image = _new_image(biome_map.width, biome_map.height)
    update_biome_noise_map(biome_map, multi, image)
    return image


def update_biome_noise_map(biome_map: BiomeMap, multi: Sequence[float], image: Image.Image) -> None:
    def pixel_at(x: int, y: int) -> Pixel:
        tile = biome_map.get_biome_data(x, y)
        return _to_pixel(
            (
                tile.temperature / 100.0 * multi[0],
                tile.continentality / 100.0 * multi[1],
                tile.moisture / 100.0 * multi[2],
            )
        )

    _fill(image, pixel_at)


def render_biome_map(world_map: Map, biome_map: BiomeMap) -> Image.Image:
    """Render each tile's biome weights as a mix of per-biome hues."""
    image = _new_image(world_map.get_tile_width(), world_map.get_tile_height())
    update_biome_map(world_map, biome_map, image)
    return image


def update_biome_map(world_map: Map, biome_map: BiomeMap, image: Image.Image) -> None:
    biome_count = float(world_map.biome_count)
    palette = [
        _linear_to_oklab(_hsl_to_linear((i / biome_count * 360.0, 0.8, 0.7)))
        for i in range(world_map.biome_count)
    ]

    def pixel_at(x: int, y: int) -> Pixel:
        weights = biome_map.get_biome(x, y)
        if weights is None:
            raise ValueError(f"Tile ({x}, {y}) is outside the biome map")
        coord = HexCoord.from_offset_pos(x, y)
        right = coord.get_neighbor(1)
        color: Rgb = (0.0, 0.0, 0.0)
        for (cl, ca, cb), w in zip(palette, weights):
            color = (color[0] + cl * w, color[1] + ca * w, color[2] + cb * w)
        if world_map.is_in_bounds(right):
            h1 = world_map.sample_height(coord)
            h2 = world_map.sample_height(right)
            hsl = _linear_to_hsl(_oklab_to_linear(color))
            blended = _get_height_color_blend(hsl, h1, h2, _BIOME_SMOOTH)
            color = _linear_to_oklab(_hsl_to_linear(blended))
        return _to_pixel(_oklab_to_linear(color))

    _fill(image, pixel_at)