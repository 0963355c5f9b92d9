"""Ceiling diagram rendering.

This module renders a top-down SVG plan of a room: the false-ceiling
layers, their cove light channels, and the computed fixture positions.
Geometry is given in feet and scaled to pixels on output.
"""

from __future__ import annotations

from collections.abc import Sequence

from ceilings.domain import (
    CeilingConfig,
    CircularIsland,
    CombinedCeiling,
    CoveLightPosition,
    IslandCeiling,
    LightPosition,
    OvalIsland,
    PeripheralCeiling,
    PlainCeiling,
    RectangularIsland,
)

ROOM_FILL = "#F1F0FB"
ROOM_STROKE = "#8A898C"
CEILING_FILL = "#E5DEFF"
CEILING_STROKE = "#8B5CF6"
COVE_FILL = "#FFFACD"
COVE_STROKE = "#FFCC00"
FIXTURE_FILL = "#FEF7CD"
FIXTURE_STROKE = "#F97316"
BAND_CENTER_FILL = "#F6F3FF"
LABEL_COLOR = "#555555"
TITLE_COLOR = "#333333"

# Cove channel geometry in feet
COVE_WIDTH = 0.1
COVE_OFFSET = 0.05

LEGEND_ITEMS: tuple[tuple[str, str, str, bool], ...] = (
    ("Room", ROOM_FILL, ROOM_STROKE, False),
    ("False Ceiling", CEILING_FILL, CEILING_STROKE, False),
    ("Regular Lights", FIXTURE_FILL, FIXTURE_STROKE, True),
    ("Cove Lights", COVE_FILL, COVE_STROKE, True),
    ("Cutout (no ceiling)", "white", ROOM_STROKE, False),
)


def _num(value: float) -> float:
    return round(value, 2)


class CeilingDiagramRenderer:
    """Renders ceiling plans in SVG format.

    Layers are drawn peripheral first, then plain, then island, so an
    island always sits on top of the ceilings around it. Fixtures are
    drawn last.

    Attributes:
        scale: Pixels per foot (default 30).
        margin: Blank border around the room in pixels, used for labels.
        show_labels: Whether to draw dimension labels.
        show_cove: Whether to draw cove light channels.
        show_legend: Whether to draw the legend below the room.
    """

    def __init__(
        self,
        scale: float = 30.0,
        margin: float = 40.0,
        show_labels: bool = True,
        show_cove: bool = True,
        show_legend: bool = True,
    ) -> None:
        if scale <= 0:
            raise ValueError("Scale must be positive")
        self.scale = scale
        self.margin = margin
        self.show_labels = show_labels
        self.show_cove = show_cove
        self.show_legend = show_legend

    def render_svg(
        self, config: CeilingConfig, positions: Sequence[LightPosition]
    ) -> str:
        """Generate an SVG plan for a room and its fixtures.

        Args:
            config: Room dimensions and ceiling layout.
            positions: Fixture positions in room-local feet.

        Returns:
            SVG document as a string.
        """
        room = config.room
        room_w = room.width * self.scale
        room_h = room.length * self.scale
        legend_height = 30 if self.show_legend else 0
        svg_width = _num(room_w + 2 * self.margin)
        svg_height = _num(room_h + 2 * self.margin + legend_height)

        parts: list[str] = [
            f'<svg width="{svg_width}" height="{svg_height}" '
            f'xmlns="http://www.w3.org/2000/svg">',
            "",
            "  <!-- Background -->",
            f'  <rect x="0" y="0" width="{svg_width}" height="{svg_height}" '
            f'fill="white"/>',
            "",
            f'  <g transform="translate({self.margin},{self.margin})">',
            "  <!-- Room -->",
            f'  <rect x="0" y="0" width="{_num(room_w)}" height="{_num(room_h)}" '
            f'fill="{ROOM_FILL}" stroke="{ROOM_STROKE}" stroke-width="2"/>',
        ]

        plain, peripheral, island = self._layers(config)
        if peripheral is not None:
            parts.append("")
            parts.append("  <!-- Peripheral ceiling -->")
            parts.append(self._render_peripheral(peripheral, config))
        if plain is not None:
            parts.append("")
            parts.append("  <!-- Plain ceiling -->")
            parts.append(self._render_plain(plain))
        if island is not None:
            parts.append("")
            parts.append("  <!-- Island ceiling -->")
            parts.append(self._render_island(island))

        parts.append("")
        parts.append("  <!-- Fixtures -->")
        for position in positions:
            parts.append(self._render_fixture(position))

        if self.show_labels:
            parts.append("")
            parts.append("  <!-- Room labels -->")
            parts.append(self._render_room_labels(config))

        parts.append("  </g>")

        if self.show_legend:
            parts.append("")
            parts.append("  <!-- Legend -->")
            parts.append(self._render_legend(room_h + 2 * self.margin))

        parts.append("")
        parts.append("</svg>")
        return "\n".join(parts)

    @staticmethod
    def _layers(
        config: CeilingConfig,
    ) -> tuple[PlainCeiling | None, PeripheralCeiling | None, IslandCeiling | None]:
        """Split a configuration into its drawable layers."""
        ceiling = config.ceiling
        match ceiling:
            case CombinedCeiling():
                return (
                    ceiling.plain if ceiling.use_plain else None,
                    ceiling.peripheral if ceiling.use_peripheral else None,
                    ceiling.island if ceiling.use_island else None,
                )
            case PlainCeiling():
                return ceiling, None, None
            case PeripheralCeiling():
                return None, ceiling, None
            case RectangularIsland() | CircularIsland() | OvalIsland():
                return None, None, ceiling
        return None, None, None

    # --- Primitives ---

    def _rect(
        self,
        x: float,
        y: float,
        w: float,
        h: float,
        fill: str,
        stroke: str,
        stroke_width: float = 1,
    ) -> str:
        s = self.scale
        return (
            f'  <rect x="{_num(x * s)}" y="{_num(y * s)}" '
            f'width="{_num(w * s)}" height="{_num(h * s)}" '
            f'fill="{fill}" stroke="{stroke}" stroke-width="{stroke_width}"/>'
        )

    def _rect_path(self, x: float, y: float, w: float, h: float) -> str:
        s = self.scale
        return (
            f"M {_num(x * s)} {_num(y * s)} h {_num(w * s)} v {_num(h * s)} "
            f"h {_num(-w * s)} Z"
        )

    def _ellipse_path(self, cx: float, cy: float, rx: float, ry: float) -> str:
        s = self.scale
        rx_px, ry_px = _num(rx * s), _num(ry * s)
        return (
            f"M {_num((cx - rx) * s)} {_num(cy * s)} "
            f"a {rx_px} {ry_px} 0 1 0 {_num(2 * rx * s)} 0 "
            f"a {rx_px} {ry_px} 0 1 0 {_num(-2 * rx * s)} 0 Z"
        )

    @staticmethod
    def _ring_path(outer: str, inner: str, fill: str, stroke: str) -> str:
        return (
            f'  <path d="{outer} {inner}" fill="{fill}" fill-rule="evenodd" '
            f'stroke="{stroke}" stroke-width="1"/>'
        )

    def _label(self, text: str, x: float, y: float, rotate: bool = False) -> str:
        """Place a label at pixel coordinates."""
        transform = f' transform="rotate(90 {_num(x)} {_num(y)})"' if rotate else ""
        return (
            f'  <text x="{_num(x)}" y="{_num(y)}" text-anchor="middle" '
            f'font-family="Arial, sans-serif" font-size="12" '
            f'fill="{LABEL_COLOR}"{transform}>{text}</text>'
        )

    @staticmethod
    def _cove_positions(ceiling) -> set[CoveLightPosition]:
        if not ceiling.cove_light:
            return set()
        return set(ceiling.cove_light_positions)

    # --- Layers ---

    def _render_plain(self, ceiling: PlainCeiling) -> str:
        left, top = ceiling.left_offset, ceiling.top_offset
        w, l = ceiling.width, ceiling.length
        parts = [self._rect(left, top, w, l, CEILING_FILL, CEILING_STROKE, 2)]

        if self.show_cove:
            coves = self._cove_positions(ceiling)
            if CoveLightPosition.OUTER in coves:
                parts.append(self._rect_cove(left, top, w, l, outside=True))
            if CoveLightPosition.INNER in coves:
                parts.append(self._rect_cove(left, top, w, l, outside=False))

        if self.show_labels:
            s = self.scale
            parts.append(self._label(f"{w:.1f}ft wide", (left + w / 2) * s, top * s + 15))
            parts.append(
                self._label(f"{l:.1f}ft long", (left + w) * s - 15, (top + l / 2) * s, rotate=True)
            )
        return "\n".join(parts)

    def _rect_cove(
        self, left: float, top: float, w: float, l: float, outside: bool
    ) -> str:
        """Cove channel just outside or just inside a rectangle's edges."""
        if outside:
            outer_inset = -(COVE_OFFSET + COVE_WIDTH)
            inner_inset = -COVE_OFFSET
        else:
            outer_inset = COVE_OFFSET
            inner_inset = COVE_OFFSET + COVE_WIDTH
        if w - 2 * inner_inset <= 0 or l - 2 * inner_inset <= 0:
            return ""
        outer = self._rect_path(
            left + outer_inset, top + outer_inset, w - 2 * outer_inset, l - 2 * outer_inset
        )
        inner = self._rect_path(
            left + inner_inset, top + inner_inset, w - 2 * inner_inset, l - 2 * inner_inset
        )
        return self._ring_path(outer, inner, COVE_FILL, COVE_STROKE)

    def _render_peripheral(self, ceiling: PeripheralCeiling, config: CeilingConfig) -> str:
        room_w, room_l = config.room.width, config.room.length
        band = ceiling.width
        enabled = ceiling.sides.enabled_sides()
        strips = {
            "top": (0.0, 0.0, room_w, band),
            "bottom": (0.0, room_l - band, room_w, band),
            "left": (0.0, 0.0, band, room_l),
            "right": (room_w - band, 0.0, band, room_l),
        }
        parts = [self._rect(0.0, 0.0, room_w, room_l, BAND_CENTER_FILL, "none", 0)]
        parts.extend(
            self._rect(*strips[side], CEILING_FILL, CEILING_STROKE) for side in enabled
        )

        if self.show_cove:
            coves = self._cove_positions(ceiling)
            for side in enabled:
                if CoveLightPosition.OUTER in coves:
                    parts.append(self._band_cove(side, COVE_OFFSET, room_w, room_l))
                if CoveLightPosition.INNER in coves:
                    parts.append(
                        self._band_cove(side, band - COVE_OFFSET - COVE_WIDTH, room_w, room_l)
                    )

        if self.show_labels and enabled:
            s = self.scale
            x, y, w, h = strips[enabled[0]]
            parts.append(self._label(f"{band:.1f}ft", (x + w / 2) * s, (y + h / 2) * s + 4))
        return "\n".join(parts)

    def _band_cove(self, side: str, depth: float, room_w: float, room_l: float) -> str:
        """Cove strip running along one wall at ``depth`` feet from it."""
        match side:
            case "top":
                rect = (0.0, depth, room_w, COVE_WIDTH)
            case "bottom":
                rect = (0.0, room_l - depth - COVE_WIDTH, room_w, COVE_WIDTH)
            case "left":
                rect = (depth, 0.0, COVE_WIDTH, room_l)
            case _:
                rect = (room_w - depth - COVE_WIDTH, 0.0, COVE_WIDTH, room_l)
        return self._rect(*rect, COVE_FILL, COVE_STROKE)

    def _render_island(self, island: IslandCeiling) -> str:
        match island:
            case RectangularIsland():
                return self._render_rectangular_island(island)
            case CircularIsland():
                cx, cy = island.center
                return self._render_round_island(island, cx, cy, island.radius, island.radius)
            case OvalIsland():
                cx, cy = island.center
                return self._render_round_island(
                    island, cx, cy, island.radius_x, island.radius_y
                )
        raise TypeError(f"Unsupported island type: {type(island).__name__}")

    def _render_rectangular_island(self, island: RectangularIsland) -> str:
        left, top = island.left_offset, island.top_offset
        w, l = island.width, island.length
        c = island.ring_thickness
        has_hole = island.cutout and w > 2 * c and l > 2 * c

        if has_hole:
            outer = self._rect_path(left, top, w, l)
            inner = self._rect_path(left + c, top + c, w - 2 * c, l - 2 * c)
            parts = [self._ring_path(outer, inner, CEILING_FILL, CEILING_STROKE)]
        else:
            parts = [self._rect(left, top, w, l, CEILING_FILL, CEILING_STROKE, 2)]

        if self.show_cove:
            coves = self._cove_positions(island)
            if CoveLightPosition.OUTER in coves:
                parts.append(self._rect_cove(left, top, w, l, outside=True))
            if CoveLightPosition.INNER in coves and has_hole:
                parts.append(
                    self._rect_cove(left + c, top + c, w - 2 * c, l - 2 * c, outside=True)
                )

        if self.show_labels:
            s = self.scale
            parts.append(self._label(f"{w:.1f}ft x {l:.1f}ft", (left + w / 2) * s, top * s - 6))
        return "\n".join(parts)

    def _render_round_island(
        self, island: CircularIsland | OvalIsland, cx: float, cy: float, rx: float, ry: float
    ) -> str:
        if rx <= 0 or ry <= 0:
            return ""
        c = island.ring_thickness
        has_hole = island.cutout and rx > c and ry > c

        if has_hole:
            outer = self._ellipse_path(cx, cy, rx, ry)
            inner = self._ellipse_path(cx, cy, rx - c, ry - c)
            parts = [self._ring_path(outer, inner, CEILING_FILL, CEILING_STROKE)]
        else:
            s = self.scale
            parts = [
                f'  <ellipse cx="{_num(cx * s)}" cy="{_num(cy * s)}" '
                f'rx="{_num(rx * s)}" ry="{_num(ry * s)}" '
                f'fill="{CEILING_FILL}" stroke="{CEILING_STROKE}" stroke-width="2"/>'
            ]

        if self.show_cove:
            coves = self._cove_positions(island)
            mid = COVE_OFFSET + COVE_WIDTH / 2
            if CoveLightPosition.OUTER in coves:
                parts.append(self._ellipse_cove(cx, cy, rx + mid, ry + mid))
            if CoveLightPosition.INNER in coves and has_hole:
                parts.append(self._ellipse_cove(cx, cy, rx - c + mid, ry - c + mid))

        if self.show_labels:
            s = self.scale
            label = (
                f"{2 * rx:.1f}ft"
                if isinstance(island, CircularIsland)
                else f"{2 * rx:.1f}ft x {2 * ry:.1f}ft"
            )
            parts.append(self._label(label, cx * s, (cy - ry) * s - 6))
        return "\n".join(parts)

    def _ellipse_cove(self, cx: float, cy: float, rx: float, ry: float) -> str:
        """Cove channel drawn as a thick stroke along an ellipse."""
        s = self.scale
        geometry = (
            f'cx="{_num(cx * s)}" cy="{_num(cy * s)}" '
            f'rx="{_num(rx * s)}" ry="{_num(ry * s)}"'
        )
        return (
            f'  <ellipse {geometry} fill="none" stroke="{COVE_FILL}" '
            f'stroke-width="{_num(max(1.0, COVE_WIDTH * s))}"/>\n'
            f'  <ellipse {geometry} fill="none" stroke="{COVE_STROKE}" stroke-width="1"/>'
        )

    # --- Fixtures and annotations ---

    def _render_fixture(self, position: LightPosition) -> str:
        s = self.scale
        r = max(1.0, position.radius * s)
        return (
            f'  <circle cx="{_num(position.x * s)}" cy="{_num(position.y * s)}" '
            f'r="{_num(r)}" fill="{FIXTURE_FILL}" stroke="{FIXTURE_STROKE}" '
            f'stroke-width="1"/>'
        )

    def _render_room_labels(self, config: CeilingConfig) -> str:
        room = config.room
        s = self.scale
        return "\n".join(
            [
                f'  <text x="{_num(room.width * s / 2)}" y="-12" text-anchor="middle" '
                f'font-family="Arial, sans-serif" font-size="14" font-weight="bold" '
                f'fill="{TITLE_COLOR}">Room width: {room.width:.1f}ft</text>',
                f'  <text x="-12" y="{_num(room.length * s / 2)}" text-anchor="middle" '
                f'font-family="Arial, sans-serif" font-size="14" font-weight="bold" '
                f'fill="{TITLE_COLOR}" '
                f'transform="rotate(-90 -12 {_num(room.length * s / 2)})">'
                f"Room length: {room.length:.1f}ft</text>",
            ]
        )

    def _render_legend(self, y_offset: float) -> str:
        parts: list[str] = []
        swatch = 12
        x = 10.0
        for label, fill, stroke, round_swatch in LEGEND_ITEMS:
            if round_swatch:
                parts.append(
                    f'  <circle cx="{x + swatch / 2}" cy="{y_offset + swatch / 2}" '
                    f'r="{swatch / 2}" fill="{fill}" stroke="{stroke}"/>'
                )
            else:
                parts.append(
                    f'  <rect x="{x}" y="{y_offset}" width="{swatch}" height="{swatch}" '
                    f'fill="{fill}" stroke="{stroke}"/>'
                )
            parts.append(
                f'  <text x="{x + swatch + 5}" y="{y_offset + swatch - 2}" '
                f'font-family="Arial, sans-serif" font-size="10" '
                f'fill="{TITLE_COLOR}">{label}</text>'
            )
            x += swatch + 10 + 7 * len(label)
        return "\n".join(parts)
