"""Output formatters for lighting plans."""

from __future__ import annotations

from ceilings.application.dtos import LightingOutput


class FixtureTableFormatter:
    """Formats fixture positions as a fixed-width table."""

    def format(self, output: LightingOutput) -> str:
        if not output.layers or not output.positions:
            return "No fixtures placed."

        lines = [
            "FIXTURES",
            "=" * 56,
            f"{'#':<5} {'Layer':<12} {'X (ft)':>10} {'Y (ft)':>10} {'Radius':>10}",
            "-" * 56,
        ]

        index = 1
        for layer in output.layers:
            for position in layer.positions:
                lines.append(
                    f"{index:<5} {layer.ceiling_type.value:<12} "
                    f"{position.x:>10.2f} {position.y:>10.2f} {position.radius:>10.2f}"
                )
                index += 1

        lines.append("-" * 56)
        return "\n".join(lines)


class SummaryFormatter:
    """Formats fixture totals per layer."""

    def format(self, output: LightingOutput) -> str:
        summary = output.summary
        if summary is None:
            return "No summary available."

        lines = [
            "SUMMARY",
            "=" * 56,
            f"Total fixtures: {summary.total_fixtures}",
            f"Room area: {summary.room_area:.1f} sq ft",
        ]
        if summary.area_per_fixture is not None:
            lines.append(f"Area per fixture: {summary.area_per_fixture:.1f} sq ft")

        for layer in summary.layers:
            line = f"  {layer.ceiling_type.value}: {layer.count} fixture(s)"
            if layer.requested is not None:
                line += f" (requested {layer.requested})"
            elif layer.recommended is not None:
                line += f" (auto, recommended {layer.recommended})"
            lines.append(line)

        return "\n".join(lines)


class LightingReportFormatter:
    """Formats a complete lighting plan for console display."""

    def __init__(self) -> None:
        self.table_formatter = FixtureTableFormatter()
        self.summary_formatter = SummaryFormatter()

    def format(self, output: LightingOutput) -> str:
        """Format the plan, or its errors when generation failed."""
        if not output.is_valid:
            lines = ["Errors:"]
            lines.extend(f"  - {error}" for error in output.errors)
            return "\n".join(lines)

        room = output.config.room if output.config else None
        ceiling_type = output.config.ceiling_type if output.config else None

        sections: list[str] = []
        if room is not None:
            header = [
                "CEILING LIGHTING PLAN",
                f"Room: {room.width:.1f} x {room.length:.1f} ft",
            ]
            if ceiling_type is not None:
                header.append(f"Ceiling type: {ceiling_type.value}")
            sections.append("\n".join(header))

        sections.append(self.table_formatter.format(output))
        sections.append(self.summary_formatter.format(output))

        if output.warnings:
            warnings = ["Warnings:"]
            warnings.extend(f"  - {warning}" for warning in output.warnings)
            sections.append("\n".join(warnings))

        return "\n\n".join(sections)
