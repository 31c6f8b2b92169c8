"""Output formatters for DepCompare results."""

from pathlib import Path
from typing import List, Optional

from ..core.comparison import ComparisonResult
from ..utils.logging import get_logger


class MarkdownFormatter:
    """Markdown report formatter for dependency comparisons."""

    def __init__(self, output_file: Optional[Path] = None) -> None:
        """Initialize the Markdown formatter.

        Args:
            output_file: Optional output file path
        """
        self.output_file = output_file
        self.logger = get_logger("MarkdownFormatter")

    def format_report(self, result: ComparisonResult) -> str:
        """Render a comparison result as a Markdown report.

        Args:
            result: Comparison result to render

        Returns:
            Report text
        """
        lines: List[str] = []
        lines.extend(self._format_summary(result))
        lines.extend(self._format_shared(result))
        lines.extend(self._format_unique(result))
        lines.extend(self._format_major_differences(result))
        lines.extend(self._format_final_counts(result))
        return "".join(lines)

    def _format_summary(self, result: ComparisonResult) -> List[str]:
        name1, name2 = result.name1, result.name2
        return [
            f"# Package Version Comparison between {name1} and {name2}\n\n",
            "## Summary\n",
            f"- Total packages in **{name1}**: {result.total_packages1}\n",
            f"- Total packages in **{name2}**: {result.total_packages2}\n",
        ]

    def _format_shared(self, result: ComparisonResult) -> List[str]:
        """Render the packages declared by both projects.

        Args:
            result: Comparison result

        Returns:
            Report lines for matches and mismatches
        """
        lines = [
            f"## Packages present in both {result.name1} and {result.name2} (Total: {result.both_count})\n\n",
            f"### Matches (Total: {result.matches_count})\n\n",
        ]

        for entry in result.matches:
            lines.append(f"- **{entry.name}** - Version match: `{entry.version1}`\n")

        lines.append(f"### Mismatches (Total: {result.mismatches_count})\n\n")

        for entry in result.mismatches:
            lines.append(f"- **{entry.name}** - Version mismatch:\n")
            lines.append(f"  - {result.name1}: `{entry.version1}`\n")
            lines.append(f"  - {result.name2}: `{entry.version2}`\n")

        return lines

    def _format_unique(self, result: ComparisonResult) -> List[str]:
        lines = [f"\n## Packages present only in {result.name1} (Total: {result.unique_to1_count})\n\n"]
        lines.extend(f"- **{entry.name}**: `{entry.version1}`\n" for entry in result.unique_to1)

        lines.append(f"\n## Packages present only in {result.name2} (Total: {result.unique_to2_count})\n\n")
        lines.extend(f"- **{entry.name}**: `{entry.version2}`\n" for entry in result.unique_to2)
        return lines

    def _format_major_differences(self, result: ComparisonResult) -> List[str]:
        lines = [f"\n## Major Version Differences (Total: {result.major_differences_count})\n"]

        if not result.major_differences:
            lines.append("- No major version differences found.\n")
            return lines

        for diff in result.major_differences:
            lines.append(
                f"- **{diff.package}**: `{diff.version1}` (in {result.name1}) "
                f"vs `{diff.version2}` (in {result.name2})\n"
            )
        return lines

    def _format_final_counts(self, result: ComparisonResult) -> List[str]:
        return [
            "\n## Final Counts\n",
            f"- Total packages found in both: {result.both_count}\n",
            f"- Total packages unique to **{result.name1}**: {result.unique_to1_count}\n",
            f"- Total packages unique to **{result.name2}**: {result.unique_to2_count}\n",
            f"- Total major version differences: {result.major_differences_count}\n",
        ]

    def save_report(
        self,
        report: str,
        output_file: Optional[Path] = None
    ) -> Path:
        """Save a rendered report, overwriting any existing file.

        Args:
            report: Report text
            output_file: Output file path (uses instance default if None)

        Returns:
            Path the report was written to
        """
        file_path = output_file or self.output_file
        if not file_path:
            raise ValueError("No output file specified")

        try:
            with open(file_path, 'w', encoding='utf-8') as f:
                f.write(report)

            self.logger.debug(f"Report saved to {file_path}")
        except IOError as e:
            self.logger.error(f"Failed to save report to {file_path}: {e}")
            raise

        return Path(file_path)
