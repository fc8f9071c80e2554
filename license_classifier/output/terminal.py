"""Terminal output formatter using Rich."""
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from license_classifier.constants import LEGAL_DISCLAIMER_SHORT
from license_classifier.models.license import LicenseInfo, RiskLevel
from license_classifier.models.scan import ScanResult, Verbosity

RISK_COLORS: dict[RiskLevel, str] = {
    RiskLevel.LOW: "green",
    RiskLevel.MEDIUM: "yellow",
    RiskLevel.HIGH: "red",
}


def _risk_markup(risk: RiskLevel) -> str:
    color = RISK_COLORS[risk]
    return f"[{color}]{risk.value}[/{color}]"


def _flag(value: bool) -> str:
    return "yes" if value else "no"


class TerminalFormatter:
    """Format classification results for terminal display using Rich.

    Dependencies are shown in a table color coded by risk tier, preceded by
    an executive summary and the legal disclaimer.
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        verbosity: Verbosity = Verbosity.NORMAL,
    ) -> None:
        """Initialize the formatter with a Rich console.

        Args:
            console: Optional Rich Console instance. If not provided,
                a new Console will be created.
            verbosity: Output verbosity level.
        """
        self._console = console if console is not None else Console()
        self._verbosity = verbosity

    def format_scan_result(self, result: ScanResult) -> None:
        """Format and display scan results as a Rich table.

        Args:
            result: The scan result to display.
        """
        if self._verbosity == Verbosity.QUIET:
            self._print_quiet_output(result)
            return

        if result.summary.total_dependencies == 0:
            self._print_disclaimer()
            self._console.print("[yellow]No dependencies found[/yellow]")
            return

        self._print_executive_summary(result)
        self._print_disclaimer()

        table = Table(title="License Classification Results")
        table.add_column("Package", style="cyan", no_wrap=True)
        table.add_column("Version", style="magenta")
        table.add_column("Ecosystem")
        table.add_column("License")
        table.add_column("Risk")
        table.add_column("Copyleft")
        table.add_column("OSI")
        if self._verbosity == Verbosity.VERBOSE:
            table.add_column("Raw Label")

        for item in result.dependencies:
            dep = item.dependency
            info = item.license_info
            if info is None:
                row = [
                    escape(dep.name),
                    escape(dep.version),
                    dep.ecosystem.value,
                    "[yellow]Unknown[/yellow]",
                    "-",
                    "-",
                    "-",
                ]
            else:
                license_display = escape(info.spdx_id)
                if not item.recognized:
                    license_display += " [yellow](unrecognized)[/yellow]"
                row = [
                    escape(dep.name),
                    escape(dep.version),
                    dep.ecosystem.value,
                    license_display,
                    _risk_markup(info.risk),
                    _flag(info.is_copyleft),
                    _flag(info.is_osi_approved),
                ]
            if self._verbosity == Verbosity.VERBOSE:
                row.append(escape(dep.license) if dep.license is not None else "-")
            table.add_row(*row)

        self._console.print(table)

        if result.policy_violations:
            self._print_policy_violations(result)

        self._console.print(
            f"\n[bold]Total dependencies:[/bold] {result.summary.total_dependencies}"
        )
        self._console.print(
            f"[bold]Unknown licenses:[/bold] {result.summary.unknown_license_count}"
        )
        if result.policy_violations:
            self._console.print(
                f"[bold]Policy violations:[/bold] {len(result.policy_violations)}"
            )

    def format_license_infos(
        self, labels: list[str], infos: list[Optional[LicenseInfo]]
    ) -> None:
        """Display classifications of raw license labels.

        Args:
            labels: Raw labels as given by the user.
            infos: Classification for each label, in the same order.
        """
        table = Table(title="License Classification")
        table.add_column("Input", style="cyan")
        table.add_column("Name")
        table.add_column("SPDX ID")
        table.add_column("Risk")
        table.add_column("Copyleft")
        table.add_column("OSI")

        for label, info in zip(labels, infos):
            if info is None:
                table.add_row(escape(label), "-", "-", "-", "-", "-")
                continue
            table.add_row(
                escape(label),
                escape(info.name),
                escape(info.spdx_id),
                _risk_markup(info.risk),
                _flag(info.is_copyleft),
                _flag(info.is_osi_approved),
            )

        self._console.print(table)

    def _print_quiet_output(self, result: ScanResult) -> None:
        """Print minimal output for quiet mode.

        Args:
            result: The scan result to display.
        """
        if result.summary.total_dependencies == 0:
            self._console.print("[yellow]No dependencies found[/yellow]")
            return

        if result.has_issues:
            self._console.print(
                f"[red]POLICY VIOLATIONS[/red] - "
                f"{len(result.policy_violations)} violation(s) require attention"
            )
            for violation in result.policy_violations:
                msg = (
                    f"  - {escape(violation.package_name)}"
                    f"@{escape(violation.package_version)}: "
                )
                msg += f"[red]{escape(violation.reason)}[/red]"
                self._console.print(msg)
        else:
            self._console.print(
                f"[green]PASS[/green] - "
                f"{result.summary.total_dependencies} dependencies classified"
            )

    def _print_disclaimer(self) -> None:
        """Print the not-legal-advice panel."""
        panel = Panel(
            LEGAL_DISCLAIMER_SHORT,
            title="[bold yellow]NOT LEGAL ADVICE[/bold yellow]",
            border_style="yellow",
        )
        self._console.print(panel)
        self._console.print("")

    def _print_executive_summary(self, result: ScanResult) -> None:
        """Print executive summary panel.

        Args:
            result: The scan result to summarize.
        """
        summary = result.summary
        if result.has_issues:
            status = "POLICY VIOLATIONS"
            status_color = "red"
            message = f"{len(result.policy_violations)} violation(s) require attention"
        else:
            status = "PASS"
            status_color = "green"
            message = "No policy violations"

        risk = summary.risk_counts
        summary_lines = [
            f"Total Dependencies: {summary.total_dependencies}",
            f"Unique Licenses: {summary.unique_licenses}",
            f"Recovered From Registries: {result.enriched_count}",
            f"Copyleft: {summary.copyleft_count}",
            f"Unknown: {summary.unknown_license_count}",
            f"Unrecognized: {summary.unrecognized_license_count}",
            f"Risk: {risk['low']} low / {risk['medium']} medium / {risk['high']} high",
        ]

        if result.ignored_packages_summary and result.ignored_packages_summary.ignored_count > 0:
            ignored = result.ignored_packages_summary
            if ignored.ignored_names:
                names_str = ", ".join(escape(name) for name in ignored.ignored_names[:3])
                if len(ignored.ignored_names) > 3:
                    names_str += f", ... (+{len(ignored.ignored_names) - 3} more)"
                summary_lines.append(f"Packages Ignored: {ignored.ignored_count} ({names_str})")
            else:
                summary_lines.append(f"Packages Ignored: {ignored.ignored_count}")

        summary_lines.extend([
            "",
            f"Status: [{status_color}]{status}[/{status_color}]",
            f"[{status_color}]{message}[/{status_color}]",
        ])

        panel = Panel(
            "\n".join(summary_lines),
            title="[bold]EXECUTIVE SUMMARY[/bold]",
            border_style=status_color,
        )
        self._console.print(panel)
        self._console.print("")

    def _print_policy_violations(self, result: ScanResult) -> None:
        """Print policy violations table.

        Args:
            result: The scan result holding violations.
        """
        table = Table(title="Policy Violations", title_style="bold red")
        table.add_column("Package", style="cyan", no_wrap=True)
        table.add_column("Version", style="magenta")
        table.add_column("Rule")
        table.add_column("Reason", style="red")

        for violation in result.policy_violations:
            table.add_row(
                escape(violation.package_name),
                escape(violation.package_version),
                violation.rule,
                escape(violation.reason),
            )

        self._console.print(table)
