"""Console output helpers.

Everything is printed in red with bracketed status markers. Decorative
output (spinners, sections, panels) is dropped in quiet mode; errors never are.
"""

from rich.console import Console as RichConsole
from rich.panel import Panel
from rich.status import Status

ACCENT = "red"


class Step:
    """A single reported installation step, shown as a spinner while running."""

    def __init__(self, console: RichConsole, text: str, quiet: bool = False) -> None:
        self.console = console
        self.text = text
        self.quiet = quiet
        self._status: Status | None = None

    def _emit(self, symbol: str, text: str) -> None:
        if self._status is not None:
            self._status.stop()
            self._status = None
        if not self.quiet:
            self.console.print(
                f"{symbol} {text}", style=ACCENT, markup=False, highlight=False, soft_wrap=True
            )

    def start(self) -> "Step":
        if not self.quiet:
            self._status = self.console.status(
                self.text, spinner="dots", spinner_style=ACCENT
            )
            self._status.start()
        return self

    def succeed(self, text: str) -> None:
        self._emit("[✓]", text)

    def fail(self, text: str) -> None:
        self._emit("[✗]", text)

    def warn(self, text: str) -> None:
        self._emit("[!]", text)

    def info(self, text: str) -> None:
        self._emit("[i]", text)


class Console:
    """Output sink shared by the installer and the commands."""

    def __init__(self, quiet: bool = False) -> None:
        self.quiet = quiet
        self.out = RichConsole()
        self.err = RichConsole(stderr=True)

    def step(self, text: str) -> Step:
        return Step(self.out, text, quiet=self.quiet).start()

    def header(self, title: str, subtitle: str = "") -> None:
        if self.quiet:
            return
        self.out.print()
        self.out.print(title.upper(), style=f"bold {ACCENT}", markup=False)
        if subtitle:
            self.out.print(subtitle, style="white", markup=False)

    def section(self, title: str) -> None:
        if self.quiet:
            return
        self.out.print()
        self.out.print(f"▸ {title}", style=f"bold {ACCENT}", markup=False)
        self.out.print("═" * 50, style="dim")

    def panel(self, title: str, body: str) -> None:
        """Print body (rich markup) in a rounded red panel."""
        if self.quiet:
            return
        self.out.print()
        self.out.print(
            Panel(
                body,
                title=f"[bold]{title}[/bold]",
                border_style=ACCENT,
                padding=(1, 2),
                expand=False,
            )
        )

    def error(self, message: str) -> None:
        self.err.print(
            f"[✗] {message}",
            style=f"bold {ACCENT}",
            markup=False,
            highlight=False,
            soft_wrap=True,
        )
