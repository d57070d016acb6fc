"""Herramientas para formatear las salidas del analizador usando Rich."""
from __future__ import annotations

import argparse
import sys
from typing import Any, Callable, Mapping, Sequence

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text
from rich_argparse import RichHelpFormatter


class _BoundHelpFormatter(RichHelpFormatter):
    def __init__(self, prog: str, console: Console) -> None:
        super().__init__(prog, console=console)


class _RichArgumentParser(argparse.ArgumentParser):
    """ArgumentParser que imprime ayuda y errores usando Rich."""

    def __init__(
        self,
        output: "RichAnalyzerConsole",
        *args: Any,
        **kwargs: Any,
    ) -> None:
        formatter_cls = kwargs.pop("formatter_class", None)
        if formatter_cls is None:
            formatter_cls = lambda prog: _BoundHelpFormatter(prog, console=output.console)  # type: ignore
        kwargs["formatter_class"] = formatter_cls
        super().__init__(*args, **kwargs)
        self._output = output

    def _print_message(self, message: Any, file: Any | None = None) -> None:
        if not message:
            return
        target = self._output.console if file in (None, sys.stdout) else self._output.err_console
        stream = target.file
        stream.write(message if isinstance(message, str) else str(message))
        stream.flush()

    def error(self, message: str) -> None:
        usage = self.format_usage()
        if usage:
            self._print_message(usage, file=sys.stderr)
        self._output.message(f"{self.prog}: {message}", level="error", stderr=True)
        raise SystemExit(2)


class RichAnalyzerConsole:
    """Punto central para producir salidas del CLI con Rich."""

    _LEVEL_STYLES = {
        "info": "cyan",
        "success": "green",
        "warning": "yellow",
        "error": "red",
    }

    _LEVEL_LABELS = {
        "info": "[INFO]",
        "success": "[OK]",
        "warning": "[WARN]",
        "error": "[ERROR]",
    }

    def __init__(
        self,
        console: Console | None = None,
        err_console: Console | None = None,
        default_prefix: str = "[Main]",
    ) -> None:
        self.console = console or Console()
        self.err_console = err_console or Console(stderr=True)
        self.default_prefix = default_prefix

    def message(
        self,
        text: str,
        *,
        level: str = "info",
        prefix: str | None = None,
        stderr: bool = False,
    ) -> None:
        """Imprime un mensaje corto con estilo estandarizado."""
        style = self._LEVEL_STYLES.get(level, "white")
        label = self._LEVEL_LABELS.get(level, "[INFO]")
        target = self.err_console if stderr else self.console

        composed = Text()
        composed.append(label, style=f"bold {style}")
        composed.append(" ")
        composed.append(prefix or self.default_prefix, style=f"bold {style}")
        composed.append(" ")
        composed.append(text)

        target.print(composed)

    def show_tokens(self, tokens: Sequence[Mapping[str, Any]]) -> None:
        """Representa la tabla de tokens generada por el lexer."""
        table = Table(
            title="Tokens",
            header_style="bold cyan",
            box=box.SIMPLE_HEAD,
            show_lines=False,
        )
        table.add_column("#", style="dim", justify="right", width=4)
        table.add_column("Tipo", style="bold")
        table.add_column("Valor", overflow="fold")

        for position, token in enumerate(tokens):
            table.add_row(str(position), str(token.get("type", "")), repr(token.get("value")))

        self.console.print(table)

    def show_symbol_table(self, symbols: Sequence[Mapping[str, Any]]) -> None:
        if not symbols:
            return
        table = Table(title="Tabla de simbolos", header_style="bold cyan", box=box.SIMPLE_HEAD)
        table.add_column("Nombre", style="bold")
        table.add_column("Tipo")
        for sym in symbols:
            table.add_row(str(sym.get("name")), str(sym.get("type")))
        self.console.print(table)

    def show_json(self, payload: str) -> None:
        self.console.print_json(payload)

    def create_argument_parser(self, **kwargs: Any) -> argparse.ArgumentParser:
        """Construye un ArgumentParser que renderiza ayuda y errores con Rich."""
        return _RichArgumentParser(self, **kwargs)

    def make_reporter(self, prefix: str | None = None) -> Callable[[str, str], None]:
        """Devuelve un callback compatible con los emisores de los analizadores."""
        def reporter(level: str, message: str) -> None:
            self.message(message, level=level, prefix=prefix, stderr=(level == "error"))

        return reporter
