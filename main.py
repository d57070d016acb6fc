"""Punto de entrada del analizador en linea de comandos."""
from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable, List, Optional

from minic.facade import MODES, AnalysisResult, AnalyzerFacade, normalize_mode
from output_formatter import RichAnalyzerConsole

PROMPT_MODE = "Que tipo de analisis desea realizar? (lexico/sintactico/semantico/salir): "
PROMPT_CODE = "Introduce el codigo a analizar: "
EXIT_WORD = "salir"

_PREFIXES = {
    "lexical": "[Lexer]",
    "syntax": "[Parser]",
    "semantic": "[Semantic]",
}


def build_arg_parser(output: RichAnalyzerConsole):
    parser = output.create_argument_parser(
        prog="minic",
        description="Analisis lexico, sintactico y semantico de un fragmento tipo C.",
    )
    parser.add_argument(
        "mode",
        nargs="?",
        choices=sorted(MODES),
        help="Fase a ejecutar; sin ella se inicia el modo interactivo.",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument("-c", "--code", help="Codigo fuente en linea.")
    source.add_argument("-f", "--file", type=Path, help="Archivo con el codigo fuente.")
    parser.add_argument("--json", action="store_true", help="Imprime el resultado como JSON.")
    return parser


def run_analysis(
    output: RichAnalyzerConsole,
    mode: str,
    code: str,
    path: Path | None = None,
    as_json: bool = False,
) -> AnalysisResult:
    mode = normalize_mode(mode)
    reporter = None if as_json else output.make_reporter(prefix=_PREFIXES[mode])
    result = AnalyzerFacade(reporter=reporter).analyze(mode, code, path=path)

    if as_json:
        output.show_json(result.to_json())
    elif mode == "lexical":
        output.show_tokens(result.tokens)
    elif mode == "semantic":
        output.show_symbol_table(result.symbol_table)
    return result


def interactive(output: RichAnalyzerConsole, read: Callable[[str], str] | None = None) -> int:
    """Bucle interactivo: pide una fase y una linea de codigo hasta 'salir'."""
    read = read or output.console.input
    status = 0
    while True:
        try:
            choice = read(PROMPT_MODE).strip()
        except EOFError:
            break
        if choice == EXIT_WORD:
            output.message("Saliendo del programa.")
            break

        try:
            code = read(PROMPT_CODE)
        except EOFError:
            break

        try:
            result = run_analysis(output, choice, code)
        except ValueError:
            output.message("Opcion no valida.", level="warning")
        else:
            status = 0 if result.ok else 1
        output.console.print("\nAnalisis completado.")
    return status


def _read_source(output: RichAnalyzerConsole, args) -> Optional[str]:
    if args.code is not None:
        return args.code
    if args.file is not None:
        try:
            return args.file.read_text(encoding="utf-8")
        except OSError as exc:
            output.message(f"No se pudo leer el archivo: {exc}", level="error", stderr=True)
            return None
    return sys.stdin.read()


def main(argv: List[str] | None = None, output: RichAnalyzerConsole | None = None) -> int:
    output = output or RichAnalyzerConsole()
    args = build_arg_parser(output).parse_args(argv)
    if args.mode is None:
        return interactive(output)

    code = _read_source(output, args)
    if code is None:
        return 2
    result = run_analysis(output, args.mode, code, path=args.file, as_json=args.json)
    return 0 if result.ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
