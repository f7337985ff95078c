from __future__ import annotations
import argparse, logging, sys
from typing import List, Optional, Tuple

from .ast import Command, LabelMap
from .diagnostics import Diagnostic, error
from .parser import parse
from .writers import to_listing_lines, write_listing

def parse_text(text: str, *, filename: str | None = None,
               label_map: Optional[LabelMap] = None) -> Tuple[List[Command], List[Diagnostic]]:
    """Lexea y parsea el texto completo.
    Devuelve (commands, diagnostics); la tabla de etiquetas se pasa tal cual al parser."""
    return parse(text, filename=filename, label_map=label_map if label_map is not None else {})

def setup_logging(verbose: int, quiet: bool) -> None:
    if quiet:
        level = logging.ERROR
    elif verbose == 0:
        level = logging.WARNING
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s: %(name)s: %(message)s",
                        stream=sys.stderr, force=True)

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(prog="ci-parse", description="Parser del lenguaje de instrucciones (add/sub/mov/cmp/cmp_u/print)")
    ap.add_argument("source", help="archivo de entrada")
    ap.add_argument("-o", "--listing", help="escribe el listado de comandos en este archivo")
    ap.add_argument("-v", "--verbose", action="count", default=0,
                    help="más detalle (-v, -vv)")
    ap.add_argument("-q", "--quiet", action="store_true",
                    help="solo errores")
    args = ap.parse_args(argv)
    setup_logging(args.verbose, args.quiet)

    try:
        with open(args.source, "r", encoding="utf-8") as f:
            text = f.read()
    except OSError as ex:
        print(error(f"no pude leer {args.source}: {ex}"), file=sys.stderr)
        return 2

    commands, diags = parse_text(text, filename=args.source)

    # imprimimos todo; si hay error, devolvemos código 1
    for d in diags:
        print(d, file=sys.stderr)
    had_error = any(d.severity == "error" for d in diags)

    if args.listing:
        try:
            write_listing(commands, args.listing)
        except OSError as ex:
            print(error(f"no pude escribir {args.listing}: {ex}"), file=sys.stderr)
            return 3
    elif not args.quiet:
        for line in to_listing_lines(commands):
            print(line)

    if had_error:
        return 1
    if not args.quiet:
        print(f"OK: {len(commands)} comandos", file=sys.stderr)
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
