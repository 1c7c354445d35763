#!/usr/bin/env python
import sys
import argparse
from pathlib import Path

from loguru import logger

from atomiclang import AtomicError, Interpreter, InterpreterConfig


def configure_logging(level: str):
    logger.remove()
    logger.add(sys.stderr, level=level, format="<level>{level: <8}</level> {name}: {message}")
    logger.enable("atomiclang")


def resolve_script(target: str):
    for p in (Path(target), Path(f"{target}.atomic")):
        if p.exists() and p.is_file():
            return p
    return None


def cmd_run(args, config: InterpreterConfig) -> int:
    script = resolve_script(args.script)
    if script is None:
        print(f"[Error] Could not find script '{args.script}' (also tried '{args.script}.atomic')", file=sys.stderr)
        return 1

    def write(line: str):
        print(line, flush=True)

    try:
        source = script.read_text(encoding=config.encoding)
        logger.info("running {}", script)
        Interpreter(config, sink=write).run(source)
    except (AtomicError, OSError, UnicodeDecodeError) as e:
        logger.debug("{} failed: {}", script, e)
        print(f"[Error] {e}", file=sys.stderr)
        return 1
    return 0


def cmd_check(args, config: InterpreterConfig) -> int:
    if args.script == "-":
        source = sys.stdin.read()
    else:
        script = resolve_script(args.script)
        if script is None:
            print(f"[Error] Could not find script '{args.script}'", file=sys.stderr)
            return 1
        try:
            source = script.read_text(encoding=config.encoding)
        except (OSError, UnicodeDecodeError) as e:
            print(f"[Error] {e}", file=sys.stderr)
            return 1
    try:
        program = Interpreter(config).check(source)
    except AtomicError as e:
        print(f"line {e.line or 1}, col {e.column or 1}: {e}", file=sys.stderr)
        return 1
    print(f"ok: {len(program)} statements")
    return 0


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Atomic - a minimal command interpreter")
    parser.add_argument("--log-level", default=None, help="Diagnostic log level (default: WARNING or $ATOMIC_LOG_LEVEL)")
    subparsers = parser.add_subparsers(dest="command")

    run_parser = subparsers.add_parser("run", help="Run an .atomic script")
    run_parser.add_argument("script", help="Path of the script (the .atomic extension may be omitted)")
    run_parser.add_argument("--show-tokens", action="store_true", help="Print the token sequence before running")
    run_parser.add_argument("--show-ast", action="store_true", help="Print the parsed statements before running")
    run_parser.add_argument("--int-bits", type=int, choices=(32, 64), default=None, help="Signed integer width")

    check_parser = subparsers.add_parser("check", help="Lex and parse a script without running it")
    check_parser.add_argument("script", help="Path of the script, or - for stdin")
    check_parser.add_argument("--int-bits", type=int, choices=(32, 64), default=None, help="Signed integer width")

    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        return 2

    try:
        config = InterpreterConfig.from_env(
            log_level=args.log_level,
            int_bits=args.int_bits,
            show_tokens=getattr(args, "show_tokens", None),
            show_ast=getattr(args, "show_ast", None),
        )
    except AtomicError as e:
        print(f"[Error] {e}", file=sys.stderr)
        return 1
    configure_logging(config.log_level)

    if args.command == "run":
        return cmd_run(args, config)
    return cmd_check(args, config)


if __name__ == "__main__":
    sys.exit(main())
