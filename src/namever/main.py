import argparse
import json
import logging
import sys

from namever.config import manager as cfgman
from namever.core import processor
from namever.utils.jsonlog import attach_json_log
from namever.utils.naming import input_label, split_names

EXISTING_PROMPT = "Enter existing file names"
NEW_PROMPT = "Enter new file names"

def parse_args(argv):
    p = argparse.ArgumentParser(prog="namever", description="Wersjonowanie nazw plików: dopisuje lub podbija sufiks (vN)")
    p.add_argument("--existing", metavar="TEXT", help="Istniejące nazwy, oddzielone separatorem")
    p.add_argument("--new", metavar="TEXT", help="Nowe nazwy do dodania, oddzielone separatorem")
    p.add_argument("--separator", help="Separator nazw (domyślnie z config.json)")
    p.add_argument("--json", action="store_true", help="Wynik jako JSON")
    p.add_argument("--json-log", help="Ścieżka do logu JSON")
    p.add_argument("--gui", action="store_true", help="Otwórz okno aplikacji")
    return p.parse_args(argv)

def _read_names(value: str | None, title: str, separator: str) -> list[str]:
    if value is None:
        print(input_label(title, separator))
        try:
            value = input()
        except EOFError:
            value = ""
    return split_names(value, separator)

def _setup_logging(cfg: dict, json_log: str | None, handlers: list[logging.Handler]) -> None:
    logger = logging.getLogger("namever")
    logger.setLevel(logging.DEBUG)
    console = logging.StreamHandler(sys.stderr)
    console.setLevel(cfg["logging"]["level"])
    console.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
    logger.addHandler(console)
    handlers.append(console)
    if json_log:
        handlers.append(attach_json_log(logger, json_log))

def _teardown_logging(handlers: list[logging.Handler]) -> None:
    logger = logging.getLogger("namever")
    for h in handlers:
        logger.removeHandler(h)
        h.close()

def _print_results(results, as_json: bool) -> None:
    if as_json:
        print(json.dumps([
            {"source": r.source, "final": r.final_name, "error": r.error} for r in results
        ], ensure_ascii=False, indent=2))
        return
    print()
    print("Processed names:")
    for r in results:
        if r.ok:
            print(r.final_name)
        else:
            print(f"[ERROR] {r.error}: {r.source}")

def run_cli(ns) -> int:
    try:
        cfg = cfgman.load_config()
    except cfgman.ConfigError as e:
        print(f"[ERROR] {e}")
        return 2

    if ns.gui:
        from namever.app import run_gui
        run_gui(cfg)
        return 0

    handlers: list[logging.Handler] = []
    try:
        _setup_logging(cfg, ns.json_log, handlers)
        sep = ns.separator or cfg["input"]["separator"]
        existing = _read_names(ns.existing, EXISTING_PROMPT, sep)
        incoming = _read_names(ns.new, NEW_PROMPT, sep)
        results = processor.process_names(existing, incoming)
        as_json = ns.json or cfg["output"]["format"] == "json"
        _print_results(results, as_json)
        return 0 if all(r.ok for r in results) else 1
    except Exception as e:
        print(f"[ERROR] {e}")
        return 2
    finally:
        _teardown_logging(handlers)

def main(argv=None) -> int:
    ns = parse_args(sys.argv[1:] if argv is None else argv)
    return run_cli(ns)

if __name__ == "__main__":
    raise SystemExit(main())
