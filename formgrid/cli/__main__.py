from __future__ import annotations

import argparse
import sys
from pathlib import Path

from dotenv import load_dotenv

from formgrid.config.loader import ConfigError, load_config, resolve_config_path
from formgrid.layout.assembler import reconstruct
from formgrid.logging.init import enable_debug, log_summary, setup_logging
from formgrid.models.layout import Placeholder
from formgrid.services.collaborators import read_form_file
from formgrid.services.orchestrator import ProcessingError, process_all, scan_form_files
from formgrid.services.summary import render_summary_line

"""CLI entrypoint.

Flow:
- Load .env (may set FORMGRID_CONFIG)
- Load config
- Reconstruct every form JSON file in source_directory into output_directory
- Print the SUMMARY line and exit with the contract exit code
"""

EXIT_SUCCESS_ALL = 0
EXIT_PARTIAL_FAILURE = 2
EXIT_FATAL = 1


def _load_env_file(path: Path, override: bool = True) -> None:
    """Load .env using python-dotenv. ``.env`` values override the process environment."""
    if path.exists():
        load_dotenv(dotenv_path=path, override=override)


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Reconstruct form grid layouts from authored field positions")
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    p.add_argument("--config", default=None, help="Path to config YAML (default: config/formgrid.yml)")
    p.add_argument(
        "--inspect-data", action="store_true", help="Print section row shapes of each form then exit"
    )
    return p.parse_args(argv)


def _row_shape(row) -> str:
    # F = authored field, . = placeholder
    return "".join("." if isinstance(s, Placeholder) else "F" for s in row)


def _inspect_data(cfg) -> int:
    try:
        files = scan_form_files(Path(cfg.source_directory))
    except ProcessingError as e:
        print(f"inspect: {e}")
        return EXIT_FATAL
    if not files:
        print("inspect: no .json files")
        return EXIT_SUCCESS_ALL
    for f in files:
        print(f"FILE: {f.name}")
        fetched = read_form_file(f)
        if not fetched.ok:
            print(f"  fetch_error: {fetched.error_type} {fetched.message}")
            continue
        result = reconstruct(fetched.payload, cfg.layout)  # type: ignore[arg-type]
        for sid, section in result.form.sections.items():
            shapes = [_row_shape(r) for r in section.rows]
            print(f"  SECTION: {sid} name={section.attributes.get('name')} rows={shapes}")
            if section.unplaced:
                print(f"    unplaced={len(section.unplaced)}")
    return EXIT_SUCCESS_ALL


def main(argv: list[str] | None = None) -> int:
    logger = setup_logging()

    # None のときのみシステム引数を読む ([] はテストからの明示的な空引数)
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)
    _load_env_file(Path('.env'), override=True)

    if args.debug:
        enable_debug()
        logger.debug("debug mode enabled")

    config_path = resolve_config_path(args.config)
    try:
        cfg = load_config(config_path)
    except ConfigError as e:
        logger.error(f"config: {e}")
        return EXIT_FATAL

    directory = Path(cfg.source_directory)
    if not directory.exists():
        logger.error(f"directory not found: {directory}")
        return EXIT_FATAL

    if args.inspect_data:
        return _inspect_data(cfg)

    logger.info(f"Processing forms from: {directory} -> {cfg.output_directory}")
    try:
        result = process_all(cfg)
    except ProcessingError as e:
        logger.error(f"processing: {e}")
        return EXIT_FATAL

    summary_line = render_summary_line(result)
    # log_summary adds the "SUMMARY " prefix itself
    log_summary(summary_line[len("SUMMARY "):])

    if result.failed_files > 0:
        return EXIT_PARTIAL_FAILURE
    return EXIT_SUCCESS_ALL


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
