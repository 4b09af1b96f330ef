"""Command-line build guide runner.

Resolves configuration, processes the shape, and prints a text preview,
the segment table and the requested build steps.

Usage:
    blockguide
    blockguide scripts/user_config.py
    blockguide --width 21 --height 13 --filled --all-steps
    blockguide --width 15 --step 4 -v
"""

import argparse
import importlib.util
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import xarray as xr

from blockguide.guide.session import BuildSequence, StepStatus, describe_step, step_status
from blockguide.pipeline.processor import ShapeProcessor
from blockguide.schemas import CLIConfig, ParamConfig, UserConfig, resolve_config
from blockguide.shape.segment_labeler import extract_segments

__all__ = ['run_build_guide', 'render_text', 'load_user_config_dict', 'setup_logging', 'main']

logger = logging.getLogger(__name__)

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


def load_user_config_dict(config_path: str) -> dict:
    """Load user config dict from Python file.

    Returns the raw dict before Pydantic validation.

    Parameters
    ----------
    config_path : str
        Path to user config Python file containing a CONFIG dict.

    Raises
    ------
    FileNotFoundError
        If config file does not exist.
    ValueError
        If no CONFIG dict found in file.
    """
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config not found: {path}")

    spec = importlib.util.spec_from_file_location("config_module", path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)

    for name in dir(module):
        if name.startswith('CONFIG'):
            obj = getattr(module, name)
            if isinstance(obj, dict):
                return obj

    raise ValueError(f"No CONFIG dict found in {path}")


def setup_logging(level: str = "INFO", log_path: Optional[str] = None) -> None:
    """Configure the root logger with a console and optional file handler."""
    log_level = getattr(logging, level.upper(), logging.INFO)

    formatter = logging.Formatter(
        fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # Clear existing handlers and add new ones
    root = logging.getLogger()
    root.setLevel(log_level)
    for handler in root.handlers[:]:
        root.removeHandler(handler)

    ch = logging.StreamHandler()
    ch.setLevel(log_level)
    ch.setFormatter(formatter)
    root.addHandler(ch)

    if log_path:
        Path(log_path).parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(log_path)
        fh.setLevel(log_level)
        fh.setFormatter(formatter)
        root.addHandler(fh)

    logger.debug("Logging: level=%s, file=%s", logging.getLevelName(log_level), log_path)


def render_text(ds: xr.Dataset, config, sequence: Optional[BuildSequence] = None) -> str:
    """Render a shape Dataset as text, one character per cell.

    Displayed blocks print their run number (base 36, ``+`` when it does not
    fit one character) when ``display.show_numbers`` is set, otherwise the
    active character. Interior blocks of filled shapes and cross points have
    no number and print the active character. With an active guide only
    placed and current outline blocks are drawn and the current segment is
    printed as ``@``.
    """
    names = config.var_names
    display = config.display

    shown = ds[names.display].values
    outline = ds[names.outline].values
    labels = ds[names.run_label].values

    status = None
    if sequence is not None and sequence.is_active:
        status = step_status(ds[names.segment_labels].values, sequence)

    lines = []
    for y in range(shown.shape[0]):
        row = []
        for x in range(shown.shape[1]):
            char = display.inactive_char
            if shown[y, x]:
                char = display.active_char
                if display.show_numbers and labels[y, x] > 0:
                    value = int(labels[y, x])
                    char = _DIGITS[value] if value < len(_DIGITS) else "+"
                if status is not None:
                    if not outline[y, x] or status[y, x] == StepStatus.HIDDEN:
                        char = display.inactive_char
                    elif status[y, x] == StepStatus.CURRENT:
                        char = "@"
            row.append(char)
        lines.append("".join(row))
    return "\n".join(lines)


def _selected_steps(sequence: BuildSequence, step: Optional[int], all_steps: bool) -> List[BuildSequence]:
    """Guide snapshots to print: every step, one 1-based step, or the first."""
    if not sequence.is_active:
        return []
    if all_steps:
        snapshots = [sequence]
        while snapshots[-1].can_advance:
            snapshots.append(snapshots[-1].advance())
        return snapshots

    current = sequence
    target = min(max(step or 1, 1), len(sequence)) - 1
    while current.current_index < target:
        current = current.advance()
    return [current]


def run_build_guide(
    user_config_path: Optional[str] = None,
    cli_args: Optional[Dict[str, Any]] = None,
    step: Optional[int] = None,
    all_steps: bool = False,
    verbose: bool = False,
    log_path: Optional[str] = None,
) -> BuildSequence:
    """Resolve config, process the shape and print the build guide.

    Parameters
    ----------
    user_config_path : str, optional
        Path to user config file (Python file with CONFIG dict).
    cli_args : dict, optional
        CLI overrides. Keys: width, height, filled, locked, padding,
        log_level. All optional; None values are ignored.
    step : int, optional
        1-based build step to show (clamped to the guide length).
    all_steps : bool
        Show every build step.
    verbose : bool
        Enable DEBUG logging and print the full resolved config.
    log_path : str, optional
        Also write logs to this file.

    Returns
    -------
    BuildSequence
        The guide positioned on the last printed step.
    """
    param_cfg = ParamConfig()

    user_cfg_dict = load_user_config_dict(user_config_path) if user_config_path else {}
    user_cfg = UserConfig.model_validate(user_cfg_dict)

    cli_args = dict(cli_args or {})
    if verbose and "log_level" not in cli_args:
        cli_args["log_level"] = "DEBUG"

    cli_dict = {k: v for k, v in cli_args.items() if v is not None}
    cli_cfg = CLIConfig.model_validate(cli_dict) if cli_dict else CLIConfig()

    # Resolve to internal config (Param < User < CLI)
    config = resolve_config(param_cfg, user_cfg, cli_cfg)
    setup_logging(config.logging.level, log_path)

    processor = ShapeProcessor(config)
    ds = processor.process()
    sequence = processor.start_guide(ds)
    segments = extract_segments(ds[config.var_names.segment_labels].values)

    shape = config.shape
    dims = shape.width if shape.locked else f"{shape.width}x{shape.height}"
    print(f"\n{'='*60}")
    print("Block Build Guide")
    print('='*60)
    print(f"Shape:  {dims} ({'filled' if shape.filled else 'hollow'})")
    print(f"Blocks: {ds.attrs['block_count']}")
    print(f"Steps:  {len(sequence)}")
    print('='*60)

    if verbose:
        print("\nFull Internal Configuration:")
        print(config.model_dump_json(indent=2))
        print('='*60)

    print(render_text(ds, config))
    print()
    print(processor.summarize(ds, sequence).to_string(index=False))

    shown = _selected_steps(sequence, step, all_steps)
    for snapshot in shown:
        print()
        print(describe_step(snapshot, segments))
        print(render_text(ds, config, snapshot))

    return shown[-1] if shown else sequence


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Print a block-by-block build guide for a pixel ellipse")
    parser.add_argument("config", nargs="?", help="Path to user config file")
    parser.add_argument("--width", type=int, help="Shape width in blocks")
    parser.add_argument("--height", type=int, help="Shape height in blocks")
    fill = parser.add_mutually_exclusive_group()
    fill.add_argument("--filled", dest="filled", action="store_true", default=None, help="Build the interior too")
    fill.add_argument("--hollow", dest="filled", action="store_false", default=None, help="Build the outline only")
    parser.add_argument("--unlocked", dest="locked", action="store_false", default=None,
                        help="Allow width and height to differ")
    parser.add_argument("--padding", type=int, help="Empty cells around the shape")
    steps = parser.add_mutually_exclusive_group()
    steps.add_argument("--step", type=int, help="Show this build step (1-based)")
    steps.add_argument("--all-steps", action="store_true", help="Show every build step")
    parser.add_argument("--log-file", help="Also write logs to this file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)

    run_build_guide(
        args.config,
        cli_args={
            "width": args.width,
            "height": args.height,
            "filled": args.filled,
            "locked": args.locked,
            "padding": args.padding,
        },
        step=args.step,
        all_steps=args.all_steps,
        verbose=args.verbose,
        log_path=args.log_file,
    )


if __name__ == "__main__":
    main()
