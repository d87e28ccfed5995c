"""Print the TX81Z voice parameter SysEx table.

Usage:
    python main.py                      # table to stdout, data column "VV"
    python main.py --data-value 0 --syx params.syx
"""
from __future__ import annotations
import argparse
import sys
from pathlib import Path

from core.config import AppConfig
from core.logger import AppLogger
from midi.bitmask import EncodeError
from midi.emitter import ParamEmitter
from midi.params import ParamMap


def _hex_int(text: str) -> int:
    return int(text, 16)


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate a TX81Z parameter change SysEx table",
    )
    parser.add_argument("--config", type=Path, default=None,
                        help="Config JSON path (default ~/.config/sysextable/config.json)")
    parser.add_argument("--device-id", type=_hex_int, default=None,
                        help="Device id byte in hex (default 43)")
    parser.add_argument("--channel", type=int, default=None,
                        help="Value written into the channel nibble")
    parser.add_argument("--data-value", type=int, default=None,
                        help="Encode this value in the data column instead of the placeholder")
    parser.add_argument("--delimiter", default=None, help="Column delimiter")
    parser.add_argument("--no-headings", action="store_true",
                        help="Omit the per-group heading lines")
    parser.add_argument("-o", "--output", type=Path, default=None,
                        help="Write the table here instead of stdout")
    parser.add_argument("--syx", type=Path, default=None,
                        help="Also write the messages as a .syx file (needs --data-value)")
    parser.add_argument("--group", default=None,
                        help="Only emit the named parameter group")
    parser.add_argument("--list-groups", action="store_true",
                        help="List the parameter groups and exit")
    parser.add_argument("--save-config", action="store_true",
                        help="Store the effective settings in the config file")
    return parser


def _list_groups(param_map: ParamMap) -> None:
    for group in param_map.list_groups():
        print(f"{group.name}: group {group.group}, subgroup {group.subgroup}, "
              f"parameters {group.first_param_no}-{group.last_param_no}")


def main(argv: list[str] | None = None, logger: AppLogger | None = None) -> int:
    parser = _build_arg_parser()
    args = parser.parse_args(argv)
    if args.syx is not None and args.data_value is None:
        parser.error("--syx requires --data-value")

    param_map = ParamMap()
    if args.list_groups:
        _list_groups(param_map)
        return 0
    if args.group is not None:
        group = param_map.get_group(args.group)
        if group is None:
            parser.error(f"unknown parameter group '{args.group}'")
        param_map = ParamMap([group])

    cfg = AppConfig(path=args.config)
    logger = logger or AppLogger()
    if args.device_id is not None:
        cfg.device_id = args.device_id
    if args.channel is not None:
        cfg.channel = args.channel
    if args.delimiter is not None:
        cfg.delimiter = args.delimiter
    headings = cfg.headings and not args.no_headings

    emitter = ParamEmitter(data_placeholder=cfg.data_placeholder, logger=logger)
    try:
        emitter.set_device_id(cfg.device_id).set_channel(cfg.channel)
        emitter.set_data_value(args.data_value)
        table = emitter.emit_catalogue(param_map)
    except EncodeError as exc:
        logger.codec(str(exc))
        return 2

    if args.save_config:
        cfg.save()
        logger.general(f"settings saved to {cfg.path}")

    if args.output is not None:
        table.save(args.output, cfg.delimiter, headings)
        logger.general(f"table written to {args.output}")
    else:
        for line in table.to_lines(cfg.delimiter, headings):
            print(line)

    if args.syx is not None:
        # SysEx data bytes are 7-bit; mido rejects anything above 0x7F
        try:
            table.save_syx(args.syx)
        except ValueError as exc:
            logger.codec(f"cannot write {args.syx}: {exc}")
            return 2
        logger.general(f"{len(table)} messages written to {args.syx}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
