from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path

import mido


@dataclass(frozen=True)
class TableRow:
    group_name: str
    param_no: int
    name: str
    hex_bytes: tuple[str, ...]

    @property
    def message(self) -> str:
        return " ".join(self.hex_bytes)

    def format(self, delimiter: str = ";") -> str:
        cells = (str(self.param_no), self.name, self.message)
        return delimiter.join('"' + c.replace('"', '""') + '"' for c in cells)

    def to_bytes(self) -> list[int]:
        """Message body as integers; fails if a column is a placeholder."""
        try:
            return [int(b, 16) for b in self.hex_bytes]
        except ValueError as exc:
            raise ValueError(
                f"Row {self.param_no} '{self.name}' has a non-numeric byte: {self.message}"
            ) from exc


class ParamTable:
    def __init__(self) -> None:
        self.rows: list[TableRow] = []

    def __len__(self) -> int:
        return len(self.rows)

    def add(self, row: TableRow) -> None:
        self.rows.append(row)

    def group_names(self) -> list[str]:
        names: list[str] = []
        for row in self.rows:
            if row.group_name not in names:
                names.append(row.group_name)
        return names

    def to_lines(self, delimiter: str = ";", with_headings: bool = True) -> list[str]:
        lines: list[str] = []
        current = None
        for row in self.rows:
            if with_headings and row.group_name != current:
                lines.append("")
                lines.append(f"Parameter group '{row.group_name}':")
            current = row.group_name
            lines.append(row.format(delimiter))
        return lines

    def save(self, path: Path, delimiter: str = ";", with_headings: bool = True) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("\n".join(self.to_lines(delimiter, with_headings)) + "\n")

    def to_messages(self) -> list[mido.Message]:
        """One sysex message per row; mido takes the data without F0/F7."""
        return [mido.Message("sysex", data=row.to_bytes()) for row in self.rows]

    def save_syx(self, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        mido.write_syx_file(str(path), self.to_messages())

