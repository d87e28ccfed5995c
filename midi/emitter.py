from __future__ import annotations

from core.logger import AppLogger
from midi.params import ParamMap
from midi.sysex import (
    YAMAHA_ID, channel_byte, data_byte, device_id_byte, group_byte, param_byte,
)
from model.table import ParamTable, TableRow

ID_BYTE = 0
CH_BYTE = 1
GROUP_BYTE = 2
PARAM_BYTE = 3
DATA_BYTE = 4


class ParamEmitter:
    """Builds parameter table rows one parameter at a time.

    Device id, channel and group bytes are rendered once and reused; the
    parameter number byte is rendered per row from a running counter that
    `begin_param_group` resets.
    """

    def __init__(self, data_placeholder: str = "VV",
                 logger: AppLogger | None = None) -> None:
        self._bytes: list[str | None] = [None] * (DATA_BYTE + 1)
        self._bytes[DATA_BYTE] = data_placeholder
        self._placeholder = data_placeholder
        self._group_name: str | None = None
        self._param_no = 0
        self._logger = logger or AppLogger()
        self.table = ParamTable()

    @property
    def param_no(self) -> int:
        return self._param_no

    def set_device_id(self, device_id: int = YAMAHA_ID) -> ParamEmitter:
        self._bytes[ID_BYTE] = device_id_byte(device_id)
        return self

    def set_channel(self, channel: int) -> ParamEmitter:
        self._bytes[CH_BYTE] = channel_byte(channel)
        return self

    def set_data_value(self, value: int | None) -> ParamEmitter:
        self._bytes[DATA_BYTE] = self._placeholder if value is None else data_byte(value)
        return self

    def begin_param_group(self, group: int, subgroup: int, first_param_no: int,
                          name: str) -> ParamEmitter:
        self._bytes[GROUP_BYTE] = group_byte(group, subgroup)
        self._param_no = first_param_no
        self._group_name = name
        self._logger.table(
            f"group '{name}': {self._bytes[GROUP_BYTE]} from parameter {first_param_no}")
        return self

    def emit(self, param_name: str) -> TableRow:
        missing = [label for label, b in zip(("device id", "channel", "group"), self._bytes)
                   if b is None]
        if missing:
            raise RuntimeError(f"Cannot emit '{param_name}': {', '.join(missing)} not set")
        row = TableRow(
            group_name=self._group_name,
            param_no=self._param_no,
            name=param_name,
            hex_bytes=(*self._bytes[:PARAM_BYTE], param_byte(self._param_no),
                       self._bytes[DATA_BYTE]),
        )
        self.table.add(row)
        self._param_no += 1
        return row

    def emit_catalogue(self, param_map: ParamMap) -> ParamTable:
        for group in param_map.list_groups():
            self.begin_param_group(group.group, group.subgroup,
                                   group.first_param_no, group.name)
            for name in group.params:
                self.emit(name)
        self._logger.table(
            f"emitted {len(self.table)} rows in {len(self.table.group_names())} group(s)")
        return self.table
