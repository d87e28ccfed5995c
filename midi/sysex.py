from __future__ import annotations

from midi.bitmask import encode_hex_byte, hex_byte

YAMAHA_ID = 0x43

# TX81Z parameter change: F0 43 1n 0ggggghh 0ppppppp 0vvvvvvv F7
CH_MASK = "0001nnnn"
GROUP_MASK = "0ggggghh"
PARAM_NO_MASK = "0ppppppp"
DATA_MASK = "0vvvvvvv"

VOICE_GROUP = 4
VCED_SUBGROUP = 2  # voice edit parameters
ACED_SUBGROUP = 3  # additional voice edit parameters


def device_id_byte(device_id: int = YAMAHA_ID) -> str:
    return hex_byte(device_id)


def channel_byte(channel: int) -> str:
    """The 1n byte; `channel` is written into the low nibble as given."""
    return encode_hex_byte(CH_MASK, [channel])


def group_byte(group: int, subgroup: int) -> str:
    return encode_hex_byte(GROUP_MASK, [group, subgroup])


def param_byte(param_no: int) -> str:
    return encode_hex_byte(PARAM_NO_MASK, [param_no])


def data_byte(value: int) -> str:
    return encode_hex_byte(DATA_MASK, [value])

