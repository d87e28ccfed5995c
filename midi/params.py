from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterator

from midi.sysex import VOICE_GROUP, VCED_SUBGROUP, ACED_SUBGROUP


@dataclass
class ParamGroupDef:
    name: str
    group: int
    subgroup: int
    first_param_no: int
    params: list[str] = field(default_factory=list)

    def param_numbers(self) -> Iterator[tuple[int, str]]:
        """Yield (parameter number, name) in emission order."""
        for offset, name in enumerate(self.params):
            yield self.first_param_no + offset, name

    @property
    def last_param_no(self) -> int:
        return self.first_param_no + len(self.params) - 1


def _per_operator(names: list[str], operators: int = 4) -> list[str]:
    return [f"OP{op} {name}" for op in range(1, operators + 1) for name in names]


# ---------------------------------------------------------------------------
# TX81Z voice parameters, in parameter-number order
# ---------------------------------------------------------------------------

_VCED_OPERATOR = [
    "Attack Rate", "Decay 1 Rate", "Decay 2 Rate", "Release Rate",
    "Decay 1 Level", "Level Scaling", "Rate Scaling", "EG Bias Sensitivity",
    "Amp Mod Enable", "Key Vel Sensitivity", "Output Level", "Frequency",
    "Detune",
]

# "Portamento" appears twice and there is no "Voice Name char8"; the names
# follow the order of the published parameter list as transcribed.
_VCED_COMMON = [
    "Algorithm", "Feedback", "LFO Speed", "LFO Delay", "LFO Pitch Mod Depth",
    "LFO Amp Mod Depth", "LFO Sync", "LFO Wave", "Pitch Mod Sens",
    "Amp Mod Sens", "Transpose", "Poly / Mono", "Pitch Bend Range",
    "Portamento", "Portamento Time", "Foot Control Volume", "Sustain",
    "Portamento", "Chorus", "Mod Wheel Pitch", "Mod Wheel Amp",
    "Breath Ctrl Pitch", "Breath Ctrl Amp", "Breath Ctrl Pitch Bias",
    "Breath Ctrl EG Bias",
    "Voice Name char1", "Voice Name char2", "Voice Name char3",
    "Voice Name char4", "Voice Name char5", "Voice Name char6",
    "Voice Name char7", "Voice Name char9", "Voice Name char10",
]

_ACED_OPERATOR = [
    "Fixed Frequency", "Fix Frequency Range", "Frequency Range Fine",
    "Waveform", "EG Shift",
]

_ACED_COMMON = ["Reverb Rate", "Foot Controller Pitch", "Foot Controller Amp"]

_GROUPS: list[ParamGroupDef] = [
    ParamGroupDef("Voice Edit", VOICE_GROUP, VCED_SUBGROUP, 0,
                  _per_operator(_VCED_OPERATOR) + _VCED_COMMON),
    ParamGroupDef("Operator on/off", VOICE_GROUP, VCED_SUBGROUP, 93,
                  ["OP 1-4 on/off"]),
    ParamGroupDef("Voice Edit Additional Parameters", VOICE_GROUP, ACED_SUBGROUP, 0,
                  _per_operator(_ACED_OPERATOR) + _ACED_COMMON),
]


class ParamMap:
    def __init__(self, groups: list[ParamGroupDef] | None = None) -> None:
        self._groups = list(_GROUPS if groups is None else groups)

    def list_groups(self) -> list[ParamGroupDef]:
        return list(self._groups)

    def get_group(self, name: str) -> ParamGroupDef | None:
        return next((g for g in self._groups if g.name == name), None)

