"""
Sensor snippet templates.

Each supported (sensor type, action) pair maps to the same condition written
three ways: a PLC ladder sketch, an ABB RAPID IF block and a Siemens S7
(SCL) IF block.  Inputs are matched by plain string equality.
"""

from __future__ import annotations

from typing import Dict, List

SENSOR_USAGE = "Usage: sensor <type> <action>\nExample: sensor digital when_on"
UNKNOWN_SENSOR_TYPE = "Unknown sensor type. Available types: digital, analog"

_DIGITAL_WHEN_ON = """
PLC Ladder Logic:
|--[INPUT]--|--[OUTPUT]--|

ABB Robot:
IF DI_01 = 1 THEN
    ! Your action here
ENDIF

Siemens S7:
IF "Input_Bit" THEN
    // Your action here
END_IF"""

_ANALOG_WHEN_ON = """
PLC Ladder Logic:
|--[ANALOG_IN]--|--[SCALE]--|--[COMPARE]--|--[OUTPUT]--|

ABB Robot:
IF AI_01 > SET_POINT THEN
    ! Your action here
ENDIF

Siemens S7:
IF "Analog_Input" > "Set_Point" THEN
    // Your action here
END_IF"""

SENSOR_TEMPLATES: Dict[str, Dict[str, str]] = {
    "digital": {"when_on": _DIGITAL_WHEN_ON},
    "analog": {"when_on": _ANALOG_WHEN_ON},
}


def unknown_action_message(sensor_type: str) -> str:
    return f"Unknown action for {sensor_type} sensor"


def generate_sensor_code(sensor_type: str, action: str) -> str:
    actions = SENSOR_TEMPLATES.get(sensor_type)
    if actions is None:
        return UNKNOWN_SENSOR_TYPE
    return actions.get(action, unknown_action_message(sensor_type))


async def handle_sensor(args: List[str]) -> str:
    if len(args) < 2:
        return SENSOR_USAGE
    return generate_sensor_code(args[0], args[1])
