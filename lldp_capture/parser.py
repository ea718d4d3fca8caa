"""Parsers for pktmon text output.

`pktmon format <etl> -o <txt> -v` writes one verbose, indented block per
captured frame. The LLDP part of a block looks like this:

    Chassis ID TLV (1), length 7
      Subtype MAC address (4): 00:1b:54:c2:3a:80
    Port ID TLV (2), length 8
      Subtype Interface Name (5): Gi1/0/12
    Time to Live TLV (3), length 2: 120

Some fields sit on the marker line itself, others on the line(s) after it.
"""
from os.path import isfile
from typing import Dict, Iterable, Iterator, List, Optional

from lldp_capture.common import (
    logger, VALUE_SEPARATOR, COMPONENT_TABLE_HEADER, EXCLUDED_COMPONENT_KEYWORDS,
    KEY_CHASSIS_ID, KEY_PORT_ID, KEY_TIME_TO_LIVE, KEY_PORT_DESCRIPTION,
    KEY_SYSTEM_NAME, KEY_SYSTEM_DESCRIPTION, KEY_SYSTEM_CAPABILITIES,
    KEY_ENABLED_CAPABILITIES, KEY_MANAGEMENT_ADDRESS, KEY_VLANS,
    MARKER_CHASSIS_ID, MARKER_PORT_ID, MARKER_TIME_TO_LIVE,
    MARKER_PORT_DESCRIPTION, MARKER_SYSTEM_NAME, MARKER_SYSTEM_DESCRIPTION,
    MARKER_SYSTEM_CAPABILITIES, MARKER_MANAGEMENT_ADDRESS, MARKER_VLAN_NAME)
from lldp_capture.exceptions import CaptureFileNotFoundError


def get_value(line: Optional[str]) -> Optional[str]:
    """Return the stripped text after the first ': ' of a line, or None."""
    if line is None:
        return None
    _, sep, value = line.partition(VALUE_SEPARATOR)
    if not sep:
        return None
    return value.strip()


def _next_line(lines: Iterator[str]) -> Optional[str]:
    line = next(lines, None)
    if line is None:
        return None
    return line.rstrip('\r\n')


def format_vlan(vlan_id: Optional[str], vlan_name: Optional[str]) -> str:
    return f"VLAN ID: {vlan_id} VLAN Name: {vlan_name}"


def parse_lldp_lines(lines: Iterable[str]) -> Dict[str, Optional[str]]:
    """Extract LLDP discovery fields from the lines of a pktmon text dump.

    Each key is stored once; a field seen again in a later frame overwrites
    the earlier value. Truncated or malformed entries yield None values
    instead of raising.
    """
    lldp_data: Dict[str, Optional[str]] = {}
    vlan_data: List[str] = []

    lines = iter(lines)
    while (line := _next_line(lines)) is not None:
        if MARKER_CHASSIS_ID in line:
            lldp_data[KEY_CHASSIS_ID] = get_value(_next_line(lines))
        elif MARKER_PORT_ID in line:
            lldp_data[KEY_PORT_ID] = get_value(_next_line(lines))
        elif MARKER_TIME_TO_LIVE in line:
            lldp_data[KEY_TIME_TO_LIVE] = get_value(line)
        elif MARKER_PORT_DESCRIPTION in line:
            lldp_data[KEY_PORT_DESCRIPTION] = get_value(line)
        elif MARKER_SYSTEM_NAME in line:
            lldp_data[KEY_SYSTEM_NAME] = get_value(line)
        elif MARKER_SYSTEM_DESCRIPTION in line:
            description = _next_line(lines)
            lldp_data[KEY_SYSTEM_DESCRIPTION] = description.strip() if description is not None else None
        elif MARKER_SYSTEM_CAPABILITIES in line:
            capabilities = get_value(_next_line(lines))
            if capabilities is not None:
                lldp_data[KEY_SYSTEM_CAPABILITIES] = capabilities
            enabled_capabilities = get_value(_next_line(lines))
            if enabled_capabilities is not None:
                lldp_data[KEY_ENABLED_CAPABILITIES] = enabled_capabilities
        elif MARKER_MANAGEMENT_ADDRESS in line:
            management_address = get_value(_next_line(lines))
            if management_address is not None:
                lldp_data[KEY_MANAGEMENT_ADDRESS] = management_address
        elif MARKER_VLAN_NAME in line:
            vlan_id = get_value(_next_line(lines))
            vlan_name = get_value(_next_line(lines))
            vlan_data.append(format_vlan(vlan_id, vlan_name))

    if vlan_data:
        lldp_data[KEY_VLANS] = "\n".join(vlan_data)

    return lldp_data


def parse_lldp_file(file_path: str) -> Dict[str, Optional[str]]:
    """Parse the text dump written by `pktmon format`."""
    if not isfile(file_path):
        raise CaptureFileNotFoundError(f"Capture text file not found: {file_path}")
    with open(file_path, 'r', encoding='utf-8', errors='replace') as f:
        lldp_data = parse_lldp_lines(f)
    logger.info("Parsed %d LLDP fields from %s", len(lldp_data), file_path)
    return lldp_data


def format_lldp_data(lldp_data: Dict[str, Optional[str]]) -> List[str]:
    """Render the parsed record as the lines of the console summary."""
    output = ["Parsed LLDP Data:"]
    for key, value in lldp_data.items():
        if key == KEY_VLANS:
            output.append(f"{key}:")
            output.append(f"{value}")
            output.append("")
        else:
            output.append(f"{key}: {value}")
    return output


def is_excluded_component(name: str) -> bool:
    """Bluetooth and wireless adapters do not carry LLDP."""
    name = name.lower()
    return any(keyword in name for keyword in EXCLUDED_COMPONENT_KEYWORDS)


def parse_component_list(output: Optional[str]) -> Dict[str, str]:
    """Parse `pktmon list` output into {component id: name} for Ethernet adapters."""
    components: Dict[str, str] = {}
    if not output:
        return components

    data_section_started = False
    for line in output.splitlines():
        if not data_section_started:
            if COMPONENT_TABLE_HEADER in line:
                data_section_started = True
            continue

        if "--" in line:
            continue

        parts = line.split(None, 2)
        if len(parts) < 3:
            continue
        comp_id, name = parts[0].strip(), parts[2].strip()
        if is_excluded_component(name):
            continue
        components[comp_id] = name

    return components
