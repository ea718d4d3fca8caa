"""Shared fixtures: sample pktmon output."""
import pytest


# `pktmon format -v` dump with two LLDP frames from the same switch port
SAMPLE_LLDP_DUMP = """\
[00]0000.0000::2024-05-01 10:00:01.123456700 [Microsoft-Windows-PktMon] PktGroupId 1, PktNumber 1, Appearance 1, Direction Rx , Type Ethernet , Component 9, Edge 1, Filter 1, OriginalSize 330, LoggedSize 330
\t00-1B-54-C2-3A-8C > 01-80-C2-00-00-0E, ethertype LLDP (0x88cc), length 330: LLDP, length 316
\tChassis ID TLV (1), length 7
\t  Subtype MAC address (4): 00:1b:54:c2:3a:80
\tPort ID TLV (2), length 8
\t  Subtype Interface Name (5): Gi1/0/12
\tTime to Live TLV (3), length 2: TTL 120s
\tPort Description TLV (4), length 21: GigabitEthernet1/0/12
\tSystem Name TLV (5), length 10: core-sw-01
\tSystem Description TLV (6), length 79
\t  Cisco IOS Software, C3750E Software (C3750E-UNIVERSALK9-M), Version 15.0(2)SE11
\tSystem Capabilities TLV (7), length 4
\t  System  Capabilities: [Bridge, Router] (0x0014)
\t  Enabled Capabilities: [Bridge] (0x0004)
\tManagement Address TLV (8), length 12
\t  Management Address length 5, AFI IPv4 (1): 10.0.0.2
\t  Interface Index Interface Numbering (2): 12
\tOrganization specific TLV (127), OUI Ethernet bridged (0x0080c2), length 16: Subtype VLAN name Subtype (3)
\t  vlan id (VID): 10
\t  vlan name: Management
\tOrganization specific TLV (127), OUI Ethernet bridged (0x0080c2), length 11: Subtype VLAN name Subtype (3)
\t  vlan id (VID): 20
\t  vlan name: Voice
\tEnd TLV (0), length 0
"""

SAMPLE_PKTMON_LIST = """\
Network Switches:
    Id  Name
    --  ----
     2  Default Switch (Hyper-V)

Network Adapters:
    Id  MAC Address       Name
    --  -----------       ----
     9  00-15-5D-01-02-03  Intel(R) Ethernet Connection (7) I219-LM
    11  4C-1D-96-AA-BB-CC  Intel(R) Wi-Fi 6 AX201 160MHz
    14  4C-1D-96-AA-BB-CD  Bluetooth Device (Personal Area Network)
    17  00-E0-4C-68-00-01  Realtek USB GbE Family Controller
    21  4C-1D-96-AA-BB-CE  Microsoft Wireless WiFi Direct Virtual Adapter
"""


@pytest.fixture
def lldp_dump_lines():
    return SAMPLE_LLDP_DUMP.splitlines(keepends=True)


@pytest.fixture
def lldp_dump_file(tmp_path):
    txt_path = tmp_path / "lldp.txt"
    txt_path.write_text(SAMPLE_LLDP_DUMP, encoding="utf-8")
    return str(txt_path)


@pytest.fixture
def pktmon_list_output():
    return SAMPLE_PKTMON_LIST


@pytest.fixture
def lldp_dump_text():
    return SAMPLE_LLDP_DUMP
