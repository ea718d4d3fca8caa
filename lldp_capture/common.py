import json
import sys
from os.path import join, dirname, exists
from tempfile import gettempdir
from lldp_capture.logger_config import setup_logger

def load_config():
    """Load configuration from config.json or use defaults."""
    config_path = join(dirname(dirname(__file__)), 'config.json')
    if exists(config_path):
        with open(config_path, 'r') as f:
            return json.load(f)
    return {}

########### Load configuration ###########
_config = load_config()

########### Logging ###########
LOG_DIRECTORY = _config.get('log_directory', 'logs')
LOG_LEVEL = _config.get('log_level', 'INFO')

########### Temp files for the capture ###########
if sys.platform == 'win32':
    _DEFAULT_TEMP_DIR = join('C:\\', 'temp')
else:
    _DEFAULT_TEMP_DIR = join(gettempdir(), 'lldp_capture')
TEMP_DIR = _config.get('temp_dir', _DEFAULT_TEMP_DIR)
ETL_FILE_NAME = 'lldp.etl'
TXT_FILE_NAME = 'lldp.txt'

########### pktmon ###########
PKTMON_BINARY = _config.get('pktmon_binary', 'pktmon')
LLDP_ETHER_TYPE = '0x88cc'

########### Capture duration (seconds) ###########
MIN_CAPTURE_DURATION = 30
MAX_CAPTURE_DURATION = 60

def get_default_capture_duration(config):
    """Configured default duration, or the minimum when it is out of range."""
    duration = config.get('default_capture_duration', MIN_CAPTURE_DURATION)
    if not isinstance(duration, int) or not MIN_CAPTURE_DURATION <= duration <= MAX_CAPTURE_DURATION:
        return MIN_CAPTURE_DURATION
    return duration

DEFAULT_CAPTURE_DURATION = get_default_capture_duration(_config)

########### pktmon list parsing ###########
COMPONENT_TABLE_HEADER = 'Address       Name'
EXCLUDED_COMPONENT_KEYWORDS = ('bluetooth', 'wireless', 'wi-fi')

########### LLDP record keys ###########
KEY_CHASSIS_ID = 'Chassis ID'
KEY_PORT_ID = 'Port ID'
KEY_TIME_TO_LIVE = 'Time to Live'
KEY_PORT_DESCRIPTION = 'Port Description'
KEY_SYSTEM_NAME = 'System Name'
KEY_SYSTEM_DESCRIPTION = 'System Description'
KEY_SYSTEM_CAPABILITIES = 'System Capabilities'
KEY_ENABLED_CAPABILITIES = 'Enabled Capabilities'
KEY_MANAGEMENT_ADDRESS = 'Management Address'
KEY_VLANS = 'VLANs'

########### Markers in the `pktmon format -v` text dump ###########
MARKER_CHASSIS_ID = 'Chassis ID TLV'
MARKER_PORT_ID = 'Port ID TLV'
MARKER_TIME_TO_LIVE = 'Time to Live TLV'
MARKER_PORT_DESCRIPTION = 'Port Description TLV'
MARKER_SYSTEM_NAME = 'System Name TLV'
MARKER_SYSTEM_DESCRIPTION = 'System Description TLV'
MARKER_SYSTEM_CAPABILITIES = 'System Capabilities TLV'
MARKER_MANAGEMENT_ADDRESS = 'Management Address TLV'
MARKER_VLAN_NAME = 'VLAN name Subtype'

VALUE_SEPARATOR = ': '

logger = setup_logger(LOG_DIRECTORY, LOG_LEVEL)
