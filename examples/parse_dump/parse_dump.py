import sys
from pathlib import Path
root_dir = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(root_dir))

from lldp_capture.parser import parse_lldp_file, format_lldp_data

# Parse a text dump saved earlier with:
#   pktmon format lldp.etl -o lldp.txt -v
txt_path = sys.argv[1] if len(sys.argv) > 1 else "lldp.txt"
for line in format_lldp_data(parse_lldp_file(txt_path)):
    print(line)
