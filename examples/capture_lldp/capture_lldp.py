import sys
from pathlib import Path
root_dir = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(root_dir))

from lldp_capture.capture import LLDPCapture
from lldp_capture.parser import format_lldp_data


def main():
    # run from an elevated prompt, pktmon needs admin rights to capture
    lldp_data = LLDPCapture().run(duration=30)
    if lldp_data:
        print("\n".join(format_lldp_data(lldp_data)))


if __name__ == "__main__":
    main()
