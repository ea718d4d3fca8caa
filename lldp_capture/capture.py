from os.path import join
from typing import Callable, Dict, Optional

from lldp_capture.common import (
    logger, TEMP_DIR, ETL_FILE_NAME, TXT_FILE_NAME, DEFAULT_CAPTURE_DURATION)
from lldp_capture.pktmon import PktmonController
from lldp_capture.parser import parse_lldp_file
from lldp_capture.utils import countdown, ensure_directory, remove_file


class LLDPCapture:
    """Capture LLDP frames with pktmon on one component and parse them."""

    def __init__(self, pktmon: Optional[PktmonController] = None,
                 temp_dir: str = TEMP_DIR) -> None:
        self.pktmon = pktmon if pktmon is not None else PktmonController()
        self.temp_dir = temp_dir
        self.etl_path = join(temp_dir, ETL_FILE_NAME)
        self.txt_path = join(temp_dir, TXT_FILE_NAME)

    def cleanup(self) -> None:
        """Stop any running capture, drop the filters and remove the temp files."""
        self.pktmon.stop()
        self.pktmon.remove_filters()
        self.pktmon.reset()
        remove_file(self.etl_path)
        remove_file(self.txt_path)

    def ensure_temp_dir(self) -> None:
        ensure_directory(self.temp_dir)

    @staticmethod
    def select_component(components: Dict[str, str],
                         input_func: Callable[[str], str] = input) -> Optional[str]:
        """Ask for a component id until a listed one (or nothing) is entered."""
        print("Enter the Component ID to capture on:")
        while True:
            selected_comp_id = input_func("").strip()
            if selected_comp_id in components:
                return selected_comp_id
            print("Invalid Component ID entered. Please try again or press Enter to exit.")
            if not selected_comp_id:
                return None

    def capture(self, component_id: str, duration: int) -> None:
        """Capture LLDP frames for `duration` seconds and convert them to text."""
        self.pktmon.add_lldp_filter()
        self.pktmon.start_capture(component_id, self.etl_path)
        logger.info("LLDP capture started on component %s for %d seconds",
                    component_id, duration)

        countdown(duration)

        self.pktmon.stop()
        self.pktmon.format_capture(self.etl_path, self.txt_path)
        logger.info("LLDP capture written to %s", self.txt_path)

    def run(self, duration: int = DEFAULT_CAPTURE_DURATION,
            input_func: Callable[[str], str] = input) -> Optional[Dict[str, Optional[str]]]:
        """List components, capture on the selected one and return the parsed LLDP data."""
        try:
            self.cleanup()
            self.ensure_temp_dir()

            components = self.pktmon.get_components()
            if not components:
                print("No ethernet adapters found to capture on.")
                return None

            selected_comp_id = self.select_component(components, input_func)
            if not selected_comp_id:
                return None

            self.capture(selected_comp_id, duration)
            return parse_lldp_file(self.txt_path)
        finally:
            self.cleanup()
