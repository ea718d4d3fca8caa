import subprocess
from shutil import which
from typing import Dict, List, Optional

from lldp_capture.common import logger, PKTMON_BINARY, LLDP_ETHER_TYPE
from lldp_capture.exceptions import PktmonNotFoundError, PktmonCommandError
from lldp_capture.parser import parse_component_list


class PktmonController:
    """Run the Windows packet monitor (pktmon) with fixed argument templates.

    pktmon needs an elevated prompt for everything except `list`.
    """

    def __init__(self, binary: str = PKTMON_BINARY) -> None:
        self.binary = binary

    def check_installed(self) -> str:
        """Return the full path of the pktmon binary."""
        path = which(self.binary)
        if path is None:
            raise PktmonNotFoundError(
                f"{self.binary} not found. It ships with Windows 10 (2004) and later.")
        return path

    def run(self, args: List[str], fail_silently: bool = True) -> Optional[str]:
        """Run pktmon with the given arguments and return its stdout."""
        cmd = [self.binary, *args]
        logger.debug("Running %s", " ".join(cmd))
        try:
            result = subprocess.run(cmd, capture_output=True, text=True, errors="replace")
        except OSError as e:
            logger.error("Error executing pktmon command: %s", e)
            if fail_silently:
                return None
            raise PktmonCommandError(f"Cannot execute {' '.join(cmd)}: {e}") from e

        if result.returncode != 0:
            error = (result.stderr or result.stdout or "").strip()
            if fail_silently:
                # e.g. `stop` with no capture running
                logger.debug("pktmon %s exited with %d: %s",
                             " ".join(args), result.returncode, error)
                return None
            logger.error("pktmon %s failed (exit code %d): %s",
                         " ".join(args), result.returncode, error)
            raise PktmonCommandError(
                f"pktmon {' '.join(args)} failed with exit code {result.returncode}: {error}")
        return result.stdout

    def list(self) -> Optional[str]:
        return self.run(["list"])

    def add_lldp_filter(self) -> Optional[str]:
        return self.run(["filter", "add", "--ethertype", LLDP_ETHER_TYPE], fail_silently=False)

    def start_capture(self, component_id: str, etl_path: str) -> Optional[str]:
        """Capture full packets (--pkt-size 0) on one component into an ETL file."""
        return self.run(["start", "--capture", "--comp", component_id,
                         "--pkt-size", "0", "-f", etl_path], fail_silently=False)

    def stop(self) -> Optional[str]:
        return self.run(["stop"])

    def format_capture(self, etl_path: str, txt_path: str) -> Optional[str]:
        """Convert the ETL capture to a verbose text dump."""
        return self.run(["format", etl_path, "-o", txt_path, "-v"], fail_silently=False)

    def remove_filters(self) -> Optional[str]:
        return self.run(["filter", "remove"])

    def reset(self) -> Optional[str]:
        return self.run(["reset"])

    def get_components(self) -> Dict[str, str]:
        """List the Ethernet components pktmon can capture on."""
        components = parse_component_list(self.list())
        for comp_id, name in components.items():
            print(f"Component ID: {comp_id}, Name: {name}")
        return components
