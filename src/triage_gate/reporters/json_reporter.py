"""JSON report generator for triage results.

Produces the machine-readable TriageResult document consumed by CI steps
and other tooling.
"""

import json
import logging
from pathlib import Path
from typing import Union

from ..models.triage_models import TriageResult

logger = logging.getLogger(__name__)


class JsonReporter:
    """
    Generate JSON documents for programmatic access.

    GOTCHA: Optional issue fields are omitted rather than serialized as null
    """

    def __init__(self, pretty: bool = True):
        """
        Initialize JSON reporter.

        Args:
            pretty: Whether to pretty-print JSON output
        """
        self.pretty = pretty
        self.logger = logger

    def generate_report(self, result: TriageResult) -> str:
        """
        Serialize a triage result.

        Args:
            result: Triage result to serialize

        Returns:
            JSON string
        """
        document = result.to_document()

        if self.pretty:
            json_str = json.dumps(document, indent=2, ensure_ascii=False)
        else:
            json_str = json.dumps(document, ensure_ascii=False)

        self.logger.debug(f"JSON report generated ({len(json_str)} bytes)")
        return json_str

    def save_report(self, result: TriageResult, output_path: Union[str, Path]) -> Path:
        """Write the JSON document, creating parent directories."""
        path = Path(output_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.generate_report(result) + "\n", encoding="utf-8")
        self.logger.info(f"Triage report saved to {path}")
        return path
