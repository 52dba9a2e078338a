"""JSON-file backed draw store.

Each language partition is one file holding ``{"draws": [...]}``. The files are
written by the external feed sync job; this module only reads them.
"""

import json
import logging
from pathlib import Path

from errors import PartitionNotFoundError

logger = logging.getLogger(__name__)

PARTITION_FILES = {
    "en": "ee-draws.json",
    "fr": "ee-draws-fr.json",
}


class JsonDrawStore:
    def __init__(self, data_dir: Path | str):
        self.data_dir = Path(data_dir)

    def path_for(self, lang: str) -> Path:
        try:
            return self.data_dir / PARTITION_FILES[lang]
        except KeyError:
            raise ValueError(f"Unknown partition: {lang}") from None

    def read_partition(self, lang: str) -> list[dict]:
        """Return the raw draw records for one language.

        Raises PartitionNotFoundError if the file does not exist. Any other
        read or parse failure propagates unchanged.
        """
        path = self.path_for(lang)
        if not path.is_file():
            raise PartitionNotFoundError(lang, str(path))

        with path.open(encoding="utf-8") as fh:
            payload = json.load(fh)

        draws = payload.get("draws", [])
        logger.debug("Read %d %s draws from %s", len(draws), lang, path)
        return draws
