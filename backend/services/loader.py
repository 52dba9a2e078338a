"""Bilingual draw dataset loader.

The full dataset is read from the store once, packed with the record codec and
kept in the TTL cache. Requests then decode only the language they need.
"""

import asyncio
import json
import logging

from errors import PartitionNotFoundError
from services.cache import TTLCache
from services.codec import compress, decompress

logger = logging.getLogger(__name__)

DATASET_CACHE_KEY = "data_loader_compressed"
DATASET_TTL_SECONDS = 15 * 60
LANGUAGES = ("en", "fr")


class DatasetLoader:
    def __init__(self, cache: TTLCache, store, ttl_seconds: float = DATASET_TTL_SECONDS):
        self.cache = cache
        self.store = store
        self.ttl_seconds = ttl_seconds
        self._load_lock = asyncio.Lock()

    async def load(self) -> dict[str, list[tuple]]:
        """Return the compact ``{"en": [...], "fr": [...]}`` dataset.

        Concurrent misses wait on a single in-flight load instead of each
        reading the store.
        """
        data = self.cache.get(DATASET_CACHE_KEY)
        if data is not None:
            return data

        async with self._load_lock:
            data = self.cache.get(DATASET_CACHE_KEY)
            if data is None:
                data = await asyncio.to_thread(self._read_all)
                self.cache.set(DATASET_CACHE_KEY, data, ttl_seconds=self.ttl_seconds)
        return data

    async def get_draws(self, lang: str = "en") -> list[dict]:
        """Decoded draws for one language, in stored order."""
        data = await self.load()
        return decompress(data[lang])

    def memory_stats(self) -> dict:
        """Serialized size of the resident compact dataset, if loaded."""
        data = self.cache.get(DATASET_CACHE_KEY)
        if data is None:
            return {"status": "No data loaded"}

        sizes = {lang: len(json.dumps(rows)) for lang, rows in data.items()}
        return {
            "compressed": True,
            "englishDataSize": f"{sizes['en'] / 1024:.2f} KB",
            "frenchDataSize": f"{sizes['fr'] / 1024:.2f} KB",
            "totalSize": f"{sum(sizes.values()) / 1024:.2f} KB",
        }

    def _read_all(self) -> dict[str, list[tuple]]:
        # English is mandatory: any failure here propagates to the caller.
        en = self.store.read_partition("en")
        try:
            fr = self.store.read_partition("fr")
        except PartitionNotFoundError:
            logger.warning("French data not found, using empty dataset")
            fr = []

        logger.info("Loaded draw dataset: en=%d fr=%d", len(en), len(fr))
        return {"en": compress(en), "fr": compress(fr)}
