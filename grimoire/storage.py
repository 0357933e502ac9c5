import logging
from pathlib import Path
from urllib.parse import quote
from starlette.concurrency import run_in_threadpool

logger = logging.getLogger(__name__)

class LocalStorage:
    """Stores uploaded objects on disk and hands back the URL they are served at."""

    def __init__(self, root: str, url_prefix: str):
        self.root = Path(root)
        self.url_prefix = url_prefix.rstrip("/")

    def _write(self, path: Path, data: bytes):
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)

    async def put(self, key: str, data: bytes, content_type: str) -> str:
        key = key.lstrip("/")
        path = self.root / key
        if self.root.resolve() not in path.resolve().parents:
            raise ValueError(f"Invalid storage key: {key}")
        await run_in_threadpool(self._write, path, data)
        logger.info("Stored %s (%s, %d bytes)", key, content_type, len(data))
        return f"{self.url_prefix}/{quote(key)}"
