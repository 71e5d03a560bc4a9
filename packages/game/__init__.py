from .config import INDEX_CACHE_PREFIX, INDEX_TTL_SEC, Settings
from .service import WordGame, index_cache_key
from .io import write_csv, write_manifest

__all__ = ["WordGame", "Settings", "index_cache_key", "write_csv", "write_manifest",
           "INDEX_TTL_SEC", "INDEX_CACHE_PREFIX"]
