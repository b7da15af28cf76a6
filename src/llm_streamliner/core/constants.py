"""
Constantes globales pour LLM Streamliner.
"""

# ============================================================================
# FORMAT SÉRIALISÉ DU MEMORY MODULE
# ============================================================================
FIELD_COMPRESSED_DATA = "compressed_data"
FIELD_METADATA = "metadata"
MODULE_FIELDS = (FIELD_COMPRESSED_DATA, FIELD_METADATA)

# ============================================================================
# CODECS
# ============================================================================
DEFAULT_CODEC = "zlib"
ZLIB_DEFAULT_LEVEL = -1  # Z_DEFAULT_COMPRESSION (équivaut au niveau 6)
ZLIB_MIN_LEVEL = -1
ZLIB_MAX_LEVEL = 9

# ============================================================================
# STOCKAGE
# ============================================================================
DEFAULT_STORAGE_DIR = ".streamliner"
MODULE_FILE_ENCODING = "utf-8"

# ============================================================================
# TOKENIZATION
# ============================================================================
TOKEN_ENCODING_NAME = "cl100k_base"

# Configuration par défaut de la section [streamliner]
DEFAULT_STREAMLINER_CONFIG = {
    "codec": DEFAULT_CODEC,
    "compression_level": ZLIB_DEFAULT_LEVEL,
    "storage_dir": DEFAULT_STORAGE_DIR,
}
