"""
Features de LLM Streamliner.

- codecs: Compressor / Expander (zlib, identité) + registre
- memory: Memory Module (packaging, sérialisation, statistiques)
- storage: persistance fichier
"""
