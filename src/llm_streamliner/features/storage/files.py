"""
Stockage fichier des memory modules (frontière de persistance).

Lecture/écriture intégrale d'octets opaques via aiofiles. Le handle est
toujours ouvert dans un `async with`, donc libéré sur tous les chemins.
Les répertoires parents ne sont pas créés ici.
"""
import logging
import os
from typing import Union

import aiofiles

from ...core.constants import MODULE_FILE_ENCODING
from ...core.exceptions import SerializationError, StorageError
from ..memory.module import MemoryModule

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


async def store_module(path: PathLike, data: bytes) -> None:
    """
    Écrit des octets dans un fichier (créé ou tronqué).

    Raises:
        StorageError: Si le fichier ne peut être créé ou écrit
    """
    try:
        async with aiofiles.open(path, "wb") as f:
            await f.write(data)
    except OSError as e:
        raise StorageError(
            f"Écriture impossible: {e}", path=os.fspath(path), operation="store"
        ) from e
    logger.debug(f"💾 {len(data)} octets écrits dans {path}")


async def retrieve_module(path: PathLike) -> bytes:
    """
    Lit l'intégralité d'un fichier.

    Raises:
        StorageError: Si le fichier est absent ou illisible
    """
    try:
        async with aiofiles.open(path, "rb") as f:
            data = await f.read()
    except OSError as e:
        raise StorageError(
            f"Lecture impossible: {e}", path=os.fspath(path), operation="retrieve"
        ) from e
    logger.debug(f"📂 {len(data)} octets lus depuis {path}")
    return data


async def save_memory_module(path: PathLike, module: MemoryModule) -> None:
    """Sérialise un module en JSON UTF-8 puis le stocke."""
    try:
        payload = module.to_json().encode(MODULE_FILE_ENCODING)
    except SerializationError as e:
        raise StorageError(
            f"Module non sérialisable: {e.message}", path=os.fspath(path), operation="store"
        ) from e
    except UnicodeEncodeError as e:
        raise StorageError(
            f"Module non encodable en UTF-8: {e}", path=os.fspath(path), operation="store"
        ) from e
    await store_module(path, payload)


async def load_memory_module(path: PathLike) -> MemoryModule:
    """Relit et désérialise un module stocké par save_memory_module."""
    data = await retrieve_module(path)
    try:
        return MemoryModule.from_json(data.decode(MODULE_FILE_ENCODING))
    except UnicodeDecodeError as e:
        raise StorageError(
            f"Fichier module non UTF-8: {e}", path=os.fspath(path), operation="retrieve"
        ) from e
    except SerializationError as e:
        raise StorageError(
            f"Module stocké invalide: {e.message}", path=os.fspath(path), operation="retrieve"
        ) from e
