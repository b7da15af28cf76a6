"""
Point d'entrée pour `python -m llm_streamliner` (et la commande `llm-streamliner`).
"""
import argparse
import asyncio
import json
import logging
import os
import sys

from .config import StreamlinerSettings, default_config_path, load_config
from .core.exceptions import StorageError, StreamlinerError
from .features.codecs.registry import available_codecs, get_codec
from .features.memory.stats import compute_stats
from .features.storage.files import (
    load_memory_module,
    retrieve_module,
    save_memory_module,
    store_module,
)
from .streamliner import ContextStreamliner


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="llm-streamliner",
        description="Compression de contextes LLM en memory modules"
    )
    parser.add_argument("--config", default=None, help="Chemin vers config.toml (optionnel)")
    parser.add_argument("--verbose", action="store_true", help="Logs détaillés (DEBUG)")

    subparsers = parser.add_subparsers(dest="command", required=True)

    compress_parser = subparsers.add_parser("compress", help="Compresse un fichier texte en memory module")
    compress_parser.add_argument("input", help="Fichier texte UTF-8 à compresser")
    compress_parser.add_argument("output", help="Fichier module JSON à écrire")
    compress_parser.add_argument(
        "--codec", default=None, help=f"Codec ({', '.join(available_codecs())})"
    )
    compress_parser.add_argument("--metadata", default=None, help="Annotation libre du module")

    expand_parser = subparsers.add_parser("expand", help="Restitue le texte d'un memory module")
    expand_parser.add_argument("input", help="Fichier module JSON")
    expand_parser.add_argument("-o", "--output", default=None, help="Fichier de sortie (défaut: stdout)")
    expand_parser.add_argument("--codec", default=None, help="Codec utilisé à la compression")

    inspect_parser = subparsers.add_parser("inspect", help="Affiche les informations d'un memory module")
    inspect_parser.add_argument("input", help="Fichier module JSON")

    return parser


def _load_settings(config_path: str = None) -> StreamlinerSettings:
    """Config explicite, sinon config.toml du projet s'il existe, sinon défauts."""
    if config_path is None:
        config_path = default_config_path()
        if not os.path.exists(config_path):
            return StreamlinerSettings()
    return StreamlinerSettings.from_config(load_config(config_path))


def _make_streamliner(settings: StreamlinerSettings, codec_name: str = None) -> ContextStreamliner:
    if codec_name:
        codec = get_codec(codec_name, level=settings.compression_level)
        return ContextStreamliner(settings=settings, codec=codec)
    return ContextStreamliner(settings=settings)


async def _cmd_compress(args, settings: StreamlinerSettings) -> None:
    raw = await retrieve_module(args.input)
    try:
        context = raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise StorageError(f"Fichier d'entrée non UTF-8: {e}", path=args.input, operation="retrieve") from e

    streamliner = _make_streamliner(settings, args.codec)
    module = await streamliner.compress(context, args.metadata)
    stats = await asyncio.to_thread(compute_stats, context, module)
    await save_memory_module(args.output, module)

    print(
        f"🗜️ {args.input} -> {args.output}: {stats.original_bytes} -> {stats.compressed_bytes} octets "
        f"(ratio {stats.compression_ratio}, {stats.original_tokens} tokens)"
    )


async def _cmd_expand(args, settings: StreamlinerSettings) -> None:
    module = await load_memory_module(args.input)
    streamliner = _make_streamliner(settings, args.codec)
    context = await streamliner.expand(module)

    if args.output:
        await store_module(args.output, context.encode("utf-8"))
        print(f"📤 {args.input} -> {args.output} ({len(context)} caractères)")
    else:
        sys.stdout.write(context)


async def _cmd_inspect(args, settings: StreamlinerSettings) -> None:
    module = await load_memory_module(args.input)
    print(json.dumps({
        "path": args.input,
        "metadata": module.metadata,
        "compressed_bytes": module.compressed_size,
    }, ensure_ascii=False, indent=2))


_COMMANDS = {
    "compress": _cmd_compress,
    "expand": _cmd_expand,
    "inspect": _cmd_inspect,
}


def main(argv=None) -> int:
    """Fonction principale. Retourne le code de sortie."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    try:
        settings = _load_settings(args.config)
        asyncio.run(_COMMANDS[args.command](args, settings))
    except StreamlinerError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
