"""IDO Tools - compile and decompile .ido containers."""
from __future__ import annotations

import os
import tempfile
import warnings
from pathlib import Path
from typing import Callable

import click

from ido_core.classify import PayloadKind
from ido_core.container import BinaryAsset, decode, encode
from ido_core.errors import IdoError, IdoWarning, IOFailure, MalformedDocument
from ido_core.header import read_header
from ido_shopdb.records import looks_like_shop_db, read_shop_db, write_shop_db


def _read_input(path: Path) -> bytes:
    try:
        return path.read_bytes()
    except OSError as e:
        raise IOFailure(f"{path}: {e.strerror or e}") from e


def _write_output(path: Path, write: Callable[[Path], None]) -> None:
    """Run ``write`` against a sibling temp file, then move it onto ``path``.

    On failure only the temp file is removed; an existing ``path`` is untouched.
    """
    try:
        fd, tmp_name = tempfile.mkstemp(prefix=f".{path.stem}.", suffix=path.suffix, dir=path.parent)
    except OSError as e:
        raise IOFailure(f"{path}: {e.strerror or e}") from e
    os.close(fd)
    tmp = Path(tmp_name)

    try:
        # mkstemp creates 0600; give the output the mode a plain open() would
        umask = os.umask(0)
        os.umask(umask)
        os.chmod(tmp, 0o666 & ~umask)
        write(tmp)
        os.replace(tmp, path)
    except Exception as e:
        try:
            tmp.unlink(missing_ok=True)
        except OSError as cleanup:
            raise IOFailure(f"{tmp}: partial output left behind ({cleanup.strerror or cleanup})") from e
        if isinstance(e, OSError):
            raise IOFailure(f"{path}: {e.strerror or e}") from e
        raise


def decompile_file(path: Path, output: Path) -> Path:
    """Decompile a container (or shop database) and return the path written."""
    data = _read_input(path)
    header = read_header(data)

    if looks_like_shop_db(header):
        click.echo("Detected Type: Shop Database (Binary Structs)")
        if not output.suffix:
            output = output.with_suffix(".csv")
        click.echo(f"Parsing Shop Database: {path} -> {output}")
        try:
            items = read_shop_db(path)
        except OSError as e:
            raise IOFailure(f"{path}: {e.strerror or e}") from e
        click.echo(f"Found {len(items)} items.")
        _write_output(output, lambda p: write_shop_db(items, p))
        click.echo(f"PASS: Dumped to {output}")
        return output

    artifact = decode(data)

    if isinstance(artifact, BinaryAsset):
        click.echo(f"Detected Type: {artifact.kind.label}")
        if not output.suffix:
            output = output.with_suffix(f".{artifact.extension}")
        _write_output(output, lambda p: p.write_bytes(artifact.data))
        click.echo(f"Saved as {output}")
        return output

    click.echo(f"Detected Type: {PayloadKind.TEXT.label}")
    document = artifact.render().encode("utf-8")
    _write_output(output, lambda p: p.write_bytes(document))
    click.echo(f"PASS: Header ({len(artifact.header)} bytes) embedded in {output}")
    return output


def compile_file(path: Path, output: Path) -> Path:
    """Compile an edited text document back into a container."""
    click.echo(f"Reading and encoding document from {path}...")
    try:
        # utf-8-sig: editors on Windows like to prepend a BOM
        text = _read_input(path).decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise MalformedDocument(f"{path}: {e.reason} at byte {e.start}") from e

    container = encode(text)

    click.echo(f"Writing output file {output}...")
    _write_output(output, lambda p: p.write_bytes(container))
    click.echo(f"PASS: Compiled {len(container)} bytes to {output}")
    return output


def _echo_warnings(caught: list[warnings.WarningMessage]) -> None:
    for w in caught:
        if issubclass(w.category, IdoWarning):
            click.echo(f"Warning: {w.message}", err=True)
        else:
            warnings.showwarning(w.message, w.category, w.filename, w.lineno)


@click.command()
@click.option("-d", "--decompile", is_flag=True, help="Decompile .ido file")
@click.option("-c", "--compile", "compile_", is_flag=True, help="Compile .xml file to .ido")
@click.option(
    "-f",
    "--file",
    "file_",
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Input file",
)
@click.option(
    "-o",
    "--output",
    required=True,
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output file path",
)
@click.version_option(package_name="ido-tools")
def main(decompile: bool, compile_: bool, file_: Path, output: Path) -> None:
    """Compile and decompile .ido files (legacy Korean text, zlib payloads)."""
    if decompile == compile_:
        raise click.UsageError("Exactly one of --decompile or --compile is required.")

    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always", IdoWarning)
        try:
            if compile_:
                compile_file(file_, output)
            else:
                decompile_file(file_, output)
        except IdoError as e:
            _echo_warnings(caught)
            # Fail closed with a single-line reason, no stack trace.
            click.echo(f"FATAL: {e}", err=True)
            raise SystemExit(1)
    _echo_warnings(caught)


if __name__ == "__main__":
    main()
