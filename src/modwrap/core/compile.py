import logging
import shutil
from collections.abc import Iterable, Sequence
from pathlib import Path

from modwrap.config import STDOUT, CompileOptions
from modwrap.core.conventions import normalize_convention
from modwrap.core.emitter import emit
from modwrap.core.scanner import scan
from modwrap.models import CompileReport

logger = logging.getLogger(__name__)

DEFAULT_SUFFIXES: tuple[str, ...] = (".js",)


def is_source_file(path: Path, suffixes: Sequence[str] = DEFAULT_SUFFIXES) -> bool:
    return path.suffix.lower() in suffixes


def compile_source(text: str, convention: str) -> str:
    """Compile ``text`` into ``convention``.

    Text without a default export is returned unchanged.
    """
    resolved = normalize_convention(convention)
    result = scan(text)
    if result.export is None:
        return text
    return emit(text, result, resolved)


def _read_source(path: Path) -> str:
    # Decoded from bytes so "\r\n" terminators and undecodable bytes survive untouched.
    try:
        return path.read_bytes().decode("utf-8", errors="surrogateescape")
    except FileNotFoundError:
        raise FileNotFoundError(f"File not found: {path}") from None


def _write_output(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(text.encode("utf-8", errors="surrogateescape"))


def compile_file(src: str | Path, dest: str | Path | None, convention: str) -> str:
    """Compile one file and write the full result to ``dest`` if given."""
    source = _read_source(Path(src))
    result = compile_source(source, convention)
    if dest is not None:
        _write_output(Path(dest), result)
        logger.info("Compiled %s -> %s", src, dest)
    return result


def compile_tree(
    input_dir: str | Path,
    output_dir: str | Path,
    convention: str,
    suffixes: Sequence[str] = DEFAULT_SUFFIXES,
) -> CompileReport:
    """Mirror ``input_dir`` into ``output_dir``, compiling source files and copying the rest."""
    input_root = Path(input_dir)
    output_root = Path(output_dir)
    resolved = normalize_convention(convention)
    if not input_root.is_dir():
        raise FileNotFoundError(f"Directory not found: {input_root}")

    report = CompileReport()
    skip = output_root.resolve()

    def _traverse(directory: Path) -> None:
        target_dir = output_root / directory.relative_to(input_root)
        target_dir.mkdir(parents=True, exist_ok=True)
        for entry in sorted(directory.iterdir()):
            target = target_dir / entry.name
            if entry.is_dir():
                if entry.resolve() == skip:
                    continue
                _traverse(entry)
            elif is_source_file(entry, suffixes):
                source = _read_source(entry)
                result = compile_source(source, resolved)
                _write_output(target, result)
                if result == source:
                    report.passed_through += 1
                    logger.debug("No default export in %s, copied unchanged", entry)
                else:
                    report.compiled += 1
                    logger.info("Compiled %s -> %s", entry, target)
            else:
                shutil.copy2(entry, target)
                report.copied += 1
                logger.debug("Copied %s -> %s", entry, target)

    _traverse(input_root)
    return report


def recompile_changed(
    paths: Iterable[Path],
    input_dir: str | Path,
    output_dir: str | Path,
    convention: str,
    suffixes: Sequence[str] = DEFAULT_SUFFIXES,
) -> list[Path]:
    """Recompile changed source files under ``input_dir`` into their mirrored output paths.

    Returns the written destinations. Deleted files, files outside the input
    tree and files inside the output tree are skipped.
    """
    input_root = Path(input_dir).resolve()
    output_root = Path(output_dir)
    skip = output_root.resolve()
    written: list[Path] = []
    for path in sorted(paths):
        source_path = path.resolve()
        if not source_path.is_file() or not is_source_file(source_path, suffixes):
            continue
        if not source_path.is_relative_to(input_root) or source_path.is_relative_to(skip):
            continue
        dest = output_root / source_path.relative_to(input_root)
        compile_file(source_path, dest, convention)
        written.append(dest)
    return written


def resolve_output_path(
    input_path: Path | None,
    output: str,
    suffixes: Sequence[str] = DEFAULT_SUFFIXES,
) -> Path | None:
    """Return the single-file destination, or None when writing to stdout.

    An output without a recognized source suffix is treated as a directory,
    created if missing, and receives a file named after the input.
    """
    if not output or output == STDOUT:
        return None
    output_path = Path(output)
    if is_source_file(output_path, suffixes):
        return output_path
    if input_path is None:
        raise ValueError("An output file name is required when compiling inline code into a directory.")
    output_path.mkdir(parents=True, exist_ok=True)
    return output_path / input_path.name


def run_compile(
    options: CompileOptions,
    suffixes: Sequence[str] = DEFAULT_SUFFIXES,
) -> str | CompileReport:
    """Compile a directory tree, a single file or an inline code string.

    Returns a CompileReport in directory mode, otherwise the compiled text.
    """
    if options.code is None and options.input is None:
        raise ValueError("Either an input path or inline code must be provided.")

    input_path = Path(options.input) if options.input else None
    if options.code is None:
        assert input_path is not None
        if not input_path.exists():
            raise FileNotFoundError(f"File not found: {input_path}")
        if input_path.is_dir():
            if options.output == STDOUT:
                raise ValueError("An output directory is required when compiling a directory.")
            return compile_tree(input_path, options.output, options.type, suffixes)

    dest = resolve_output_path(input_path, options.output, suffixes)
    if options.code is not None:
        result = compile_source(options.code, options.type)
        if dest is not None:
            _write_output(dest, result)
            logger.info("Compiled inline code -> %s", dest)
        return result

    assert input_path is not None
    return compile_file(input_path, dest, options.type)
