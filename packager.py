import errno, hashlib, os, zipfile
from enum import Enum
from typing import NamedTuple
from rich import print
from rich.markup import escape
from utils import debug_print, pack_progress, is_valid_version
from version import (PAK_FOLDER_NAME, PAK_EXTENSION, VERSION_FILE_NAME, FILELIST_FILE_NAME,
                     TEXT_ENCODING, BOM, NEWLINE, CHUNK_SIZE)

class FileRecord(NamedTuple):
    path: str
    relative_path: str
    digest: str

class Invalid(Enum):
    SOURCE_NOT_FOUND = "source_not_found"
    SOURCE_EMPTY = "source_empty"
    OUTPUT_NOT_FOUND = "output_not_found"
    OUTPUT_NOT_EMPTY = "output_not_empty"
    VERSION_NOT_INTEGER = "version_not_integer"

def describe(invalid: Invalid, value: str) -> str:
    if invalid in (Invalid.SOURCE_NOT_FOUND, Invalid.OUTPUT_NOT_FOUND):
        return f"Folder '{value}' not found."
    if invalid == Invalid.SOURCE_EMPTY:
        return f"Folder '{value}' is empty."
    if invalid == Invalid.OUTPUT_NOT_EMPTY:
        return f"Output folder '{value}' is not empty."
    return f"Invalid version '{value}'. It must be a whole number."

def _has_entries(path: str) -> bool:
    with os.scandir(path) as it:
        return any(True for _ in it)

def validate_directory(path: str, should_not_be_empty: bool) -> Invalid | None:
    """Shallow check of a source (must have entries) or output (must have none) folder."""
    if not path or not os.path.isdir(path):
        return Invalid.SOURCE_NOT_FOUND if should_not_be_empty else Invalid.OUTPUT_NOT_FOUND
    has_entries = _has_entries(path)
    if should_not_be_empty and not has_entries:
        return Invalid.SOURCE_EMPTY
    if not should_not_be_empty and has_entries:
        return Invalid.OUTPUT_NOT_EMPTY
    return None

def validate_inputs(source: str, output: str, version: str) -> tuple[Invalid, str] | None:
    """Returns the first failed precondition and the offending value, or None."""
    if not is_valid_version(version):
        return Invalid.VERSION_NOT_INTEGER, version
    invalid = validate_directory(source, True)
    if invalid:
        return invalid, source
    invalid = validate_directory(output, False)
    if invalid:
        return invalid, output
    return None

def get_files_recursive(initial_dir: str, debug: bool = False) -> list[str]:
    result = []
    dirs = [initial_dir]

    while dirs:
        current = dirs.pop()
        try:
            with os.scandir(current) as it:
                entries = sorted(it, key=lambda e: e.name)
            files = [e.path for e in entries if e.is_file()]
            subdirs = [e.path for e in entries if e.is_dir(follow_symlinks=False)]
        except OSError as e:
            print(f"[red]Error accessing directory {escape(current)}: {escape(e.strerror or str(e))}[/]")
            continue
        debug_print(debug, f"Found {len(files)} files and {len(subdirs)} folders in {escape(current)}")
        result.extend(files)
        dirs.extend(subdirs)

    return result

def get_file_hash(path: str) -> str:
    h = hashlib.sha256()
    with open(path, "rb") as f:
        for chunk in iter(lambda: f.read(CHUNK_SIZE), b""):
            h.update(chunk)
    return h.hexdigest()

def get_relative_path(base_path: str, full_path: str) -> str:
    prefix = base_path if base_path.endswith(os.sep) else base_path + os.sep
    return full_path[len(prefix):]

def build_file_records(source: str, files: list[str], sort: bool = False, debug: bool = False) -> list[FileRecord]:
    records = []
    for file in files:
        record = FileRecord(file, get_relative_path(source, file), get_file_hash(file))
        try:
            record.relative_path.encode(TEXT_ENCODING)
        except UnicodeEncodeError:
            raise OSError(errno.EILSEQ, "File name cannot be stored in the file list", file) from None
        debug_print(debug, f"{record.digest} {escape(record.relative_path)}")
        records.append(record)
    if sort:
        records.sort(key=lambda r: r.relative_path)
    return records

def write_version_file(output: str, version: str) -> str:
    path = os.path.join(output, VERSION_FILE_NAME)
    with open(path, "w", encoding=TEXT_ENCODING, newline="") as f:
        f.write(BOM + version)
    return path

def write_filelist(output: str, records: list[FileRecord]) -> str:
    path = os.path.join(output, FILELIST_FILE_NAME)
    with open(path, "w", encoding=TEXT_ENCODING, newline="") as f:
        f.write(BOM)
        for record in records:
            f.write(f"{record.digest}\t{record.relative_path}{NEWLINE}")
    return path

def create_zip(file: str, relative_path: str, output: str,
               pak_folder: str = PAK_FOLDER_NAME, pak_extension: str = PAK_EXTENSION) -> str:
    zip_path = os.path.join(output, pak_folder, relative_path) + pak_extension
    os.makedirs(os.path.dirname(zip_path), exist_ok=True)
    with zipfile.ZipFile(zip_path, "w", zipfile.ZIP_DEFLATED, strict_timestamps=False) as z:
        z.write(file, relative_path)
    return zip_path

def _trim(path: str) -> str:
    drive, rest = os.path.splitdrive(path)
    trimmed = rest.rstrip(os.sep + (os.altsep or ""))
    # a bare root keeps its separator, "C:" alone means the current folder on C
    return drive + (trimmed or rest[:1])

def generate_files(source: str, output: str, version: str,
                   pak_folder: str = PAK_FOLDER_NAME, pak_extension: str = PAK_EXTENSION,
                   sort: bool = False, debug: bool = False, show_progress: bool = False) -> list[FileRecord]:
    source = _trim(source)
    output = _trim(output)

    files = get_files_recursive(source, debug)
    debug_print(debug, f"Hashing {len(files)} files")
    # hash everything before writing so an unreadable file leaves no manifest behind
    records = build_file_records(source, files, sort, debug)

    write_version_file(output, version)
    debug_print(debug, f"Wrote {VERSION_FILE_NAME} ({escape(version)})")
    write_filelist(output, records)
    debug_print(debug, f"Wrote {FILELIST_FILE_NAME} ({len(records)} entries)")

    with pack_progress(disable=not show_progress) as prog:
        task = prog.add_task("", total=len(records))
        for record in records:
            zip_path = create_zip(record.path, record.relative_path, output, pak_folder, pak_extension)
            debug_print(debug, f"Created {escape(zip_path)}")
            prog.update(task, advance=1)

    return records
