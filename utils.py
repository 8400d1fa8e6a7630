import os, re
from rich import print
from rich.progress import Progress, TextColumn, TimeRemainingColumn, TimeElapsedColumn
from datetime import datetime
from version import TITLE, __version__

INT32_MIN = -2**31
INT32_MAX = 2**31 - 1

def current_time() -> str:
    return f"[bold bright_black]{datetime.now():%Y-%m-%d %H:%M:%S}[/]"

def debug_print(debug: bool, message: str):
    if debug:
        print(f"{current_time()} [bold magenta][DEBUG][/] {message}")

def title_string(debug: bool = False) -> str:
    return f'\n   [bold][bright_blue]{TITLE}[/] [white]{__version__}[/]{" [magenta][Debug Mode Enabled][/]" if debug else ""}[/]\n'

def time_taken(t: int | float) -> str:
    d, r = divmod(round(t), 86400)
    h, r = divmod(r, 3600)
    m, s = divmod(r, 60)
    return f"{d:02}:{h:02}:{m:02}:{s:02}" if d else f"{h:02}:{m:02}:{s:02}"

def pack_progress(disable: bool = False) -> Progress:
    return Progress(
        TextColumn(" [cyan]Packing {task.completed:,}/{task.total:,} files...[/]"),
        *Progress.get_default_columns()[1:3],
        TextColumn("[cyan]ETA:"),
        TimeRemainingColumn(),
        TextColumn("[yellow]Elapsed:"),
        TimeElapsedColumn(),
        disable=disable,
    )

def is_valid_version(text: str) -> bool:
    # same acceptance as a 32-bit signed integer parse
    if not text or not re.fullmatch(r"\s*[+-]?[0-9]+\s*", text):
        return False
    return INT32_MIN <= int(text) <= INT32_MAX

def select_folder(message: str) -> str:
    print(message)
    path = input()
    while not path or not os.path.isdir(path):
        print("[red]Invalid folder path. Please try again.[/]")
        path = input()
    return path

def select_version() -> str:
    print("Enter version number:")
    version = input()
    while not is_valid_version(version):
        print("[red]Invalid version. Please enter a valid number:[/]")
        version = input()
    return version
