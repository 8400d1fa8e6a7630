import argparse, sys, time, traceback
from rich import print
from rich.markup import escape
from utils import title_string, select_folder, select_version, time_taken, debug_print
from packager import generate_files, validate_inputs, describe
from version import __version__, PAK_FOLDER_NAME, PAK_EXTENSION

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_IO_ERROR = 3
EXIT_INTERRUPTED = 130

def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="package-creator",
        description="Create a versioned update package: version.txt, filelist.txt and one zip per source file.",
    )
    ap.add_argument("-s", "--source", help="source folder to package (asked for when omitted)")
    ap.add_argument("-o", "--output", help="existing, empty output folder (asked for when omitted)")
    ap.add_argument("-v", "--version", dest="label", help="integer version label (asked for when omitted)")
    ap.add_argument("--sort", action="store_true", help="order filelist.txt by relative path")
    ap.add_argument("--no-progress", action="store_true", help="hide the progress bar")
    ap.add_argument("--debug", action="store_true", help="print debug information")
    ap.add_argument("--about", action="version", version=f"%(prog)s {__version__}")
    return ap

def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    print(title_string(args.debug))

    try:
        source = args.source if args.source is not None else select_folder("Enter the source folder path:")
        output = args.output if args.output is not None else select_folder("Enter the output folder path:")
        label = args.label if args.label is not None else select_version()
    except (KeyboardInterrupt, EOFError):
        print("\n  [bright_red]Exiting program...[/]")
        return EXIT_INTERRUPTED

    try:
        failed = validate_inputs(source, output, label)
    except OSError as e:
        print(f"[bold red]Could not read folder: {escape(str(e))}[/]")
        return EXIT_INVALID
    if failed:
        invalid, value = failed
        debug_print(args.debug, f"Validation failed: {invalid.value}")
        print(f"[bold red]{escape(describe(invalid, value))}[/]")
        return EXIT_INVALID

    print("[bright_yellow]Generating package files...[/]")
    start = time.monotonic()
    try:
        records = generate_files(source, output, label, PAK_FOLDER_NAME, PAK_EXTENSION,
                                 sort=args.sort, debug=args.debug, show_progress=not args.no_progress)
    except OSError as e:
        print(f"[bold red]Packaging failed: {escape(str(e))}[/]")
        return EXIT_IO_ERROR
    except KeyboardInterrupt:
        print("\n  [bright_red]Interrupted, the output folder may be incomplete.[/]")
        return EXIT_INTERRUPTED
    except Exception as e:
        print(f"[red][bold]An unexpected error occurred: {escape(str(e))}[/]\nDetailed error:[/]")
        traceback.print_exc()
        return EXIT_IO_ERROR
    end = time.monotonic()

    print(
        f"[green]✅ Packaged {len(records):,} files.[/]\n"
        f"[blue]🕒 Time Taken: {time_taken(end - start)}[/]"
    )
    print("[bold green]Operation has completed![/]")
    return EXIT_OK

if __name__ == "__main__":
    sys.exit(main())
