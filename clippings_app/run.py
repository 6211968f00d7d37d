import sys
import logging
import argparse
from pathlib import Path

from clippings_app.core.pipeline import run_pipeline, decode_export, file_read_error
from clippings_app.utils.config import get_server_host, get_server_port, get_log_level

def start_server():
    import uvicorn
    from clippings_app.server import app

    host, port = get_server_host(), get_server_port()
    print(f"Starting server at http://{host}:{port}")
    uvicorn.run(app, host=host, port=port)

def convert(file_path: Path) -> int:
    """Prints the markdown for one export. Returns the exit status."""
    try:
        outcome = run_pipeline(decode_export(file_path.read_bytes()))
    except (OSError, UnicodeDecodeError) as e:
        logging.getLogger(__name__).warning("Could not read %s: %s", file_path, e)
        outcome = file_read_error()

    print(outcome.status, file=sys.stderr)
    if not outcome.ok:
        return 1
    sys.stdout.write(outcome.markdown)
    return 0

def main(argv=None):
    parser = argparse.ArgumentParser(description="Kindle clippings to Markdown")
    subparsers = parser.add_subparsers(dest="command")

    convert_parser = subparsers.add_parser("convert", help="Print the Markdown for a clippings file")
    convert_parser.add_argument("file")

    subparsers.add_parser("serve", help="Start Server")

    args = parser.parse_args(argv)
    logging.basicConfig(level=get_log_level())

    if args.command == "convert":
        return convert(Path(args.file))
    elif args.command == "serve":
        start_server()
        return 0
    else:
        parser.print_help()
        return 1

if __name__ == "__main__":
    sys.exit(main())
