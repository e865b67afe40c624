"""CLI constants and help text."""

GREEN = "\033[32m"
RESET = "\033[0m"

HELP_TEXT = """Chunk Uploader - Help
\t -f, --file        File to upload
\t -c, --chunk       Chunk size to use for upload (Default: 5000000 or configured value)
\t -u, --url         URL to upload to (Default: configured value)
\t -r, --file-range  Byte range of the file to upload e.g. 0-1000 for first 1000 bytes (Default: Input file's byte range [0-filesize])
\t -m, --method      HTTP Method to use (Default: PUT)
\t -fb, --file-bytes Print the file size before uploading
\t -p, --progress    Show upload progress
\t --debug           Enable debug logging
\t -h, --help        Show help (This command)
\t -v, --version     Show version"""
