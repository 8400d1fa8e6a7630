__version__ = "v1.0.0"

TITLE = "Package Creator"

PAK_FOLDER_NAME = "zips"
PAK_EXTENSION = ".zip"

VERSION_FILE_NAME = "version.txt"
FILELIST_FILE_NAME = "filelist.txt"

# UTF-16 LE with a BOM, CRLF line endings
TEXT_ENCODING = "utf-16-le"
BOM = "\ufeff"
NEWLINE = "\r\n"

CHUNK_SIZE = 8192
