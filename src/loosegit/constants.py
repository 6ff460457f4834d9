"""Constants for loosegit."""

# Repository marker directory
GIT_DIR = ".git"

# Files inside GIT_DIR
HEAD_FILE = "HEAD"
INDEX_FILE = "index"
OBJECTS_DIR = "objects"
CONFIG_FILE = "loosegit.yaml"

# Ignore file at the repository root
GITIGNORE_FILE = ".gitignore"

# Symbolic ref prefixes
SYMREF_PREFIX = "ref: "
HEADS_PREFIX = "refs/heads/"

# Object addressing
HASH_HEX_LENGTH = 40
HASH_BYTE_LENGTH = 20
REGULAR_FILE_MODE = "100644"

# Index (version 2 layout)
INDEX_HEADER_SIZE = 12
INDEX_ENTRY_HASH_OFFSET = 40
INDEX_ENTRY_PATH_OFFSET = 62
INDEX_ENTRY_ALIGNMENT = 8

# Report text
CLEAN_MESSAGE = "nothing to commit, working tree clean"
STAGED_HEADER = "Changes to be committed:"
UNSTAGED_HEADER = "Changes not staged for commit:"
UNTRACKED_HEADER = "Untracked files:"

# Exit code used by git for fatal errors
FATAL_EXIT_CODE = 128

# Version
LOOSEGIT_VERSION = "0.1.0"
